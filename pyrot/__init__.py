"""
This package contains rotation matrices for the plane and for space.

rotation2: SO(2), 4 parameters, one angle, no singularities
rotation3: SO(3), 9 parameters, no singularities, axis undefined at angle 0 and pi
unit_complex: SO(2), 2 parameters, used to align 2D vectors
"""
from .rotation2 import Rotation2
from .rotation3 import Rotation3
from .unit_complex import UnitComplex
from .util import DEFAULT_EPSILON

__all__ = ['Rotation2', 'Rotation3', 'UnitComplex', 'DEFAULT_EPSILON']
