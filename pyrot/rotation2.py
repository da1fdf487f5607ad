"""
A module for 2D rotation matrices.

This is the standard representation of SO(2). There are 4 parameters,
a single degree of freedom (the angle), and no singularities.
"""
import casadi as ca
import numpy as np

from .base import RotationBase
from .unit_complex import UnitComplex
from .util import column


class Rotation2(RotationBase):

    group_shape = (2, 2)

    __slots__ = ()

    @classmethod
    def new(cls, angle: float) -> 'Rotation2':
        """
        Builds a 2D rotation matrix from an angle.
        :param angle: The angle in radians.
        :return: The rotation.
        """
        sia = np.sin(angle)
        coa = np.cos(angle)
        return cls.from_matrix_unchecked([
            [coa, -sia],
            [sia, coa]])

    @classmethod
    def from_scaled_axis(cls, v) -> 'Rotation2':
        """
        Builds a 2D rotation from an angle wrapped in a 1 element vector,
        the same as new(v[0]).
        """
        return cls.new(float(column(v, 1)[0]))

    @classmethod
    def from_unit_complex(cls, c: UnitComplex) -> 'Rotation2':
        assert isinstance(c, UnitComplex)
        return cls.from_matrix_unchecked(c.to_rotation_matrix())

    @classmethod
    def rotation_between(cls, a, b) -> 'Rotation2':
        """
        The rotation R such that R*a is collinear to b and points in the
        same direction.
        """
        return cls.from_unit_complex(UnitComplex.rotation_between(a, b))

    @classmethod
    def scaled_rotation_between(cls, a, b, s: float) -> 'Rotation2':
        """
        The smallest rotation needed to make a and b collinear and point
        toward the same direction, with its angle multiplied by s.
        """
        return cls.from_unit_complex(UnitComplex.scaled_rotation_between(a, b, s))

    @classmethod
    def rand(cls, rng) -> 'Rotation2':
        """
        A rotation by an angle drawn uniformly in [0, 1).
        :param rng: A numpy random generator.
        """
        return cls.new(rng.random())

    def angle(self) -> float:
        """
        The rotation angle in (-pi, pi].
        """
        R = self.matrix
        return float(np.arctan2(float(R[1, 0]), float(R[0, 0])))

    def to_unit_complex(self) -> UnitComplex:
        return UnitComplex.from_rotation_matrix(self.matrix)

    def powf(self, n: float) -> 'Rotation2':
        """
        The rotation with the angle of self multiplied by n.
        """
        return self.new(self.angle() * n)

    def scaled_axis(self) -> ca.DM:
        """
        The rotation angle as a 1 element vector.
        """
        return ca.DM([self.angle()])
