"""Hypothesis strategies for rotations."""
import hypothesis.strategies
import numpy as np

from ..rotation2 import Rotation2
from ..rotation3 import Rotation3


def real_numbers(
    min_value: float = -1e3,
    max_value: float = 1e3,
    exclude_min: bool = False,
    exclude_max: bool = False,
) -> hypothesis.strategies.SearchStrategy[float]:
    """Strategy for finite real numbers."""
    return hypothesis.strategies.floats(
        min_value=min_value,
        max_value=max_value,
        allow_nan=False,
        allow_infinity=False,
        exclude_min=exclude_min,
        exclude_max=exclude_max,
    )


def vectors(
    n: int,
    min_value: float = -1e3,
    max_value: float = 1e3,
) -> hypothesis.strategies.SearchStrategy[np.ndarray]:
    """Strategy for vectors of n finite real numbers."""
    return hypothesis.strategies.lists(
        real_numbers(min_value, max_value), min_size=n, max_size=n,
    ).map(np.array)


def unit_vectors(n: int = 3) -> hypothesis.strategies.SearchStrategy[np.ndarray]:
    """Strategy for unit vectors, normalized from vectors in [-1, 1]^n."""
    return (
        vectors(n, -1.0, 1.0)
        .filter(lambda v: np.linalg.norm(v) > 0.1)
        .map(lambda v: v / np.linalg.norm(v))
    )


def rotation2s(
    min_value: float = -1e3,
    max_value: float = 1e3,
) -> hypothesis.strategies.SearchStrategy[Rotation2]:
    """Strategy for 2D rotations, an arbitrary angle passed to Rotation2.new."""
    return real_numbers(min_value, max_value).map(Rotation2.new)


def rotation3s(
    min_value: float = -1e3,
    max_value: float = 1e3,
) -> hypothesis.strategies.SearchStrategy[Rotation3]:
    """Strategy for 3D rotations, an arbitrary scaled axis passed to Rotation3.new."""
    return vectors(3, min_value, max_value).map(Rotation3.new)
