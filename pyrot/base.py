import abc
from typing import Tuple

import casadi as ca

from .util import column


class RotationBase(abc.ABC):
    """
    A rotation represented by its orthogonal matrix, with determinant +1.

    The matrix is the only stored state, angles and axes are always
    recomputed from it. Values are immutable, every operation returns
    a new rotation.
    """

    group_shape = None  # type: Tuple[int, int]

    __slots__ = ('_matrix',)

    def __init__(self, matrix):
        """
        Wraps a matrix without checking orthogonality, see from_matrix_unchecked.
        :param matrix: A DM, numpy array or nested list of the group shape.
        """
        matrix = ca.densify(ca.DM(matrix))
        self.check_group_shape(matrix)
        self._matrix = matrix

    @classmethod
    def check_group_shape(cls, a):
        assert a.shape == cls.group_shape

    @classmethod
    def dim(cls) -> int:
        return cls.group_shape[0]

    @classmethod
    def from_matrix_unchecked(cls, matrix):
        """
        Wraps a matrix without checking that it is a rotation. Only meant for
        matrices that are orthogonal by construction.
        :param matrix: A matrix of the group shape.
        :return: The rotation.
        """
        return cls(matrix)

    @classmethod
    def identity(cls):
        return cls.from_matrix_unchecked(ca.DM.eye(cls.dim()))

    @property
    def matrix(self) -> ca.DM:
        return self._matrix

    def inverse(self):
        """
        The inverse of an orthogonal matrix is its transpose.
        """
        return type(self)(self._matrix.T)

    def transform_vector(self, v) -> ca.DM:
        return ca.mtimes(self._matrix, column(v, self.dim()))

    def inverse_transform_vector(self, v) -> ca.DM:
        return ca.mtimes(self._matrix.T, column(v, self.dim()))

    def __mul__(self, other):
        if isinstance(other, RotationBase):
            assert other.group_shape == self.group_shape
            return type(self)(ca.mtimes(self._matrix, other.matrix))
        else:
            return self.transform_vector(other)

    __matmul__ = __mul__

    def rotation_to(self, other):
        """
        The rotation needed to make self and other coincide, such that
        self.rotation_to(other) * self == other.
        """
        return other * self.inverse()

    def angle_to(self, other) -> float:
        """
        The rotation angle needed to make self and other coincide.
        """
        return self.rotation_to(other).angle()

    def __repr__(self):
        return '{:s}({!s})'.format(type(self).__name__, self._matrix)

    @classmethod
    @abc.abstractmethod
    def from_scaled_axis(cls, v):
        ...

    @abc.abstractmethod
    def angle(self) -> float:
        ...

    @abc.abstractmethod
    def scaled_axis(self) -> ca.DM:
        ...

    @abc.abstractmethod
    def powf(self, n: float):
        ...
