"""
A module for unit complex numbers.

This is a representation of SO(2) with 2 parameters (re, im) constrained to
re^2 + im^2 = 1, and no singularities.
"""
import casadi as ca
import numpy as np

from .util import column, dot, try_normalize


class UnitComplex:

    __slots__ = ('re', 'im')

    def __init__(self, re: float, im: float):
        self.re = float(re)
        self.im = float(im)

    def __mul__(self, other: 'UnitComplex') -> 'UnitComplex':
        """
        The complex product, so that Dcm(a*b) = Dcm(a)*Dcm(b).
        :param other: The second unit complex number.
        :return: The product.
        """
        assert isinstance(other, UnitComplex)
        return UnitComplex(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re)

    def conjugate(self) -> 'UnitComplex':
        return UnitComplex(self.re, -self.im)

    def angle(self) -> float:
        return float(np.arctan2(self.im, self.re))

    def to_rotation_matrix(self) -> ca.DM:
        return ca.DM([
            [self.re, -self.im],
            [self.im, self.re]])

    @classmethod
    def identity(cls) -> 'UnitComplex':
        return cls(1.0, 0.0)

    @classmethod
    def from_angle(cls, angle: float) -> 'UnitComplex':
        return cls(np.cos(angle), np.sin(angle))

    @classmethod
    def from_rotation_matrix(cls, R: ca.DM) -> 'UnitComplex':
        """
        Takes the first column of a 2x2 rotation matrix.
        """
        assert R.shape == (2, 2)
        return cls(float(R[0, 0]), float(R[1, 0]))

    @classmethod
    def rotation_between(cls, a, b) -> 'UnitComplex':
        """
        The smallest rotation that makes a and b collinear and pointing
        toward the same direction.
        """
        return cls.scaled_rotation_between(a, b, 1.0)

    @classmethod
    def scaled_rotation_between(cls, a, b, s: float) -> 'UnitComplex':
        """
        The smallest rotation that makes a and b collinear and pointing
        toward the same direction, raised to the power s.

        If a or b has zero length, the identity is returned.
        """
        na = try_normalize(column(a, 2), 0.0)
        nb = try_normalize(column(b, 2), 0.0)
        if na is None or nb is None:
            return cls.identity()
        # perp product, sine of the angle from na to nb
        sang = float(na[0] * nb[1] - na[1] * nb[0])
        cang = dot(na, nb)
        return cls.from_angle(np.arctan2(sang, cang) * s)

    def __repr__(self):
        return 'UnitComplex({:g}, {:g})'.format(self.re, self.im)
