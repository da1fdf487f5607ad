"""
A module for 3D rotation matrices, also called direction cosine matrices.

This is the standard representation of SO(3). There are 9 parameters and no
singularities. The axis is undefined at angles 0 and pi, so axis queries
return None there.
"""
import logging

import casadi as ca
import numpy as np

from .base import RotationBase
from .util import DEFAULT_EPSILON, EULER_EPSILON, clamp_cos, column, dot, try_normalize

logger = logging.getLogger(__name__)


class Rotation3(RotationBase):

    group_shape = (3, 3)

    __slots__ = ()

    @classmethod
    def new(cls, axisangle) -> 'Rotation3':
        """
        Builds a rotation from a vector whose direction is the rotation axis
        and whose magnitude is the angle in radians.
        :param axisangle: The scaled axis.
        :return: The rotation.
        """
        v = column(axisangle, 3)
        angle = float(ca.norm_2(v))
        if angle == 0:
            return cls.identity()
        return cls.from_axis_angle(v / angle, angle)

    @classmethod
    def from_scaled_axis(cls, v) -> 'Rotation3':
        return cls.new(v)

    @classmethod
    def from_axis_angle(cls, axis, angle: float) -> 'Rotation3':
        """
        Rodrigues' rotation formula.
        :param axis: The unit rotation axis.
        :param angle: The angle in radians.
        :return: The rotation, exactly the identity for a zero angle.
        """
        if angle == 0:
            return cls.identity()
        u = column(axis, 3)
        ux = float(u[0])
        uy = float(u[1])
        uz = float(u[2])
        sqx = ux * ux
        sqy = uy * uy
        sqz = uz * uz
        sin = np.sin(angle)
        cos = np.cos(angle)
        one_m_cos = 1 - cos
        return cls.from_matrix_unchecked([
            [sqx + (1 - sqx) * cos,
             ux * uy * one_m_cos - uz * sin,
             ux * uz * one_m_cos + uy * sin],
            [ux * uy * one_m_cos + uz * sin,
             sqy + (1 - sqy) * cos,
             uy * uz * one_m_cos - ux * sin],
            [ux * uz * one_m_cos - uy * sin,
             uy * uz * one_m_cos + ux * sin,
             sqz + (1 - sqz) * cos]])

    @classmethod
    def from_euler_angles(cls, roll: float, pitch: float, yaw: float) -> 'Rotation3':
        """
        Convert euler angles to a rotation. The primitive rotations are
        applied in order: 1 roll (x), 2 pitch (y), 3 yaw (z).
        :return: The rotation.
        """
        sr = np.sin(roll)
        cr = np.cos(roll)
        sp = np.sin(pitch)
        cp = np.cos(pitch)
        sy = np.sin(yaw)
        cy = np.cos(yaw)
        return cls.from_matrix_unchecked([
            [cy * cp, cy * sp * sr - sy * cr, cy * sp * cr + sy * sr],
            [sy * cp, sy * sp * sr + cy * cr, sy * sp * cr - cy * sr],
            [-sp, cp * sr, cp * cr]])

    @classmethod
    def new_observer_frame(cls, dir, up) -> 'Rotation3':
        """
        The local frame of an observer standing at the origin and looking
        toward dir. It maps the view direction dir to the positive z axis.

        up must not be collinear to dir, this is not checked.
        :param dir: The look direction, the z axis of the frame.
        :param up: The vertical direction.
        :return: The rotation with columns x, y, z of the frame.
        """
        zaxis = column(dir, 3)
        zaxis = zaxis / ca.norm_2(zaxis)
        xaxis = ca.cross(column(up, 3), zaxis)
        xaxis = xaxis / ca.norm_2(xaxis)
        yaxis = ca.cross(zaxis, xaxis)
        yaxis = yaxis / ca.norm_2(yaxis)
        return cls.from_matrix_unchecked(ca.horzcat(xaxis, yaxis, zaxis))

    @classmethod
    def look_at_rh(cls, dir, up) -> 'Rotation3':
        """
        A right handed look-at view rotation, without translation.
        """
        return cls.new_observer_frame(-column(dir, 3), up).inverse()

    @classmethod
    def look_at_lh(cls, dir, up) -> 'Rotation3':
        """
        A left handed look-at view rotation, without translation.
        """
        return cls.new_observer_frame(dir, up).inverse()

    @classmethod
    def rotation_between(cls, a, b, eps: float = None):
        """
        The rotation R such that R*a is collinear to b and points in the
        same direction, None when a and b are antiparallel.
        """
        return cls.scaled_rotation_between(a, b, 1.0, eps=eps)

    @classmethod
    def scaled_rotation_between(cls, a, b, n: float, eps: float = None):
        """
        The smallest rotation needed to make a and b collinear and point
        toward the same direction, with its angle multiplied by n.
        :return: The rotation, the identity if a or b has zero length, None
            if a and b are antiparallel since the axis is undefined.
        """
        if eps is None:
            eps = DEFAULT_EPSILON
        na = try_normalize(column(a, 3), 0.0)
        nb = try_normalize(column(b, 3), 0.0)
        if na is None or nb is None:
            return cls.identity()
        axis = try_normalize(ca.cross(na, nb), eps)
        c = dot(na, nb)
        if axis is not None:
            return cls.from_axis_angle(axis, np.arccos(clamp_cos(c)) * n)
        if c < 0:
            logger.debug('antiparallel vectors, no unique rotation axis')
            return None
        return cls.identity()

    @classmethod
    def rand(cls, rng) -> 'Rotation3':
        """
        A rotation with a scaled axis drawn uniformly in [0, 1)^3.
        :param rng: A numpy random generator.
        """
        return cls.new(rng.random(3))

    def angle(self) -> float:
        """
        The rotation angle in [0, pi].
        """
        R = self.matrix
        return float(np.arccos(clamp_cos((float(ca.trace(R)) - 1) / 2)))

    def axis(self, eps: float = None):
        """
        The rotation axis, from the skew symmetric part of the matrix.
        :return: The unit axis, None if the angle is 0 or pi.
        """
        if eps is None:
            eps = DEFAULT_EPSILON
        R = self.matrix
        v = ca.DM([
            float(R[2, 1] - R[1, 2]),
            float(R[0, 2] - R[2, 0]),
            float(R[1, 0] - R[0, 1])])
        return try_normalize(v, eps)

    def scaled_axis(self, eps: float = None) -> ca.DM:
        """
        The rotation axis multiplied by the angle. This is the zero vector
        whenever axis() is None, for angle pi as well as for angle 0.
        """
        axis = self.axis(eps)
        if axis is None:
            return ca.DM.zeros(3, 1)
        return axis * self.angle()

    def powf(self, n: float, eps: float = None) -> 'Rotation3':
        """
        The rotation with the same axis as self and the angle multiplied by n.

        Without an axis, a rotation by pi is mapped to -I whatever its true
        axis, anything else to the identity.
        """
        axis = self.axis(eps)
        if axis is not None:
            return self.from_axis_angle(axis, self.angle() * n)
        if float(self.matrix[0, 0]) < 0:
            logger.debug('powf of a rotation by pi, returning -I')
            return self.from_matrix_unchecked(-ca.DM.eye(3))
        return self.identity()

    def euler_angles(self, eps: float = None):
        """
        Converts to euler angles, the inverse of from_euler_angles.

        At gimbal lock, cos(pitch) below eps, roll is set to 0.
        :return: (roll, pitch, yaw)
        """
        if eps is None:
            eps = EULER_EPSILON
        R = self.matrix
        cp = float(np.hypot(float(R[0, 0]), float(R[1, 0])))
        pitch = float(np.arctan2(-float(R[2, 0]), cp))
        if cp <= eps:
            logger.debug('gimbal lock, roll set to 0')
            # only yaw - roll (pitch = pi/2) or yaw + roll (pitch = -pi/2) is observable
            yaw = np.arctan2(-float(R[0, 1]), float(R[1, 1]))
            return 0.0, pitch, float(yaw)
        roll = np.arctan2(float(R[2, 1]), float(R[2, 2]))
        yaw = np.arctan2(float(R[1, 0]), float(R[0, 0]))
        return float(roll), pitch, float(yaw)
