"""Quaternion arithmetic and conversion to Euler angles."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import overload

_HALF_PI = math.pi * 0.5


@dataclass(frozen=True)
class Axis3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Quaternion:
    """A quaternion ``q0 + q1 i + q2 j + q3 k``."""

    q0: float = 1.0
    q1: float = 0.0
    q2: float = 0.0
    q3: float = 0.0

    def normalized(self) -> Quaternion:
        """Return the unit quaternion; a zero or non-finite norm leaves it unchanged."""
        squared = self.q0**2 + self.q1**2 + self.q2**2 + self.q3**2
        try:
            inv_norm = 1.0 / math.sqrt(squared)
        except (ZeroDivisionError, ValueError):
            inv_norm = 1.0
        if math.isnan(inv_norm) or math.isinf(inv_norm):
            inv_norm = 1.0
        return Quaternion(
            self.q0 * inv_norm,
            self.q1 * inv_norm,
            self.q2 * inv_norm,
            self.q3 * inv_norm,
        )

    def __mul__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        a, b = self, other
        return Quaternion(
            a.q0 * b.q0 - a.q1 * b.q1 - a.q2 * b.q2 - a.q3 * b.q3,
            a.q0 * b.q1 + a.q1 * b.q0 + a.q2 * b.q3 - a.q3 * b.q2,
            a.q0 * b.q2 - a.q1 * b.q3 + a.q2 * b.q0 + a.q3 * b.q1,
            a.q0 * b.q3 + a.q1 * b.q2 - a.q2 * b.q1 + a.q3 * b.q0,
        )

    def conjugate(self) -> Quaternion:
        """Return the conjugate quaternion."""
        return Quaternion(self.q0, -self.q1, -self.q2, -self.q3)

    @overload
    def rotate(self, vector: Axis3) -> Axis3: ...

    @overload
    def rotate(self, vector: Quaternion) -> Quaternion: ...

    def rotate(self, vector):
        """Rotate a vector by this quaternion, computing ``q' * v * q``.

        A :class:`Quaternion` argument is read through its vector part and a
        pure quaternion is returned; an :class:`Axis3` gives an :class:`Axis3`.
        """
        if isinstance(vector, Quaternion):
            vx, vy, vz = vector.q1, vector.q2, vector.q3
        elif isinstance(vector, Axis3):
            vx, vy, vz = vector.x, vector.y, vector.z
        else:
            raise TypeError("vector must be an Axis3 or a Quaternion")

        q0q0, q1q1, q2q2, q3q3 = self.q0**2, self.q1**2, self.q2**2, self.q3**2
        dq0, dq1, dq2 = 2 * self.q0, 2 * self.q1, 2 * self.q2
        dq1q2 = dq1 * self.q2
        dq1q3 = dq1 * self.q3
        dq0q2 = dq0 * self.q2
        dq0q3 = dq0 * self.q3
        dq0q1 = dq0 * self.q1
        dq2q3 = dq2 * self.q3

        x = (q0q0 + q1q1 - q2q2 - q3q3) * vx + (dq1q2 + dq0q3) * vy + (dq1q3 - dq0q2) * vz
        y = (dq1q2 - dq0q3) * vx + (q0q0 + q2q2 - q1q1 - q3q3) * vy + (dq0q1 + dq2q3) * vz
        z = (dq0q2 + dq1q3) * vx + (dq2q3 - dq0q1) * vy + (q0q0 + q3q3 - q1q1 - q2q2) * vz

        if isinstance(vector, Quaternion):
            return Quaternion(0.0, x, y, z)
        return Axis3(x, y, z)


def _asin(value: float) -> float:
    if -1.0 <= value <= 1.0:
        return math.asin(value)
    return math.nan


@dataclass
class EulerConverter:
    """Converts quaternions to Euler angles, holding the last roll and pitch.

    A roll outside ``[-pi/2, pi/2]`` is replaced by the previous roll to
    avoid jumps near gimbal lock.
    """

    _previous: Axis3 = field(default_factory=Axis3, init=False, repr=False)

    def to_euler(self, q: Quaternion) -> Axis3:
        """Return roll (x), pitch (y) and yaw (z) in radians."""
        q0q0, q1q1, q2q2, q3q3 = q.q0**2, q.q1**2, q.q2**2, q.q3**2
        dq0, dq1, dq2 = 2 * q.q0, 2 * q.q1, 2 * q.q2
        dq1q3 = dq1 * q.q3
        dq0q2 = dq0 * q.q2
        dq0q1 = dq0 * q.q1
        dq2q3 = dq2 * q.q3
        dq1q2 = dq1 * q.q2
        dq0q3 = dq0 * q.q3

        roll = math.atan2(dq0q1 + dq2q3, q0q0 + q3q3 - q1q1 - q2q2)
        pitch = _asin(dq0q2 - dq1q3)
        if roll > _HALF_PI or roll < -_HALF_PI:
            roll = self._previous.x
        self._previous = Axis3(roll, pitch, 0.0)
        yaw = math.atan2(dq1q2 + dq0q3, q0q0 + q1q1 - q2q2 - q3q3)
        return Axis3(roll, pitch, yaw)