"""Quaternion rotations and a camera producing a view matrix."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

_AXES = {"X": 0, "Y": 1, "Z": 2}


def _parse_order(order: str) -> tuple[int, int, int]:
    order = order.upper()
    if len(order) != 3 or any(c not in _AXES for c in order):
        raise ValueError(f"Invalid Euler order {order!r}")
    i, j, k = (_AXES[c] for c in order)
    if i == j or j == k or (i != k and len({i, j, k}) != 3):
        raise ValueError(f"Invalid Euler order {order!r}")
    return i, j, k


@dataclass(frozen=True)
class Quat:
    """Rotation quaternion ``(x, y, z, w)``; the default is the identity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def _from_axis(cls, axis: int, angle: float) -> Quat:
        v = [0.0, 0.0, 0.0]
        v[axis] = math.sin(angle / 2.0)
        return cls(v[0], v[1], v[2], math.cos(angle / 2.0))

    @classmethod
    def from_euler(cls, order: str, a: float, b: float, c: float) -> Quat:
        """Build ``R(order[0], a) * R(order[1], b) * R(order[2], c)``.

        ``order`` is three axis letters, e.g. ``"XYZ"`` or ``"XYX"``.
        """
        i, j, k = _parse_order(order)
        return cls._from_axis(i, a) * cls._from_axis(j, b) * cls._from_axis(k, c)

    def to_euler(self, order: str) -> tuple[float, float, float]:
        """Return angles ``(a, b, c)`` such that ``from_euler(order, a, b, c)`` is this rotation."""
        i, j, k = _parse_order(order)
        m = self.to_matrix()
        s = 1.0 if j == (i + 1) % 3 else -1.0
        if i == k:
            k = 3 - i - j
            b = math.acos(max(-1.0, min(1.0, m[i, i])))
            a = math.atan2(m[j, i], -s * m[k, i])
            c = math.atan2(m[i, j], s * m[i, k])
        else:
            b = math.asin(max(-1.0, min(1.0, s * m[i, k])))
            a = math.atan2(-s * m[j, k], m[k, k])
            c = math.atan2(-s * m[i, j], m[i, i])
        return a, b, c

    def to_matrix(self) -> np.ndarray:
        """Return the 3x3 rotation matrix."""
        x, y, z, w = self.x, self.y, self.z, self.w
        n = x * x + y * y + z * z + w * w
        s = 2.0 / n if n else 0.0
        return np.array(
            [
                [1 - s * (y * y + z * z), s * (x * y - w * z), s * (x * z + w * y)],
                [s * (x * y + w * z), 1 - s * (x * x + z * z), s * (y * z - w * x)],
                [s * (x * z - w * y), s * (y * z + w * x), 1 - s * (x * x + y * y)],
            ]
        )

    def __mul__(self, other: Quat) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        x1, y1, z1, w1 = self.x, self.y, self.z, self.w
        x2, y2, z2, w2 = other.x, other.y, other.z, other.w
        return Quat(
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
        )


_BASE_ROTATION = Quat.from_euler("ZXY", math.pi / 2, 0.0, math.pi / 2)


class Camera:
    """A position and rotation with a lazily computed 4x4 view matrix."""

    def __init__(self) -> None:
        self._position = np.zeros(3)
        self._rotation = Quat()
        self._matrix: np.ndarray | None = None

    def matrix(self) -> np.ndarray:
        """Return the view matrix (rotation applied after moving the position to the origin)."""
        if self._matrix is None:
            translation = np.eye(4)
            translation[:3, 3] = -self._position
            rotation = np.eye(4)
            rotation[:3, :3] = (_BASE_ROTATION * self._rotation).to_matrix()
            self._matrix = rotation @ translation
        return self._matrix.copy()

    def set_position(self, pos) -> Camera:
        """Move the camera; returns the camera."""
        position = np.array(pos, dtype=float)
        if position.shape != (3,):
            raise ValueError("Position must have three components")
        self._position = position
        self._matrix = None
        return self

    def set_rotation(self, rot: Quat) -> Camera:
        """Set the rotation; returns the camera."""
        self._rotation = rot
        self._matrix = None
        return self

    def set_rotation_euler(self, x: float, y: float, z: float) -> Camera:
        """Set the rotation from XYZ Euler angles; returns the camera."""
        return self.set_rotation(Quat.from_euler("XYZ", x, y, z))

    def rotation(self) -> Quat:
        return self._rotation

    def position(self) -> np.ndarray:
        return self._position.copy()

    def euler(self) -> tuple[float, float, float]:
        """Return the rotation as XYX Euler angles."""
        return self._rotation.to_euler("XYX")