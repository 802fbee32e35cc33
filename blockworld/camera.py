"""Perspective and orthographic cameras with their matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from blockworld.vec2 import Vec2
from blockworld.vec3 import Vec3

_HALF_PI = math.pi / 2
_TAU = 2 * math.pi


class CameraType(Enum):
    ORTHO = 0
    PERSPECTIVE = 1


def _identity() -> np.ndarray:
    return np.identity(4)


@dataclass
class ViewProj:
    """A view matrix and a projection matrix, rows by columns."""

    view: np.ndarray = field(default_factory=_identity)
    proj: np.ndarray = field(default_factory=_identity)


def look_at(eye: Vec3, center: Vec3, up: Vec3) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` toward ``center``."""
    f = (center - eye).normalized()
    s = f.cross(up).normalized()
    u = s.cross(f)
    return np.array(
        [
            [s.x, s.y, s.z, -s.dot(eye)],
            [u.x, u.y, u.z, -u.dot(eye)],
            [-f.x, -f.y, -f.z, f.dot(eye)],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def perspective(fov: float, aspect: float, znear: float, zfar: float) -> np.ndarray:
    """Right-handed perspective projection with depth mapped to [-1, 1]."""
    f = 1.0 / math.tan(fov * 0.5)
    fn = 1.0 / (znear - zfar)
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = (znear + zfar) * fn
    m[3, 2] = -1.0
    m[2, 3] = 2.0 * znear * zfar * fn
    return m


def ortho(
    left: float, right: float, bottom: float, top: float, znear: float, zfar: float
) -> np.ndarray:
    """Orthographic projection of the given box onto [-1, 1] on each axis."""
    rl = 1.0 / (right - left)
    tb = 1.0 / (top - bottom)
    fn = -1.0 / (zfar - znear)
    m = np.zeros((4, 4))
    m[0, 0] = 2.0 * rl
    m[1, 1] = 2.0 * tb
    m[2, 2] = 2.0 * fn
    m[0, 3] = -(right + left) * rl
    m[1, 3] = -(top + bottom) * tb
    m[2, 3] = (zfar + znear) * fn
    m[3, 3] = 1.0
    return m


class PerspectiveCamera:
    """A camera aimed by pitch and yaw from its position."""

    def __init__(self, fov: float, aspect: float) -> None:
        self.view_proj = ViewProj()
        self.position = Vec3()
        self.direction = Vec3()
        self.up = Vec3()
        self.right = Vec3()
        self.pitch = 0.0
        self.yaw = 0.0
        self.fov = fov
        self.aspect = aspect
        self.znear = 0.01
        self.zfar = 1000.0
        self.update()

    def update(self) -> None:
        """Bound pitch and yaw, then rebuild the basis and matrices."""
        self.pitch = max(-_HALF_PI, min(_HALF_PI, self.pitch))
        self.yaw = (_TAU if self.yaw < 0 else 0.0) + math.fmod(self.yaw, _TAU)

        cp = math.cos(self.pitch)
        self.direction = Vec3(
            cp * math.sin(self.yaw), math.sin(self.pitch), cp * math.cos(self.yaw)
        )
        self.right = Vec3(0.0, 1.0, 0.0).cross(self.direction)
        self.up = self.direction.cross(self.right)

        self.view_proj.view = look_at(
            self.position, self.position + self.direction, self.up
        )
        self.view_proj.proj = perspective(self.fov, self.aspect, self.znear, self.zfar)


class OrthoCamera:
    """A camera projecting the rectangle ``min``..``max``."""

    def __init__(self, min: Vec2, max: Vec2) -> None:
        self.view_proj = ViewProj()
        self.position = Vec2()
        self.min = min
        self.max = max
        self.update()

    def update(self) -> None:
        self.view_proj.view = _identity()
        self.view_proj.proj = ortho(
            self.min.x, self.max.x, self.min.y, self.max.y, -100.0, 100.0
        )