"""Scalar helpers, vector hashing and voxel ray casting."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from blockworld.direction import Direction
from blockworld.vec3 import IVec3, Vec3

_T = TypeVar("_T", int, float)

_U32 = 0xFFFFFFFF
_GOLDEN = 0x9E3779B9


def _wrap_s64(x: int) -> int:
    """Wrap an integer into the signed 64-bit range."""
    return ((x + (1 << 63)) % (1 << 64)) - (1 << 63)


@dataclass(frozen=True)
class Ray:
    """A ray starting at ``origin`` heading along ``direction``."""

    origin: Vec3
    direction: Vec3


def sign(x: _T) -> _T:
    """-1, 0 or 1 with the sign of ``x``, in the type of ``x``."""
    return type(x)((0 < x) - (x < 0))


def clamp(x: _T, lo: _T, hi: _T) -> _T:
    """``x`` bounded to the closed range ``lo``..``hi``."""
    return max(lo, min(hi, x))


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between ``a`` and ``b``."""
    return (a * (1 - t)) + (b * t)


def safe_exp(x: float, e: float) -> float:
    """``|x| ** e`` carrying the sign of ``x``."""
    return sign(float(x)) * abs(abs(x) ** e)


def ivec3_hash(v: IVec3) -> int:
    """Signed 64-bit hash of an integer vector."""
    h = 0
    for c in v:
        term = ((c + _GOLDEN) & _U32) + (h << 6) + (h >> 2)
        h = _wrap_s64(h ^ _wrap_s64(term))
    return h


def _intbound(s: float, ds: float) -> float:
    """Smallest t >= 0 such that s + t * ds is an integer."""
    if ds == 0:
        return math.inf
    num = (math.ceil(s) - s) if ds > 0 else (s - math.floor(s))
    return num / abs(ds)


def ray_block(
    ray: Ray,
    max_distance: float,
    is_hit: Callable[[IVec3], bool],
) -> Optional[tuple[IVec3, Optional[Direction]]]:
    """Walk the grid cells along ``ray`` until ``is_hit`` accepts one.

    Returns the hit cell and the face it was entered through (``None`` when
    the ray starts inside the hit cell), or ``None`` when nothing is hit
    within ``max_distance``.
    """
    d = ray.direction
    length = d.norm()
    if length == 0:
        raise ValueError("ray direction must not be the zero vector")

    p = list(ray.origin.floor())
    step = [int(sign(float(c))) for c in d]
    tmax = [_intbound(s, ds) for s, ds in zip(ray.origin, d)]
    tdelta = [(st / ds) if ds != 0 else math.inf for st, ds in zip(step, d)]
    radius = max_distance / length

    face: Optional[Direction] = None
    while True:
        pos = IVec3(*p)
        if is_hit(pos):
            return pos, face

        if tmax[0] < tmax[1]:
            axis = 0 if tmax[0] < tmax[2] else 2
        else:
            axis = 1 if tmax[1] < tmax[2] else 2

        if tmax[axis] > radius:
            return None

        p[axis] += step[axis]
        tmax[axis] += tdelta[axis]
        back = [0, 0, 0]
        back[axis] = -step[axis]
        face = Direction.from_ivec(back)