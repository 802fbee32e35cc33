"""Integer and floating point two-component vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from blockworld.vec3 import _trunc_div, _trunc_mod


def _int_pair(other: object) -> Optional[tuple[int, int]]:
    if isinstance(other, IVec2):
        return other.x, other.y
    if isinstance(other, int):
        return other, other
    return None


def _float_pair(other: object) -> Optional[tuple[float, float]]:
    if isinstance(other, (Vec2, IVec2)):
        return other.x, other.y
    if isinstance(other, (int, float)):
        return other, other
    return None


@dataclass(frozen=True)
class IVec2:
    """An immutable vector of two integers."""

    x: int = 0
    y: int = 0

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __add__(self, other: Union["IVec2", int]) -> "IVec2":
        o = _int_pair(other)
        if o is None:
            return NotImplemented
        return IVec2(self.x + o[0], self.y + o[1])

    def __sub__(self, other: Union["IVec2", int]) -> "IVec2":
        o = _int_pair(other)
        if o is None:
            return NotImplemented
        return IVec2(self.x - o[0], self.y - o[1])

    def __mul__(self, other: Union["IVec2", int]) -> "IVec2":
        o = _int_pair(other)
        if o is None:
            return NotImplemented
        return IVec2(self.x * o[0], self.y * o[1])

    __rmul__ = __mul__

    def div(self, other: Union["IVec2", int]) -> "IVec2":
        """Component-wise division truncating toward zero."""
        o = _int_pair(other)
        if o is None:
            raise TypeError(f"cannot divide IVec2 by {type(other).__name__}")
        return IVec2(_trunc_div(self.x, o[0]), _trunc_div(self.y, o[1]))

    def mod(self, other: Union["IVec2", int]) -> "IVec2":
        """Component-wise remainder with the sign of the dividend."""
        o = _int_pair(other)
        if o is None:
            raise TypeError(f"cannot take IVec2 modulo {type(other).__name__}")
        return IVec2(_trunc_mod(self.x, o[0]), _trunc_mod(self.y, o[1]))

    def dot(self, other: "IVec2") -> int:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "IVec2") -> int:
        """Z component of the cross product of the two vectors."""
        return self.x * other.y - self.y * other.x

    def to_float(self) -> "Vec2":
        return Vec2(float(self.x), float(self.y))


@dataclass(frozen=True)
class Vec2:
    """An immutable vector of two floats."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Union["Vec2", float]) -> "Vec2":
        o = _float_pair(other)
        if o is None:
            return NotImplemented
        return Vec2(self.x + o[0], self.y + o[1])

    def __sub__(self, other: Union["Vec2", float]) -> "Vec2":
        o = _float_pair(other)
        if o is None:
            return NotImplemented
        return Vec2(self.x - o[0], self.y - o[1])

    def __mul__(self, other: Union["Vec2", float]) -> "Vec2":
        o = _float_pair(other)
        if o is None:
            return NotImplemented
        return Vec2(self.x * o[0], self.y * o[1])

    __rmul__ = __mul__

    def norm(self) -> float:
        return math.hypot(self.x, self.y)