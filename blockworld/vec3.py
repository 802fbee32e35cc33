"""Integer and floating point three-component vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


@dataclass(frozen=True)
class IVec3:
    """An immutable vector of three integers."""

    x: int = 0
    y: int = 0
    z: int = 0

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y
        yield self.z

    def _pair(self, other: Union["IVec3", int]) -> tuple[int, int, int]:
        if isinstance(other, IVec3):
            return other.x, other.y, other.z
        if isinstance(other, int):
            return other, other, other
        return NotImplemented  # type: ignore[return-value]

    def __add__(self, other: Union["IVec3", int]) -> "IVec3":
        o = self._pair(other)
        if o is NotImplemented:
            return NotImplemented
        return IVec3(self.x + o[0], self.y + o[1], self.z + o[2])

    def __sub__(self, other: Union["IVec3", int]) -> "IVec3":
        o = self._pair(other)
        if o is NotImplemented:
            return NotImplemented
        return IVec3(self.x - o[0], self.y - o[1], self.z - o[2])

    def __mul__(self, other: Union["IVec3", int]) -> "IVec3":
        o = self._pair(other)
        if o is NotImplemented:
            return NotImplemented
        return IVec3(self.x * o[0], self.y * o[1], self.z * o[2])

    __rmul__ = __mul__

    def __neg__(self) -> "IVec3":
        return IVec3(-self.x, -self.y, -self.z)

    def div(self, other: Union["IVec3", int]) -> "IVec3":
        """Component-wise division truncating toward zero."""
        o = self._pair(other)
        if o is NotImplemented:
            raise TypeError(f"cannot divide IVec3 by {type(other).__name__}")
        return IVec3(*(_trunc_div(a, b) for a, b in zip(self, o)))

    def mod(self, other: Union["IVec3", int]) -> "IVec3":
        """Component-wise remainder with the sign of the dividend."""
        o = self._pair(other)
        if o is NotImplemented:
            raise TypeError(f"cannot take IVec3 modulo {type(other).__name__}")
        return IVec3(*(_trunc_mod(a, b) for a, b in zip(self, o)))

    def dot(self, other: "IVec3") -> int:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def norm2(self) -> int:
        return self.dot(self)

    def norm(self) -> int:
        """Euclidean length, truncated to an integer."""
        return int(math.sqrt(self.norm2()))

    def to_float(self) -> "Vec3":
        return Vec3(float(self.x), float(self.y), float(self.z))


@dataclass(frozen=True)
class Vec3:
    """An immutable vector of three floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def _pair(self, other: Union["Vec3", float]) -> tuple[float, float, float]:
        if isinstance(other, (Vec3, IVec3)):
            return other.x, other.y, other.z
        if isinstance(other, (int, float)):
            return other, other, other
        return NotImplemented  # type: ignore[return-value]

    def __add__(self, other: Union["Vec3", float]) -> "Vec3":
        o = self._pair(other)
        if o is NotImplemented:
            return NotImplemented
        return Vec3(self.x + o[0], self.y + o[1], self.z + o[2])

    def __sub__(self, other: Union["Vec3", float]) -> "Vec3":
        o = self._pair(other)
        if o is NotImplemented:
            return NotImplemented
        return Vec3(self.x - o[0], self.y - o[1], self.z - o[2])

    def __mul__(self, other: Union["Vec3", float]) -> "Vec3":
        o = self._pair(other)
        if o is NotImplemented:
            return NotImplemented
        return Vec3(self.x * o[0], self.y * o[1], self.z * o[2])

    __rmul__ = __mul__

    def __truediv__(self, other: Union["Vec3", float]) -> "Vec3":
        o = self._pair(other)
        if o is NotImplemented:
            return NotImplemented
        return Vec3(self.x / o[0], self.y / o[1], self.z / o[2])

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def norm2(self) -> float:
        return self.dot(self)

    def norm(self) -> float:
        return math.sqrt(self.norm2())

    def normalized(self) -> "Vec3":
        """Unit vector in the same direction; the zero vector stays zero."""
        n = self.norm()
        if n == 0.0:
            return Vec3()
        return Vec3(self.x / n, self.y / n, self.z / n)

    def floor(self) -> IVec3:
        return IVec3(math.floor(self.x), math.floor(self.y), math.floor(self.z))