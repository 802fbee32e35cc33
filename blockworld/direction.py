"""The six axis-aligned directions of a block."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Union

from blockworld.vec3 import IVec3, Vec3


class Direction(IntEnum):
    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3
    UP = 4
    DOWN = 5

    def ivec(self) -> IVec3:
        """Unit integer vector pointing in this direction."""
        return _IVECS[self.value]

    def vec(self) -> Vec3:
        """Unit float vector pointing in this direction."""
        return _IVECS[self.value].to_float()

    @classmethod
    def from_ivec(cls, v: Union[IVec3, Iterable[int]]) -> "Direction":
        """Direction whose unit vector equals ``v``."""
        key = v if isinstance(v, IVec3) else IVec3(*v)
        try:
            return cls(_IVECS.index(key))
        except ValueError:
            raise ValueError(f"{key} is not a unit direction vector") from None


_IVECS = (
    IVec3(0, 0, -1),
    IVec3(0, 0, 1),
    IVec3(1, 0, 0),
    IVec3(-1, 0, 0),
    IVec3(0, 1, 0),
    IVec3(0, -1, 0),
)