"""Packed per-voxel chunk data: block ids, light channels and metadata."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

import numpy as np

from blockworld.vec3 import IVec3

CHUNK_SIZE_X = 32
CHUNK_SIZE_Y = 32
CHUNK_SIZE_Z = 32
CHUNK_SIZE_MAX = 32
CHUNK_SIZE = IVec3(CHUNK_SIZE_X, CHUNK_SIZE_Y, CHUNK_SIZE_Z)
CHUNK_VOLUME = CHUNK_SIZE_X * CHUNK_SIZE_Y * CHUNK_SIZE_Z

LIGHT_MAX = 15

_U64 = (1 << 64) - 1


class Field(Enum):
    """A bit field inside a 64-bit voxel word, as (mask, offset)."""

    BLOCK = (0x000000000000FFFF, 0)
    TORCHLIGHT = (0x00000000FFFF0000, 16)
    SUNLIGHT = (0x0000000F00000000, 32)
    LIGHT = (0x0000000FFFFF0000, 16)
    METADATA = (0xFFFFFF7000000000, 36)
    DATA = (0xFFFFFFFFFFFFFFFF, 0)

    def __init__(self, mask: int, offset: int) -> None:
        self.mask = mask
        self.offset = offset

    def extract(self, value: int) -> int:
        """This field's value inside the word ``value``."""
        return (value & self.mask) >> self.offset

    def insert(self, value: int, field_value: int) -> int:
        """The word ``value`` with this field replaced by ``field_value``."""
        shifted = ((field_value & _U64) << self.offset) & self.mask
        return ((value & ~self.mask) | shifted) & _U64


def in_bounds(pos: IVec3) -> bool:
    """True if ``pos`` lies inside a chunk."""
    return all(0 <= p < s for p, s in zip(pos, CHUNK_SIZE))


def on_bounds(pos: IVec3) -> bool:
    """True if ``pos`` lies on a chunk face, bordering another chunk."""
    return any(p == 0 or p == s - 1 for p, s in zip(pos, CHUNK_SIZE))


def pos_to_index(pos: IVec3) -> int:
    return pos.x * CHUNK_SIZE.x * CHUNK_SIZE.z + pos.z * CHUNK_SIZE.z + pos.y


def chunk_positions() -> Iterator[IVec3]:
    """Every position in a chunk, x outermost and y innermost."""
    for x in range(CHUNK_SIZE.x):
        for z in range(CHUNK_SIZE.z):
            for y in range(CHUNK_SIZE.y):
                yield IVec3(x, y, z)


def torchlight_of(r: int, g: int, b: int, i: int) -> int:
    """Pack red, green, blue and intensity nibbles into a torchlight value."""
    return (
        ((r & 0xFFFF) << 12)
        | ((g & 0xFFFF) << 8)
        | ((b & 0xFFFF) << 4)
        | (i & 0xFFFF)
    )


def torchlight_channels(light: int) -> tuple[int, int, int, int]:
    """Red, green, blue and intensity nibbles of a torchlight value."""
    return (
        (light & 0xF000) >> 12,
        (light & 0x0F00) >> 8,
        (light & 0x00F0) >> 4,
        light & 0x000F,
    )


def light_of(sun: int, torch: int) -> int:
    """Combine sunlight and torchlight into one light value."""
    return ((sun & 0xFFFFFFFF) << 16) | (torch & 0xFFFFFFFF)


class ChunkVoxels:
    """The packed data words of every voxel in one chunk."""

    def __init__(self) -> None:
        self._data = np.zeros(CHUNK_VOLUME, dtype=np.uint64)

    @staticmethod
    def _index(pos: IVec3) -> int:
        if not in_bounds(pos):
            raise IndexError(f"{pos} is outside the chunk")
        return pos_to_index(pos)

    def get(self, pos: IVec3) -> int:
        """The full data word at ``pos``."""
        return int(self._data[self._index(pos)])

    def set(self, pos: IVec3, value: int) -> int:
        """Store the data word at ``pos`` and return the previous one."""
        if not 0 <= value <= _U64:
            raise ValueError("voxel data must fit in 64 unsigned bits")
        i = self._index(pos)
        prev = int(self._data[i])
        self._data[i] = np.uint64(value)
        return prev

    def get_field(self, pos: IVec3, field: Field) -> int:
        return field.extract(self.get(pos))

    def set_field(self, pos: IVec3, field: Field, value: int) -> int:
        """Replace one field at ``pos`` and return the previous data word."""
        return self.set(pos, field.insert(self.get(pos), value))