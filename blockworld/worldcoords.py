"""Conversions between world, chunk and heightmap coordinates."""

from __future__ import annotations

from dataclasses import dataclass, field

from blockworld.chunkdata import CHUNK_SIZE
from blockworld.vec2 import IVec2
from blockworld.vec3 import IVec3, Vec3

CHUNK_SIZE_XZ = IVec2(CHUNK_SIZE.x, CHUNK_SIZE.z)

# lower than every real height, so any known height replaces it
HEIGHTMAP_UNKNOWN = -(1 << 63)

DEFAULT_CHUNKS_SIZE = 16


def pos_to_offset(pos: IVec3) -> IVec3:
    """Offset, in chunks, of the chunk holding block position ``pos``."""
    return IVec3(*(p // s for p, s in zip(pos, CHUNK_SIZE)))


def pos_to_block(pos: Vec3) -> IVec3:
    """Block position holding the point ``pos``."""
    return pos.floor()


def pos_to_chunk_pos(pos: IVec3) -> IVec3:
    """Position of block ``pos`` inside its own chunk."""
    return IVec3(*(p % s for p, s in zip(pos, CHUNK_SIZE)))


def pos_to_heightmap_pos(pos: IVec2) -> IVec2:
    """Position of world column (x, z) inside its chunk's heightmap."""
    return IVec2(pos.x % CHUNK_SIZE_XZ.x, pos.y % CHUNK_SIZE_XZ.y)


def heightmap_index(pos: IVec2) -> int:
    """Index of heightmap position (x, z) in a heightmap's flat storage."""
    if not (0 <= pos.x < CHUNK_SIZE_XZ.x and 0 <= pos.y < CHUNK_SIZE_XZ.y):
        raise IndexError(f"{pos} is outside a heightmap")
    return pos.x * CHUNK_SIZE.x + pos.y


@dataclass(frozen=True)
class ChunkGrid:
    """A cube of ``size`` chunks per side whose lowest corner is ``origin``."""

    origin: IVec3 = field(default_factory=IVec3)
    size: int = DEFAULT_CHUNKS_SIZE

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("chunk grid size must be positive")

    def _relative(self, offset: IVec3) -> IVec3:
        return offset - self.origin

    def _relative_column(self, offset: IVec2) -> IVec2:
        return offset - IVec2(self.origin.x, self.origin.z)

    def in_bounds(self, offset: IVec3) -> bool:
        """True if the chunk offset lies inside the grid."""
        return all(0 <= c < self.size for c in self._relative(offset))

    def index(self, offset: IVec3) -> int:
        """Flat array index of a chunk offset inside the grid."""
        if not self.in_bounds(offset):
            raise IndexError(f"chunk {offset} is outside the grid")
        p = self._relative(offset)
        return (p.x * self.size * self.size) + (p.z * self.size) + p.y

    def offset_at(self, i: int) -> IVec3:
        """Chunk offset stored at flat array index ``i``."""
        s = self.size
        if not 0 <= i < s * s * s:
            raise IndexError(f"chunk index {i} is outside the grid")
        return self.origin + IVec3(i // (s * s), i % s, (i // s) % s)

    def heightmap_in_bounds(self, offset: IVec2) -> bool:
        """True if the chunk column (x, z) lies inside the grid."""
        return all(0 <= c < self.size for c in self._relative_column(offset))

    def heightmap_index(self, offset: IVec2) -> int:
        """Flat array index of the heightmap of chunk column (x, z)."""
        if not self.heightmap_in_bounds(offset):
            raise IndexError(f"chunk column {offset} is outside the grid")
        p = self._relative_column(offset)
        return (p.x * self.size) + p.y

    def heightmap_offset(self, i: int) -> IVec2:
        """Chunk column (x, z) whose heightmap sits at flat index ``i``."""
        if not 0 <= i < self.size * self.size:
            raise IndexError(f"heightmap index {i} is outside the grid")
        return IVec2(self.origin.x + i // self.size, self.origin.z + i % self.size)

    def contains_pos(self, pos: IVec3) -> bool:
        """True if block position ``pos`` falls in a chunk of the grid."""
        return self.in_bounds(pos_to_offset(pos))