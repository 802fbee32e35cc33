"""Building chunk meshes face by face, with depth sorting of transparent faces."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from blockworld.bitmap import Bitmap
from blockworld.chunkdata import Field
from blockworld.direction import Direction
from blockworld.vec2 import Vec2
from blockworld.vec3 import Vec3

_FACE_INDICES = (1, 0, 3, 1, 3, 2)
_UNIQUE_INDICES = (1, 0, 5, 2)
_CUBE_INDICES = (
    1, 0, 3, 1, 3, 2,  # north (-z)
    4, 5, 6, 4, 6, 7,  # south (+z)
    5, 1, 2, 5, 2, 6,  # east (+x)
    0, 4, 7, 0, 7, 3,  # west (-x)
    2, 3, 7, 2, 7, 6,  # top (+y)
    5, 4, 0, 5, 0, 1,  # bottom (-y)
)

_FACE_CENTERS = (
    Vec3(0.5, 0.5, 0.0),
    Vec3(0.5, 0.5, 1.0),
    Vec3(1.0, 0.5, 0.5),
    Vec3(0.0, 0.5, 0.5),
    Vec3(0.5, 1.0, 0.5),
    Vec3(0.5, 0.0, 0.5),
)

_SPRITE_INDICES = (
    3, 5, 0, 3, 6, 5,
    2, 1, 4, 2, 4, 7,
    3, 0, 5, 3, 5, 6,
    2, 4, 1, 2, 7, 4,
)

_CUBE_VERTICES = (
    Vec3(0, 0, 0),
    Vec3(1, 0, 0),
    Vec3(1, 1, 0),
    Vec3(0, 1, 0),
    Vec3(0, 0, 1),
    Vec3(1, 0, 1),
    Vec3(1, 1, 1),
    Vec3(0, 1, 1),
)

_CUBE_UVS = ((1, 0), (0, 0), (0, 1), (1, 1))


def make_light_data(direction: int, light: int) -> int:
    """Pack a light value and a face direction into one vertex attribute."""
    return (light | (int(direction) << 20)) & 0xFFFFFFFF


@dataclass
class Face:
    """A transparent face: where its indices start and where it sits."""

    indices_base: int
    position: Vec3
    distance: float = 0.0


@dataclass
class _IndexRange:
    offset: int = 0
    count: int = 0


def _uv(corner: int, uv_min: Vec2, uv_max: Vec2) -> tuple[float, float]:
    u, v = _CUBE_UVS[corner]
    return (uv_max.x if u else uv_min.x, uv_max.y if v else uv_min.y)


@dataclass
class MeshBuilder:
    """Accumulates vertices, indices and transparent faces of one chunk mesh.

    Each vertex is a tuple ``(x, y, z, u, v, light_data)``.
    """

    vertices: list[tuple[float, float, float, float, float, int]] = field(
        default_factory=list
    )
    indices: list[int] = field(default_factory=list)
    faces: list[Face] = field(default_factory=list)
    vertex_count: int = 0
    base: _IndexRange = field(default_factory=_IndexRange)
    transparent: _IndexRange = field(default_factory=_IndexRange)

    def __init__(self) -> None:
        self.vertices = []
        self.indices = []
        self.faces = []
        self.vertex_count = 0
        self.base = _IndexRange()
        self.transparent = _IndexRange()

    def reset(self) -> None:
        """Empty every buffer before meshing again."""
        self.vertices.clear()
        self.indices.clear()
        self.faces.clear()
        self.vertex_count = 0

    def sprite(self, position: Vec3, uv_min: Vec2, uv_max: Vec2, data: int) -> None:
        """Emit a crossed-quad sprite occupying the block at ``position``."""
        start = len(self.indices)
        self.faces.extend(Face(start + i * 6, position) for i in range(4))

        light = make_light_data(Direction.UP, Field.LIGHT.extract(data))
        for i, corner in enumerate(_CUBE_VERTICES):
            p = position + corner
            self.vertices.append((p.x, p.y, p.z, *_uv(i % 4, uv_min, uv_max), light))

        self.indices.extend(self.vertex_count + i for i in _SPRITE_INDICES)
        self.vertex_count += 8

    def face(
        self,
        position: Vec3,
        direction: Direction,
        uv_min: Vec2,
        uv_max: Vec2,
        data: int,
        data_neighbor: int,
        transparent: bool,
        offset: Optional[Vec3] = None,
        size: Optional[Vec3] = None,
    ) -> None:
        """Emit one face of the block at ``position`` facing ``direction``."""
        direction = Direction(direction)
        offset = offset if offset is not None else Vec3(0.0, 0.0, 0.0)
        size = size if size is not None else Vec3(1.0, 1.0, 1.0)

        if transparent:
            self.faces.append(
                Face(len(self.indices), _FACE_CENTERS[direction] + position)
            )

        # opaque faces are lit by the neighbour they face, transparent by themselves
        light = make_light_data(
            direction, Field.LIGHT.extract(data if transparent else data_neighbor)
        )
        for i, unique in enumerate(_UNIQUE_INDICES):
            corner = _CUBE_VERTICES[_CUBE_INDICES[direction * 6 + unique]]
            p = position + offset + corner * size
            self.vertices.append((p.x, p.y, p.z, *_uv(i, uv_min, uv_max), light))

        self.indices.extend(self.vertex_count + i for i in _FACE_INDICES)
        self.vertex_count += 4

    def sort(self, center: Vec3, full: bool = True) -> None:
        """Order transparent faces back to front as seen from ``center``.

        A full sort also moves every opaque face's indices after the
        transparent ones and records both ranges; a partial sort assumes a
        full sort already ran and reorders only the transparent range.
        """
        original = list(self.indices)

        for f in self.faces:
            f.distance = (center - f.position).norm2()
        self.faces.sort(key=lambda f: -f.distance)

        group_count = len(original) // 6
        moved = Bitmap(group_count) if full else None

        for i, f in enumerate(self.faces):
            target = i * 6
            if f.indices_base != target:
                self.indices[target:target + 6] = original[
                    f.indices_base:f.indices_base + 6
                ]
            if moved is not None:
                moved.set(f.indices_base // 6)
            f.indices_base = target

        if moved is None:
            return

        self.transparent = _IndexRange(0, len(self.faces) * 6)
        self.base = _IndexRange(self.transparent.count, 0)
        for group in range(group_count):
            if not moved.get(group):
                dst = self.base.offset + self.base.count
                self.indices[dst:dst + 6] = original[group * 6:group * 6 + 6]
                self.base.count += 6