from collections import Counter

import pytest

from blockworld.blockmesh import MeshBuilder, make_light_data
from blockworld.chunkdata import Field
from blockworld.direction import Direction
from blockworld.vec2 import Vec2
from blockworld.vec3 import Vec3

UV_MIN = Vec2(0.25, 0.5)
UV_MAX = Vec2(0.5, 0.75)


def _light(value):
    return Field.LIGHT.insert(0, value)


def _groups(indices):
    return Counter(tuple(indices[i:i + 6]) for i in range(0, len(indices), 6))


def test_make_light_data_packs_direction_above_bit_20():
    packed = make_light_data(Direction.UP, 0x1234)
    assert packed & 0xFFFFF == 0x1234
    assert packed >> 20 == int(Direction.UP)


def test_sprite_counts():
    m = MeshBuilder()
    m.sprite(Vec3(1, 2, 3), UV_MIN, UV_MAX, _light(0x7))
    assert len(m.vertices) == 8
    assert len(m.indices) == 24
    assert len(m.faces) == 4
    assert m.vertex_count == 8
    assert [f.indices_base for f in m.faces] == [0, 6, 12, 18]
    assert all(v[5] == make_light_data(Direction.UP, 0x7) for v in m.vertices)


def test_sprite_vertices_cover_unit_cube():
    m = MeshBuilder()
    pos = Vec3(4, 5, 6)
    m.sprite(pos, UV_MIN, UV_MAX, 0)
    corners = {(v[0], v[1], v[2]) for v in m.vertices}
    assert len(corners) == 8
    for x, y, z in corners:
        assert x in (4, 5) and y in (5, 6) and z in (6, 7)


@pytest.mark.parametrize("direction", list(Direction))
def test_face_vertices_lie_on_face_plane(direction):
    m = MeshBuilder()
    m.face(Vec3(0, 0, 0), direction, UV_MIN, UV_MAX, 0, 0, False)
    assert len(m.vertices) == 4
    axis = [i for i, c in enumerate(direction.ivec()) if c != 0][0]
    plane = 1.0 if sum(direction.ivec()) > 0 else 0.0
    assert all(v[axis] == plane for v in m.vertices)
    assert all(v[5] >> 20 == int(direction) for v in m.vertices)


def test_face_uvs_come_from_bounds():
    m = MeshBuilder()
    m.face(Vec3(0, 0, 0), Direction.NORTH, UV_MIN, UV_MAX, 0, 0, False)
    uvs = [(v[3], v[4]) for v in m.vertices]
    assert uvs[0] == (UV_MAX.x, UV_MIN.y)
    assert uvs[1] == (UV_MIN.x, UV_MIN.y)
    assert uvs[2] == (UV_MIN.x, UV_MAX.y)
    assert uvs[3] == (UV_MAX.x, UV_MAX.y)


def test_opaque_face_uses_neighbor_light_and_adds_no_face():
    m = MeshBuilder()
    m.face(Vec3(0, 0, 0), Direction.EAST, UV_MIN, UV_MAX, _light(3), _light(9), False)
    assert m.faces == []
    assert all(v[5] == make_light_data(Direction.EAST, 9) for v in m.vertices)


def test_transparent_face_uses_own_light_and_records_face():
    m = MeshBuilder()
    m.face(Vec3(2, 0, 0), Direction.UP, UV_MIN, UV_MAX, _light(3), _light(9), True)
    assert len(m.faces) == 1
    assert m.faces[0].position == Vec3(2.5, 1.0, 0.5)
    assert all(v[5] == make_light_data(Direction.UP, 3) for v in m.vertices)


def test_face_offset_and_size():
    m = MeshBuilder()
    m.face(
        Vec3(1, 1, 1), Direction.SOUTH, UV_MIN, UV_MAX, 0, 0, False,
        offset=Vec3(0.25, 0.0, 0.0), size=Vec3(0.5, 0.5, 0.5),
    )
    xs = {v[0] for v in m.vertices}
    zs = {v[2] for v in m.vertices}
    assert xs == {1.25, 1.75}
    assert zs == {1.5}


def test_indices_offset_by_vertex_count():
    m = MeshBuilder()
    m.face(Vec3(0, 0, 0), Direction.UP, UV_MIN, UV_MAX, 0, 0, False)
    m.face(Vec3(0, 0, 0), Direction.DOWN, UV_MIN, UV_MAX, 0, 0, False)
    assert m.vertex_count == 8
    assert m.indices[6:] == [i + 4 for i in m.indices[:6]]
    assert max(m.indices) < m.vertex_count


def test_reset_clears_buffers():
    m = MeshBuilder()
    m.sprite(Vec3(0, 0, 0), UV_MIN, UV_MAX, 0)
    m.reset()
    assert (m.vertices, m.indices, m.faces, m.vertex_count) == ([], [], [], 0)


def _mixed_mesh():
    m = MeshBuilder()
    m.face(Vec3(0, 0, 0), Direction.UP, UV_MIN, UV_MAX, 0, 0, False)
    m.face(Vec3(0, 0, 0), Direction.UP, UV_MIN, UV_MAX, 0, 0, True)
    m.face(Vec3(0, 5, 0), Direction.UP, UV_MIN, UV_MAX, 0, 0, False)
    m.face(Vec3(10, 0, 0), Direction.UP, UV_MIN, UV_MAX, 0, 0, True)
    return m


def test_full_sort_puts_transparent_first_farthest_first():
    m = _mixed_mesh()
    before = list(m.indices)
    far_group = tuple(before[18:24])
    near_group = tuple(before[6:12])
    m.sort(Vec3(0, 0, 0), full=True)

    assert _groups(m.indices) == _groups(before)
    assert (m.transparent.offset, m.transparent.count) == (0, 12)
    assert (m.base.offset, m.base.count) == (12, 12)
    assert tuple(m.indices[0:6]) == far_group
    assert tuple(m.indices[6:12]) == near_group
    assert m.indices[12:] == before[0:6] + before[12:18]
    assert [f.indices_base for f in m.faces] == [0, 6]
    assert m.faces[0].distance >= m.faces[1].distance


def test_partial_sort_reorders_only_transparent_range():
    m = _mixed_mesh()
    m.sort(Vec3(0, 0, 0), full=True)
    base_part = list(m.indices[12:])
    ranges = (m.transparent, m.base)
    m.sort(Vec3(20, 0, 0), full=False)
    assert m.indices[12:] == base_part
    assert (m.transparent, m.base) == ranges
    assert m.faces[0].position == Vec3(0.5, 1.0, 0.5)
    assert m.faces[0].distance >= m.faces[1].distance


def test_sort_of_opaque_only_mesh_keeps_indices():
    m = MeshBuilder()
    m.face(Vec3(0, 0, 0), Direction.WEST, UV_MIN, UV_MAX, 0, 0, False)
    before = list(m.indices)
    m.sort(Vec3(3, 3, 3))
    assert m.indices == before
    assert m.transparent.count == 0
    assert m.base.count == len(before)