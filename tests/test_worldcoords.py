import itertools

import pytest

from blockworld.chunkdata import CHUNK_SIZE, in_bounds
from blockworld.vec2 import IVec2
from blockworld.vec3 import IVec3, Vec3
from blockworld.worldcoords import (
    ChunkGrid,
    heightmap_index,
    pos_to_block,
    pos_to_chunk_pos,
    pos_to_heightmap_pos,
    pos_to_offset,
)

SAMPLE_POSITIONS = [
    IVec3(x, y, z)
    for x, y, z in itertools.product((-65, -33, -32, -1, 0, 1, 31, 32, 100), repeat=3)
]


@pytest.mark.parametrize("pos", SAMPLE_POSITIONS)
def test_offset_and_chunk_pos_recompose(pos):
    offset = pos_to_offset(pos)
    local = pos_to_chunk_pos(pos)
    assert offset * CHUNK_SIZE + local == pos
    assert in_bounds(local)


def test_negative_position_lies_in_negative_chunk():
    assert pos_to_offset(IVec3(-1, 0, 31)) == IVec3(-1, 0, 0)
    assert pos_to_chunk_pos(IVec3(-1, 32, 5)) == IVec3(31, 0, 5)


@pytest.mark.parametrize("base", [IVec3(-3, 0, 7), IVec3(10, -20, 0), IVec3(0, 0, 0)])
def test_pos_to_block_floors(base):
    point = base.to_float() + Vec3(0.25, 0.5, 0.75)
    assert pos_to_block(point) == base
    assert pos_to_block(base.to_float()) == base


def test_heightmap_pos_and_index():
    indices = set()
    for x in range(-40, 40, 7):
        for z in range(-40, 40, 5):
            p = pos_to_heightmap_pos(IVec2(x, z))
            assert 0 <= p.x < CHUNK_SIZE.x and 0 <= p.y < CHUNK_SIZE.z
            assert (x - p.x) % CHUNK_SIZE.x == 0
            assert (z - p.y) % CHUNK_SIZE.z == 0
    for x in range(CHUNK_SIZE.x):
        for z in range(CHUNK_SIZE.z):
            indices.add(heightmap_index(IVec2(x, z)))
    assert indices == set(range(CHUNK_SIZE.x * CHUNK_SIZE.z))


def test_heightmap_index_rejects_out_of_range():
    with pytest.raises(IndexError):
        heightmap_index(IVec2(CHUNK_SIZE.x, 0))


def test_grid_index_round_trip():
    grid = ChunkGrid(IVec3(-2, 5, 1), 3)
    seen = set()
    for i in range(27):
        offset = grid.offset_at(i)
        assert grid.in_bounds(offset)
        assert grid.index(offset) == i
        seen.add(offset)
    assert len(seen) == 27


def test_grid_bounds():
    grid = ChunkGrid(IVec3(-2, 5, 1), 3)
    assert grid.in_bounds(IVec3(-2, 5, 1))
    assert grid.in_bounds(IVec3(0, 7, 3))
    assert not grid.in_bounds(IVec3(1, 7, 3))
    assert not grid.in_bounds(IVec3(-3, 5, 1))
    with pytest.raises(IndexError):
        grid.index(IVec3(1, 5, 1))
    with pytest.raises(IndexError):
        grid.offset_at(27)
    with pytest.raises(IndexError):
        grid.offset_at(-1)


def test_grid_heightmap_round_trip():
    grid = ChunkGrid(IVec3(4, 0, -3), 4)
    for i in range(16):
        column = grid.heightmap_offset(i)
        assert grid.heightmap_in_bounds(column)
        assert grid.heightmap_index(column) == i
    assert not grid.heightmap_in_bounds(IVec2(8, -3))
    with pytest.raises(IndexError):
        grid.heightmap_index(IVec2(3, -3))
    with pytest.raises(IndexError):
        grid.heightmap_offset(16)


def test_grid_contains_pos():
    grid = ChunkGrid(IVec3(0, 0, 0), 2)
    assert grid.contains_pos(IVec3(0, 0, 0))
    assert grid.contains_pos(CHUNK_SIZE * 2 - 1)
    assert not grid.contains_pos(CHUNK_SIZE * 2)
    assert not grid.contains_pos(IVec3(-1, 0, 0))


def test_grid_default_size_and_invalid_size():
    grid = ChunkGrid()
    assert grid.size == 16
    assert grid.offset_at(16 ** 3 - 1) == IVec3(15, 15, 15)
    with pytest.raises(ValueError):
        ChunkGrid(IVec3(), 0)