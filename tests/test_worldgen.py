import pytest

from blockworld.worldgen import (
    BIOME_DATA,
    BIOME_TABLE,
    Biome,
    Block,
    base_height,
    column_block,
    get_biome,
    smooth_heights,
)


@pytest.mark.parametrize("biome", list(Biome))
def test_every_biome_has_data(biome):
    assert biome in BIOME_DATA
    assert base_height(0.0, 0.0, 0.0, biome) == 0.0
    assert column_block(-100, 0, biome) is Block.STONE


@pytest.mark.parametrize(
    "h, n",
    [(0.0, 0.5), (-0.3, 0.5), (0.5, 0.0), (0.5, -0.1)],
)
def test_ocean(h, n):
    assert get_biome(h, 0.5, 0.5, n, 1.0) is Biome.OCEAN


def test_beach():
    assert get_biome(0.003, 0.5, 0.5, 0.5, 1.0) is Biome.BEACH


def test_mountain():
    assert get_biome(0.5, 0.5, 0.5, 0.1, 0.2) is Biome.MOUNTAIN


def test_not_mountain_when_combined_height_low():
    result = get_biome(0.5, 0.5, 0.5, 0.1, 0.1)
    assert result is Biome.WOODLAND
    assert result is BIOME_TABLE[2][3]


@pytest.mark.parametrize(
    "m, t, expected",
    [
        (0.0, 0.0, BIOME_TABLE[0][0]),
        (1.0, 1.0, BIOME_TABLE[5][5]),
        (0.1, 0.5, BIOME_TABLE[0][3]),
        (0.55, 0.3, BIOME_TABLE[3][2]),
    ],
)
def test_table_lookup(m, t, expected):
    assert get_biome(0.5, m, t, 0.05, 0.0) is expected


def test_coldest_column_is_ice():
    for m in (0.0, 0.25, 0.45, 0.65, 0.9):
        assert get_biome(0.5, m, 0.0, 0.05, 0.0) is Biome.ICE


def test_base_height_zero_noise():
    assert base_height(0.0, 0.0, 0.0, Biome.OCEAN) == 0.0


def test_base_height_symmetric_in_height():
    up = base_height(0.4, 0.0, 0.0, Biome.BEACH)
    down = base_height(-0.4, 0.0, 0.0, Biome.BEACH)
    assert up > 0
    assert down == pytest.approx(-up)


def test_base_height_grows_with_mountain_noise():
    assert base_height(0.1, 0.5, 0.0, Biome.FOREST) > base_height(0.1, 0.1, 0.0, Biome.FOREST)


def test_smooth_constant_grid_stays_constant():
    grid = [[10.0] * 4 for _ in range(4)]
    assert smooth_heights(grid) == [[10] * 4 for _ in range(4)]


def test_smooth_preserves_shape_and_bounds():
    grid = [[float(x * 5 + z) for z in range(5)] for x in range(5)]
    out = smooth_heights(grid)
    assert len(out) == 5 and all(len(row) == 5 for row in out)
    assert all(0 <= v <= 24 for row in out for v in row)


def test_smooth_ignores_center_value():
    grid = [[0.0] * 3 for _ in range(3)]
    grid[1][1] = 100.0
    assert smooth_heights(grid)[1][1] == 0


def test_smooth_rejects_ragged_grid():
    with pytest.raises(ValueError):
        smooth_heights([[1.0, 2.0], [3.0]])


def test_smooth_empty():
    assert smooth_heights([]) == []


def test_column_surface_and_layers():
    h = 10
    assert column_block(h, h, Biome.FOREST) is Block.GRASS
    assert column_block(h - 3, h, Biome.FOREST) is Block.DIRT
    assert column_block(h - 4, h, Biome.FOREST) is Block.STONE
    assert column_block(h + 1, h, Biome.FOREST) is None


def test_column_water_above_low_surface():
    assert column_block(0, -5, Biome.OCEAN) is Block.WATER
    assert column_block(-5, -5, Biome.OCEAN) is Block.SAND
    assert column_block(1, -5, Biome.OCEAN) is None


def test_column_snow_above_snow_line():
    assert column_block(60, 60, Biome.DESERT) is Block.SNOW
    assert column_block(59, 60, Biome.DESERT) is Block.SAND