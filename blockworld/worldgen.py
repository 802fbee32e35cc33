"""Terrain generation rules: biomes, column heights and column blocks."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Sequence

from blockworld.fmath import clamp, sign

WATER_LEVEL = 0

# columns whose surface is above this are topped with snow
SNOW_LINE = 48


class Block(Enum):
    AIR = "air"
    SAND = "sand"
    GRASS = "grass"
    DIRT = "dirt"
    PODZOL = "podzol"
    SNOW = "snow"
    STONE = "stone"
    WATER = "water"


class Decoration(Enum):
    SHRUB = "shrub"
    TREE = "tree"
    PINE = "pine"
    FLOWERS = "flowers"
    GRASS = "grass"


class Biome(IntEnum):
    OCEAN = 0
    RIVER = 1
    BEACH = 2
    DESERT = 3
    SAVANNA = 4
    JUNGLE = 5
    GRASSLAND = 6
    WOODLAND = 7
    FOREST = 8
    RAINFOREST = 9
    TAIGA = 10
    TUNDRA = 11
    ICE = 12
    MOUNTAIN = 13


@dataclass(frozen=True)
class BiomeData:
    """Surface blocks, terrain shaping and decoration chances of a biome."""

    top_block: Block
    bottom_block: Block
    roughness: float = 1.0
    scale: float = 1.0
    exp: float = 1.0
    decorations: tuple[tuple[Decoration, float], ...] = field(default_factory=tuple)


_D = Decoration

BIOME_DATA: dict[Biome, BiomeData] = {
    Biome.OCEAN: BiomeData(Block.SAND, Block.SAND),
    Biome.RIVER: BiomeData(Block.SAND, Block.SAND),
    Biome.BEACH: BiomeData(Block.SAND, Block.SAND, 0.2, 0.8, 1.3),
    Biome.DESERT: BiomeData(
        Block.SAND, Block.SAND, 0.6, 0.6, 1.2, ((_D.SHRUB, 0.005),)
    ),
    Biome.SAVANNA: BiomeData(
        Block.GRASS, Block.DIRT,
        decorations=((_D.TREE, 0.001), (_D.FLOWERS, 0.001), (_D.GRASS, 0.005)),
    ),
    Biome.JUNGLE: BiomeData(
        Block.GRASS, Block.DIRT,
        decorations=((_D.TREE, 0.01), (_D.FLOWERS, 0.001), (_D.GRASS, 0.01)),
    ),
    Biome.GRASSLAND: BiomeData(
        Block.GRASS, Block.DIRT,
        decorations=((_D.TREE, 0.0005), (_D.FLOWERS, 0.003), (_D.GRASS, 0.02)),
    ),
    Biome.WOODLAND: BiomeData(
        Block.GRASS, Block.DIRT,
        decorations=((_D.TREE, 0.007), (_D.FLOWERS, 0.003), (_D.GRASS, 0.008)),
    ),
    Biome.FOREST: BiomeData(
        Block.GRASS, Block.DIRT,
        decorations=((_D.TREE, 0.009), (_D.FLOWERS, 0.003), (_D.GRASS, 0.008)),
    ),
    Biome.RAINFOREST: BiomeData(
        Block.GRASS, Block.DIRT,
        decorations=((_D.TREE, 0.009), (_D.FLOWERS, 0.003), (_D.GRASS, 0.008)),
    ),
    Biome.TAIGA: BiomeData(
        Block.PODZOL, Block.DIRT,
        decorations=((_D.PINE, 0.006), (_D.FLOWERS, 0.001), (_D.GRASS, 0.008)),
    ),
    Biome.TUNDRA: BiomeData(
        Block.SNOW, Block.STONE, decorations=((_D.PINE, 0.0005),)
    ),
    Biome.ICE: BiomeData(Block.SNOW, Block.STONE),
    Biome.MOUNTAIN: BiomeData(Block.SNOW, Block.STONE, 2.0, 1.2, 1.0),
}

_B = Biome

# indexed by [moisture band][heat band]
BIOME_TABLE: tuple[tuple[Biome, ...], ...] = (
    (_B.ICE, _B.TUNDRA, _B.GRASSLAND, _B.DESERT, _B.DESERT, _B.DESERT),
    (_B.ICE, _B.TUNDRA, _B.GRASSLAND, _B.GRASSLAND, _B.DESERT, _B.DESERT),
    (_B.ICE, _B.TUNDRA, _B.WOODLAND, _B.WOODLAND, _B.SAVANNA, _B.SAVANNA),
    (_B.ICE, _B.TUNDRA, _B.TAIGA, _B.WOODLAND, _B.SAVANNA, _B.SAVANNA),
    (_B.ICE, _B.TUNDRA, _B.TAIGA, _B.FOREST, _B.JUNGLE, _B.JUNGLE),
    (_B.ICE, _B.TUNDRA, _B.TAIGA, _B.TAIGA, _B.JUNGLE, _B.JUNGLE),
)

HEAT_MAP = (0.05, 0.18, 0.4, 0.6, 0.8)
MOISTURE_MAP = (0.2, 0.3, 0.5, 0.6, 0.7)


def _band(value: float, limits: Sequence[float]) -> int:
    """Index of the first of the first four limits that ``value`` does not exceed."""
    for i, limit in enumerate(limits[:4]):
        if value <= limit:
            return i
    return 4


def get_biome(h: float, m: float, t: float, n: float, i: float) -> Biome:
    """Biome for height ``h``, moisture ``m``, temperature ``t``,
    mountain noise ``n`` and combined height ``i``."""
    if h <= 0.0 or n <= 0.0:
        return Biome.OCEAN
    if h <= 0.005:
        return Biome.BEACH
    if n >= 0.1 and i >= 0.2:
        return Biome.MOUNTAIN
    return BIOME_TABLE[_band(m, MOISTURE_MAP)][_band(t, HEAT_MAP)]


def base_height(h: float, n: float, r: float, biome: Biome) -> float:
    """Unsmoothed column height from height, mountain and roughness noise."""
    data = BIOME_DATA[Biome(biome)]
    h = sign(float(h)) * abs(abs(h) ** data.exp)
    return ((h * 32.0) + (n * 256.0)) * data.scale + (data.roughness * r * 2.0)


def smooth_heights(heights: Sequence[Sequence[float]]) -> list[list[int]]:
    """Average each height over its four diagonal neighbours, edges clamped.

    The results are whole column heights, truncated toward zero.
    """
    rows = len(heights)
    if rows == 0:
        return []
    cols = len(heights[0])
    if any(len(row) != cols for row in heights):
        raise ValueError("heights must form a rectangular grid")

    def at(x: int, z: int) -> float:
        return heights[clamp(x, 0, rows - 1)][clamp(z, 0, cols - 1)]

    return [
        [
            int(
                (at(x - 1, z - 1) + at(x + 1, z - 1) + at(x - 1, z + 1) + at(x + 1, z + 1))
                * 0.25
            )
            for z in range(cols)
        ]
        for x in range(rows)
    ]


def column_block(y: int, height: int, biome: Biome) -> Optional[Block]:
    """Block at world height ``y`` in a column of ``height``; None leaves it unset."""
    data = BIOME_DATA[Biome(biome)]
    top = Block.SNOW if height > SNOW_LINE else data.top_block

    if height < y <= WATER_LEVEL:
        return Block.WATER
    if y > height:
        return None
    if y == height:
        return top
    if y >= height - 3:
        return data.bottom_block
    return Block.STONE