# blockworld

Building blocks for a voxel world, usable without any graphics stack.

## Modules

- `blockworld.vec3`, `blockworld.vec2`: immutable integer and float vectors
  (`IVec3`, `Vec3`, `IVec2`, `Vec2`). Integer `div` and `mod` truncate toward
  zero, the remainder taking the sign of the dividend.
- `blockworld.direction`: `Direction`, the six block-face directions, with
  `ivec()`, `vec()` and `Direction.from_ivec(v)`.
- `blockworld.aabb`: `AABB` boxes with `center()`, collision `depth(other)` and
  per-axis `scaled(scale)`.
- `blockworld.camera`: `PerspectiveCamera` (aimed by `pitch` and `yaw`) and
  `OrthoCamera`, whose `update()` rebuilds a `ViewProj` of numpy 4x4 matrices;
  also the `look_at`, `perspective` and `ortho` matrix builders.
- `blockworld.fmath`: `sign`, `clamp`, `lerp`, `safe_exp`, a signed 64-bit
  `ivec3_hash`, and `ray_block`, which walks the grid cells along a `Ray` and
  returns the first cell a callback accepts together with the face it was
  entered through.
- `blockworld.color`: RGB/XYZ/Lab conversions, `rgba_from_hex`, Lab-space
  `rgb_brighten`/`rgba_brighten` and blending with `rgba_lerp` and `rgba_lerp3`.
- `blockworld.bitmap`: `Bitmap`, a fixed-size bit array with `set`, `get`
  and `clear`.
- `blockworld.chunkdata`: the 64-bit voxel word layout (`Field.BLOCK`,
  `TORCHLIGHT`, `SUNLIGHT`, `LIGHT`, `METADATA`, `DATA`), torchlight packing
  helpers, chunk bounds and index helpers, and `ChunkVoxels`, a 32x32x32 store
  of voxel words.
- `blockworld.blockmesh`: `MeshBuilder`, which appends vertices, indices and
  transparent faces for block faces and sprites, and `sort(center, full)` to
  order transparent faces back to front ahead of the opaque ones.
- `blockworld.worldcoords`: conversions between world, chunk and heightmap
  coordinates, and `ChunkGrid`, a cube of loaded-chunk slots with its index
  mappings.
- `blockworld.sky`: the day/night cycle by tick (`sky_state`,
  `sky_state_progress`, `day_night`, `day_night_progress`), the sky colours at
  a moment (`sky_colors`, returning `SkyColors`) and `celestial_angle` for the
  sun and moon.
- `blockworld.noise`: composable noise functions (`Basic`, `Octave`,
  `Combined`, `ExpScale`) over a 3D noise source you supply as a callable
  `noise3(x, y, z)`.
- `blockworld.worldgen`: `Biome`, `BiomeData` and `BIOME_DATA`, biome
  selection with `get_biome`, column heights with `base_height` and
  `smooth_heights`, and `column_block`, the block at a height in a column.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from blockworld.vec3 import IVec3
from blockworld.chunkdata import ChunkVoxels, Field
from blockworld.worldcoords import pos_to_offset, pos_to_chunk_pos
from blockworld.sky import sky_state

world_pos = IVec3(-1, 40, 70)
offset = pos_to_offset(world_pos)       # IVec3(x=-1, y=1, z=2)
local = pos_to_chunk_pos(world_pos)     # IVec3(x=31, y=8, z=6)

voxels = ChunkVoxels()
voxels.set_field(local, Field.BLOCK, 3)
print(offset, local, voxels.get_field(local, Field.BLOCK))

print(sky_state(0))                     # SkyState.SUNRISE
```

## What it does not do

- No rendering: cameras and mesh builders produce matrices and plain lists,
  nothing is drawn or uploaded.
- No world object: there is no chunk loading, block registry, entity system
  or saving; `ChunkGrid` only maps offsets to slots.
- No light propagation: the light fields can be packed and read, but light is
  not spread between voxels.
- No built-in 3D noise source, and no placement of trees, flowers, grass or
  shrubs; `Decoration` only names them with their chances in `BIOME_DATA`.
- No command-line program.