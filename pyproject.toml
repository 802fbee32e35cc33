[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockworld"
version = "0.1.0"
description = "Voxel world primitives: vectors, cameras, colour blending, packed chunk data, mesh buffers, sky cycle and terrain rules"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["voxel", "chunk", "terrain", "worldgen", "meshing", "sky", "raycast"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["blockworld"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
