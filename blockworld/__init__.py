"""Voxel world primitives: vectors, cameras, colour, packed chunk data, mesh buffers, sky cycle and terrain rules."""

__version__ = "0.1.0"