"""Axis-aligned bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass

from blockworld.vec3 import Vec3


@dataclass(frozen=True)
class AABB:
    """A box spanning ``min`` to ``max`` on every axis."""

    min: Vec3
    max: Vec3

    def center(self) -> Vec3:
        return (self.min + self.max) * 0.5

    def depth(self, other: "AABB") -> Vec3:
        """Depth of collision of this box into ``other`` along each axis."""
        a_c, b_c = self.center(), other.center()
        result = [
            (a_hi - b_lo) if ac < bc else (b_hi - a_lo)
            for ac, bc, a_lo, a_hi, b_lo, b_hi in zip(
                a_c, b_c, self.min, self.max, other.min, other.max
            )
        ]
        return Vec3(*result)

    def scaled(self, scale: Vec3) -> "AABB":
        """Box scaled per axis by ``scale`` around the same center."""
        center = self.center()
        new_size = (self.max - self.min) * scale
        half = new_size * 0.5
        return AABB(-half + center, (new_size - half) + center)