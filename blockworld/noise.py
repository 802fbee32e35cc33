"""Composable two-dimensional noise functions built on a 3D noise source."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

from blockworld.fmath import safe_exp

Noise3 = Callable[[float, float, float], float]


class NoiseFunction(Protocol):
    def compute(self, seed: float, x: float, z: float) -> float:
        ...


@dataclass(frozen=True)
class Basic:
    """Plain noise sampled at (x, z) with the seed moved by offset ``o``."""

    o: int
    noise3: Noise3

    def compute(self, seed: float, x: float, z: float) -> float:
        return self.noise3(x, z, seed + (self.o * 32.0))


@dataclass(frozen=True)
class Octave:
    """Sum of ``n`` octaves, each at twice the frequency and half the weight.

    With a source in [-1, 1] the result lies in [-(2 - 2**(1 - n)), 2 - 2**(1 - n)].
    """

    n: int
    o: int
    noise3: Noise3

    def compute(self, seed: float, x: float, z: float) -> float:
        u, v = 1.0, 0.0
        for _ in range(self.n):
            v += (1.0 / u) * self.noise3(
                (x / 1.01) * u, (z / 1.01) * u, seed + (self.o * 32)
            )
            u *= 2.0
        return v


@dataclass(frozen=True)
class Combined:
    """``n`` sampled at x displaced by the value of ``m``."""

    n: NoiseFunction
    m: NoiseFunction

    def compute(self, seed: float, x: float, z: float) -> float:
        return self.n.compute(seed, x + self.m.compute(seed, x, z), z)


@dataclass(frozen=True)
class ExpScale:
    """``n`` sampled at scaled coordinates, raised to ``exp`` keeping its sign."""

    n: NoiseFunction
    exp: float
    scale: float

    def compute(self, seed: float, x: float, z: float) -> float:
        v = self.n.compute(seed, x * self.scale, z * self.scale)
        return safe_exp(v, self.exp)