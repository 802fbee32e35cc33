"""Colour conversions between RGB, XYZ and Lab, and Lab-space blending."""

from __future__ import annotations

from blockworld.fmath import lerp
from blockworld.vec3 import Vec3

RGBA = tuple[float, float, float, float]

_RGB_TO_XYZ = (
    (0.4124, 0.3576, 0.1805),
    (0.2126, 0.7152, 0.0722),
    (0.0193, 0.1192, 0.9505),
)

_XYZ_TO_RGB = (
    (3.2406, -1.5372, -0.4986),
    (-0.9689, 1.8758, 0.0415),
    (0.0557, -0.2040, 1.0570),
)

_WHITE = Vec3(95.047, 100.0, 108.883)


def _mul_columns(columns: tuple[tuple[float, ...], ...], v: Vec3) -> Vec3:
    """Multiply a matrix given by its columns with a vector."""
    return Vec3(
        *(sum(col[i] * c for col, c in zip(columns, v)) for i in range(3))
    )


def rgba_from_hex(c: int) -> RGBA:
    """Split 0xRRGGBBAA into four floats in [0, 1]."""
    return (
        ((c & 0xFF000000) >> 24) / 255.0,
        ((c & 0x00FF0000) >> 16) / 255.0,
        ((c & 0x0000FF00) >> 8) / 255.0,
        (c & 0x000000FF) / 255.0,
    )


def _linearize(c: float) -> float:
    return ((c + 0.055) / 1.055) ** 2.4 if c > 0.04045 else c / 12.92


def rgb_to_xyz(c: Vec3) -> Vec3:
    tmp = Vec3(*(_linearize(v) for v in c))
    return _mul_columns(_RGB_TO_XYZ, tmp) * 100.0


def _lab_f(n: float) -> float:
    return n ** (1.0 / 3.0) if n > 0.008856 else (7.787 * n) + (16.0 / 116.0)


def xyz_to_lab(c: Vec3) -> Vec3:
    n = c / _WHITE
    v = Vec3(*(_lab_f(x) for x in n))
    return Vec3((116.0 * v.y) - 16.0, 500.0 * (v.x - v.y), 200.0 * (v.y - v.z))


def rgb_to_lab(c: Vec3) -> Vec3:
    """Lab scaled so that every component lies roughly in [0, 1]."""
    lab = xyz_to_lab(rgb_to_xyz(c))
    return Vec3(lab.x / 100.0, 0.5 + 0.5 * (lab.y / 127.0), 0.5 + 0.5 * (lab.z / 127.0))


def _lab_f_inv(f: float) -> float:
    return f * f * f if f > 0.206897 else (f - 16.0 / 116.0) / 7.787


def lab_to_xyz(c: Vec3) -> Vec3:
    fy = (c.x + 16.0) / 116.0
    fx = c.y / 500.0 + fy
    fz = fy - c.z / 200.0
    return Vec3(
        _WHITE.x * _lab_f_inv(fx),
        _WHITE.y * _lab_f_inv(fy),
        _WHITE.z * _lab_f_inv(fz),
    )


def _gamma(v: float) -> float:
    return (1.055 * v ** (1.0 / 2.4)) - 0.055 if v > 0.0031308 else 12.92 * v


def xyz_to_rgb(c: Vec3) -> Vec3:
    v = _mul_columns(_XYZ_TO_RGB, c * (1.0 / 100.0))
    return Vec3(*(_gamma(x) for x in v))


def lab_to_rgb(c: Vec3) -> Vec3:
    """Inverse of :func:`rgb_to_lab`."""
    return xyz_to_rgb(
        lab_to_xyz(
            Vec3(100.0 * c.x, 2.0 * 127.0 * (c.y - 0.5), 2.0 * 127.0 * (c.z - 0.5))
        )
    )


def rgb_brighten(rgb: Vec3, d: float) -> Vec3:
    """Shift the Lab lightness of ``rgb`` by ``d``."""
    lab = rgb_to_lab(rgb)
    return lab_to_rgb(Vec3(lab.x + d, lab.y, lab.z))


def rgba_brighten(rgba: RGBA, d: float) -> RGBA:
    rgb = rgb_brighten(Vec3(rgba[0], rgba[1], rgba[2]), d)
    return (rgb.x, rgb.y, rgb.z, rgba[3])


def rgba_lerp(a: RGBA, b: RGBA, t: float) -> RGBA:
    """Interpolate two colours in Lab space, alpha linearly."""
    lab_a = rgb_to_lab(Vec3(a[0], a[1], a[2]))
    lab_b = rgb_to_lab(Vec3(b[0], b[1], b[2]))
    rgb = lab_to_rgb(Vec3(*(lerp(x, y, t) for x, y in zip(lab_a, lab_b))))
    return (rgb.x, rgb.y, rgb.z, lerp(a[3], b[3], t))


def rgba_lerp3(a: RGBA, b: RGBA, c: RGBA, t: float) -> RGBA:
    """Interpolate a to b over the first half of t, b to c over the second."""
    if t <= 0.5:
        return rgba_lerp(a, b, t * 2.0)
    return rgba_lerp(b, c, (t - 0.5) * 2.0)