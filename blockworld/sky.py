"""Day and night cycle: sky states, their progress, colours and sun angles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from blockworld.color import RGBA, rgba_from_hex, rgba_lerp, rgba_lerp3

TICKRATE = 60

DAY_TICKS = 14 * 60 * TICKRATE
NIGHT_TICKS = 10 * 60 * TICKRATE
TOTAL_DAY_TICKS = DAY_TICKS + NIGHT_TICKS

# sunrise and sunset last this many ticks
SUN_CHANGE_TICKS = 45 * TICKRATE
HALF_SUN_CHANGE_TICKS = SUN_CHANGE_TICKS // 2

_TAU = 2 * math.pi


class SkyState(IntEnum):
    DAY = 0
    NIGHT = 1
    SUNRISE = 2
    SUNSET = 3


class CelestialBody(IntEnum):
    SUN = 0
    MOON = 1


class _Plane(IntEnum):
    SKY = 0
    FOG = 1
    VOID = 2


# indexed by [SkyState][plane]
SKY_COLORS: tuple[tuple[RGBA, RGBA, RGBA], ...] = (
    (rgba_from_hex(0x87CEEBFF), rgba_from_hex(0x87CEEBFF), rgba_from_hex(0x87CEEBFF)),
    (rgba_from_hex(0x020206FF), rgba_from_hex(0x010104FF), rgba_from_hex(0x000000FF)),
    (rgba_from_hex(0xFFCA7CFF), rgba_from_hex(0xFFCA7CFF), rgba_from_hex(0x000000FF)),
    (rgba_from_hex(0xFFAB30FF), rgba_from_hex(0xFFAB30FF), rgba_from_hex(0x000000FF)),
)

# indexed by DAY or NIGHT
SUNLIGHT_COLORS: tuple[RGBA, RGBA] = (
    rgba_from_hex(0xFFFFFFFF),
    rgba_from_hex(0x000000FF),
)

CLOUD_COLORS: tuple[RGBA, RGBA] = (
    rgba_from_hex(0xFFFFFFFF),
    rgba_from_hex(0x040404FF),
)


@dataclass(frozen=True)
class SkyColors:
    """Every colour the sky needs at one moment."""

    sunlight: RGBA
    fog: RGBA
    sky: RGBA
    void: RGBA
    cloud: RGBA


def sky_state(ticks: int) -> SkyState:
    """Sky state at world tick ``ticks``."""
    day_ticks = ticks % TOTAL_DAY_TICKS
    if day_ticks <= HALF_SUN_CHANGE_TICKS:
        return SkyState.SUNRISE
    if day_ticks <= DAY_TICKS - HALF_SUN_CHANGE_TICKS:
        return SkyState.DAY
    if day_ticks <= DAY_TICKS + HALF_SUN_CHANGE_TICKS:
        return SkyState.SUNSET
    if day_ticks <= TOTAL_DAY_TICKS - HALF_SUN_CHANGE_TICKS:
        return SkyState.NIGHT
    return SkyState.SUNRISE


def sky_state_progress(state: SkyState, ticks: int) -> float:
    """How far, in [0, 1], the sky has come through ``state``."""
    day_ticks = float(ticks % TOTAL_DAY_TICKS)
    state = SkyState(state)
    if state is SkyState.SUNRISE:
        if day_ticks <= HALF_SUN_CHANGE_TICKS:
            return 0.5 + (day_ticks / HALF_SUN_CHANGE_TICKS) * 0.5
        return (
            (day_ticks - (TOTAL_DAY_TICKS - HALF_SUN_CHANGE_TICKS))
            / HALF_SUN_CHANGE_TICKS
        ) * 0.5
    if state is SkyState.DAY:
        return (day_ticks - HALF_SUN_CHANGE_TICKS) / DAY_TICKS
    if state is SkyState.SUNSET:
        return (day_ticks - (DAY_TICKS - HALF_SUN_CHANGE_TICKS)) / SUN_CHANGE_TICKS
    return (day_ticks - (DAY_TICKS + HALF_SUN_CHANGE_TICKS)) / NIGHT_TICKS


def day_night(ticks: int) -> SkyState:
    """DAY or NIGHT at world tick ``ticks``."""
    day_ticks = ticks % TOTAL_DAY_TICKS
    return SkyState.DAY if day_ticks <= DAY_TICKS else SkyState.NIGHT


def day_night_progress(ticks: int) -> float:
    """How far, in [0, 1], the current day or night has come."""
    day_ticks = ticks % TOTAL_DAY_TICKS
    if day_night(ticks) is SkyState.DAY:
        return day_ticks / DAY_TICKS
    return (day_ticks - DAY_TICKS) / NIGHT_TICKS


def sky_colors(state: SkyState, progress: float) -> SkyColors:
    """Colours of the sky in ``state`` with ``progress`` through it."""
    state = SkyState(state)
    if state in (SkyState.DAY, SkyState.NIGHT):
        planes = SKY_COLORS[state]
        return SkyColors(
            sunlight=SUNLIGHT_COLORS[state],
            fog=planes[_Plane.FOG],
            sky=planes[_Plane.SKY],
            void=planes[_Plane.VOID],
            cloud=CLOUD_COLORS[state],
        )

    if state is SkyState.SUNSET:
        src, dst = SkyState.DAY, SkyState.NIGHT
    else:
        src, dst = SkyState.NIGHT, SkyState.DAY

    return SkyColors(
        sunlight=rgba_lerp(SUNLIGHT_COLORS[src], SUNLIGHT_COLORS[dst], progress),
        fog=rgba_lerp3(
            SKY_COLORS[src][_Plane.FOG],
            SKY_COLORS[state][_Plane.FOG],
            SKY_COLORS[dst][_Plane.FOG],
            progress,
        ),
        sky=rgba_lerp(SKY_COLORS[src][_Plane.SKY], SKY_COLORS[dst][_Plane.SKY], progress),
        void=rgba_lerp(
            SKY_COLORS[src][_Plane.VOID], SKY_COLORS[dst][_Plane.VOID], progress
        ),
        cloud=rgba_lerp(CLOUD_COLORS[src], CLOUD_COLORS[dst], progress),
    )


def celestial_angle(
    body: CelestialBody, day_night_state: SkyState, progress: float
) -> float:
    """Rotation, in radians within [0, tau), of the sun or moon across the sky."""
    shown_in = SkyState.DAY if CelestialBody(body) is CelestialBody.SUN else SkyState.NIGHT
    show = SkyState(day_night_state) is shown_in

    base_start = -(math.pi + 0.5)
    base_end = 0.5
    if show:
        start, end = base_start, base_end
    else:
        start, end = base_end, math.fmod(_TAU + base_start, _TAU)

    angle = math.fmod(_TAU + (progress * (end - start)) + start, _TAU)
    return angle + _TAU if angle < 0 else angle