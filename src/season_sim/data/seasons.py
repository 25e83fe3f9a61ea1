"""Season table, axial tilts and the meridian elevation lookup."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..core.config import ORBIT_CFG
from ..core.geometry import angular_distance


class Season(Enum):
    WINTER = "winter"
    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"


class AxialTilt(Enum):
    NONE = 0.0
    EARTH = 23.5

    @property
    def degrees(self) -> float:
        return float(self.value)


@dataclass(frozen=True)
class SeasonInfo:
    key: Season
    name: str
    solstice_label: str
    angle: float
    description: str


SEASON_DEFINITIONS: tuple[SeasonInfo, ...] = (
    SeasonInfo(
        key=Season.WINTER,
        name="Winter",
        solstice_label="(winter solstice)",
        angle=0.0,
        description="In winter the sun stays low, days are short and it is coldest.",
    ),
    SeasonInfo(
        key=Season.SPRING,
        name="Spring",
        solstice_label="(vernal equinox)",
        angle=90.0,
        description="In spring the sun climbs to a middle height. Day and night become about equal.",
    ),
    SeasonInfo(
        key=Season.SUMMER,
        name="Summer",
        solstice_label="(summer solstice)",
        angle=180.0,
        description="In summer the sun rides high in the sky, days are long and it is hottest.",
    ),
    SeasonInfo(
        key=Season.AUTUMN,
        name="Autumn",
        solstice_label="(autumnal equinox)",
        angle=270.0,
        description="Autumn is like spring: the sun reaches a middle height and the air turns cool.",
    ),
)

SEASONS: dict[Season, SeasonInfo] = {info.key: info for info in SEASON_DEFINITIONS}
SEASON_DISPLAY_ORDER: list[Season] = [info.key for info in SEASON_DEFINITIONS]
DEFAULT_SEASON = Season.SPRING
DEFAULT_TILT = AxialTilt.EARTH

TILT_EXPLANATIONS: dict[AxialTilt, str] = {
    AxialTilt.NONE: (
        "Without a tilted axis the sun reaches almost the same height all year, "
        "so there are no seasons."
    ),
    AxialTilt.EARTH: (
        "The axis is tilted by 23.5 degrees, so the sun's height changes with the "
        "position along the orbit and the seasons appear."
    ),
}


def _build_elevation_table(latitude: float) -> dict[AxialTilt, dict[Season, float]]:
    table: dict[AxialTilt, dict[Season, float]] = {}
    for tilt in AxialTilt:
        equinox = 90.0 - latitude
        table[tilt] = {
            Season.SUMMER: 90.0 - (latitude - tilt.degrees),
            Season.WINTER: 90.0 - (latitude + tilt.degrees),
            Season.SPRING: equinox,
            Season.AUTUMN: equinox,
        }
    return table


OBSERVER_LATITUDE = ORBIT_CFG.observer_latitude
MERIDIAN_ELEVATIONS: dict[AxialTilt, dict[Season, float]] = _build_elevation_table(OBSERVER_LATITUDE)


def canonical_angle(season: Season) -> float:
    return SEASONS[season].angle


def elevation(tilt: AxialTilt, season: Season) -> float:
    """Meridian (noon) solar elevation in degrees at the observation site."""

    return MERIDIAN_ELEVATIONS[tilt][season]


def nearest_season(angle: float) -> Season:
    """Season whose canonical angle is closest to ``angle``.

    Distance is measured along the shortest arc; on an exact tie the season
    declared first in :data:`SEASON_DEFINITIONS` wins.
    """

    best = SEASON_DEFINITIONS[0]
    best_distance = angular_distance(angle, best.angle)
    for info in SEASON_DEFINITIONS[1:]:
        d = angular_distance(angle, info.angle)
        if d < best_distance:
            best = info
            best_distance = d
    return best.key


def snap(angle: float) -> tuple[Season, float]:
    """Season and exact canonical angle that ``angle`` snaps to on release."""

    season = nearest_season(angle)
    return season, canonical_angle(season)


__all__ = [
    "DEFAULT_SEASON",
    "DEFAULT_TILT",
    "MERIDIAN_ELEVATIONS",
    "OBSERVER_LATITUDE",
    "SEASON_DEFINITIONS",
    "SEASON_DISPLAY_ORDER",
    "SEASONS",
    "TILT_EXPLANATIONS",
    "AxialTilt",
    "Season",
    "SeasonInfo",
    "canonical_angle",
    "elevation",
    "nearest_season",
    "snap",
]
