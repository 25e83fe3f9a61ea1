"""Data models for the season diagram state."""
from __future__ import annotations

from dataclasses import dataclass, field

from ..data.seasons import DEFAULT_SEASON, DEFAULT_TILT, AxialTilt, Season, canonical_angle


@dataclass
class SimState:
    """Mutable parameter state owned by the controller."""

    tilt: AxialTilt = DEFAULT_TILT
    season: Season = DEFAULT_SEASON
    orbital_angle: float = field(default_factory=lambda: canonical_angle(DEFAULT_SEASON))
    is_dragging: bool = False

    def copy(self) -> "SimState":
        return SimState(
            tilt=self.tilt,
            season=self.season,
            orbital_angle=self.orbital_angle,
            is_dragging=self.is_dragging,
        )


@dataclass(frozen=True)
class RenderModel:
    """Snapshot of everything the presentation layer draws."""

    tilt: AxialTilt
    season: Season
    orbital_angle: float
    is_dragging: bool
    body_position: tuple[float, float]
    body_rotation: float
    site_position: tuple[float, float]
    indicator_start: tuple[float, float]
    indicator_end: tuple[float, float]
    elevation: float
    explanation: str
    season_description: str | None
    season_selection_enabled: bool

    @property
    def elevation_label(self) -> str:
        return f"{self.elevation:.1f}°"


__all__ = ["RenderModel", "SimState"]
