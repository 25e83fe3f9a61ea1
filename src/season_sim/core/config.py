"""Configuration dataclasses for the season diagram."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class OrbitCfg:
    viewport_width: float = 600.0
    viewport_height: float = 300.0
    center_x: float = 300.0
    center_y: float = 150.0
    radius_x: float = 220.0
    radius_y: float = 100.0
    body_radius: float = 30.0
    observer_latitude: float = 30.0
    orbit_outline_samples: int = 180

    def __post_init__(self) -> None:
        if self.radius_x <= 0.0 or self.radius_y <= 0.0:
            raise ValueError("Orbit semi-axes must be positive")
        if self.body_radius <= 0.0:
            raise ValueError("Body radius must be positive")

    @property
    def center(self) -> tuple[float, float]:
        return self.center_x, self.center_y

    @property
    def viewport_size(self) -> tuple[float, float]:
        return self.viewport_width, self.viewport_height


@dataclass(frozen=True)
class RenderCfg:
    width: int = 1280
    height: int = 720
    windowed_default_size: tuple[int, int] = (1280, 720)
    min_window_size: tuple[int, int] = (960, 600)
    fps: int = 60
    background_color: tuple[int, int, int] = (17, 24, 39)
    panel_color: tuple[int, int, int, int] = (0, 0, 0, 52)
    panel_radius: int = 14
    diagram_margin: int = 24
    side_panel_width: int = 380
    orbit_color: tuple[int, int, int, int] = (255, 255, 255, 52)
    orbit_line_width: int = 2
    orbit_dash_length: int = 5
    sun_color: tuple[int, int, int] = (255, 196, 0)
    sun_radius: int = 40
    body_color: tuple[int, int, int] = (74, 144, 226)
    body_axis_color: tuple[int, int, int] = (255, 255, 255)
    body_axis_overhang: float = 10.0
    site_color: tuple[int, int, int] = (229, 62, 62)
    site_radius: int = 4
    indicator_color: tuple[int, int, int] = (255, 255, 0)
    indicator_dash_length: int = 4
    season_marker_radius: int = 5
    season_marker_color: tuple[int, int, int] = (74, 144, 226)
    season_marker_active_color: tuple[int, int, int] = (255, 215, 0)
    label_color: tuple[int, int, int] = (255, 255, 255)
    text_color: tuple[int, int, int] = (209, 213, 219)
    highlight_text_color: tuple[int, int, int] = (253, 224, 71)
    altitude_panel_size: tuple[int, int] = (240, 140)
    altitude_horizon_y: float = 120.0
    altitude_arc_half_width: float = 100.0
    altitude_max_height: float = 100.0
    altitude_arc_samples: int = 64
    altitude_sun_radius: int = 8
    button_color: tuple[int, int, int, int] = (55, 65, 81, 255)
    button_hover_color: tuple[int, int, int, int] = (75, 85, 99, 255)
    button_active_color: tuple[int, int, int, int] = (250, 204, 21, 255)
    button_text_color: tuple[int, int, int] = (255, 255, 255)
    button_active_text_color: tuple[int, int, int] = (17, 24, 39)
    button_disabled_alpha: int = 128
    button_radius: int = 10
    button_height: int = 40


@dataclass(frozen=True)
class LogCfg:
    root_dir: Path = Path("data/sessions")
    timeseries_flush_threshold: int = 200
    events_flush_threshold: int = 20
    log_drag_samples: bool = True


ORBIT_CFG = OrbitCfg()
RENDER_CFG = RenderCfg()
LOG_CFG = LogCfg()


__all__ = ["LOG_CFG", "ORBIT_CFG", "RENDER_CFG", "LogCfg", "OrbitCfg", "RenderCfg"]
