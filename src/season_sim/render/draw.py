from __future__ import annotations

import math
from typing import Sequence, TYPE_CHECKING

import numpy as np
import pygame

from ..core.compositor import body_outline, compose_many
from ..core.geometry import position_for_angle, sun_path_arc, sun_path_height
from ..data.seasons import SEASON_DEFINITIONS, Season
from .assets import Color, get_text_surface

if TYPE_CHECKING:  # pragma: no cover
    from season_sim.core.config import OrbitCfg, RenderCfg
    from season_sim.core.model import RenderModel


# Label anchor offsets relative to each season's marker on the orbit.
_LABEL_OFFSETS: dict[Season, tuple[float, float, str]] = {
    Season.SPRING: (0.0, 40.0, "midtop"),
    Season.SUMMER: (-45.0, 5.0, "topright"),
    Season.AUTUMN: (0.0, -30.0, "midbottom"),
    Season.WINTER: (45.0, 5.0, "topleft"),
}


def _to_int(point: tuple[float, float]) -> tuple[int, int]:
    return int(round(point[0])), int(round(point[1]))


def dash_segments(
    points: Sequence[tuple[float, float]],
    dash_length: float,
    gap_length: float | None = None,
) -> list[tuple[tuple[float, float], tuple[float, float]]]:
    """Split a polyline into alternating drawn dashes of ``dash_length``."""

    gap = dash_length if gap_length is None else gap_length
    if len(points) < 2 or dash_length <= 0.0:
        return []
    pts = np.asarray(points, dtype=float)
    seg = np.diff(pts, axis=0)
    seg_len = np.hypot(seg[:, 0], seg[:, 1])
    cumulative = np.concatenate(([0.0], np.cumsum(seg_len)))
    total = float(cumulative[-1])
    if total <= 0.0:
        return []

    def point_at(s: float) -> tuple[float, float]:
        idx = int(np.searchsorted(cumulative, s, side="right") - 1)
        idx = min(max(idx, 0), len(seg) - 1)
        length = seg_len[idx]
        t = 0.0 if length <= 0.0 else (s - cumulative[idx]) / length
        p = pts[idx] + seg[idx] * t
        return float(p[0]), float(p[1])

    dashes = []
    start = 0.0
    while start < total:
        end = min(start + dash_length, total)
        dashes.append((point_at(start), point_at(end)))
        start = end + gap
    return dashes


def draw_dashed_line(
    surface: pygame.Surface,
    color: Color,
    points: Sequence[tuple[float, float]],
    *,
    dash_length: float,
    width: int = 1,
) -> None:
    for start, end in dash_segments(points, dash_length):
        pygame.draw.line(surface, color, _to_int(start), _to_int(end), width)


def draw_orbit(
    surface: pygame.Surface,
    points: Sequence[tuple[float, float]],
    *,
    render_cfg: RenderCfg,
) -> None:
    draw_dashed_line(
        surface,
        render_cfg.orbit_color,
        points,
        dash_length=render_cfg.orbit_dash_length,
        width=render_cfg.orbit_line_width,
    )


def draw_sun(surface: pygame.Surface, center: tuple[float, float], *, render_cfg: RenderCfg) -> None:
    cx, cy = _to_int(center)
    radius = render_cfg.sun_radius
    pygame.draw.circle(surface, render_cfg.sun_color, (cx, cy), radius)
    pygame.draw.circle(surface, (255, 215, 0), (cx, cy), int(radius * 0.7))
    pygame.draw.circle(surface, (0, 0, 0), (cx - 12, cy - 5), 3)
    pygame.draw.circle(surface, (0, 0, 0), (cx + 12, cy - 5), 3)
    smile = pygame.Rect(cx - 15, cy - 5, 30, 24)
    pygame.draw.arc(surface, (0, 0, 0), smile, math.pi * 1.15, math.pi * 1.85, 2)


def draw_season_markers(
    surface: pygame.Surface,
    model: RenderModel,
    font: pygame.font.Font,
    *,
    orbit_cfg: OrbitCfg,
    render_cfg: RenderCfg,
) -> None:
    for info in SEASON_DEFINITIONS:
        pos = position_for_angle(info.angle, orbit_cfg)
        color = (
            render_cfg.season_marker_active_color
            if model.season is info.key
            else render_cfg.season_marker_color
        )
        pygame.draw.circle(surface, color, _to_int(pos), render_cfg.season_marker_radius)

        dx, dy, anchor = _LABEL_OFFSETS[info.key]
        anchor_point = _to_int((pos[0] + dx, pos[1] + dy))
        name_surf = get_text_surface(font, info.name, render_cfg.label_color)
        name_rect = name_surf.get_rect(**{anchor: anchor_point})
        surface.blit(name_surf, name_rect)

        sub_surf = get_text_surface(font, info.solstice_label, render_cfg.text_color)
        sub_rect = sub_surf.get_rect()
        if anchor == "topright":
            sub_rect.topright = name_rect.bottomright
        elif anchor == "topleft":
            sub_rect.topleft = name_rect.bottomleft
        else:
            sub_rect.midtop = name_rect.midbottom
        surface.blit(sub_surf, sub_rect)


def draw_indicator(surface: pygame.Surface, model: RenderModel, *, render_cfg: RenderCfg) -> None:
    draw_dashed_line(
        surface,
        render_cfg.indicator_color,
        [model.indicator_start, model.indicator_end],
        dash_length=render_cfg.indicator_dash_length,
        width=2,
    )


def draw_body(
    surface: pygame.Surface,
    model: RenderModel,
    *,
    orbit_cfg: OrbitCfg,
    render_cfg: RenderCfg,
) -> None:
    center = model.body_position
    radius = orbit_cfg.body_radius
    pygame.draw.circle(surface, render_cfg.body_color, _to_int(center), int(radius))

    outline = body_outline(radius, render_cfg.body_axis_overhang)
    equator = compose_many(outline["equator"], center, model.body_rotation)
    axis = compose_many(outline["axis"], center, model.body_rotation)
    draw_dashed_line(surface, render_cfg.body_axis_color, equator, dash_length=3, width=1)
    draw_dashed_line(surface, render_cfg.body_axis_color, axis, dash_length=2, width=2)

    site = _to_int(model.site_position)
    pygame.draw.circle(surface, render_cfg.site_color, site, render_cfg.site_radius)
    pygame.draw.circle(surface, (255, 255, 255), site, render_cfg.site_radius, 1)


def draw_diagram(
    surface: pygame.Surface,
    model: RenderModel,
    orbit_points: Sequence[tuple[float, float]],
    font: pygame.font.Font,
    *,
    orbit_cfg: OrbitCfg,
    render_cfg: RenderCfg,
) -> None:
    draw_orbit(surface, orbit_points, render_cfg=render_cfg)
    draw_indicator(surface, model, render_cfg=render_cfg)
    draw_sun(surface, orbit_cfg.center, render_cfg=render_cfg)
    draw_season_markers(surface, model, font, orbit_cfg=orbit_cfg, render_cfg=render_cfg)
    draw_body(surface, model, orbit_cfg=orbit_cfg, render_cfg=render_cfg)


def draw_altitude_panel(
    surface: pygame.Surface,
    elevation: float,
    label: str,
    font: pygame.font.Font,
    *,
    render_cfg: RenderCfg,
) -> None:
    """Noon sun path above the horizon for the current elevation."""

    width, _ = render_cfg.altitude_panel_size
    center_x = width / 2.0
    horizon_y = render_cfg.altitude_horizon_y
    arc_kwargs = dict(
        center_x=center_x,
        horizon_y=horizon_y,
        half_width=render_cfg.altitude_arc_half_width,
        max_height=render_cfg.altitude_max_height,
        num_points=render_cfg.altitude_arc_samples,
    )

    guide = sun_path_arc(90.0, **arc_kwargs)
    draw_dashed_line(surface, (255, 255, 255, 77), guide, dash_length=3)

    path = sun_path_arc(elevation, **arc_kwargs)
    pygame.draw.lines(surface, render_cfg.sun_color, False, [_to_int(p) for p in path], 3)

    height = sun_path_height(elevation, render_cfg.altitude_max_height)
    sun = _to_int((center_x, horizon_y - height))
    pygame.draw.circle(surface, render_cfg.sun_color, sun, render_cfg.altitude_sun_radius)

    pygame.draw.line(surface, (255, 255, 255), (0, int(horizon_y)), (width, int(horizon_y)), 2)
    observer = [(110, 120), (110, 110), (130, 110), (130, 120)]
    pygame.draw.lines(surface, (144, 164, 174), False, observer, 2)
    pygame.draw.polygon(surface, (144, 164, 174), [(120, 100), (125, 95), (115, 95)])
    pygame.draw.line(surface, (144, 164, 174), (120, 110), (120, 100), 2)

    text = get_text_surface(font, label, render_cfg.label_color)
    surface.blit(text, text.get_rect(center=(int(center_x), 70)))


__all__ = [
    "dash_segments",
    "draw_altitude_panel",
    "draw_body",
    "draw_dashed_line",
    "draw_diagram",
    "draw_indicator",
    "draw_orbit",
    "draw_season_markers",
    "draw_sun",
]
