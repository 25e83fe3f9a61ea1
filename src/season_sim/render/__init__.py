"""Rendering helpers for the season diagram."""

from .viewport import ViewportTransform
from .assets import (
    DEFAULT_FONT_NAMES,
    get_text_surface,
    load_font,
    wrap_text,
)
from .draw import (
    dash_segments,
    draw_altitude_panel,
    draw_body,
    draw_dashed_line,
    draw_diagram,
    draw_indicator,
    draw_orbit,
    draw_season_markers,
    draw_sun,
)
from .ui import (
    ButtonVisualStyle,
    ToggleButton,
    layout_grid,
)

__all__ = [
    "ButtonVisualStyle",
    "DEFAULT_FONT_NAMES",
    "ToggleButton",
    "ViewportTransform",
    "dash_segments",
    "draw_altitude_panel",
    "draw_body",
    "draw_dashed_line",
    "draw_diagram",
    "draw_indicator",
    "draw_orbit",
    "draw_season_markers",
    "draw_sun",
    "get_text_surface",
    "layout_grid",
    "load_font",
    "wrap_text",
]
