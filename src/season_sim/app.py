# src/season_sim/app.py
"""
SeasonLab - Why do the seasons change?
======================================

Interactive diagram showing how the axial tilt and the position along the
orbit decide how high the noon sun climbs at a fixed latitude.

Drag the Earth along its orbit or pick a season/tilt with the buttons.
"""
from __future__ import annotations

import argparse
from pathlib import Path

import pygame
from pygame.locals import DOUBLEBUF, RESIZABLE

from season_sim.core.config import LOG_CFG, ORBIT_CFG, RENDER_CFG
from season_sim.core.controller import SimulationController
from season_sim.core.geometry import sample_orbit
from season_sim.core.interaction import DragStateMachine, PointerHub
from season_sim.core.logging_utils import SessionLogger
from season_sim.core.model import RenderModel
from season_sim.data.seasons import SEASON_DEFINITIONS, AxialTilt
from season_sim.render import (
    DEFAULT_FONT_NAMES,
    ButtonVisualStyle,
    ToggleButton,
    ViewportTransform,
    draw_altitude_panel,
    draw_diagram,
    get_text_surface,
    layout_grid,
    load_font,
    wrap_text,
)

SEASON_KEYS = {
    pygame.K_1: SEASON_DEFINITIONS[0].key,
    pygame.K_2: SEASON_DEFINITIONS[1].key,
    pygame.K_3: SEASON_DEFINITIONS[2].key,
    pygame.K_4: SEASON_DEFINITIONS[3].key,
}


HEADER_HEIGHT = 96


def clamp_window_size(
    size: tuple[int, int], minimum: tuple[int, int] = RENDER_CFG.min_window_size
) -> tuple[int, int]:
    return max(int(size[0]), minimum[0]), max(int(size[1]), minimum[1])


def compute_layout(size: tuple[int, int]) -> tuple[pygame.Rect, tuple[int, int, int, int]]:
    """Return the side panel rect and the diagram area for a window size.

    Sizes never go negative, however small the window is.
    """
    width, height = size
    margin = RENDER_CFG.diagram_margin
    panel_width = min(RENDER_CFG.side_panel_width, max(0, width - 2 * margin))
    body_height = max(0, height - HEADER_HEIGHT - margin)
    side_panel = pygame.Rect(max(0, width - panel_width - margin), HEADER_HEIGHT, panel_width, body_height)
    diagram_area = (margin, HEADER_HEIGHT, max(0, side_panel.left - 2 * margin), body_height)
    return side_panel, diagram_area


def parse_size(text: str) -> tuple[int, int]:
    try:
        width_text, height_text = text.lower().split("x", 1)
        size = int(width_text), int(height_text)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}") from err
    if size[0] <= 0 or size[1] <= 0:
        raise argparse.ArgumentTypeError("window size must be positive")
    return clamp_window_size(size)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive season and axial tilt diagram.")
    parser.add_argument("--no-log", action="store_true", help="Do not record the session to disk.")
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=LOG_CFG.root_dir,
        help="Root directory for session logs (default: %(default)s).",
    )
    parser.add_argument(
        "--windowed",
        type=parse_size,
        default=RENDER_CFG.windowed_default_size,
        metavar="WIDTHxHEIGHT",
        help="Initial window size.",
    )
    return parser.parse_args(argv)


def _set_display_mode_with_vsync(size: tuple[int, int], flags: int = 0) -> pygame.Surface:
    """Create the display surface with double buffering and vsync when available."""
    flags |= DOUBLEBUF
    try:
        return pygame.display.set_mode(size, flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode(size, flags)
    except pygame.error as err:
        try:
            return pygame.display.set_mode(size, flags)
        except pygame.error:
            raise err


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    pygame.init()
    pygame.display.set_caption("SeasonLab – Why do the seasons change?")

    screen = _set_display_mode_with_vsync(args.windowed, RESIZABLE)
    clock = pygame.time.Clock()

    title_font = load_font(DEFAULT_FONT_NAMES, 34, bold=True)
    subtitle_font = load_font(DEFAULT_FONT_NAMES, 18)
    label_font = load_font(DEFAULT_FONT_NAMES, 14, bold=True)
    panel_font = load_font(DEFAULT_FONT_NAMES, 16)
    heading_font = load_font(DEFAULT_FONT_NAMES, 18, bold=True)
    elevation_font = load_font(DEFAULT_FONT_NAMES, 24, bold=True)

    logger = None if args.no_log else SessionLogger(args.log_dir)
    controller = SimulationController(ORBIT_CFG, logger=logger)
    viewport = ViewportTransform(ORBIT_CFG.viewport_size)
    hub = PointerHub()
    drag = DragStateMachine(controller, viewport, hub)

    model: RenderModel = controller.read_model()

    def on_change(new_model: RenderModel) -> None:
        nonlocal model
        model = new_model

    unsubscribe = controller.subscribe(on_change)

    orbit_points = sample_orbit(ORBIT_CFG)
    diagram_surface = pygame.Surface(
        (int(ORBIT_CFG.viewport_width), int(ORBIT_CFG.viewport_height)), pygame.SRCALPHA
    )
    altitude_surface = pygame.Surface(RENDER_CFG.altitude_panel_size, pygame.SRCALPHA)

    button_style = ButtonVisualStyle(
        base_color=RENDER_CFG.button_color,
        hover_color=RENDER_CFG.button_hover_color,
        active_color=RENDER_CFG.button_active_color,
        text_color=RENDER_CFG.button_text_color,
        active_text_color=RENDER_CFG.button_active_text_color,
        radius=RENDER_CFG.button_radius,
        disabled_alpha=RENDER_CFG.button_disabled_alpha,
    )
    buttons: list[ToggleButton] = []
    side_panel = pygame.Rect(0, 0, 0, 0)

    def layout(size: tuple[int, int]) -> None:
        nonlocal buttons, side_panel
        side_panel, diagram_area = compute_layout(size)
        viewport.fit(diagram_area)

        inner = side_panel.inflate(-2 * 16, 0)
        cell_width = (inner.width - 8) // 2
        cell_size = (cell_width, RENDER_CFG.button_height)
        tilt_rects = layout_grid(
            (inner.left, side_panel.bottom - 3 * RENDER_CFG.button_height - 92),
            len(AxialTilt),
            columns=2,
            cell_size=cell_size,
            gap=8,
        )
        season_rects = layout_grid(
            (inner.left, side_panel.bottom - 2 * RENDER_CFG.button_height - 24),
            len(SEASON_DEFINITIONS),
            columns=2,
            cell_size=cell_size,
            gap=8,
        )
        buttons = [
            ToggleButton(
                rect,
                f"Tilt {tilt.degrees:g}°",
                lambda tilt=tilt: controller.select_tilt(tilt),
                is_active=lambda tilt=tilt: model.tilt is tilt,
                style=button_style,
            )
            for rect, tilt in zip(tilt_rects, AxialTilt)
        ] + [
            ToggleButton(
                rect,
                info.name,
                lambda season=info.key: controller.select_season(season),
                is_active=lambda season=info.key: model.season is season,
                is_enabled=lambda: model.season_selection_enabled,
                style=button_style,
            )
            for rect, info in zip(season_rects, SEASON_DEFINITIONS)
        ]

    layout(screen.get_size())

    def update_cursor(mouse_pos: tuple[int, int]) -> None:
        if drag.dragging:
            pygame.mouse.set_cursor(pygame.SYSTEM_CURSOR_SIZEALL)
        elif viewport.contains(mouse_pos) and drag.hit_test(viewport.to_local(mouse_pos)):
            pygame.mouse.set_cursor(pygame.SYSTEM_CURSOR_HAND)
        else:
            pygame.mouse.set_cursor(pygame.SYSTEM_CURSOR_ARROW)

    def draw_frame() -> None:
        screen.fill(RENDER_CFG.background_color)
        width = screen.get_width()

        title = get_text_surface(title_font, "Why do the seasons change?", RENDER_CFG.highlight_text_color)
        screen.blit(title, title.get_rect(midtop=(width // 2, 14)))
        subtitle = get_text_surface(
            subtitle_font,
            "Explore how the tilted axis and the orbit change the seasons.",
            RENDER_CFG.text_color,
        )
        screen.blit(subtitle, subtitle.get_rect(midtop=(width // 2, 58)))

        diagram_surface.fill((0, 0, 0, 0))
        draw_diagram(
            diagram_surface,
            model,
            orbit_points,
            label_font,
            orbit_cfg=ORBIT_CFG,
            render_cfg=RENDER_CFG,
        )
        if viewport.mounted:
            x, y, w, h = viewport.screen_rect()
            backdrop = pygame.Surface((w, h), pygame.SRCALPHA)
            pygame.draw.rect(
                backdrop,
                RENDER_CFG.panel_color,
                backdrop.get_rect(),
                border_radius=RENDER_CFG.panel_radius,
            )
            screen.blit(backdrop, (x, y))
            screen.blit(pygame.transform.smoothscale(diagram_surface, (w, h)), (x, y))

        if side_panel.width > 0 and side_panel.height > 0:
            panel = pygame.Surface(side_panel.size, pygame.SRCALPHA)
            pygame.draw.rect(panel, RENDER_CFG.panel_color, panel.get_rect(), border_radius=RENDER_CFG.panel_radius)
            screen.blit(panel, side_panel.topleft)

        heading = get_text_surface(heading_font, "Noon sun elevation", RENDER_CFG.label_color)
        screen.blit(heading, heading.get_rect(midtop=(side_panel.centerx, side_panel.top + 12)))

        altitude_surface.fill((0, 0, 0, 0))
        draw_altitude_panel(
            altitude_surface,
            model.elevation,
            model.elevation_label,
            elevation_font,
            render_cfg=RENDER_CFG,
        )
        screen.blit(altitude_surface, altitude_surface.get_rect(midtop=(side_panel.centerx, side_panel.top + 40)))

        text_top = side_panel.top + 40 + RENDER_CFG.altitude_panel_size[1] + 12
        max_text_width = side_panel.width - 32
        lines = [(line, RENDER_CFG.text_color) for line in wrap_text(model.explanation, panel_font, max_text_width)]
        if model.season_description is not None:
            lines.append(("", RENDER_CFG.text_color))
            lines += [
                (line, RENDER_CFG.highlight_text_color)
                for line in wrap_text(model.season_description, panel_font, max_text_width)
            ]
        for idx, (line, color) in enumerate(lines):
            if not line:
                continue
            surf = get_text_surface(panel_font, line, color)
            screen.blit(surf, surf.get_rect(midtop=(side_panel.centerx, text_top + idx * panel_font.get_linesize())))

        tilt_heading = get_text_surface(heading_font, "Axial tilt", RENDER_CFG.label_color)
        screen.blit(tilt_heading, tilt_heading.get_rect(midbottom=(side_panel.centerx, buttons[0].rect.top - 6)))
        season_heading = get_text_surface(heading_font, "Choose a season", RENDER_CFG.label_color)
        screen.blit(
            season_heading,
            season_heading.get_rect(midbottom=(side_panel.centerx, buttons[len(AxialTilt)].rect.top - 6)),
        )

        mouse_pos = pygame.mouse.get_pos()
        for button in buttons:
            button.draw(screen, panel_font, mouse_pos)

    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    screen = _set_display_mode_with_vsync(clamp_window_size((event.w, event.h)), RESIZABLE)
                    layout(screen.get_size())
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_t and not drag.dragging:
                        next_tilt = AxialTilt.NONE if model.tilt is AxialTilt.EARTH else AxialTilt.EARTH
                        controller.select_tilt(next_tilt)
                    elif event.key in SEASON_KEYS and model.season_selection_enabled and not drag.dragging:
                        controller.select_season(SEASON_KEYS[event.key])
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == 1:
                        if not any(button.handle_event(event) for button in buttons):
                            drag.press(event.pos)
                elif event.type == pygame.MOUSEMOTION:
                    hub.dispatch_move(event.pos)
                elif event.type == pygame.MOUSEBUTTONUP:
                    if event.button == 1:
                        hub.dispatch_release(event.pos)

            update_cursor(pygame.mouse.get_pos())
            draw_frame()
            pygame.display.flip()
            clock.tick(RENDER_CFG.fps)
    except KeyboardInterrupt:
        pass
    finally:
        drag.close()
        unsubscribe()
        viewport.unmount()
        if logger is not None:
            logger.close()
        pygame.quit()


if __name__ == "__main__":
    main()
