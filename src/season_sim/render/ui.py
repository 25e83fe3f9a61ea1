from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import pygame

from .assets import Color, get_text_surface


@dataclass(frozen=True)
class ButtonVisualStyle:
    base_color: Color
    hover_color: Color
    active_color: Color
    text_color: tuple[int, int, int]
    active_text_color: tuple[int, int, int]
    radius: int
    disabled_alpha: int = 128


class ToggleButton:
    """Rounded button that shows whether its option is the selected one."""

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        callback: Callable[[], None],
        *,
        is_active: Callable[[], bool],
        is_enabled: Callable[[], bool] | None = None,
        style: ButtonVisualStyle,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self._callback = callback
        self._is_active = is_active
        self._is_enabled = is_enabled
        self._style = style

    @property
    def enabled(self) -> bool:
        return self._is_enabled is None or self._is_enabled()

    @property
    def active(self) -> bool:
        return self._is_active()

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        mouse_pos: tuple[int, int] | None = None,
    ) -> None:
        if mouse_pos is None:
            mouse_pos = pygame.mouse.get_pos()
        style = self._style
        enabled = self.enabled
        active = self.active
        if active:
            color = style.active_color
        elif enabled and self.rect.collidepoint(mouse_pos):
            color = style.hover_color
        else:
            color = style.base_color
        button_surface = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        pygame.draw.rect(
            button_surface,
            color,
            button_surface.get_rect(),
            border_radius=style.radius,
        )
        text_color = style.active_text_color if active else style.text_color
        text_surf = get_text_surface(font, self.text, text_color)
        button_surface.blit(text_surf, text_surf.get_rect(center=button_surface.get_rect().center))
        if not enabled:
            button_surface.set_alpha(style.disabled_alpha)
        surface.blit(button_surface, self.rect.topleft)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.enabled and self.rect.collidepoint(event.pos):
                self._callback()
                return True
        return False


def layout_grid(
    origin: tuple[int, int],
    count: int,
    *,
    columns: int,
    cell_size: tuple[int, int],
    gap: int,
) -> list[tuple[int, int, int, int]]:
    x0, y0 = origin
    width, height = cell_size
    rects = []
    for idx in range(count):
        row, col = divmod(idx, columns)
        rects.append((x0 + col * (width + gap), y0 + row * (height + gap), width, height))
    return rects


__all__ = ["ButtonVisualStyle", "ToggleButton", "layout_grid"]
