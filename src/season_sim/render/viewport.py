from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..core.interaction import TransformUnavailable


@dataclass
class ViewportState:
    origin: np.ndarray
    scale: np.ndarray


class ViewportTransform:
    """Placement of the fixed-size diagram viewport inside the window.

    ``to_screen`` is the affine map ``(x * a + e, y * d + f)`` and
    ``to_local`` its inverse. Both raise :class:`TransformUnavailable` until
    the viewport has been mounted.
    """

    def __init__(self, logical_size: tuple[float, float]) -> None:
        self._logical_size = (float(logical_size[0]), float(logical_size[1]))
        self._state: ViewportState | None = None

    @property
    def logical_size(self) -> tuple[float, float]:
        return self._logical_size

    @property
    def mounted(self) -> bool:
        return self._state is not None

    def mount(self, origin: tuple[float, float], scale: float | tuple[float, float]) -> None:
        if isinstance(scale, tuple):
            sx, sy = scale
        else:
            sx = sy = scale
        if sx <= 0.0 or sy <= 0.0:
            raise ValueError("Viewport scale must be positive")
        self._state = ViewportState(
            origin=np.array(origin, dtype=float),
            scale=np.array([sx, sy], dtype=float),
        )

    def fit(self, area: tuple[int, int, int, int]) -> None:
        """Mount with the largest uniform scale that fits ``area`` (x, y, w, h)."""

        x, y, width, height = area
        lw, lh = self._logical_size
        scale = min(width / lw, height / lh)
        if scale <= 0.0:
            self.unmount()
            return
        offset_x = x + (width - lw * scale) / 2.0
        offset_y = y + (height - lh * scale) / 2.0
        self.mount((offset_x, offset_y), scale)

    def unmount(self) -> None:
        self._state = None

    def _require_state(self) -> ViewportState:
        if self._state is None:
            raise TransformUnavailable("viewport is not mounted")
        return self._state

    def to_local(self, screen_pos: tuple[float, float]) -> tuple[float, float]:
        state = self._require_state()
        local = (np.asarray(screen_pos, dtype=float) - state.origin) / state.scale
        return float(local[0]), float(local[1])

    def to_screen(self, local_pos: tuple[float, float]) -> tuple[float, float]:
        state = self._require_state()
        screen = np.asarray(local_pos, dtype=float) * state.scale + state.origin
        return float(screen[0]), float(screen[1])

    def screen_rect(self) -> tuple[int, int, int, int]:
        state = self._require_state()
        lw, lh = self._logical_size
        return (
            int(round(state.origin[0])),
            int(round(state.origin[1])),
            int(round(lw * state.scale[0])),
            int(round(lh * state.scale[1])),
        )

    def contains(self, screen_pos: tuple[float, float]) -> bool:
        if self._state is None:
            return False
        x, y = self.to_local(screen_pos)
        lw, lh = self._logical_size
        return 0.0 <= x <= lw and 0.0 <= y <= lh


__all__ = ["ViewportState", "ViewportTransform"]
