"""Simulation controller owning the diagram parameter state."""
from __future__ import annotations

from typing import Callable

from ..data.seasons import (
    SEASONS,
    TILT_EXPLANATIONS,
    AxialTilt,
    Season,
    canonical_angle,
    elevation,
    nearest_season,
    snap,
)
from .compositor import compose, observation_site_offset
from .config import LOG_CFG, ORBIT_CFG, OrbitCfg
from .geometry import normalize_angle, position_for_angle
from .logging_utils import SessionLogger
from .model import RenderModel, SimState

RenderCallback = Callable[[RenderModel], None]


class SimulationController:
    """Single writer of :class:`SimState`.

    Every mutation notifies the subscribed render callbacks with a fresh
    :class:`RenderModel`. Reads never change the state.
    """

    def __init__(
        self,
        cfg: OrbitCfg = ORBIT_CFG,
        *,
        state: SimState | None = None,
        logger: SessionLogger | None = None,
        log_drag_samples: bool = LOG_CFG.log_drag_samples,
    ) -> None:
        self._cfg = cfg
        self._state = state.copy() if state is not None else SimState()
        self._subscribers: list[RenderCallback] = []
        self._logger = logger
        self._log_drag_samples = log_drag_samples
        if logger is not None:
            logger.write_meta(self._session_meta())

    @property
    def cfg(self) -> OrbitCfg:
        return self._cfg

    @property
    def state(self) -> SimState:
        return self._state.copy()

    @property
    def tilt(self) -> AxialTilt:
        return self._state.tilt

    @property
    def season(self) -> Season:
        return self._state.season

    @property
    def orbital_angle(self) -> float:
        return self._state.orbital_angle

    @property
    def is_dragging(self) -> bool:
        return self._state.is_dragging

    def subscribe(self, callback: RenderCallback) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # -- controls -----------------------------------------------------------

    def select_tilt(self, tilt: AxialTilt) -> None:
        self._state.tilt = AxialTilt(tilt)
        self._log_event("select_tilt", {"tilt": self._state.tilt.degrees})
        self._notify()

    def select_season(self, season: Season) -> None:
        season = Season(season)
        self._state.season = season
        self._state.orbital_angle = canonical_angle(season)
        self._log_event("select_season")
        self._notify()

    # -- dragging -----------------------------------------------------------

    def begin_drag(self) -> None:
        self._state.is_dragging = True
        self._log_event("drag_start")
        self._notify()

    def drag_to(self, angle: float) -> None:
        """Move the body to a live, unsnapped orbital angle.

        Ignored unless a drag is in progress.
        """

        state = self._state
        if not state.is_dragging:
            return
        state.orbital_angle = normalize_angle(angle)
        state.season = nearest_season(state.orbital_angle)
        if self._logger is not None and self._log_drag_samples:
            self._logger.log_sample(
                state.orbital_angle,
                state.season.value,
                elevation(state.tilt, state.season),
            )
        self._notify()

    def commit_snap(self) -> Season:
        """Snap the current angle to the nearest season and end the drag.

        Without an active drag the state is already at rest and is left as is.
        """

        state = self._state
        if not state.is_dragging:
            return state.season
        live_angle = state.orbital_angle
        season, angle = snap(live_angle)
        state.season = season
        state.orbital_angle = angle
        state.is_dragging = False
        self._log_event("snap", {"from_angle": live_angle})
        self._notify()
        return season

    # -- read model ---------------------------------------------------------

    def body_position(self) -> tuple[float, float]:
        return position_for_angle(self._state.orbital_angle, self._cfg)

    def body_rotation(self) -> float:
        return self._state.tilt.degrees

    def site_position(self) -> tuple[float, float]:
        offset = observation_site_offset(
            self._state.season,
            self._cfg.body_radius,
            self._cfg.observer_latitude,
        )
        return compose(offset, self.body_position(), self.body_rotation())

    def elevation(self) -> float:
        return elevation(self._state.tilt, self._state.season)

    def read_model(self) -> RenderModel:
        state = self._state
        site = self.site_position()
        earth_tilt = state.tilt is AxialTilt.EARTH
        return RenderModel(
            tilt=state.tilt,
            season=state.season,
            orbital_angle=state.orbital_angle,
            is_dragging=state.is_dragging,
            body_position=self.body_position(),
            body_rotation=self.body_rotation(),
            site_position=site,
            indicator_start=self._cfg.center,
            indicator_end=site,
            elevation=self.elevation(),
            explanation=TILT_EXPLANATIONS[state.tilt],
            season_description=SEASONS[state.season].description if earth_tilt else None,
            season_selection_enabled=earth_tilt,
        )

    # -- internals ----------------------------------------------------------

    def _notify(self) -> None:
        if not self._subscribers:
            return
        model = self.read_model()
        for callback in list(self._subscribers):
            callback(model)

    def _log_event(self, event_type: str, details: dict | None = None) -> None:
        if self._logger is None:
            return
        self._logger.log_event(
            event_type,
            self._state.season.value,
            self._state.orbital_angle,
            details,
        )

    def _session_meta(self) -> dict:
        cfg = self._cfg
        return {
            "orbit_center": list(cfg.center),
            "orbit_radii": [cfg.radius_x, cfg.radius_y],
            "body_radius": cfg.body_radius,
            "observer_latitude": cfg.observer_latitude,
            "initial_tilt": self._state.tilt.degrees,
            "initial_season": self._state.season.value,
            "initial_angle": self._state.orbital_angle,
            "code_version": "SeasonLab v1.0",
        }


__all__ = ["RenderCallback", "SimulationController"]
