"""Orbit geometry: orbital angle to viewport position and back."""
from __future__ import annotations

import math

import numpy as np

from .config import ORBIT_CFG, OrbitCfg

FULL_TURN = 360.0


def normalize_angle(angle: float) -> float:
    """Wrap *angle* (degrees) into ``[0, 360)``."""

    wrapped = math.fmod(angle, FULL_TURN)
    if wrapped < 0.0:
        wrapped += FULL_TURN
    # fmod of a tiny negative value can round up to exactly 360
    if wrapped >= FULL_TURN:
        wrapped = 0.0
    return wrapped


def position_for_angle(angle: float, cfg: OrbitCfg = ORBIT_CFG) -> tuple[float, float]:
    """Point on the orbit ellipse for the orbital angle ``angle`` (degrees)."""

    theta = math.radians(angle)
    x = cfg.center_x + cfg.radius_x * math.cos(theta)
    y = cfg.center_y + cfg.radius_y * math.sin(theta)
    return x, y


def angle_for_position(x: float, y: float, cfg: OrbitCfg = ORBIT_CFG) -> float:
    """Inverse of :func:`position_for_angle`, normalised into ``[0, 360)``.

    The offset from the orbit centre is scaled by the semi-axes before
    ``atan2``, so any point (on the ellipse or not) maps to the parameter of
    the ellipse point on the same scaled ray.
    """

    dx = (x - cfg.center_x) / cfg.radius_x
    dy = (y - cfg.center_y) / cfg.radius_y
    angle = math.degrees(math.atan2(dy, dx))
    if angle < 0.0:
        angle += FULL_TURN
    return angle


def angular_distance(a: float, b: float) -> float:
    """Shortest arc between two angles on the circle, in degrees."""

    diff = abs(normalize_angle(a) - normalize_angle(b))
    return min(diff, FULL_TURN - diff)


def distance(p: tuple[float, float], q: tuple[float, float]) -> float:
    return math.hypot(p[0] - q[0], p[1] - q[1])


def sample_orbit(cfg: OrbitCfg = ORBIT_CFG, num_points: int | None = None) -> list[tuple[float, float]]:
    """Closed polyline approximating the orbit ellipse."""

    count = max(3, num_points if num_points is not None else cfg.orbit_outline_samples)
    theta = np.linspace(0.0, 2.0 * math.pi, count + 1)
    xs = cfg.center_x + cfg.radius_x * np.cos(theta)
    ys = cfg.center_y + cfg.radius_y * np.sin(theta)
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


def sun_path_height(elevation: float, max_height: float) -> float:
    """Height of the noon point above the horizon for ``elevation`` degrees."""

    return elevation / 90.0 * max_height


def sun_path_arc(
    elevation: float,
    *,
    center_x: float,
    horizon_y: float,
    half_width: float,
    max_height: float,
    num_points: int = 64,
) -> list[tuple[float, float]]:
    """Daily sun path drawn as the upper half of an ellipse.

    Paths lower than one unit collapse to a flat horizon segment.
    """

    height = sun_path_height(elevation, max_height)
    if height < 1.0:
        return [(center_x - half_width, horizon_y), (center_x + half_width, horizon_y)]
    theta = np.linspace(math.pi, 2.0 * math.pi, max(2, num_points))
    xs = center_x + half_width * np.cos(theta)
    ys = horizon_y + height * np.sin(theta)
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


__all__ = [
    "FULL_TURN",
    "angle_for_position",
    "angular_distance",
    "distance",
    "normalize_angle",
    "position_for_angle",
    "sample_orbit",
    "sun_path_arc",
    "sun_path_height",
]
