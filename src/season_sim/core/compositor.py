"""Placement of body-local points onto the tilted body on screen."""
from __future__ import annotations

import math

import numpy as np

from ..data.seasons import Season


def rotation_matrix(degrees: float) -> np.ndarray:
    """2x2 rotation for viewport coordinates (y axis pointing down)."""

    rad = math.radians(degrees)
    cos_a = math.cos(rad)
    sin_a = math.sin(rad)
    return np.array([[cos_a, -sin_a], [sin_a, cos_a]], dtype=float)


def rotate(offset: tuple[float, float], degrees: float) -> tuple[float, float]:
    """Rotate a local offset about the body's own origin."""

    rotated = rotation_matrix(degrees) @ np.asarray(offset, dtype=float)
    return float(rotated[0]), float(rotated[1])


def compose(
    offset: tuple[float, float],
    anchor: tuple[float, float],
    degrees: float,
) -> tuple[float, float]:
    """Rotate ``offset`` by ``degrees`` and then translate it to ``anchor``."""

    rx, ry = rotate(offset, degrees)
    return anchor[0] + rx, anchor[1] + ry


def compose_many(
    offsets: list[tuple[float, float]],
    anchor: tuple[float, float],
    degrees: float,
) -> list[tuple[float, float]]:
    if not offsets:
        return []
    local = np.asarray(offsets, dtype=float)
    rotated = local @ rotation_matrix(degrees).T
    rotated += np.asarray(anchor, dtype=float)
    return [(float(x), float(y)) for x, y in rotated]


def observation_site_offset(season: Season, radius: float, latitude: float) -> tuple[float, float]:
    """Local position of the observation site on the visible disc.

    At the solstices the site sits on the sun-facing limb at ``latitude``
    (right side in summer, left side in winter). At the equinoxes it sits on
    the rotation axis a quarter radius above the centre.
    """

    lat = math.radians(latitude)
    if season is Season.SUMMER:
        return radius * math.cos(lat), -radius * math.sin(lat)
    if season is Season.WINTER:
        return -radius * math.cos(lat), -radius * math.sin(lat)
    return 0.0, -radius / 4.0


def body_outline(radius: float, axis_overhang: float) -> dict[str, list[tuple[float, float]]]:
    """Local-frame segments of the body's rotation axis and equator."""

    return {
        "axis": [(0.0, -radius - axis_overhang), (0.0, radius + axis_overhang)],
        "equator": [(-radius, 0.0), (radius, 0.0)],
    }


__all__ = [
    "body_outline",
    "compose",
    "compose_many",
    "observation_site_offset",
    "rotate",
    "rotation_matrix",
]
