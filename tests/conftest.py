"""Shared fixtures for the season diagram tests."""
import pytest

from season_sim.core.controller import SimulationController
from season_sim.core.interaction import DragStateMachine, PointerHub, TransformUnavailable


class IdentityTransform:
    """Host surface whose screen coordinates equal viewport coordinates."""

    def to_local(self, screen_pos):
        return float(screen_pos[0]), float(screen_pos[1])


class UnmountedTransform:
    """Host surface queried before it has been mounted."""

    def to_local(self, screen_pos):
        raise TransformUnavailable("not mounted")


@pytest.fixture
def controller():
    return SimulationController()


@pytest.fixture
def hub():
    return PointerHub()


@pytest.fixture
def drag(controller, hub):
    return DragStateMachine(controller, IdentityTransform(), hub)


@pytest.fixture
def unmounted_transform():
    return UnmountedTransform()
