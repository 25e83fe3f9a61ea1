"""Pointer-driven drag interaction for moving the body along its orbit."""
from __future__ import annotations

from enum import Enum, auto
from typing import Callable, Protocol

from .controller import SimulationController
from .geometry import angle_for_position, distance

Point = tuple[float, float]
PointerCallback = Callable[[Point], None]


class TransformUnavailable(Exception):
    """The host surface cannot map screen coordinates yet (not mounted)."""


class SurfaceTransform(Protocol):
    def to_local(self, screen_pos: Point) -> Point:
        ...


class DragState(Enum):
    IDLE = auto()
    DRAGGING = auto()


class PointerHub:
    """Process-wide registry of pointer move/release listeners.

    The host forwards every pointer motion and button release to the hub,
    no matter where on screen it happens.
    """

    MOVE = "move"
    RELEASE = "release"

    def __init__(self) -> None:
        self._listeners: dict[str, list[PointerCallback]] = {self.MOVE: [], self.RELEASE: []}

    def add(self, kind: str, callback: PointerCallback) -> None:
        self._listeners[kind].append(callback)

    def remove(self, kind: str, callback: PointerCallback) -> None:
        listeners = self._listeners[kind]
        if callback in listeners:
            listeners.remove(callback)

    def dispatch(self, kind: str, screen_pos: Point) -> None:
        for callback in list(self._listeners[kind]):
            callback(screen_pos)

    def dispatch_move(self, screen_pos: Point) -> None:
        self.dispatch(self.MOVE, screen_pos)

    def dispatch_release(self, screen_pos: Point) -> None:
        self.dispatch(self.RELEASE, screen_pos)

    def listener_count(self, kind: str | None = None) -> int:
        if kind is not None:
            return len(self._listeners[kind])
        return sum(len(listeners) for listeners in self._listeners.values())


class PointerCapture:
    """Move and release listeners held for the duration of one drag."""

    def __init__(self, hub: PointerHub, on_move: PointerCallback, on_release: PointerCallback) -> None:
        self._hub = hub
        self._on_move = on_move
        self._on_release = on_release
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def acquire(self) -> None:
        if self._active:
            return
        self._hub.add(PointerHub.MOVE, self._on_move)
        self._hub.add(PointerHub.RELEASE, self._on_release)
        self._active = True

    def release(self) -> None:
        if not self._active:
            return
        self._hub.remove(PointerHub.MOVE, self._on_move)
        self._hub.remove(PointerHub.RELEASE, self._on_release)
        self._active = False

    def __enter__(self) -> "PointerCapture":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


class DragStateMachine:
    """Idle/Dragging machine turning pointer events into orbital angles.

    A press on the body starts a drag and acquires a :class:`PointerCapture`;
    moves update the controller's live angle; the release commits the snap.
    The capture is released on release, on :meth:`close` and when starting
    the drag fails.
    """

    def __init__(
        self,
        controller: SimulationController,
        transform: SurfaceTransform,
        hub: PointerHub | None = None,
    ) -> None:
        self._controller = controller
        self._transform = transform
        self._hub = hub if hub is not None else PointerHub()
        self._state = DragState.IDLE
        self._capture: PointerCapture | None = None

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def hub(self) -> PointerHub:
        return self._hub

    @property
    def dragging(self) -> bool:
        return self._state is DragState.DRAGGING

    def hit_test(self, local_pos: Point) -> bool:
        body = self._controller.body_position()
        return distance(local_pos, body) <= self._controller.cfg.body_radius

    def press(self, screen_pos: Point) -> bool:
        """Handle a pointer press; return ``True`` when a drag started."""

        if self._state is DragState.DRAGGING:
            return False
        local = self._local_point(screen_pos)
        if local is None or not self.hit_test(local):
            return False

        capture = PointerCapture(self._hub, self._on_move, self._on_release)
        capture.acquire()
        self._capture = capture
        self._state = DragState.DRAGGING
        try:
            self._controller.begin_drag()
        except Exception:
            self._end_episode()
            raise
        return True

    def close(self) -> None:
        """Tear down, committing any drag in progress."""

        if self._state is not DragState.DRAGGING:
            return
        try:
            self._controller.commit_snap()
        finally:
            self._end_episode()

    def _on_move(self, screen_pos: Point) -> None:
        if self._state is not DragState.DRAGGING:
            return
        local = self._local_point(screen_pos)
        if local is None:
            return
        self._controller.drag_to(angle_for_position(local[0], local[1], self._controller.cfg))

    def _on_release(self, screen_pos: Point) -> None:
        if self._state is not DragState.DRAGGING:
            return
        try:
            self._controller.commit_snap()
        finally:
            self._end_episode()

    def _end_episode(self) -> None:
        if self._capture is not None:
            self._capture.release()
            self._capture = None
        self._state = DragState.IDLE

    def _local_point(self, screen_pos: Point) -> Point | None:
        try:
            return self._transform.to_local(screen_pos)
        except TransformUnavailable:
            return None


__all__ = [
    "DragState",
    "DragStateMachine",
    "PointerCapture",
    "PointerHub",
    "SurfaceTransform",
    "TransformUnavailable",
]
