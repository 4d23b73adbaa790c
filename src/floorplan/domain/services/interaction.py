"""Pointer, touch, wheel and keyboard handling for the floor plan canvas.

Input arrives as plain method calls from whatever hosts the canvas. Events
that must be observed outside the canvas while a gesture is in progress
(pointer moves and releases, touch moves and ends) go through a
window-level ``EventTarget``. The controller subscribes to it only for the
lifetime of a gesture, so an idle editor holds no global listeners.
"""

from __future__ import annotations

import logging
import math
from contextlib import ExitStack
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Protocol, Sequence

from ..constants import MOVE_THRESHOLD, PAN_KEYS, SNAP_THRESHOLD, WHEEL_ZOOM_IN, WHEEL_ZOOM_OUT
from ..entities import Table
from ..value_objects import AlignmentGuideLine, Point2D
from .alignment import compute_snap, guide_lines_changed
from .viewport import ViewportTransform

__all__ = [
    "DragGesture",
    "DragOutcome",
    "DragPhase",
    "DragPreview",
    "EventTarget",
    "InteractionController",
    "PointerEvent",
    "TouchEvent",
    "WindowEvents",
]

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None]

POINTER_MOVE = "pointermove"
POINTER_UP = "pointerup"
POINTER_CANCEL = "pointercancel"
TOUCH_MOVE = "touchmove"
TOUCH_END = "touchend"
TOUCH_CANCEL = "touchcancel"


# --- Events ---


@dataclass(frozen=True)
class PointerEvent:
    """Pointer position in client pixels."""

    x: float
    y: float


@dataclass(frozen=True)
class TouchEvent:
    """Active touch points in client pixels."""

    touches: tuple[Point2D, ...]


class EventTarget(Protocol):
    """Something global listeners can be attached to, like a window."""

    def add_listener(self, event_type: str, handler: Handler) -> None: ...

    def remove_listener(self, event_type: str, handler: Handler) -> None: ...

    def dispatch(self, event_type: str, event: Any) -> None: ...


class WindowEvents:
    """In-memory event dispatcher standing in for the browser window."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Handler]] = {}

    def add_listener(self, event_type: str, handler: Handler) -> None:
        self._listeners.setdefault(event_type, []).append(handler)

    def remove_listener(self, event_type: str, handler: Handler) -> None:
        handlers = self._listeners.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
        if not handlers:
            self._listeners.pop(event_type, None)

    def dispatch(self, event_type: str, event: Any) -> None:
        # Copy so handlers may unsubscribe while being called
        for handler in list(self._listeners.get(event_type, ())):
            handler(event)

    def listener_count(self, event_type: str | None = None) -> int:
        """Number of registered handlers, for one event type or all."""
        if event_type is not None:
            return len(self._listeners.get(event_type, ()))
        return sum(len(handlers) for handlers in self._listeners.values())


# --- Drag state machine ---


class DragPhase(str, Enum):
    """Phases of a table drag gesture."""

    IDLE = "idle"
    PENDING = "pending"
    DRAGGING = "dragging"


class DragOutcome(str, Enum):
    """What a released gesture amounted to."""

    NONE = "none"
    CLICK = "click"
    DROP = "drop"


_TRANSITIONS: dict[tuple[DragPhase, str], DragPhase] = {
    (DragPhase.IDLE, "press"): DragPhase.PENDING,
    (DragPhase.PENDING, "exceed"): DragPhase.DRAGGING,
    (DragPhase.PENDING, "release"): DragPhase.IDLE,
    (DragPhase.DRAGGING, "release"): DragPhase.IDLE,
    (DragPhase.PENDING, "cancel"): DragPhase.IDLE,
    (DragPhase.DRAGGING, "cancel"): DragPhase.IDLE,
}


class DragGesture:
    """Press, move and release tracking for a single table.

    A press becomes a drag only once the pointer has travelled more than
    ``move_threshold`` pixels from where it went down. Releasing before that
    is a click.

    Example:
        >>> gesture = DragGesture()
        >>> gesture.press("t1", 0, 0)
        True
        >>> gesture.move(3, 0)
        False
        >>> gesture.release()
        <DragOutcome.CLICK: 'click'>
    """

    def __init__(self, move_threshold: float = MOVE_THRESHOLD) -> None:
        self.move_threshold = move_threshold
        self.phase = DragPhase.IDLE
        self.table_id: str | None = None
        self.start: Point2D | None = None
        self.current: Point2D | None = None

    def _fire(self, action: str) -> bool:
        target = _TRANSITIONS.get((self.phase, action))
        if target is None:
            return False
        logger.debug(f"Drag {self.table_id}: {self.phase.value} -> {target.value}")
        self.phase = target
        return True

    @property
    def delta(self) -> Point2D:
        """Screen travel since the press."""
        if self.start is None or self.current is None:
            return Point2D(0.0, 0.0)
        return Point2D(self.current.x - self.start.x, self.current.y - self.start.y)

    def press(self, table_id: str, x: float, y: float) -> bool:
        if not self._fire("press"):
            return False
        self.table_id = table_id
        self.start = self.current = Point2D(x, y)
        return True

    def move(self, x: float, y: float) -> bool:
        """Track the pointer.

        Returns:
            True if this move turned the press into a drag.
        """
        if self.phase == DragPhase.IDLE:
            return False
        self.current = Point2D(x, y)
        if self.phase == DragPhase.PENDING:
            delta = self.delta
            if math.hypot(delta.x, delta.y) > self.move_threshold:
                return self._fire("exceed")
        return False

    def release(self) -> DragOutcome:
        phase = self.phase
        if not self._fire("release"):
            return DragOutcome.NONE
        return DragOutcome.DROP if phase == DragPhase.DRAGGING else DragOutcome.CLICK

    def cancel(self) -> None:
        self._fire("cancel")
        self.table_id = None
        self.start = self.current = None


@dataclass(frozen=True)
class DragPreview:
    """Uncommitted, snapped position of the table being dragged."""

    table_id: str
    x: float
    y: float


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _touch_distance(a: Point2D, b: Point2D) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def _noop(*_args: Any) -> None:
    return None


class InteractionController:
    """Turns raw input into selection, drag, pan and zoom effects.

    Args:
        viewport: Viewport to convert coordinates and apply zoom and pan to.
        tables: Callable returning the current ordered table list.
        on_select: Called with a table id, or None to clear the selection.
        on_position_change: Called once per completed drag with the
            committed integer top-left position.
        on_guide_lines: Called whenever the visible guide lines change.
        window: Global event target; a private ``WindowEvents`` by default.
        snap_threshold: Maximum centre distance that still snaps.
        move_threshold: Screen pixels a press must travel to become a drag.
    """

    def __init__(
        self,
        viewport: ViewportTransform,
        tables: Callable[[], Sequence[Table]],
        on_select: Callable[[str | None], None] = _noop,
        on_position_change: Callable[[str, int, int], None] = _noop,
        on_guide_lines: Callable[[tuple[AlignmentGuideLine, ...]], None] = _noop,
        window: EventTarget | None = None,
        snap_threshold: float = SNAP_THRESHOLD,
        move_threshold: float = MOVE_THRESHOLD,
    ) -> None:
        self.viewport = viewport
        self._tables = tables
        self.on_select = on_select
        self.on_position_change = on_position_change
        self.on_guide_lines = on_guide_lines
        self.window: EventTarget = window if window is not None else WindowEvents()
        self.snap_threshold = snap_threshold

        self.gesture = DragGesture(move_threshold)
        self.space_pressed = False
        self.is_panning = False
        self.is_pinching = False
        self.drag_preview: DragPreview | None = None
        self.guide_lines: tuple[AlignmentGuideLine, ...] = ()

        self._listeners: ExitStack | None = None
        self._drag_table: Table | None = None
        self._pan_start: Point2D | None = None
        self._pan_origin: Point2D | None = None
        self._pinch_distance = 0.0
        self._pinch_zoom = 1.0

    # --- Listener scoping ---

    def _acquire(self, handlers: dict[str, Handler]) -> None:
        """Subscribe gesture handlers to the window, replacing any others."""
        self._release()
        stack = ExitStack()
        for event_type, handler in handlers.items():
            self.window.add_listener(event_type, handler)
            stack.callback(self.window.remove_listener, event_type, handler)
        self._listeners = stack

    def _release(self) -> None:
        stack, self._listeners = self._listeners, None
        if stack is not None:
            stack.close()

    @property
    def has_active_listeners(self) -> bool:
        return self._listeners is not None

    # --- Guide lines ---

    def _set_guide_lines(self, lines: tuple[AlignmentGuideLine, ...]) -> None:
        if guide_lines_changed(self.guide_lines, lines):
            self.guide_lines = lines
            self.on_guide_lines(lines)

    def _find_table(self, table_id: str | None) -> Table | None:
        for table in self._tables():
            if table.id == table_id:
                return table
        return None

    # --- Keyboard ---

    def key_down(self, key: str, repeat: bool = False) -> bool:
        """Handle a key press; returns True when the key was consumed."""
        if key not in PAN_KEYS:
            return False
        if not repeat:
            self.space_pressed = True
        return True

    def key_up(self, key: str) -> bool:
        if key not in PAN_KEYS:
            return False
        self.space_pressed = False
        self._end_pan()
        return True

    # --- Pointer input ---

    def pointer_down_on_table(self, table_id: str, x: float, y: float) -> None:
        """Pointer pressed over a table."""
        if self.space_pressed:
            self._start_pan(x, y)
            return
        if self.is_pinching:
            return
        table = self._find_table(table_id)
        if table is None or not self.gesture.press(table_id, x, y):
            return
        self._drag_table = table
        self._acquire(
            {
                POINTER_MOVE: self._on_drag_move,
                POINTER_UP: self._on_drag_up,
                POINTER_CANCEL: self._on_cancel,
            }
        )

    def pointer_down_on_canvas(self, x: float, y: float) -> None:
        """Pointer pressed over empty canvas: pans in pan mode, else deselects."""
        if self.space_pressed:
            self._start_pan(x, y)
            return
        if not self.is_panning:
            self.on_select(None)

    def pointer_move(self, x: float, y: float) -> None:
        self.window.dispatch(POINTER_MOVE, PointerEvent(x, y))

    def pointer_up(self, x: float, y: float) -> None:
        self.window.dispatch(POINTER_UP, PointerEvent(x, y))

    def pointer_cancel(self) -> None:
        """Abort whatever gesture is active and return to idle."""
        self.window.dispatch(POINTER_CANCEL, None)
        self.reset()

    def reset(self) -> None:
        self._release()
        self.gesture.cancel()
        self._drag_table = None
        self.drag_preview = None
        self.is_panning = False
        self.is_pinching = False
        self._pan_start = self._pan_origin = None
        self._set_guide_lines(())

    # --- Drag ---

    def _snapped_position(self, table: Table) -> tuple[Point2D, tuple[AlignmentGuideLine, ...]]:
        scale_x, scale_y = self.viewport.scale_factors()
        delta = self.gesture.delta
        candidate_x = table.x + delta.x * scale_x
        candidate_y = table.y + delta.y * scale_y
        snap = compute_snap(
            table, candidate_x, candidate_y, self._tables(), self.snap_threshold
        )
        return snap.apply(candidate_x, candidate_y), snap.guide_lines

    def _on_drag_move(self, event: PointerEvent) -> None:
        table = self._drag_table
        if table is None:
            return
        if self.gesture.move(event.x, event.y):
            logger.debug(f"Drag started for table {table.id}")
            self.on_select(table.id)
            self._set_guide_lines(())
        if self.gesture.phase != DragPhase.DRAGGING:
            return
        position, lines = self._snapped_position(table)
        self.drag_preview = DragPreview(table.id, position.x, position.y)
        self._set_guide_lines(lines)

    def _on_drag_up(self, event: PointerEvent) -> None:
        table = self._drag_table
        try:
            if table is None:
                return
            self.gesture.move(event.x, event.y)
            if self.gesture.phase == DragPhase.DRAGGING:
                position, _ = self._snapped_position(table)
                self.gesture.release()
                x, y = _round_half_up(position.x), _round_half_up(position.y)
                logger.debug(f"Table {table.id} dropped at ({x}, {y})")
                self.on_position_change(table.id, x, y)
            elif self.gesture.release() == DragOutcome.CLICK:
                self.on_select(table.id)
        finally:
            self._release()
            self.gesture.cancel()
            self._drag_table = None
            self.drag_preview = None
            self._set_guide_lines(())

    def _on_cancel(self, _event: Any) -> None:
        self.reset()

    # --- Pan ---

    def _start_pan(self, x: float, y: float) -> None:
        state = self.viewport.state
        self.gesture.cancel()
        self._drag_table = None
        self.is_panning = True
        self._pan_start = Point2D(x, y)
        self._pan_origin = Point2D(state.origin_x, state.origin_y)
        self._acquire(
            {
                POINTER_MOVE: self._on_pan_move,
                POINTER_UP: self._on_pan_up,
                POINTER_CANCEL: self._on_cancel,
            }
        )
        logger.debug(f"Pan started at ({x}, {y})")

    def _on_pan_move(self, event: PointerEvent) -> None:
        if self._pan_start is None or self._pan_origin is None:
            return
        self.viewport.pan_by_screen(
            self._pan_origin,
            event.x - self._pan_start.x,
            event.y - self._pan_start.y,
        )

    def _on_pan_up(self, _event: PointerEvent) -> None:
        self._end_pan()

    def _end_pan(self) -> None:
        if not self.is_panning:
            return
        logger.debug("Pan ended")
        self.is_panning = False
        self._pan_start = self._pan_origin = None
        self._release()

    # --- Touch pinch ---

    def touch_start(self, touches: Sequence[Point2D]) -> bool:
        """Touches went down; two or more start a pinch.

        Returns:
            True if a pinch started.
        """
        if len(touches) < 2:
            return False
        distance = _touch_distance(touches[0], touches[1])
        if distance == 0:
            return False
        # A second finger turns any table press into a pinch
        self.reset()
        self.is_pinching = True
        self._pinch_distance = distance
        self._pinch_zoom = self.viewport.zoom
        self._acquire(
            {
                TOUCH_MOVE: self._on_pinch_move,
                TOUCH_END: self._on_pinch_end,
                TOUCH_CANCEL: self._on_cancel,
            }
        )
        logger.debug(f"Pinch started at zoom {self._pinch_zoom:.3f}")
        return True

    def touch_move(self, touches: Sequence[Point2D]) -> None:
        self.window.dispatch(TOUCH_MOVE, TouchEvent(tuple(touches)))

    def touch_end(self, remaining: Sequence[Point2D]) -> None:
        """Touches lifted; ``remaining`` are the ones still down."""
        self.window.dispatch(TOUCH_END, TouchEvent(tuple(remaining)))

    def touch_cancel(self) -> None:
        """The host aborted all touches; ends any pinch and returns to idle."""
        self.window.dispatch(TOUCH_CANCEL, None)
        self.reset()

    def _on_pinch_move(self, event: TouchEvent) -> None:
        if not self.is_pinching or len(event.touches) < 2:
            return
        first, second = event.touches[0], event.touches[1]
        scale = _touch_distance(first, second) / self._pinch_distance
        self.viewport.zoom_at_point(
            self._pinch_zoom * scale,
            (first.x + second.x) / 2,
            (first.y + second.y) / 2,
        )

    def _on_pinch_end(self, event: TouchEvent) -> None:
        if len(event.touches) >= 2:
            return
        logger.debug(f"Pinch ended at zoom {self.viewport.zoom:.3f}")
        self.is_pinching = False
        self._release()

    # --- Wheel ---

    def wheel(
        self,
        delta_y: float,
        x: float,
        y: float,
        ctrl: bool = False,
        meta: bool = False,
    ) -> bool:
        """Zoom on ctrl/cmd + wheel, anchored at the pointer.

        Returns:
            True if the event was consumed and should not scroll the page.
        """
        if not (ctrl or meta):
            return False
        factor = WHEEL_ZOOM_OUT if delta_y > 0 else WHEEL_ZOOM_IN
        self.viewport.zoom_at_point(self.viewport.zoom * factor, x, y)
        return True
