"""Turning raw relative, absolute and key input events into pointer events."""

import enum
from collections.abc import Callable
from dataclasses import dataclass

EV_KEY = 0x01
EV_REL = 0x02
EV_ABS = 0x03
REL_X = 0x00
REL_Y = 0x01
ABS_X = 0x00
ABS_Y = 0x01
BTN_LEFT = 0x110


class EventKind(enum.Enum):
    """Kinds of pointer event the tracker produces."""

    MOTION = "motion"
    BUTTON_DOWN = "button_down"
    BUTTON_UP = "button_up"


@dataclass(frozen=True)
class PointerEvent:
    """A pointer event in screen coordinates."""

    kind: EventKind
    x: int
    y: int
    button: int


class PointerTracker:
    """Keep the pointer position and left-button state from raw input.

    The pointer starts at the centre of the screen and is kept within
    ``0..width`` and ``0..height``. Each produced event is passed to
    ``dispatch`` when one is given.
    """

    def __init__(
        self,
        width: int,
        height: int,
        dispatch: Callable[[PointerEvent], None] | None = None,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid screen size {width}x{height}")
        self.width = width
        self.height = height
        self.dispatch = dispatch
        self.x = width // 2
        self.y = height // 2
        self.buttons = 0

    def _clamp(self) -> None:
        self.x = min(max(self.x, 0), self.width)
        self.y = min(max(self.y, 0), self.height)

    def _emit(self, kind: EventKind) -> PointerEvent:
        event = PointerEvent(kind, self.x, self.y, self.buttons)
        if self.dispatch is not None:
            self.dispatch(event)
        return event

    def handle(self, ev_type: int, code: int, value: int) -> PointerEvent | None:
        """Apply one raw event; return the pointer event it caused, if any."""
        if ev_type == EV_REL and code in (REL_X, REL_Y):
            if code == REL_X:
                self.x += value
            else:
                self.y += value
            self._clamp()
            return self._emit(EventKind.MOTION)
        if ev_type == EV_ABS and code in (ABS_X, ABS_Y):
            if code == ABS_X:
                self.x = value
            else:
                self.y = value
            self._clamp()
            return self._emit(EventKind.MOTION)
        if ev_type == EV_KEY and code == BTN_LEFT:
            self.buttons = 1 if value > 0 else 0
            kind = EventKind.BUTTON_DOWN if self.buttons else EventKind.BUTTON_UP
            return self._emit(kind)
        return None