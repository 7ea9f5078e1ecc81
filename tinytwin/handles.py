"""Interactive editors that let the pointer drag the control points of a shape."""

import enum
from collections.abc import Sequence

from tinytwin.fixed import FIXED_ONE


class CapStyle(enum.Enum):
    """How the ends of a stroked path are drawn."""

    BUTT = "butt"
    ROUND = "round"
    PROJECTING = "projecting"


def _to_fixed(value: int) -> int:
    return value * FIXED_ONE


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


class HandleEditor:
    """A set of draggable control points.

    Points and the line width are 16.16 fixed-point values. Pointer
    coordinates passed to the event methods are whole pixels. A point is
    grabbed when the pointer lands within half the line width of it on
    both axes. The event methods return True when they consumed the event.
    """

    def __init__(
        self,
        points: Sequence[tuple[int, int]],
        line_width: int,
        cap_style: CapStyle = CapStyle.BUTT,
    ) -> None:
        if not points:
            raise ValueError("an editor needs at least one point")
        self.points = [tuple(point) for point in points]
        self.line_width = line_width
        self.cap_style = cap_style
        self.which: int | None = None
        self.needs_paint = True

    def hit(self, x: int, y: int) -> int | None:
        """Index of the first point near pixel ``(x, y)``, or None."""
        fx, fy = _to_fixed(x), _to_fixed(y)
        reach = _trunc_div(self.line_width, 2)
        return next(
            (
                index
                for index, (px, py) in enumerate(self.points)
                if abs(fx - px) < reach and abs(fy - py) < reach
            ),
            None,
        )

    def _update_position(self, x: int, y: int) -> bool:
        if self.which is None:
            return False
        self.points[self.which] = (_to_fixed(x), _to_fixed(y))
        self.needs_paint = True
        return True

    def button_down(self, x: int, y: int) -> bool:
        """Grab the point under the pointer, if any, and move it there."""
        self.which = self.hit(x, y)
        return self._update_position(x, y)

    def motion(self, x: int, y: int) -> bool:
        """Drag the grabbed point to the pointer."""
        return self._update_position(x, y)

    def button_up(self, x: int, y: int) -> bool:
        """Drop the grabbed point at the pointer."""
        if self.which is None:
            return False
        self._update_position(x, y)
        self.which = None
        return True


def line_editor() -> HandleEditor:
    """A two-point line with a wide projecting-capped stroke."""
    return HandleEditor(
        [(_to_fixed(50), _to_fixed(50)), (_to_fixed(100), _to_fixed(100))],
        line_width=_to_fixed(30),
        cap_style=CapStyle.PROJECTING,
    )


def spline_editor() -> HandleEditor:
    """A cubic spline with four control points and a round-capped stroke."""
    return HandleEditor(
        [
            (_to_fixed(100), _to_fixed(100)),
            (_to_fixed(300), _to_fixed(300)),
            (_to_fixed(100), _to_fixed(300)),
            (_to_fixed(300), _to_fixed(100)),
        ],
        line_width=_to_fixed(100),
        cap_style=CapStyle.ROUND,
    )