"""Boxes that stack child widgets horizontally or vertically."""

import enum
from dataclasses import dataclass, field

# Stretch a box offers across its stacking direction before children vote.
_CROSS_STRETCH = 10000


class Direction(enum.Enum):
    """The axis along which a box places its children."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass
class Preferred:
    """Natural size of a widget and how eagerly it grows on each axis."""

    width: int = 0
    height: int = 0
    stretch_width: int = 0
    stretch_height: int = 0


@dataclass
class Rect:
    """A rectangle with exclusive right and bottom edges."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


@dataclass(eq=False)
class Widget:
    """A rectangular element placed inside a box."""

    preferred: Preferred = field(default_factory=Preferred)
    want_focus: bool = False
    extents: Rect = field(default_factory=Rect)

    def place(self, extents: Rect) -> None:
        """Give the widget its position within its parent."""
        self.extents = extents

    def contains(self, x: int, y: int) -> bool:
        """Whether a point in the widget's own coordinates lies inside it."""
        return 0 <= x < self.extents.width and 0 <= y < self.extents.height


class Box(Widget):
    """A widget that lays its children out in a row or a column."""

    def __init__(self, direction: Direction = Direction.VERTICAL) -> None:
        super().__init__()
        self.direction = direction
        self.children: list[Widget] = []
        self.focus: Widget | None = None
        self.button_down: Widget | None = None

    def add(self, child: Widget) -> Widget:
        """Append ``child`` and return it."""
        self.children.append(child)
        return child

    def query_geometry(self) -> Preferred:
        """Compute and store this box's preferred geometry from its children."""
        horizontal = self.direction is Direction.HORIZONTAL
        preferred = Preferred(
            stretch_width=0 if horizontal else _CROSS_STRETCH,
            stretch_height=_CROSS_STRETCH if horizontal else 0,
        )
        for child in self.children:
            if isinstance(child, Box):
                child.query_geometry()
            pref = child.preferred
            if horizontal:
                preferred.width += pref.width
                preferred.stretch_width += pref.stretch_width
                preferred.height = max(preferred.height, pref.height)
                preferred.stretch_height = min(preferred.stretch_height, pref.stretch_height)
            else:
                preferred.height += pref.height
                preferred.stretch_height += pref.stretch_height
                preferred.width = max(preferred.width, pref.width)
                preferred.stretch_width = min(preferred.stretch_width, pref.stretch_width)
        self.preferred = preferred
        return preferred

    def place(self, extents: Rect) -> None:
        super().place(extents)
        self._layout()

    def configure(self, width: int, height: int) -> None:
        """Resize the box and share the space out among its children."""
        left, top = self.extents.left, self.extents.top
        self.place(Rect(left, top, left + width, top + height))

    def _layout(self) -> None:
        width = self.extents.width
        height = self.extents.height
        horizontal = self.direction is Direction.HORIZONTAL
        if horizontal:
            stretch = self.preferred.stretch_width
            actual, pref = width, self.preferred.width
        else:
            stretch = self.preferred.stretch_height
            actual, pref = height, self.preferred.height
        stretch = stretch or 1
        delta = remain = actual - pref
        pos = 0
        last = len(self.children) - 1
        for index, child in enumerate(self.children):
            if index == last:
                delta_this = remain
            else:
                share = (child.preferred.stretch_width if horizontal
                         else child.preferred.stretch_height)
                delta_this = _trunc_div(delta * share, stretch)
            delta_this = max(delta_this, remain) if remain < 0 else min(delta_this, remain)
            remain -= delta_this
            if horizontal:
                end = pos + child.preferred.width + delta_this
                extents = Rect(pos, 0, end, height)
            else:
                end = pos + child.preferred.height + delta_this
                extents = Rect(0, pos, width, end)
            pos = end
            child.place(extents)

    def widget_at(self, x: int, y: int) -> Widget | None:
        """The first child whose extents contain the point, if any."""
        return next((child for child in self.children if child.extents.contains(x, y)), None)

    def press_at(self, x: int, y: int) -> Widget | None:
        """Record the child under a button press, moving focus to it if it wants focus."""
        self.button_down = self.widget_at(x, y)
        if self.button_down is not None and self.button_down.want_focus:
            self.focus = self.button_down
        return self.button_down