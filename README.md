# tinytwin

Building blocks of a tiny window system, in pure Python with no
dependencies.

## Modules

- `tinytwin.fixed`: square roots of fixed-point numbers. `fixed_sqrt` works
  on 16.16 values and `sfixed_sqrt` on 12.4 values; `FIXED_ONE` and
  `SFIXED_ONE` are the value one in each format. Non-positive input gives 0,
  input too large for the format raises `ValueError`.
- `tinytwin.pixels`: `ArgbImage`, a width × height grid of 32-bit ARGB
  pixels with `get`, `set`, `copy` and `rows`; `apply_alpha` premultiplies
  one loader pixel (alpha in the top byte, red in the lowest byte) into an
  ARGB pixel, and `premultiply_alpha` does so for a whole image in place.
- `tinytwin.blur`: a radius-2 stack blur. `stack` blurs the colour channels
  of one image along rows or columns into another of the same size;
  `stack_blur` blurs an image in place horizontally, then vertically. Alpha
  is left as it was.
- `tinytwin.animation`: `Animation`, a list of frames with per-frame delays.
  `current_frame`, `current_delay` and `advance`; past the last frame it
  wraps when `loop` is set and otherwise stays on the last frame.
- `tinytwin.layout`: box layout. `Box` stacks `Widget`s along a `Direction`
  (`HORIZONTAL` or `VERTICAL`). `query_geometry` sums the children's
  `Preferred` sizes, `configure` shares out the box's space according to the
  children's stretch, `widget_at` finds the child under a point and
  `press_at` records it and moves focus to it when it wants focus. `Rect`
  holds extents with exclusive right and bottom edges.
- `tinytwin.handles`: `HandleEditor`, a set of draggable 16.16 control
  points with `hit`, `button_down`, `motion` and `button_up`.
  `line_editor` gives a two-point line and `spline_editor` four spline
  control points, each with its own `CapStyle` and line width.
- `tinytwin.input`: `PointerTracker` turns raw relative, absolute and
  left-button events (`EV_REL`, `EV_ABS`, `EV_KEY` with `REL_X`, `REL_Y`,
  `ABS_X`, `ABS_Y`, `BTN_LEFT`) into `PointerEvent`s of an `EventKind`,
  keeping the pointer inside the screen and passing each event to an
  optional `dispatch` callback.

## Installing

```
pip install .
```

## Examples

```python
from tinytwin.fixed import fixed_sqrt

print(fixed_sqrt(4 << 16) >> 16)  # 2
```

```python
from tinytwin.layout import Box, Direction, Preferred, Widget

row = Box(Direction.HORIZONTAL)
left = row.add(Widget(Preferred(width=10, stretch_width=1)))
right = row.add(Widget(Preferred(width=10, stretch_width=1)))
row.query_geometry()
row.configure(100, 20)
print(left.extents.right, right.extents.left, right.extents.right)  # 50 50 100
```

```python
from tinytwin.input import EV_REL, REL_X, PointerTracker

tracker = PointerTracker(640, 480)
event = tracker.handle(EV_REL, REL_X, 10)
print(event.kind, event.x, event.y)  # EventKind.MOTION 330 240
```

```python
from tinytwin.handles import line_editor

editor = line_editor()
editor.button_down(50, 50)   # grabs the first point
editor.motion(80, 90)        # drags it
editor.button_up(80, 90)     # drops it
print(editor.points[0] == (80 << 16, 90 << 16))  # True
```

## What it does not do

The package has no screen, windows or display backend and draws nothing:
there is no path filling, compositing, font or text rendering, no window
decorations and no event loop. It does not read devices or image files
itself; input events and pixels are handed to it by the caller, and it
provides no command to run.

## Running the tests

```
pip install .[test]
pytest
```