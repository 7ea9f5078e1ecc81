"""Frame sequencing for animated images."""

from collections.abc import Sequence
from typing import Any


class Animation:
    """A sequence of frames with per-frame delays in milliseconds.

    Advancing past the last frame wraps to the first when ``loop`` is set
    and otherwise stays on the last frame.
    """

    def __init__(self, frames: Sequence[Any], delays: Sequence[int], loop: bool = True):
        if not frames:
            raise ValueError("an animation needs at least one frame")
        if len(frames) != len(delays):
            raise ValueError(
                f"{len(frames)} frames but {len(delays)} delays were given"
            )
        self.frames = list(frames)
        self.delays = list(delays)
        self.loop = loop
        self.index = 0

    def __len__(self) -> int:
        return len(self.frames)

    def current_frame(self) -> Any:
        """The frame that should be shown now."""
        return self.frames[self.index]

    def current_delay(self) -> int:
        """How long the current frame stays on screen."""
        return self.delays[self.index]

    def advance(self) -> None:
        """Move on to the next frame."""
        self.index += 1
        if self.index >= len(self.frames):
            self.index = 0 if self.loop else len(self.frames) - 1