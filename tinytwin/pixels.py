"""ARGB32 pixel storage and alpha premultiplication."""

from collections.abc import Iterable, Iterator

_PIXEL_MASK = 0xFFFFFFFF


def _get_8(value: int, shift: int) -> int:
    return (value >> shift) & 0xFF


def _int_mult(a: int, b: int) -> int:
    """Multiply two 8-bit values as fractions of 255, rounding to nearest."""
    t = a * b + 0x80
    return ((t >> 8) + t) >> 8


class ArgbImage:
    """A rectangular grid of 32-bit ARGB pixels stored row by row."""

    def __init__(self, width: int, height: int, pixels: Iterable[int] | None = None):
        if width < 0 or height < 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        if pixels is None:
            self.pixels = [0] * (width * height)
        else:
            self.pixels = [self._checked(value) for value in pixels]
            if len(self.pixels) != width * height:
                raise ValueError(
                    f"{len(self.pixels)} pixels given for a {width}x{height} image"
                )

    @staticmethod
    def _checked(value: int) -> int:
        if not 0 <= value <= _PIXEL_MASK:
            raise ValueError(f"pixel value {value:#x} is not a 32-bit ARGB value")
        return value

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) is outside a {self.width}x{self.height} image")
        return y * self.width + x

    def get(self, x: int, y: int) -> int:
        """The pixel at column ``x`` of row ``y``."""
        return self.pixels[self._offset(x, y)]

    def set(self, x: int, y: int, value: int) -> None:
        """Store ``value`` at column ``x`` of row ``y``."""
        self.pixels[self._offset(x, y)] = self._checked(value)

    def copy(self) -> "ArgbImage":
        """An independent image with the same size and pixels."""
        return ArgbImage(self.width, self.height, self.pixels)

    def rows(self) -> Iterator[list[int]]:
        """Yield each row of pixels, top to bottom."""
        for y in range(self.height):
            start = y * self.width
            yield self.pixels[start:start + self.width]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArgbImage):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.pixels == other.pixels
        )

    def __repr__(self) -> str:
        return f"ArgbImage({self.width}x{self.height})"


def apply_alpha(value: int) -> int:
    """Premultiply one pixel as delivered by image loaders.

    The input keeps alpha in the top byte and its colour bytes in
    red-lowest order; the result is an ARGB pixel with each colour channel
    scaled by alpha. A fully transparent pixel becomes zero.
    """
    alpha = _get_8(value, 24)
    if not alpha:
        return 0
    return (
        alpha << 24
        | _int_mult(_get_8(value, 0), alpha) << 16
        | _int_mult(_get_8(value, 8), alpha) << 8
        | _int_mult(_get_8(value, 16), alpha)
    )


def premultiply_alpha(image: ArgbImage) -> None:
    """Apply :func:`apply_alpha` to every pixel of ``image`` in place."""
    image.pixels = [apply_alpha(value) for value in image.pixels]