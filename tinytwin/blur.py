"""Stack blur of ARGB32 images.

Each pass runs a radius-2 stack blur along every line of the image. Edge
pixels are repeated past the ends of a line. The three colour channels are
blurred and the alpha channel is copied unchanged.
"""

from collections.abc import Sequence

from tinytwin.pixels import ArgbImage

RADIUS = 2
# Sum of the stack weights 1, 2, 3, 2, 1 for a radius of two.
_DIVISOR = 9
_SUM_MASK = 0xFFFF
_ALPHA_MASK = 0xFF000000
_CHANNEL_SHIFTS = (0, 8, 16)


def _blur_channel(values: Sequence[int]) -> list[int]:
    """Blur one 8-bit channel along a line with edge pixels repeated."""
    count = len(values)
    if not count:
        return []
    last = count - 1
    first = values[0]

    sum_out = 0
    sum_in = 0
    total = 0
    for i in range(RADIUS):
        sum_out = (sum_out + first) & _SUM_MASK
        total = (total + (i + 1) * first) & _SUM_MASK
    for i in range(RADIUS):
        value = values[min(i, last)]
        sum_in = (sum_in + value) & _SUM_MASK
        total = (total + (RADIUS - i) * value) & _SUM_MASK

    result = []
    for cur, current in enumerate(values):
        old = values[max(cur - RADIUS, 0)]
        new = values[min(cur + RADIUS, last)]
        sum_out = (sum_out + current) & _SUM_MASK
        sum_in = (sum_in + new) & _SUM_MASK
        total = (total + sum_in) & _SUM_MASK
        result.append(((total // _DIVISOR) & _SUM_MASK) & 0xFF)
        total = (total - sum_out) & _SUM_MASK
        sum_out = (sum_out - old) & _SUM_MASK
        sum_in = (sum_in - current) & _SUM_MASK
    return result


def _blur_line(line: Sequence[int]) -> list[int]:
    """Blur the colour channels of one line of ARGB pixels."""
    channels = [
        _blur_channel([(pixel >> shift) & 0xFF for pixel in line])
        for shift in _CHANNEL_SHIFTS
    ]
    return [
        (pixel & _ALPHA_MASK) | blue | (green << 8) | (red << 16)
        for pixel, blue, green, red in zip(line, *channels)
    ]


def stack(target: ArgbImage, source: ArgbImage, horizontal: bool) -> None:
    """Blur ``source`` along rows (or columns) and store the result in ``target``."""
    if (target.width, target.height) != (source.width, source.height):
        raise ValueError(
            f"target is {target.width}x{target.height} "
            f"but source is {source.width}x{source.height}"
        )
    width, height = source.width, source.height
    pixels = source.pixels
    if horizontal:
        for y in range(height):
            start = y * width
            target.pixels[start:start + width] = _blur_line(pixels[start:start + width])
    else:
        for x in range(width):
            column = pixels[x::width] if width else []
            for y, value in enumerate(_blur_line(column)):
                target.pixels[y * width + x] = value


def stack_blur(image: ArgbImage) -> None:
    """Blur ``image`` in place, horizontally and then vertically."""
    scratch = image.copy()
    stack(scratch, image, True)
    stack(image, scratch, False)