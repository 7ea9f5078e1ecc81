"""Square roots in the two fixed-point formats used by the drawing code.

``fixed`` values are 32-bit 16.16 numbers; ``sfixed`` values are 16-bit
12.4 numbers used for sub-pixel path coordinates.
"""

FIXED_ONE = 1 << 16
SFIXED_ONE = 1 << 4

_FIXED_MAX = 0x7FFFFFFF
_SFIXED_MAX = 0x7FFF

# Values this close to one are answered with exactly one.
_FIXED_EPSILON = 1 << 7
_SFIXED_EPSILON = 1 << 1


def _digit_sqrt(value: int) -> int:
    """Integer square root by the digit-by-digit method."""
    root = 0
    bit = 1 << ((value.bit_length() - 1) & ~1)
    while bit:
        trial = root + bit
        root >>= 1
        if value >= trial:
            value -= trial
            root += bit
        bit >>= 2
    return root


def _scaled_sqrt(value: int, width: int, frac_bits: int) -> int:
    # Normalise the operand so its top set bit lands on the highest
    # value bit (rounded down to an even shift), take the integer root,
    # then undo the scaling for the fractional bits of the format.
    offset = (width - 1 - value.bit_length()) & ~1
    root = _digit_sqrt(value << offset)
    shift = offset // 2 - frac_bits // 2
    return root >> shift if shift >= 0 else root << -shift


def fixed_sqrt(a: int) -> int:
    """Square root of a 16.16 fixed-point value; non-positive input gives 0."""
    if a > _FIXED_MAX:
        raise ValueError(f"value {a} does not fit a 32-bit fixed-point number")
    if a <= 0:
        return 0
    if FIXED_ONE - _FIXED_EPSILON <= a <= FIXED_ONE + _FIXED_EPSILON:
        return FIXED_ONE
    return _scaled_sqrt(a, 32, 16)


def sfixed_sqrt(a: int) -> int:
    """Square root of a 12.4 fixed-point value; non-positive input gives 0."""
    if a > _SFIXED_MAX:
        raise ValueError(f"value {a} does not fit a 16-bit fixed-point number")
    if a <= 0:
        return 0
    if SFIXED_ONE - _SFIXED_EPSILON <= a <= SFIXED_ONE + _SFIXED_EPSILON:
        return SFIXED_ONE
    return _scaled_sqrt(a, 16, 4)