import pytest

from tinytwin.pixels import ArgbImage, apply_alpha, premultiply_alpha


def test_new_image_is_transparent_black():
    image = ArgbImage(3, 2)
    assert image.pixels == [0] * 6
    assert image.get(2, 1) == 0


def test_set_then_get_round_trip():
    image = ArgbImage(4, 3)
    image.set(1, 2, 0xFF123456)
    assert image.get(1, 2) == 0xFF123456
    assert image.pixels[2 * 4 + 1] == 0xFF123456


def test_rows_follow_pixel_order():
    image = ArgbImage(2, 2, [1, 2, 3, 4])
    assert list(image.rows()) == [[1, 2], [3, 4]]
    assert image.get(0, 1) == 3


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 2)])
def test_out_of_bounds_access_raises(x, y):
    image = ArgbImage(3, 2)
    with pytest.raises(IndexError):
        image.get(x, y)
    with pytest.raises(IndexError):
        image.set(x, y, 0)


def test_invalid_pixel_value_rejected():
    image = ArgbImage(1, 1)
    with pytest.raises(ValueError):
        image.set(0, 0, 1 << 32)
    with pytest.raises(ValueError):
        image.set(0, 0, -1)


def test_wrong_pixel_count_rejected():
    with pytest.raises(ValueError):
        ArgbImage(2, 2, [0, 0, 0])


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        ArgbImage(-1, 2)


def test_copy_is_independent():
    image = ArgbImage(2, 1, [5, 6])
    clone = image.copy()
    assert clone == image
    clone.set(0, 0, 9)
    assert image.get(0, 0) == 5
    assert clone != image


def test_zero_alpha_clears_colour():
    assert apply_alpha(0x00FFFFFF) == 0
    assert apply_alpha(0x00123456) == 0


def test_opaque_black_unchanged():
    assert apply_alpha(0xFF000000) == 0xFF000000


@pytest.mark.parametrize("r, g, b", [(0x11, 0x22, 0x33), (0, 0x80, 0xFF), (0xAB, 0, 7)])
def test_opaque_pixel_reorders_colour_bytes(r, g, b):
    loaded = 0xFF000000 | (b << 16) | (g << 8) | r
    assert apply_alpha(loaded) == 0xFF000000 | (r << 16) | (g << 8) | b


@pytest.mark.parametrize("alpha", [1, 0x40, 0x80, 0xC0, 0xFE])
def test_alpha_is_kept_and_channels_never_grow(alpha):
    r, g, b = 0xFF, 0x80, 0x10
    result = apply_alpha((alpha << 24) | (b << 16) | (g << 8) | r)
    assert result >> 24 == alpha
    assert (result >> 16) & 0xFF <= r
    assert (result >> 8) & 0xFF <= g
    assert result & 0xFF <= b
    assert (result >> 16) & 0xFF <= alpha


def test_premultiplied_white_equals_alpha():
    for alpha in (0x10, 0x80, 0xFF):
        result = apply_alpha((alpha << 24) | 0xFFFFFF)
        assert result == (alpha << 24) | (alpha << 16) | (alpha << 8) | alpha


def test_premultiply_image_matches_per_pixel():
    values = [0x00FFFFFF, 0xFF332211, 0x80FFFFFF, 0x40102030]
    image = ArgbImage(2, 2, values)
    premultiply_alpha(image)
    assert image.pixels == [apply_alpha(v) for v in values]
    assert image.width == 2 and image.height == 2


def test_premultiply_empty_image():
    image = ArgbImage(0, 0)
    premultiply_alpha(image)
    assert image.pixels == []