import pytest

from iotclassroom import colors
from iotclassroom.colors import to_rgb


def test_to_rgb_documented_values():
    assert to_rgb(colors.ORANGE) == (0xFF, 0xA5, 0x00)
    assert to_rgb(colors.WHITE) == (0xFF, 0xFF, 0xFF)
    assert to_rgb(colors.BLACK) == (0, 0, 0)


def test_rainbow_order():
    assert [to_rgb(color) for color in colors.RAINBOW] == [
        (0xFF, 0x00, 0x00),
        (0xFF, 0xA5, 0x00),
        (0xFF, 0xFF, 0x00),
        (0x00, 0x80, 0x00),
        (0x00, 0x00, 0xFF),
        (0x4B, 0x00, 0x82),
        (0x94, 0x00, 0xD3),
    ]


@pytest.mark.parametrize("color", colors.RAINBOW + (colors.MAIZE, colors.TOMATO))
def test_to_rgb_round_trip(color):
    red, green, blue = to_rgb(color)
    assert (red << 16) | (green << 8) | blue == color
    assert all(0 <= part <= 255 for part in (red, green, blue))


@pytest.mark.parametrize("color", [-1, 0x1000000])
def test_to_rgb_out_of_range(color):
    with pytest.raises(ValueError):
        to_rgb(color)


def test_to_rgb_rejects_non_int():
    with pytest.raises(TypeError):
        to_rgb("red")