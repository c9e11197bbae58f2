"""Named 24-bit RGB colours for LED strips and pixels."""

BLACK = 0x000000
WHITE = 0xFFFFFF
RED = 0xFF0000
LIME = 0x00FF00
BLUE = 0x0000FF
YELLOW = 0xFFFF00
CYAN = 0x00FFFF
MAGENTA = 0xFF00FF
SILVER = 0xC0C0C0
GRAY = 0x808080
MAROON = 0x800000
OLIVE = 0x808000
GREEN = 0x008000
PURPLE = 0x800080
TEAL = 0x008080
NAVY = 0x000080
ORANGE = 0xFFA500
INDIGO = 0x4B0082
VIOLET = 0x9400D3
MAIZE = 0xF2C649
PINK = 0xFFC0CB
TURQUOISE = 0x40E0D0
CARROT = 0xED9121
CHOCOLATE = 0xD2691E
SALMON = 0xC67171
TOMATO = 0xFF6347

RAINBOW = (RED, ORANGE, YELLOW, GREEN, BLUE, INDIGO, VIOLET)


def to_rgb(color):
    """Split a 0xRRGGBB colour into its (red, green, blue) components."""
    if isinstance(color, bool) or not isinstance(color, int):
        raise TypeError(f"colour must be an int, got {type(color).__name__}")
    if not 0 <= color <= 0xFFFFFF:
        raise ValueError(f"colour {color:#x} is outside 0x000000..0xFFFFFF")
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF