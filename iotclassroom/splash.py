"""The start-up image that fills the display buffer before anything is drawn.

The image is laid out the way the panel stores it: pages of eight rows,
one byte per column, bit 0 at the top of each page.
"""

SPLASH_WIDTH = 128

_TOP = bytes.fromhex(
    """
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 80
    80 80 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 80 80 C0 C0 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 80 C0 E0 F0 F8 FC F8 E0 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 80 80 80
    80 80 00 80 80 00 00 00 00 80 80 80 80 80 00 FF
    FF FF 00 00 00 00 80 80 80 80 00 00 80 80 00 00
    80 FF FF 80 80 00 80 80 00 80 80 80 80 00 80 80
    00 00 00 00 00 80 80 00 00 8C 8E 84 00 00 80 F8
    F8 F8 80 00 00 00 00 00 00 00 00 00 00 00 00 00
    F0 F0 F0 F0 F0 F0 F0 F0 F0 F0 F0 F0 E0 E0 C0 80
    00 E0 FC FE FF FF FF 7F FF FF FF FF FF 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 FE FF C7 01 01
    01 01 83 FF FF 00 00 7C FE C7 01 01 01 01 83 FF
    FF FF 00 38 FE C7 83 01 01 01 83 C7 FF FF 00 00
    01 FF FF 01 01 00 FF FF 07 01 01 01 00 00 7F FF
    80 00 00 00 FF FF 7F 00 00 FF FF FF 00 00 01 FF
    FF FF 01 00 00 00 00 00 00 00 00 00 00 00 00 00
    03 0F 3F 7F 7F FF FF FF FF FF FF FF E7 C7 C7 8F
    8F 9F BF FF FF C3 C0 F0 FF FF FF FF FF FC FC FC
    FC FC FC FC FC F8 F8 F0 F0 E0 C0 00 01 03 03 03
    03 03 01 03 03 00 00 00 00 01 03 03 03 03 01 01
    03 01 00 00 00 01 03 03 03 03 01 01 03 03 00 00
    00 03 03 00 00 00 03 03 00 00 00 00 00 00 00 01
    03 03 03 03 03 01 00 00 00 01 03 01 00 00 00 03
    03 01 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    """
)

_BOTTOM = bytes.fromhex(
    """
    00 00 00 80 C0 E0 F0 F9 FF FF FF FF FF 3F 1F 0F
    87 C7 F7 FF FF 1F 1F 3D FC F8 F8 F8 F8 7C 7D FF
    FF FF FF FF FF FF FF 7F 3F 0F 07 00 30 30 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 FE FE FC 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 E0 C0 00
    00 00 00 00 00 00 00 00 00 00 30 30 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 C0 FE FF FF FF FF FF FF FF FF FF 7F 7F 3F 1F
    0F 07 1F 7F FF FF F8 F8 FF FF FF FF FF FE F8 E0
    00 00 00 01 00 00 00 00 00 00 00 00 FE FE 00 00
    00 FC FE FC 0C 06 06 0E FC F8 00 00 F0 F8 1C 0E
    06 06 06 0C FF FF FF 00 00 FE FE 00 00 00 00 FC
    FE FC 00 18 3C 7E 66 E6 CE 84 00 00 06 FF FF 06
    06 FC FE FC 0C 06 06 06 00 00 FE FE 00 00 C0 F8
    FC 4E 46 46 46 4E 7C 78 40 18 3C 76 E6 CE CC 80
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 01 07 0F 1F 1F 3F 3F 3F 3F 1F 0F 03
    00 00 00 00 00 00 00 00 00 00 00 00 0F 0F 00 00
    00 0F 0F 0F 00 00 00 00 0F 0F 00 00 03 07 0E 0C
    18 18 0C 06 0F 0F 0F 00 00 01 0F 0E 0C 18 0C 0F
    07 01 00 04 0E 0C 18 0C 0F 07 00 00 00 0F 0F 00
    00 0F 0F 0F 00 00 00 00 00 00 0F 0F 00 00 00 07
    07 0C 0C 18 1C 0C 06 06 00 04 0E 0C 18 0C 0F 07
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
    """
)


def splash(height):
    """Return the start-up image for a 128-column panel of ``height`` rows.

    Only 32- and 64-row panels are supported.
    """
    if height == 32:
        return _TOP
    if height == 64:
        return _TOP + _BOTTOM
    raise ValueError(f"unsupported display height {height}; expected 32 or 64")