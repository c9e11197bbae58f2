"""Quadrature decoder for rotary encoders.

The decoder is fed the levels of the encoder's two pins whenever either
of them changes. It accumulates a signed position: one full detent of a
typical encoder moves the position by four counts.
"""

# Index: new pin2 << 3 | new pin1 << 2 | old pin2 << 1 | old pin1.
# Transitions 3, 6, 9 and 12 skip a state; they are assumed to be two
# steps on pin1 edges only.
_STEPS = (0, 1, -1, 2, -1, 0, -2, 1, 1, -2, 0, -1, 2, -1, 1, 0)


class QuadratureDecoder:
    """Tracks the position of a two-pin quadrature encoder.

    ``pin1`` and ``pin2`` are the pin levels read when the encoder is set
    up; the position starts at zero.
    """

    def __init__(self, pin1=True, pin2=True):
        self._state = int(bool(pin1)) | int(bool(pin2)) << 1
        self._position = 0

    def update(self, pin1, pin2):
        """Take new pin levels and return the step they caused (-2..2)."""
        levels = int(bool(pin1)) | int(bool(pin2)) << 1
        transition = self._state | (levels << 2)
        self._state = levels
        step = _STEPS[transition]
        self._position += step
        return step

    def read(self):
        """The current position in counts."""
        return self._position

    def write(self, position):
        """Set the position, for example to zero it."""
        self._position = int(position)