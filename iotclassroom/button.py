"""Push button with press and click (rising edge) detection."""


class Button:
    """A button read through ``read``, a callable returning the pin level.

    With ``pull_up`` the pin idles high and a press reads low.
    """

    def __init__(self, read, pull_up=False):
        self._read = read
        self._pull_up = bool(pull_up)
        self._previous = False

    def _state(self):
        level = bool(self._read())
        return not level if self._pull_up else level

    def is_pressed(self):
        """True while the button is held down."""
        return self._state()

    def is_clicked(self):
        """True once for each press, on the read where it first appears."""
        state = self._state()
        clicked = state if state != self._previous else False
        self._previous = state
        return clicked