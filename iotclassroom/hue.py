"""Controlling colour bulbs through a Hue bridge's local HTTP interface."""

import logging
import re
import socket
from contextlib import closing
from dataclasses import dataclass

log = logging.getLogger(__name__)

DEFAULT_HOST = "192.168.1.5"
DEFAULT_PORT = 80

HUE_RED = 0
HUE_ORANGE = 5000
HUE_YELLOW = 10000
HUE_GREEN = 22500
HUE_BLUE = 45000
HUE_INDIGO = 47500
HUE_VIOLET = 50000
HUE_RAINBOW = (HUE_RED, HUE_ORANGE, HUE_YELLOW, HUE_GREEN, HUE_BLUE, HUE_INDIGO, HUE_VIOLET)

_READ_CHUNK = 4096
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class HueState:
    """What a bulb reported about itself."""

    on: bool = False
    brightness: int = 0
    hue: int = 0


def _default_connect(host, port):
    return socket.create_connection((host, port), timeout=5)


def _to_int(text):
    """Leading integer of ``text``, or 0 when it does not start with one."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def build_state_command(on, color=HUE_BLUE, brightness=255, saturation=255):
    """The JSON body that sets a bulb's state."""
    if not on:
        return '{"on":false}'
    return f'{{"on":true,"sat":{saturation},"bri":{brightness},"hue":{color}}}'


def build_put_request(host, username, light, command):
    """The HTTP request that sends ``command`` to bulb number ``light``."""
    lines = [
        f"PUT /api/{username}/lights/{light}/state HTTP/1.1",
        "keep-alive",
        f"Host: {host}",
        f"Content-Length: {len(command.encode('utf-8'))}",
        "Content-Type: text/plain;charset=UTF-8",
        "",
        command,
        "",
    ]
    return "\r\n".join(lines).encode("utf-8")


def build_get_request(host, username, light):
    """The HTTP request that asks for the state of bulb number ``light``."""
    lines = [
        f"GET /api/{username}/lights/{light} HTTP/1.1",
        f"Host: {host}",
        "Content-type: application/json",
        "keep-alive",
        "",
        "",
    ]
    return "\r\n".join(lines).encode("utf-8")


def parse_state(text):
    """Pick the on, brightness and hue fields out of a bridge response.

    The fields are searched for in that order, each after the previous
    one; a field that is not found reads as off or zero, and so does every
    field after it.
    """
    position = 0

    def field(key):
        nonlocal position
        marker = f'"{key}":'
        found = text.find(marker, position)
        if found < 0:
            position = len(text)
            return ""
        start = found + len(marker)
        end = text.find(",", start)
        if end < 0:
            end = len(text)
        position = min(end + 1, len(text))
        return text[start:end]

    on = field("on") == "true"
    brightness = _to_int(field("bri"))
    hue = _to_int(field("hue"))
    return HueState(on=on, brightness=brightness, hue=hue)


def _read_all(connection):
    chunks = []
    while True:
        try:
            chunk = connection.recv(_READ_CHUNK)
        except OSError:
            break
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks).decode("utf-8", errors="replace")


class HueBridge:
    """A Hue bridge reached at ``host``:``port`` with an API ``username``.

    ``connect(host, port)`` opens a connection with ``sendall``, ``recv``
    and ``close`` methods, raising ``OSError`` when the bridge is out of
    reach. Repeating the last command sent is skipped.
    """

    def __init__(self, host=DEFAULT_HOST, username=None, port=DEFAULT_PORT, connect=None):
        if not username:
            raise ValueError("a bridge username is required")
        self.host = host
        self.username = username
        self.port = port
        self._connect = connect or _default_connect
        self._previous = (0, False, 0, 0, 0)
        self.state = HueState()

    def _open(self):
        try:
            return self._connect(self.host, self.port)
        except OSError as error:
            log.warning("Cannot reach the Hue bridge at %s: %s", self.host, error)
            return None

    def set_hue(self, light, on, color=HUE_BLUE, brightness=255, saturation=255):
        """Set a bulb's state; returns whether a command was sent."""
        request = (light, bool(on), color, brightness, saturation)
        if request == self._previous:
            log.debug("No Change - Cancelling CMD")
            return False
        self._previous = request

        command = build_state_command(on, color, brightness, saturation)
        connection = self._open()
        if connection is None:
            return False
        log.info("Sending Command to Hue: %s", command)
        with closing(connection):
            connection.sendall(build_put_request(self.host, self.username, light, command))
        return True

    def get_hue(self, light):
        """Read a bulb's state, or return None when the bridge is unreachable."""
        connection = self._open()
        if connection is None:
            return None
        with closing(connection):
            connection.sendall(build_get_request(self.host, self.username, light))
            response = _read_all(connection)
        log.debug("Response from Hue: %s", response)
        self.state = parse_state(response)
        log.info("Hue Status: %s", self.state)
        return self.state