"""Switching smart outlets on and off over their SOAP control interface."""

import logging
import socket
from contextlib import closing

log = logging.getLogger(__name__)

DEFAULT_PORT = 49153
DEFAULT_ADDRESSES = (
    "192.168.1.30",
    "192.168.1.31",
    "192.168.1.32",
    "192.168.1.33",
    "192.168.1.34",
    "192.168.1.35",
)

_CONTROL_PATH = "/upnp/control/basicevent1"
_SERVICE = "urn:Belkin:service:basicevent:1"
_SOAP_ENVELOPE_NS = "http://schemas.xmlsoap.org/soap/envelope/"
_SOAP_ENCODING_NS = "http://schemas.xmlsoap.org/soap/encoding/"


def _default_connect(host, port):
    return socket.create_connection((host, port), timeout=5)


def _body(state):
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        f'<s:Envelope xmlns:s="{_SOAP_ENVELOPE_NS}" s:encodingStyle="{_SOAP_ENCODING_NS}">'
        f'<s:Body><u:SetBinaryState xmlns:u="{_SERVICE}">'
        f"<BinaryState>{1 if state else 0}</BinaryState>"
        "</u:SetBinaryState></s:Body></s:Envelope>"
    )


def build_binary_state_request(state):
    """The complete HTTP request that switches an outlet on or off."""
    body = _body(state)
    lines = [
        f"POST {_CONTROL_PATH} HTTP/1.1",
        "Content-Type: text/xml; charset=utf-8",
        f'SOAPACTION: "{_SERVICE}#SetBinaryState"',
        "Connection: keep-alive",
        f"Content-Length: {len(body.encode('utf-8'))}",
        "",
        body,
        "",
    ]
    return "\r\n".join(lines).encode("utf-8")


class WemoController:
    """Sends on/off requests to outlets numbered by their place in ``addresses``.

    ``connect(host, port)`` opens a connection with ``sendall`` and
    ``close`` methods, raising ``OSError`` when the outlet cannot be reached.
    """

    def __init__(self, addresses=DEFAULT_ADDRESSES, port=DEFAULT_PORT, connect=None):
        self.addresses = tuple(addresses)
        self.port = port
        self._connect = connect or _default_connect

    def _address(self, outlet):
        if not 0 <= outlet < len(self.addresses):
            raise IndexError(
                f"outlet {outlet} is outside 0..{len(self.addresses) - 1}"
            )
        return self.addresses[outlet]

    def _send(self, outlet, state):
        host = self._address(outlet)
        try:
            connection = self._connect(host, self.port)
        except OSError as error:
            log.warning("Cannot reach outlet #%d at %s: %s", outlet, host, error)
            return False
        with closing(connection):
            connection.sendall(build_binary_state_request(state))
        return True

    def switch_on(self, outlet):
        """Turn the outlet on; returns whether the request was sent."""
        log.info("Switching On Wemo #%d", outlet)
        return self._send(outlet, True)

    def switch_off(self, outlet):
        """Turn the outlet off; returns whether the request was sent."""
        log.info("Switching Off Wemo #%d", outlet)
        return self._send(outlet, False)

    def wemo_write(self, outlet, state):
        """Switch the outlet to ``state``, like writing a digital pin."""
        return self.switch_on(outlet) if state else self.switch_off(outlet)