import pytest

from iotclassroom.wemo import (
    DEFAULT_ADDRESSES,
    DEFAULT_PORT,
    WemoController,
    build_binary_state_request,
)


class FakeConnection:
    def __init__(self):
        self.sent = b""
        self.closed = False

    def sendall(self, data):
        self.sent += data

    def close(self):
        self.closed = True


class FakeNetwork:
    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []
        self.connections = []

    def __call__(self, host, port):
        self.calls.append((host, port))
        if self.fail:
            raise ConnectionRefusedError("refused")
        connection = FakeConnection()
        self.connections.append(connection)
        return connection


def _split(request):
    head, body = request.split(b"\r\n\r\n", 1)
    return head.split(b"\r\n"), body


def test_request_head():
    lines, _ = _split(build_binary_state_request(True))
    assert lines[0] == b"POST /upnp/control/basicevent1 HTTP/1.1"
    assert b'SOAPACTION: "urn:Belkin:service:basicevent:1#SetBinaryState"' in lines
    assert b"Connection: keep-alive" in lines


@pytest.mark.parametrize("state, marker", [(True, b"<BinaryState>1</BinaryState>"),
                                           (False, b"<BinaryState>0</BinaryState>")])
def test_request_body_carries_state(state, marker):
    _, body = _split(build_binary_state_request(state))
    assert marker in body
    assert body.endswith(b"</s:Envelope>\r\n")


@pytest.mark.parametrize("state", [True, False])
def test_content_length_matches_body(state):
    lines, body = _split(build_binary_state_request(state))
    length = next(int(line.split(b":")[1]) for line in lines if line.startswith(b"Content-Length"))
    assert length == len(body) - 2


def test_switch_on_sends_to_outlet_address():
    network = FakeNetwork()
    controller = WemoController(connect=network)
    assert controller.switch_on(2) is True
    assert network.calls == [(DEFAULT_ADDRESSES[2], DEFAULT_PORT)]
    connection = network.connections[0]
    assert connection.sent == build_binary_state_request(True)
    assert connection.closed


def test_wemo_write_dispatches_on_state():
    network = FakeNetwork()
    controller = WemoController(addresses=["10.0.0.1"], port=1234, connect=network)
    controller.wemo_write(0, True)
    controller.wemo_write(0, False)
    assert [c.sent for c in network.connections] == [
        build_binary_state_request(True),
        build_binary_state_request(False),
    ]
    assert network.calls == [("10.0.0.1", 1234), ("10.0.0.1", 1234)]


def test_unreachable_outlet_returns_false():
    network = FakeNetwork(fail=True)
    controller = WemoController(connect=network)
    assert controller.switch_off(0) is False
    assert network.calls == [(DEFAULT_ADDRESSES[0], DEFAULT_PORT)]


@pytest.mark.parametrize("outlet", [-1, len(DEFAULT_ADDRESSES)])
def test_unknown_outlet_raises(outlet):
    network = FakeNetwork()
    controller = WemoController(connect=network)
    with pytest.raises(IndexError):
        controller.switch_on(outlet)
    assert network.calls == []