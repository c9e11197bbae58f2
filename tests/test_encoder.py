import pytest

from iotclassroom.encoder import QuadratureDecoder

FORWARD = [(False, True), (True, True), (True, False), (False, False)]


def _levels(bits):
    return bool(bits & 1), bool(bits & 2)


@pytest.mark.parametrize(
    "old, new, step",
    [
        (0b00, 0b00, 0),
        (0b01, 0b00, 1),
        (0b10, 0b00, -1),
        (0b11, 0b00, 2),
        (0b00, 0b01, -1),
        (0b01, 0b01, 0),
        (0b10, 0b01, -2),
        (0b11, 0b01, 1),
        (0b00, 0b10, 1),
        (0b01, 0b10, -2),
        (0b10, 0b10, 0),
        (0b11, 0b10, -1),
        (0b00, 0b11, 2),
        (0b01, 0b11, -1),
        (0b10, 0b11, 1),
        (0b11, 0b11, 0),
    ],
)
def test_transition_table(old, new, step):
    decoder = QuadratureDecoder(*_levels(old))
    assert decoder.update(*_levels(new)) == step
    assert decoder.read() == step


def test_starts_at_zero():
    assert QuadratureDecoder(True, False).read() == 0


def test_forward_cycle_then_reverse_returns_home():
    decoder = QuadratureDecoder(False, False)
    for levels in FORWARD:
        decoder.update(*levels)
    forward = decoder.read()
    assert forward > 0
    for levels in reversed([(False, False)] + FORWARD[:-1]):
        decoder.update(*levels)
    assert decoder.read() == 0


def test_forward_cycles_accumulate_linearly():
    decoder = QuadratureDecoder(False, False)
    for levels in FORWARD:
        decoder.update(*levels)
    one = decoder.read()
    for _ in range(2):
        for levels in FORWARD:
            decoder.update(*levels)
    assert decoder.read() == 3 * one


def test_repeated_levels_do_not_move():
    decoder = QuadratureDecoder(True, True)
    for _ in range(5):
        assert decoder.update(True, True) == 0
    assert decoder.read() == 0


def test_write_sets_position_and_counting_continues():
    decoder = QuadratureDecoder(False, False)
    decoder.write(100)
    assert decoder.read() == 100
    step = decoder.update(False, True)
    assert decoder.read() == 100 + step