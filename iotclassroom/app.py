"""Classroom demos: a dial-driven bulb, a rainbow cycle and an outlet toggle."""

import argparse
import itertools
import logging
import os
import random
import sys
import time

from .hue import DEFAULT_HOST, DEFAULT_PORT, HUE_RAINBOW, HueBridge
from .wemo import WemoController

log = logging.getLogger(__name__)

COUNTS_PER_DETENT = 4
DIAL_LIMIT = 50
SWITCH_DELAY = 5.0
RAINBOW_DELAY = 5.0


def _detents(count):
    """Encoder counts to detents, truncating toward zero."""
    quotient = abs(count) // COUNTS_PER_DETENT
    return quotient if count >= 0 else -quotient


class HueDial:
    """A bulb whose brightness follows a rotary encoder and toggles on a click."""

    def __init__(self, bridge, bulb=3, color=HUE_RAINBOW[6]):
        self.bridge = bridge
        self.bulb = bulb
        self.color = color
        self.on = False
        self.position = 0

    def _send(self, brightness):
        return self.bridge.set_hue(self.bulb, self.on, self.color, brightness)

    def update(self, encoder_count, clicked=False):
        """Act on a new encoder count and button click; returns the position used."""
        position = _detents(encoder_count)
        if position != self.position:
            self.position = position
            self._send(position)

        if clicked:
            self.on = not self.on
            self._send(position)

        if position > DIAL_LIMIT:
            # Past the end of the dial the bulb is sent brightness zero.
            position = 0
            self._send(position)

        log.debug("Setting color of bulb %d to color %d", self.bulb, self.color)
        return position


def rainbow_cycle(bridge, bulb=1, steps=None, brightness=None):
    """Step a bulb through the rainbow, yielding (colour, brightness, sent).

    ``brightness`` is a fixed level, a callable giving one, or None for a
    random level from 32 to 254. Without ``steps`` the cycle never ends.
    """
    counter = itertools.count() if steps is None else range(steps)
    for step in counter:
        color = HUE_RAINBOW[step % len(HUE_RAINBOW)]
        if brightness is None:
            level = random.randint(32, 254)
        elif callable(brightness):
            level = brightness()
        else:
            level = brightness
        sent = bridge.set_hue(bulb, True, color, level, 255)
        yield color, level, sent


def wemo_toggle(controller, outlet=0, cycles=None, sleep=time.sleep):
    """Switch an outlet on and off, pausing after each switch.

    Yields (on_sent, off_sent) for every cycle; without ``cycles`` it never ends.
    """
    counter = itertools.count() if cycles is None else range(cycles)
    for _ in counter:
        log.info("Turning on Wemo# %d", outlet)
        on_sent = controller.wemo_write(outlet, True)
        sleep(SWITCH_DELAY)
        log.info("Turning off Wemo# %d", outlet)
        off_sent = controller.wemo_write(outlet, False)
        sleep(SWITCH_DELAY)
        yield on_sent, off_sent


def _parser():
    parser = argparse.ArgumentParser(prog="iotclassroom", description=__doc__)
    parser.add_argument("--host", default=DEFAULT_HOST, help="Hue bridge address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Hue bridge port")
    parser.add_argument(
        "--username",
        default=os.environ.get("HUE_USERNAME"),
        help="Hue bridge username (default: $HUE_USERNAME)",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    commands = parser.add_subparsers(dest="command", required=True)

    set_cmd = commands.add_parser("set", help="set one bulb")
    set_cmd.add_argument("light", type=int)
    set_cmd.add_argument("--off", action="store_true")
    set_cmd.add_argument("--color", type=int, default=HUE_RAINBOW[4])
    set_cmd.add_argument("--brightness", type=int, default=255)
    set_cmd.add_argument("--saturation", type=int, default=255)

    get_cmd = commands.add_parser("get", help="read one bulb")
    get_cmd.add_argument("light", type=int)

    rainbow = commands.add_parser("rainbow", help="cycle a bulb through the rainbow")
    rainbow.add_argument("--bulb", type=int, default=1)
    rainbow.add_argument("--steps", type=int, default=None)
    rainbow.add_argument("--delay", type=float, default=RAINBOW_DELAY)

    wemo = commands.add_parser("wemo", help="toggle an outlet on and off")
    wemo.add_argument("--outlet", type=int, default=0)
    wemo.add_argument("--cycles", type=int, default=None)
    wemo.add_argument("--delay", type=float, default=SWITCH_DELAY)
    return parser


def main(argv=None):
    parser = _parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        if args.command == "wemo":
            controller = WemoController()
            for _ in wemo_toggle(
                controller, args.outlet, args.cycles, lambda _: time.sleep(args.delay)
            ):
                pass
            return 0

        if not args.username:
            parser.error("a Hue username is needed: use --username or set HUE_USERNAME")
        bridge = HueBridge(args.host, args.username, args.port)

        if args.command == "set":
            sent = bridge.set_hue(
                args.light, not args.off, args.color, args.brightness, args.saturation
            )
            return 0 if sent else 1
        if args.command == "get":
            state = bridge.get_hue(args.light)
            if state is None:
                return 1
            print(f"on={state.on} brightness={state.brightness} hue={state.hue}")
            return 0

        for color, _level, _sent in rainbow_cycle(bridge, args.bulb, args.steps):
            print(f"Setting color of bulb {args.bulb} to color {color:06d}")
            time.sleep(args.delay)
        return 0
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())