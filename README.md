# iotclassroom

Small building blocks for classroom IoT projects, with no runtime
dependencies beyond the standard library.

| Module | What it gives you |
| --- | --- |
| `iotclassroom.hue` | `HueBridge` for setting and reading bulbs on a Hue bridge, plus request builders and a response parser |
| `iotclassroom.wemo` | `WemoController` for switching smart outlets with SOAP `SetBinaryState` requests |
| `iotclassroom.button` | `Button` with press and click (rising edge) detection |
| `iotclassroom.encoder` | `QuadratureDecoder` for two-pin rotary encoders |
| `iotclassroom.timer` | `IoTTimer`, a non-blocking millisecond timer |
| `iotclassroom.colors` | Named 24-bit colours, `RAINBOW` and `to_rgb` |
| `iotclassroom.splash` | `splash(height)`, the start-up image bytes for a 128-column, 32- or 64-row monochrome panel |
| `iotclassroom.app` | `HueDial`, `rainbow_cycle`, `wemo_toggle` and the `iotclassroom` command |

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Reading inputs

`Button` and `QuadratureDecoder` do not touch pins themselves: a button is
given a callable that returns the pin level, and a decoder is fed the two
pin levels whenever they change.

```python
from iotclassroom.button import Button
from iotclassroom.encoder import QuadratureDecoder
from iotclassroom.timer import IoTTimer

levels = iter([False, True, True])
button = Button(lambda: next(levels), False)
button.is_clicked()   # False
button.is_clicked()   # True: the button just went down
button.is_clicked()   # False: still held

decoder = QuadratureDecoder(False, False)
decoder.update(True, False)   # -1
decoder.read()                # -1
decoder.write(0)

ticks = iter([0, 500, 1000])
timer = IoTTimer(lambda: next(ticks))
timer.start_timer(1000)
timer.is_timer_ready()  # False after 500 ms
timer.is_timer_ready()  # True after 1000 ms
```

With `pull_up=True` a button's pin idles high and a press reads low.
`IoTTimer()` without a clock uses the system's monotonic clock.

## Lights

`HueBridge(host, username, port, connect)` talks to a bridge (default host
`192.168.1.5`, port 80). `connect(host, port)` opens the connection; by
default it is a TCP socket, but any object with `sendall`, `recv` and
`close` will do, which makes testing without a bridge easy.

```python
from iotclassroom.hue import HueBridge, HUE_RAINBOW

bridge = HueBridge("192.168.1.5", "placeholder")
bridge.set_hue(3, True, HUE_RAINBOW[4], 200, 255)  # True if sent
bridge.get_hue(3)  # HueState(on=..., brightness=..., hue=...), or None if unreachable
```

`set_hue` skips a command identical to the last one sent and returns
`False` for it, as it does when the bridge cannot be reached.

The request pieces are plain functions:

```python
from iotclassroom.hue import build_state_command, parse_state

build_state_command(True, 45000, 255, 255)
# '{"on":true,"sat":255,"bri":255,"hue":45000}'
build_state_command(False)
# '{"on":false}'

parse_state('{"state":{"on":true,"bri":128,"hue":45000,"sat":254}}')
# HueState(on=True, brightness=128, hue=45000)
```

`build_put_request` and `build_get_request` return the full HTTP request
bytes.

## Outlets

`WemoController(addresses, port, connect)` numbers outlets by their place
in `addresses` (by default `192.168.1.30` to `192.168.1.35`, port 49153).

```python
from iotclassroom.wemo import WemoController, build_binary_state_request

outlets = WemoController()
outlets.wemo_write(0, True)   # same as outlets.switch_on(0)
outlets.switch_off(0)

build_binary_state_request(True)  # the POST request bytes
```

An outlet number outside the list raises `IndexError`; an unreachable
outlet makes the call return `False`.

## Demos

- `HueDial(bridge, bulb, color)`: call `update(encoder_count, clicked)` from
  your loop; the bulb's brightness follows the encoder (four counts per
  detent) and a click toggles it on and off. Past 50 detents the bulb is
  sent brightness zero.
- `rainbow_cycle(bridge, bulb, steps, brightness)`: a generator that steps a
  bulb through `HUE_RAINBOW`, yielding `(colour, brightness, sent)`.
- `wemo_toggle(controller, outlet, cycles, sleep)`: a generator that switches
  an outlet on and off, pausing five seconds after each switch, yielding
  `(on_sent, off_sent)`.

## Command line

```
iotclassroom --help
```

Global options: `--host`, `--port`, `--username` (or the `HUE_USERNAME`
environment variable) and `-v/--verbose`. Commands:

- `iotclassroom set LIGHT [--off] [--color N] [--brightness N] [--saturation N]`
- `iotclassroom get LIGHT` prints `on=... brightness=... hue=...`
- `iotclassroom rainbow [--bulb N] [--steps N] [--delay SECONDS]`
- `iotclassroom wemo [--outlet N] [--cycles N] [--delay SECONDS]`

`set`, `get` and `rainbow` need a bridge username; `wemo` does not. Without
`--steps` or `--cycles` the demos run until interrupted.

## What this package does not do

It does not draw on a display. `iotclassroom.splash` only supplies the
start-up image as page-ordered bytes; there is no code here for drawing
lines, shapes or text, or for sending a frame to an OLED controller.
It also does not read hardware pins itself: buttons and encoders are fed
levels by your own code.