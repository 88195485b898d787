# pibot

Building blocks for a small robot: DC motors on H-bridge drivers, a
four-wheel mecanum base, hobby servos, a parser for JSON drive commands, and
a WebSocket server that hands each incoming message to a callback. Pins are
reached through a pluggable GPIO backend; the package ships an in-memory one.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The `pibot` command

```
pibot [--cycles N] [--interval SECONDS]
```

Runs two motors (direction pins 8/18 with PWM pin 15, and 25/24 with PWM
pin 23) forward at duty 200, pauses, then in reverse at duty 200, pauses, and
repeats. `--cycles` sets how many forward/back rounds to run (default: run
until interrupted with Ctrl-C); `--interval` sets the pause after each step
in seconds (default 1.0). Both must be non-negative.

## Modules

- `pibot.gpio` — `GpioBackend` is the protocol a GPIO driver provides
  (`initialise`, `terminate`, `set_mode`, `write`, `set_pwm_frequency`, `pwm`,
  `servo`). `MemoryBackend` implements it by recording pin state and every
  call in memory, and raises `GpioError` on anything the hardware would
  reject: use before `initialise`, a pin outside 0–53 (0–31 for PWM and
  servo), a level other than 0 or 1, a negative frequency, a duty outside
  0–255, or a pulse width that is neither 0 nor 500–2500 µs. `GpioSession`
  is a context manager that initialises a backend on entry and terminates it
  on exit. `PinOutput` is a digital output pin; `PinPwm` a PWM pin, set up at
  1000 Hz by default. `PinMode` holds `INPUT` and `OUTPUT`.
- `pibot.motor` — `Motor(in1, in2, pwm)`. `Motor.begin()` sets up its pins;
  `Motor.move(duty)` takes a signed duty from -255 to 255, setting the
  direction pins by its sign and the PWM duty by its magnitude. Magnitudes
  above 255 are ignored.
- `pibot.mecanum` — `wheel_powers(x, y, turn)` mixes a drive request (each
  component -1 to 1) into four wheel powers; if any would exceed 1 in
  magnitude, all four are scaled so the strongest is exactly 1.
  `MecanumWheel` takes exactly four motors (otherwise `ValueError`);
  `move(x, y, turn)` drives them at those powers times 255 and `stop()`
  moves with all zeros.
- `pibot.servo` — `Servo(backend, pin, angle_limit_rad=math.pi,
  pulse_range=Range(500, 2500))` maps an angle linearly onto the pulse range.
  `Servo.pulse_width(angle_rad)` returns the width in microseconds;
  `Servo.move(angle_rad)` sends it, truncated to an integer, to the pin.
- `pibot.units` — `deg_to_rad`, the frozen `Range` pair with `diff()`, and
  the `Vec2` and `XYTurn` value types.
- `pibot.json_parser` — `parse_json(json_string)` accepts `str` or `bytes`
  and returns a `Command` holding a `Wheel` (`x`, `y`, `turn`) and an `Arm`
  (`axis1` to `axis5`). Malformed JSON, `NaN`/`Infinity` literals, missing
  keys and non-numeric values raise `ValueError`.
- `pibot.websocket` — `WebSocketServerConfig` holds `server_port`, an
  optional `host`, and the callbacks `on_server_start(ok)`, `on_open()`,
  `on_close()` and `on_message(text) -> reply`; any of them may be `None`.
  Only the path `/` is served; other paths are closed with code 1008. A
  non-empty reply is sent back as text, or as binary if the message was
  binary. If the port cannot be bound, `on_server_start(False)` is called and
  the server returns. `serve(config)` runs in an existing event loop until
  cancelled; `websocket_server_start(config)` runs it in a new loop.

## Example

```python
from pibot.gpio import GpioSession, MemoryBackend, PinOutput, PinPwm
from pibot.json_parser import parse_json
from pibot.mecanum import MecanumWheel
from pibot.motor import Motor

command = parse_json(
    '{"wheel": {"x": 0.5, "y": 0.0, "turn": 0.1},'
    ' "arm": {"axis1": 0, "axis2": 0.5, "axis3": 1, "axis4": 0, "axis5": 0}}'
)

with GpioSession(MemoryBackend()) as backend:
    drive = MecanumWheel(
        Motor(PinOutput(backend, a), PinOutput(backend, b), PinPwm(backend, p))
        for a, b, p in [(23, 18, 15), (24, 25, 8), (12, 1, 7), (16, 20, 21)]
    )
    drive.begin()
    drive.move(command.wheel.x, command.wheel.y, command.wheel.turn)
    print(backend.duties)
```

## What it does not do

- There is no backend for real GPIO hardware. `MemoryBackend` is the only
  implementation of `GpioBackend`, and the `pibot` command uses it, so the
  command exercises the motor logic without driving any physical pins. To
  control a robot, supply your own class with the `GpioBackend` methods.
- The `pibot` command does not start the WebSocket server and does not act
  on JSON commands; wiring `serve`, `parse_json`, `MecanumWheel` and `Servo`
  together is left to the caller.