"""GPIO backends and pin wrappers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Protocol

MAX_GPIO = 53
MAX_USER_GPIO = 31
PWM_RANGE = 255
MIN_SERVO_PULSE = 500
MAX_SERVO_PULSE = 2500
DEFAULT_PWM_FREQUENCY = 1000


class GpioError(RuntimeError):
    """Raised when the GPIO layer rejects an operation."""


class PinMode(enum.IntEnum):
    INPUT = 0
    OUTPUT = 1


class GpioBackend(Protocol):
    """Operations a GPIO driver must provide."""

    def initialise(self) -> None: ...

    def terminate(self) -> None: ...

    def set_mode(self, pin: int, mode: PinMode) -> None: ...

    def write(self, pin: int, level: int) -> None: ...

    def set_pwm_frequency(self, pin: int, frequency: int) -> None: ...

    def pwm(self, pin: int, duty: int) -> None: ...

    def servo(self, pin: int, pulse_width: int) -> None: ...


@dataclass
class MemoryBackend:
    """Keeps pin state in memory and enforces the hardware's limits."""

    initialised: bool = False
    modes: dict[int, PinMode] = field(default_factory=dict)
    levels: dict[int, int] = field(default_factory=dict)
    pwm_frequencies: dict[int, int] = field(default_factory=dict)
    duties: dict[int, int] = field(default_factory=dict)
    pulse_widths: dict[int, int] = field(default_factory=dict)
    calls: list[tuple] = field(default_factory=list)

    def _check(self, pin: int, limit: int) -> None:
        if not self.initialised:
            raise GpioError("GPIO library is not initialised")
        if not 0 <= pin <= limit:
            raise GpioError(f"bad gpio {pin}: must be 0-{limit}")

    def initialise(self) -> None:
        self.initialised = True
        self.calls.append(("initialise",))

    def terminate(self) -> None:
        self.initialised = False
        self.calls.append(("terminate",))

    def set_mode(self, pin: int, mode: PinMode) -> None:
        self._check(pin, MAX_GPIO)
        self.modes[pin] = PinMode(mode)
        self.calls.append(("set_mode", pin, PinMode(mode)))

    def write(self, pin: int, level: int) -> None:
        self._check(pin, MAX_GPIO)
        if level not in (0, 1):
            raise GpioError(f"bad level {level}")
        self.modes.setdefault(pin, PinMode.OUTPUT)
        self.levels[pin] = int(level)
        self.calls.append(("write", pin, int(level)))

    def set_pwm_frequency(self, pin: int, frequency: int) -> None:
        self._check(pin, MAX_USER_GPIO)
        if frequency < 0:
            raise GpioError(f"bad frequency {frequency}")
        self.pwm_frequencies[pin] = frequency
        self.calls.append(("set_pwm_frequency", pin, frequency))

    def pwm(self, pin: int, duty: int) -> None:
        self._check(pin, MAX_USER_GPIO)
        if not 0 <= duty <= PWM_RANGE:
            raise GpioError(f"bad duty {duty}: must be 0-{PWM_RANGE}")
        self.duties[pin] = duty
        self.calls.append(("pwm", pin, duty))

    def servo(self, pin: int, pulse_width: int) -> None:
        self._check(pin, MAX_USER_GPIO)
        if pulse_width != 0 and not MIN_SERVO_PULSE <= pulse_width <= MAX_SERVO_PULSE:
            raise GpioError(f"bad pulse width {pulse_width}")
        self.pulse_widths[pin] = pulse_width
        self.calls.append(("servo", pin, pulse_width))


class GpioSession:
    """Keeps the GPIO library initialised for the duration of a with-block."""

    def __init__(self, backend: GpioBackend) -> None:
        self.backend = backend

    def __enter__(self) -> GpioBackend:
        self.backend.initialise()
        return self.backend

    def __exit__(self, exc_type, exc, tb) -> None:
        self.backend.terminate()


@dataclass
class PinOutput:
    backend: GpioBackend
    pin: int

    def begin(self) -> None:
        self.backend.set_mode(self.pin, PinMode.OUTPUT)

    def write(self, is_high: bool) -> None:
        self.backend.write(self.pin, 1 if is_high else 0)


@dataclass
class PinPwm:
    backend: GpioBackend
    pin: int
    frequency: int = DEFAULT_PWM_FREQUENCY

    def begin(self) -> None:
        self.backend.set_pwm_frequency(self.pin, self.frequency)

    def write(self, duty: int) -> None:
        self.backend.pwm(self.pin, duty)