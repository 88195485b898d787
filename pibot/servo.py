"""Hobby servo driven by pulse width."""

from __future__ import annotations

import math

from .gpio import GpioBackend
from .units import Range


class Servo:
    """A servo whose angle maps linearly onto a pulse width range."""

    def __init__(
        self,
        backend: GpioBackend,
        pin: int,
        angle_limit_rad: float = math.pi,
        pulse_range: Range[int] | None = None,
    ) -> None:
        self.backend = backend
        self.pin = pin
        self.angle_limit_rad = angle_limit_rad
        self.pulse_range = pulse_range if pulse_range is not None else Range(500, 2500)

    def pulse_width(self, angle_rad: float) -> float:
        """Pulse width in microseconds for an angle in radians."""
        return (
            angle_rad / self.angle_limit_rad
        ) * self.pulse_range.diff() + self.pulse_range.min

    def move(self, angle_rad: float) -> None:
        self.backend.servo(self.pin, int(self.pulse_width(angle_rad)))