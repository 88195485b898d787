"""Four-wheel mecanum drive."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .gpio import PWM_RANGE
from .motor import Motor

log = logging.getLogger(__name__)


def wheel_powers(x: float, y: float, turn: float) -> tuple[float, float, float, float]:
    """Per-wheel power for a motion request, each component in -1..1.

    If any wheel would exceed 1 in magnitude, all are scaled down together
    so the strongest wheel runs at exactly 1.
    """
    powers = (
        +x - y + turn,
        -x - y + turn,
        -x + y + turn,
        +x + y + turn,
    )
    peak = max(abs(p) for p in powers)
    if peak > 1:
        ratio = 1 / peak
        powers = tuple(p * ratio for p in powers)
    return powers


class MecanumWheel:
    def __init__(self, wheels: Iterable[Motor]) -> None:
        self.wheels = tuple(wheels)
        if len(self.wheels) != 4:
            raise ValueError(f"a mecanum drive needs 4 wheels, got {len(self.wheels)}")

    def begin(self) -> None:
        for wheel in self.wheels:
            wheel.begin()

    def move(self, x: float, y: float, turn: float) -> None:
        for index, (wheel, power) in enumerate(zip(self.wheels, wheel_powers(x, y, turn))):
            duty = power * PWM_RANGE
            log.debug("%d : %s", index, duty)
            wheel.move(int(duty))

    def stop(self) -> None:
        self.move(0, 0, 0)