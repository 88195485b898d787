"""Drive two motors back and forth as a hardware check."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable, Iterable, Sequence
from itertools import count, repeat

from .gpio import GpioBackend, GpioSession, MemoryBackend, PinOutput, PinPwm
from .motor import Motor

TEST_DUTY = 200
STEP_SECONDS = 1.0


def _build_motors(backend: GpioBackend) -> list[Motor]:
    return [
        Motor(PinOutput(backend, 8), PinOutput(backend, 18), PinPwm(backend, 15)),
        Motor(PinOutput(backend, 25), PinOutput(backend, 24), PinPwm(backend, 23)),
    ]


def run_motor_cycle(
    motors: Iterable[Motor],
    cycles: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Run every motor forward, then in reverse, pausing after each step.

    With ``cycles`` of None this repeats forever.
    """
    motors = list(motors)
    rounds = count() if cycles is None else repeat(None, cycles)
    for _ in rounds:
        for duty in (TEST_DUTY, -TEST_DUTY):
            for motor in motors:
                motor.move(duty)
            sleep(STEP_SECONDS)


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return value


def _non_negative_float(text: str) -> float:
    value = float(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pibot", description="Run two motors forward and back in a loop."
    )
    parser.add_argument(
        "--cycles", type=_non_negative, default=None,
        help="number of forward/back cycles (default: run forever)",
    )
    parser.add_argument(
        "--interval", type=_non_negative_float, default=STEP_SECONDS,
        help="seconds to hold each direction",
    )
    args = parser.parse_args(argv)

    def pause(_seconds: float) -> None:
        time.sleep(args.interval)

    with GpioSession(MemoryBackend()) as backend:
        try:
            run_motor_cycle(_build_motors(backend), args.cycles, pause)
        except KeyboardInterrupt:
            pass
    return 0