"""DC motor on an H-bridge: two direction pins and one PWM pin."""

from __future__ import annotations

from .gpio import PWM_RANGE, PinOutput, PinPwm


class Motor:
    def __init__(self, in1: PinOutput, in2: PinOutput, pwm: PinPwm) -> None:
        self.in1 = in1
        self.in2 = in2
        self.pwm = pwm

    def begin(self) -> None:
        self.in1.begin()
        self.in2.begin()
        self.pwm.begin()

    def move(self, duty: int) -> None:
        """Run at a signed duty of -255 to 255; larger magnitudes are ignored."""
        duty = int(duty)
        magnitude = abs(duty)
        if magnitude > PWM_RANGE:
            return
        if duty >= 0:
            self._drive(True, magnitude)
        else:
            self._drive(False, magnitude)

    def _drive(self, forward: bool, duty: int) -> None:
        self.in1.write(forward)
        self.in2.write(not forward)
        self.pwm.write(duty)