import math

import pytest

from pibot.gpio import GpioError, MemoryBackend
from pibot.servo import Servo
from pibot.units import Range, deg_to_rad


@pytest.fixture
def backend():
    b = MemoryBackend()
    b.initialise()
    return b


def test_default_range_endpoints(backend):
    servo = Servo(backend, 2)
    assert servo.pulse_width(0) == pytest.approx(500)
    assert servo.pulse_width(math.pi) == pytest.approx(2500)


def test_custom_range_endpoints(backend):
    servo = Servo(backend, 3, deg_to_rad(270), Range(600, 2400))
    assert servo.pulse_width(0) == pytest.approx(600)
    assert servo.pulse_width(deg_to_rad(270)) == pytest.approx(2400)


def test_pulse_width_increases_with_angle(backend):
    servo = Servo(backend, 2)
    angles = [0.0, 0.5, 1.0, 2.0, 3.0]
    widths = [servo.pulse_width(a) for a in angles]
    assert widths == sorted(widths)
    assert len(set(widths)) == len(widths)


def test_move_sends_truncated_pulse(backend):
    servo = Servo(backend, 4)
    servo.move(1.0)
    expected = servo.pulse_width(1.0)
    assert backend.pulse_widths[4] == int(expected)
    assert backend.pulse_widths[4] <= expected < backend.pulse_widths[4] + 1


def test_move_out_of_range_rejected(backend):
    servo = Servo(backend, 5)
    with pytest.raises(GpioError):
        servo.move(-1.0)
    with pytest.raises(GpioError):
        servo.move(2 * math.pi)
    assert 5 not in backend.pulse_widths