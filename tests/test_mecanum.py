import pytest

from pibot.gpio import MemoryBackend, PinOutput, PinPwm
from pibot.mecanum import MecanumWheel, wheel_powers
from pibot.motor import Motor

PINS = [(23, 18, 15), (24, 25, 8), (12, 1, 7), (16, 20, 21)]


@pytest.fixture
def backend():
    b = MemoryBackend()
    b.initialise()
    return b


@pytest.fixture
def drive(backend):
    return MecanumWheel(
        Motor(PinOutput(backend, a), PinOutput(backend, b), PinPwm(backend, c))
        for a, b, c in PINS
    )


def test_zero_request():
    assert wheel_powers(0, 0, 0) == (0, 0, 0, 0)


def test_forward_pattern():
    assert wheel_powers(0, 1, 0) == (-1, -1, 1, 1)


@pytest.mark.parametrize(
    "x,y,turn",
    [(1, 1, 1), (-1, 1, 0.5), (0.3, -0.9, 1), (1, -1, -1), (0.2, 0.1, 0.0)],
)
def test_powers_bounded(x, y, turn):
    assert max(abs(p) for p in wheel_powers(x, y, turn)) <= 1 + 1e-9


def test_compression_keeps_ratios_and_peak():
    raw = wheel_powers(0.1, 0.1, 0.1)
    compressed = wheel_powers(1, 1, 1)
    assert max(abs(p) for p in compressed) == pytest.approx(1)
    scale = compressed[3] / raw[3]
    assert compressed == pytest.approx(tuple(p * scale for p in raw))


def test_small_request_not_scaled():
    small = wheel_powers(0.1, 0.2, 0.05)
    doubled = wheel_powers(0.2, 0.4, 0.1)
    assert doubled == pytest.approx(tuple(2 * p for p in small))


def test_turn_drives_all_wheels_same_way():
    powers = wheel_powers(0, 0, 0.5)
    assert len(set(powers)) == 1
    assert powers[0] == 0.5


@pytest.mark.parametrize("count", [0, 3, 5])
def test_requires_four_wheels(backend, count):
    motors = [
        Motor(PinOutput(backend, 1), PinOutput(backend, 2), PinPwm(backend, 3))
        for _ in range(count)
    ]
    with pytest.raises(ValueError):
        MecanumWheel(motors)


def test_begin_configures_all(backend, drive):
    drive.begin()
    assert set(backend.pwm_frequencies) == {c for _, _, c in PINS}


def test_move_forward(backend, drive):
    drive.move(0, 1, 0)
    for index, (in1, in2, pwm) in enumerate(PINS):
        assert backend.duties[pwm] == 255
        forward = index >= 2
        assert backend.levels[in1] == int(forward)
        assert backend.levels[in2] == int(not forward)


def test_stop_zeroes_duties(backend, drive):
    drive.move(1, 0, 0)
    drive.stop()
    assert all(backend.duties[pwm] == 0 for _, _, pwm in PINS)