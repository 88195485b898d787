"""Parsing of the JSON control messages sent by the remote client."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Wheel:
    x: float
    y: float
    turn: float


@dataclass(frozen=True)
class Arm:
    axis1: float
    axis2: float
    axis3: float
    axis4: float
    axis5: float


@dataclass(frozen=True)
class Command:
    wheel: Wheel
    arm: Arm


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal {name}")


def _field(obj: Any, key: str) -> Any:
    if not isinstance(obj, dict):
        raise ValueError(f"expected an object containing {key!r}")
    try:
        return obj[key]
    except KeyError:
        raise ValueError(f"missing key {key!r}") from None


def _number(obj: Any, key: str) -> float:
    value = _field(obj, key)
    if not isinstance(value, (int, float)):
        raise ValueError(f"key {key!r} must be a number")
    try:
        return float(value)
    except OverflowError as exc:
        raise ValueError(f"key {key!r} is out of range") from exc


def parse_json(json_string: str | bytes) -> Command:
    """Parse a control message; raise ValueError if it is not valid."""
    try:
        document = json.loads(json_string, parse_constant=_reject_constant)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc

    wheel = _field(document, "wheel")
    arm = _field(document, "arm")
    return Command(
        wheel=Wheel(*(_number(wheel, key) for key in ("x", "y", "turn"))),
        arm=Arm(*(_number(arm, f"axis{n}") for n in range(1, 6))),
    )