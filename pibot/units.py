"""Unit helpers and small value types."""

import math
from dataclasses import dataclass


def deg_to_rad(deg: float) -> float:
    return (2 * math.pi) * deg / 360


@dataclass(frozen=True)
class Range:
    min: float
    max: float

    def diff(self) -> float:
        return self.max - self.min


@dataclass(frozen=True)
class Vec2:
    x: float
    y: float


@dataclass(frozen=True)
class XYTurn:
    xy: Vec2
    turn: float