"""Small string and geometry helpers."""

from __future__ import annotations

import math
from typing import Any

_WHITESPACE = " \t\n\v\f\r"


def ltrim(text: str) -> str:
    """Strip leading whitespace."""
    return text.lstrip(_WHITESPACE)


def rtrim(text: str) -> str:
    """Strip trailing whitespace."""
    return text.rstrip(_WHITESPACE)


def trim(text: str) -> str:
    """Strip whitespace from both ends."""
    return ltrim(rtrim(text))


def sign(value: float) -> float:
    """-1.0 for negative values, 1.0 otherwise (zero included)."""
    number = float(value)
    if number < 0.0:
        return -1.0
    return 1.0


def dist(a: Any, b: Any) -> float:
    """Euclidean distance between two points with x, y and z attributes."""
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2 + (a.z - b.z) ** 2)


def rad_to_deg(value: float) -> float:
    """Convert radians to degrees."""
    return (float(value) / math.pi) * 180.0


def deg_to_rad(value: float) -> float:
    """Convert degrees to radians."""
    return (float(value) / 180.0) * math.pi