from __future__ import annotations
import math
from dataclasses import dataclass

# Each compass axis runs from -COMPASS_BOUND (left/libertarian) to +COMPASS_BOUND.
COMPASS_BOUND = 10.0

def _clamp(x: float, lo: float = -COMPASS_BOUND, hi: float = COMPASS_BOUND) -> float:
    return max(lo, min(hi, x))

@dataclass(frozen=True)
class Point:
    """A position on the political compass (x = economic, y = social)."""
    x: float
    y: float

    def add(self, other: "Point") -> "Point":
        # Vector sum, each axis clamped to the compass.
        return Point(_clamp(self.x + other.x), _clamp(self.y + other.y))

    def distance_to(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)
