from __future__ import annotations

import math
from dataclasses import dataclass

Domain = tuple[float, float]
Range = tuple[int, int]


class CurveError(ValueError):
    pass


@dataclass(frozen=True)
class Curve:
    """Exponential curve ``y = k * a**x``.

    Brightness perception is roughly logarithmic, so equal percentage steps
    along this curve look like equal steps on screen.
    """

    k: float
    a: float

    def evaluate(self, x: float) -> float:
        return self.k * self.a**x

    def forward(self, x: float) -> int:
        """Map a percentage to raw brightness, rounding half up."""

        return math.floor(self.evaluate(x) + 0.5)

    def inverse(self, y: float) -> float:
        if y <= 0:
            raise CurveError(f"Cannot invert non-positive brightness: {y}")
        return math.log(y / self.k) / math.log(self.a)


def scale(domain: Domain, rng: Range) -> Curve:
    """Fit the curve through ``(domain[0], rng[0])`` and ``(domain[1], rng[1])``."""

    x1, x2 = float(domain[0]), float(domain[1])
    y1, y2 = float(rng[0]), float(rng[1])
    if x1 == x2:
        raise CurveError(f"Domain endpoints must differ: {x1} == {x2}")
    if y1 <= 0 or y2 <= 0:
        raise CurveError(f"Range endpoints must be positive: ({rng[0]}, {rng[1]})")
    if y1 == y2:
        raise CurveError(f"Range endpoints must differ: {rng[0]} == {rng[1]}")

    k = y2 ** (x1 / (x1 - x2)) * y1 ** (x2 / (x2 - x1))
    a = (y1 / y2) ** (1 / (x1 - x2))
    return Curve(k=k, a=a)
