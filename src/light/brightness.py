from __future__ import annotations

import logging

from light.curve import CurveError, scale
from light.system.backlight import Backlight

log = logging.getLogger(__name__)

PERCENT_DOMAIN = (0.0, 100.0)


def current(backlight: Backlight) -> int:
    return backlight.brightness()


def maximum(backlight: Backlight) -> int:
    return backlight.max_brightness()


def change(backlight: Backlight, delta: float, min_brightness: int) -> int:
    """Move brightness by ``delta`` percentage points and return the new raw value.

    The percentage is taken along an exponential curve from ``min_brightness``
    to the device maximum and clamped to [0, 100], so the written value never
    leaves that range.
    """

    max_brightness = backlight.max_brightness()
    if not 0 < min_brightness < max_brightness:
        raise CurveError(
            f"min_brightness must be between 1 and {max_brightness - 1}, got {min_brightness}"
        )

    curve = scale(PERCENT_DOMAIN, (min_brightness, max_brightness))
    log.debug("k = %s", curve.k)
    log.debug("a = %s", curve.a)

    y0 = backlight.brightness()
    log.debug("y0 = %s", y0)
    if y0 == 0:
        # Backlight off; start from the floor.
        y0 = min_brightness

    x = curve.inverse(y0) + delta
    x = min(max(x, PERCENT_DOMAIN[0]), PERCENT_DOMAIN[1])
    y = curve.forward(x)
    log.debug("x = %s", x)
    log.debug("y = %s", y)

    backlight.set_brightness(y)
    return y


def increase(backlight: Backlight, percent: float, min_brightness: int) -> int:
    return change(backlight, percent, min_brightness)


def decrease(backlight: Backlight, percent: float, min_brightness: int) -> int:
    return change(backlight, -percent, min_brightness)
