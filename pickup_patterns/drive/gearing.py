"""Target speed to forward gear ratio."""

import math

import numpy as np

from pickup_patterns.config.constants import GEAR_SPEED_THRESHOLDS, MIN_GEAR_RATIO
from pickup_patterns.errors import OptionDomainError


def gear_for_speed(target_speed: float) -> int:
    """Pick the gear ratio for a target speed in km/h.

    Speeds below the first threshold use gear 1; each threshold crossed adds
    one gear, up to the top gear.

    Raises:
        OptionDomainError: for negative, NaN, infinite, non-numeric speeds or
            ints too large to represent as a float.
    """
    if isinstance(target_speed, bool) or not isinstance(
        target_speed, (int, float, np.integer, np.floating)
    ):
        raise OptionDomainError("target speed", target_speed)
    try:
        speed = float(target_speed)
    except OverflowError:
        raise OptionDomainError("target speed", target_speed) from None
    if not math.isfinite(speed) or speed < 0:
        raise OptionDomainError("target speed", target_speed)
    return MIN_GEAR_RATIO + int(np.digitize(speed, GEAR_SPEED_THRESHOLDS))
