"""Option codes, gear-ratio bounds, and the speed-to-gear table."""

from enum import IntEnum

import numpy as np

# =============================================================================
# Configuration Options
# =============================================================================


class EngineType(IntEnum):
    I4 = 1
    V6 = 2
    V8 = 3
    DIESEL = 4


class TransmissionType(IntEnum):
    MANUAL = 1
    AUTOMATIC = 2
    CVT = 3


class Trim(IntEnum):
    REGULAR_CAB = 1
    CREW_CAB = 2
    EXTENDED_CAB = 3


class AvailablePackages(IntEnum):
    BASE = 1
    TOWING = 2
    SPORT = 3
    OFF_ROAD = 4


# Field name -> enumeration the integer code must belong to
OPTION_DOMAINS = {
    "engine": EngineType,
    "transmission": TransmissionType,
    "trim": Trim,
    "package_type": AvailablePackages,
}

# =============================================================================
# Gearing
# =============================================================================

MIN_GEAR_RATIO = 1
MAX_GEAR_RATIO = 6

# Ratio requested by PickupTruck.drive()
LAUNCH_GEAR_RATIO = 1

# Lower speed bound (km/h) of gears 2..6; anything below the first bound is gear 1
GEAR_SPEED_THRESHOLDS = np.array([20.0, 40.0, 60.0, 80.0, 100.0])

assert len(GEAR_SPEED_THRESHOLDS) == MAX_GEAR_RATIO - MIN_GEAR_RATIO
assert np.all(np.diff(GEAR_SPEED_THRESHOLDS) > 0), "Gear thresholds must be increasing"
