"""Pickup truck: a frozen configuration plus a current drive state."""

import logging

from pickup_patterns.config.constants import LAUNCH_GEAR_RATIO
from pickup_patterns.config.schema import TruckConfig
from pickup_patterns.drive.drive_state import DriveState
from pickup_patterns.drive.gearing import gear_for_speed
from pickup_patterns.drive.states import INITIAL_STATE

logger = logging.getLogger(__name__)


class PickupTruck:
    """A configured truck. Starts in Park.

    The four option codes never change after construction. Control operations
    ask the current state for a transition and adopt whatever it returns; if
    the transition raises, the current state is kept.
    """

    def __init__(self, engine: int, transmission: int, trim: int, package_type: int):
        self._config = TruckConfig(
            engine=engine,
            transmission=transmission,
            trim=trim,
            package_type=package_type,
        )
        self._state: DriveState = INITIAL_STATE()

    @property
    def config(self) -> TruckConfig:
        return self._config

    @property
    def engine(self) -> int:
        return self._config.engine

    @property
    def transmission(self) -> int:
        return self._config.transmission

    @property
    def trim(self) -> int:
        return self._config.trim

    @property
    def package_type(self) -> int:
        return self._config.package_type

    @property
    def state(self) -> DriveState:
        return self._state

    def _adopt(self, new_state: DriveState, operation: str) -> DriveState:
        logger.debug(f"{operation}: {self._state} -> {new_state}")
        self._state = new_state
        return new_state

    def accelerate(self, target_speed: float) -> DriveState:
        """Shift into the forward gear matching target_speed (km/h)."""
        ratio = gear_for_speed(target_speed)
        return self._adopt(self._state.to_gear_ratio(ratio), f"accelerate({target_speed})")

    def apply_brake(self) -> DriveState:
        return self._adopt(self._state.braking(), "apply_brake")

    def drive(self) -> DriveState:
        return self._adopt(self._state.to_gear_ratio(LAUNCH_GEAR_RATIO), "drive")

    def neutral(self) -> DriveState:
        return self._adopt(self._state.to_neutral(), "neutral")

    def park(self) -> DriveState:
        return self._adopt(self._state.to_park(), "park")

    def reverse(self) -> DriveState:
        return self._adopt(self._state.to_reverse(), "reverse")

    def __repr__(self):
        options = ", ".join(f"{k}={v}" for k, v in self._config.describe().items())
        return f"PickupTruck({options}, state={self._state})"
