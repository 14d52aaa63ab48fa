"""Base drive state: every transition is illegal unless a state overrides it."""

from abc import ABC

import numpy as np

from pickup_patterns.config.constants import MAX_GEAR_RATIO, MIN_GEAR_RATIO
from pickup_patterns.errors import IllegalTransitionError, OptionDomainError


class DriveState(ABC):
    """A gear/drive mode. Transitions return the next state and never mutate self.

    Concrete states override the transitions they allow. Anything left to the
    base class raises IllegalTransitionError.
    """

    name = "DriveState"

    def _illegal(self, operation: str):
        raise IllegalTransitionError(self.name, operation)

    def to_park(self) -> "DriveState":
        self._illegal("to_park")

    def to_reverse(self) -> "DriveState":
        self._illegal("to_reverse")

    def to_neutral(self) -> "DriveState":
        self._illegal("to_neutral")

    def braking(self) -> "DriveState":
        self._illegal("braking")

    def to_gear_ratio(self, ratio: int) -> "DriveState":
        """Shift into a forward gear.

        The ratio is range-checked before the transition itself is looked up,
        so a bad ratio is reported as a domain error from every state.
        """
        if isinstance(ratio, bool) or not isinstance(ratio, (int, np.integer)) or not (
            MIN_GEAR_RATIO <= ratio <= MAX_GEAR_RATIO
        ):
            raise OptionDomainError(
                "gear ratio", ratio, list(range(MIN_GEAR_RATIO, MAX_GEAR_RATIO + 1))
            )
        return self._shift(int(ratio))

    def _shift(self, ratio: int) -> "DriveState":
        self._illegal(f"to_gear_ratio({ratio})")

    def __str__(self):
        return self.name
