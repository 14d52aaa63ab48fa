"""Concrete drive states, one class per gear mode.

Transition table (anything not listed raises IllegalTransitionError):

    Park     -> Park (self), Reverse, Neutral, Drive(r)
    Drive(r) -> Neutral, Drive(r'), Braking
    Reverse  -> Reverse (self), Neutral, Braking
    Neutral  -> Park, Reverse, Neutral (self), Drive(r), Braking
    Braking  -> Park, Reverse, Neutral, Drive(r), Braking (self)

A moving truck (Drive or Reverse) has to brake or go through Neutral before
it can be parked or change direction.
"""

from dataclasses import dataclass

from pickup_patterns.drive.drive_state import DriveState


@dataclass(frozen=True)
class AtPark(DriveState):
    name = "Park"

    def to_park(self) -> DriveState:
        return self

    def to_reverse(self) -> DriveState:
        return InReverse()

    def to_neutral(self) -> DriveState:
        return InNeutral()

    def _shift(self, ratio: int) -> DriveState:
        return InDrive(ratio)


@dataclass(frozen=True)
class InDrive(DriveState):
    """Forward motion at a given gear ratio."""

    ratio: int = 1

    name = "Drive"

    def to_neutral(self) -> DriveState:
        return InNeutral()

    def braking(self) -> DriveState:
        return Braking()

    def _shift(self, ratio: int) -> DriveState:
        return InDrive(ratio)

    def __str__(self):
        return f"{self.name}({self.ratio})"


@dataclass(frozen=True)
class InReverse(DriveState):
    name = "Reverse"

    def to_reverse(self) -> DriveState:
        return self

    def to_neutral(self) -> DriveState:
        return InNeutral()

    def braking(self) -> DriveState:
        return Braking()


@dataclass(frozen=True)
class InNeutral(DriveState):
    name = "Neutral"

    def to_park(self) -> DriveState:
        return AtPark()

    def to_reverse(self) -> DriveState:
        return InReverse()

    def to_neutral(self) -> DriveState:
        return self

    def braking(self) -> DriveState:
        return Braking()

    def _shift(self, ratio: int) -> DriveState:
        return InDrive(ratio)


@dataclass(frozen=True)
class Braking(DriveState):
    name = "Braking"

    def to_park(self) -> DriveState:
        return AtPark()

    def to_reverse(self) -> DriveState:
        return InReverse()

    def to_neutral(self) -> DriveState:
        return InNeutral()

    def braking(self) -> DriveState:
        return self

    def _shift(self, ratio: int) -> DriveState:
        return InDrive(ratio)


INITIAL_STATE = AtPark
