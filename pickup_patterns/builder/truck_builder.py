"""Step builder for light-duty pickup trucks.

Usage:
    truck = (
        TruckBuilder.light_duty_truck()
        .with_engine(EngineType.V6)
        .and_transmission(TransmissionType.MANUAL)
        .and_trim_option(Trim.EXTENDED_CAB)
        .and_package(AvailablePackages.OFF_ROAD)
        .build()
    )

Every step is a new frozen object carrying the options chosen so far, so an
intermediate step can be reused to branch several builds.
"""

import logging
from dataclasses import dataclass

from pickup_patterns.builder.steps import (
    EngineBuildStep,
    PackageOptionBuildStep,
    PickupTruckBuilder,
    TransmissionBuildStep,
    TrimOptionBuildStep,
)
from pickup_patterns.config.schema import validate_option
from pickup_patterns.fleet.truck import PickupTruck

logger = logging.getLogger(__name__)


class TruckBuilder:
    """Entry point only; cannot be instantiated."""

    def __init__(self):
        raise TypeError("Use TruckBuilder.light_duty_truck() to start a build")

    @staticmethod
    def light_duty_truck() -> EngineBuildStep:
        return _EngineStep()


@dataclass(frozen=True)
class _EngineStep(EngineBuildStep):
    def with_engine(self, engine_type: int) -> TransmissionBuildStep:
        return _TransmissionStep(engine=validate_option("engine", engine_type))


@dataclass(frozen=True)
class _TransmissionStep(TransmissionBuildStep):
    engine: int

    def and_transmission(self, transmission_type: int) -> TrimOptionBuildStep:
        return _TrimStep(
            engine=self.engine,
            transmission=validate_option("transmission", transmission_type),
        )


@dataclass(frozen=True)
class _TrimStep(TrimOptionBuildStep):
    engine: int
    transmission: int

    def and_trim_option(self, trim_type: int) -> PackageOptionBuildStep:
        return _PackageStep(
            engine=self.engine,
            transmission=self.transmission,
            trim=validate_option("trim", trim_type),
        )


@dataclass(frozen=True)
class _PackageStep(PackageOptionBuildStep):
    engine: int
    transmission: int
    trim: int

    def and_package(self, package_type: int) -> PickupTruckBuilder:
        return _ReadyToBuild(
            engine=self.engine,
            transmission=self.transmission,
            trim=self.trim,
            package_type=validate_option("package_type", package_type),
        )


@dataclass(frozen=True)
class _ReadyToBuild(PickupTruckBuilder):
    engine: int
    transmission: int
    trim: int
    package_type: int

    def build(self) -> PickupTruck:
        truck = PickupTruck(
            engine=self.engine,
            transmission=self.transmission,
            trim=self.trim,
            package_type=self.package_type,
        )
        logger.debug(f"Built {truck!r}")
        return truck
