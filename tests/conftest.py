"""Shared test fixtures."""

import pytest

from pickup_patterns.builder.truck_builder import TruckBuilder
from pickup_patterns.config.constants import (
    AvailablePackages,
    EngineType,
    TransmissionType,
    Trim,
)
from pickup_patterns.fleet.truck import PickupTruck


@pytest.fixture
def off_road_options():
    return {
        "engine": int(EngineType.V6),
        "transmission": int(TransmissionType.MANUAL),
        "trim": int(Trim.EXTENDED_CAB),
        "package_type": int(AvailablePackages.OFF_ROAD),
    }


@pytest.fixture
def truck(off_road_options):
    return PickupTruck(**off_road_options)


@pytest.fixture
def package_step():
    """Builder positioned right before the package choice."""
    return (
        TruckBuilder.light_duty_truck()
        .with_engine(EngineType.V6)
        .and_transmission(TransmissionType.MANUAL)
        .and_trim_option(Trim.EXTENDED_CAB)
    )
