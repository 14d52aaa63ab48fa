"""Tests for speed-to-gear mapping and option validation."""

import numpy as np
import pytest

from pickup_patterns.config.constants import (
    GEAR_SPEED_THRESHOLDS,
    MAX_GEAR_RATIO,
    MIN_GEAR_RATIO,
    EngineType,
)
from pickup_patterns.config.schema import TruckConfig, validate_option
from pickup_patterns.drive.gearing import gear_for_speed
from pickup_patterns.errors import OptionDomainError


class TestGearForSpeed:
    def test_standstill_is_first_gear(self):
        assert gear_for_speed(0) == MIN_GEAR_RATIO

    def test_thresholds_start_next_gear(self):
        for gear, threshold in enumerate(GEAR_SPEED_THRESHOLDS, start=MIN_GEAR_RATIO + 1):
            assert gear_for_speed(float(threshold)) == gear
            assert gear_for_speed(float(threshold) - 0.1) == gear - 1

    def test_top_gear_capped(self):
        assert gear_for_speed(1e6) == MAX_GEAR_RATIO

    def test_monotonic(self):
        gears = [gear_for_speed(s) for s in np.linspace(0, 150, 301)]
        assert gears == sorted(gears)

    def test_returns_plain_int(self):
        assert type(gear_for_speed(np.float64(55.0))) is int

    def test_huge_int_speed_is_domain_error(self):
        """Ints beyond float range are rejected, not left to overflow."""
        with pytest.raises(OptionDomainError):
            gear_for_speed(10**400)

    def test_complex_speed_rejected(self):
        with pytest.raises(OptionDomainError):
            gear_for_speed(np.complex128(5))

    def test_numpy_integer_speed(self):
        assert gear_for_speed(np.int32(45)) == 3

    @pytest.mark.parametrize("speed", [-0.5, float("nan"), float("inf"), "fast", None, True])
    def test_invalid_speed(self, speed):
        with pytest.raises(OptionDomainError):
            gear_for_speed(speed)


class TestOptionValidation:
    def test_accepts_numpy_integers(self):
        assert validate_option("engine", np.int64(3)) == 3

    def test_error_lists_allowed_codes(self):
        with pytest.raises(OptionDomainError) as exc_info:
            validate_option("transmission", 9)
        assert exc_info.value.allowed == [1, 2, 3]
        assert "allowed: [1, 2, 3]" in str(exc_info.value)

    def test_describe(self):
        config = TruckConfig(engine=EngineType.DIESEL, transmission=2, trim=2, package_type=2)
        assert config.describe() == {
            "engine": "DIESEL",
            "transmission": "AUTOMATIC",
            "trim": "CREW_CAB",
            "package_type": "TOWING",
        }
        assert type(config.engine) is int
