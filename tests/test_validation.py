"""Pydantic validation tests — invalid inputs are rejected at construction.

Environment fields are deliberately unconstrained (the factors clamp them),
so most checks live on VehicleProfile and ModelCalibration.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ev_range.config import (
    EnvironmentParameters,
    ModelCalibration,
    RangeScenario,
    VehicleProfile,
)


# ═══════════════════════════════════════════════════════════════════════════
# VehicleProfile
# ═══════════════════════════════════════════════════════════════════════════

class TestVehicleValidation:

    def test_defaults_are_valid(self):
        v = VehicleProfile()
        assert v.battery_capacity_kwh > 0
        assert v.nominal_consumption_kwh_per_100km > 0

    def test_zero_battery_rejected(self):
        with pytest.raises(ValidationError):
            VehicleProfile(battery_capacity_kwh=0)

    def test_negative_battery_rejected(self):
        with pytest.raises(ValidationError):
            VehicleProfile(battery_capacity_kwh=-10)

    def test_zero_consumption_rejected(self):
        with pytest.raises(ValidationError):
            VehicleProfile(nominal_consumption_kwh_per_100km=0)

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            VehicleProfile(battery_capacity_kwh="a lot")

    def test_negative_speed_accepted(self):
        """Speed is clamped by the model, not rejected."""
        assert VehicleProfile(average_speed_kmh=-5).average_speed_kmh == -5

    def test_frozen(self):
        v = VehicleProfile()
        with pytest.raises(ValidationError):
            v.battery_capacity_kwh = 10


# ═══════════════════════════════════════════════════════════════════════════
# EnvironmentParameters
# ═══════════════════════════════════════════════════════════════════════════

class TestEnvironmentValidation:

    def test_defaults(self):
        e = EnvironmentParameters()
        assert e.wind_speed_kmh == 0
        assert e.temperature_c == 20
        assert e.road_slope_pct == 0
        assert e.recuperation_pct == 10

    def test_out_of_range_values_accepted(self):
        e = EnvironmentParameters(recuperation_pct=150, road_slope_pct=-100, wind_speed_kmh=-300)
        assert e.recuperation_pct == 150

    def test_frozen(self):
        e = EnvironmentParameters()
        with pytest.raises(ValidationError):
            e.temperature_c = -20


# ═══════════════════════════════════════════════════════════════════════════
# ModelCalibration
# ═══════════════════════════════════════════════════════════════════════════

class TestCalibrationValidation:

    def test_canonical_constants(self):
        c = ModelCalibration()
        assert c.reference_speed_kmh == 77
        assert (c.low_speed_threshold_kmh, c.high_speed_threshold_kmh, c.very_high_speed_threshold_kmh) == (20, 100, 120)
        assert (c.factor_at_low_speed, c.factor_at_high_speed, c.factor_at_very_high_speed) == (1.05, 1.25, 1.20)
        assert c.power_above_very_high_speed == 1.0
        assert c.aerodynamic_drag_share == 0.6
        assert c.ideal_temperature_c == 22
        assert c.cold_penalty_per_degree > c.hot_penalty_per_degree
        assert c.max_recuperation_effectiveness == 0.25
        assert c.miles_per_km == 0.621371

    def test_unordered_thresholds_rejected(self):
        with pytest.raises(ValidationError, match="strictly increasing"):
            ModelCalibration(high_speed_threshold_kmh=130)

    def test_equal_thresholds_rejected(self):
        with pytest.raises(ValidationError):
            ModelCalibration(low_speed_threshold_kmh=100)

    def test_drag_share_above_one_rejected(self):
        with pytest.raises(ValidationError):
            ModelCalibration(aerodynamic_drag_share=1.5)

    def test_full_recuperation_effectiveness_rejected(self):
        """100 % effectiveness would make travel free."""
        with pytest.raises(ValidationError):
            ModelCalibration(max_recuperation_effectiveness=1.0)

    def test_zero_slope_floor_rejected(self):
        with pytest.raises(ValidationError):
            ModelCalibration(min_slope_factor=0)

    def test_zero_wind_floor_rejected(self):
        with pytest.raises(ValidationError):
            ModelCalibration(min_wind_factor=0)


# ═══════════════════════════════════════════════════════════════════════════
# RangeScenario
# ═══════════════════════════════════════════════════════════════════════════

class TestScenarioValidation:

    def test_defaults(self):
        s = RangeScenario()
        assert s.vehicle == VehicleProfile()
        assert s.environment == EnvironmentParameters()
        assert s.calibration == ModelCalibration()

    def test_partial_dict_fills_defaults(self):
        s = RangeScenario.model_validate({"environment": {"temperature_c": -5}})
        assert s.environment.temperature_c == -5
        assert s.environment.recuperation_pct == 10
        assert s.vehicle == VehicleProfile()

    def test_nested_violation_rejected(self):
        with pytest.raises(ValidationError):
            RangeScenario.model_validate({"vehicle": {"battery_capacity_kwh": -1}})
