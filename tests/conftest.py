"""Shared test fixtures — default car plus the reference-car scenario."""

from __future__ import annotations

import pytest

from ev_range.config import (
    EnvironmentParameters,
    ModelCalibration,
    RangeScenario,
    VehicleProfile,
)


@pytest.fixture
def vehicle() -> VehicleProfile:
    return VehicleProfile(
        battery_capacity_kwh=75,
        nominal_consumption_kwh_per_100km=15,
        average_speed_kmh=77,
    )


@pytest.fixture
def compact_suv() -> VehicleProfile:
    """66 kWh compact SUV at 80 km/h, the regression anchor car."""
    return VehicleProfile(
        battery_capacity_kwh=66,
        nominal_consumption_kwh_per_100km=16,
        average_speed_kmh=80,
    )


@pytest.fixture
def environment() -> EnvironmentParameters:
    return EnvironmentParameters(
        wind_speed_kmh=0,
        temperature_c=20,
        road_slope_pct=0,
        recuperation_pct=10,
    )


@pytest.fixture
def calibration() -> ModelCalibration:
    return ModelCalibration()


@pytest.fixture
def scenario(
    vehicle: VehicleProfile,
    environment: EnvironmentParameters,
    calibration: ModelCalibration,
) -> RangeScenario:
    return RangeScenario(vehicle=vehicle, environment=environment, calibration=calibration)
