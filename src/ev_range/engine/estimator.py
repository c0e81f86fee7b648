"""Range estimator — combines the correction factors into a remaining range.

Pure arithmetic: VehicleProfile + EnvironmentParameters → RangeEstimate.
"""

from __future__ import annotations

import logging
import math

from ev_range.config.calibration import DEFAULT_CALIBRATION, ModelCalibration
from ev_range.config.environment import EnvironmentParameters
from ev_range.config.vehicle import VehicleProfile
from ev_range.engine.factors import (
    calculate_consumption_factor,
    calculate_recuperation_factor,
    calculate_relative_speed_factor,
    calculate_road_slope_factor,
    calculate_temperature_factor,
    calculate_wind_factor,
)
from ev_range.models.results import FactorBreakdown, RangeEstimate

_LOGGER = logging.getLogger(__name__)


class InvalidRangeInputError(ValueError):
    """Battery capacity or adjusted consumption cannot produce a range."""


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's built-in ``round`` rounds halves to even (``round(2.5) == 2``);
    ranges are reported the way a dashboard would show them.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def calculate_energy_consumption(
    consumption_factor: float,
    speed_factor: float,
    wind_factor: float,
    temperature_factor: float,
    road_slope_factor: float,
    recuperation_factor: float,
) -> float:
    """Adjusted consumption (Wh/km): base consumption times every factor."""
    return (
        consumption_factor
        * speed_factor
        * wind_factor
        * temperature_factor
        * road_slope_factor
        * recuperation_factor
    )


def calculate_range_km(battery_kwh: float, adjusted_wh_per_km: float) -> int:
    """Remaining range in whole kilometres.

    An adjusted consumption that overflowed to +inf means no distance can
    be covered, so the range is 0.

    Raises
    ------
    InvalidRangeInputError
        If the battery capacity is not a positive finite number, the adjusted
        consumption is NaN or not positive, or the range itself is too large
        to represent.
    """
    if not math.isfinite(battery_kwh) or battery_kwh <= 0:
        _LOGGER.warning("Rejecting range estimate: battery capacity %r kWh", battery_kwh)
        raise InvalidRangeInputError(
            f"battery capacity must be a positive finite number, got {battery_kwh!r} kWh"
        )
    if math.isnan(adjusted_wh_per_km) or adjusted_wh_per_km <= 0:
        _LOGGER.warning("Rejecting range estimate: adjusted consumption %r Wh/km", adjusted_wh_per_km)
        raise InvalidRangeInputError(
            f"adjusted consumption must be a positive number, got {adjusted_wh_per_km!r} Wh/km"
        )

    range_km = battery_kwh * 1_000 / adjusted_wh_per_km
    if not math.isfinite(range_km):
        _LOGGER.warning(
            "Rejecting range estimate: %r kWh at %r Wh/km overflows", battery_kwh, adjusted_wh_per_km,
        )
        raise InvalidRangeInputError(
            f"range for {battery_kwh!r} kWh at {adjusted_wh_per_km!r} Wh/km is too large to represent"
        )

    return round_half_up(range_km)


def calculate_range_miles(range_km: int, calibration: ModelCalibration | None = None) -> int:
    """Convert a range in whole kilometres to whole miles."""
    cal = calibration or DEFAULT_CALIBRATION
    return round_half_up(range_km * cal.miles_per_km)


def explain_range(
    profile: VehicleProfile,
    environment: EnvironmentParameters,
    calibration: ModelCalibration | None = None,
) -> FactorBreakdown:
    """Compute the range together with every factor that went into it."""
    cal = calibration or DEFAULT_CALIBRATION
    speed = profile.average_speed_kmh

    # ── Correction factors (independent of each other) ─────────────────
    base_wh_per_km = calculate_consumption_factor(profile.nominal_consumption_kwh_per_100km, cal)
    speed_factor = calculate_relative_speed_factor(speed, cal)
    wind_factor = calculate_wind_factor(speed, environment.wind_speed_kmh, cal)
    temperature_factor = calculate_temperature_factor(environment.temperature_c, cal)
    road_slope_factor = calculate_road_slope_factor(environment.road_slope_pct, cal)
    recuperation_factor = calculate_recuperation_factor(environment.recuperation_pct, cal)

    # ── Combination ────────────────────────────────────────────────────
    adjusted_wh_per_km = calculate_energy_consumption(
        base_wh_per_km,
        speed_factor,
        wind_factor,
        temperature_factor,
        road_slope_factor,
        recuperation_factor,
    )
    _LOGGER.debug(
        "Factors: base=%.2f Wh/km speed=%.4f wind=%.4f temp=%.4f slope=%.4f recup=%.4f → %.2f Wh/km",
        base_wh_per_km, speed_factor, wind_factor, temperature_factor,
        road_slope_factor, recuperation_factor, adjusted_wh_per_km,
    )

    range_km = calculate_range_km(profile.battery_capacity_kwh, adjusted_wh_per_km)
    range_miles = calculate_range_miles(range_km, cal)

    return FactorBreakdown(
        base_wh_per_km=base_wh_per_km,
        speed=speed_factor,
        wind=wind_factor,
        temperature=temperature_factor,
        road_slope=road_slope_factor,
        recuperation=recuperation_factor,
        adjusted_wh_per_km=adjusted_wh_per_km,
        range_km=range_km,
        range_miles=range_miles,
    )


def estimate_range(
    profile: VehicleProfile,
    environment: EnvironmentParameters,
    calibration: ModelCalibration | None = None,
) -> RangeEstimate:
    """Estimate the remaining range for a car in a given environment."""
    return explain_range(profile, environment, calibration).to_estimate()
