"""Consumption correction factors.

Each factor is a dimensionless multiplier on the nominal consumption,
1.0 at the neutral condition.  Factors are independent of one another, so
the estimator may evaluate them in any order.

No factor raises.  Out-of-domain input is clamped; NaN and ±inf fall back
to the input that yields the factor's boundary or neutral value, and results
that would overflow are capped at the largest finite float, so a non-finite
number never leaks into the product.
"""

from __future__ import annotations

import math
import sys

from ev_range.config.calibration import DEFAULT_CALIBRATION, ModelCalibration


_MAX_FACTOR = sys.float_info.max


def _finite_or(value: float, fallback: float) -> float:
    """Return *value* as float, or *fallback* when it is NaN or infinite."""
    value = float(value)
    return value if math.isfinite(value) else fallback


def _interpolate(x: float, x0: float, x1: float, y0: float, y1: float) -> float:
    return y0 + (x - x0) / (x1 - x0) * (y1 - y0)


# ═══════════════════════════════════════════════════════════════════════════
# Speed
# ═══════════════════════════════════════════════════════════════════════════

def calculate_speed_factor(speed: float, calibration: ModelCalibration | None = None) -> float:
    """Consumption multiplier for an average speed (km/h).

    Piecewise: flat at low speed, two linear segments, then a power law
    above the very-high threshold.  Negative and non-finite speeds are
    treated as standstill.
    """
    cal = calibration or DEFAULT_CALIBRATION
    safe_speed = max(0.0, _finite_or(speed, 0.0))

    low = cal.low_speed_threshold_kmh
    high = cal.high_speed_threshold_kmh
    very_high = cal.very_high_speed_threshold_kmh

    if safe_speed <= low:
        return cal.factor_at_low_speed

    if safe_speed <= high:
        return _interpolate(safe_speed, low, high, cal.factor_at_low_speed, cal.factor_at_high_speed)

    if safe_speed <= very_high:
        return _interpolate(
            safe_speed, high, very_high, cal.factor_at_high_speed, cal.factor_at_very_high_speed,
        )

    try:
        factor = cal.factor_at_very_high_speed * (safe_speed / very_high) ** cal.power_above_very_high_speed
    except OverflowError:
        return _MAX_FACTOR
    return min(factor, _MAX_FACTOR)


def calculate_relative_speed_factor(speed: float, calibration: ModelCalibration | None = None) -> float:
    """Speed factor normalised to 1.0 at the reference speed.

    The nominal consumption is quoted for the reference cycle, so only the
    deviation from that cycle's speed changes consumption.
    """
    cal = calibration or DEFAULT_CALIBRATION
    return calculate_speed_factor(speed, cal) / calculate_speed_factor(cal.reference_speed_kmh, cal)


# ═══════════════════════════════════════════════════════════════════════════
# Wind
# ═══════════════════════════════════════════════════════════════════════════

def calculate_wind_factor(
    speed: float,
    wind_speed: float,
    calibration: ModelCalibration | None = None,
) -> float:
    """Consumption multiplier for wind along the direction of travel.

    Only the aerodynamic share of consumption reacts to wind, and drag grows
    with the square of the air speed the car sees::

        air_speed = max(0, speed + wind_speed)      # headwind > 0
        factor    = (1 − share) + share · (air_speed / speed)²

    Returns exactly 1.0 below ``min_speed_for_wind_kmh``; the result is
    floored at ``min_wind_factor`` and capped at the largest finite float.
    """
    cal = calibration or DEFAULT_CALIBRATION
    speed = float(speed)
    if not math.isfinite(speed) or speed < cal.min_speed_for_wind_kmh:
        return 1.0

    air_speed = max(0.0, speed + _finite_or(wind_speed, 0.0))
    ratio = air_speed / speed
    share = cal.aerodynamic_drag_share
    drag = share * ratio * ratio if share else 0.0
    factor = (1 - share) + drag

    return min(max(cal.min_wind_factor, factor), _MAX_FACTOR)


# ═══════════════════════════════════════════════════════════════════════════
# Temperature
# ═══════════════════════════════════════════════════════════════════════════

def calculate_temperature_factor(temperature: float, calibration: ModelCalibration | None = None) -> float:
    """Consumption multiplier for ambient temperature (°C).

    1.0 at the ideal temperature; cold is penalised per degree at a higher
    rate than heat.
    """
    cal = calibration or DEFAULT_CALIBRATION
    ideal = cal.ideal_temperature_c
    temperature = _finite_or(temperature, ideal)

    if temperature < ideal:
        return 1 + (ideal - temperature) * cal.cold_penalty_per_degree
    return 1 + (temperature - ideal) * cal.hot_penalty_per_degree


# ═══════════════════════════════════════════════════════════════════════════
# Recuperation
# ═══════════════════════════════════════════════════════════════════════════

def calculate_recuperation_factor(recuperation: float, calibration: ModelCalibration | None = None) -> float:
    """Consumption multiplier for regenerative braking strength (0–100 %).

    Linear from 1.0 at 0 % to ``1 − max_recuperation_effectiveness`` at
    100 %.  Input is clamped to [0, 100]; NaN counts as no recuperation.
    """
    cal = calibration or DEFAULT_CALIBRATION
    recuperation = float(recuperation)
    if math.isnan(recuperation):
        recuperation = 0.0

    share = min(max(recuperation, 0.0), 100.0) / 100
    return 1 - share * cal.max_recuperation_effectiveness


# ═══════════════════════════════════════════════════════════════════════════
# Road slope
# ═══════════════════════════════════════════════════════════════════════════

def calculate_road_slope_factor(road_slope: float, calibration: ModelCalibration | None = None) -> float:
    """Consumption multiplier for road grade (%), positive = uphill.

    Each percent of grade moves consumption by ``slope_penalty_per_pct``.
    Floored at ``min_slope_factor``: rolling resistance and auxiliaries
    still cost energy on any downhill.
    """
    cal = calibration or DEFAULT_CALIBRATION
    road_slope = _finite_or(road_slope, 0.0)
    return max(cal.min_slope_factor, 1 + road_slope * cal.slope_penalty_per_pct)


# ═══════════════════════════════════════════════════════════════════════════
# Units
# ═══════════════════════════════════════════════════════════════════════════

def calculate_consumption_factor(consumption: float, calibration: ModelCalibration | None = None) -> float:
    """Convert consumption from kWh/100 km to Wh/km."""
    cal = calibration or DEFAULT_CALIBRATION
    return consumption * cal.wh_per_km_per_kwh_per_100km
