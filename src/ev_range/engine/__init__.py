"""Engine — correction factors and the range computation built on them."""

from ev_range.engine.factors import (
    calculate_consumption_factor,
    calculate_recuperation_factor,
    calculate_relative_speed_factor,
    calculate_road_slope_factor,
    calculate_speed_factor,
    calculate_temperature_factor,
    calculate_wind_factor,
)
from ev_range.engine.estimator import (
    InvalidRangeInputError,
    calculate_energy_consumption,
    calculate_range_km,
    calculate_range_miles,
    estimate_range,
    explain_range,
    round_half_up,
)
from ev_range.engine.sensitivity import SensitivityResult, TornadoBar, run_sensitivity
from ev_range.engine.sweep import best_cruising_speed, range_speed_curve

__all__ = [
    "calculate_speed_factor",
    "calculate_relative_speed_factor",
    "calculate_wind_factor",
    "calculate_temperature_factor",
    "calculate_recuperation_factor",
    "calculate_road_slope_factor",
    "calculate_consumption_factor",
    "calculate_energy_consumption",
    "calculate_range_km",
    "calculate_range_miles",
    "round_half_up",
    "estimate_range",
    "explain_range",
    "InvalidRangeInputError",
    # Analysis
    "run_sensitivity",
    "SensitivityResult",
    "TornadoBar",
    "range_speed_curve",
    "best_cruising_speed",
]
