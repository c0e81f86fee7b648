"""Range-vs-speed curve.

Re-runs the estimator over a grid of average speeds with everything else
held fixed.  Useful for "how fast should I drive" questions and for plotting.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from ev_range.config.calibration import ModelCalibration
from ev_range.config.environment import EnvironmentParameters
from ev_range.config.vehicle import VehicleProfile
from ev_range.engine.estimator import explain_range
from ev_range.models.results import SpeedRangePoint

DEFAULT_MIN_SPEED_KMH = 10.0
DEFAULT_MAX_SPEED_KMH = 160.0
DEFAULT_SPEED_STEPS = 16


def default_speed_grid() -> np.ndarray:
    """10, 20, …, 160 km/h."""
    return np.linspace(DEFAULT_MIN_SPEED_KMH, DEFAULT_MAX_SPEED_KMH, DEFAULT_SPEED_STEPS)


def range_speed_curve(
    profile: VehicleProfile,
    environment: EnvironmentParameters,
    speeds: Iterable[float] | None = None,
    calibration: ModelCalibration | None = None,
) -> list[SpeedRangePoint]:
    """Estimate range at each speed in *speeds* (km/h), in the given order."""
    grid = default_speed_grid() if speeds is None else np.asarray(list(speeds), dtype=np.float64)

    points: list[SpeedRangePoint] = []
    for speed in grid:
        at_speed = profile.model_copy(update={"average_speed_kmh": float(speed)})
        breakdown = explain_range(at_speed, environment, calibration)
        points.append(SpeedRangePoint(
            speed_kmh=float(speed),
            range_km=breakdown.range_km,
            range_miles=breakdown.range_miles,
            adjusted_wh_per_km=breakdown.adjusted_wh_per_km,
        ))
    return points


def best_cruising_speed(
    profile: VehicleProfile,
    environment: EnvironmentParameters,
    speeds: Iterable[float] | None = None,
    calibration: ModelCalibration | None = None,
) -> SpeedRangePoint:
    """Point of the curve with the longest range (earliest in *speeds* on ties)."""
    curve = range_speed_curve(profile, environment, speeds, calibration)
    if not curve:
        raise ValueError("speed grid is empty")

    ranges = np.array([p.range_km for p in curve])
    return curve[int(np.argmax(ranges))]
