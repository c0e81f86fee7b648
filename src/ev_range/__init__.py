"""EV range estimator — remaining driving range from a handful of inputs."""

from ev_range.config import (
    EnvironmentParameters,
    ModelCalibration,
    RangeScenario,
    VehicleProfile,
)
from ev_range.engine import InvalidRangeInputError, estimate_range, explain_range
from ev_range.models import FactorBreakdown, RangeEstimate

__all__ = [
    "VehicleProfile",
    "EnvironmentParameters",
    "ModelCalibration",
    "RangeScenario",
    "RangeEstimate",
    "FactorBreakdown",
    "estimate_range",
    "explain_range",
    "InvalidRangeInputError",
]
