"""Result models — estimator output contracts."""

from ev_range.models.results import (
    FactorBreakdown,
    RangeEstimate,
    SpeedRangePoint,
)

__all__ = [
    "FactorBreakdown",
    "RangeEstimate",
    "SpeedRangePoint",
]
