"""Result types — the contract between the estimator and its callers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RangeEstimate(BaseModel):
    """Remaining range, rounded to whole kilometres and miles."""

    model_config = ConfigDict(frozen=True)

    range_km: int = Field(ge=0)
    range_miles: int = Field(ge=0)


class FactorBreakdown(BaseModel):
    """Every intermediate of one estimate.

    adjusted_wh_per_km = base_wh_per_km × speed × wind × temperature
                         × road_slope × recuperation
    """

    model_config = ConfigDict(frozen=True)

    base_wh_per_km: float
    """Nominal consumption converted to Wh/km."""

    speed: float
    """Speed factor relative to the reference speed."""
    wind: float
    temperature: float
    road_slope: float
    recuperation: float

    adjusted_wh_per_km: float
    """Consumption after all corrections (Wh/km)."""

    range_km: int
    range_miles: int

    def to_estimate(self) -> RangeEstimate:
        return RangeEstimate(range_km=self.range_km, range_miles=self.range_miles)


class SpeedRangePoint(BaseModel):
    """One point of a range-vs-speed curve."""

    model_config = ConfigDict(frozen=True)

    speed_kmh: float
    range_km: int
    range_miles: int
    adjusted_wh_per_km: float
