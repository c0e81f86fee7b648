"""Model calibration — every constant of the range model in one place.

The defaults are the canonical piecewise calibration.  Consumption relative
to speed is modelled as four regions::

    speed ≤ 20 km/h        flat 1.05 (auxiliary loads dominate)
    20 < speed ≤ 100       linear 1.05 → 1.25
    100 < speed ≤ 120      linear 1.25 → 1.20
    speed > 120            1.20 × (speed / 120) ** 1.0

The 100–120 segment dips slightly.  Re-fit all three anchor factors together
when changing any of them.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ModelCalibration(BaseModel):
    """Tunable constants of the range model (all frozen per estimate)."""

    model_config = ConfigDict(frozen=True)

    # --- Speed ---
    reference_speed_kmh: float = Field(
        default=77.0, gt=0,
        description="Average speed of the combined city/highway test cycle the "
                    "nominal consumption figure is quoted for (km/h)",
    )
    low_speed_threshold_kmh: float = Field(default=20.0, ge=0, description="Below this the speed factor is flat")
    high_speed_threshold_kmh: float = Field(default=100.0, gt=0, description="End of the first linear segment")
    very_high_speed_threshold_kmh: float = Field(default=120.0, gt=0, description="Start of the power-law region")
    factor_at_low_speed: float = Field(default=1.05, gt=0, description="Speed factor at/below the low threshold")
    factor_at_high_speed: float = Field(default=1.25, gt=0, description="Speed factor at the high threshold")
    factor_at_very_high_speed: float = Field(default=1.20, gt=0, description="Speed factor at the very-high threshold")
    power_above_very_high_speed: float = Field(
        default=1.0, ge=0,
        description="Exponent of the power law above the very-high threshold",
    )

    # --- Wind ---
    aerodynamic_drag_share: float = Field(
        default=0.6, ge=0, le=1.0,
        description="Fraction of consumption spent overcoming aerodynamic drag",
    )
    min_wind_factor: float = Field(default=0.5, gt=0, description="Floor of the wind factor")
    min_speed_for_wind_kmh: float = Field(
        default=1.0, gt=0,
        description="Below this vehicle speed wind is ignored (factor = 1)",
    )

    # --- Temperature ---
    ideal_temperature_c: float = Field(default=22.0, description="Battery-efficiency optimum (°C)")
    cold_penalty_per_degree: float = Field(default=0.015, ge=0, description="Extra consumption per °C below ideal")
    hot_penalty_per_degree: float = Field(default=0.010, ge=0, description="Extra consumption per °C above ideal")

    # --- Recuperation ---
    max_recuperation_effectiveness: float = Field(
        default=0.25, ge=0, lt=1.0,
        description="Consumption reduction at 100 % recuperation",
    )

    # --- Road slope ---
    slope_penalty_per_pct: float = Field(default=0.02, ge=0, description="Consumption change per % of grade")
    min_slope_factor: float = Field(default=0.1, gt=0, description="Floor of the road-slope factor")

    # --- Units ---
    wh_per_km_per_kwh_per_100km: float = Field(
        default=10.0, gt=0,
        description="kWh/100 km → Wh/km conversion",
    )
    miles_per_km: float = Field(default=0.621371, gt=0, description="km → mile conversion")

    @model_validator(mode="after")
    def _check_speed_thresholds(self) -> "ModelCalibration":
        if not (
            self.low_speed_threshold_kmh
            < self.high_speed_threshold_kmh
            < self.very_high_speed_threshold_kmh
        ):
            raise ValueError(
                "speed thresholds must be strictly increasing: "
                f"low={self.low_speed_threshold_kmh}, "
                f"high={self.high_speed_threshold_kmh}, "
                f"very_high={self.very_high_speed_threshold_kmh}"
            )
        return self


DEFAULT_CALIBRATION = ModelCalibration()
