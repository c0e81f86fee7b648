"""Environment parameters — the secondary, outside-the-car inputs."""

from pydantic import BaseModel, ConfigDict, Field


class EnvironmentParameters(BaseModel):
    """Wind, temperature, road grade and regenerative-braking strength.

    Every field is unconstrained: out-of-domain values are clamped inside the
    factor functions so that a caller can pass raw widget values through.
    """

    model_config = ConfigDict(frozen=True)

    wind_speed_kmh: float = Field(
        default=0.0,
        description="Wind speed along the direction of travel (km/h). "
                    "Positive = headwind, negative = tailwind.",
    )
    temperature_c: float = Field(default=20.0, description="Ambient temperature (°C)")
    road_slope_pct: float = Field(
        default=0.0,
        description="Average road grade (%). Positive = uphill, negative = downhill.",
    )
    recuperation_pct: float = Field(
        default=10.0,
        description="Share of braking energy recovered (%), expected 0–100. "
                    "Values outside the range are clamped to its bounds.",
    )
