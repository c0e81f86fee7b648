"""Vehicle profile — the car-side inputs of one estimate."""

from pydantic import BaseModel, ConfigDict, Field


class VehicleProfile(BaseModel):
    """Battery, nominal consumption and average speed of one car."""

    model_config = ConfigDict(frozen=True)

    battery_capacity_kwh: float = Field(default=75.0, gt=0, description="Usable battery capacity (kWh)")
    nominal_consumption_kwh_per_100km: float = Field(
        default=15.0, gt=0,
        description="Manufacturer / base consumption figure (kWh per 100 km), "
                    "quoted for the combined reference cycle",
    )
    average_speed_kmh: float = Field(
        default=77.0,
        description="Average driving speed (km/h). Not constrained: values "
                    "below zero are clamped by the speed factor, not rejected.",
    )
