"""Top-level scenario — bundles every input of one estimate."""

from pydantic import BaseModel, ConfigDict, Field

from ev_range.config.vehicle import VehicleProfile
from ev_range.config.environment import EnvironmentParameters
from ev_range.config.calibration import ModelCalibration


class RangeScenario(BaseModel):
    """Complete input bundle: car, environment and model constants."""

    model_config = ConfigDict(frozen=True)

    vehicle: VehicleProfile = Field(default_factory=VehicleProfile)
    environment: EnvironmentParameters = Field(default_factory=EnvironmentParameters)
    calibration: ModelCalibration = Field(default_factory=ModelCalibration)
