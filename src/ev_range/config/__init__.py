"""Configuration models — all estimator input types."""

from ev_range.config.vehicle import VehicleProfile
from ev_range.config.environment import EnvironmentParameters
from ev_range.config.calibration import DEFAULT_CALIBRATION, ModelCalibration
from ev_range.config.scenario import RangeScenario

__all__ = [
    "VehicleProfile",
    "EnvironmentParameters",
    "ModelCalibration",
    "DEFAULT_CALIBRATION",
    "RangeScenario",
]
