"""Sensitivity / tornado analysis.

Vary one input at a time, measure the range swing.  Produces tornado chart
data sorted by impact on range.

Default sweep set (absolute deltas around the base value):
  - vehicle.average_speed_kmh                   ± 20 km/h
  - environment.temperature_c                   ± 10 °C
  - environment.wind_speed_kmh                  ± 20 km/h
  - environment.road_slope_pct                  ± 2 %
  - environment.recuperation_pct                ± 10 %
  - vehicle.nominal_consumption_kwh_per_100km   ± 2 kWh/100 km
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pydantic import BaseModel

from ev_range.config.scenario import RangeScenario
from ev_range.engine.estimator import estimate_range

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class TornadoBar:
    """One bar in the tornado chart."""

    param_name: str
    """Human-readable parameter name."""

    param_path: str
    """Dot-path into RangeScenario (e.g. 'environment.temperature_c')."""

    base_value: float
    low_value: float
    high_value: float

    range_km_at_low: int
    """Range when param = low_value."""

    range_km_at_high: int
    """Range when param = high_value."""

    delta_km: int
    """abs(range_km_at_high − range_km_at_low), the total swing width."""


@dataclass
class SensitivityResult:
    """Complete sensitivity analysis output."""

    base_range_km: int

    bars: list[TornadoBar] = field(default_factory=list)
    """Tornado bars sorted by delta_km (descending)."""


DEFAULT_SWEEPS: list[tuple[str, str, float, float]] = [
    ("Average speed", "vehicle.average_speed_kmh", -20.0, 20.0),
    ("Temperature", "environment.temperature_c", -10.0, 10.0),
    ("Wind", "environment.wind_speed_kmh", -20.0, 20.0),
    ("Road slope", "environment.road_slope_pct", -2.0, 2.0),
    ("Recuperation", "environment.recuperation_pct", -10.0, 10.0),
    ("Nominal consumption", "vehicle.nominal_consumption_kwh_per_100km", -2.0, 2.0),
]


def _get_nested_attr(obj: object, path: str) -> float:
    """Get a nested attribute via dot-path string."""
    current = obj
    for part in path.split("."):
        current = getattr(current, part)
    return float(current)


def _with_nested_attr(model: BaseModel, path: str, value: float) -> BaseModel:
    """Return a copy of *model* with the dot-path field replaced.

    The models are frozen, so the copy is rebuilt bottom-up.  The leaf
    model is re-validated, which keeps field constraints (e.g. a positive
    battery capacity) enforced for swept values.
    """
    head, _, rest = path.partition(".")
    if not rest:
        if head not in type(model).model_fields:
            raise AttributeError(f"{type(model).__name__} has no field {head!r}")
        return type(model).model_validate({**model.model_dump(), head: value})

    child = getattr(model, head)
    return model.model_copy(update={head: _with_nested_attr(child, rest, value)})


def _run_range_km(scenario: RangeScenario) -> int:
    return estimate_range(scenario.vehicle, scenario.environment, scenario.calibration).range_km


def run_sensitivity(
    scenario: RangeScenario,
    sweeps: list[tuple[str, str, float, float]] | None = None,
) -> SensitivityResult:
    """Run a one-at-a-time sensitivity analysis.

    Parameters
    ----------
    scenario : RangeScenario
        Base scenario.  Never modified.
    sweeps : list[tuple[name, path, low_delta, high_delta]] | None
        Parameter sweeps as absolute offsets from the base value.
        None = use DEFAULT_SWEEPS.  Unknown paths are skipped.

    Returns
    -------
    SensitivityResult
        Tornado bars sorted by range impact.
    """
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS

    base_range_km = _run_range_km(scenario)

    bars: list[TornadoBar] = []

    for name, path, low_delta, high_delta in sweeps:
        try:
            base_val = _get_nested_attr(scenario, path)
        except AttributeError:
            _LOGGER.debug("Skipping sweep %r: no such parameter %r", name, path)
            continue

        low_val = base_val + low_delta
        high_val = base_val + high_delta

        range_low = _run_range_km(_with_nested_attr(scenario, path, low_val))
        range_high = _run_range_km(_with_nested_attr(scenario, path, high_val))

        bars.append(TornadoBar(
            param_name=name,
            param_path=path,
            base_value=round(base_val, 4),
            low_value=round(low_val, 4),
            high_value=round(high_val, 4),
            range_km_at_low=range_low,
            range_km_at_high=range_high,
            delta_km=abs(range_high - range_low),
        ))

    # Largest swing first
    bars.sort(key=lambda b: b.delta_km, reverse=True)

    return SensitivityResult(base_range_km=base_range_km, bars=bars)
