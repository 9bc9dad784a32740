"""Sampled growth curves for charting."""

from __future__ import annotations

import math
from typing import List, Sequence

from backend.core.future_value import calculate_future_value
from backend.schemas.projection import RateScenario, ScenarioLabel, TimeSeriesPoint

DEFAULT_STEP_YEARS = 0.5


def sample_times(years: float, step: float = DEFAULT_STEP_YEARS) -> List[float]:
    """Return [0, step, 2*step, ...] up to and including `years` when it lands on the grid."""
    if step <= 0:
        raise ValueError("step must be positive")
    count = math.floor(years / step) + 1
    return [index * step for index in range(count)]


def generate_time_series(
    principal: float,
    monthly_contribution: float,
    scenarios: Sequence[RateScenario],
    years: float,
    step: float = DEFAULT_STEP_YEARS,
) -> List[TimeSeriesPoint]:
    """
    Evaluate every scenario at each sample time.

    The zero scenario comes out as the straight line P + 12c * t. Values are
    left unrounded; callers round once when presenting them.
    """
    points: List[TimeSeriesPoint] = []
    for t in sample_times(years, step):
        values = {
            scenario.label.value: calculate_future_value(
                principal, monthly_contribution, scenario.rate, t
            ).with_interest
            for scenario in scenarios
        }
        points.append(TimeSeriesPoint(time_years=t, **values))
    return points
