"""Rate scenario resolution."""

from __future__ import annotations

from typing import List

from backend.schemas.projection import RateScenario, ScenarioLabel


def resolve_rate_scenarios(annual_rate: float, variance_rate: float) -> List[RateScenario]:
    """Return the base, max and zero scenarios, always in that order."""
    return [
        RateScenario(label=ScenarioLabel.BASE, rate=annual_rate),
        RateScenario(label=ScenarioLabel.MAX, rate=annual_rate + variance_rate),
        RateScenario(label=ScenarioLabel.ZERO, rate=0.0),
    ]
