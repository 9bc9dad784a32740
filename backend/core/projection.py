from __future__ import annotations

from typing import Any, Dict, List, Mapping, Union

from pydantic import ValidationError

from backend.core.errors import InvalidInput
from backend.core.future_value import calculate_future_value
from backend.core.scenarios import resolve_rate_scenarios
from backend.core.time_series import DEFAULT_STEP_YEARS, generate_time_series
from backend.schemas.projection import (
    ProjectionInput,
    ProjectionResult,
    ScalarResult,
    ScenarioLabel,
    TimeSeriesPoint,
)

MONEY_DECIMALS = 2
PERCENT_DECIMALS = 6


def _format_validation_errors(exc: ValidationError) -> List[str]:
    messages: List[str] = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "payload"
        messages.append(f"{field}: {error['msg']}")
    return messages


def build_projection_input(
    payload: Union[ProjectionInput, Mapping[str, Any]],
) -> ProjectionInput:
    """
    Validate a raw input bundle in one pass.

    Every missing, non-numeric, non-finite or out-of-range field is reported
    together in a single InvalidInput; nothing is computed on failure.
    """
    if isinstance(payload, ProjectionInput):
        return payload
    try:
        return ProjectionInput.model_validate(payload)
    except ValidationError as exc:
        raise InvalidInput(_format_validation_errors(exc)) from exc


def _money(value: float) -> float:
    return round(value, MONEY_DECIMALS)


def project(
    projection_input: ProjectionInput,
    step: float = DEFAULT_STEP_YEARS,
) -> ProjectionResult:
    """
    Run the base/max/zero scenarios and sample their growth curves.

    Order of operations:
      1) Resolve the three scenario rates.
      2) One scalar future value per scenario at the full horizon.
         InvalidRate from any scenario aborts the whole projection.
      3) Sample every scenario at `step` intervals from 0 to the horizon.
      4) Round monetary values to cents only here, on the way out.
    """
    scenarios = resolve_rate_scenarios(
        projection_input.annual_rate, projection_input.variance_rate
    )

    summary: Dict[ScenarioLabel, ScalarResult] = {}
    for scenario in scenarios:
        value = calculate_future_value(
            projection_input.principal,
            projection_input.monthly_contribution,
            scenario.rate,
            projection_input.years,
        )
        with_interest = _money(value.with_interest)
        without_interest = _money(value.without_interest)
        summary[scenario.label] = ScalarResult(
            future_value_with_interest=with_interest,
            future_value_without_interest=without_interest,
            interest_earned=_money(with_interest - without_interest),
            rate=scenario.rate,
            rate_percent=round(scenario.rate_percent, PERCENT_DECIMALS),
        )

    raw_series = generate_time_series(
        projection_input.principal,
        projection_input.monthly_contribution,
        scenarios,
        projection_input.years,
        step,
    )
    series = [
        TimeSeriesPoint(
            time_years=point.time_years,
            base=_money(point.base),
            max=_money(point.max),
            zero=_money(point.zero),
        )
        for point in raw_series
    ]

    return ProjectionResult(scenarios=summary, series=series, step_years=step)


def project_payload(payload: Union[ProjectionInput, Mapping[str, Any]]) -> ProjectionResult:
    """Validate a raw bundle, then project it."""
    return project(build_projection_input(payload))


__all__ = [
    "build_projection_input",
    "project",
    "project_payload",
]
