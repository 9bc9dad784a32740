"""Data contracts for compound interest projections."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ScenarioLabel(str, Enum):
    BASE = "base"
    MAX = "max"
    ZERO = "zero"


MAX_YEARS = 200


class _CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProjectionInput(_CamelModel):
    """Validated inputs for a single projection request."""

    model_config = ConfigDict(frozen=True)

    principal: float = Field(
        ...,
        ge=0,
        strict=True,
        allow_inf_nan=False,
        description="Lump sum invested at time zero.",
    )
    monthly_contribution: float = Field(
        ...,
        ge=0,
        strict=True,
        allow_inf_nan=False,
        description="Amount added in each of the 12 periods per year.",
    )
    annual_rate: float = Field(
        ...,
        strict=True,
        allow_inf_nan=False,
        description="Annual return rate expressed as a decimal (e.g. 0.05 for 5%).",
    )
    years: float = Field(
        ...,
        ge=0,
        le=MAX_YEARS,
        strict=True,
        allow_inf_nan=False,
        description="Projection horizon in years.",
    )
    variance_rate: float = Field(
        ...,
        ge=0,
        strict=True,
        allow_inf_nan=False,
        description="Decimal offset added to annual_rate for the optimistic scenario.",
    )


class RateScenario(_CamelModel):
    label: ScenarioLabel
    rate: float

    @property
    def rate_percent(self) -> float:
        return self.rate * 100


class ScalarResult(_CamelModel):
    """Point-in-time totals for one rate scenario at the end of the horizon."""

    future_value_with_interest: float
    future_value_without_interest: float
    interest_earned: float
    rate: float
    rate_percent: float


class TimeSeriesPoint(_CamelModel):
    time_years: float
    base: float
    max: float
    zero: float


class ProjectionResult(_CamelModel):
    """Everything the presentation layer needs to render a projection."""

    scenarios: Dict[ScenarioLabel, ScalarResult]
    series: List[TimeSeriesPoint]
    step_years: float
