"""Future value of a lump sum plus a stream of monthly contributions."""

from __future__ import annotations

import math
from dataclasses import dataclass

from backend.core.errors import InvalidRate

PERIODS_PER_YEAR = 12


@dataclass(frozen=True)
class FutureValue:
    with_interest: float
    without_interest: float


def contributions_without_interest(monthly_contribution: float, years: float) -> float:
    return monthly_contribution * PERIODS_PER_YEAR * years


def calculate_future_value(
    principal: float,
    monthly_contribution: float,
    rate: float,
    years: float,
) -> FutureValue:
    """
    Value of the investment after `years` at annual rate `rate`.

    Compounding is annual. The twelve monthly contributions of a year are
    treated as one annual deposit, so the contribution stream grows as an
    annuity:

        lump sum      = P * (1 + rate) ** t
        contributions = 12c * ((1 + rate) ** t - 1) / rate     (rate != 0)
                      = 12c * t                                (rate == 0)

    No rounding happens here.
    """
    if 1.0 + rate <= 0:
        raise InvalidRate(rate)

    baseline = principal + contributions_without_interest(monthly_contribution, years)

    if rate == 0:
        return FutureValue(with_interest=baseline, without_interest=baseline)

    try:
        growth = (1.0 + rate) ** years
        # expm1/log1p keeps (growth - 1) / rate accurate for rates close to zero
        annuity_factor = math.expm1(years * math.log1p(rate)) / rate
    except OverflowError as exc:
        raise InvalidRate(rate, f"growth over {years!r} years overflows") from exc

    with_interest = principal * growth + monthly_contribution * PERIODS_PER_YEAR * annuity_factor
    if not math.isfinite(with_interest):
        raise InvalidRate(rate, f"growth over {years!r} years overflows")
    return FutureValue(with_interest=with_interest, without_interest=baseline)
