from __future__ import annotations

from math import floor, isclose

import pytest

from backend.core.errors import InvalidRate
from backend.core.future_value import calculate_future_value
from backend.core.scenarios import resolve_rate_scenarios
from backend.core.time_series import generate_time_series, sample_times


@pytest.mark.parametrize("years", [0, 0.5, 1, 2.75, 10, 30])
def test_series_length_follows_half_year_grid(years):
    series = generate_time_series(1000.0, 100.0, resolve_rate_scenarios(0.05, 0.01), years)

    assert len(series) == floor(years / 0.5) + 1
    assert [point.time_years for point in series] == [i * 0.5 for i in range(len(series))]


def test_first_point_is_the_principal():
    series = generate_time_series(4200.0, 150.0, resolve_rate_scenarios(0.06, 0.02), 5)

    first = series[0]
    assert first.time_years == 0
    assert first.base == first.max == first.zero == 4200.0


def test_last_point_matches_scalar_projection():
    scenarios = resolve_rate_scenarios(0.07, 0.03)
    series = generate_time_series(10000.0, 200.0, scenarios, 12)

    last = series[-1]
    assert isclose(last.base, calculate_future_value(10000.0, 200.0, 0.07, 12).with_interest)
    assert isclose(last.max, calculate_future_value(10000.0, 200.0, 0.10, 12).with_interest)


def test_zero_scenario_is_a_straight_line():
    series = generate_time_series(1000.0, 50.0, resolve_rate_scenarios(0.09, 0.01), 3)

    for point in series:
        assert isclose(point.zero, 1000.0 + 50.0 * 12 * point.time_years)


def test_scenarios_stay_ordered_at_every_point():
    series = generate_time_series(1000.0, 50.0, resolve_rate_scenarios(0.04, 0.02), 8)

    for point in series[1:]:
        assert point.zero < point.base < point.max


def test_invalid_rate_aborts_series():
    with pytest.raises(InvalidRate):
        generate_time_series(1000.0, 50.0, resolve_rate_scenarios(0.05, -1.2), 3)


def test_non_positive_step_is_rejected():
    with pytest.raises(ValueError):
        sample_times(5, step=0)
