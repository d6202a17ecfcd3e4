"""Tests for the projection engine."""

from __future__ import annotations

import math

import numpy as np
import pytest

from realsave.config.defaults import default_params
from realsave.config.schema import ProjectionParams
from realsave.core.engine import TimelineRow, compute_timeline
from realsave.utils.exceptions import InvalidParameterError, ProjectionError


def _params(**overrides: float) -> ProjectionParams:
    return default_params().model_copy(update=overrides)


class TestComputeTimelineBasic:
    def test_row_count(self) -> None:
        params = default_params()
        result = compute_timeline(params)
        assert len(result.rows) == params.horizon_years + 1
        assert [r.year for r in result.rows] == list(range(params.horizon_years + 1))

    def test_year_zero_is_starting_point(self) -> None:
        result = compute_timeline(_params(initial_capital=1234.6))
        first = result.rows[0]
        assert first.year == 0
        assert first.invested_capital == 1235
        assert first.nominal_value == 1235
        assert first.real_value == 1235

    def test_rows_are_ints(self) -> None:
        for row in compute_timeline(default_params()).rows:
            assert type(row.invested_capital) is int
            assert type(row.nominal_value) is int
            assert type(row.real_value) is int

    def test_rejects_raw_dict(self) -> None:
        with pytest.raises(InvalidParameterError):
            compute_timeline(default_params().model_dump())  # type: ignore[arg-type]

    def test_start_age_carried(self) -> None:
        result = compute_timeline(default_params(), start_age=30)
        assert result.start_age == 30
        assert result.timeline.age_at(result.final_row.year) == 65


class TestOneYearScenario:
    def test_values(self, one_year_params: ProjectionParams) -> None:
        rows = compute_timeline(one_year_params).rows
        assert rows[0] == TimelineRow(0, 10_000, 10_000, 10_000)

        growth = (1 + 0.08 / 12) ** 12
        nominal = 10_000 * growth + 500 * (growth - 1) / (0.08 / 12)
        assert rows[1].invested_capital == 16_000
        assert rows[1].nominal_value == math.floor(nominal + 0.5)
        assert rows[1].nominal_value == 17_055
        assert rows[1].real_value == math.floor(nominal / 1.03 + 0.5)

    def test_summary(self, one_year_params: ProjectionParams) -> None:
        summary = compute_timeline(one_year_params).summary
        assert summary.nominal == 17_055
        assert summary.invested_total == 16_000
        assert summary.interest_earned == 1_055
        assert summary.real == 16_558


class TestZeroRate:
    def test_linear_accumulation(self, zero_rate_params: ProjectionParams) -> None:
        rows = compute_timeline(zero_rate_params).rows
        assert rows[2] == TimelineRow(2, 2_400, 2_400, 2_400)

    @pytest.mark.parametrize("years", [1, 5, 40])
    def test_nominal_equals_invested(self, years: int) -> None:
        params = _params(annual_interest_rate_pct=0.0, horizon_years=years)
        for row in compute_timeline(params).rows:
            expected = 10_000 + 500 * 12 * row.year
            assert row.nominal_value == expected
            assert row.invested_capital == expected

    def test_zero_rate_with_inflation(self) -> None:
        params = _params(annual_interest_rate_pct=0.0, horizon_years=10)
        final = compute_timeline(params).final_row
        assert final.nominal_value == 70_000
        assert final.real_value == math.floor(70_000 / 1.03**10 + 0.5)

    def test_nothing_in_nothing_out(self) -> None:
        params = ProjectionParams(
            initial_capital=0,
            monthly_contribution=0,
            annual_interest_rate_pct=0,
            annual_inflation_rate_pct=0,
            horizon_years=3,
        )
        result = compute_timeline(params)
        assert all(r == TimelineRow(r.year, 0, 0, 0) for r in result.rows)
        assert result.summary.interest_earned == 0


class TestProperties:
    @pytest.mark.parametrize("rate", [0.0, 0.5, 8.0, 25.0])
    def test_monotonic(self, rate: float) -> None:
        cols = compute_timeline(_params(annual_interest_rate_pct=rate)).as_columns()
        assert np.all(np.diff(cols["invested_capital"]) >= 0)
        assert np.all(np.diff(cols["nominal_value"]) >= 0)

    def test_interest_never_destroys_principal(self) -> None:
        cols = compute_timeline(default_params()).as_columns()
        assert np.all(cols["nominal_value"] >= cols["invested_capital"])

    def test_inflation_deflates(self) -> None:
        cols = compute_timeline(default_params()).as_columns()
        assert np.all(cols["real_value"][1:] <= cols["nominal_value"][1:])
        assert cols["real_value"][-1] < cols["nominal_value"][-1]

    def test_no_inflation_real_equals_nominal(self) -> None:
        cols = compute_timeline(_params(annual_inflation_rate_pct=0.0)).as_columns()
        np.testing.assert_array_equal(cols["real_value"], cols["nominal_value"])

    def test_deterministic(self) -> None:
        r1 = compute_timeline(default_params())
        r2 = compute_timeline(default_params())
        assert r1 == r2

    def test_long_horizon_finite(self) -> None:
        result = compute_timeline(_params(annual_interest_rate_pct=25.0, horizon_years=100))
        assert len(result.rows) == 101
        assert result.final_row.nominal_value > 0
        assert math.isfinite(float(result.final_row.nominal_value))

    def test_summary_consistency(self) -> None:
        summary = compute_timeline(default_params()).summary
        assert summary.interest_earned == summary.nominal - summary.invested_total


class TestExtremeRates:
    def test_high_rate_long_horizon_exceeds_int64(self) -> None:
        params = ProjectionParams(
            initial_capital=10_000,
            monthly_contribution=500,
            annual_interest_rate_pct=60,
            annual_inflation_rate_pct=3,
            horizon_years=80,
        )
        rows = compute_timeline(params).rows
        final = rows[-1]
        assert final.invested_capital == 490_000
        assert final.nominal_value > 2**63
        assert 0 < final.real_value <= final.nominal_value
        for prev, row in zip(rows, rows[1:]):
            assert row.nominal_value >= prev.nominal_value
            assert row.nominal_value >= row.invested_capital

    def test_high_rate_columns_fall_back_to_object(self) -> None:
        params = _params(annual_interest_rate_pct=60.0, horizon_years=80)
        cols = compute_timeline(params).as_columns()
        assert cols["invested_capital"].dtype == np.int64
        assert cols["nominal_value"].dtype == object
        assert cols["nominal_value"][-1] == compute_timeline(params).summary.nominal

    def test_float_overflow_raises(self) -> None:
        params = _params(annual_interest_rate_pct=1e6, horizon_years=100)
        with pytest.raises(ProjectionError, match="floating-point range"):
            compute_timeline(params)

    @pytest.mark.parametrize("rate", [1e-16, 1e-14, 1e-13, 1e-9])
    def test_tiny_rate_keeps_contributions(self, rate: float) -> None:
        params = ProjectionParams(
            initial_capital=0,
            monthly_contribution=500,
            annual_interest_rate_pct=rate,
            annual_inflation_rate_pct=0,
            horizon_years=1,
        )
        final = compute_timeline(params).final_row
        assert final.invested_capital == 6_000
        assert final.nominal_value == 6_000
        assert final.real_value == 6_000

    @pytest.mark.parametrize("rate", [1e-12, 1e-6, 0.01])
    def test_small_rate_never_below_principal(self, rate: float) -> None:
        params = _params(annual_interest_rate_pct=rate, horizon_years=40)
        for row in compute_timeline(params).rows:
            assert row.nominal_value >= row.invested_capital
