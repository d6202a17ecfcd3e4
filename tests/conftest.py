"""Shared test fixtures."""

from __future__ import annotations

import pytest

from realsave.config.schema import ProjectionParams


@pytest.fixture
def one_year_params() -> ProjectionParams:
    """$10k, $500/month, 8% interest, 3% inflation over one year."""
    return ProjectionParams(
        initial_capital=10_000,
        monthly_contribution=500,
        annual_interest_rate_pct=8,
        annual_inflation_rate_pct=3,
        horizon_years=1,
    )


@pytest.fixture
def zero_rate_params() -> ProjectionParams:
    """$100/month with no interest and no inflation over two years."""
    return ProjectionParams(
        initial_capital=0,
        monthly_contribution=100,
        annual_interest_rate_pct=0,
        annual_inflation_rate_pct=0,
        horizon_years=2,
    )
