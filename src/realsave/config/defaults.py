"""Default configuration values for realsave."""

from __future__ import annotations

from realsave.config.schema import PlanAges, ProjectionParams

DEFAULT_INITIAL_CAPITAL = 10_000.0
DEFAULT_MONTHLY_CONTRIBUTION = 500.0
DEFAULT_INTEREST_RATE_PCT = 8.0
DEFAULT_INFLATION_RATE_PCT = 3.0
DEFAULT_CURRENT_AGE = 30
DEFAULT_RETIREMENT_AGE = 65


def default_ages() -> PlanAges:
    """Saver aged 30 planning to retire at 65."""
    return PlanAges(current_age=DEFAULT_CURRENT_AGE, retirement_age=DEFAULT_RETIREMENT_AGE)


def default_params() -> ProjectionParams:
    """$10k starting balance, $500/month, 8% interest, 3% inflation, 35 years."""
    return ProjectionParams(
        initial_capital=DEFAULT_INITIAL_CAPITAL,
        monthly_contribution=DEFAULT_MONTHLY_CONTRIBUTION,
        annual_interest_rate_pct=DEFAULT_INTEREST_RATE_PCT,
        annual_inflation_rate_pct=DEFAULT_INFLATION_RATE_PCT,
        horizon_years=default_ages().horizon_years,
    )
