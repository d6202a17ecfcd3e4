"""Pydantic v2 configuration models for realsave."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from realsave.utils.exceptions import InvalidParameterError

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


class PlanAges(BaseModel):
    """Current and retirement age, used to derive the projection horizon.

    A retirement age at or below the current age does not fail: the horizon
    is floored to one year so a degenerate pair still yields a projection.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    current_age: int = Field(ge=0, le=120)
    retirement_age: int = Field(ge=0, le=120)

    @property
    def collapsed(self) -> bool:
        """True when the age pair had to be floored to a one-year horizon."""
        return self.retirement_age <= self.current_age

    @property
    def horizon_years(self) -> int:
        return max(self.retirement_age - self.current_age, 1)


class ProjectionParams(BaseModel):
    """Scalar inputs of a savings projection.

    Rates are percentages (``8`` means 8% per year). Use :attr:`interest_rate`
    and :attr:`inflation_rate` for the fractional form.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    initial_capital: float = Field(ge=0, description="Starting balance in dollars")
    monthly_contribution: float = Field(ge=0, description="Deposit made every month")
    annual_interest_rate_pct: float = Field(
        ge=0, description="Nominal annual interest rate, compounded monthly (percent)"
    )
    annual_inflation_rate_pct: float = Field(
        ge=0, description="Annual inflation rate used to deflate values (percent)"
    )
    horizon_years: int = Field(ge=1, description="Number of years to project")

    @property
    def interest_rate(self) -> float:
        return self.annual_interest_rate_pct / 100.0

    @property
    def inflation_rate(self) -> float:
        return self.annual_inflation_rate_pct / 100.0

    @classmethod
    def from_ages(
        cls,
        initial_capital: float,
        monthly_contribution: float,
        annual_interest_rate_pct: float,
        annual_inflation_rate_pct: float,
        current_age: int,
        retirement_age: int,
    ) -> ProjectionParams:
        """Create params whose horizon runs from ``current_age`` to ``retirement_age``.

        Raises:
            InvalidParameterError: If any value is out of range.
        """
        try:
            ages = PlanAges(current_age=current_age, retirement_age=retirement_age)
        except ValidationError as exc:
            raise invalid_parameters(exc) from exc
        if ages.collapsed:
            logger.warning(
                "retirement age %d is not after current age %d; projecting 1 year",
                retirement_age,
                current_age,
            )
        return validate_params(
            initial_capital=initial_capital,
            monthly_contribution=monthly_contribution,
            annual_interest_rate_pct=annual_interest_rate_pct,
            annual_inflation_rate_pct=annual_inflation_rate_pct,
            horizon_years=ages.horizon_years,
        )


def invalid_parameters(exc: ValidationError) -> InvalidParameterError:
    """Convert a pydantic ValidationError into an InvalidParameterError."""
    errors = exc.errors()
    fields = tuple(".".join(str(part) for part in err["loc"]) for err in errors)
    details = "; ".join(f"{loc}: {err['msg']}" for loc, err in zip(fields, errors))
    return InvalidParameterError(f"Invalid projection parameters: {details}", fields)


def validate_params(**raw: Any) -> ProjectionParams:
    """Build :class:`ProjectionParams` from raw scalars.

    Negative amounts or rates and a horizon below one year are rejected,
    never clamped.

    Raises:
        InvalidParameterError: Listing every offending field.
    """
    try:
        return ProjectionParams(**raw)
    except ValidationError as exc:
        raise invalid_parameters(exc) from exc
