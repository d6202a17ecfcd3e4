"""Projection engine: closed-form monthly compounding over a yearly grid."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from realsave.analytics.metrics import Summary, summarize
from realsave.config.schema import MONTHS_PER_YEAR, ProjectionParams
from realsave.core.timeline import Timeline
from realsave.utils.exceptions import InvalidParameterError, ProjectionError
from realsave.utils.money import round_money_array

COLUMNS: tuple[str, ...] = ("year", "invested_capital", "nominal_value", "real_value")


@dataclass(frozen=True, slots=True)
class TimelineRow:
    """Account position at the end of one projection year, in whole dollars."""

    year: int
    invested_capital: int
    nominal_value: int
    real_value: int


@dataclass(frozen=True)
class ProjectionResult:
    """Output of a projection run.

    Attributes:
        params: The parameters the projection was computed from.
        rows: One row per year, ``0..horizon_years`` ascending.
        summary: Totals read from the final row.
        timeline: Year grid, carrying the saver's age at year 0 when known.
    """

    params: ProjectionParams
    rows: tuple[TimelineRow, ...]
    summary: Summary
    timeline: Timeline

    @property
    def start_age(self) -> int | None:
        return self.timeline.start_age

    @property
    def final_row(self) -> TimelineRow:
        return self.rows[-1]

    def as_columns(self) -> dict[str, np.ndarray]:
        """Column-oriented view of the rows, keyed by field name.

        Columns are int64 unless a value exceeds its range, then object.
        """
        columns = {}
        for name in COLUMNS:
            values = [getattr(row, name) for row in self.rows]
            try:
                columns[name] = np.array(values, dtype=np.int64)
            except OverflowError:
                columns[name] = np.array(values, dtype=object)
        return columns


def compute_timeline(
    params: ProjectionParams,
    start_age: int | None = None,
) -> ProjectionResult:
    """Project a savings plan year by year.

    For year ``t`` with ``n = 12`` periods and fractional rate ``r``::

        growth  = (1 + r/n) ** (n*t)
        nominal = initial * growth + contribution * (growth - 1) / (r/n)
        real    = nominal / (1 + inflation) ** t

    The annuity term is the future value of end-of-month deposits. At a zero
    rate it degenerates to plain accumulation, ``contribution * n * t``.
    ``growth - 1`` is evaluated as ``expm1(n*t * log1p(r/n))`` so rates too
    small to change ``1 + r/n`` still accrue their deposits.
    Money figures are rounded once, when the rows are built.

    Args:
        params: Validated projection parameters.
        start_age: Saver's age at year 0, carried through for exports.

    Returns:
        ProjectionResult with ``horizon_years + 1`` rows and their summary.

    Raises:
        InvalidParameterError: If ``params`` is not a ProjectionParams.
        ProjectionError: If a value exceeds floating-point range.
    """
    if not isinstance(params, ProjectionParams):
        raise InvalidParameterError(
            f"expected ProjectionParams, got {type(params).__name__}; "
            "build one with validate_params()"
        )

    timeline = Timeline.from_params(params, start_age)
    year_index = timeline.years()
    years = year_index.astype(np.float64)

    n = MONTHS_PER_YEAR
    r = params.interest_rate
    periodic_rate = r / n

    with np.errstate(over="ignore", invalid="ignore"):
        growth_minus_one = np.expm1(n * years * np.log1p(periodic_rate))
        if r > 0:
            contributions = params.monthly_contribution * growth_minus_one / periodic_rate
        else:
            contributions = params.monthly_contribution * n * years

        nominal = params.initial_capital * (growth_minus_one + 1.0) + contributions
        invested = params.initial_capital + params.monthly_contribution * n * years
        real = nominal / np.power(1.0 + params.inflation_rate, years)

    for label, values in (("nominal", nominal), ("real", real)):
        if not np.all(np.isfinite(values)):
            bad_year = int(year_index[~np.isfinite(values)][0])
            raise ProjectionError(
                f"{label} value exceeds floating-point range in year {bad_year}; "
                "lower the rate or the horizon"
            )

    rows = tuple(
        TimelineRow(year=int(year), invested_capital=inv, nominal_value=nom, real_value=rl)
        for year, inv, nom, rl in zip(
            year_index,
            round_money_array(invested),
            round_money_array(nominal),
            round_money_array(real),
        )
    )
    return ProjectionResult(
        params=params,
        rows=rows,
        summary=summarize(rows),
        timeline=timeline,
    )
