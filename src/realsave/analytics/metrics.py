"""Projection summary metrics."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from realsave.utils.exceptions import ProjectionError

if TYPE_CHECKING:
    from realsave.core.engine import TimelineRow


@dataclass(frozen=True)
class Summary:
    """Final-year totals of a projection."""

    nominal: int
    real: int
    invested_total: int
    interest_earned: int

    @property
    def inflation_loss(self) -> int:
        """Purchasing power lost to inflation by the final year."""
        return self.nominal - self.real


@dataclass(frozen=True)
class ContributionBreakdown:
    """Split of the final nominal value into money paid in and interest."""

    contributed: int
    interest: int
    contributed_share: float
    interest_share: float


def summarize(rows: Sequence[TimelineRow]) -> Summary:
    """Read the summary off the final row.

    Args:
        rows: Projection rows in ascending year order.

    Returns:
        Summary where ``interest_earned = nominal - invested_total``.

    Raises:
        ProjectionError: If ``rows`` is empty.
    """
    if not rows:
        raise ProjectionError("cannot summarize an empty projection")
    last = rows[-1]
    return Summary(
        nominal=last.nominal_value,
        real=last.real_value,
        invested_total=last.invested_capital,
        interest_earned=last.nominal_value - last.invested_capital,
    )


def contribution_breakdown(summary: Summary) -> ContributionBreakdown:
    """Compute contributed vs. interest shares; negative interest counts as 0."""
    contributed = summary.invested_total
    interest = max(summary.interest_earned, 0)
    total = contributed + interest
    if total <= 0:
        return ContributionBreakdown(contributed, interest, 0.0, 0.0)
    return ContributionBreakdown(
        contributed=contributed,
        interest=interest,
        contributed_share=contributed / total,
        interest_share=interest / total,
    )
