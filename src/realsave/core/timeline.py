"""Yearly timeline for projections."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from realsave.config.schema import ProjectionParams


@dataclass(frozen=True, slots=True)
class Timeline:
    """Year grid of a projection, year 0 being the starting point.

    Attributes:
        n_years: Horizon in years (at least 1).
        start_age: Saver's age at year 0, if known.
    """

    n_years: int
    start_age: int | None = None

    @classmethod
    def from_params(cls, params: ProjectionParams, start_age: int | None = None) -> Timeline:
        """Create a Timeline covering ``params.horizon_years``."""
        return cls(n_years=params.horizon_years, start_age=start_age)

    def years(self) -> np.ndarray:
        """Year indices ``0..n_years`` inclusive."""
        return np.arange(self.n_years + 1, dtype=np.int64)

    def age_at(self, year: int) -> int | None:
        """Return the saver's age at a given year, or None without a start age."""
        if self.start_age is None:
            return None
        return self.start_age + year
