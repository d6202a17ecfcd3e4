"""Tests for Timeline."""

from __future__ import annotations

from realsave.config.defaults import default_params
from realsave.core.timeline import Timeline


class TestTimeline:
    def test_from_params(self) -> None:
        tl = Timeline.from_params(default_params())
        assert tl.n_years == 35
        assert tl.start_age is None

    def test_years_inclusive(self) -> None:
        tl = Timeline(n_years=3)
        assert tl.years().tolist() == [0, 1, 2, 3]

    def test_age_at(self) -> None:
        tl = Timeline(n_years=35, start_age=30)
        assert tl.age_at(0) == 30
        assert tl.age_at(35) == 65

    def test_age_unknown(self) -> None:
        assert Timeline(n_years=5).age_at(2) is None
