from __future__ import annotations

import pytest

from compounding.core.projection import (
    effective_annual_rate,
    interest_multiplier,
    project,
    summarize,
)
from compounding.schemas.projection import YearlySnapshot


def test_summary_for_forty_years_at_seven_percent():
    rows = project(0, 100, 7, 40)
    summary = summarize(rows, 40)

    assert summary is not None
    assert summary.finalBalance == 264012
    assert summary.totalContributions == 48000
    assert summary.interestEarned == 216012
    assert summary.interestMultiplier == pytest.approx(4.50025)
    # approximation: treats all deposits as if made on day one
    assert summary.effectiveAnnualRate == pytest.approx(4.35411054, abs=1e-6)


def test_effective_rate_defaults_to_snapshot_year():
    final = project(0, 100, 7, 40)[-1]

    assert effective_annual_rate(final) == effective_annual_rate(final, 40)


def test_effective_rate_understates_nominal_rate_with_ongoing_deposits():
    final = project(0, 100, 7, 40)[-1]

    assert 0 < effective_annual_rate(final) < 7


def test_lump_sum_effective_rate_matches_monthly_compounding():
    # a lump sum alone grows at the true effective annual rate of 12% compounded monthly (~12.68%)
    final = project(100000, 0, 12, 10)[-1]

    assert effective_annual_rate(final) == pytest.approx(12.6825, abs=1e-3)


def test_summarize_empty_projection_returns_none():
    assert summarize([]) is None
    assert summarize(project(1000, 100, 7, 0)) is None


def test_metrics_without_snapshot_are_zero():
    assert interest_multiplier(None) == 0.0
    assert effective_annual_rate(None, 10) == 0.0


def test_metrics_guard_zero_contributions():
    final = YearlySnapshot(year=3, balance=0, totalContributions=0, interestEarned=0, simpleBalance=0)

    assert interest_multiplier(final) == 0.0
    assert effective_annual_rate(final, 3) == 0.0


def test_effective_rate_with_non_positive_horizon_is_zero():
    final = project(1000, 0, 5, 2)[-1]

    assert effective_annual_rate(final, 0) == 0.0
    assert effective_annual_rate(final, "abc") == 0.0


def test_summary_after_overflow_uses_last_emitted_year():
    rows = project(1e200, 0, 1e6, 50)
    summary = summarize(rows)

    assert rows[-1].year == 3
    assert summary.effectiveAnnualRate == effective_annual_rate(rows[-1], 3)
