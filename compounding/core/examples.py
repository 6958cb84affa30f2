"""Fixed what-if scenarios shown next to the user's own projection."""

from __future__ import annotations

from typing import Any

from compounding.core.projection import project
from compounding.domain.coercion import coerce_number
from compounding.schemas.examples import LatteFactor, StartYoung, TimeVsAmount, WorkedExamples

DAYS_PER_MONTH = 30

LATTE_DAILY_SPEND = 50.0
LATTE_YEARS = 30

RETIREMENT_AGE = 65
EARLY_START_AGE = 20
LATE_START_AGE = 30


def calculate_example(monthly: Any, years: Any, annual_rate_percent: Any) -> int:
    """Balance reached by depositing `monthly` from zero for `years` years (0 if nothing to project)."""
    snapshots = project(0, monthly, annual_rate_percent, years)
    return snapshots[-1].balance if snapshots else 0


def worked_examples(annual_rate_percent: Any) -> WorkedExamples:
    """Time vs amount, latte factor and start-young comparisons at the given rate."""
    rate = coerce_number(annual_rate_percent)

    long_balance = calculate_example(100, 40, rate)
    short_balance = calculate_example(200, 20, rate)
    time_vs_amount = TimeVsAmount(
        longMonthly=100,
        longYears=40,
        longBalance=long_balance,
        shortMonthly=200,
        shortYears=20,
        shortBalance=short_balance,
        timeWins=long_balance > short_balance,
    )

    latte_monthly = LATTE_DAILY_SPEND * DAYS_PER_MONTH
    latte = LatteFactor(
        dailySpend=LATTE_DAILY_SPEND,
        monthlyAmount=latte_monthly,
        years=LATTE_YEARS,
        balance=calculate_example(latte_monthly, LATTE_YEARS, rate),
    )

    early = calculate_example(100, RETIREMENT_AGE - EARLY_START_AGE, rate)
    late = calculate_example(100, RETIREMENT_AGE - LATE_START_AGE, rate)
    start_young = StartYoung(
        monthlyAmount=100,
        earlyStartAge=EARLY_START_AGE,
        lateStartAge=LATE_START_AGE,
        retirementAge=RETIREMENT_AGE,
        earlyBalance=early,
        lateBalance=late,
        difference=early - late,
    )

    return WorkedExamples(
        annualRatePercent=rate,
        timeVsAmount=time_vs_amount,
        latteFactor=latte,
        startYoung=start_young,
    )
