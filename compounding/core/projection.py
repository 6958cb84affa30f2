from __future__ import annotations

import logging
import math
from typing import Any, List, Optional, Sequence

from compounding.domain.coercion import coerce_number, coerce_years
from compounding.schemas.inputs import InputParameters
from compounding.schemas.projection import SummaryMetrics, YearlySnapshot

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


def round_half_up(value: float) -> int:
    """Round to the nearest whole unit with halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def project(
    initial: Any,
    monthly_contribution: Any,
    annual_rate_percent: Any,
    horizon_years: Any,
) -> List[YearlySnapshot]:
    """
    Build a year-by-year table of compound growth against simple growth.

    Order of operations (per month):
      1) Add the monthly contribution.
      2) Compound the running balance at annual_rate_percent / 100 / 12,
         so a deposit earns interest in the month it is made.

    A snapshot is emitted after every 12th month. The running balance keeps
    full float precision; only emitted values are rounded.

    Inputs are coerced (empty or non-numeric -> 0, horizon truncated to whole
    years). A horizon <= 0 or any negative amount/rate returns an empty list.
    """
    initial_amount = coerce_number(initial)
    monthly = coerce_number(monthly_contribution)
    rate = coerce_number(annual_rate_percent)
    years = coerce_years(horizon_years)

    if years <= 0 or rate < 0 or monthly < 0 or initial_amount < 0:
        logger.debug(
            "projection skipped: initial=%s monthly=%s rate=%s years=%s",
            initial_amount,
            monthly,
            rate,
            years,
        )
        return []

    monthly_rate = rate / 100 / MONTHS_PER_YEAR
    annual_rate = rate / 100

    balance = initial_amount
    rows: List[YearlySnapshot] = []
    for year in range(1, years + 1):
        for _ in range(MONTHS_PER_YEAR):
            balance += monthly
            balance *= 1 + monthly_rate

        contributions = initial_amount + monthly * MONTHS_PER_YEAR * year
        if monthly_rate == 0:
            # zero rate: the balance is exactly the deposits made so far
            balance = contributions
        # simple interest never compounds: principal and the monthly amount each earn rate * years
        simple_interest = (initial_amount * annual_rate * year) + (monthly * annual_rate * year)
        simple_balance = contributions + simple_interest

        if not all(math.isfinite(v) for v in (balance, contributions, simple_balance)):
            logger.warning("projection stopped at year %d: values exceed float range", year)
            break

        rounded_balance = round_half_up(balance)
        rounded_contributions = round_half_up(contributions)
        rows.append(
            YearlySnapshot(
                year=year,
                balance=rounded_balance,
                totalContributions=rounded_contributions,
                interestEarned=rounded_balance - rounded_contributions,
                simpleBalance=round_half_up(simple_balance),
            )
        )

    return rows


def project_parameters(params: InputParameters) -> List[YearlySnapshot]:
    return project(params.initialAmount, params.monthlyAmount, params.interestRate, params.years)


def interest_multiplier(final: Optional[YearlySnapshot]) -> float:
    """Interest earned per unit contributed; 0 when nothing was contributed."""
    if final is None or final.totalContributions <= 0:
        return 0.0
    return final.interestEarned / final.totalContributions


def effective_annual_rate(final: Optional[YearlySnapshot], horizon_years: Any = None) -> float:
    """
    Approximate annual growth rate, in percent.

    This is the constant rate that would turn the total contributed into the
    final balance over the horizon, as if everything had been deposited on
    day one. It understates the return on late deposits and is not an
    IRR/XIRR. Returns 0 when nothing was contributed.

    horizon_years defaults to the snapshot's own year.
    """
    if final is None or final.totalContributions <= 0:
        return 0.0
    years = final.year if horizon_years is None else coerce_years(horizon_years)
    if years <= 0:
        return 0.0
    ratio = final.balance / final.totalContributions
    if ratio <= 0:
        return 0.0
    return (ratio ** (1 / years) - 1) * 100


def summarize(
    snapshots: Sequence[YearlySnapshot], horizon_years: Any = None
) -> Optional[SummaryMetrics]:
    """Headline metrics from the last snapshot, or None for an empty projection."""
    if not snapshots:
        return None
    final = snapshots[-1]
    return SummaryMetrics(
        finalBalance=final.balance,
        totalContributions=final.totalContributions,
        interestEarned=final.interestEarned,
        interestMultiplier=interest_multiplier(final),
        effectiveAnnualRate=effective_annual_rate(final, horizon_years),
    )


__all__ = [
    "MONTHS_PER_YEAR",
    "round_half_up",
    "project",
    "project_parameters",
    "interest_multiplier",
    "effective_annual_rate",
    "summarize",
]
