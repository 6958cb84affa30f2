from __future__ import annotations

from compounding.core.projection import project


def final_balance(initial, monthly, rate, years) -> int:
    return project(initial, monthly, rate, years)[-1].balance


def test_balance_increases_with_monthly_contribution():
    balances = [final_balance(1000, monthly, 7, 20) for monthly in (0, 50, 100, 150, 200)]

    assert all(later > earlier for earlier, later in zip(balances, balances[1:]))


def test_balance_increases_with_initial_amount():
    balances = [final_balance(initial, 100, 7, 20) for initial in (0, 1000, 5000, 25000)]

    assert all(later > earlier for earlier, later in zip(balances, balances[1:]))


def test_balance_increases_with_horizon():
    balances = [final_balance(0, 100, 7, years) for years in range(1, 41)]

    assert all(later > earlier for earlier, later in zip(balances, balances[1:]))


def test_compound_beats_simple_for_positive_rate():
    rows = project(1000, 100, 7, 20)

    assert all(row.balance > row.simpleBalance for row in rows[1:])
