"""Property checks for the payoff engine."""

import os
import sys
from datetime import date
from pathlib import Path

from hypothesis import given, settings, strategies as st

sys.path.insert(0, os.path.abspath(os.path.join(Path(__file__).resolve().parent, "..")))

from debt_payoff import MAX_MONTHS, Debt, order_debts, simulate_payoff
from interest import monthly_interest

START = date(2024, 6, 1)


@st.composite
def debt_lists(draw, max_size=4):
    size = draw(st.integers(min_value=1, max_value=max_size))
    return [
        Debt(
            id=str(i),
            name=f"Debt {i}",
            balance=draw(st.integers(min_value=0, max_value=20_000)),
            interest_rate=draw(st.integers(min_value=0, max_value=30)),
            minimum_payment=draw(st.integers(min_value=0, max_value=400)),
        )
        for i in range(size)
    ]


@st.composite
def covered_debt_lists(draw, max_size=4):
    """Debts whose minimum beats their first month of interest."""
    size = draw(st.integers(min_value=1, max_value=max_size))
    debts = []
    for i in range(size):
        balance = draw(st.integers(min_value=1, max_value=20_000))
        rate = draw(st.integers(min_value=0, max_value=30))
        margin = draw(st.integers(min_value=1, max_value=300))
        debts.append(
            Debt(str(i), f"Debt {i}", balance, rate, monthly_interest(balance, rate) + margin)
        )
    return debts


strategy_names = st.sampled_from(["avalanche", "snowball"])
extras = st.integers(min_value=0, max_value=1_000)


@settings(max_examples=40, deadline=None)
@given(debts=debt_lists(), extra=extras, strategy=strategy_names)
def test_simulation_always_terminates(debts, extra, strategy):
    result = simulate_payoff(debts, extra, strategy, start=START)
    assert result.months_to_payoff <= MAX_MONTHS
    assert len(result.monthly_snapshots) == result.months_to_payoff
    for i, snap in enumerate(result.monthly_snapshots, 1):
        assert snap.month == i
        assert len(snap.debts) == len(debts)
        assert all(d.balance >= 0 for d in snap.debts)
    if result.months_to_payoff and not result.capped:
        assert result.monthly_snapshots[-1].total_balance == 0


@settings(max_examples=40, deadline=None)
@given(debts=covered_debt_lists(), extra=extras, strategy=strategy_names)
def test_total_balance_never_rises_when_minimums_cover_interest(debts, extra, strategy):
    result = simulate_payoff(debts, extra, strategy, start=START)
    totals = [s.total_balance for s in result.monthly_snapshots]
    assert all(later <= earlier for earlier, later in zip(totals, totals[1:]))


@given(debts=debt_lists(max_size=6), strategy=strategy_names)
def test_ordering_is_idempotent(debts, strategy):
    once = order_debts(debts, strategy)
    assert [d.id for d in order_debts(once, strategy)] == [d.id for d in once]


@settings(max_examples=40, deadline=None)
@given(debts=debt_lists(), extra=extras)
def test_cumulative_interest_never_decreases(debts, extra):
    result = simulate_payoff(debts, extra, "avalanche", start=START)
    paid = [s.interest_paid for s in result.monthly_snapshots]
    assert all(later >= earlier for earlier, later in zip(paid, paid[1:]))
