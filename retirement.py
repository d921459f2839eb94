from __future__ import annotations

"""Retirement savings projection.

Savings compound monthly at ``expected_return / 100 / 12`` and the monthly
contribution is added after each month's growth.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Tuple

from interest import MONTHS_PER_YEAR, Number, monthly_rate, to_decimal, to_units


@dataclass
class RetirementScenario:
    current_age: int
    retirement_age: int
    current_savings: Decimal
    monthly_contribution: Decimal
    expected_return: Decimal  # annual percentage

    def __post_init__(self) -> None:
        self.current_savings = to_decimal(self.current_savings)
        self.monthly_contribution = to_decimal(self.monthly_contribution)
        self.expected_return = to_decimal(self.expected_return)

    @property
    def years(self) -> int:
        return self.retirement_age - self.current_age


@dataclass(frozen=True)
class RetirementSnapshot:
    year: int
    age: int
    balance: int
    contributions: int
    gains: int


@dataclass(frozen=True)
class RetirementProjection:
    final_balance: int
    total_contributions: int
    total_gains: int
    yearly_snapshots: Tuple[RetirementSnapshot, ...] = field(default_factory=tuple)


def _grow(balance: Decimal, scenario: RetirementScenario, months: int) -> Decimal:
    rate = monthly_rate(scenario.expected_return)
    for _ in range(months):
        balance = balance * (1 + rate) + scenario.monthly_contribution
    return balance


def retirement_balance(scenario: RetirementScenario) -> int:
    """Balance at retirement, in whole units."""

    months = scenario.years * int(MONTHS_PER_YEAR)
    return to_units(_grow(scenario.current_savings, scenario, months))


def detailed_projection(scenario: RetirementScenario) -> List[RetirementSnapshot]:
    """Year-by-year balances from today (year 0) until retirement.

    ``contributions`` counts the starting savings plus every monthly deposit
    so far; ``gains`` is the rest of the balance.
    """

    balance = scenario.current_savings
    contributions = scenario.current_savings
    snapshots = [
        RetirementSnapshot(
            year=0,
            age=scenario.current_age,
            balance=to_units(balance),
            contributions=to_units(contributions),
            gains=0,
        )
    ]
    for year in range(1, scenario.years + 1):
        balance = _grow(balance, scenario, int(MONTHS_PER_YEAR))
        contributions += scenario.monthly_contribution * MONTHS_PER_YEAR
        snapshots.append(
            RetirementSnapshot(
                year=year,
                age=scenario.current_age + year,
                balance=to_units(balance),
                contributions=to_units(contributions),
                gains=to_units(balance - contributions),
            )
        )
    return snapshots


def retirement_projection(scenario: RetirementScenario) -> RetirementProjection:
    snapshots = detailed_projection(scenario)
    final = snapshots[-1]
    return RetirementProjection(
        final_balance=final.balance,
        total_contributions=final.contributions,
        total_gains=final.gains,
        yearly_snapshots=tuple(snapshots),
    )


def funding_percentage(projected: Number, goal: Number) -> Decimal:
    """Share of ``goal`` covered by ``projected``, in percent, at most 100."""

    goal = to_decimal(goal)
    if goal <= 0:
        return Decimal("0")
    return min(to_decimal(projected) / goal * 100, Decimal("100"))
