from __future__ import annotations

"""Retirement withdrawal simulation.

Two withdrawal rules are supported:

``fixed``
    withdraw ``withdrawal_rate`` percent of the starting balance in the first
    year and raise that amount by inflation every year after.
``dynamic``
    withdraw ``withdrawal_rate`` percent of whatever is left at the start of
    each year.

Each year the withdrawal is taken first, capped at the balance, and the
remainder then grows by the expected return.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple

from interest import to_decimal, to_units

logger = logging.getLogger(__name__)

FIXED = "fixed"
DYNAMIC = "dynamic"
WITHDRAWAL_STRATEGIES = (FIXED, DYNAMIC)

# (highest withdrawal rate, chance the money lasts) from historical studies
SUCCESS_RATES = (
    (Decimal("4"), Decimal("95")),
    (Decimal("5"), Decimal("75")),
    (Decimal("6"), Decimal("50")),
)
FALLBACK_SUCCESS_RATE = Decimal("25")


@dataclass
class WithdrawalInputs:
    starting_balance: Decimal
    withdrawal_rate: Decimal  # 4 means 4% a year
    current_age: int
    expected_lifespan: int  # age the money has to last until
    inflation_rate: Decimal
    expected_return: Decimal
    strategy_type: str = FIXED

    def __post_init__(self) -> None:
        self.starting_balance = to_decimal(self.starting_balance)
        self.withdrawal_rate = to_decimal(self.withdrawal_rate)
        self.inflation_rate = to_decimal(self.inflation_rate)
        self.expected_return = to_decimal(self.expected_return)
        if self.strategy_type not in WITHDRAWAL_STRATEGIES:
            raise ValueError(f"Unknown withdrawal strategy: {self.strategy_type}")


@dataclass(frozen=True)
class WithdrawalSnapshot:
    year: int
    age: int
    beginning_balance: int
    withdrawal: int
    ending_balance: int
    cumulative_withdrawn: int


@dataclass(frozen=True)
class WithdrawalResult:
    depletion_age: Optional[int]
    total_withdrawn: int
    final_balance: int
    success_probability: int
    yearly_snapshots: Tuple[WithdrawalSnapshot, ...] = field(default_factory=tuple)


def success_probability(withdrawal_rate: Decimal) -> Decimal:
    """Rough chance, in percent, that a portfolio survives at this rate."""

    for limit, chance in SUCCESS_RATES:
        if withdrawal_rate <= limit:
            return chance
    return FALLBACK_SUCCESS_RATE


def withdrawal_strategy(inputs: WithdrawalInputs) -> WithdrawalResult:
    """Simulate yearly withdrawals from ``current_age`` to ``expected_lifespan``.

    The first year in which the balance reaches zero sets ``depletion_age``;
    later years withdraw nothing. A depleted plan's success probability is
    capped at the share of retirement years it actually funded.
    """

    years = inputs.expected_lifespan - inputs.current_age
    rate = inputs.withdrawal_rate / Decimal("100")
    growth = 1 + inputs.expected_return / Decimal("100")
    inflation = 1 + inputs.inflation_rate / Decimal("100")

    balance = inputs.starting_balance
    total_withdrawn = Decimal("0")
    depletion_age: Optional[int] = None
    withdrawal = inputs.starting_balance * rate
    snapshots: List[WithdrawalSnapshot] = []

    for year in range(years):
        age = inputs.current_age + year
        beginning = balance
        if inputs.strategy_type == DYNAMIC:
            withdrawal = balance * rate
        elif year > 0:
            withdrawal *= inflation

        taken = min(withdrawal, balance)
        balance -= taken
        total_withdrawn += taken
        balance *= growth

        snapshots.append(
            WithdrawalSnapshot(
                year=year,
                age=age,
                beginning_balance=to_units(beginning),
                withdrawal=to_units(taken),
                ending_balance=to_units(balance),
                cumulative_withdrawn=to_units(total_withdrawn),
            )
        )

        if balance <= 0 and depletion_age is None:
            depletion_age = age
            balance = Decimal("0")

    probability = success_probability(inputs.withdrawal_rate)
    if depletion_age is not None:
        funded = Decimal(depletion_age - inputs.current_age) / Decimal(years)
        probability = min(probability, funded * 100)
        logger.info(
            "%s withdrawals run out at age %d", inputs.strategy_type, depletion_age
        )

    return WithdrawalResult(
        depletion_age=depletion_age,
        total_withdrawn=to_units(total_withdrawn),
        final_balance=to_units(balance),
        success_probability=to_units(probability),
        yearly_snapshots=tuple(snapshots),
    )


def compare_withdrawal_strategies(
    scenarios: Iterable[WithdrawalInputs],
) -> List[WithdrawalResult]:
    """Simulate each scenario, keeping the input order."""

    return [withdrawal_strategy(scenario) for scenario in scenarios]
