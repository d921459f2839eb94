from __future__ import annotations

"""Month-by-month payoff simulation for several debts at once.

Debts are ranked once, before the first month, by the chosen strategy:

``avalanche``
    highest interest rate first.
``snowball``
    smallest starting balance first.

Each month then runs three phases in a fixed order. Interest is added to
every open debt. The monthly budget (all original minimums plus the extra
payment) is walked through the ranked debts, each open debt taking its
minimum while money remains, so a paid-off debt's minimum flows on to the
next one. Whatever is left goes to the first open debt in rank order.
A snapshot of the month is recorded after the three phases.

The simulation stops once every balance is zero or after ``MAX_MONTHS``
months, whichever comes first. Hitting the cap is not an error: the result
carries ``capped=True`` and whatever was accumulated so far.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from dates import add_months, today
from interest import Number, monthly_interest, to_decimal, to_units
from minimum_payments import minimum_payment

logger = logging.getLogger(__name__)

AVALANCHE = "avalanche"
SNOWBALL = "snowball"
STRATEGIES = (AVALANCHE, SNOWBALL)

# 50 years
MAX_MONTHS = 600


@dataclass
class Debt:
    """An account under repayment.

    ``interest_rate`` is an annual percentage. A debt whose balance is zero
    or less is paid off: it accrues nothing and takes no payments, but it
    still appears in every snapshot.
    """

    id: str
    name: str
    balance: Decimal
    interest_rate: Decimal
    minimum_payment: Decimal

    def __post_init__(self) -> None:
        self.balance = to_decimal(self.balance)
        self.interest_rate = to_decimal(self.interest_rate)
        self.minimum_payment = to_decimal(self.minimum_payment)

    @classmethod
    def from_dict(cls, data: dict) -> "Debt":
        """Build a debt from a stored record.

        Records without a ``minimum_payment`` use the generic credit card
        minimum: one month of interest plus 1% of the balance.
        """
        rate = data.get("apr", data.get("interest_rate", 0))
        minimum = data.get("minimum_payment")
        if minimum is None:
            minimum = minimum_payment(
                "interest_plus_one_percent", balance=data["balance"], annual_rate=rate
            )
        return cls(
            id=str(data.get("id") or data["name"]),
            name=data["name"],
            balance=data["balance"],
            interest_rate=rate,
            minimum_payment=minimum,
        )


@dataclass(frozen=True)
class DebtSnapshot:
    id: str
    name: str
    balance: int


@dataclass(frozen=True)
class MonthlySnapshot:
    """State after one month: per-debt balances, total balance and the
    interest paid so far, all in whole currency units."""

    month: int
    debts: Tuple[DebtSnapshot, ...]
    total_balance: int
    interest_paid: int


@dataclass(frozen=True)
class PayoffResult:
    strategy: str
    months_to_payoff: int
    total_interest_paid: int
    payoff_date: date
    monthly_snapshots: Tuple[MonthlySnapshot, ...] = field(default_factory=tuple)
    capped: bool = False


# ---------------------------------------------------------------------------
# Ordering


def _sort_key(strategy: str):
    if strategy == AVALANCHE:
        return lambda d: -d.interest_rate
    if strategy == SNOWBALL:
        return lambda d: d.balance
    raise ValueError(f"Unknown payoff strategy: {strategy}")


def order_debts(debts: Iterable[Debt], strategy: str) -> List[Debt]:
    """Return ``debts`` in the order ``strategy`` pays them.

    The sort is stable, so ties keep their input order. The input is left
    untouched.
    """

    return sorted(debts, key=_sort_key(strategy))


# ---------------------------------------------------------------------------
# Simulation


def _accrue_interest(debts: List[Debt]) -> Decimal:
    accrued = Decimal("0")
    for debt in debts:
        if debt.balance > 0:
            interest = monthly_interest(debt.balance, debt.interest_rate)
            debt.balance += interest
            accrued += interest
    return accrued


def _pay_minimums(debts: List[Debt], pool: Decimal) -> Decimal:
    """Walk the shared pool through ``debts`` and return what is left."""

    for debt in debts:
        if debt.balance > 0:
            payment = min(debt.minimum_payment, debt.balance, pool)
            debt.balance -= payment
            pool -= payment
    return pool


def _pay_target(debts: List[Debt], pool: Decimal) -> None:
    target = next((d for d in debts if d.balance > 0), None)
    if target is not None and pool > 0:
        target.balance -= min(pool, target.balance)


def _snapshot(month: int, debts: List[Debt], interest_paid: Decimal) -> MonthlySnapshot:
    floored = [max(Decimal("0"), d.balance) for d in debts]
    return MonthlySnapshot(
        month=month,
        debts=tuple(
            DebtSnapshot(id=d.id, name=d.name, balance=to_units(balance))
            for d, balance in zip(debts, floored)
        ),
        total_balance=to_units(sum(floored, Decimal("0"))),
        interest_paid=to_units(interest_paid),
    )


def simulate_payoff(
    debts: Iterable[Debt],
    extra_payment: Number,
    strategy: str,
    start: Optional[date] = None,
) -> PayoffResult:
    """Simulate paying off ``debts`` with ``extra_payment`` on top of minimums.

    Parameters
    ----------
    debts:
        Debts to repay. They are copied; the caller's objects never change.
    extra_payment:
        Money available each month beyond the sum of minimum payments.
    strategy:
        ``"avalanche"`` or ``"snowball"``.
    start:
        Date the projection starts from. Defaults to today.

    Returns
    -------
    PayoffResult
        Months elapsed, total interest, projected payoff date and one
        snapshot per simulated month.
    """

    originals = list(debts)
    working = [replace(d) for d in order_debts(originals, strategy)]
    budget = sum((d.minimum_payment for d in originals), Decimal("0")) + to_decimal(
        extra_payment
    )

    snapshots: List[MonthlySnapshot] = []
    total_interest = Decimal("0")
    month = 0
    while month < MAX_MONTHS and any(d.balance > 0 for d in working):
        month += 1
        total_interest += _accrue_interest(working)
        pool = _pay_minimums(working, budget)
        _pay_target(working, pool)
        snapshots.append(_snapshot(month, working, total_interest))

    capped = any(d.balance > 0 for d in working)
    if capped:
        logger.warning(
            "%s plan still owes money after %d months; projection capped",
            strategy,
            MAX_MONTHS,
        )
    logger.debug(
        "%s plan: %d debts, %d months, interest %s",
        strategy,
        len(working),
        month,
        total_interest,
    )

    return PayoffResult(
        strategy=strategy,
        months_to_payoff=month,
        total_interest_paid=to_units(total_interest),
        payoff_date=add_months(start or today(), month),
        monthly_snapshots=tuple(snapshots),
        capped=capped,
    )


def compare_strategies(
    debts: Iterable[Debt], extra_payment: Number, start: Optional[date] = None
) -> Dict[str, PayoffResult]:
    """Run every strategy on the same debts and extra payment.

    Each run orders and pays down its own copy of the debts, so the runs
    are independent of one another and ``debts`` is left unchanged.
    """

    debts = list(debts)
    return {
        strategy: simulate_payoff(debts, extra_payment, strategy, start=start)
        for strategy in STRATEGIES
    }


def interest_savings(comparison: Dict[str, PayoffResult]) -> int:
    """Return how much less interest avalanche pays than snowball."""

    return (
        comparison[SNOWBALL].total_interest_paid
        - comparison[AVALANCHE].total_interest_paid
    )
