from __future__ import annotations

"""Payoff projections for a single credit card.

Compares paying only the card's minimum (a percentage of the balance with a
dollar floor) against a fixed monthly payment. Interest is charged on the
balance each month before the payment is applied.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

from dates import add_months, today
from debt_payoff import MAX_MONTHS
from interest import Number, monthly_rate, to_cents, to_decimal, to_units
from minimum_payments import minimum_payment

PAID_OFF_THRESHOLD = Decimal("0.01")
# a fixed payment above this share of the balance counts as aggressive
AGGRESSIVE_SHARE = Decimal("0.05")


@dataclass
class CreditCardInputs:
    balance: Decimal
    interest_rate: Decimal  # annual percentage
    minimum_payment_percentage: Decimal  # 2 means 2% of the balance
    minimum_payment_floor: Decimal

    def __post_init__(self) -> None:
        self.balance = to_decimal(self.balance)
        self.interest_rate = to_decimal(self.interest_rate)
        self.minimum_payment_percentage = to_decimal(self.minimum_payment_percentage)
        self.minimum_payment_floor = to_decimal(self.minimum_payment_floor)


@dataclass(frozen=True)
class CardMonth:
    month: int
    balance: Decimal
    payment: Decimal
    principal: Decimal
    interest: Decimal
    total_interest_paid: Decimal


@dataclass(frozen=True)
class CardPayoffScenario:
    strategy: str  # "minimum", "fixed" or "aggressive"
    months_to_payoff: int
    total_interest_paid: int
    total_paid: int
    monthly_payment: int
    payoff_date: date
    monthly_snapshots: List[CardMonth]


def _strategy_for(inputs: CreditCardInputs, fixed_payment: Optional[Decimal]) -> str:
    if not fixed_payment:
        return "minimum"
    if fixed_payment > inputs.balance * AGGRESSIVE_SHARE:
        return "aggressive"
    return "fixed"


def credit_card_payoff(
    inputs: CreditCardInputs,
    fixed_payment: Optional[Number] = None,
    start: Optional[date] = None,
) -> CardPayoffScenario:
    """Project paying off a card with minimums only or a fixed payment.

    With no ``fixed_payment`` the card's minimum is recalculated every month
    from the balance after interest. The projection stops when the balance
    drops under a cent or after ``MAX_MONTHS`` months.
    """

    fixed = to_decimal(fixed_payment) if fixed_payment else None
    strategy = _strategy_for(inputs, fixed)
    rate = monthly_rate(inputs.interest_rate)

    balance = inputs.balance
    total_interest = Decimal("0")
    snapshots: List[CardMonth] = []
    month = 0

    while balance > PAID_OFF_THRESHOLD and month < MAX_MONTHS:
        month += 1
        interest = balance * rate
        balance += interest

        if fixed is None:
            payment = minimum_payment(
                "percent_with_floor",
                balance=balance,
                percentage=inputs.minimum_payment_percentage,
                floor=inputs.minimum_payment_floor,
            )
        else:
            payment = min(fixed, balance)

        principal = payment - interest
        balance -= payment
        total_interest += interest

        snapshots.append(
            CardMonth(
                month=month,
                balance=max(Decimal("0"), to_cents(balance)),
                payment=to_cents(payment),
                principal=to_cents(principal),
                interest=to_cents(interest),
                total_interest_paid=to_cents(total_interest),
            )
        )

    total_paid = inputs.balance + total_interest
    average_payment = total_paid / month if month else Decimal("0")

    return CardPayoffScenario(
        strategy=strategy,
        months_to_payoff=month,
        total_interest_paid=to_units(total_interest),
        total_paid=to_units(total_paid),
        monthly_payment=to_units(average_payment),
        payoff_date=add_months(start or today(), month),
        monthly_snapshots=snapshots,
    )


def compare_credit_card_strategies(
    inputs: CreditCardInputs, fixed_payment: Number, start: Optional[date] = None
) -> Dict[str, CardPayoffScenario]:
    """Return the minimum-only and fixed-payment projections side by side."""

    return {
        "minimum": credit_card_payoff(inputs, start=start),
        "fixed": credit_card_payoff(inputs, fixed_payment, start=start),
    }
