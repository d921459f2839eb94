from __future__ import annotations

"""Fixed-rate installment loan amortization (auto, personal, student...)."""

from dataclasses import dataclass
from decimal import Decimal
from typing import List

from interest import (
    Number,
    amortized_payment,
    monthly_rate,
    to_cents,
    to_decimal,
    to_units,
)


@dataclass
class LoanInputs:
    principal: Decimal
    interest_rate: Decimal  # annual percentage
    term_months: int

    def __post_init__(self) -> None:
        self.principal = to_decimal(self.principal)
        self.interest_rate = to_decimal(self.interest_rate)


@dataclass(frozen=True)
class AmortizationRow:
    """One month of the schedule, rounded to cents."""

    month: int
    year: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal
    total_interest: Decimal
    total_principal: Decimal


@dataclass(frozen=True)
class LoanSummary:
    monthly_payment: Decimal
    total_payments: int
    total_interest: int
    total_principal: int
    schedule: List[AmortizationRow]


def monthly_payment(principal: Number, annual_rate: Number, months: int) -> Decimal:
    """Return the unrounded level monthly payment for a loan."""

    return amortized_payment(principal, annual_rate, months)


def loan_amortization(inputs: LoanInputs) -> LoanSummary:
    """Build the full amortization schedule for ``inputs``.

    Each month interest is charged on the remaining balance and the rest of
    the level payment reduces principal. The final month retires whatever
    balance is left so the schedule always ends at zero.
    """

    payment = monthly_payment(inputs.principal, inputs.interest_rate, inputs.term_months)
    rate = monthly_rate(inputs.interest_rate)

    schedule: List[AmortizationRow] = []
    balance = inputs.principal
    total_interest = Decimal("0")
    total_principal = Decimal("0")

    for month in range(1, inputs.term_months + 1):
        interest = balance * rate
        principal = payment - interest
        if month == inputs.term_months:
            principal = balance

        balance -= principal
        total_interest += interest
        total_principal += principal

        schedule.append(
            AmortizationRow(
                month=month,
                year=(month - 1) // 12 + 1,
                payment=to_cents(payment),
                principal=to_cents(principal),
                interest=to_cents(interest),
                balance=max(Decimal("0"), to_cents(balance)),
                total_interest=to_cents(total_interest),
                total_principal=to_cents(total_principal),
            )
        )

    return LoanSummary(
        monthly_payment=to_cents(payment),
        total_payments=to_units(payment * inputs.term_months),
        total_interest=to_units(total_interest),
        total_principal=to_units(total_principal),
        schedule=schedule,
    )


def remaining_balance(inputs: LoanInputs, payments_made: int) -> Decimal:
    """Return the balance still owed after ``payments_made`` payments."""

    if payments_made >= inputs.term_months:
        return Decimal("0")

    payment = monthly_payment(inputs.principal, inputs.interest_rate, inputs.term_months)
    rate = monthly_rate(inputs.interest_rate)
    balance = inputs.principal
    for _ in range(payments_made):
        balance -= payment - balance * rate
    return max(Decimal("0"), to_cents(balance))
