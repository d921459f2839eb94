from __future__ import annotations

"""Mortgage costs beyond principal and interest.

Adds property tax, homeowners insurance, PMI and HOA dues to the standard
amortization. PMI applies while equity is under 20% of the home price and
drops off the month equity reaches it. An optional extra payment goes
straight to principal.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import List

from interest import (
    Number,
    amortized_payment,
    monthly_rate,
    to_cents,
    to_decimal,
    to_units,
)

PMI_ANNUAL_RATE = Decimal("0.0075")
PMI_EQUITY_THRESHOLD = Decimal("20")
# 28/36 rule
HOUSING_SHARE = Decimal("0.28")
TOTAL_DEBT_SHARE = Decimal("0.36")
# taxes and insurance assumed to take a quarter of the housing payment
PRINCIPAL_INTEREST_SHARE = Decimal("0.75")


@dataclass
class MortgageInputs:
    home_price: Decimal
    down_payment: Decimal
    interest_rate: Decimal  # annual percentage
    loan_term_years: int
    property_tax_rate: Decimal  # annual percentage of home price
    home_insurance: Decimal  # annual
    hoa_fees: Decimal  # monthly
    extra_payment: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        for name in (
            "home_price",
            "down_payment",
            "interest_rate",
            "property_tax_rate",
            "home_insurance",
            "hoa_fees",
            "extra_payment",
        ):
            setattr(self, name, to_decimal(getattr(self, name)))


@dataclass(frozen=True)
class MortgageMonth:
    month: int
    year: int
    payment: Decimal  # principal and interest only
    principal: Decimal
    interest: Decimal
    taxes: Decimal
    insurance: Decimal
    pmi: Decimal
    hoa: Decimal
    total_payment: Decimal
    balance: Decimal
    total_interest: Decimal
    total_principal: Decimal
    equity: Decimal
    equity_percentage: Decimal


@dataclass(frozen=True)
class MortgageSummary:
    loan_amount: int
    down_payment_amount: int
    down_payment_percentage: Decimal
    monthly_principal_interest: int
    monthly_taxes: int
    monthly_insurance: int
    monthly_pmi: int
    monthly_hoa: int
    total_monthly_payment: int
    total_interest: int
    total_cost: int
    requires_pmi: bool
    schedule: List[MortgageMonth]


def _one_decimal(value: Decimal) -> Decimal:
    return value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def monthly_pmi(loan_amount: Number, home_value: Number) -> Decimal:
    """Return monthly PMI, or zero once the down payment reaches 20%."""

    loan_amount = to_decimal(loan_amount)
    home_value = to_decimal(home_value)
    down_pct = (home_value - loan_amount) / home_value * 100
    if down_pct >= PMI_EQUITY_THRESHOLD:
        return Decimal("0")
    return loan_amount * PMI_ANNUAL_RATE / 12


def calculate_mortgage(inputs: MortgageInputs) -> MortgageSummary:
    """Return the monthly cost breakdown and amortization schedule."""

    loan_amount = inputs.home_price - inputs.down_payment
    down_pct = inputs.down_payment / inputs.home_price * 100
    term_months = inputs.loan_term_years * 12
    rate = monthly_rate(inputs.interest_rate)

    principal_interest = amortized_payment(loan_amount, inputs.interest_rate, term_months)
    taxes = inputs.home_price * inputs.property_tax_rate / 100 / 12
    insurance = inputs.home_insurance / 12
    hoa = inputs.hoa_fees
    initial_pmi = monthly_pmi(loan_amount, inputs.home_price)
    pmi = initial_pmi

    schedule: List[MortgageMonth] = []
    balance = loan_amount
    total_interest = Decimal("0")
    total_principal = Decimal("0")
    month = 0

    while balance > Decimal("0.01") and month < term_months:
        month += 1
        interest = balance * rate
        principal = principal_interest - interest + inputs.extra_payment
        principal = min(principal, balance)

        balance -= principal
        total_interest += interest
        total_principal += principal

        equity = inputs.home_price - balance
        equity_pct = equity / inputs.home_price * 100
        if equity_pct >= PMI_EQUITY_THRESHOLD:
            pmi = Decimal("0")

        schedule.append(
            MortgageMonth(
                month=month,
                year=(month - 1) // 12 + 1,
                payment=to_cents(principal_interest),
                principal=to_cents(principal),
                interest=to_cents(interest),
                taxes=to_cents(taxes),
                insurance=to_cents(insurance),
                pmi=to_cents(pmi),
                hoa=to_cents(hoa),
                total_payment=to_cents(principal_interest + taxes + insurance + pmi + hoa),
                balance=max(Decimal("0"), to_cents(balance)),
                total_interest=to_cents(total_interest),
                total_principal=to_cents(total_principal),
                equity=to_cents(equity),
                equity_percentage=_one_decimal(equity_pct),
            )
        )

    months = len(schedule)
    total_cost = (
        (principal_interest + taxes + insurance + hoa) * months
        + sum((row.pmi for row in schedule), Decimal("0"))
    )

    return MortgageSummary(
        loan_amount=to_units(loan_amount),
        down_payment_amount=to_units(inputs.down_payment),
        down_payment_percentage=_one_decimal(down_pct),
        monthly_principal_interest=to_units(principal_interest),
        monthly_taxes=to_units(taxes),
        monthly_insurance=to_units(insurance),
        monthly_pmi=to_units(initial_pmi),
        monthly_hoa=to_units(hoa),
        total_monthly_payment=to_units(principal_interest + taxes + insurance + initial_pmi + hoa),
        total_interest=to_units(total_interest),
        total_cost=to_units(total_cost),
        requires_pmi=initial_pmi > 0,
        schedule=schedule,
    )


def affordable_home_price(
    monthly_income: Number,
    monthly_debts: Number,
    down_payment: Number,
    interest_rate: Number,
    loan_term_years: int = 30,
) -> int:
    """Return the most expensive home the 28/36 rule allows."""

    income = to_decimal(monthly_income)
    max_housing = income * HOUSING_SHARE
    max_mortgage = income * TOTAL_DEBT_SHARE - to_decimal(monthly_debts)
    payment = max(Decimal("0"), min(max_housing, max_mortgage)) * PRINCIPAL_INTEREST_SHARE

    rate = monthly_rate(interest_rate)
    term_months = loan_term_years * 12
    if rate == 0:
        loan = payment * term_months
    else:
        factor = (1 + rate) ** term_months
        loan = payment * (factor - 1) / (rate * factor)

    return to_units(loan + to_decimal(down_payment))
