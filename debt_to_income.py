from __future__ import annotations

"""Debt-to-income ratios as lenders compute them.

The front-end ratio counts housing payments only; the back-end ratio counts
every monthly debt payment. Both are percentages of gross monthly income.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List

from interest import Number, to_decimal, to_units

CATEGORIES = ("mortgage", "credit", "auto", "student", "other")

# (upper bound on back-end ratio, label); checked in order
RATINGS = (
    (Decimal("20"), "excellent"),
    (Decimal("36"), "good"),
    (Decimal("43"), "fair"),
    (Decimal("50"), "poor"),
)

ELIGIBILITY = (
    (Decimal("28"), "Excellent - Qualify for best rates"),
    (Decimal("36"), "Good - Should qualify for most loans"),
    (Decimal("43"), "Fair - May qualify with some restrictions"),
)


@dataclass
class DebtItem:
    name: str
    monthly_payment: Decimal
    category: str = "other"

    def __post_init__(self) -> None:
        self.monthly_payment = to_decimal(self.monthly_payment)
        if self.category not in CATEGORIES:
            raise ValueError(f"Unknown debt category: {self.category}")


@dataclass(frozen=True)
class DTIResult:
    front_end_ratio: Decimal
    back_end_ratio: Decimal
    total_monthly_debt: int
    housing_costs: int
    available_income: int
    rating: str
    mortgage_eligibility: str


def _one_decimal(value: Decimal) -> Decimal:
    return value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def _rating(back_end: Decimal) -> str:
    for limit, label in RATINGS:
        if back_end <= limit:
            return label
    return "concerning"


def _eligibility(back_end: Decimal) -> str:
    for limit, text in ELIGIBILITY:
        if back_end <= limit:
            return text
    return "Difficult - May not qualify for conventional loans"


def calculate_dti(gross_monthly_income: Number, debts: Iterable[DebtItem]) -> DTIResult:
    """Return DTI ratios and a rating for ``debts`` against income.

    Raises
    ------
    ValueError
        If ``gross_monthly_income`` is not positive.
    """

    income = to_decimal(gross_monthly_income)
    if income <= 0:
        raise ValueError("Gross monthly income must be positive")

    items: List[DebtItem] = list(debts)
    housing = sum((d.monthly_payment for d in items if d.category == "mortgage"), Decimal("0"))
    total = sum((d.monthly_payment for d in items), Decimal("0"))

    front_end = housing / income * 100
    back_end = total / income * 100

    return DTIResult(
        front_end_ratio=_one_decimal(front_end),
        back_end_ratio=_one_decimal(back_end),
        total_monthly_debt=to_units(total),
        housing_costs=to_units(housing),
        available_income=to_units(income - total),
        rating=_rating(back_end),
        mortgage_eligibility=_eligibility(back_end),
    )
