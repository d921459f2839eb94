from __future__ import annotations

"""Minimum payment calculation formulas for revolving debts.

Each formula takes keyword arguments describing the account and returns the
minimum payment as a ``Decimal``. Formulas are registered in ``FORMULAS`` so
callers can select one by name.
"""

from decimal import Decimal
from typing import Callable, Dict

from interest import Number, monthly_interest, to_cents, to_decimal


def percent_with_floor(balance: Number, percentage: Number, floor: Number) -> Decimal:
    """Percentage of the balance, never below ``floor`` nor above the balance."""

    balance = to_decimal(balance)
    payment = max(balance * to_decimal(percentage) / Decimal("100"), to_decimal(floor))
    return min(payment, balance)


def interest_plus_one_percent(balance: Number, annual_rate: Number) -> Decimal:
    """Generic credit card minimum: one month's interest plus 1% of balance."""

    balance = to_decimal(balance)
    base = monthly_interest(balance, annual_rate) + balance * Decimal("0.01")
    return to_cents(base)


FORMULAS: Dict[str, Callable[..., Decimal]] = {
    "percent_with_floor": percent_with_floor,
    "interest_plus_one_percent": interest_plus_one_percent,
}


def minimum_payment(formula: str, **kwargs) -> Decimal:
    """Return the minimum payment computed by the named ``formula``."""

    try:
        calculate = FORMULAS[formula]
    except KeyError:
        raise ValueError(f"Unknown minimum payment formula: {formula}")
    return calculate(**kwargs)
