from __future__ import annotations

"""Interest helpers for monthly-compounding debts.

Annual rates are percentages (``19.99`` means 19.99% APR). Every calculator
accrues interest once per month at ``annual_rate / 100 / 12`` and these
helpers keep that convention in one place. Values are never rounded here;
callers quantize at their output boundary.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, str, Decimal]

CENT = Decimal("0.01")
UNIT = Decimal("1")
MONTHS_PER_YEAR = Decimal("12")


def to_decimal(value: Number) -> Decimal:
    """Convert user input to ``Decimal`` without picking up float noise."""

    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def to_units(value: Decimal) -> int:
    """Round half-up to whole currency units."""

    return int(value.quantize(UNIT, rounding=ROUND_HALF_UP))


def monthly_rate(annual_rate: Number) -> Decimal:
    # 6% APR => 0.005 per month
    return to_decimal(annual_rate) / Decimal("100") / MONTHS_PER_YEAR


def monthly_interest(balance: Number, annual_rate: Number) -> Decimal:
    """Return one month of interest on ``balance``."""

    return to_decimal(balance) * monthly_rate(annual_rate)


def amortized_payment(principal: Number, annual_rate: Number, months: int) -> Decimal:
    """Return the level payment that retires ``principal`` in ``months``.

    Uses ``P * r(1+r)^n / ((1+r)^n - 1)``; a zero rate spreads the principal
    evenly.

    Raises
    ------
    ValueError
        If ``months`` is not positive.
    """

    if months <= 0:
        raise ValueError(f"Loan term must be positive, got {months} months")
    principal = to_decimal(principal)
    rate = monthly_rate(annual_rate)
    if rate == 0:
        return principal / months
    factor = (1 + rate) ** months
    return principal * rate * factor / (factor - 1)
