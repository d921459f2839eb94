from __future__ import annotations

"""Calendar helpers shared by the payoff calculators."""

from datetime import date

from dateutil.relativedelta import relativedelta


def today() -> date:
    """Return the date projections are anchored to."""

    return date.today()


def add_months(d: date, months: int) -> date:
    """Return ``d`` shifted by ``months`` calendar months.

    The day is clamped to the length of the target month, so January 31st
    plus one month lands on the last day of February.
    """

    return d + relativedelta(months=months)
