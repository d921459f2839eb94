import os
import sys
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, os.path.abspath(os.path.join(Path(__file__).resolve().parent, "..")))

from mortgage import MortgageInputs, affordable_home_price, calculate_mortgage, monthly_pmi


def _inputs(**overrides):
    values = dict(
        home_price=300000,
        down_payment=60000,
        interest_rate=6,
        loan_term_years=30,
        property_tax_rate=1.2,
        home_insurance=1200,
        hoa_fees=50,
    )
    values.update(overrides)
    return MortgageInputs(**values)


def test_twenty_percent_down_summary():
    summary = calculate_mortgage(_inputs())

    assert summary.loan_amount == 240000
    assert summary.down_payment_percentage == Decimal("20.0")
    assert summary.monthly_principal_interest == 1439
    assert summary.monthly_taxes == 300
    assert summary.monthly_insurance == 100
    assert summary.monthly_hoa == 50
    assert summary.monthly_pmi == 0
    assert not summary.requires_pmi
    assert summary.total_monthly_payment == 1889
    assert len(summary.schedule) == 360
    assert summary.schedule[-1].balance == 0


def test_pmi_drops_once_equity_reaches_twenty_percent():
    summary = calculate_mortgage(_inputs(down_payment=30000))

    assert summary.requires_pmi
    assert summary.monthly_pmi == 169
    assert summary.schedule[0].pmi == Decimal("168.75")
    assert summary.schedule[-1].pmi == 0
    dropped = next(row for row in summary.schedule if row.pmi == 0)
    assert dropped.equity_percentage >= 20


def test_extra_payment_shortens_loan():
    base = calculate_mortgage(_inputs())
    faster = calculate_mortgage(_inputs(extra_payment=500))
    assert len(faster.schedule) < len(base.schedule)
    assert faster.total_interest < base.total_interest
    assert faster.schedule[-1].balance == 0


def test_monthly_pmi():
    assert monthly_pmi(80000, 100000) == 0
    assert monthly_pmi(90000, 100000) == Decimal("56.25")


def test_affordable_home_price():
    assert affordable_home_price(10000, 0, 50000, 0) == 806000
    assert affordable_home_price(10000, 1500, 50000, 0) == 617000


def test_affordable_home_price_with_interest_is_lower():
    assert affordable_home_price(10000, 0, 50000, 6.5) < 806000
