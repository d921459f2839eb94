import json
import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.abspath(os.path.join(Path(__file__).resolve().parent, "..")))

import fin


def _data():
    return {
        "debts": [
            {"id": "1", "name": "Card", "balance": 1000.0, "minimum_payment": 50.0, "apr": 20.0},
            {"id": "2", "name": "Loan", "balance": 2000.0, "minimum_payment": 60.0, "apr": 10.0},
        ]
    }


def _mock_inputs(monkeypatch, inputs):
    it = iter(inputs)
    monkeypatch.setattr("builtins.input", lambda _: next(it))


def test_run_payoff_prints_schedule(monkeypatch, capsys):
    _mock_inputs(monkeypatch, ["avalanche", "100"])
    fin.run_payoff(_data())
    out = capsys.readouterr().out
    assert "Month 1: total=$2823 interest=$33 (Card $867, Loan $1957)" in out
    assert "Debt free in" in out


def test_run_payoff_defaults_to_avalanche(monkeypatch, capsys):
    _mock_inputs(monkeypatch, ["", ""])
    fin.run_payoff(_data())
    assert "Debt free in" in capsys.readouterr().out


def test_run_payoff_reports_cap(monkeypatch, capsys):
    data = {
        "debts": [
            {"id": "1", "name": "Card", "balance": 1200.0, "minimum_payment": 12.0, "apr": 12.0}
        ]
    }
    _mock_inputs(monkeypatch, ["snowball", "0"])
    fin.run_payoff(data)
    assert "Still in debt after 600 months" in capsys.readouterr().out


def test_run_payoff_unknown_strategy(monkeypatch, capsys):
    _mock_inputs(monkeypatch, ["cheapest", "0"])
    fin.run_payoff(_data())
    assert "Warning: Unknown payoff strategy: cheapest" in capsys.readouterr().out


def test_run_comparison(monkeypatch, capsys):
    _mock_inputs(monkeypatch, ["100"])
    fin.run_comparison(_data())
    out = capsys.readouterr().out
    assert out.startswith("avalanche:")
    assert "snowball:" in out
    assert "Avalanche saves $0 in interest" in out


def test_data_file_round_trip(monkeypatch, tmp_path):
    monkeypatch.setattr(fin, "DATA_FILE", tmp_path / "data.json")
    assert fin.load_data() == {"debts": []}
    fin.save_data(_data())
    assert json.loads((tmp_path / "data.json").read_text()) == _data()
    assert fin.load_data() == _data()


def test_run_comparison_rejects_nan_balance(monkeypatch, capsys):
    data = {
        "debts": [
            {"id": "1", "name": "Card", "balance": float("nan"), "minimum_payment": 50.0, "apr": 20.0}
        ]
    }
    _mock_inputs(monkeypatch, ["100"])
    fin.run_comparison(data)
    assert "Warning: Card balance must be a non-negative number" in capsys.readouterr().out


def test_run_payoff_rejects_negative_minimum(monkeypatch, capsys):
    data = _data()
    data["debts"][1]["minimum_payment"] = -50.0
    _mock_inputs(monkeypatch, ["avalanche", "0"])
    fin.run_payoff(data)
    out = capsys.readouterr().out
    assert "Warning: Loan minimum_payment must be a non-negative number" in out
    assert "Month 1" not in out


def test_extra_payment_must_be_finite(monkeypatch, capsys):
    _mock_inputs(monkeypatch, ["inf"])
    fin.run_comparison(_data())
    assert "Warning: Extra monthly payment must be a non-negative number" in capsys.readouterr().out


def test_extra_payment_must_be_a_number(monkeypatch, capsys):
    _mock_inputs(monkeypatch, ["snowball", "lots"])
    fin.run_payoff(_data())
    assert "Warning:" in capsys.readouterr().out
