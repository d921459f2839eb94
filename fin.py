"""Command-line interface for managing debts and projecting payoff plans."""

import json
import logging
import math
import os
from decimal import Decimal
from pathlib import Path
from typing import Dict, List

from debt_payoff import (
    AVALANCHE,
    STRATEGIES,
    Debt,
    PayoffResult,
    compare_strategies,
    interest_savings,
    simulate_payoff,
)


DATA_FILE = Path(
    os.getenv("FIN_DATA_FILE", str(Path(__file__).with_name("financial_data.json")))
)
LOG_LEVEL = os.getenv("FIN_LOG_LEVEL", "WARNING")

logger = logging.getLogger(__name__)


def load_data() -> Dict:
    """Load financial data from ``DATA_FILE``."""
    if DATA_FILE.exists():
        with DATA_FILE.open() as f:
            return json.load(f)
    return {"debts": []}


def save_data(data: Dict) -> None:
    """Persist financial data to disk."""
    with DATA_FILE.open("w") as f:
        json.dump(data, f, indent=2)


# ---------------------------------------------------------------------------
# Editing helpers


def _select_item(items: List[dict], prompt: str):
    idx = input(prompt).strip()
    if idx.isdigit() and 1 <= int(idx) <= len(items):
        return int(idx) - 1
    return None


def _next_id(debts: List[dict]) -> str:
    used = {str(d.get("id")) for d in debts}
    n = len(debts) + 1
    while str(n) in used:
        n += 1
    return str(n)


def _check_amount(value: float, label: str) -> float:
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{label} must be a non-negative number, got {value}")
    return value


def _prompt_float(prompt: str, current=None) -> float:
    raw = input(prompt).strip()
    if not raw and current is not None:
        return current
    return _check_amount(float(raw), prompt.split(" [")[0].rstrip(": "))


def edit_debts(data: Dict) -> None:
    """Add, edit or remove debt entries."""
    debts = data.setdefault("debts", [])
    while True:
        print("\nCurrent debts:")
        for i, d in enumerate(debts, 1):
            print(
                f"{i}. {d['name']} balance ${d['balance']} min ${d['minimum_payment']} APR {d['apr']}"
            )
        action = input("A)dd, E)dit, D)elete, B)ack: ").strip().lower()
        try:
            if action == "a":
                name = input("Name: ").strip() or "Debt"
                balance = _prompt_float("Balance: ")
                minimum = _prompt_float("Minimum payment: ")
                apr = _prompt_float("APR: ")
                debts.append(
                    {
                        "id": _next_id(debts),
                        "name": name,
                        "balance": balance,
                        "minimum_payment": minimum,
                        "apr": apr,
                    }
                )
                save_data(data)
            elif action == "e":
                idx = _select_item(debts, "Number to edit: ")
                if idx is None:
                    continue
                d = debts[idx]
                d["name"] = input(f"Name [{d['name']}]: ").strip() or d["name"]
                d["balance"] = _prompt_float(f"Balance [{d['balance']}]: ", d["balance"])
                d["minimum_payment"] = _prompt_float(
                    f"Minimum payment [{d['minimum_payment']}]: ", d["minimum_payment"]
                )
                d["apr"] = _prompt_float(f"APR [{d['apr']}]: ", d["apr"])
                save_data(data)
            elif action == "d":
                idx = _select_item(debts, "Number to delete: ")
                if idx is not None:
                    del debts[idx]
                    save_data(data)
            elif action == "b":
                break
        except ValueError as exc:
            print(f"Warning: {exc}")


# ---------------------------------------------------------------------------
# Projections


def _load_debts(data: Dict) -> List[Debt]:
    debts = data.get("debts", [])
    for d in debts:
        for key in ("balance", "minimum_payment", "apr"):
            _check_amount(float(d.get(key, 0)), f"{d['name']} {key}")
    return [Debt.from_dict(d) for d in debts]


def _prompt_extra() -> Decimal:
    raw = input("Extra monthly payment [0]: ").strip()
    if not raw:
        return Decimal("0")
    return Decimal(str(_check_amount(float(raw), "Extra monthly payment")))


def _print_result(result: PayoffResult) -> None:
    for snap in result.monthly_snapshots:
        balances = ", ".join(f"{d.name} ${d.balance}" for d in snap.debts)
        print(
            f"Month {snap.month}: total=${snap.total_balance} "
            f"interest=${snap.interest_paid} ({balances})"
        )
    if result.capped:
        print(
            f"\nStill in debt after {result.months_to_payoff} months; "
            "payments do not keep up with interest."
        )
    else:
        print(
            f"\nDebt free in {result.months_to_payoff} months "
            f"({result.payoff_date.isoformat()})"
        )
    print(f"Total interest: ${result.total_interest_paid}")


def run_payoff(data: Dict) -> None:
    """Run a payoff projection for a single strategy."""
    print("---  Debt Payoff Planner ---")
    strategy = input(f"Strategy ({'/'.join(STRATEGIES)}) [{AVALANCHE}]: ").strip().lower()
    strategy = strategy or AVALANCHE
    try:
        extra = _prompt_extra()
        result = simulate_payoff(_load_debts(data), extra, strategy)
    except ValueError as exc:
        print(f"Warning: {exc}")
        return
    _print_result(result)


def run_comparison(data: Dict) -> None:
    """Compare avalanche and snowball side by side."""
    try:
        extra = _prompt_extra()
        comparison = compare_strategies(_load_debts(data), extra)
    except ValueError as exc:
        print(f"Warning: {exc}")
        return
    for strategy, result in comparison.items():
        status = " (capped)" if result.capped else ""
        print(
            f"{strategy}: {result.months_to_payoff} months{status}, "
            f"interest ${result.total_interest_paid}, "
            f"debt free {result.payoff_date.isoformat()}"
        )
    print(f"Avalanche saves ${interest_savings(comparison)} in interest")


# ---------------------------------------------------------------------------
# Menu


def main() -> None:
    """Display the main menu and handle user selections."""
    logging.basicConfig(
        level=LOG_LEVEL.upper(), format="%(levelname)s %(name)s: %(message)s"
    )
    data = load_data()
    logger.debug("loaded %d debts from %s", len(data.get("debts", [])), DATA_FILE)
    while True:
        print("\n--- Debt Menu ---")
        print("1. Edit debts")
        print("2. Run payoff plan")
        print("3. Compare strategies")
        print("4. Quit")
        choice = input("Select an option: ").strip()
        if choice == "1":
            edit_debts(data)
        elif choice == "2":
            run_payoff(data)
        elif choice == "3":
            run_comparison(data)
        elif choice == "4":
            break
        else:
            print("Invalid option.")


if __name__ == "__main__":
    main()
