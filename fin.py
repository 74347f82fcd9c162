"""Command-line interface for managing debts and comparing payoff strategies."""

from datetime import date
from pathlib import Path
import json
import logging
from typing import Dict, List, Optional

from dateutil.relativedelta import relativedelta

from compare import compare_strategies


DATA_FILE = Path(__file__).with_name("debts.json")


def load_data() -> Dict:
    """Load saved debts from ``debts.json``."""
    if DATA_FILE.exists():
        with DATA_FILE.open() as f:
            return json.load(f)
    return {"debts": [], "extra_monthly_payment": 0}


def save_data(data: Dict) -> None:
    """Persist debts and the extra monthly payment to disk."""
    with DATA_FILE.open("w") as f:
        json.dump(data, f, indent=2)


def debt_free_date(months: int, start: Optional[date] = None) -> date:
    """Return the first day of the month ``months`` months after ``start``."""
    if start is None:
        start = date.today()
    return start.replace(day=1) + relativedelta(months=months)


# ---------------------------------------------------------------------------
# Editing helpers


def _delete_item(items: List[dict]) -> None:
    idx = input("Number to delete: ").strip()
    if idx.isdigit() and 1 <= int(idx) <= len(items):
        del items[int(idx) - 1]


def edit_debts(data: Dict) -> None:
    """Add or remove debt entries."""
    debts = data.setdefault("debts", [])
    while True:
        print("\nCurrent debts:")
        for i, d in enumerate(debts, 1):
            print(
                f"{i}. {d['name']} balance ${d['balance']} min ${d['minimum_payment']} rate {d['rate']}%"
            )
        action = input("A)dd, D)elete, B)ack: ").strip().lower()
        if action == "a":
            name = input("Name: ").strip() or "Debt"
            balance = float(input("Balance: ").strip())
            minimum = float(input("Minimum payment: ").strip())
            rate = float(input("Annual rate (%): ").strip())
            debts.append(
                {
                    "name": name,
                    "balance": balance,
                    "minimum_payment": minimum,
                    "rate": rate,
                }
            )
            save_data(data)
        elif action == "d":
            _delete_item(debts)
            save_data(data)
        elif action == "b":
            break


def edit_extra_payment(data: Dict) -> None:
    """Set the amount paid each month on top of all minimums."""
    current = data.get("extra_monthly_payment", 0)
    value = input(f"Extra monthly payment [{current}]: ").strip()
    if value:
        data["extra_monthly_payment"] = float(value)
        save_data(data)


# ---------------------------------------------------------------------------
# Comparison


def _print_strategy(label: str, result: Dict, debt_count: int) -> None:
    months = result["months"]
    if len(result["payoff_order"]) < debt_count:
        when = "NOT PAID OFF"
    else:
        when = f"debt free {debt_free_date(months):%B %Y}"
    print(f"{label}: {months} months ({when})")
    print(f"  Total interest: ${result['total_interest']:.2f}")
    print(f"  Total paid:     ${result['total_paid']:.2f}")
    print(f"  Payoff order:   {', '.join(result['payoff_order']) or 'none'}")


def _print_month_log(month_log: List[dict]) -> None:
    for entry in month_log:
        balances = ", ".join(
            f"{name} ${balance:.2f}" for name, balance in entry["balances"]
        )
        line = (
            f"Month {entry['month']}: extra ${entry['extra_pool']:.2f} "
            f"-> {entry['target'] or 'none'} ({balances})"
        )
        if entry["paid_off"]:
            line += f" <<< PAID OFF {', '.join(entry['paid_off'])}"
        print(line)


def run_comparison(data: Dict, debug: bool = False) -> None:
    """Compare the avalanche and snowball strategies for the saved debts."""
    print("---  Debt Payoff Comparison ---")
    debts = data.get("debts", [])
    month_logs: Dict[str, List[dict]] = {}

    try:
        result = compare_strategies(
            debts,
            data.get("extra_monthly_payment", 0),
            month_logs=month_logs if debug else None,
        )
    except ValueError as exc:
        print(f"Warning: {exc}")
        return

    if debug:
        print("\nAvalanche month by month:")
        _print_month_log(month_logs["avalanche"])
        print()

    _print_strategy("Avalanche", result["avalanche"], len(debts))
    _print_strategy("Snowball", result["snowball"], len(debts))
    print(f"\nInterest saved with avalanche: ${result['interest_saved']:.2f}")


# ---------------------------------------------------------------------------
# Menu


def main(debug: bool = False) -> None:
    """Display the main menu and handle user selections."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    data = load_data()
    while True:
        print("\n--- Debt Payoff Menu ---")
        print("1. Edit debts")
        print("2. Set extra monthly payment")
        print("3. Compare avalanche and snowball")
        print("4. Quit")
        choice = input("Select an option: ").strip()
        if choice == "1":
            edit_debts(data)
        elif choice == "2":
            edit_extra_payment(data)
        elif choice == "3":
            run_comparison(data, debug=debug)
        elif choice == "4":
            break
        else:
            print("Invalid option.")


if __name__ == "__main__":
    main()
