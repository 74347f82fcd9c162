import os
import sys
from decimal import Decimal
from pathlib import Path

# Ensure project root on path for direct module imports
sys.path.insert(0, os.path.abspath(os.path.join(Path(__file__).resolve().parent, "..")))

from ledger import build_ledger, unpaid


RAW = [
    {"name": "CC", "balance": 5000.1, "rate": 19.99, "minimum_payment": 100},
    {"name": "Car", "balance": 12000, "rate": 5.5, "minimum_payment": 250},
]


def test_values_are_exact_decimals():
    cc, car = build_ledger(RAW)
    assert cc.balance == Decimal("5000.1")
    assert cc.monthly_rate == Decimal("19.99") / Decimal("1200")
    assert car.minimum_payment == Decimal("250")
    assert not cc.paid and not car.paid


def test_ledgers_are_independent():
    first = build_ledger(RAW)
    second = build_ledger(RAW)
    first[0].balance = Decimal("0")
    first[0].paid = True
    assert second[0].balance == Decimal("5000.1")
    assert second[0].paid is False
    assert RAW[0]["balance"] == 5000.1


def test_unpaid_filters_paid_debts():
    debts = build_ledger(RAW)
    debts[1].paid = True
    assert [d.name for d in unpaid(debts)] == ["CC"]
