import os
import sys
from decimal import Decimal
from pathlib import Path
import pytest

# Ensure project root on path for direct module imports
sys.path.insert(0, os.path.abspath(os.path.join(Path(__file__).resolve().parent, "..")))

from validation import parse_debts, parse_extra_payment


def _debt(**overrides):
    debt = {"name": "Card", "balance": 100.0, "rate": 5.0, "minimum_payment": 10.0}
    debt.update(overrides)
    return debt


def test_parse_list_and_alias():
    debts = parse_debts([{"name": "Card", "balance": 1, "rate": 2, "minimumPayment": 3}])
    assert debts == [{"name": "Card", "balance": 1, "rate": 2, "minimum_payment": 3}]


def test_parse_json_string():
    debts = parse_debts('[{"name": "Card", "balance": 1, "rate": 0, "minimum_payment": 0}]')
    assert debts[0]["name"] == "Card"


@pytest.mark.parametrize(
    "value, message",
    [
        ("{not json", "valid JSON"),
        ("[]", "non-empty"),
        ("{}", "non-empty"),
        ([], "non-empty"),
        (None, "JSON string or a list"),
        (42, "JSON string or a list"),
        (["Card"], "must be an object"),
    ],
)
def test_rejects_bad_containers(value, message):
    with pytest.raises(ValueError, match=message):
        parse_debts(value)


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"balance": -1}, "balance"),
        ({"rate": "5"}, "rate"),
        ({"rate": True}, "rate"),
        ({"minimum_payment": None}, "minimum_payment"),
        ({"balance": float("nan")}, "balance"),
        ({"balance": float("inf")}, "balance"),
    ],
)
def test_rejects_bad_numbers(overrides, field):
    with pytest.raises(ValueError, match=field):
        parse_debts([_debt(**overrides)])


def test_rejects_missing_name():
    debt = _debt()
    del debt["name"]
    with pytest.raises(ValueError, match="name"):
        parse_debts([_debt(), debt])


def test_error_names_the_debt():
    with pytest.raises(ValueError, match='"Loan"'):
        parse_debts([_debt(), _debt(name="Loan", minimum_payment=-5)])


def test_error_names_position_of_duplicate_name():
    with pytest.raises(ValueError, match=r'Debt #2 \("Card"\).*"balance"'):
        parse_debts([_debt(), _debt(balance=-1)])


def test_extra_payment():
    assert parse_extra_payment(None) == Decimal("0")
    assert parse_extra_payment(200) == Decimal("200")
    assert parse_extra_payment(12.5) == Decimal("12.5")
    for bad in (-1, "100", False):
        with pytest.raises(ValueError):
            parse_extra_payment(bad)
