from __future__ import annotations

"""Parse and check debt descriptors before any simulation runs."""

import json
import math
from decimal import Decimal
from typing import Dict, List

NUMERIC_FIELDS = ("balance", "rate", "minimum_payment")
ALIASES = {"minimumPayment": "minimum_payment"}


def _is_number(value) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    return False


def _check_debt(index: int, item) -> Dict:
    if not isinstance(item, dict):
        raise ValueError(f"Debt #{index + 1} must be an object")

    debt = dict(item)
    for alias, canonical in ALIASES.items():
        if alias in debt and canonical not in debt:
            debt[canonical] = debt.pop(alias)

    name = debt.get("name")
    if not isinstance(name, str) or not name:
        raise ValueError(f'Debt #{index + 1} must have a non-empty "name" string')

    for key in NUMERIC_FIELDS:
        value = debt.get(key)
        if not _is_number(value) or value < 0:
            raise ValueError(
                f'Debt #{index + 1} ("{name}") must have a non-negative numeric "{key}"'
            )

    return {
        "name": name,
        "balance": debt["balance"],
        "rate": debt["rate"],
        "minimum_payment": debt["minimum_payment"],
    }


def parse_debts(debts) -> List[Dict]:
    """Return validated debt descriptors from a JSON string or a list.

    Raises
    ------
    ValueError
        If the JSON is malformed, the list is empty or any debt has a
        missing, non-numeric or negative field.
    """

    if isinstance(debts, str):
        try:
            debts = json.loads(debts)
        except json.JSONDecodeError as exc:
            raise ValueError(f"debts must be a valid JSON array string: {exc}")
    elif not isinstance(debts, (list, tuple)):
        raise ValueError("debts must be a JSON string or a list")

    if not isinstance(debts, (list, tuple)) or not debts:
        raise ValueError("debts must be a non-empty array")

    return [_check_debt(i, item) for i, item in enumerate(debts)]


def parse_extra_payment(value) -> Decimal:
    """Return the extra monthly payment as a ``Decimal`` (``None`` means 0)."""

    if value is None:
        return Decimal("0")
    if not _is_number(value) or value < 0:
        raise ValueError('"extra_monthly_payment" must be a non-negative number')
    return Decimal(str(value))
