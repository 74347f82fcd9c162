from __future__ import annotations

"""Working set of debts for a single payoff simulation.

A ledger is a plain list of :class:`Debt` records built from validated debt
descriptors. Each simulation mutates its own ledger, so callers comparing
strategies must build a fresh one per run.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List

MONTHS_PER_YEAR_PERCENT = Decimal("1200")


@dataclass
class Debt:
    """A debt being paid down month by month."""

    name: str
    balance: Decimal
    monthly_rate: Decimal
    minimum_payment: Decimal
    paid: bool = False


def _to_decimal(value) -> Decimal:
    return Decimal(str(value))


def build_ledger(raw_debts: Iterable[dict]) -> List[Debt]:
    """Return new ``Debt`` records for ``raw_debts``.

    ``raw_debts`` are descriptors with ``name``, ``balance``, ``rate`` (annual
    percent) and ``minimum_payment`` keys, as returned by
    ``validation.parse_debts``. Every call creates new records so two ledgers
    built from the same input never share state.
    """

    return [
        Debt(
            name=d["name"],
            balance=_to_decimal(d["balance"]),
            monthly_rate=_to_decimal(d["rate"]) / MONTHS_PER_YEAR_PERCENT,
            minimum_payment=_to_decimal(d["minimum_payment"]),
        )
        for d in raw_debts
    ]


def unpaid(debts: Iterable[Debt]) -> List[Debt]:
    """Return the debts that have not been paid off yet."""

    return [d for d in debts if not d.paid]
