from __future__ import annotations

"""Compare the avalanche and snowball payoff strategies side by side."""

import logging
from decimal import Decimal
from typing import Dict, List, Optional

from ledger import build_ledger
from payoff import PayoffResult, round_cents, simulate
from strategies import get_strategy
from validation import parse_debts, parse_extra_payment

logger = logging.getLogger(__name__)


def run_strategy(
    raw_debts: List[Dict],
    extra_payment: Decimal,
    strategy: str,
    month_log: Optional[List[dict]] = None,
) -> PayoffResult:
    """Simulate one strategy on a ledger of its own."""

    return simulate(
        build_ledger(raw_debts),
        extra_payment,
        get_strategy(strategy),
        month_log=month_log,
    )


def compare_strategies(
    debts,
    extra_monthly_payment=0,
    month_logs: Optional[Dict[str, List[dict]]] = None,
) -> Dict:
    """Return avalanche and snowball results plus the interest saved.

    ``debts`` may be a JSON array string or a list of dictionaries with
    ``name``, ``balance``, ``rate`` (annual percent) and ``minimum_payment``
    keys. Input is validated before anything is simulated and is never
    modified. When ``month_logs`` is given, each strategy's monthly snapshots
    are collected under its name.

    Raises
    ------
    ValueError
        If ``debts`` or ``extra_monthly_payment`` is invalid.
    """

    raw_debts = parse_debts(debts)
    extra = parse_extra_payment(extra_monthly_payment)
    logger.debug("Comparing %d debts with extra payment %s", len(raw_debts), extra)

    results: Dict[str, PayoffResult] = {}
    for name in ("avalanche", "snowball"):
        log = month_logs.setdefault(name, []) if month_logs is not None else None
        results[name] = run_strategy(raw_debts, extra, name, month_log=log)

    saved = results["snowball"].total_interest - results["avalanche"].total_interest
    interest_saved = round_cents(max(Decimal("0"), saved))
    logger.info(
        "Avalanche %d months, snowball %d months, interest saved %s",
        results["avalanche"].months,
        results["snowball"].months,
        interest_saved,
    )

    return {
        "avalanche": results["avalanche"].as_dict(),
        "snowball": results["snowball"].as_dict(),
        "interest_saved": interest_saved,
    }
