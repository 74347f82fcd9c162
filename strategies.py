from __future__ import annotations

"""Target selection strategies for the extra payment pool.

Each strategy takes the debts still eligible for an extra payment and returns
the one to attack this month, or ``None`` when there is nothing left. They
keep no state between months. Strategies are registered in ``STRATEGIES`` so
the simulator can be driven by name.
"""

from typing import Callable, Dict, Optional, Sequence

from ledger import Debt

Selector = Callable[[Sequence[Debt]], Optional[Debt]]


def avalanche(candidates: Sequence[Debt]) -> Optional[Debt]:
    """Highest interest rate first; ties go to the earliest debt."""

    if not candidates:
        return None
    # max() keeps the first of equal items
    return max(candidates, key=lambda d: d.monthly_rate)


def snowball(candidates: Sequence[Debt]) -> Optional[Debt]:
    """Lowest balance first; ties go to the earliest debt."""

    if not candidates:
        return None
    return min(candidates, key=lambda d: d.balance)


# ---------------------------------------------------------------------------
# Registry


STRATEGIES: Dict[str, Selector] = {
    "avalanche": avalanche,
    "snowball": snowball,
}


def get_strategy(name: str) -> Selector:
    try:
        return STRATEGIES[name]
    except KeyError:
        raise ValueError(f"Unknown payoff strategy: {name}")
