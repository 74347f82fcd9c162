from __future__ import annotations

"""Simulate paying down a ledger of debts month by month.

Every month interest accrues on all unpaid debts, then each debt receives its
minimum payment. The extra payment pool goes to the single debt chosen by the
active strategy. Any debt whose balance has dropped to (about) zero is marked
paid and its minimum payment joins the pool for every later month. This is
the cascade shared by the avalanche and snowball methods.

All arithmetic uses ``Decimal`` at full precision; totals are only rounded to
cents when the result is assembled.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import List, Optional

from ledger import Debt, unpaid
from strategies import Selector

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
# 100 years; guards against minimums that never amortize a balance
MAX_MONTHS = 1200
PAYOFF_THRESHOLD = Decimal("0.005")


def round_cents(value: Decimal) -> Decimal:
    """Quantize ``value`` to cents, widening precision for huge balances."""

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass
class PayoffResult:
    """Summary of one simulation run."""

    total_interest: Decimal
    total_paid: Decimal
    months: int
    payoff_order: List[str] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "total_interest": self.total_interest,
            "total_paid": self.total_paid,
            "months": self.months,
            "payoff_order": list(self.payoff_order),
        }


def simulate(
    debts: List[Debt],
    extra_payment: Decimal | float | int,
    select_target: Selector,
    *,
    max_months: int = MAX_MONTHS,
    payoff_threshold: Decimal = PAYOFF_THRESHOLD,
    month_log: Optional[List[dict]] = None,
) -> PayoffResult:
    """Run the payoff loop over ``debts`` and return the totals.

    Parameters
    ----------
    debts:
        Ledger built by ``ledger.build_ledger``. It is mutated in place and
        should not be reused for another run.
    extra_payment:
        Amount paid each month on top of all minimums. Freed minimums are
        added to it as debts are paid off.
    select_target:
        Strategy picking the debt that receives the extra pool, see
        ``strategies``.
    max_months:
        Iteration ceiling. Reaching it is not an error; the state at that
        point is returned and any unpaid debts are missing from
        ``payoff_order``.
    payoff_threshold:
        Balances at or below this are treated as paid off.
    month_log:
        Optional list populated with one snapshot per month with keys
        ``month``, ``target``, ``extra_pool``, ``balances`` and ``paid_off``.
    """

    extra_pool = Decimal(str(extra_payment))
    total_interest = Decimal("0")
    total_paid = Decimal("0")
    months = 0
    payoff_order: List[str] = []

    while months < max_months:
        active = unpaid(debts)
        if not active:
            break
        months += 1

        # Interest accrues on the balance carried into the month
        for debt in active:
            interest = debt.balance * debt.monthly_rate
            debt.balance += interest
            total_interest += interest

        for debt in active:
            payment = min(debt.minimum_payment, debt.balance)
            debt.balance -= payment
            total_paid += payment

        # Debts cleared by their minimum alone are not candidates
        candidates = [d for d in active if d.balance > payoff_threshold]
        target = select_target(candidates)
        if target is not None:
            extra = min(extra_pool, target.balance)
            target.balance -= extra
            total_paid += extra

        paid_off: List[str] = []
        for debt in debts:
            if not debt.paid and debt.balance <= payoff_threshold:
                debt.balance = Decimal("0")
                debt.paid = True
                payoff_order.append(debt.name)
                paid_off.append(debt.name)
                extra_pool += debt.minimum_payment
                logger.debug(
                    "%s paid off in month %d; extra pool now %s",
                    debt.name,
                    months,
                    extra_pool,
                )

        if month_log is not None:
            month_log.append(
                {
                    "month": months,
                    "target": target.name if target is not None else None,
                    "extra_pool": extra_pool,
                    "balances": [(d.name, d.balance) for d in debts],
                    "paid_off": paid_off,
                }
            )

    remaining = unpaid(debts)
    if remaining:
        logger.warning(
            "Stopped after %d months with %d unpaid debt(s): %s",
            months,
            len(remaining),
            ", ".join(d.name for d in remaining),
        )

    return PayoffResult(
        total_interest=round_cents(total_interest),
        total_paid=round_cents(total_paid),
        months=months,
        payoff_order=payoff_order,
    )
