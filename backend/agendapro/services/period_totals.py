"""
Period aggregation over the cash ledger.

Pure functions of (transactions, today): no I/O, no clock reads. Amounts are
summed as ``Decimal`` so the result does not depend on the order of the
transactions and does not accumulate floating point error.
"""

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Tuple

from agendapro.domain.entities import Transaction

Window = Tuple[date, date]


@dataclass(frozen=True)
class PeriodTotals:
    today: Decimal
    week: Decimal
    month: Decimal

    def to_dict(self) -> dict:
        return {
            "today": float(self.today),
            "week": float(self.week),
            "month": float(self.month),
        }


def day_window(today: date) -> Window:
    return today, today


def week_window(today: date) -> Window:
    """Monday..Sunday of the week containing ``today``."""
    monday = today - timedelta(days=today.weekday())
    return monday, monday + timedelta(days=6)


def month_window(today: date) -> Window:
    last_day = calendar.monthrange(today.year, today.month)[1]
    return today.replace(day=1), today.replace(day=last_day)


def window_total(transactions: Iterable[Transaction], start: date, end: date) -> Decimal:
    """Signed sum of the transactions dated within [start, end], inclusive.

    Credits add their amount, debits subtract it.
    """
    return sum(
        (t.signed_amount for t in transactions if start <= t.date <= end),
        Decimal("0"),
    )


def compute_period_totals(
    transactions: Iterable[Transaction], today: date
) -> PeriodTotals:
    transactions = list(transactions)
    return PeriodTotals(
        today=window_total(transactions, *day_window(today)),
        week=window_total(transactions, *week_window(today)),
        month=window_total(transactions, *month_window(today)),
    )
