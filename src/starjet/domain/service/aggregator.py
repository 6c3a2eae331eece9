"""Sale-level totals: subtotal of all rows and the discounted grand total."""

from __future__ import annotations

import math
from typing import Iterable, Protocol

from starjet.domain.model.value_objects import SaleTotals, round_money


class HasTotal(Protocol):
    @property
    def total(self) -> float: ...


def aggregate(rows: Iterable[HasTotal], discount_percent: float) -> SaleTotals:
    """Sum the row totals and apply a percentage discount.

    Always a full recompute over *rows*. ``math.fsum`` keeps the sum exact
    up to the final rounding, so the row order never changes the result.
    Rounding to cents happens only on the returned values.
    """
    subtotal = math.fsum(row.total for row in rows)
    grand_total = subtotal
    if discount_percent > 0:
        grand_total = subtotal * (1 - discount_percent / 100)
    return SaleTotals(subtotal=round_money(subtotal), grand_total=round_money(grand_total))
