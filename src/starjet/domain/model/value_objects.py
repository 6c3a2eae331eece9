"""Value Objects produced by the calculation engine.

Value Objects are immutable and compared by value, not identity.
Every computed number travels together with a flag that says whether it
can be trusted, so a zero total is never ambiguous.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


def round_money(amount: float) -> float:
    """Round to cents. Only used at display and persistence boundaries."""
    return round(float(amount), 2)


def format_money(amount: float) -> str:
    return f"${round_money(amount):,.2f}"


@dataclass(frozen=True)
class NumericResult:
    """Outcome of parsing and range-checking one numeric field.

    ``value`` is populated even when ``valid`` is False (an out-of-range
    number is still returned), so callers must look at ``valid``.
    """

    valid: bool
    value: float

    @property
    def is_positive(self) -> bool:
        return self.valid and self.value > 0


class RowKind(Enum):
    AREA = "area"
    FLAT = "flat"
    INVALID = "invalid"
    OVERFLOW = "overflow"


@dataclass(frozen=True)
class RowTotal:
    """Total of a single sale row together with how it was derived."""

    value: float
    kind: RowKind

    @property
    def valid(self) -> bool:
        return self.kind in (RowKind.AREA, RowKind.FLAT)

    def __str__(self) -> str:
        return format_money(self.value)


@dataclass(frozen=True)
class SaleTotals:
    """Subtotal and discounted grand total, already rounded to cents."""

    subtotal: float
    grand_total: float

    @property
    def discount_amount(self) -> float:
        return round_money(self.subtotal - self.grand_total)
