"""Submission guard: the validation pass run over a whole sale.

``validate_sale`` is pure: it collects every violated rule into one
report instead of stopping at the first, and it never raises. The
``SubmissionGuard`` adds the stateful parts on top (rate limiting and
identifier assignment) and turns an accepted report into a new Sale.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Callable, Sequence

from starjet.domain.model.limits import (
    MAX_DISCOUNT_PERCENT,
    MAX_ITEM_DIMENSION,
    MAX_ITEMS_PER_SALE,
    MAX_PRICE_PER_ITEM,
    MAX_QUANTITY_PER_ITEM,
)
from starjet.domain.model.sale import LineItem, Sale, SaleStatus
from starjet.domain.model.value_objects import NumericResult, RowKind, SaleTotals
from starjet.domain.service.aggregator import aggregate
from starjet.domain.service.numeric import validate_numeric
from starjet.domain.service.rate_limiter import FixedWindowRateLimiter
from starjet.domain.service.row_calculator import measure_row, total_for
from starjet.domain.service.sanitizer import sanitize

logger = logging.getLogger(__name__)

RATE_LIMITED_MESSAGE = "Please wait a moment before submitting again."


@dataclass(frozen=True)
class RowInput:
    """Raw values of one form row, exactly as typed."""

    item_name: object = ""
    width: object = ""
    length: object = ""
    quantity: object = ""
    unit_price: object = ""


@dataclass(frozen=True)
class ValidationReport:
    errors: tuple[str, ...]
    items: tuple[LineItem, ...] = ()
    customer_name: str = ""
    customer_phone: str = ""
    discount_percent: float = 0.0

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def message(self) -> str:
        """All violated rules as one consolidated, user-facing message."""
        if self.ok:
            return ""
        return "Please check the sale:\n" + "\n".join(f"• {e}" for e in self.errors)

    @property
    def totals(self) -> SaleTotals | None:
        """Aggregated totals, or None when the sale was rejected."""
        if not self.ok:
            return None
        return aggregate(self.items, self.discount_percent)

    @staticmethod
    def rejected(error: str) -> ValidationReport:
        return ValidationReport(errors=(error,))


def _text(value: object) -> str:
    return sanitize("" if value is None else str(value))


def _is_blank(row: RowInput) -> bool:
    return not any(
        _text(value)
        for value in (row.item_name, row.width, row.length, row.quantity, row.unit_price)
    )


def _field_error(number: int, label: str, raw: object, result: NumericResult, maximum: int) -> str | None:
    if _text(raw) and not result.valid:
        return f"Row {number}: {label} must be a number between 0 and {maximum:,}"
    return None


def _validate_discount(raw: object) -> tuple[float, str | None]:
    if not _text(raw):
        return 0.0, None
    result = validate_numeric(raw, 0, MAX_DISCOUNT_PERCENT)
    if not result.valid:
        return 0.0, f"Discount must be a number between 0 and {MAX_DISCOUNT_PERCENT}"
    return result.value, None


def _validate_row(number: int, row: RowInput, item_name: str) -> tuple[list[str], LineItem | None]:
    fields = measure_row(row.width, row.length, row.quantity, row.unit_price)
    checks = (
        ("width", row.width, fields.width, MAX_ITEM_DIMENSION),
        ("length", row.length, fields.length, MAX_ITEM_DIMENSION),
        ("quantity", row.quantity, fields.quantity, MAX_QUANTITY_PER_ITEM),
        ("unit price", row.unit_price, fields.unit_price, MAX_PRICE_PER_ITEM),
    )
    field_errors: dict[str, str] = {}
    for label, raw, result, maximum in checks:
        error = _field_error(number, label, raw, result, maximum)
        if error is not None:
            field_errors[label] = error
    errors = list(field_errors.values())

    dimension_error = "width" in field_errors or "length" in field_errors
    if not dimension_error and fields.has_one_dimension:
        errors.append(f"Row {number}: both width and length required together, or neither")

    pricing_error = "quantity" in field_errors or "unit price" in field_errors
    if not pricing_error and not (fields.has_quantity and fields.has_unit_price):
        errors.append(f"Row {number}: quantity and unit price must both be greater than zero")

    if errors:
        return errors, None

    total = total_for(fields)
    if total.kind is RowKind.OVERFLOW:
        return [f"Row {number}: total is too large to calculate"], None

    item = LineItem(
        item_name=item_name,
        quantity=fields.quantity.value,
        unit_price=fields.unit_price.value,
        width=fields.width.value if fields.has_width else None,
        length=fields.length.value if fields.has_length else None,
    )
    return [], item


def validate_sale(
    rows: Sequence[RowInput],
    customer_name: object,
    customer_phone: object,
    discount_percent: object = 0,
) -> ValidationReport:
    """Validate a complete sale payload.

    Rows with every field empty are dropped silently. Every other row
    must price correctly, even one with no item name or quantity; any
    error rejects the whole sale and leaves ``items`` empty.
    """
    if not 1 <= len(rows) <= MAX_ITEMS_PER_SALE:
        logger.warning(
            "Sale rejected: %d rows submitted (allowed 1..%d)", len(rows), MAX_ITEMS_PER_SALE
        )
        return ValidationReport.rejected(
            f"A sale must have between 1 and {MAX_ITEMS_PER_SALE} items (got {len(rows)})"
        )

    errors: list[str] = []
    name = _text(customer_name)
    phone = _text(customer_phone)
    if not name:
        errors.append("Customer name is required")

    discount, discount_error = _validate_discount(discount_percent)
    if discount_error:
        errors.append(discount_error)

    items: list[LineItem] = []
    for number, row in enumerate(rows, start=1):
        if _is_blank(row):
            continue
        item_name = _text(row.item_name)
        row_errors, item = _validate_row(number, row, item_name)
        errors.extend(row_errors)
        # only rows naming an item or a quantity are aggregated
        if item is not None and (item_name or _text(row.quantity)):
            items.append(item)

    if all(_is_blank(row) for row in rows):
        errors.append("No items: enter at least one row with an item and a quantity")

    if errors:
        return ValidationReport(
            errors=tuple(errors),
            customer_name=name,
            customer_phone=phone,
            discount_percent=discount,
        )
    return ValidationReport(
        errors=(),
        items=tuple(items),
        customer_name=name,
        customer_phone=phone,
        discount_percent=discount,
    )


def new_sale_id() -> str:
    """Random 128-bit identifier."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Admission:
    report: ValidationReport
    sale: Sale | None = None

    @property
    def ok(self) -> bool:
        return self.sale is not None


class SubmissionGuard:
    """Rate-limits submissions and turns valid payloads into new sales."""

    def __init__(
        self,
        limiter: FixedWindowRateLimiter | None = None,
        id_factory: Callable[[], str] = new_sale_id,
    ) -> None:
        self._limiter = limiter or FixedWindowRateLimiter()
        self._id_factory = id_factory

    def admit(
        self,
        rows: Sequence[RowInput],
        customer_name: object,
        customer_phone: object,
        discount_percent: object = 0,
        session_key: str = "default",
    ) -> Admission:
        if not self._limiter.allow(session_key):
            logger.warning("Sale submission rate limited for session %r", session_key)
            return Admission(report=ValidationReport.rejected(RATE_LIMITED_MESSAGE))

        report = validate_sale(rows, customer_name, customer_phone, discount_percent)
        if not report.ok:
            # rejected submissions do not use up the window
            self._limiter.reset(session_key)
            return Admission(report=report)

        sale = Sale(
            id=self._id_factory(),
            customer_name=report.customer_name,
            customer_phone=report.customer_phone,
            items=list(report.items),
            discount_percent=report.discount_percent,
            status=SaleStatus.PENDING,
        )
        return Admission(report=report, sale=sale)
