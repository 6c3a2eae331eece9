"""Row total calculation for sale line items.

A row is priced one of two ways:

- **area priced**: width x length x quantity x unit price, when both
  dimensions are given;
- **flat priced**: quantity x unit price, when neither dimension is given.

Giving exactly one dimension, or leaving quantity or price empty, makes
the row invalid. A product too large to represent safely is an overflow
fault. Both failures yield a zero value flagged invalid, never a zero
that looks like a free item.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from starjet.domain.model.limits import (
    MAX_ITEM_DIMENSION,
    MAX_PRICE_PER_ITEM,
    MAX_QUANTITY_PER_ITEM,
    MAX_SAFE_TOTAL,
)
from starjet.domain.model.value_objects import NumericResult, RowKind, RowTotal
from starjet.domain.service.numeric import validate_numeric

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RowFields:
    """The four validated numeric fields of one row."""

    width: NumericResult
    length: NumericResult
    quantity: NumericResult
    unit_price: NumericResult

    @property
    def has_width(self) -> bool:
        return self.width.is_positive

    @property
    def has_length(self) -> bool:
        return self.length.is_positive

    @property
    def has_quantity(self) -> bool:
        return self.quantity.is_positive

    @property
    def has_unit_price(self) -> bool:
        return self.unit_price.is_positive

    @property
    def has_one_dimension(self) -> bool:
        return self.has_width != self.has_length


def measure_row(width: object, length: object, quantity: object, unit_price: object) -> RowFields:
    return RowFields(
        width=validate_numeric(width, 0, MAX_ITEM_DIMENSION),
        length=validate_numeric(length, 0, MAX_ITEM_DIMENSION),
        quantity=validate_numeric(quantity, 0, MAX_QUANTITY_PER_ITEM),
        unit_price=validate_numeric(unit_price, 0, MAX_PRICE_PER_ITEM),
    )


def total_for(fields: RowFields) -> RowTotal:
    """Derive the row total from already validated fields."""
    if not (fields.has_quantity and fields.has_unit_price):
        return RowTotal(0.0, RowKind.INVALID)

    if fields.has_width and fields.has_length:
        kind = RowKind.AREA
        total = (
            fields.width.value
            * fields.length.value
            * fields.quantity.value
            * fields.unit_price.value
        )
    elif not fields.has_width and not fields.has_length:
        kind = RowKind.FLAT
        total = fields.quantity.value * fields.unit_price.value
    else:
        return RowTotal(0.0, RowKind.INVALID)

    if not math.isfinite(total) or total > MAX_SAFE_TOTAL:
        logger.error(
            "Calculation overflow detected (%s row): width=%s length=%s "
            "quantity=%s unit_price=%s total=%s",
            kind.value,
            fields.width.value,
            fields.length.value,
            fields.quantity.value,
            fields.unit_price.value,
            total,
        )
        return RowTotal(0.0, RowKind.OVERFLOW)

    return RowTotal(total, kind)


def calculate_row_total(
    width: object,
    length: object,
    quantity: object,
    unit_price: object,
) -> RowTotal:
    """Validate the four raw inputs and compute the row total."""
    return total_for(measure_row(width, length, quantity, unit_price))
