"""Sale aggregate.

The Sale owns its line items. Totals are never stored on the aggregate:
each access recomputes them from the rows, so they cannot drift from
the numbers they were derived from.

Unlike the other model modules this one depends on two domain services,
the row calculator and the aggregator, because ``LineItem.total`` and
``Sale.totals`` are computed through them. Those services import only
``limits`` and ``value_objects`` from the model, so there is no cycle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from starjet.domain.exceptions import ValidationError
from starjet.domain.model.value_objects import RowTotal, SaleTotals
from starjet.domain.service.aggregator import aggregate
from starjet.domain.service.row_calculator import calculate_row_total


class SaleStatus(Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"


@dataclass(frozen=True)
class LineItem:
    """One priced row of a sale.

    ``width`` and ``length`` are None for flat-priced rows.
    """

    item_name: str
    quantity: float
    unit_price: float
    width: float | None = None
    length: float | None = None

    @property
    def row_total(self) -> RowTotal:
        return calculate_row_total(self.width, self.length, self.quantity, self.unit_price)

    @property
    def total(self) -> float:
        return self.row_total.value

    @property
    def is_area_priced(self) -> bool:
        return self.width is not None and self.length is not None


@dataclass
class Sale:
    """Aggregate root for a customer sale.

    New sales are built by the submission guard, which has already
    validated every row. ``__init__`` stays simple so the repository can
    reconstitute stored sales.
    """

    id: str | None
    customer_name: str
    customer_phone: str
    items: list[LineItem]
    discount_percent: float = 0.0
    status: SaleStatus = SaleStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- State transitions ----------------------------------------------------

    def mark_done(self) -> None:
        """Transition Pending -> Completed."""
        if self.status != SaleStatus.PENDING:
            raise ValidationError(
                f"Cannot mark sale as done — current status is {self.status.value}, "
                f"expected Pending"
            )
        self.status = SaleStatus.COMPLETED

    def rollback(self) -> None:
        """Transition Completed -> Pending."""
        if self.status != SaleStatus.COMPLETED:
            raise ValidationError(
                f"Cannot roll back sale — current status is {self.status.value}, "
                f"expected Completed"
            )
        self.status = SaleStatus.PENDING

    # --- Editing --------------------------------------------------------------

    def revise(
        self,
        customer_name: str,
        customer_phone: str,
        items: list[LineItem],
        discount_percent: float,
    ) -> None:
        """Replace the editable fields. Identity, status and date are kept."""
        self.customer_name = customer_name
        self.customer_phone = customer_phone
        self.items = list(items)
        self.discount_percent = discount_percent

    # --- Computed properties --------------------------------------------------

    @property
    def totals(self) -> SaleTotals:
        return aggregate(self.items, self.discount_percent)

    @property
    def subtotal(self) -> float:
        return self.totals.subtotal

    @property
    def grand_total(self) -> float:
        return self.totals.grand_total
