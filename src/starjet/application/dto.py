"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Money is formatted to
cents here, which is the display boundary.
"""

from __future__ import annotations

from dataclasses import dataclass

from starjet.domain.model.sale import LineItem, Sale
from starjet.domain.model.value_objects import format_money


@dataclass(frozen=True)
class SaleLineItemDTO:
    """Output: a single row as displayed to the user."""

    item_name: str
    width: str  # "" for flat-priced rows
    length: str
    quantity: str
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class SaleDTO:
    """Output: a complete sale as displayed to the user."""

    id: str
    customer_name: str
    customer_phone: str
    status: str
    items: list[SaleLineItemDTO]
    subtotal: str
    discount_percent: str
    total: str
    created_at: str


@dataclass(frozen=True)
class SalesSummaryDTO:
    """Output: dashboard summary cards."""

    pending_count: int
    completed_total: str
    monthly_completed: str
    daily_completed: str


def _number(value: float | None) -> str:
    if value is None:
        return ""
    return f"{value:g}"


def line_item_to_dto(item: LineItem) -> SaleLineItemDTO:
    return SaleLineItemDTO(
        item_name=item.item_name,
        width=_number(item.width),
        length=_number(item.length),
        quantity=_number(item.quantity),
        unit_price=format_money(item.unit_price),
        line_total=format_money(item.total),
    )


def sale_to_dto(sale: Sale) -> SaleDTO:
    totals = sale.totals
    return SaleDTO(
        id=sale.id,  # type: ignore[arg-type]
        customer_name=sale.customer_name,
        customer_phone=sale.customer_phone,
        status=sale.status.value,
        items=[line_item_to_dto(item) for item in sale.items],
        subtotal=format_money(totals.subtotal),
        discount_percent=_number(sale.discount_percent),
        total=format_money(totals.grand_total),
        created_at=sale.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
