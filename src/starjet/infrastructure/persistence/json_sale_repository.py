"""JSON-file-backed implementation of SaleRepository.

Records are written in one canonical schema. Records written by older
clients used other spellings for the same fields (``customerName``,
``customername``, ``suptotal`` ...); those are mapped here and never
reach the domain. Stored totals are informational only: the domain
recomputes them from the rows.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from starjet.domain.model.sale import LineItem, Sale, SaleStatus
from starjet.domain.model.value_objects import round_money
from starjet.domain.repository.sale_repository import SaleRepository
from starjet.domain.service.numeric import parse_float

# canonical key -> spellings accepted on read, canonical first
_SALE_ALIASES: dict[str, tuple[str, ...]] = {
    "customer_name": ("customer_name", "customerName", "customername"),
    "customer_phone": ("customer_phone", "customerPhone", "customerphone"),
    "discount": ("discount", "discount_percent"),
    "date": ("date", "created_at"),
}

_ITEM_ALIASES: dict[str, tuple[str, ...]] = {
    "item_name": ("item_name", "item", "itemName"),
    "width": ("width",),
    "length": ("length",),
    "quantity": ("quantity",),
    "unit_price": ("unit_price", "unitPrice", "unitprice"),
}


def _pick(raw: dict, aliases: tuple[str, ...], default=None):
    for key in aliases:
        if key in raw and raw[key] is not None:
            return raw[key]
    return default


def _number(value) -> float | None:
    if value is None:
        return None
    parsed = parse_float(str(value))
    if parsed is None or parsed <= 0:
        return None
    return parsed


def _timestamp(value: str | None) -> datetime:
    if not value:
        return datetime.now(timezone.utc)
    moment = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


class JsonSaleRepository(SaleRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- SaleRepository interface ---------------------------------------------

    def get_by_id(self, sale_id: str) -> Sale | None:
        for raw in self._load_raw():
            if str(raw.get("id")) == sale_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Sale]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, sale: Sale) -> None:
        if sale.id is None:
            raise ValueError("Sale must have an id before it is saved")

        records = self._load_raw()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(records):
            if str(raw.get("id")) == sale.id:
                records[i] = self._to_raw(sale)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(sale))

        self._persist_raw(records)

    def delete(self, sale_id: str) -> bool:
        records = self._load_raw()
        remaining = [raw for raw in records if str(raw.get("id")) != sale_id]
        if len(remaining) == len(records):
            return False
        self._persist_raw(remaining)
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(sale: Sale) -> dict:
        totals = sale.totals
        return {
            "id": sale.id,
            "customer_name": sale.customer_name,
            "customer_phone": sale.customer_phone,
            "date": sale.created_at.isoformat(),
            "status": sale.status.value,
            "discount": sale.discount_percent,
            "subtotal": totals.subtotal,
            "total": totals.grand_total,
            "items": [
                {
                    "item_name": item.item_name,
                    "width": item.width,
                    "length": item.length,
                    "quantity": item.quantity,
                    "unit_price": item.unit_price,
                    "total": round_money(item.total),
                }
                for item in sale.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Sale:
        items = []
        for i in raw.get("items") or []:
            items.append(
                LineItem(
                    item_name=str(_pick(i, _ITEM_ALIASES["item_name"], "")),
                    width=_number(_pick(i, _ITEM_ALIASES["width"])),
                    length=_number(_pick(i, _ITEM_ALIASES["length"])),
                    quantity=_number(_pick(i, _ITEM_ALIASES["quantity"])) or 0.0,
                    unit_price=_number(_pick(i, _ITEM_ALIASES["unit_price"])) or 0.0,
                )
            )
        return Sale(
            id=str(raw["id"]),
            customer_name=str(_pick(raw, _SALE_ALIASES["customer_name"], "")),
            customer_phone=str(_pick(raw, _SALE_ALIASES["customer_phone"], "")),
            items=items,
            discount_percent=_number(_pick(raw, _SALE_ALIASES["discount"])) or 0.0,
            status=SaleStatus(raw.get("status", SaleStatus.PENDING.value)),
            created_at=_timestamp(_pick(raw, _SALE_ALIASES["date"])),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
