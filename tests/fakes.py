"""In-memory fakes for testing.

The repository implements the same abstract interface as the JSON
repository but keeps everything in a dict. The clock lets rate-limit
tests move time forward without sleeping.
"""

from __future__ import annotations

from starjet.domain.model.sale import Sale
from starjet.domain.repository.sale_repository import SaleRepository


class FakeSaleRepository(SaleRepository):

    def __init__(self, sales: list[Sale] | None = None) -> None:
        self._store: dict[str, Sale] = {}
        for s in sales or []:
            self._store[s.id] = s

    def get_by_id(self, sale_id: str) -> Sale | None:
        return self._store.get(sale_id)

    def list_all(self) -> list[Sale]:
        return list(self._store.values())

    def save(self, sale: Sale) -> None:
        self._store[sale.id] = sale

    def delete(self, sale_id: str) -> bool:
        return self._store.pop(sale_id, None) is not None


class FakeClock:

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class SequentialIds:

    def __init__(self, prefix: str = "sale") -> None:
        self._prefix = prefix
        self._next = 1

    def __call__(self) -> str:
        value = f"{self._prefix}-{self._next}"
        self._next += 1
        return value
