"""Abstract repository for the Sale aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from starjet.domain.model.sale import Sale


class SaleRepository(ABC):

    @abstractmethod
    def get_by_id(self, sale_id: str) -> Sale | None:
        """Return a sale by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Sale]:
        """Return every stored sale."""

    @abstractmethod
    def save(self, sale: Sale) -> None:
        """Persist a new or updated sale."""

    @abstractmethod
    def delete(self, sale_id: str) -> bool:
        """Remove a sale. Returns False if it did not exist."""
