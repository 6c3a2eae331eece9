"""Application service: List Sales use case (query).

Filters by status and by a case-insensitive customer-name search.
"""

from __future__ import annotations

from starjet.application.dto import SaleDTO, sale_to_dto
from starjet.domain.model.limits import MAX_SEARCH_LENGTH
from starjet.domain.model.sale import SaleStatus
from starjet.domain.repository.sale_repository import SaleRepository
from starjet.domain.service.sanitizer import sanitize


def normalize_search(raw: str | None) -> str:
    """Sanitize and cap a search term; empty means no filtering."""
    return sanitize(sanitize(raw)[:MAX_SEARCH_LENGTH]).lower()


class ListSalesHandler:

    def __init__(self, sale_repo: SaleRepository) -> None:
        self._sale_repo = sale_repo

    def handle(
        self,
        status: SaleStatus | None = None,
        customer_search: str | None = None,
    ) -> list[SaleDTO]:
        """Return matching sales, newest first."""
        term = normalize_search(customer_search)
        sales = self._sale_repo.list_all()

        if status is not None:
            sales = [s for s in sales if s.status == status]
        if term:
            sales = [s for s in sales if term in s.customer_name.lower()]

        sales.sort(key=lambda s: s.created_at, reverse=True)
        return [sale_to_dto(s) for s in sales]
