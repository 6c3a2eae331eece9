"""Application service: Mark Sale as Done use case (Pending -> Completed)."""

from __future__ import annotations

import logging

from starjet.domain.exceptions import EntityNotFoundError
from starjet.domain.repository.sale_repository import SaleRepository

logger = logging.getLogger(__name__)


class MarkSaleDoneHandler:

    def __init__(self, sale_repo: SaleRepository) -> None:
        self._sale_repo = sale_repo

    def handle(self, sale_id: str) -> None:
        sale = self._sale_repo.get_by_id(sale_id)
        if sale is None:
            raise EntityNotFoundError(f"Sale {sale_id} not found")

        sale.mark_done()
        self._sale_repo.save(sale)
        logger.info("Sale %s marked as done", sale_id)
