"""Application service: Rollback Sale use case (Completed -> Pending).

The caller is responsible for asking the user to confirm first.
"""

from __future__ import annotations

import logging

from starjet.domain.exceptions import EntityNotFoundError
from starjet.domain.repository.sale_repository import SaleRepository

logger = logging.getLogger(__name__)


class RollbackSaleHandler:

    def __init__(self, sale_repo: SaleRepository) -> None:
        self._sale_repo = sale_repo

    def handle(self, sale_id: str) -> None:
        sale = self._sale_repo.get_by_id(sale_id)
        if sale is None:
            raise EntityNotFoundError(f"Sale {sale_id} not found")

        sale.rollback()
        self._sale_repo.save(sale)
        logger.info("Sale %s rolled back to pending", sale_id)
