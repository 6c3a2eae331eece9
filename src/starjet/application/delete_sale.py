"""Application service: Delete Sale use case (admin only)."""

from __future__ import annotations

import logging

from starjet.domain.exceptions import EntityNotFoundError, PermissionDeniedError
from starjet.domain.model.role import Role
from starjet.domain.repository.sale_repository import SaleRepository

logger = logging.getLogger(__name__)


class DeleteSaleHandler:

    def __init__(self, sale_repo: SaleRepository) -> None:
        self._sale_repo = sale_repo

    def handle(self, sale_id: str, role: Role) -> None:
        if not role.can_delete:
            logger.warning("Role %s attempted to delete sale %s", role.value, sale_id)
            raise PermissionDeniedError("You do not have permission to delete sales")

        if not self._sale_repo.delete(sale_id):
            raise EntityNotFoundError(f"Sale {sale_id} not found")
        logger.info("Sale %s deleted", sale_id)
