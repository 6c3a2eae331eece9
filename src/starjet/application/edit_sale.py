"""Application service: Edit Sale use case.

Edits go through the same validation pass as new sales. The sale keeps
its identifier, status and creation date.
"""

from __future__ import annotations

import logging
from typing import Sequence

from starjet.application.dto import SaleDTO, sale_to_dto
from starjet.domain.exceptions import EntityNotFoundError, ValidationError
from starjet.domain.repository.sale_repository import SaleRepository
from starjet.domain.service.submission_guard import RowInput, validate_sale

logger = logging.getLogger(__name__)


class EditSaleHandler:

    def __init__(self, sale_repo: SaleRepository) -> None:
        self._sale_repo = sale_repo

    def handle(
        self,
        sale_id: str,
        customer_name: str,
        customer_phone: str,
        rows: Sequence[RowInput],
        discount_percent: object = 0,
    ) -> SaleDTO:
        sale = self._sale_repo.get_by_id(sale_id)
        if sale is None:
            raise EntityNotFoundError(f"Sale {sale_id} not found")

        report = validate_sale(rows, customer_name, customer_phone, discount_percent)
        if not report.ok:
            raise ValidationError(report.message)

        sale.revise(
            customer_name=report.customer_name,
            customer_phone=report.customer_phone,
            items=list(report.items),
            discount_percent=report.discount_percent,
        )
        self._sale_repo.save(sale)
        logger.info("Sale %s updated (%d items)", sale.id, len(sale.items))
        return sale_to_dto(sale)
