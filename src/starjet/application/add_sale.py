"""Application service: Add Sale use case.

Runs the submission guard over the raw form rows and hands an accepted
sale to the repository. A rejected payload is never partially stored.
"""

from __future__ import annotations

import logging
from typing import Sequence

from starjet.application.dto import SaleDTO, sale_to_dto
from starjet.domain.exceptions import ValidationError
from starjet.domain.repository.sale_repository import SaleRepository
from starjet.domain.service.submission_guard import RowInput, SubmissionGuard

logger = logging.getLogger(__name__)


class AddSaleHandler:

    def __init__(self, sale_repo: SaleRepository, guard: SubmissionGuard) -> None:
        self._sale_repo = sale_repo
        self._guard = guard

    def handle(
        self,
        customer_name: str,
        customer_phone: str,
        rows: Sequence[RowInput],
        discount_percent: object = 0,
        session_key: str = "default",
    ) -> SaleDTO:
        """Create a new Pending sale.

        Raises ValidationError carrying every violated rule at once.
        """
        admission = self._guard.admit(
            rows,
            customer_name=customer_name,
            customer_phone=customer_phone,
            discount_percent=discount_percent,
            session_key=session_key,
        )
        if admission.sale is None:
            raise ValidationError(admission.report.message)

        self._sale_repo.save(admission.sale)
        logger.info(
            "Sale %s created for %s (%d items, total %.2f)",
            admission.sale.id,
            admission.sale.customer_name,
            len(admission.sale.items),
            admission.sale.grand_total,
        )
        return sale_to_dto(admission.sale)
