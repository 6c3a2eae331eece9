"""Application service: Sales Summary use case (dashboard cards).

Counts pending sales and totals completed sales overall, for the
current month and for the current day. Dates are compared in UTC.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Callable

from starjet.application.dto import SalesSummaryDTO
from starjet.domain.model.sale import SaleStatus
from starjet.domain.model.value_objects import format_money
from starjet.domain.repository.sale_repository import SaleRepository


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SalesSummaryHandler:

    def __init__(
        self,
        sale_repo: SaleRepository,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._sale_repo = sale_repo
        self._clock = clock

    def handle(self) -> SalesSummaryDTO:
        now = self._clock().astimezone(timezone.utc)
        sales = self._sale_repo.list_all()

        pending = [s for s in sales if s.status == SaleStatus.PENDING]
        completed = [s for s in sales if s.status == SaleStatus.COMPLETED]

        this_month = [
            s for s in completed
            if (s.created_at.year, s.created_at.month) == (now.year, now.month)
        ]
        today = [s for s in this_month if s.created_at.date() == now.date()]

        return SalesSummaryDTO(
            pending_count=len(pending),
            completed_total=format_money(math.fsum(s.grand_total for s in completed)),
            monthly_completed=format_money(math.fsum(s.grand_total for s in this_month)),
            daily_completed=format_money(math.fsum(s.grand_total for s in today)),
        )
