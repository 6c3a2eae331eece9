"""Integration tests for the AddSale use case.

Uses in-memory fake repositories — no file I/O.
"""

import pytest

from starjet.application.add_sale import AddSaleHandler
from starjet.domain.exceptions import ValidationError
from starjet.domain.model.sale import SaleStatus
from starjet.domain.service.rate_limiter import FixedWindowRateLimiter
from starjet.domain.service.submission_guard import RowInput, SubmissionGuard
from tests.fakes import FakeClock, FakeSaleRepository, SequentialIds


def _setup() -> tuple[AddSaleHandler, FakeSaleRepository, FakeClock]:
    clock = FakeClock()
    sale_repo = FakeSaleRepository()
    guard = SubmissionGuard(
        limiter=FixedWindowRateLimiter(clock=clock),
        id_factory=SequentialIds(),
    )
    return AddSaleHandler(sale_repo, guard), sale_repo, clock


class TestAddSaleHappyPath:

    def test_creates_sale_with_correct_totals(self):
        handler, _, _ = _setup()
        dto = handler.handle(
            "Amina",
            "0612345678",
            [RowInput("Banner", "10", "5", "2", "3"), RowInput("Flyer", "", "", "5", "20")],
            discount_percent="10",
        )
        assert dto.subtotal == "$400.00"
        assert dto.total == "$360.00"
        assert dto.status == "Pending"
        assert dto.customer_name == "Amina"
        assert len(dto.items) == 2
        assert dto.items[0].line_total == "$300.00"
        assert dto.items[1].width == ""

    def test_persists_sale(self):
        handler, sale_repo, _ = _setup()
        dto = handler.handle("Amina", "", [RowInput("Flyer", quantity="5", unit_price="20")])
        saved = sale_repo.get_by_id(dto.id)
        assert saved is not None
        assert saved.status == SaleStatus.PENDING
        assert saved.grand_total == 100.0

    def test_blank_rows_not_stored(self):
        handler, sale_repo, _ = _setup()
        dto = handler.handle("Amina", "", [RowInput(), RowInput("Flyer", quantity="1", unit_price="2")])
        assert len(sale_repo.get_by_id(dto.id).items) == 1


class TestAddSaleValidation:

    def test_single_dimension_rejected(self):
        handler, sale_repo, _ = _setup()
        with pytest.raises(ValidationError, match="both width and length required together"):
            handler.handle("Amina", "", [RowInput("Banner", "10", "0", "1", "5")])
        assert sale_repo.list_all() == []

    def test_too_many_rows_rejected(self):
        handler, sale_repo, _ = _setup()
        rows = [RowInput("Flyer", quantity="1", unit_price="1")] * 51
        with pytest.raises(ValidationError, match="between 1 and 50 items"):
            handler.handle("Amina", "", rows)
        assert sale_repo.list_all() == []

    def test_one_bad_row_rejects_whole_sale(self):
        handler, sale_repo, _ = _setup()
        rows = [RowInput("Flyer", quantity="1", unit_price="1"), RowInput("Bad", quantity="0", unit_price="1")]
        with pytest.raises(ValidationError, match="Row 2"):
            handler.handle("Amina", "", rows)
        assert sale_repo.list_all() == []

    def test_message_is_consolidated(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError) as exc_info:
            handler.handle("", "", [RowInput("Banner", "3", "", "1", "1")])
        message = str(exc_info.value)
        assert "Customer name is required" in message
        assert "Row 1" in message

    def test_rapid_resubmission_rejected(self):
        handler, sale_repo, clock = _setup()
        rows = [RowInput("Flyer", quantity="1", unit_price="1")]
        handler.handle("Amina", "", rows)
        with pytest.raises(ValidationError, match="wait a moment"):
            handler.handle("Amina", "", rows)
        clock.advance(5)
        handler.handle("Amina", "", rows)
        assert len(sale_repo.list_all()) == 2
