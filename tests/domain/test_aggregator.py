"""Unit tests for the sale aggregator."""

import itertools

import pytest

from starjet.domain.model.sale import LineItem
from starjet.domain.service.aggregator import aggregate


def _rows():
    return [
        LineItem("Banner", width=10, length=5, quantity=2, unit_price=3),  # 300
        LineItem("Flyer", quantity=5, unit_price=20),  # 100
        LineItem("Sticker", quantity=3, unit_price=0.1),  # 0.3
        LineItem("Odd", width=10, quantity=1, unit_price=5),  # invalid -> 0
    ]


class TestAggregate:

    def test_subtotal_without_discount(self):
        totals = aggregate(_rows(), 0)
        assert totals.subtotal == 400.3
        assert totals.grand_total == 400.3

    def test_single_area_row_with_discount(self):
        rows = [LineItem("Banner", width=10, length=5, quantity=2, unit_price=3)]
        totals = aggregate(rows, 10)
        assert totals.subtotal == 300.00
        assert totals.grand_total == 270.00
        assert totals.discount_amount == 30.00

    def test_full_discount(self):
        totals = aggregate(_rows(), 100)
        assert totals.grand_total == 0.0

    def test_no_rows(self):
        totals = aggregate([], 15)
        assert totals.subtotal == 0.0
        assert totals.grand_total == 0.0

    def test_rounded_to_cents_on_output(self):
        rows = [LineItem("A", quantity=3, unit_price=0.333)]
        assert aggregate(rows, 0).subtotal == 1.0

    def test_order_independent(self):
        rows = _rows() + [LineItem("Tiny", quantity=7, unit_price=0.01)]
        expected = aggregate(rows, 12.5)
        for perm in itertools.permutations(rows):
            assert aggregate(list(perm), 12.5) == expected

    @pytest.mark.parametrize("discount", [0.01, 5, 33.3, 50, 99.9, 100])
    def test_discount_never_raises_total(self, discount):
        totals = aggregate(_rows(), discount)
        assert totals.grand_total <= totals.subtotal

    def test_zero_discount_keeps_total(self):
        totals = aggregate(_rows(), 0)
        assert totals.grand_total == totals.subtotal

    def test_recomputes_from_rows(self):
        rows = _rows()
        first = aggregate(rows, 0)
        rows.pop(0)
        assert aggregate(rows, 0).subtotal == pytest.approx(first.subtotal - 300)
