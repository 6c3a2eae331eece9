"""Unit tests for the row total calculator."""

import logging

import pytest

from starjet.domain.model.value_objects import RowKind, round_money
from starjet.domain.service.row_calculator import calculate_row_total


# ── Area priced ──────────────────────────────────────────────────────────────


class TestAreaPricedRow:

    def test_width_length_quantity_price(self):
        result = calculate_row_total("10", "5", "2", "3")
        assert result.value == 300.0
        assert result.kind is RowKind.AREA
        assert result.valid

    @pytest.mark.parametrize(
        "w, l, q, p",
        [(1.5, 2, 3, 4.25), (0.1, 0.2, 7, 19.99), (10000, 1, 1, 1), (3, 3, 10000, 0.01)],
    )
    def test_product_of_all_four(self, w, l, q, p):
        result = calculate_row_total(w, l, q, p)
        assert result.kind is RowKind.AREA
        assert round_money(result.value) == round_money(w * l * q * p)

    def test_str_is_rounded_to_cents(self):
        assert str(calculate_row_total("0.1", "0.2", "1", "1")) == "$0.02"


# ── Flat priced ──────────────────────────────────────────────────────────────


class TestFlatPricedRow:

    def test_quantity_times_price(self):
        result = calculate_row_total("", "", "5", "20")
        assert result.value == 100.0
        assert result.kind is RowKind.FLAT

    def test_zero_dimensions_count_as_absent(self):
        result = calculate_row_total("0", "0", "4", "2.5")
        assert result.value == 10.0
        assert result.kind is RowKind.FLAT

    def test_none_dimensions(self):
        assert calculate_row_total(None, None, 2, 3).value == 6.0


# ── Invalid ──────────────────────────────────────────────────────────────────


class TestInvalidRow:

    def test_only_width_given(self):
        result = calculate_row_total("10", "0", "1", "5")
        assert result.value == 0.0
        assert result.kind is RowKind.INVALID
        assert not result.valid

    def test_only_length_given(self):
        result = calculate_row_total("", "8", "1", "5")
        assert result.kind is RowKind.INVALID

    @pytest.mark.parametrize("q, p", [("", "5"), ("2", ""), ("0", "5"), ("2", "0"), ("x", "5")])
    def test_missing_quantity_or_price(self, q, p):
        result = calculate_row_total("", "", q, p)
        assert result.value == 0.0
        assert not result.valid

    def test_out_of_range_price_is_not_present(self):
        result = calculate_row_total("", "", "1", "2000000")
        assert result.kind is RowKind.INVALID

    def test_out_of_range_width_leaves_one_dimension(self):
        result = calculate_row_total("20000", "5", "1", "1")
        assert result.kind is RowKind.INVALID


# ── Overflow ─────────────────────────────────────────────────────────────────


class TestOverflow:

    def test_total_beyond_safe_integer(self, caplog):
        with caplog.at_level(logging.ERROR):
            result = calculate_row_total("10000", "10000", "10000", "1000000")
        assert result.value == 0.0
        assert result.kind is RowKind.OVERFLOW
        assert not result.valid
        assert "overflow" in caplog.text.lower()

    def test_largest_flat_total_is_fine(self):
        result = calculate_row_total("", "", "10000", "1000000")
        assert result.kind is RowKind.FLAT
        assert result.value == 1e10
