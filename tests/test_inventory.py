"""
Tests for inventory generation and stock status derivation.
"""

import re
from datetime import timedelta

import numpy as np
import pytest

from warehouse_data import (
    GeneratorContext,
    InvalidCountError,
    derive_stock_status,
    generate_inventory_data,
)
from warehouse_data.constants import CATEGORIES, PRODUCT_NAMES, SUPPLIERS
from warehouse_data.models import StockStatus


class TestDeriveStockStatus:
    """Tests for derive_stock_status()."""

    def test_zero_stock_is_out_of_stock(self, now):
        assert derive_stock_status(0, 10, None, now) == StockStatus.OUT_OF_STOCK

    def test_at_minimum_is_low_stock(self, now):
        assert derive_stock_status(10, 10, None, now) == StockStatus.LOW_STOCK

    def test_above_minimum_is_in_stock(self, now):
        assert derive_stock_status(11, 10, None, now) == StockStatus.IN_STOCK

    def test_past_expiry_overrides_stock_status(self, now):
        """Expired wins over every stock-based status."""
        past = now - timedelta(days=1)
        assert derive_stock_status(0, 10, past, now) == StockStatus.EXPIRED
        assert derive_stock_status(5, 10, past, now) == StockStatus.EXPIRED
        assert derive_stock_status(300, 10, past, now) == StockStatus.EXPIRED

    def test_future_expiry_keeps_stock_status(self, now):
        future = now + timedelta(days=1)
        assert derive_stock_status(5, 10, future, now) == StockStatus.LOW_STOCK


class TestGenerateInventoryData:
    """Tests for generate_inventory_data()."""

    def test_end_to_end_fifty_items(self, ctx):
        """50 items, valid statuses, unique zero-padded ids."""
        items = generate_inventory_data(50, ctx)

        assert len(items) == 50
        assert all(item.status in set(StockStatus) for item in items)
        assert all(re.fullmatch(r"INV-\d{4}", item.id) for item in items)
        assert len({item.id for item in items}) == 50
        assert items[0].id == "INV-0001"
        assert items[-1].id == "INV-0050"

    def test_zero_count_returns_empty(self, ctx):
        assert generate_inventory_data(0, ctx) == []

    def test_negative_count_rejected(self, ctx):
        with pytest.raises(InvalidCountError):
            generate_inventory_data(-1, ctx)

    def test_negative_count_is_value_error(self, ctx):
        with pytest.raises(ValueError):
            generate_inventory_data(-5, ctx)

    def test_accepts_numpy_integer_count(self, ctx):
        assert len(generate_inventory_data(np.int64(3), ctx)) == 3

    def test_values_within_bounds(self, ctx):
        items = generate_inventory_data(200, ctx)
        for item in items:
            assert 0 <= item.current_stock <= 500
            assert 10 <= item.min_stock_level <= 50
            assert 100 <= item.max_stock_level <= 1000
            assert 10.0 <= item.unit_cost <= 210.0
            assert round(item.unit_cost, 2) == item.unit_cost
            assert item.unit in ("pcs", "kg")
            assert ctx.now - timedelta(days=30) <= item.last_restocked <= ctx.now

    def test_status_matches_derivation(self, ctx):
        for item in generate_inventory_data(200, ctx):
            expected = derive_stock_status(
                item.current_stock, item.min_stock_level, item.expiry_date, ctx.now
            )
            assert item.status == expected

    def test_catalog_fields_cycle_by_index(self, ctx):
        items = generate_inventory_data(45, ctx)
        assert items[0].name == PRODUCT_NAMES[0]
        assert items[40].name == PRODUCT_NAMES[0]
        assert items[8].category == CATEGORIES[0]
        assert items[5].supplier == SUPPLIERS[0]
        assert items[3].sku == "SKU-000004"

    def test_expired_items_when_all_expiries_past(self, make_ctx):
        """Expiry window entirely in the past makes every item expired."""
        ctx = make_ctx(
            1, expiry_probability=1.0, expiry_lookback_days=30, expiry_horizon_days=0
        )
        items = generate_inventory_data(20, ctx)
        assert all(item.status == StockStatus.EXPIRED for item in items)
        assert all(item.expiry_date < ctx.now for item in items)

    def test_no_expiry_dates_when_probability_zero(self, make_ctx):
        ctx = make_ctx(1, expiry_probability=0.0)
        items = generate_inventory_data(50, ctx)
        assert all(item.expiry_date is None for item in items)
        assert StockStatus.EXPIRED not in {item.status for item in items}


class TestReproducibility:
    """Seeded contexts reproduce their output."""

    def test_same_seed_same_items(self, make_ctx):
        assert generate_inventory_data(30, make_ctx(7)) == generate_inventory_data(30, make_ctx(7))

    def test_different_seed_different_values(self, make_ctx):
        first = generate_inventory_data(30, make_ctx(7))
        second = generate_inventory_data(30, make_ctx(8))
        assert [i.current_stock for i in first] != [i.current_stock for i in second]

    def test_same_shape_across_calls(self, ctx):
        """Two calls on one context: same length and ids, fresh values."""
        first = generate_inventory_data(25, ctx)
        second = generate_inventory_data(25, ctx)
        assert len(first) == len(second)
        assert [i.id for i in first] == [i.id for i in second]
        assert first != second

    def test_injected_rng_is_used(self, now):
        ctx_a = GeneratorContext.create(rng=np.random.default_rng(99), now=now)
        ctx_b = GeneratorContext.create(rng=np.random.default_rng(99), now=now)
        assert generate_inventory_data(10, ctx_a) == generate_inventory_data(10, ctx_b)

    def test_default_context(self):
        """Without a context the call still works (unseeded)."""
        assert len(generate_inventory_data(5)) == 5


class TestToDict:
    def test_camel_case_keys_and_enum_values(self, ctx):
        record = generate_inventory_data(1, ctx)[0].to_dict()
        assert record["id"] == "INV-0001"
        assert "currentStock" in record
        assert "minStockLevel" in record
        assert record["status"] in {s.value for s in StockStatus}
        assert isinstance(record["status"], str)
