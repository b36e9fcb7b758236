"""
Pytest fixtures for warehouse data tests.

Provides:
- A fixed reference clock
- Seeded generator contexts (small Faker pools to keep tests fast)
- Record factories for hand-built test data
"""

from datetime import datetime, timedelta

import pytest

from warehouse_data import GeneratorConfig, GeneratorContext
from warehouse_data.models import (
    Alert,
    AlertSeverity,
    AlertType,
    CustomerType,
    InventoryItem,
    Order,
    OrderItem,
    OrderStatus,
    PredictionData,
    SalesChannel,
    SalesTransaction,
    Seasonality,
    StockStatus,
    Trend,
)

NOW = datetime(2024, 6, 15, 12, 0, 0)


@pytest.fixture
def now() -> datetime:
    """Fixed reference clock."""
    return NOW


@pytest.fixture
def config() -> GeneratorConfig:
    """Default config with a small customer pool."""
    return GeneratorConfig(pool_size=50)


@pytest.fixture
def make_ctx(now, config):
    """Factory for seeded contexts sharing the fixed clock."""

    def _make(seed: int = 42, **overrides) -> GeneratorContext:
        cfg = GeneratorConfig.from_dict({"pool_size": 50, **overrides}) if overrides else config
        return GeneratorContext.create(seed=seed, now=now, config=cfg)

    return _make


@pytest.fixture
def ctx(make_ctx) -> GeneratorContext:
    """Context seeded with 42."""
    return make_ctx(42)


# =============================================================================
# Record factories
# =============================================================================


@pytest.fixture
def make_item():
    def _make(index: int = 1, **overrides) -> InventoryItem:
        fields = {
            "id": f"INV-{index:04d}",
            "name": f"Product {index}",
            "sku": f"SKU-{index:06d}",
            "category": "Tools",
            "current_stock": 100,
            "min_stock_level": 20,
            "max_stock_level": 500,
            "unit": "pcs",
            "unit_cost": 10.0,
            "location": "A1-01",
            "supplier": "Global Supply Co.",
            "last_restocked": NOW - timedelta(days=3),
            "status": StockStatus.IN_STOCK,
        }
        fields.update(overrides)
        return InventoryItem(**fields)

    return _make


@pytest.fixture
def make_sale():
    def _make(index: int = 1, **overrides) -> SalesTransaction:
        fields = {
            "id": f"SALE-20240615-{index:04d}",
            "date": NOW,
            "amount": 100.0,
            "quantity": 2,
            "product_id": "INV-0001",
            "product_name": "Product 1",
            "channel": SalesChannel.ONLINE,
            "customer_type": CustomerType.NEW,
            "region": "North",
        }
        fields.update(overrides)
        return SalesTransaction(**fields)

    return _make


@pytest.fixture
def make_order():
    def _make(index: int = 1, **overrides) -> Order:
        item = OrderItem(
            product_id="INV-0001",
            product_name="Product 1",
            quantity=2,
            unit_price=12.5,
            total=25.0,
        )
        fields = {
            "id": f"ORD-{index:06d}",
            "customer_name": f"Customer {index}",
            "customer_email": f"customer{index}@example.com",
            "order_date": NOW - timedelta(days=10),
            "status": OrderStatus.PENDING,
            "items": (item,),
            "total": 25.0,
            "shipping_address": "1 Main St, Springfield",
        }
        fields.update(overrides)
        return Order(**fields)

    return _make


@pytest.fixture
def make_alert():
    def _make(index: int = 1, **overrides) -> Alert:
        fields = {
            "id": f"ALERT-LOW-{index}",
            "type": AlertType.LOW_STOCK,
            "severity": AlertSeverity.MEDIUM,
            "title": "Low Stock Alert",
            "message": "running low",
            "timestamp": NOW - timedelta(hours=index),
        }
        fields.update(overrides)
        return Alert(**fields)

    return _make


@pytest.fixture
def make_prediction():
    def _make(index: int = 1, **overrides) -> PredictionData:
        fields = {
            "product_id": f"INV-{index:04d}",
            "product_name": f"Product {index}",
            "current_stock": 100,
            "predicted_demand": 50,
            "recommended_order": 0,
            "confidence": 0.75,
            "days_until_stock_out": 999,
            "trend": Trend.STABLE,
            "seasonality": Seasonality.LOW,
        }
        fields.update(overrides)
        return PredictionData(**fields)

    return _make
