"""
Shared synthetic dataset.

The generate_* functions each build their own backing collections when
called without inputs, so alerts from one call never reference the
inventory of another. generate_dataset() builds one inventory set and
derives every other view from it, so all views describe the same
warehouse:

    ctx = GeneratorContext.create(seed=42)
    ds = generate_dataset(ctx)
    ds.inventory_by_id()[ds.alerts[0].product_id]  # always resolves
"""

import logging
from dataclasses import dataclass

from .generators import (
    AlertGenerator,
    DashboardMetricsGenerator,
    GeneratorContext,
    InventoryGenerator,
    OrderGenerator,
    PerformanceGenerator,
    PredictionGenerator,
    SalesGenerator,
    ensure_context,
    generate_bottleneck_data,
)
from .models import (
    Alert,
    BottleneckData,
    DashboardMetrics,
    InventoryItem,
    Order,
    PerformanceMetrics,
    PredictionData,
    SalesTransaction,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyntheticDataset:
    """One inventory set and every view derived from it."""

    inventory: list[InventoryItem]
    sales: list[SalesTransaction]
    orders: list[Order]
    alerts: list[Alert]
    predictions: list[PredictionData]
    metrics: DashboardMetrics
    bottlenecks: list[BottleneckData]
    performance: PerformanceMetrics

    def inventory_by_id(self) -> dict[str, InventoryItem]:
        return {item.id: item for item in self.inventory}

    def orders_by_id(self) -> dict[str, Order]:
        return {order.id: order for order in self.orders}


def generate_dataset(
    ctx: GeneratorContext | None = None,
    inventory_count: int = 50,
    sales_days: int = 30,
    order_count: int = 100,
) -> SyntheticDataset:
    """
    Generate a dataset whose derived views share one inventory set.

    Sales and orders reference the inventory; alerts scan that inventory
    and those orders; predictions cover that inventory; dashboard metrics
    reduce exactly these collections.

    Args:
        ctx: Generator context; a fresh unseeded one when None
        inventory_count: Number of inventory items
        sales_days: Days of sales history
        order_count: Number of orders

    Raises:
        InvalidCountError: If any count is negative
    """
    ctx = ensure_context(ctx)

    inventory = InventoryGenerator(ctx).generate(inventory_count)
    sales = SalesGenerator(ctx).generate(sales_days, inventory)
    orders = OrderGenerator(ctx).generate(order_count, inventory)
    alerts = AlertGenerator(ctx).generate(inventory, orders)
    predictions = PredictionGenerator(ctx).generate(inventory)
    metrics = DashboardMetricsGenerator(ctx).generate(inventory, sales, orders, alerts)

    dataset = SyntheticDataset(
        inventory=inventory,
        sales=sales,
        orders=orders,
        alerts=alerts,
        predictions=predictions,
        metrics=metrics,
        bottlenecks=generate_bottleneck_data(),
        performance=PerformanceGenerator(ctx).generate(),
    )
    logger.info(
        "Generated dataset: %d items, %d sales, %d orders, %d alerts",
        len(inventory),
        len(sales),
        len(orders),
        len(alerts),
    )
    return dataset
