"""
Dashboard metrics generator.

Reduces inventory, sales, orders and alerts into the flat
DashboardMetrics record. Any collection not supplied is generated
inside the call, in the order inventory, sales, orders, alerts. Missing
alerts are derived from the inventory and orders this call reduces.
Nothing is shared with collections the caller holds but did not pass in.
"""

import logging
from collections.abc import Sequence
from datetime import timedelta

from ..models import (
    Alert,
    AlertSeverity,
    DashboardMetrics,
    InventoryItem,
    Order,
    OrderStatus,
    SalesTransaction,
    StockStatus,
)
from .alerts import AlertGenerator
from .base import BaseGenerator, GeneratorContext, ensure_context
from .inventory import InventoryGenerator
from .orders import OrderGenerator
from .sales import SalesGenerator

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


class DashboardMetricsGenerator(BaseGenerator):
    """Aggregate collections into DashboardMetrics."""

    def generate(
        self,
        inventory: Sequence[InventoryItem] | None = None,
        sales: Sequence[SalesTransaction] | None = None,
        orders: Sequence[Order] | None = None,
        alerts: Sequence[Alert] | None = None,
    ) -> DashboardMetrics:
        cfg = self.config
        if inventory is None:
            inventory = InventoryGenerator(self.ctx).generate(cfg.default_inventory_count)
        if sales is None:
            sales = SalesGenerator(self.ctx).generate(cfg.default_sales_days)
        if orders is None:
            orders = OrderGenerator(self.ctx).generate(cfg.default_order_count)
        if alerts is None:
            alerts = AlertGenerator(self.ctx).generate(inventory, orders)

        today = self.now.date()
        yesterday = today - timedelta(days=1)

        today_sales = sum(s.amount for s in sales if s.date.date() == today)
        yesterday_sales = sum(s.amount for s in sales if s.date.date() == yesterday)
        monthly_revenue = sum(
            s.amount
            for s in sales
            if (s.date.year, s.date.month) == (today.year, today.month)
        )

        unresolved = [a for a in alerts if not a.is_resolved]
        metrics = DashboardMetrics(
            total_products=len(inventory),
            total_value=sum(item.stock_value for item in inventory),
            low_stock_items=sum(1 for i in inventory if i.status == StockStatus.LOW_STOCK),
            out_of_stock_items=sum(1 for i in inventory if i.status == StockStatus.OUT_OF_STOCK),
            today_sales=today_sales,
            yesterday_sales=yesterday_sales,
            monthly_revenue=monthly_revenue,
            # Simplified projection
            yearly_revenue=monthly_revenue * MONTHS_PER_YEAR,
            pending_orders=sum(1 for o in orders if o.status == OrderStatus.PENDING),
            shipped_orders=sum(1 for o in orders if o.status == OrderStatus.SHIPPED),
            active_alerts=len(unresolved),
            critical_alerts=sum(1 for a in unresolved if a.severity == AlertSeverity.CRITICAL),
        )
        logger.debug("Computed dashboard metrics over %d products", metrics.total_products)
        return metrics


def generate_dashboard_metrics(
    ctx: GeneratorContext | None = None,
    inventory: Sequence[InventoryItem] | None = None,
    sales: Sequence[SalesTransaction] | None = None,
    orders: Sequence[Order] | None = None,
    alerts: Sequence[Alert] | None = None,
) -> DashboardMetrics:
    """
    Compute headline dashboard aggregates.

    total_value is the sum of current_stock * unit_cost over the
    inventory used by this call. Monthly revenue covers sales in the
    calendar month of ctx.now; yearly revenue is monthly revenue * 12.

    Args:
        ctx: Generator context; a fresh unseeded one when None
        inventory, sales, orders, alerts: Collections to reduce; each is
            generated internally when None
    """
    return DashboardMetricsGenerator(ensure_context(ctx)).generate(
        inventory, sales, orders, alerts
    )
