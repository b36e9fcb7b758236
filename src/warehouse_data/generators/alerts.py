"""
Alert generator.

Alerts are derived, not drawn: one per low-stock, out-of-stock and
expired inventory item, plus up to max_delay_alerts for shipped orders
whose estimated delivery has passed. Only the timestamp and read flag
are random. Output is sorted most recent first.
"""

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta
from typing import NamedTuple

from ..helpers import random_datetime
from ..models import (
    Alert,
    AlertSeverity,
    AlertType,
    InventoryItem,
    Order,
    OrderStatus,
    StockStatus,
)
from .base import BaseGenerator, GeneratorContext, ensure_context
from .inventory import InventoryGenerator
from .orders import OrderGenerator

logger = logging.getLogger(__name__)


class AlertRule(NamedTuple):
    """How an inventory status turns into an alert."""

    status: StockStatus
    type: AlertType
    id_prefix: str
    severity: AlertSeverity
    title: str
    message: str  # formatted with the InventoryItem as `item`
    window_hours: int  # timestamp within this many hours before now
    read_probability: float


INVENTORY_ALERT_RULES = (
    AlertRule(
        status=StockStatus.LOW_STOCK,
        type=AlertType.LOW_STOCK,
        id_prefix="ALERT-LOW",
        severity=AlertSeverity.MEDIUM,
        title="Low Stock Alert",
        message="{item.name} ({item.sku}) is running low. Current stock: {item.current_stock} {item.unit}",
        window_hours=24,
        read_probability=0.7,
    ),
    AlertRule(
        status=StockStatus.OUT_OF_STOCK,
        type=AlertType.OUT_OF_STOCK,
        id_prefix="ALERT-OUT",
        severity=AlertSeverity.HIGH,
        title="Out of Stock",
        message="{item.name} ({item.sku}) is completely out of stock",
        window_hours=12,
        read_probability=0.5,
    ),
    AlertRule(
        status=StockStatus.EXPIRED,
        type=AlertType.EXPIRED,
        id_prefix="ALERT-EXP",
        severity=AlertSeverity.CRITICAL,
        title="Expired Product",
        message="{item.name} ({item.sku}) has expired and should be removed from inventory",
        window_hours=6,
        read_probability=0.0,
    ),
)

DELAY_WINDOW_HOURS = 4
DELAY_READ_PROBABILITY = 0.6


class AlertGenerator(BaseGenerator):
    """Derive Alert records from inventory and order state."""

    def generate(
        self,
        inventory: Sequence[InventoryItem] | None = None,
        orders: Sequence[Order] | None = None,
    ) -> list[Alert]:
        if inventory is None:
            inventory = InventoryGenerator(self.ctx).generate(self.config.default_inventory_count)
        if orders is None:
            orders = OrderGenerator(self.ctx).generate(self.config.default_order_count)

        alerts: list[Alert] = []
        for rule in INVENTORY_ALERT_RULES:
            alerts.extend(self._inventory_alerts(rule, inventory))
        alerts.extend(self._delivery_delay_alerts(orders))

        alerts.sort(key=lambda alert: alert.timestamp, reverse=True)
        logger.debug("Derived %d alerts", len(alerts))
        return alerts

    def _recent_timestamp(self, hours: int) -> datetime:
        return random_datetime(self.rng, self.now - timedelta(hours=hours), self.now)

    def _inventory_alerts(
        self, rule: AlertRule, inventory: Sequence[InventoryItem]
    ) -> list[Alert]:
        matching = [item for item in inventory if item.status == rule.status]
        return [
            Alert(
                id=f"{rule.id_prefix}-{n}",
                type=rule.type,
                severity=rule.severity,
                title=rule.title,
                message=rule.message.format(item=item),
                product_id=item.id,
                timestamp=self._recent_timestamp(rule.window_hours),
                is_read=bool(self.rng.random() < rule.read_probability),
                is_resolved=False,
            )
            for n, item in enumerate(matching, start=1)
        ]

    def _delivery_delay_alerts(self, orders: Sequence[Order]) -> list[Alert]:
        delayed = [
            order
            for order in orders
            if order.status == OrderStatus.SHIPPED
            and order.estimated_delivery is not None
            and order.estimated_delivery < self.now
        ][: self.config.max_delay_alerts]

        return [
            Alert(
                id=f"ALERT-DEL-{n}",
                type=AlertType.DELIVERY_DELAY,
                severity=AlertSeverity.MEDIUM,
                title="Delivery Delay",
                message=(
                    f"Order {order.id} is delayed. Expected delivery was "
                    f"{order.estimated_delivery:%Y-%m-%d}"
                ),
                order_id=order.id,
                timestamp=self._recent_timestamp(DELAY_WINDOW_HOURS),
                is_read=bool(self.rng.random() < DELAY_READ_PROBABILITY),
                is_resolved=False,
            )
            for n, order in enumerate(delayed, start=1)
        ]


def generate_alerts(
    ctx: GeneratorContext | None = None,
    inventory: Sequence[InventoryItem] | None = None,
    orders: Sequence[Order] | None = None,
) -> list[Alert]:
    """
    Derive alerts from inventory and order state, most recent first.

    Without inventory/orders arguments, fresh collections are generated
    for this call only; the resulting alerts reference records no other
    call has seen.

    Args:
        ctx: Generator context; a fresh unseeded one when None
        inventory: Items to scan for low/out-of-stock and expired status
        orders: Orders to scan for overdue shipments
    """
    return AlertGenerator(ensure_context(ctx)).generate(inventory, orders)
