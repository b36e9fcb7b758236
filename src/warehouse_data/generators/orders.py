"""
Customer order generator.

Orders carry 1-5 line items drawn from the backing inventory. Status is
uniform over the five order statuses; tracking and delivery fields are
filled according to status:

    pending / processing / cancelled -> no tracking, no delivery dates
    shipped                          -> tracking + estimated delivery
    delivered                        -> tracking + estimated + actual delivery
"""

import logging
from collections.abc import Sequence
from datetime import timedelta

from ..helpers import pick, random_between, random_datetime, require_count, round_money
from ..models import InventoryItem, Order, OrderItem, OrderStatus
from .base import BaseGenerator, GeneratorContext, ensure_context
from .inventory import InventoryGenerator

logger = logging.getLogger(__name__)

ORDER_STATUSES = list(OrderStatus)
TRACKED_STATUSES = (OrderStatus.SHIPPED, OrderStatus.DELIVERED)


class OrderGenerator(BaseGenerator):
    """Generate Order records."""

    def generate(
        self,
        count: int = 100,
        inventory: Sequence[InventoryItem] | None = None,
    ) -> list[Order]:
        count = require_count(count)
        if inventory is None:
            inventory = InventoryGenerator(self.ctx).generate(self.config.default_inventory_count)

        if not inventory:
            logger.debug("No inventory to order from; returning no orders")
            return []

        orders = [self._generate_order(i, inventory) for i in range(count)]
        logger.debug("Generated %d orders", len(orders))
        return orders

    def _generate_items(self, inventory: Sequence[InventoryItem]) -> tuple[OrderItem, ...]:
        cfg = self.config
        num_items = random_between(self.rng, *cfg.order_items_range)

        items = []
        for _ in range(num_items):
            product = pick(self.rng, inventory)
            quantity = random_between(self.rng, *cfg.order_quantity_range)
            unit_price = round_money(product.unit_cost * (1 + self.rng.random() * cfg.max_markup))
            items.append(
                OrderItem(
                    product_id=product.id,
                    product_name=product.name,
                    quantity=quantity,
                    unit_price=unit_price,
                    total=round_money(unit_price * quantity),
                )
            )
        return tuple(items)

    def _generate_order(self, index: int, inventory: Sequence[InventoryItem]) -> Order:
        cfg = self.config
        items = self._generate_items(inventory)
        status = pick(self.rng, ORDER_STATUSES)
        order_date = random_datetime(
            self.rng, self.now - timedelta(days=cfg.order_window_days), self.now
        )
        name, email, address = self.ctx.pool.sample_customer()

        number = index + 1
        tracking_number = None
        estimated_delivery = None
        actual_delivery = None
        if status in TRACKED_STATUSES:
            tracking_number = f"TRK-{number:08d}"
            estimated_delivery = random_datetime(
                self.rng, order_date, order_date + timedelta(days=cfg.delivery_window_days)
            )
        if status == OrderStatus.DELIVERED:
            actual_delivery = random_datetime(self.rng, order_date, self.now)

        return Order(
            id=f"ORD-{number:06d}",
            customer_name=name,
            customer_email=email,
            order_date=order_date,
            status=status,
            items=items,
            total=round_money(sum(item.total for item in items)),
            shipping_address=address,
            tracking_number=tracking_number,
            estimated_delivery=estimated_delivery,
            actual_delivery=actual_delivery,
        )


def generate_order_data(
    count: int = 100,
    ctx: GeneratorContext | None = None,
    inventory: Sequence[InventoryItem] | None = None,
) -> list[Order]:
    """
    Generate count orders with ids ORD-000001, ORD-000002, ...

    Args:
        count: Number of orders (0 yields an empty list)
        ctx: Generator context; a fresh unseeded one when None
        inventory: Items to order from; a fresh inventory set when None.
            An empty inventory yields no orders.

    Raises:
        InvalidCountError: If count is negative
    """
    return OrderGenerator(ensure_context(ctx)).generate(count, inventory)
