"""
Sales transaction generator.

Each day in the window gets 10-50 transactions (configurable), each
selling a random item from the backing inventory at a random markup
over unit cost.
"""

import logging
from collections.abc import Sequence
from datetime import timedelta

from ..constants import REGIONS
from ..helpers import pick, random_between, require_count, round_money
from ..models import CustomerType, InventoryItem, SalesChannel, SalesTransaction
from .base import BaseGenerator, GeneratorContext, ensure_context
from .inventory import InventoryGenerator

logger = logging.getLogger(__name__)

CHANNELS = list(SalesChannel)


class SalesGenerator(BaseGenerator):
    """Generate SalesTransaction records over a window of days."""

    def generate(
        self,
        days: int = 30,
        inventory: Sequence[InventoryItem] | None = None,
    ) -> list[SalesTransaction]:
        days = require_count(days, "days")
        if inventory is None:
            inventory = InventoryGenerator(self.ctx).generate(self.config.default_inventory_count)

        sales: list[SalesTransaction] = []
        if not inventory:
            logger.debug("No inventory to sell from; returning no sales")
            return sales

        for day in range(days):
            sales.extend(self._generate_day(day, inventory))

        logger.debug("Generated %d sales over %d days", len(sales), days)
        return sales

    def _generate_day(
        self, day: int, inventory: Sequence[InventoryItem]
    ) -> list[SalesTransaction]:
        cfg = self.config
        date = self.now - timedelta(days=day)
        sales_per_day = random_between(self.rng, *cfg.sales_per_day_range)

        transactions = []
        for sale in range(sales_per_day):
            product = pick(self.rng, inventory)
            quantity = random_between(self.rng, *cfg.sale_quantity_range)
            markup = 1 + self.rng.random() * cfg.max_markup
            amount = round_money(product.unit_cost * quantity * markup)
            channel = pick(self.rng, CHANNELS)
            customer_type = (
                CustomerType.RETURNING
                if self.rng.random() < cfg.returning_customer_probability
                else CustomerType.NEW
            )

            transactions.append(
                SalesTransaction(
                    id=f"SALE-{date:%Y%m%d}-{sale + 1:04d}",
                    date=date,
                    amount=amount,
                    quantity=quantity,
                    product_id=product.id,
                    product_name=product.name,
                    channel=channel,
                    customer_type=customer_type,
                    region=pick(self.rng, REGIONS),
                )
            )
        return transactions


def generate_sales_data(
    days: int = 30,
    ctx: GeneratorContext | None = None,
    inventory: Sequence[InventoryItem] | None = None,
) -> list[SalesTransaction]:
    """
    Generate sales transactions for the last `days` days, today included.

    Args:
        days: Number of days (0 yields an empty list)
        ctx: Generator context; a fresh unseeded one when None
        inventory: Items to sell; a fresh inventory set when None.
            An empty inventory yields no sales.

    Raises:
        InvalidCountError: If days is negative
    """
    return SalesGenerator(ensure_context(ctx)).generate(days, inventory)
