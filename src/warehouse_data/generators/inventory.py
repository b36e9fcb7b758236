"""
Inventory generator.

Produces InventoryItem records with stock levels drawn within the
configured bounds. Catalog fields (name, category, location, supplier)
cycle through the constant lists by item index; status is derived from
stock thresholds and expiry date.
"""

import logging
from datetime import datetime, timedelta

from ..constants import CATEGORIES, LOCATIONS, PRODUCT_NAMES, SUPPLIERS, UNITS
from ..helpers import random_between, random_datetime, require_count, round_money
from ..models import InventoryItem, StockStatus
from .base import BaseGenerator, GeneratorContext, ensure_context

logger = logging.getLogger(__name__)


def derive_stock_status(
    current_stock: int,
    min_stock_level: int,
    expiry_date: datetime | None,
    now: datetime,
) -> StockStatus:
    """
    Derive an item's stock status.

    Precedence: expired (expiry date in the past) overrides the
    stock-based status; otherwise out_of_stock at zero, low_stock at or
    below the minimum level, in_stock above it.
    """
    if expiry_date is not None and expiry_date < now:
        return StockStatus.EXPIRED
    if current_stock == 0:
        return StockStatus.OUT_OF_STOCK
    if current_stock <= min_stock_level:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


class InventoryGenerator(BaseGenerator):
    """Generate InventoryItem records."""

    def generate(self, count: int = 50) -> list[InventoryItem]:
        count = require_count(count)
        items = [self._generate_item(i) for i in range(count)]
        logger.debug("Generated %d inventory items", len(items))
        return items

    def _generate_item(self, index: int) -> InventoryItem:
        cfg = self.config
        current_stock = random_between(self.rng, *cfg.stock_range)
        min_stock_level = random_between(self.rng, *cfg.min_stock_range)
        max_stock_level = random_between(self.rng, *cfg.max_stock_range)
        unit = UNITS[0] if self.rng.random() > 0.5 else UNITS[1]
        low_cost, high_cost = cfg.unit_cost_range
        unit_cost = round_money(self.rng.random() * (high_cost - low_cost) + low_cost)
        last_restocked = random_datetime(
            self.rng, self.now - timedelta(days=cfg.restock_window_days), self.now
        )

        expiry_date = None
        if self.rng.random() < cfg.expiry_probability:
            expiry_date = random_datetime(
                self.rng,
                self.now - timedelta(days=cfg.expiry_lookback_days),
                self.now + timedelta(days=cfg.expiry_horizon_days),
            )

        number = index + 1
        return InventoryItem(
            id=f"INV-{number:04d}",
            name=PRODUCT_NAMES[index % len(PRODUCT_NAMES)],
            sku=f"SKU-{number:06d}",
            category=CATEGORIES[index % len(CATEGORIES)],
            current_stock=current_stock,
            min_stock_level=min_stock_level,
            max_stock_level=max_stock_level,
            unit=unit,
            unit_cost=unit_cost,
            location=LOCATIONS[index % len(LOCATIONS)],
            supplier=SUPPLIERS[index % len(SUPPLIERS)],
            last_restocked=last_restocked,
            expiry_date=expiry_date,
            status=derive_stock_status(current_stock, min_stock_level, expiry_date, self.now),
        )


def generate_inventory_data(
    count: int = 50, ctx: GeneratorContext | None = None
) -> list[InventoryItem]:
    """
    Generate count inventory items with ids INV-0001, INV-0002, ...

    Args:
        count: Number of items (0 yields an empty list)
        ctx: Generator context; a fresh unseeded one when None

    Raises:
        InvalidCountError: If count is negative
    """
    return InventoryGenerator(ensure_context(ctx)).generate(count)
