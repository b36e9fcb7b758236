"""
Demand prediction generator.

Not a forecasting model: predicted demand, confidence, trend and
seasonality are random draws per item. The reorder recommendation and
stockout horizon are then computed from the item's stock:

    if current_stock < predicted_demand:
        recommended_order = predicted_demand - current_stock + min_stock_level
        days_until_stock_out = max(1, floor(current_stock / (predicted_demand / 30)))
    else:
        recommended_order = 0
        days_until_stock_out = NO_STOCKOUT_DAYS

predicted_demand is per 30 days. Output is sorted most urgent first.
"""

import logging
import math
from collections.abc import Sequence

from ..constants import NO_STOCKOUT_DAYS
from ..helpers import pick, random_between, random_uniform
from ..models import InventoryItem, PredictionData, Seasonality, Trend
from .base import BaseGenerator, GeneratorContext, ensure_context
from .inventory import InventoryGenerator

logger = logging.getLogger(__name__)

DEMAND_PERIOD_DAYS = 30


def reorder_recommendation(
    current_stock: int, predicted_demand: int, min_stock_level: int
) -> tuple[int, int]:
    """
    Compute (recommended_order, days_until_stock_out) for one item.

    Stock that covers the predicted demand needs no order and has no
    foreseeable stockout (NO_STOCKOUT_DAYS).
    """
    if current_stock >= predicted_demand:
        return 0, NO_STOCKOUT_DAYS

    recommended = max(0, predicted_demand - current_stock + min_stock_level)
    daily_demand = predicted_demand / DEMAND_PERIOD_DAYS
    days = max(1, math.floor(current_stock / daily_demand))
    return recommended, days


class PredictionGenerator(BaseGenerator):
    """Generate PredictionData records for an inventory set."""

    def generate(
        self, inventory: Sequence[InventoryItem] | None = None
    ) -> list[PredictionData]:
        if inventory is None:
            inventory = InventoryGenerator(self.ctx).generate(self.config.default_inventory_count)

        predictions = [self._predict(item) for item in inventory]
        # Stable sort keeps inventory order among equal horizons
        predictions.sort(key=lambda p: p.days_until_stock_out)
        logger.debug("Generated %d predictions", len(predictions))
        return predictions

    def _predict(self, item: InventoryItem) -> PredictionData:
        cfg = self.config
        trend = pick(self.rng, list(Trend))
        seasonality = pick(self.rng, list(Seasonality))
        predicted_demand = random_between(self.rng, *cfg.predicted_demand_range)
        confidence = round(random_uniform(self.rng, *cfg.confidence_range), 2)

        recommended_order, days_until_stock_out = reorder_recommendation(
            item.current_stock, predicted_demand, item.min_stock_level
        )
        return PredictionData(
            product_id=item.id,
            product_name=item.name,
            current_stock=item.current_stock,
            predicted_demand=predicted_demand,
            recommended_order=recommended_order,
            confidence=confidence,
            days_until_stock_out=days_until_stock_out,
            trend=trend,
            seasonality=seasonality,
        )


def generate_prediction_data(
    ctx: GeneratorContext | None = None,
    inventory: Sequence[InventoryItem] | None = None,
) -> list[PredictionData]:
    """
    Generate one prediction per inventory item, most urgent first.

    Args:
        ctx: Generator context; a fresh unseeded one when None
        inventory: Items to predict for; a fresh inventory set when None
    """
    return PredictionGenerator(ensure_context(ctx)).generate(inventory)
