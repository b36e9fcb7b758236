"""
Validation checks for generated warehouse data.

Contains the consistency checks every generated collection must pass:
- Inventory ids, SKU format and status derivation
- Order line-item bounds, totals and status-dependent tracking fields
- Alert ordering (most recent first)
- Prediction reorder formula and ordering (most urgent first)
- Dashboard metrics against the collections they reduce

Each check_* method returns (passed, message). validate() and
validate_dataset() run the checks and raise DatasetValidationError
listing every failure.
"""

import math
import re
from collections.abc import Mapping, Sequence
from datetime import datetime

from .config import GeneratorConfig
from .dataset import SyntheticDataset
from .generators import derive_stock_status, reorder_recommendation
from .models import (
    Alert,
    DashboardMetrics,
    InventoryItem,
    Order,
    OrderStatus,
    PredictionData,
)

INVENTORY_ID_PATTERN = re.compile(r"^INV-\d{4,}$")
SKU_PATTERN = re.compile(r"^SKU-\d{6,}$")
ORDER_ID_PATTERN = re.compile(r"^ORD-\d{6,}$")

# Tolerance for comparing sums of cent-rounded amounts
MONEY_TOLERANCE = 0.01


class DatasetValidationError(Exception):
    """Raised when generated data fails consistency checks."""

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        message = f"Dataset validation failed with {len(violations)} violation(s):\n"
        message += "\n".join(f"  - {v}" for v in violations)
        super().__init__(message)


def _result(violations: list[str], ok_message: str) -> tuple[bool, str]:
    if violations:
        return False, "; ".join(violations)
    return True, ok_message


class DatasetValidator:
    """
    Consistency checks for generated collections.

    Args:
        now: Reference clock the data was generated against (decides
            which expiry dates count as past)
        config: Generation parameters (line-item bounds)
    """

    def __init__(self, now: datetime, config: GeneratorConfig | None = None) -> None:
        self.now = now
        self.config = config or GeneratorConfig()

    def check_inventory(self, items: Sequence[InventoryItem]) -> tuple[bool, str]:
        """Ids INV-#### unique, SKUs well-formed, status matches derivation."""
        violations = []
        seen: set[str] = set()
        for item in items:
            if not INVENTORY_ID_PATTERN.match(item.id):
                violations.append(f"{item.id}: malformed inventory id")
            if item.id in seen:
                violations.append(f"{item.id}: duplicate inventory id")
            seen.add(item.id)
            if not SKU_PATTERN.match(item.sku):
                violations.append(f"{item.id}: malformed sku {item.sku}")

            expected = derive_stock_status(
                item.current_stock, item.min_stock_level, item.expiry_date, self.now
            )
            if item.status != expected:
                violations.append(
                    f"{item.id}: status {item.status} but stock/expiry imply {expected.value}"
                )
        return _result(violations, f"{len(items)} inventory items consistent")

    def check_orders(self, orders: Sequence[Order]) -> tuple[bool, str]:
        """Line-item count bounds, totals, and status-dependent tracking fields."""
        low, high = self.config.order_items_range
        violations = []
        for order in orders:
            if not ORDER_ID_PATTERN.match(order.id):
                violations.append(f"{order.id}: malformed order id")
            if not low <= len(order.items) <= high:
                violations.append(f"{order.id}: {len(order.items)} line items outside [{low}, {high}]")
            line_sum = sum(item.total for item in order.items)
            if abs(order.total - line_sum) > MONEY_TOLERANCE:
                violations.append(f"{order.id}: total {order.total} != line sum {line_sum:.2f}")

            tracked = order.status in (OrderStatus.SHIPPED, OrderStatus.DELIVERED)
            if tracked != (order.tracking_number is not None):
                violations.append(f"{order.id}: tracking number inconsistent with {order.status}")
            if tracked != (order.estimated_delivery is not None):
                violations.append(f"{order.id}: estimated delivery inconsistent with {order.status}")
            delivered = order.status == OrderStatus.DELIVERED
            if delivered != (order.actual_delivery is not None):
                violations.append(f"{order.id}: actual delivery inconsistent with {order.status}")
        return _result(violations, f"{len(orders)} orders consistent")

    def check_alerts(self, alerts: Sequence[Alert]) -> tuple[bool, str]:
        """Alerts sorted most recent first, ids unique."""
        violations = []
        for newer, older in zip(alerts, alerts[1:]):
            if newer.timestamp < older.timestamp:
                violations.append(f"{newer.id} precedes more recent {older.id}")
        ids = [a.id for a in alerts]
        if len(ids) != len(set(ids)):
            violations.append("duplicate alert ids")
        return _result(violations, f"{len(alerts)} alerts ordered")

    def check_predictions(
        self,
        predictions: Sequence[PredictionData],
        inventory_by_id: Mapping[str, InventoryItem] | None = None,
    ) -> tuple[bool, str]:
        """
        Reorder formula and ascending days-until-stockout order.

        With inventory_by_id, recommended_order and days_until_stock_out
        are recomputed exactly from each item's min_stock_level;
        without it only the covered-stock case (order 0) is checked.
        """
        violations = []
        for p in predictions:
            if p.recommended_order < 0:
                violations.append(f"{p.product_id}: negative recommended order")
            if p.current_stock >= p.predicted_demand and p.recommended_order != 0:
                violations.append(f"{p.product_id}: stock covers demand but order recommended")

            item = inventory_by_id.get(p.product_id) if inventory_by_id else None
            if item is not None:
                expected = reorder_recommendation(
                    p.current_stock, p.predicted_demand, item.min_stock_level
                )
                if (p.recommended_order, p.days_until_stock_out) != expected:
                    violations.append(
                        f"{p.product_id}: got {(p.recommended_order, p.days_until_stock_out)}, "
                        f"expected {expected}"
                    )

        for first, second in zip(predictions, predictions[1:]):
            if first.days_until_stock_out > second.days_until_stock_out:
                violations.append(f"{first.product_id} sorted before more urgent {second.product_id}")
        return _result(violations, f"{len(predictions)} predictions consistent")

    def check_metrics(
        self,
        metrics: DashboardMetrics,
        inventory: Sequence[InventoryItem],
        orders: Sequence[Order],
        alerts: Sequence[Alert],
    ) -> tuple[bool, str]:
        """Dashboard metrics agree with the collections they were reduced from."""
        violations = []
        expected_value = sum(item.current_stock * item.unit_cost for item in inventory)
        if not math.isclose(metrics.total_value, expected_value, abs_tol=MONEY_TOLERANCE):
            violations.append(f"total_value {metrics.total_value} != {expected_value}")
        if metrics.total_products != len(inventory):
            violations.append(f"total_products {metrics.total_products} != {len(inventory)}")

        pending = sum(1 for o in orders if o.status == OrderStatus.PENDING)
        if metrics.pending_orders != pending:
            violations.append(f"pending_orders {metrics.pending_orders} != {pending}")
        active = sum(1 for a in alerts if not a.is_resolved)
        if metrics.active_alerts != active:
            violations.append(f"active_alerts {metrics.active_alerts} != {active}")
        if not math.isclose(metrics.yearly_revenue, metrics.monthly_revenue * 12):
            violations.append("yearly_revenue is not 12x monthly_revenue")
        return _result(violations, "dashboard metrics consistent")

    def run_checks(self, dataset: SyntheticDataset) -> dict[str, tuple[bool, str]]:
        """Run every check against a dataset; returns check name -> result."""
        return {
            "inventory": self.check_inventory(dataset.inventory),
            "orders": self.check_orders(dataset.orders),
            "alerts": self.check_alerts(dataset.alerts),
            "predictions": self.check_predictions(
                dataset.predictions, dataset.inventory_by_id()
            ),
            "metrics": self.check_metrics(
                dataset.metrics, dataset.inventory, dataset.orders, dataset.alerts
            ),
        }

    def validate(self, dataset: SyntheticDataset) -> None:
        """
        Validate a dataset.

        Raises:
            DatasetValidationError: Listing every failed check
        """
        violations = [
            f"{name}: {message}"
            for name, (passed, message) in self.run_checks(dataset).items()
            if not passed
        ]
        if violations:
            raise DatasetValidationError(violations)


def validate_dataset(
    dataset: SyntheticDataset, now: datetime, config: GeneratorConfig | None = None
) -> None:
    """Validate a dataset generated against the clock `now`."""
    DatasetValidator(now, config).validate(dataset)
