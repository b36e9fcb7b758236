"""
Record types produced by the warehouse data generators.

All records are frozen dataclasses: generated once per call and never
mutated afterwards. Consumers that need a changed record (e.g. an alert
marked as read) build a copy with dataclasses.replace().

Enumerated fields use str-valued enums so they compare equal to their
plain string values ("low_stock", "shipped", ...).

to_dict() renders a record with the camelCase keys the dashboard views
consume.
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any


class StockStatus(str, Enum):
    """Stock status derived from thresholds and expiry."""

    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"
    EXPIRED = "expired"


class SalesChannel(str, Enum):
    ONLINE = "online"
    RETAIL = "retail"
    WHOLESALE = "wholesale"


class CustomerType(str, Enum):
    NEW = "new"
    RETURNING = "returning"


class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class AlertType(str, Enum):
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"
    EXPIRED = "expired"
    DELIVERY_DELAY = "delivery_delay"
    SYSTEM = "system"


class AlertSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Trend(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class Seasonality(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class BottleneckType(str, Enum):
    PICKING = "picking"
    PACKING = "packing"
    SHIPPING = "shipping"
    RECEIVING = "receiving"
    STORAGE = "storage"


class BottleneckSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TimeSeriesKind(str, Enum):
    """Value family of a chart series."""

    SALES = "sales"
    ORDERS = "orders"
    STOCK = "stock"


def _camel(name: str) -> str:
    """Convert snake_case to camelCase."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _render(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, RecordMixin):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_render(v) for v in value]
    return value


class RecordMixin:
    """Shared dict rendering for record dataclasses."""

    def to_dict(self) -> dict[str, Any]:
        """
        Render the record as a dict with camelCase keys.

        Enum values become their string value, nested records become
        dicts. Datetimes are left as datetime objects.
        """
        return {_camel(f.name): _render(getattr(self, f.name)) for f in fields(self)}


@dataclass(frozen=True)
class InventoryItem(RecordMixin):
    """A stocked product in the warehouse."""

    id: str
    name: str
    sku: str
    category: str
    current_stock: int
    min_stock_level: int
    max_stock_level: int
    unit: str
    unit_cost: float
    location: str
    supplier: str
    last_restocked: datetime
    status: StockStatus
    expiry_date: datetime | None = None

    @property
    def stock_value(self) -> float:
        """Value of the units on hand at unit cost."""
        return self.current_stock * self.unit_cost


@dataclass(frozen=True)
class SalesTransaction(RecordMixin):
    """A single sale of one product."""

    id: str
    date: datetime
    amount: float
    quantity: int
    product_id: str
    product_name: str
    channel: SalesChannel
    customer_type: CustomerType
    region: str


@dataclass(frozen=True)
class OrderItem(RecordMixin):
    """A line item on an order."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: float
    total: float


@dataclass(frozen=True)
class Order(RecordMixin):
    """
    A customer order.

    tracking_number and estimated_delivery are set only for shipped and
    delivered orders; actual_delivery only for delivered ones.
    """

    id: str
    customer_name: str
    customer_email: str
    order_date: datetime
    status: OrderStatus
    items: tuple[OrderItem, ...]
    total: float
    shipping_address: str
    tracking_number: str | None = None
    estimated_delivery: datetime | None = None
    actual_delivery: datetime | None = None


@dataclass(frozen=True)
class Alert(RecordMixin):
    """An operational alert raised from inventory or order state."""

    id: str
    type: AlertType
    severity: AlertSeverity
    title: str
    message: str
    timestamp: datetime
    is_read: bool = False
    is_resolved: bool = False
    product_id: str | None = None
    order_id: str | None = None


@dataclass(frozen=True)
class PredictionData(RecordMixin):
    """Demand forecast and reorder recommendation for one product."""

    product_id: str
    product_name: str
    current_stock: int
    predicted_demand: int
    recommended_order: int
    confidence: float
    days_until_stock_out: int
    trend: Trend
    seasonality: Seasonality


@dataclass(frozen=True)
class BottleneckMetrics(RecordMixin):
    current_throughput: int
    target_throughput: int
    efficiency: int


@dataclass(frozen=True)
class BottleneckData(RecordMixin):
    """A named operational bottleneck with throughput figures."""

    area: str
    type: BottleneckType
    severity: BottleneckSeverity
    description: str
    impact: str
    suggestion: str
    metrics: BottleneckMetrics


@dataclass(frozen=True)
class DashboardMetrics(RecordMixin):
    """Headline aggregates for the overview page."""

    total_products: int
    total_value: float
    low_stock_items: int
    out_of_stock_items: int
    today_sales: float
    yesterday_sales: float
    monthly_revenue: float
    yearly_revenue: float
    pending_orders: int
    shipped_orders: int
    active_alerts: int
    critical_alerts: int


@dataclass(frozen=True)
class PerformanceMetrics(RecordMixin):
    """Operational KPIs (hours, turns per year, percentages)."""

    order_fulfillment_time: float
    inventory_turnover: float
    stock_accuracy: float
    on_time_delivery_rate: float
    warehouse_utilization: float
    picking_efficiency: float


@dataclass(frozen=True)
class TimeSeriesPoint(RecordMixin):
    date: str  # ISO YYYY-MM-DD
    value: int
    category: str | None = field(default=None)
