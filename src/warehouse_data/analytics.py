"""
Pure aggregation helpers over held collections.

Views generate a collection once and derive every chart series, count
and filtered list from that held collection with these helpers instead
of calling a generator again (which would produce unrelated records).

None of these functions draw random numbers or mutate their inputs.
"""

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import replace
from datetime import date

from .models import (
    Alert,
    AlertSeverity,
    BottleneckData,
    BottleneckSeverity,
    InventoryItem,
    Order,
    OrderStatus,
    PredictionData,
    SalesChannel,
    SalesTransaction,
    StockStatus,
    TimeSeriesPoint,
    Trend,
)

# Urgency thresholds in days until stockout (inclusive upper bounds)
URGENCY_THRESHOLDS = (
    (7, "critical"),
    (14, "high"),
    (30, "medium"),
)
HIGH_CONFIDENCE = 0.8
MEDIUM_CONFIDENCE = 0.6

# Flat per-unit value used by the predictive view for recommended orders
DEFAULT_UNIT_VALUE = 50

PREDICTION_SORT_KEYS = {
    # key -> (attribute, descending)
    "days_until_stock_out": ("days_until_stock_out", False),
    "confidence": ("confidence", True),
    "recommended_order": ("recommended_order", True),
    "predicted_demand": ("predicted_demand", True),
}


# =============================================================================
# Inventory
# =============================================================================


def status_counts(items: Iterable[InventoryItem]) -> dict[str, int]:
    """Count items per stock status; every status appears, possibly as 0."""
    counts = Counter(StockStatus(item.status).value for item in items)
    return {status.value: counts.get(status.value, 0) for status in StockStatus}


def category_distribution(items: Iterable[InventoryItem]) -> dict[str, int]:
    """Count items per category, in first-seen order."""
    return dict(Counter(item.category for item in items))


def inventory_value(items: Iterable[InventoryItem]) -> float:
    """Sum of current_stock * unit_cost."""
    return sum(item.stock_value for item in items)


# =============================================================================
# Sales
# =============================================================================


def channel_revenue(sales: Iterable[SalesTransaction]) -> dict[str, float]:
    """Revenue per sales channel; every channel appears, possibly as 0."""
    totals = {channel.value: 0.0 for channel in SalesChannel}
    for sale in sales:
        totals[SalesChannel(sale.channel).value] += sale.amount
    return totals


def sales_total(
    sales: Iterable[SalesTransaction], channel: SalesChannel | str | None = None
) -> float:
    """Total sales amount, optionally restricted to one channel."""
    if channel is None:
        return sum(sale.amount for sale in sales)
    return sum(sale.amount for sale in sales if sale.channel == channel)


def daily_sales_series(sales: Iterable[SalesTransaction]) -> list[TimeSeriesPoint]:
    """
    Total sales per calendar day, oldest first.

    Values are rounded to whole currency units.
    """
    per_day: dict[date, float] = {}
    for sale in sales:
        day = sale.date.date()
        per_day[day] = per_day.get(day, 0.0) + sale.amount
    return [
        TimeSeriesPoint(date=day.isoformat(), value=round(total))
        for day, total in sorted(per_day.items())
    ]


# =============================================================================
# Orders
# =============================================================================


def order_status_counts(orders: Iterable[Order]) -> dict[str, int]:
    """Count orders per status; every status appears, possibly as 0."""
    counts = Counter(OrderStatus(order.status).value for order in orders)
    return {status.value: counts.get(status.value, 0) for status in OrderStatus}


def filter_orders(
    orders: Iterable[Order],
    search: str = "",
    status: OrderStatus | str | None = None,
) -> list[Order]:
    """
    Filter orders by free-text search and status.

    The search matches order id, customer name or tracking number,
    case-insensitively. An empty search matches everything.
    """
    needle = search.lower()

    def matches(order: Order) -> bool:
        haystacks = [order.id, order.customer_name, order.tracking_number or ""]
        if needle and not any(needle in h.lower() for h in haystacks):
            return False
        return status is None or order.status == status

    return [order for order in orders if matches(order)]


# =============================================================================
# Alerts
# =============================================================================


def severity_counts(alerts: Iterable[Alert]) -> dict[str, int]:
    """Count unresolved alerts per severity."""
    counts = Counter(
        AlertSeverity(alert.severity).value for alert in alerts if not alert.is_resolved
    )
    return {severity.value: counts.get(severity.value, 0) for severity in AlertSeverity}


def filter_alerts(
    alerts: Iterable[Alert],
    severity: AlertSeverity | str | None = None,
    show_resolved: bool = False,
) -> list[Alert]:
    """Filter alerts by severity, hiding resolved ones unless asked."""
    return [
        alert
        for alert in alerts
        if (show_resolved or not alert.is_resolved)
        and (severity is None or alert.severity == severity)
    ]


def mark_alert_read(alerts: Sequence[Alert], alert_id: str) -> list[Alert]:
    """Return a new list with the matching alert marked read."""
    return [replace(a, is_read=True) if a.id == alert_id else a for a in alerts]


def resolve_alert(alerts: Sequence[Alert], alert_id: str) -> list[Alert]:
    """Return a new list with the matching alert marked resolved."""
    return [replace(a, is_resolved=True) if a.id == alert_id else a for a in alerts]


# =============================================================================
# Predictions
# =============================================================================


def urgency_level(days_until_stock_out: int) -> str:
    """Map days until stockout to critical / high / medium / low."""
    for limit, level in URGENCY_THRESHOLDS:
        if days_until_stock_out <= limit:
            return level
    return "low"


def confidence_level(confidence: float) -> str:
    """Map a 0-1 confidence to high / medium / low."""
    if confidence >= HIGH_CONFIDENCE:
        return "high"
    if confidence >= MEDIUM_CONFIDENCE:
        return "medium"
    return "low"


def filter_predictions(
    predictions: Iterable[PredictionData],
    search: str = "",
    trend: Trend | str | None = None,
    urgency: str | None = None,
    confidence: str | None = None,
) -> list[PredictionData]:
    """
    Filter predictions the way the predictive analytics view does.

    search matches product name or id case-insensitively; urgency and
    confidence take the level names from urgency_level() and
    confidence_level().
    """
    needle = search.lower()
    return [
        p
        for p in predictions
        if (not needle or needle in p.product_name.lower() or needle in p.product_id.lower())
        and (trend is None or p.trend == trend)
        and (urgency is None or urgency_level(p.days_until_stock_out) == urgency)
        and (confidence is None or confidence_level(p.confidence) == confidence)
    ]


def sort_predictions(
    predictions: Iterable[PredictionData], by: str = "days_until_stock_out"
) -> list[PredictionData]:
    """
    Sort predictions for display.

    days_until_stock_out sorts ascending (most urgent first); confidence,
    recommended_order and predicted_demand sort descending.

    Raises:
        ValueError: If by is not a known sort key
    """
    if by not in PREDICTION_SORT_KEYS:
        raise ValueError(
            f"Unknown sort key: {by}. Valid keys: {list(PREDICTION_SORT_KEYS)}"
        )
    attribute, descending = PREDICTION_SORT_KEYS[by]
    return sorted(predictions, key=lambda p: getattr(p, attribute), reverse=descending)


def stockout_buckets(predictions: Iterable[PredictionData]) -> dict[str, int]:
    """Count predictions in the 0-7, 8-14, 15-30 and 30+ day horizons."""
    buckets = {"0-7": 0, "8-14": 0, "15-30": 0, "30+": 0}
    labels = {"critical": "0-7", "high": "8-14", "medium": "15-30", "low": "30+"}
    for p in predictions:
        buckets[labels[urgency_level(p.days_until_stock_out)]] += 1
    return buckets


def prediction_summary(
    predictions: Sequence[PredictionData], unit_value: float = DEFAULT_UNIT_VALUE
) -> dict[str, float]:
    """
    Headline figures for the predictive view.

    Returns:
        Dict with urgent_items (stockout within 30 days),
        high_confidence (confidence >= 0.8), total_recommended_value
        (recommended units * unit_value) and average_confidence
        (0 for an empty input)
    """
    count = len(predictions)
    return {
        "urgent_items": sum(1 for p in predictions if p.days_until_stock_out <= 30),
        "high_confidence": sum(1 for p in predictions if p.confidence >= HIGH_CONFIDENCE),
        "total_recommended_value": sum(p.recommended_order for p in predictions) * unit_value,
        "average_confidence": (
            sum(p.confidence for p in predictions) / count if count else 0.0
        ),
    }


# =============================================================================
# Bottlenecks
# =============================================================================


def high_severity_bottlenecks(bottlenecks: Iterable[BottleneckData]) -> list[BottleneckData]:
    """Bottlenecks flagged high priority."""
    return [b for b in bottlenecks if b.severity == BottleneckSeverity.HIGH]
