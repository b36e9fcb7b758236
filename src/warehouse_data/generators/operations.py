"""
Operational data: bottleneck fixtures, performance KPIs, chart series.

None of these cross-reference other entities. Bottlenecks are fixed
fixture records; KPIs and series values are independent draws within
the bounds in constants.operations.
"""

import logging
from datetime import timedelta

from ..constants import BOTTLENECKS, PERFORMANCE_KPI_BOUNDS, TIME_SERIES_BOUNDS
from ..helpers import random_between, random_uniform, require_count
from ..models import (
    BottleneckData,
    BottleneckMetrics,
    BottleneckSeverity,
    BottleneckType,
    PerformanceMetrics,
    TimeSeriesKind,
    TimeSeriesPoint,
)
from .base import BaseGenerator, GeneratorContext, ensure_context

logger = logging.getLogger(__name__)


def generate_bottleneck_data() -> list[BottleneckData]:
    """Return the four fixed bottleneck records (picking, packing, shipping, storage)."""
    return [
        BottleneckData(
            area=entry["area"],
            type=BottleneckType(entry["type"]),
            severity=BottleneckSeverity(entry["severity"]),
            description=entry["description"],
            impact=entry["impact"],
            suggestion=entry["suggestion"],
            metrics=BottleneckMetrics(**entry["metrics"]),
        )
        for entry in BOTTLENECKS
    ]


class PerformanceGenerator(BaseGenerator):
    """Draw the six operational KPIs."""

    def generate(self) -> PerformanceMetrics:
        values = {
            name: round(random_uniform(self.rng, low, high), 1)
            for name, (low, high) in PERFORMANCE_KPI_BOUNDS.items()
        }
        return PerformanceMetrics(**values)


class TimeSeriesGenerator(BaseGenerator):
    """Generate one value per day, oldest first, ending today."""

    def generate(
        self, days: int = 30, kind: TimeSeriesKind | str = TimeSeriesKind.SALES
    ) -> list[TimeSeriesPoint]:
        days = require_count(days, "days")
        try:
            kind = TimeSeriesKind(kind)
        except ValueError:
            raise ValueError(
                f"Unknown time series kind: {kind!r}. "
                f"Valid kinds: {[k.value for k in TimeSeriesKind]}"
            ) from None

        low, high = TIME_SERIES_BOUNDS[kind.value]
        points = []
        for offset in range(days - 1, -1, -1):
            day = (self.now - timedelta(days=offset)).date()
            points.append(
                TimeSeriesPoint(date=day.isoformat(), value=random_between(self.rng, low, high))
            )

        logger.debug("Generated %d-day %s series", days, kind.value)
        return points


def generate_performance_metrics(ctx: GeneratorContext | None = None) -> PerformanceMetrics:
    """
    Draw fulfillment time, turnover, stock accuracy, on-time rate,
    utilization and picking efficiency, each rounded to one decimal.
    """
    return PerformanceGenerator(ensure_context(ctx)).generate()


def generate_time_series_data(
    days: int = 30,
    kind: TimeSeriesKind | str = TimeSeriesKind.SALES,
    ctx: GeneratorContext | None = None,
) -> list[TimeSeriesPoint]:
    """
    Generate a daily chart series.

    Args:
        days: Number of points (0 yields an empty list)
        kind: "sales" (1000-5000), "orders" (20-80) or "stock" (85-98)
        ctx: Generator context; a fresh unseeded one when None

    Raises:
        InvalidCountError: If days is negative
        ValueError: If kind is unknown
    """
    return TimeSeriesGenerator(ensure_context(ctx)).generate(days, kind)
