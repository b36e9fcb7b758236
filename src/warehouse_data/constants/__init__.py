"""
Constants Package - Reference data for warehouse data generation.

Modules:
- catalog: Product catalog (categories, product names, suppliers, locations, regions)
- operations: Bottleneck fixtures, KPI bounds, time series bounds

Usage:
    from warehouse_data.constants import (
        CATEGORIES, PRODUCT_NAMES, SUPPLIERS, LOCATIONS, REGIONS,
        BOTTLENECKS, PERFORMANCE_KPI_BOUNDS, TIME_SERIES_BOUNDS,
    )
"""

from .catalog import CATEGORIES, LOCATIONS, PRODUCT_NAMES, REGIONS, SUPPLIERS, UNITS
from .operations import (
    BOTTLENECKS,
    NO_STOCKOUT_DAYS,
    PERFORMANCE_KPI_BOUNDS,
    TIME_SERIES_BOUNDS,
)

__all__ = [
    # Catalog
    "CATEGORIES",
    "PRODUCT_NAMES",
    "SUPPLIERS",
    "LOCATIONS",
    "REGIONS",
    "UNITS",
    # Operations
    "BOTTLENECKS",
    "PERFORMANCE_KPI_BOUNDS",
    "TIME_SERIES_BOUNDS",
    "NO_STOCKOUT_DAYS",
]
