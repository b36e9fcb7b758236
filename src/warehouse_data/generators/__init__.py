"""
Generators Package - Entity generators for synthetic warehouse data.

Base Classes:
- GeneratorContext: Random source, clock and config shared by all generators
- BaseGenerator: Abstract base class for entity generators

Entity Generators:
- InventoryGenerator: Inventory items with derived stock status
- SalesGenerator: Daily sales transactions
- OrderGenerator: Customer orders with status-dependent tracking
- AlertGenerator: Alerts derived from inventory and order state
- PredictionGenerator: Demand predictions and reorder recommendations
- PerformanceGenerator: Operational KPIs
- TimeSeriesGenerator: Daily chart series
- DashboardMetricsGenerator: Headline aggregates

Each generator has a module-level generate_* function taking an
optional context.
"""

from .alerts import AlertGenerator, generate_alerts
from .base import BaseGenerator, GeneratorContext, ensure_context
from .inventory import InventoryGenerator, derive_stock_status, generate_inventory_data
from .metrics import DashboardMetricsGenerator, generate_dashboard_metrics
from .operations import (
    PerformanceGenerator,
    TimeSeriesGenerator,
    generate_bottleneck_data,
    generate_performance_metrics,
    generate_time_series_data,
)
from .orders import OrderGenerator, generate_order_data
from .predictions import PredictionGenerator, generate_prediction_data, reorder_recommendation
from .sales import SalesGenerator, generate_sales_data

__all__ = [
    # Base classes
    "GeneratorContext",
    "BaseGenerator",
    "ensure_context",
    # Generators
    "InventoryGenerator",
    "SalesGenerator",
    "OrderGenerator",
    "AlertGenerator",
    "PredictionGenerator",
    "PerformanceGenerator",
    "TimeSeriesGenerator",
    "DashboardMetricsGenerator",
    # Functions
    "generate_inventory_data",
    "generate_sales_data",
    "generate_order_data",
    "generate_alerts",
    "generate_prediction_data",
    "generate_bottleneck_data",
    "generate_dashboard_metrics",
    "generate_performance_metrics",
    "generate_time_series_data",
    # Derivations
    "derive_stock_status",
    "reorder_recommendation",
]
