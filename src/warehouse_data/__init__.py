"""
Warehouse Data - Synthetic data for a warehouse-management dashboard.

Seedable generators fabricate inventory, sales, orders, alerts, demand
predictions, bottlenecks and operational KPIs in memory. Pure helpers
aggregate held collections for display.

Usage:
    from warehouse_data import GeneratorContext, generate_inventory_data

    ctx = GeneratorContext.create(seed=42)
    items = generate_inventory_data(50, ctx)
"""

from .config import ConfigError, GeneratorConfig
from .dataset import SyntheticDataset, generate_dataset
from .generators import (
    GeneratorContext,
    derive_stock_status,
    generate_alerts,
    generate_bottleneck_data,
    generate_dashboard_metrics,
    generate_inventory_data,
    generate_order_data,
    generate_performance_metrics,
    generate_prediction_data,
    generate_sales_data,
    generate_time_series_data,
)
from .helpers import InvalidCountError
from .models import (
    Alert,
    BottleneckData,
    DashboardMetrics,
    InventoryItem,
    Order,
    OrderItem,
    PerformanceMetrics,
    PredictionData,
    SalesTransaction,
    TimeSeriesPoint,
)
from .validation import DatasetValidationError, DatasetValidator, validate_dataset

__version__ = "0.1.0"

__all__ = [
    # Context and config
    "GeneratorContext",
    "GeneratorConfig",
    "ConfigError",
    "InvalidCountError",
    # Generators
    "generate_inventory_data",
    "generate_sales_data",
    "generate_order_data",
    "generate_alerts",
    "generate_prediction_data",
    "generate_bottleneck_data",
    "generate_dashboard_metrics",
    "generate_performance_metrics",
    "generate_time_series_data",
    "derive_stock_status",
    # Shared dataset
    "SyntheticDataset",
    "generate_dataset",
    # Validation
    "DatasetValidator",
    "DatasetValidationError",
    "validate_dataset",
    # Records
    "InventoryItem",
    "SalesTransaction",
    "Order",
    "OrderItem",
    "Alert",
    "PredictionData",
    "BottleneckData",
    "DashboardMetrics",
    "PerformanceMetrics",
    "TimeSeriesPoint",
]
