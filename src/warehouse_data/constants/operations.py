"""
Operational fixtures and value bounds.

BOTTLENECKS is static fixture data for the statistics view. The bound
tables give (low, high) draw ranges; KPI bounds are continuous, time
series bounds are inclusive integers.
"""

BOTTLENECKS = [
    {
        "area": "Picking Zone A",
        "type": "picking",
        "severity": "high",
        "description": "Congestion in main picking aisle during peak hours",
        "impact": "Reduced picking efficiency by 25%",
        "suggestion": "Implement zone picking strategy and add additional picker",
        "metrics": {"current_throughput": 75, "target_throughput": 100, "efficiency": 75},
    },
    {
        "area": "Packing Station 3",
        "type": "packing",
        "severity": "medium",
        "description": "Equipment malfunction causing delays",
        "impact": "Increased packing time by 15 minutes per order",
        "suggestion": "Schedule maintenance and have backup equipment ready",
        "metrics": {"current_throughput": 85, "target_throughput": 100, "efficiency": 85},
    },
    {
        "area": "Loading Dock B",
        "type": "shipping",
        "severity": "low",
        "description": "Truck scheduling conflicts during morning shift",
        "impact": "Minor delays in outbound shipments",
        "suggestion": "Optimize truck scheduling system",
        "metrics": {"current_throughput": 90, "target_throughput": 100, "efficiency": 90},
    },
    {
        "area": "Storage Section C",
        "type": "storage",
        "severity": "medium",
        "description": "Near capacity limit for bulky items",
        "impact": "Difficulty in storing new inventory",
        "suggestion": "Reorganize storage layout and consider vertical solutions",
        "metrics": {"current_throughput": 88, "target_throughput": 100, "efficiency": 88},
    },
]

PERFORMANCE_KPI_BOUNDS = {
    "order_fulfillment_time": (1.0, 3.0),  # hours
    "inventory_turnover": (8.0, 12.0),  # turns per year
    "stock_accuracy": (95.0, 100.0),  # %
    "on_time_delivery_rate": (90.0, 100.0),  # %
    "warehouse_utilization": (75.0, 90.0),  # %
    "picking_efficiency": (80.0, 100.0),  # %
}

TIME_SERIES_BOUNDS = {
    "sales": (1000, 5000),  # daily revenue
    "orders": (20, 80),  # daily order count
    "stock": (85, 98),  # % of SKUs in stock
}

# Days-until-stockout reported when stock covers predicted demand
NO_STOCKOUT_DAYS = 999
