"""
Generation parameters for the warehouse data generators.

GeneratorConfig holds every draw range and probability the generators
use. Defaults reproduce the dashboard's demo data; a YAML file can
override any subset of them:

    # warehouse.yaml
    expiry_lookback_days: 0
    sales_per_day_range: [20, 40]
    max_delay_alerts: 10

    config = GeneratorConfig.from_yaml(Path("warehouse.yaml"))
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml


class ConfigError(ValueError):
    """Raised when generator configuration is malformed."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        message = f"Invalid generator config ({len(problems)} problem(s)):\n"
        message += "\n".join(f"  - {p}" for p in problems)
        super().__init__(message)


def _type_problem(name: str, value: Any, kind: type) -> str | None:
    """Check value against int or float; float fields also take ints."""
    accepted = (int, float) if kind is float else (kind,)
    if isinstance(value, bool) or not isinstance(value, accepted):
        return f"{name}: expected {kind.__name__}, got {value!r}"
    return None


def _range_problems(name: str, value: Any, kind: type) -> list[str]:
    if not isinstance(value, tuple) or len(value) != 2:
        return [f"{name}: expected [low, high], got {value!r}"]
    for bound in value:
        if _type_problem(name, bound, kind):
            return [f"{name}: expected {kind.__name__} bounds, got {value!r}"]
    low, high = value
    if low > high:
        return [f"{name}: low {low} exceeds high {high}"]
    if low < 0:
        return [f"{name}: negative bound {low}"]
    return []


@dataclass(frozen=True)
class GeneratorConfig:
    """Draw ranges and probabilities for synthetic data generation."""

    # Inventory (integer ranges are inclusive)
    stock_range: tuple[int, int] = (0, 500)
    min_stock_range: tuple[int, int] = (10, 50)
    max_stock_range: tuple[int, int] = (100, 1000)
    unit_cost_range: tuple[float, float] = (10.0, 210.0)
    restock_window_days: int = 30  # last_restocked within this many days
    expiry_probability: float = 0.3  # Share of items carrying an expiry date
    expiry_lookback_days: int = 30  # Expiry dates may lie this far in the past
    expiry_horizon_days: int = 365  # ...and this far in the future

    # Sales
    sales_per_day_range: tuple[int, int] = (10, 50)
    sale_quantity_range: tuple[int, int] = (1, 10)
    max_markup: float = 0.5  # Price = unit_cost * (1 + U[0, max_markup))
    returning_customer_probability: float = 0.7

    # Orders
    order_items_range: tuple[int, int] = (1, 5)
    order_quantity_range: tuple[int, int] = (1, 5)
    order_window_days: int = 30
    delivery_window_days: int = 7  # Estimated delivery within N days of order

    # Alerts
    max_delay_alerts: int = 5

    # Predictions
    predicted_demand_range: tuple[int, int] = (50, 300)  # Units per 30 days
    confidence_range: tuple[float, float] = (0.6, 1.0)

    # Backing collections generated when a derived view gets no input
    default_inventory_count: int = 50
    default_order_count: int = 100
    default_sales_days: int = 30

    # Faker pool entries per pool
    pool_size: int = 500

    def __post_init__(self) -> None:
        problems = self.validate()
        if problems:
            raise ConfigError(problems)

    def validate(self) -> list[str]:
        """
        Return a list of problems; empty when the config is usable.

        Each field must hold the type of its default: ints for counts and
        integer ranges, numbers for float fields and float ranges. Ranges
        are [low, high] pairs with 0 <= low <= high.
        """
        problems: list[str] = []
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(f.default, tuple):
                problems.extend(_range_problems(f.name, value, type(f.default[0])))
                continue

            problem = _type_problem(f.name, value, type(f.default))
            if problem:
                problems.append(problem)
            elif f.name.endswith("_probability"):
                if not 0.0 <= value <= 1.0:
                    problems.append(f"{f.name}: {value} outside [0, 1]")
            elif value < 0:
                problems.append(f"{f.name}: must be non-negative, got {value}")

        # Cross-field rules assume well-typed values
        if problems:
            return problems
        if self.pool_size < 1:
            problems.append("pool_size: must be at least 1")
        if self.order_items_range[0] < 1:
            problems.append("order_items_range: orders need at least one line item")
        return problems

    @classmethod
    def from_dict(cls, overrides: dict[str, Any]) -> "GeneratorConfig":
        """
        Build a config from a dict of overrides.

        Args:
            overrides: Field name -> value. Lists are accepted for ranges.

        Raises:
            ConfigError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigError([f"unknown key: {key}" for key in unknown])

        values = {
            key: tuple(value) if isinstance(value, list) else value
            for key, value in overrides.items()
        }
        return replace(cls(), **values)

    @classmethod
    def from_yaml(cls, path: Path) -> "GeneratorConfig":
        """
        Load overrides from a YAML mapping.

        An empty file yields the default config.

        Raises:
            ConfigError: If the document is not a mapping or has bad values
        """
        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError([f"{path}: expected a mapping, got {type(data).__name__}"])
        return cls.from_dict(data)
