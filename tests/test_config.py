"""
Tests for GeneratorConfig and GeneratorContext construction.
"""

from datetime import datetime

import pytest

from warehouse_data import ConfigError, GeneratorConfig, GeneratorContext


class TestGeneratorConfig:
    """Tests for GeneratorConfig."""

    def test_default_config(self):
        """Defaults reproduce the dashboard demo ranges."""
        config = GeneratorConfig()
        assert config.stock_range == (0, 500)
        assert config.sales_per_day_range == (10, 50)
        assert config.max_delay_alerts == 5
        assert config.validate() == []

    def test_from_dict_converts_lists(self):
        config = GeneratorConfig.from_dict({"stock_range": [5, 50], "max_delay_alerts": 2})
        assert config.stock_range == (5, 50)
        assert config.max_delay_alerts == 2
        assert config.min_stock_range == (10, 50)

    def test_unknown_key_rejected(self):
        with pytest.raises(ConfigError, match="unknown key: stock_rnage"):
            GeneratorConfig.from_dict({"stock_rnage": [0, 1]})

    def test_inverted_range_rejected(self):
        with pytest.raises(ConfigError) as exc_info:
            GeneratorConfig(stock_range=(10, 5))
        assert "stock_range" in exc_info.value.problems[0]

    def test_probability_bounds(self):
        with pytest.raises(ConfigError):
            GeneratorConfig(expiry_probability=1.5)

    def test_negative_scalar_rejected(self):
        with pytest.raises(ConfigError):
            GeneratorConfig(max_delay_alerts=-1)

    def test_orders_need_a_line_item(self):
        with pytest.raises(ConfigError):
            GeneratorConfig(order_items_range=(0, 3))

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            GeneratorConfig(pool_size=0)

    def test_empty_range_rejected(self):
        with pytest.raises(ConfigError) as exc_info:
            GeneratorConfig.from_dict({"order_items_range": []})
        assert exc_info.value.problems == ["order_items_range: expected [low, high], got ()"]

    def test_non_numeric_range_bound_rejected(self):
        with pytest.raises(ConfigError, match="stock_range: expected int bounds"):
            GeneratorConfig.from_dict({"stock_range": [0, "lots"]})

    def test_float_bound_in_integer_range_rejected(self):
        with pytest.raises(ConfigError, match="sales_per_day_range"):
            GeneratorConfig.from_dict({"sales_per_day_range": [10, 20.5]})

    def test_integer_bounds_accepted_for_float_range(self):
        config = GeneratorConfig.from_dict({"unit_cost_range": [5, 50]})
        assert config.unit_cost_range == (5, 50)

    def test_string_scalar_rejected(self):
        with pytest.raises(ConfigError, match="max_delay_alerts: expected int"):
            GeneratorConfig.from_dict({"max_delay_alerts": "five"})

    def test_string_probability_rejected(self):
        with pytest.raises(ConfigError, match="expiry_probability: expected float"):
            GeneratorConfig.from_dict({"expiry_probability": "high"})

    def test_float_count_rejected(self):
        with pytest.raises(ConfigError, match="max_delay_alerts: expected int"):
            GeneratorConfig.from_dict({"max_delay_alerts": 2.5})

    def test_bool_count_rejected(self):
        with pytest.raises(ConfigError, match="pool_size: expected int"):
            GeneratorConfig(pool_size=True)

    def test_all_problems_reported(self):
        with pytest.raises(ConfigError) as exc_info:
            GeneratorConfig.from_dict({"order_items_range": [], "max_markup": "big"})
        assert len(exc_info.value.problems) == 2

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "warehouse.yaml"
        path.write_text("expiry_lookback_days: 0\nsales_per_day_range: [20, 40]\n")
        config = GeneratorConfig.from_yaml(path)
        assert config.expiry_lookback_days == 0
        assert config.sales_per_day_range == (20, 40)

    def test_from_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert GeneratorConfig.from_yaml(path) == GeneratorConfig()

    def test_yaml_must_be_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError):
            GeneratorConfig.from_yaml(path)


class TestGeneratorContext:
    """Tests for GeneratorContext.create()."""

    def test_seeded_context(self):
        now = datetime(2024, 1, 1)
        ctx = GeneratorContext.create(seed=5, now=now)
        assert ctx.seed == 5
        assert ctx.pool_seed == 5
        assert ctx.now == now
        assert ctx.config == GeneratorConfig()

    def test_default_clock(self):
        before = datetime.now()
        ctx = GeneratorContext.create()
        assert before <= ctx.now <= datetime.now()

    def test_pool_built_lazily_from_config(self):
        ctx = GeneratorContext.create(seed=1, config=GeneratorConfig(pool_size=7))
        assert ctx._pool is None
        assert len(ctx.pool.names) == 7
        assert ctx.pool is ctx.pool
