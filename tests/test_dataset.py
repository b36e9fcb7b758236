"""
Tests for the shared dataset and its validation.
"""

from dataclasses import replace

import pytest

from warehouse_data import (
    DatasetValidationError,
    DatasetValidator,
    InvalidCountError,
    generate_dataset,
    validate_dataset,
)
from warehouse_data.models import StockStatus


@pytest.fixture
def dataset(ctx):
    return generate_dataset(ctx)


class TestGenerateDataset:
    """Tests for generate_dataset()."""

    def test_sizes(self, dataset):
        assert len(dataset.inventory) == 50
        assert len(dataset.orders) == 100
        assert len({s.date.date() for s in dataset.sales}) == 30
        assert len(dataset.predictions) == 50
        assert len(dataset.bottlenecks) == 4

    def test_views_share_inventory(self, dataset):
        by_id = dataset.inventory_by_id()
        assert all(s.product_id in by_id for s in dataset.sales)
        assert all(
            item.product_id in by_id for order in dataset.orders for item in order.items
        )
        assert {p.product_id for p in dataset.predictions} == set(by_id)
        for alert in dataset.alerts:
            if alert.product_id is not None:
                assert alert.product_id in by_id
            if alert.order_id is not None:
                assert alert.order_id in dataset.orders_by_id()

    def test_metrics_reduce_dataset(self, dataset):
        m = dataset.metrics
        assert m.total_value == sum(i.current_stock * i.unit_cost for i in dataset.inventory)
        assert m.active_alerts == len(dataset.alerts)

    def test_custom_sizes(self, ctx):
        ds = generate_dataset(ctx, inventory_count=5, sales_days=2, order_count=3)
        assert len(ds.inventory) == 5
        assert len(ds.orders) == 3

    def test_negative_size_rejected(self, ctx):
        with pytest.raises(InvalidCountError):
            generate_dataset(ctx, order_count=-1)

    def test_reproducible(self, make_ctx):
        assert generate_dataset(make_ctx(21)) == generate_dataset(make_ctx(21))


class TestDatasetValidator:
    """Tests for DatasetValidator."""

    def test_generated_dataset_passes(self, ctx, dataset):
        results = DatasetValidator(ctx.now).run_checks(dataset)
        assert all(passed for passed, _ in results.values()), results
        validate_dataset(dataset, ctx.now)

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_many_seeds_pass(self, make_ctx, seed):
        ctx = make_ctx(seed)
        validate_dataset(generate_dataset(ctx), ctx.now)

    def test_wrong_status_detected(self, ctx, dataset):
        item = dataset.inventory[0]
        wrong = StockStatus.EXPIRED if item.status != StockStatus.EXPIRED else StockStatus.IN_STOCK
        tampered = replace(
            dataset, inventory=[replace(item, status=wrong)] + dataset.inventory[1:]
        )

        passed, message = DatasetValidator(ctx.now).check_inventory(tampered.inventory)
        assert not passed
        assert item.id in message

    def test_unsorted_alerts_detected(self, ctx, make_alert):
        alerts = [make_alert(3), make_alert(1)]  # oldest first
        passed, _ = DatasetValidator(ctx.now).check_alerts(alerts)
        assert not passed

    def test_bad_recommendation_detected(self, ctx, make_prediction):
        preds = [make_prediction(1, current_stock=100, predicted_demand=50, recommended_order=10)]
        passed, message = DatasetValidator(ctx.now).check_predictions(preds)
        assert not passed
        assert "INV-0001" in message

    def test_validate_raises_with_all_violations(self, ctx, dataset):
        tampered = replace(
            dataset,
            alerts=list(reversed(dataset.alerts)),
            metrics=replace(dataset.metrics, total_value=-1.0),
        )
        if len(dataset.alerts) < 2 or dataset.alerts[0].timestamp == dataset.alerts[-1].timestamp:
            pytest.skip("Need at least two distinct alert timestamps")

        with pytest.raises(DatasetValidationError) as exc_info:
            validate_dataset(tampered, ctx.now)

        violations = exc_info.value.violations
        assert any(v.startswith("alerts:") for v in violations)
        assert any(v.startswith("metrics:") for v in violations)
