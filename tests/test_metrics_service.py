"""Tests for diet metrics."""

from datetime import UTC, datetime, timedelta
from itertools import product

import pytest

from daily_diet.services.metrics import MetricsService, compute_meal_metrics
from tests.conftest import InMemoryMealRepository, make_meal

BASE_TIME = datetime(2026, 1, 10, 12, 0, tzinfo=UTC)


def _meals(flags: list[bool]) -> list:
    return [
        make_meal("owner", BASE_TIME - timedelta(hours=index), on_diet=flag)
        for index, flag in enumerate(flags)
    ]


def test_metrics_for_mixed_sequence() -> None:
    metrics = compute_meal_metrics(_meals([True, True, False, True]))

    assert metrics.recorded_meals == 4
    assert metrics.on_diet_meals == 3
    assert metrics.off_diet_meals == 1
    assert metrics.best_sequence == 2


def test_metrics_empty_history_is_all_zero() -> None:
    metrics = compute_meal_metrics([])

    assert (
        metrics.recorded_meals,
        metrics.on_diet_meals,
        metrics.off_diet_meals,
        metrics.best_sequence,
    ) == (0, 0, 0, 0)


def test_metrics_all_off_diet_has_no_sequence() -> None:
    metrics = compute_meal_metrics(_meals([False, False]))

    assert metrics.best_sequence == 0
    assert metrics.off_diet_meals == 2


def test_metrics_all_on_diet_sequence_covers_everything() -> None:
    metrics = compute_meal_metrics(_meals([True] * 5))

    assert metrics.best_sequence == metrics.recorded_meals == 5


@pytest.mark.parametrize("length", range(7))
def test_metrics_invariants_hold_for_every_sequence(length: int) -> None:
    for flags in product([True, False], repeat=length):
        metrics = compute_meal_metrics(_meals(list(flags)))

        assert metrics.on_diet_meals + metrics.off_diet_meals == metrics.recorded_meals
        assert metrics.best_sequence <= metrics.recorded_meals
        assert (metrics.best_sequence == metrics.recorded_meals) == all(flags)


def test_metrics_service_scans_newest_first() -> None:
    repository = InMemoryMealRepository()
    # Stored out of order; newest-first order is off, on, on, off, on.
    for hours_ago, on_diet in [(3, False), (0, False), (4, True), (1, True), (2, True)]:
        meal = make_meal("owner", BASE_TIME - timedelta(hours=hours_ago), on_diet)
        repository.create_meal(meal)
    repository.create_meal(make_meal("someone-else", BASE_TIME, on_diet=True))

    metrics = MetricsService(repository).get_metrics("owner")

    assert metrics.recorded_meals == 5
    assert metrics.on_diet_meals == 3
    assert metrics.best_sequence == 2
