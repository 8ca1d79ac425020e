"""Diet metrics over a user's meal history."""

from collections.abc import Iterable
from dataclasses import dataclass

from daily_diet.domain.meals import MealRecord
from daily_diet.domain.metrics import MealMetrics
from daily_diet.services.meals import MealRepository


@dataclass
class MetricsService:
    """Service for computing diet metrics for an owner."""

    repository: MealRepository

    def get_metrics(self, owner_id: str) -> MealMetrics:
        """Return metrics over the owner's meals in list order."""
        # The streak runs over the listing order (newest first).
        return compute_meal_metrics(self.repository.list_meals(owner_id))


def compute_meal_metrics(meals: Iterable[MealRecord]) -> MealMetrics:
    """Count meals and find the longest run of consecutive on-diet meals."""
    recorded = 0
    on_diet = 0
    current_sequence = 0
    best_sequence = 0
    for meal in meals:
        recorded += 1
        if meal.on_diet:
            on_diet += 1
            current_sequence += 1
            best_sequence = max(best_sequence, current_sequence)
        else:
            current_sequence = 0
    return MealMetrics(
        recorded_meals=recorded,
        on_diet_meals=on_diet,
        off_diet_meals=recorded - on_diet,
        best_sequence=best_sequence,
    )
