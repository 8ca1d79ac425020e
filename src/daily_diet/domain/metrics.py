"""Domain models for diet metrics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MealMetrics:
    """Aggregate counts over a user's meals."""

    recorded_meals: int
    on_diet_meals: int
    off_diet_meals: int
    best_sequence: int
