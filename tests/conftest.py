"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from daily_diet.config import Settings
from daily_diet.containers import AppContainer
from daily_diet.domain.meals import MealChanges, MealRecord
from daily_diet.services.meals import MealRepository, MealService
from daily_diet.services.metrics import MetricsService


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: dict[UUID, MealRecord] = field(default_factory=dict)
    lookups: list[UUID] = field(default_factory=list)
    updates: list[tuple[UUID, MealChanges]] = field(default_factory=list)

    def list_meals(self, owner_id: str) -> list[MealRecord]:
        owned = [meal for meal in self.meals.values() if meal.owner_id == owner_id]
        return sorted(owned, key=lambda meal: meal.occurred_at, reverse=True)

    def get_meal(self, owner_id: str, meal_id: UUID) -> MealRecord | None:
        self.lookups.append(meal_id)
        meal = self.meals.get(meal_id)
        if meal is None or meal.owner_id != owner_id:
            return None
        return meal

    def create_meal(self, meal: MealRecord) -> None:
        self.meals[meal.id] = meal

    def update_meal(self, owner_id: str, meal_id: UUID, changes: MealChanges) -> None:
        self.updates.append((meal_id, changes))
        meal = self.meals[meal_id]
        self.meals[meal_id] = replace(
            meal,
            name=changes.name if changes.name is not None else meal.name,
            description=(
                changes.description
                if changes.description is not None
                else meal.description
            ),
            occurred_at=(
                changes.occurred_at
                if changes.occurred_at is not None
                else meal.occurred_at
            ),
            on_diet=changes.on_diet if changes.on_diet is not None else meal.on_diet,
        )

    def delete_meal(self, owner_id: str, meal_id: UUID) -> None:
        self.meals.pop(meal_id, None)


def make_meal(
    owner_id: str,
    occurred_at: datetime,
    on_diet: bool = True,
    name: str = "Oatmeal",
) -> MealRecord:
    return MealRecord(
        id=uuid4(),
        owner_id=owner_id,
        name=name,
        description=None,
        occurred_at=occurred_at,
        on_diet=on_diet,
        created_at=datetime.now(tz=UTC),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def container(
    settings: Settings, meal_repository: InMemoryMealRepository
) -> AppContainer:
    return AppContainer(
        settings=settings,
        meal_service=MealService(meal_repository),
        metrics_service=MetricsService(meal_repository),
    )
