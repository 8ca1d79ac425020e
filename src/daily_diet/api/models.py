"""Pydantic models for the meals HTTP API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from daily_diet.domain.meals import MealChanges, MealDraft, MealRecord
from daily_diet.domain.metrics import MealMetrics


def _not_null(value: object) -> object:
    # Optional fields may be omitted but never sent as null.
    if value is None:
        raise ValueError("must not be null")
    return value


class CreateMealBody(BaseModel):
    """Body of a create-meal request."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    description: str | None = None
    date_time: datetime = Field(alias="dateTime")
    on_diet: bool = Field(alias="onDiet", strict=True)

    @field_validator("description", mode="before")
    @classmethod
    def reject_null(cls, value: object) -> object:
        return _not_null(value)

    def to_draft(self) -> MealDraft:
        return MealDraft(
            name=self.name,
            description=self.description,
            occurred_at=self.date_time,
            on_diet=self.on_diet,
        )


class UpdateMealBody(BaseModel):
    """Body of an update-meal request; every field is optional."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    date_time: datetime | None = Field(default=None, alias="dateTime")
    on_diet: bool | None = Field(default=None, alias="onDiet", strict=True)

    @field_validator("name", "description", "date_time", "on_diet", mode="before")
    @classmethod
    def reject_null(cls, value: object) -> object:
        return _not_null(value)

    def to_changes(self) -> MealChanges:
        return MealChanges(
            name=self.name,
            description=self.description,
            occurred_at=self.date_time,
            on_diet=self.on_diet,
        )


class MealPayload(BaseModel):
    """Meal as returned to clients, keyed by table column names."""

    id: UUID
    user_id: str
    name: str
    description: str | None
    date_time: str
    on_diet: bool
    created_at: str

    @classmethod
    def from_record(cls, meal: MealRecord) -> "MealPayload":
        return cls(
            id=meal.id,
            user_id=meal.owner_id,
            name=meal.name,
            description=meal.description,
            date_time=meal.occurred_at.isoformat(),
            on_diet=meal.on_diet,
            created_at=meal.created_at.isoformat(),
        )


class MealListResponse(BaseModel):
    meals: list[MealPayload]


class MealResponse(BaseModel):
    meal: MealPayload | None


class MetricsPayload(BaseModel):
    """Diet metrics payload."""

    recorded_meals: int
    on_diet_meals: int
    off_diet_meals: int
    best_sequence: int

    @classmethod
    def from_metrics(cls, metrics: MealMetrics) -> "MetricsPayload":
        return cls(
            recorded_meals=metrics.recorded_meals,
            on_diet_meals=metrics.on_diet_meals,
            off_diet_meals=metrics.off_diet_meals,
            best_sequence=metrics.best_sequence,
        )


class MetricsResponse(BaseModel):
    metrics: MetricsPayload
