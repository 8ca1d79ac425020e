"""Meal registry scoped to the caller's identity."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID, uuid4

from daily_diet.domain.errors import MealNotFoundError, MealValidationError
from daily_diet.domain.meals import MealChanges, MealDraft, MealRecord

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meal records."""

    def list_meals(self, owner_id: str) -> list[MealRecord]:
        """Return the owner's meals, most recent ``occurred_at`` first."""

    def get_meal(self, owner_id: str, meal_id: UUID) -> MealRecord | None:
        """Return a meal when it exists and belongs to the owner."""

    def create_meal(self, meal: MealRecord) -> None:
        """Persist a new meal row."""

    def update_meal(self, owner_id: str, meal_id: UUID, changes: MealChanges) -> None:
        """Replace the provided fields of an owned meal."""

    def delete_meal(self, owner_id: str, meal_id: UUID) -> None:
        """Remove an owned meal."""


def parse_meal_id(raw: str) -> UUID:
    """Parse a meal identifier, rejecting anything that is not a UUID."""
    try:
        return UUID(raw)
    except (TypeError, ValueError) as exc:
        raise MealValidationError(f"Invalid meal id: {raw!r}") from exc


def normalize_occurred_at(value: datetime) -> datetime:
    """Return the event time in UTC; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    try:
        return value.astimezone(UTC)
    except OverflowError as exc:
        raise MealValidationError("Invalid dateTime") from exc


@dataclass
class MealService:
    """Application service for creating, reading and changing meals."""

    repository: MealRepository

    def list_meals(self, owner_id: str) -> list[MealRecord]:
        """Return all meals of the owner, newest event first."""
        return self.repository.list_meals(owner_id)

    def get_meal(self, owner_id: str, meal_id: str) -> MealRecord | None:
        """Return the owner's meal or ``None`` when it is missing or foreign."""
        return self.repository.get_meal(owner_id, parse_meal_id(meal_id))

    def create_meal(self, owner_id: str, draft: MealDraft) -> MealRecord:
        """Persist a new meal for the owner."""
        if not draft.name.strip():
            raise MealValidationError("Meal name must not be empty")
        meal = MealRecord(
            id=uuid4(),
            owner_id=owner_id,
            name=draft.name,
            description=draft.description,
            occurred_at=normalize_occurred_at(draft.occurred_at),
            on_diet=draft.on_diet,
            created_at=datetime.now(tz=UTC),
        )
        self.repository.create_meal(meal)
        _logger.info("Meal created: meal_id=%s", meal.id)
        return meal

    def update_meal(self, owner_id: str, meal_id: str, changes: MealChanges) -> None:
        """Apply a partial update to an owned meal."""
        parsed_id = self.require_owned_meal(owner_id, meal_id)
        self.update_owned_meal(owner_id, parsed_id, changes)

    def update_owned_meal(
        self, owner_id: str, meal_id: UUID, changes: MealChanges
    ) -> None:
        """Apply a partial update to a meal whose ownership was already checked."""
        if changes.name is not None and not changes.name.strip():
            raise MealValidationError("Meal name must not be empty")
        if changes.is_empty():
            return
        if changes.occurred_at is not None:
            changes = MealChanges(
                name=changes.name,
                description=changes.description,
                occurred_at=normalize_occurred_at(changes.occurred_at),
                on_diet=changes.on_diet,
            )
        self.repository.update_meal(owner_id, meal_id, changes)
        _logger.info("Meal updated: meal_id=%s", meal_id)

    def delete_meal(self, owner_id: str, meal_id: str) -> None:
        """Physically delete an owned meal."""
        parsed_id = self.require_owned_meal(owner_id, meal_id)
        self.repository.delete_meal(owner_id, parsed_id)
        _logger.info("Meal deleted: meal_id=%s", parsed_id)

    def require_owned_meal(self, owner_id: str, meal_id: str) -> UUID:
        """Parse the id and fail unless the meal exists and belongs to the owner."""
        parsed_id = parse_meal_id(meal_id)
        if self.repository.get_meal(owner_id, parsed_id) is None:
            raise MealNotFoundError(parsed_id)
        return parsed_id
