"""Supabase repository for meal records."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import TypeVar
from uuid import UUID

from supabase import Client, PostgrestAPIError

from daily_diet.domain.errors import StoreError
from daily_diet.domain.meals import MealChanges, MealRecord
from daily_diet.services.meals import MealRepository

_COLUMNS = "id, user_id, name, description, date_time, on_diet, created_at"

T = TypeVar("T")


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meal persistence."""

    client: Client
    table_name: str = "meals"

    def list_meals(self, owner_id: str) -> list[MealRecord]:
        """Return the owner's meals ordered by event time, newest first."""
        response = _run(
            lambda: self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("user_id", owner_id)
            .order("date_time", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def get_meal(self, owner_id: str, meal_id: UUID) -> MealRecord | None:
        """Return a meal matching both id and owner."""
        response = _run(
            lambda: self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("id", str(meal_id))
            .eq("user_id", owner_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def create_meal(self, meal: MealRecord) -> None:
        """Insert a meal row."""
        response = _run(
            lambda: self.client.table(self.table_name)
            .insert(
                {
                    "id": str(meal.id),
                    "user_id": meal.owner_id,
                    "name": meal.name,
                    "description": meal.description,
                    "date_time": meal.occurred_at.isoformat(),
                    "on_diet": meal.on_diet,
                    "created_at": meal.created_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise StoreError("Failed to create meal")

    def update_meal(self, owner_id: str, meal_id: UUID, changes: MealChanges) -> None:
        """Update only the provided columns of an owned meal."""
        payload: dict[str, object] = {}
        if changes.name is not None:
            payload["name"] = changes.name
        if changes.description is not None:
            payload["description"] = changes.description
        if changes.occurred_at is not None:
            payload["date_time"] = changes.occurred_at.isoformat()
        if changes.on_diet is not None:
            payload["on_diet"] = changes.on_diet
        if not payload:
            return
        _run(
            lambda: self.client.table(self.table_name)
            .update(payload)
            .eq("id", str(meal_id))
            .eq("user_id", owner_id)
            .execute()
        )

    def delete_meal(self, owner_id: str, meal_id: UUID) -> None:
        """Delete an owned meal row."""
        _run(
            lambda: self.client.table(self.table_name)
            .delete()
            .eq("id", str(meal_id))
            .eq("user_id", owner_id)
            .execute()
        )


def _run(query: Callable[[], T]) -> T:
    try:
        return query()
    except PostgrestAPIError as exc:
        raise StoreError(f"Supabase query failed: {exc.message}") from exc


def _parse_row(row: dict[str, object]) -> MealRecord:
    description = row.get("description")
    return MealRecord(
        id=UUID(str(row["id"])),
        owner_id=str(row["user_id"]),
        name=str(row.get("name", "")),
        description=str(description) if description is not None else None,
        occurred_at=datetime.fromisoformat(str(row["date_time"])),
        on_diet=bool(row.get("on_diet")),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
