"""Domain models for meal records."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class MealRecord:
    """A meal row owned by a single identity token."""

    id: UUID
    owner_id: str
    name: str
    description: str | None
    occurred_at: datetime
    on_diet: bool
    created_at: datetime


@dataclass(frozen=True)
class MealDraft:
    """Validated input for a new meal."""

    name: str
    occurred_at: datetime
    on_diet: bool
    description: str | None = None


@dataclass(frozen=True)
class MealChanges:
    """Partial update for a meal; ``None`` keeps the stored value."""

    name: str | None = None
    description: str | None = None
    occurred_at: datetime | None = None
    on_diet: bool | None = None

    def is_empty(self) -> bool:
        return (
            self.name is None
            and self.description is None
            and self.occurred_at is None
            and self.on_diet is None
        )
