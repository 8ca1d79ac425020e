"""Error types raised by meal services and adapters."""


class MealValidationError(ValueError):
    """Raised when meal input is malformed."""

    def __init__(self, message: str = "Invalid input") -> None:
        super().__init__(message)
        self.message = message


class MealNotFoundError(LookupError):
    """Raised when a meal does not exist or belongs to another identity."""

    def __init__(self, meal_id: object) -> None:
        super().__init__(f"Meal not found: {meal_id}")
        self.meal_id = meal_id


class StoreError(RuntimeError):
    """Raised when the record store fails."""
