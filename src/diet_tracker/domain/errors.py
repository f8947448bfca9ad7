"""Domain errors raised by the nutrition engine."""


class DietTrackerError(Exception):
    """Base class for engine errors."""

    code = "DIET_TRACKER_ERROR"


class ReferenceNotFound(DietTrackerError):
    """A referenced food, recipe, meal or goal does not exist."""

    def __init__(self, entity: str, entity_id: object) -> None:
        super().__init__(f"{entity.capitalize()} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id
        self.code = f"{entity.upper().replace(' ', '_')}_NOT_FOUND"


class ParentNotFound(ReferenceNotFound):
    """The meal a meal item belongs to does not exist."""

    def __init__(self, meal_id: object) -> None:
        super().__init__("meal", meal_id)


class InvalidReference(DietTrackerError):
    """A meal item points at neither or both of a food and a recipe."""

    code = "INVALID_REFERENCE"


class InvalidQuantity(DietTrackerError, ValueError):
    """A quantity, unit or serving count cannot be scaled."""

    code = "INVALID_QUANTITY"


class InvalidGoal(DietTrackerError, ValueError):
    """A goal update leaves the goal in an invalid state."""

    code = "INVALID_GOAL"


class InvariantViolation(DietTrackerError):
    """Single-active-goal enforcement could not complete."""

    code = "INVARIANT_VIOLATION"
