# apps/goals/domain/exceptions.py


class GoalError(Exception):
    """Base class for goal progress failures."""


class GoalNotFound(GoalError, LookupError):
    """Goal missing, owned by someone else, or of a different kind (indistinguishable)."""

    def __init__(self, goal_id=None):
        self.goal_id = goal_id
        super().__init__("Goal not found")


class AlreadyCompletedForPeriod(GoalError):
    """Recurring goal was already completed in the current period."""

    retryable = False

    def __init__(self, goal_id=None, pattern=None):
        self.goal_id = goal_id
        self.pattern = pattern
        super().__init__("Already completed for this period")


class ProgressValidationError(GoalError, ValueError):
    """Malformed progress input (e.g. a non-integer amount)."""
