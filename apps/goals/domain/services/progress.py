# apps/goals/domain/services/progress.py
from datetime import datetime
from apps.goals.domain.entities import (
    NumericProgress, RecurringProgress,
    NumericProgressResult, RecurringCompletionResult,
)
from apps.goals.domain.exceptions import AlreadyCompletedForPeriod, ProgressValidationError
from apps.goals.domain.services.recurrence import can_complete

# Range of the integer columns progress is stored in
MIN_VALUE = -2147483648
MAX_VALUE = 2147483647


def _in_range(value: int) -> bool:
    return MIN_VALUE <= value <= MAX_VALUE


def parse_amount(raw, default: int = 1) -> int:
    """Progress increment from form/JSON input. Empty -> default, negatives allowed."""
    if raw is None:
        return default
    if isinstance(raw, bool):
        raise ProgressValidationError("Invalid amount")
    if isinstance(raw, int):
        amount = raw
    else:
        text = str(raw).strip()
        if not text:
            return default
        try:
            amount = int(text)
        except ValueError:
            raise ProgressValidationError("Invalid amount") from None

    if not _in_range(amount):
        raise ProgressValidationError("Amount out of range")
    return amount


class GoalProgressEngine:
    """Pure decision logic for the three goal kinds. No I/O."""

    def apply_numeric(self, progress: NumericProgress, amount: int) -> NumericProgressResult:
        current = (progress.current_value or 0) + amount
        if not _in_range(current):
            raise ProgressValidationError("Progress value out of range")

        target = progress.target_value or 0
        # Recomputed on every log, so a negative amount can undo completion
        return NumericProgressResult(current=current, target=target, completed=current >= target)

    def apply_recurring(self, progress: RecurringProgress, now: datetime, goal_id=None) -> RecurringCompletionResult:
        if not can_complete(progress, now):
            raise AlreadyCompletedForPeriod(goal_id=goal_id, pattern=progress.pattern)

        return RecurringCompletionResult(
            completion_count=(progress.completion_count or 0) + 1,
            last_completed_at=now,
        )

    def calendar_completed(self, required: int, completed_events: int) -> bool:
        # A goal without a requirement is never completed automatically
        return required > 0 and completed_events >= required
