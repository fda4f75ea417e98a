# apps/goals/domain/services/goal_service.py
from datetime import datetime
from typing import Iterable, List, Optional
from apps.goals.domain.entities import (
    GoalKind, EventStatus,
    NumericProgressResult, RecurringCompletionResult, CalendarProgressResult,
)
from apps.goals.domain.exceptions import GoalNotFound
from apps.goals.domain.services.progress import GoalProgressEngine, parse_amount
from apps.goals.ports.repositories import IGoalRepository, IEventRepository


class GoalProgressService:
    """
    Entry point for every goal progress mutation.

    Each call loads the owner's goal through the repository, lets the engine
    decide the next state and writes back only the changed fields. There is
    no locking: two concurrent numeric logs read the same value and the last
    write wins.
    """

    def __init__(self, goal_repository: IGoalRepository, event_repository: IEventRepository,
                 engine: Optional[GoalProgressEngine] = None):
        self.goals = goal_repository
        self.events = event_repository
        self.engine = engine or GoalProgressEngine()

    def log_numeric_progress(self, goal_id: int, owner_id: int, amount=None) -> NumericProgressResult:
        goal = self.goals.get_by_id(goal_id, owner_id, kind=GoalKind.NUMERIC)
        if goal is None:
            raise GoalNotFound(goal_id)

        increment = parse_amount(amount)
        result = self.engine.apply_numeric(goal.progress, increment)

        self.goals.update(goal_id, owner_id, {
            'current_value': result.current,
            'is_completed': result.completed,
        })
        return result

    def complete_recurring_instance(self, goal_id: int, owner_id: int, now: datetime) -> RecurringCompletionResult:
        goal = self.goals.get_by_id(goal_id, owner_id, kind=GoalKind.RECURRING)
        if goal is None:
            raise GoalNotFound(goal_id)

        # Raises AlreadyCompletedForPeriod; the completion flag itself is never touched here
        result = self.engine.apply_recurring(goal.progress, now, goal_id=goal_id)

        self.goals.update(goal_id, owner_id, {
            'completion_count': result.completion_count,
            'last_completed_at': result.last_completed_at,
        })
        return result

    def recompute_calendar_goal_progress(self, goal_id: Optional[int], owner_id: int) -> Optional[CalendarProgressResult]:
        """Re-derives a calendar goal's completion from its completed events.

        Missing goals and goals of another kind are skipped silently.
        """
        if goal_id is None:
            return None

        goal = self.goals.get_by_id(goal_id, owner_id, kind=GoalKind.CALENDAR)
        if goal is None:
            return None

        completed_events = self.events.count_by_goal_and_status(goal_id, EventStatus.COMPLETED.value)
        required = goal.progress.events_required or 0
        completed = self.engine.calendar_completed(required, completed_events)

        self.goals.update(goal_id, owner_id, {'is_completed': completed})
        return CalendarProgressResult(completed_events=completed_events, required=required, completed=completed)

    def recompute_calendar_goals(self, goal_ids: Iterable[Optional[int]], owner_id: int) -> List[CalendarProgressResult]:
        # Each goal is written separately, no cross-goal transaction
        results = []
        for goal_id in sorted({g for g in goal_ids if g is not None}):
            result = self.recompute_calendar_goal_progress(goal_id, owner_id)
            if result is not None:
                results.append(result)
        return results

    def set_goal_completion(self, goal_id: int, owner_id: int, completed: bool) -> None:
        """Manual override, valid for every kind and never checked against computed state."""
        if not self.goals.update(goal_id, owner_id, {'is_completed': bool(completed)}):
            raise GoalNotFound(goal_id)
