# apps/goals/domain/services/__init__.py
from apps.goals.domain.services.progress import GoalProgressEngine, parse_amount
from apps.goals.domain.services.recurrence import can_complete, next_completion_window
from apps.goals.domain.services.goal_service import GoalProgressService

__all__ = [
    'GoalProgressEngine',
    'GoalProgressService',
    'can_complete',
    'next_completion_window',
    'parse_amount',
]
