# apps/goals/application/use_cases.py
from dataclasses import dataclass
from datetime import date
from typing import Optional
from apps.goals.domain.entities import (
    GoalEntity, GoalKind, GoalCategory,
    NumericProgress, RecurringProgress, CalendarProgress,
)
from apps.goals.ports.repositories import IGoalRepository


@dataclass
class CreateGoalInput:
    title: str
    user_id: int
    category: str
    goal_type: str
    description: Optional[str] = None

    # Numeric
    numeric_target: Optional[int] = None
    numeric_unit: Optional[str] = None

    # Recurring
    recurrence_pattern: Optional[str] = None
    recurrence_interval: Optional[int] = None
    recurrence_days: Optional[str] = None

    # Calendar
    target_date: Optional[date] = None
    events_required: Optional[int] = None


class CreateGoalUseCase:
    def __init__(self, repository: IGoalRepository):
        self.repository = repository

    def execute(self, input_dto: CreateGoalInput) -> GoalEntity:
        if not input_dto.title:
            raise ValueError("Goal title cannot be empty")

        try:
            category = GoalCategory.normalize(input_dto.category)
        except ValueError:
            raise ValueError(f"Unknown category: {input_dto.category}") from None

        try:
            kind = GoalKind(input_dto.goal_type)
        except ValueError:
            raise ValueError(f"Unknown goal type: {input_dto.goal_type}") from None

        goal = GoalEntity(
            id=None,
            user_id=input_dto.user_id,
            title=input_dto.title,
            category=category.value,
            progress=self._initial_progress(kind, input_dto),
            description=input_dto.description or None,
        )
        return self.repository.create(goal)

    def _initial_progress(self, kind: GoalKind, dto: CreateGoalInput):
        # Only the chosen kind's fields are kept, the rest stay empty
        if kind == GoalKind.NUMERIC:
            return NumericProgress(
                target_value=dto.numeric_target or 0,
                current_value=0,
                unit=dto.numeric_unit or 'times',
            )
        if kind == GoalKind.RECURRING:
            return RecurringProgress(
                pattern=dto.recurrence_pattern or 'daily',
                interval=dto.recurrence_interval or 1,
                days=dto.recurrence_days or None,
                completion_count=0,
            )
        return CalendarProgress(
            target_date=dto.target_date,
            events_required=dto.events_required or 0,
        )
