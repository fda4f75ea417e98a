# apps/goals/adapters/orm_repositories.py
from typing import Any, Dict, Optional
from django.utils import timezone
from apps.goals.domain.entities import (
    GoalEntity, GoalKind, NumericProgress, RecurringProgress, CalendarProgress,
)
from apps.goals.ports.repositories import IGoalRepository
from apps.goals.models import Goal as GoalModel


class DjangoGoalRepository(IGoalRepository):
    # Domain field -> column on the flat goals table
    COLUMNS = {
        'is_completed': 'is_completed',
        'current_value': 'numeric_current_value',
        'completion_count': 'completion_count',
        'last_completed_at': 'last_completed_at',
    }

    def to_entity(self, model: GoalModel) -> GoalEntity:
        """Django model -> domain entity, keeping only the active kind's fields."""
        kind = GoalKind(model.goal_type)

        if kind == GoalKind.NUMERIC:
            progress = NumericProgress(
                target_value=model.numeric_target_value or 0,
                current_value=model.numeric_current_value or 0,
                unit=model.numeric_unit or 'times',
            )
        elif kind == GoalKind.RECURRING:
            progress = RecurringProgress(
                pattern=model.recurrence_pattern,
                interval=model.recurrence_interval or 1,
                days=model.recurrence_days,
                completion_count=model.completion_count or 0,
                last_completed_at=model.last_completed_at,
            )
        else:
            progress = CalendarProgress(
                target_date=model.target_date,
                events_required=model.linked_events_required or 0,
            )

        return GoalEntity(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            category=model.category,
            progress=progress,
            description=model.description,
            is_completed=model.is_completed,
        )

    def to_columns(self, goal: GoalEntity) -> Dict[str, Any]:
        data = {
            'title': goal.title,
            'category': goal.category,
            'goal_type': goal.kind.value,
            'description': goal.description,
            'is_completed': goal.is_completed,
        }

        progress = goal.progress
        if isinstance(progress, NumericProgress):
            data.update(
                numeric_target_value=progress.target_value,
                numeric_current_value=progress.current_value,
                numeric_unit=progress.unit,
            )
        elif isinstance(progress, RecurringProgress):
            data.update(
                recurrence_pattern=progress.pattern,
                recurrence_interval=progress.interval,
                recurrence_days=progress.days,
                completion_count=progress.completion_count,
                last_completed_at=progress.last_completed_at,
            )
        else:
            data.update(
                target_date=progress.target_date,
                linked_events_required=progress.events_required,
            )
        return data

    def get_by_id(self, goal_id: int, owner_id: int, kind: Optional[GoalKind] = None) -> Optional[GoalEntity]:
        qs = GoalModel.objects.filter(id=goal_id, user_id=owner_id)
        if kind is not None:
            qs = qs.filter(goal_type=kind.value)

        goal = qs.first()
        return self.to_entity(goal) if goal else None

    def create(self, goal: GoalEntity) -> GoalEntity:
        obj = GoalModel.objects.create(user_id=goal.user_id, **self.to_columns(goal))
        return self.to_entity(obj)

    def update(self, goal_id: int, owner_id: int, fields: Dict[str, Any]) -> bool:
        data = {self.COLUMNS[name]: value for name, value in fields.items()}
        # queryset.update() skips auto_now
        data['updated_at'] = timezone.now()
        return GoalModel.objects.filter(id=goal_id, user_id=owner_id).update(**data) > 0
