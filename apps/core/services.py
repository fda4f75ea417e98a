# apps/core/services.py
from decimal import Decimal, ROUND_HALF_UP
from django.db.models import Count, Q
from apps.calendar_app.models import Event
from apps.goals.domain.entities import EventStatus, GoalCategory, GoalKind
from apps.goals.models import Goal


def completion_percentage(completed: int, total: int) -> int:
    """Share of completed goals, 0-100, halves rounded up (2/3 -> 67, 1/8 -> 13)."""
    if total <= 0:
        return 0
    ratio = Decimal(completed * 100) / Decimal(total)
    return int(ratio.quantize(Decimal('1'), rounding=ROUND_HALF_UP))


class DashboardService:
    """Everything the goals dashboard shows for one user and one day."""

    def __init__(self, user):
        self.user = user

    def goals(self):
        goals = list(Goal.objects.filter(user=self.user).order_by('category', '-created_at'))

        # Calendar goals: completed / total linked events, one query for all of them
        calendar_ids = [g.id for g in goals if g.goal_type == GoalKind.CALENDAR.value]
        counts = {}
        if calendar_ids:
            rows = Event.objects.filter(goal_id__in=calendar_ids).values('goal_id').annotate(
                total=Count('id'),
                completed=Count('id', filter=Q(status=EventStatus.COMPLETED.value)),
            )
            counts = {row['goal_id']: row for row in rows}

        for goal in goals:
            if goal.goal_type == GoalKind.CALENDAR.value:
                row = counts.get(goal.id, {})
                goal.completed_events = row.get('completed', 0)
                goal.total_events = row.get('total', 0)
        return goals

    def todays_events(self, today):
        return Event.objects.filter(user=self.user, event_date=today).order_by('start_time')

    def stats(self, goals, todays_events):
        completed = sum(1 for g in goals if g.is_completed)
        return {
            'total': len(goals),
            'completed': completed,
            'active': len(goals) - completed,
            'eventstoday': len(todays_events),
        }

    def group_by_category(self, goals):
        grouped = {category.value: [] for category in GoalCategory}
        for goal in goals:
            try:
                key = GoalCategory.normalize(goal.category).value
            except ValueError:
                continue
            grouped[key].append(goal)
        return grouped

    def progress(self, grouped):
        return {
            category.lower(): completion_percentage(sum(1 for g in items if g.is_completed), len(items))
            for category, items in grouped.items()
        }

    def build(self, today):
        goals = self.goals()
        events = list(self.todays_events(today))
        grouped = self.group_by_category(goals)

        return {
            'goals': goals,
            'goals_by_category': grouped,
            'events': events,
            'stats': self.stats(goals, events),
            'progress': self.progress(grouped),
        }
