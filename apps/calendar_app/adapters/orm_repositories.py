# apps/calendar_app/adapters/orm_repositories.py
from apps.goals.ports.repositories import IEventRepository
from apps.calendar_app.models import Event


class DjangoLinkedEventRepository(IEventRepository):
    """Counts the events linked to a goal, regardless of who owns them."""

    def count_by_goal_and_status(self, goal_id: int, status: str) -> int:
        return Event.objects.filter(goal_id=goal_id, status=status).count()
