"""
Shared fixtures.

- In-memory implementations of the goal/event repository ports, so the
  progress service can be tested without a database.
- Users and logged-in Django test clients for the view tests.
"""
import copy
from datetime import datetime
import pytest
import pytz
from django.contrib.auth import get_user_model
from apps.goals.domain.entities import (
    GoalEntity, NumericProgress, RecurringProgress, CalendarProgress,
)
from apps.goals.domain.services import GoalProgressService
from apps.goals.ports.repositories import IGoalRepository, IEventRepository


# =============================================================================
# In-memory ports
# =============================================================================

class InMemoryGoalRepository(IGoalRepository):
    """Stores entities by id; reads hand out copies like a real DB would."""

    FIELDS = {
        'current_value': ('progress', 'current_value'),
        'completion_count': ('progress', 'completion_count'),
        'last_completed_at': ('progress', 'last_completed_at'),
        'is_completed': (None, 'is_completed'),
    }

    def __init__(self):
        self.goals = {}
        self.updates = []
        self._next_id = 1

    def create(self, goal):
        goal = copy.deepcopy(goal)
        goal.id = self._next_id
        self._next_id += 1
        self.goals[goal.id] = goal
        return copy.deepcopy(goal)

    def get_by_id(self, goal_id, owner_id, kind=None):
        goal = self.goals.get(goal_id)
        if goal is None or goal.user_id != owner_id:
            return None
        if kind is not None and goal.kind != kind:
            return None
        return copy.deepcopy(goal)

    def update(self, goal_id, owner_id, fields):
        goal = self.goals.get(goal_id)
        if goal is None or goal.user_id != owner_id:
            return False
        self.updates.append((goal_id, dict(fields)))
        for name, value in fields.items():
            target, attr = self.FIELDS[name]
            setattr(goal.progress if target else goal, attr, value)
        return True


class InMemoryEventRepository(IEventRepository):
    def __init__(self):
        self.events = []  # (goal_id, status)

    def add(self, goal_id, status):
        self.events.append((goal_id, status))

    def count_by_goal_and_status(self, goal_id, status):
        return sum(1 for g, s in self.events if g == goal_id and s == status)


@pytest.fixture()
def goal_repo():
    return InMemoryGoalRepository()


@pytest.fixture()
def event_repo():
    return InMemoryEventRepository()


@pytest.fixture()
def service(goal_repo, event_repo):
    return GoalProgressService(goal_repo, event_repo)


def make_numeric(repo, user_id=1, target=10, current=0):
    return repo.create(GoalEntity(
        id=None, user_id=user_id, title='Read scriptures', category='Spiritual',
        progress=NumericProgress(target_value=target, current_value=current, unit='chapters'),
    ))


def make_recurring(repo, user_id=1, pattern='daily', last=None, count=0):
    return repo.create(GoalEntity(
        id=None, user_id=user_id, title='Run', category='Physical',
        progress=RecurringProgress(pattern=pattern, completion_count=count, last_completed_at=last),
    ))


def make_calendar(repo, user_id=1, required=2):
    return repo.create(GoalEntity(
        id=None, user_id=user_id, title='Visit friends', category='Social',
        progress=CalendarProgress(events_required=required),
    ))


def utc(*args):
    return pytz.UTC.localize(datetime(*args))


# =============================================================================
# Django users / clients
# =============================================================================

@pytest.fixture()
def user(db):
    return get_user_model().objects.create_user(
        username='elder', email='elder@example.com', password='secret123',
        first_name='John', last_name='Smith',
    )


@pytest.fixture()
def other_user(db):
    return get_user_model().objects.create_user(
        username='sister', email='sister@example.com', password='secret123',
    )


@pytest.fixture()
def auth_client(client, user):
    client.force_login(user)
    return client


@pytest.fixture()
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path
    return tmp_path
