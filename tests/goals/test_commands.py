from datetime import date, time
from io import StringIO
import pytest
from django.core.management import call_command
from apps.calendar_app.models import Event
from apps.goals.models import Goal

pytestmark = pytest.mark.django_db


def test_recompute_after_event_deletion(user, other_user):
    goal = Goal.objects.create(user=user, title='Visits', category='Social', goal_type='calendar',
                               linked_events_required=1, is_completed=True)
    stale = Goal.objects.create(user=other_user, title='Dates', category='Romantic', goal_type='calendar',
                                linked_events_required=1, is_completed=True)
    Event.objects.create(user=other_user, goal=stale, title='Dinner', event_date=date.today(),
                         start_time=time(19), status='completed')

    out = StringIO()
    call_command('recompute_calendar_goals', stdout=out)

    goal.refresh_from_db()
    stale.refresh_from_db()
    assert goal.is_completed is False
    assert stale.is_completed is True
    assert 'Recomputed 2 calendar goals.' in out.getvalue()


def test_single_user(user, other_user):
    mine = Goal.objects.create(user=user, title='A', category='Social', goal_type='calendar',
                               linked_events_required=1, is_completed=True)
    theirs = Goal.objects.create(user=other_user, title='B', category='Social', goal_type='calendar',
                                 linked_events_required=1, is_completed=True)

    call_command('recompute_calendar_goals', user=user.id, stdout=StringIO())

    mine.refresh_from_db()
    theirs.refresh_from_db()
    assert mine.is_completed is False
    assert theirs.is_completed is True
