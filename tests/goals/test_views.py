import json
from datetime import date, time, timedelta
import pytest
from django.urls import reverse
from django.utils import timezone
from apps.calendar_app.models import Event
from apps.goals.models import Goal

pytestmark = pytest.mark.django_db


def _goal(user, **fields):
    data = dict(title='Goal', category='Spiritual', goal_type='numeric')
    data.update(fields)
    return Goal.objects.create(user=user, **data)


class TestCreate:

    def test_numeric_with_defaults(self, auth_client, user):
        response = auth_client.post(reverse('goal_create'), {
            'title': 'Read', 'category': 'intellectual', 'goal_type': 'numeric',
        })

        assert response.status_code == 302
        assert response.url == reverse('dashboard')
        goal = Goal.objects.get(user=user)
        assert goal.category == 'Intellectual'
        assert (goal.numeric_target_value, goal.numeric_current_value, goal.numeric_unit) == (0, 0, 'times')
        assert goal.recurrence_pattern is None

    def test_calendar(self, auth_client, user):
        auth_client.post(reverse('goal_create'), {
            'title': 'Visits', 'category': 'Social', 'goal_type': 'calendar',
            'events_required': '3', 'target_date': '2024-12-24',
        })
        goal = Goal.objects.get(user=user)
        assert goal.linked_events_required == 3
        assert goal.target_date == date(2024, 12, 24)

    def test_invalid_category(self, auth_client, user):
        auth_client.post(reverse('goal_create'), {'title': 'x', 'category': 'money', 'goal_type': 'numeric'})
        assert not Goal.objects.exists()

    def test_requires_login(self, client):
        response = client.post(reverse('goal_create'), {'title': 'x'})
        assert response.status_code == 302
        assert response.url.startswith(reverse('login') + '?next=')


class TestNumericLog:

    def test_scenario(self, auth_client, user):
        goal = _goal(user, numeric_target_value=10, numeric_current_value=8)
        url = reverse('goal_numeric_log', args=[goal.id])

        assert auth_client.post(url, {'amount': '1'}).json() == {
            'success': True, 'current': 9, 'target': 10, 'completed': False,
        }
        data = auth_client.post(url, json.dumps({'amount': 2}), content_type='application/json').json()
        assert data == {'success': True, 'current': 11, 'target': 10, 'completed': True}

        goal.refresh_from_db()
        assert goal.is_completed is True

    def test_bad_amount(self, auth_client, user):
        goal = _goal(user, numeric_target_value=10)
        response = auth_client.post(reverse('goal_numeric_log', args=[goal.id]), {'amount': 'lots'})
        assert response.status_code == 400
        assert response.json()['success'] is False

    @pytest.mark.parametrize("amount", ['9' * 25, str(2 ** 31), str(-2 ** 31 - 1)])
    def test_amount_beyond_column_range(self, auth_client, user, amount):
        goal = _goal(user, numeric_target_value=10, numeric_current_value=2)
        response = auth_client.post(reverse('goal_numeric_log', args=[goal.id]), {'amount': amount})

        assert response.status_code == 400
        assert response.json()['success'] is False
        goal.refresh_from_db()
        assert goal.numeric_current_value == 2

    def test_sum_beyond_column_range(self, auth_client, user):
        goal = _goal(user, numeric_target_value=10, numeric_current_value=2 ** 31 - 1)
        response = auth_client.post(reverse('goal_numeric_log', args=[goal.id]), {'amount': '1'})

        assert response.status_code == 400
        goal.refresh_from_db()
        assert goal.numeric_current_value == 2 ** 31 - 1

    @pytest.mark.parametrize("body", ['{"amount": 5', '[5]', 'not json'])
    def test_malformed_json_records_nothing(self, auth_client, user, body):
        goal = _goal(user, numeric_target_value=10, numeric_current_value=0)
        response = auth_client.post(reverse('goal_numeric_log', args=[goal.id]), body,
                                    content_type='application/json')

        assert response.status_code == 400
        assert response.json() == {'success': False, 'error': 'Malformed request body'}
        goal.refresh_from_db()
        assert goal.numeric_current_value == 0

    def test_other_users_goal(self, auth_client, other_user):
        goal = _goal(other_user, numeric_target_value=10)
        response = auth_client.post(reverse('goal_numeric_log', args=[goal.id]), {'amount': '1'})
        assert response.status_code == 404
        assert response.json() == {'success': False, 'error': 'Goal not found'}

    def test_legacy_increment(self, auth_client, user):
        goal = _goal(user, numeric_target_value=1, numeric_current_value=0)
        data = auth_client.post(reverse('goal_increment', args=[goal.id])).json()
        assert data == {'success': True, 'current': 1, 'target': 1, 'completed': True}


class TestRecurringComplete:

    def test_twice_same_day(self, auth_client, user):
        goal = _goal(user, goal_type='recurring', recurrence_pattern='daily', completion_count=0)
        url = reverse('goal_recurring_complete', args=[goal.id])

        first = auth_client.post(url)
        assert first.status_code == 200
        assert first.json()['success'] is True
        assert first.json()['completionCount'] == 1
        assert first.json()['lastCompleted']

        second = auth_client.post(url)
        assert second.status_code == 400
        assert second.json() == {
            'success': False, 'error': 'Already completed for this period', 'canRetry': False,
        }

        goal.refresh_from_db()
        assert goal.completion_count == 1
        assert goal.is_completed is False

    def test_numeric_goal_is_not_found(self, auth_client, user):
        goal = _goal(user)
        assert auth_client.post(reverse('goal_recurring_complete', args=[goal.id])).status_code == 404


class TestDetail:

    def test_calendar_goal_lists_linked_events(self, auth_client, user):
        goal = _goal(user, goal_type='calendar', linked_events_required=2)
        today = date.today()
        Event.objects.create(user=user, goal=goal, title='B', event_date=today + timedelta(days=1),
                             start_time=time(9), status='completed')
        Event.objects.create(user=user, goal=goal, title='A', event_date=today, start_time=time(9))

        data = auth_client.get(reverse('goal_detail', args=[goal.id])).json()['goal']

        assert data['goal_id'] == goal.id
        assert [e['title'] for e in data['linked_events']] == ['A', 'B']
        assert data['completed_events'] == 1

    def test_recurring_goal_next_window(self, auth_client, user):
        goal = _goal(user, goal_type='recurring', recurrence_pattern='weekly',
                     last_completed_at=timezone.now())
        data = auth_client.get(reverse('goal_detail', args=[goal.id])).json()['goal']
        assert data['next_completion_at'] is not None

    def test_other_user(self, auth_client, other_user):
        goal = _goal(other_user)
        assert auth_client.get(reverse('goal_detail', args=[goal.id])).status_code == 404


class TestUpdate:

    @pytest.mark.parametrize("goal_type", ['numeric', 'recurring', 'calendar'])
    def test_completion_only(self, auth_client, user, goal_type):
        goal = _goal(user, goal_type=goal_type)
        response = auth_client.post(reverse('goal_update', args=[goal.id]), {'is_completed': 'true'})

        assert response.json() == {'success': True}
        goal.refresh_from_db()
        assert goal.is_completed is True

    def test_completion_only_json(self, auth_client, user):
        goal = _goal(user, is_completed=True)
        auth_client.post(reverse('goal_update', args=[goal.id]),
                         json.dumps({'is_completed': False}), content_type='application/json')
        goal.refresh_from_db()
        assert goal.is_completed is False

    def test_malformed_json_changes_nothing(self, auth_client, user):
        goal = _goal(user, is_completed=True)
        response = auth_client.post(reverse('goal_update', args=[goal.id]), '{"is_completed": fal',
                                    content_type='application/json')

        assert response.status_code == 400
        goal.refresh_from_db()
        assert goal.is_completed is True

    def test_oversized_target_rejected(self, auth_client, user):
        goal = _goal(user, numeric_target_value=5)
        response = auth_client.post(reverse('goal_update', args=[goal.id]), {
            'title': 'Run', 'category': 'Physical', 'numeric_target': '9' * 25,
        })

        assert response.status_code == 302
        goal.refresh_from_db()
        assert goal.numeric_target_value == 5

    def test_full_update(self, auth_client, user):
        goal = _goal(user, numeric_target_value=5, numeric_current_value=1, numeric_unit='km')
        response = auth_client.post(reverse('goal_update', args=[goal.id]), {
            'title': 'Run more', 'category': 'physical', 'numeric_target': '10', 'numeric_current': '3',
        })

        assert response.status_code == 302
        goal.refresh_from_db()
        assert (goal.title, goal.category) == ('Run more', 'Physical')
        assert (goal.numeric_target_value, goal.numeric_current_value, goal.numeric_unit) == (10, 3, 'km')
        assert goal.is_completed is False

    def test_other_user(self, auth_client, other_user):
        goal = _goal(other_user)
        response = auth_client.post(reverse('goal_update', args=[goal.id]), {'is_completed': 'true'})
        assert response.status_code == 404
        goal.refresh_from_db()
        assert goal.is_completed is False


class TestDelete:

    def test_delete_leaves_event_link(self, auth_client, user):
        goal = _goal(user, goal_type='calendar')
        event = Event.objects.create(user=user, goal=goal, title='E', event_date=date.today(), start_time=time(8))

        response = auth_client.post(reverse('goal_delete', args=[goal.id]))

        assert response.status_code == 302
        assert not Goal.objects.filter(pk=goal.id).exists()
        event.refresh_from_db()
        assert event.goal_id == goal.id

    def test_other_user(self, auth_client, other_user):
        goal = _goal(other_user)
        auth_client.post(reverse('goal_delete', args=[goal.id]))
        assert Goal.objects.filter(pk=goal.id).exists()
