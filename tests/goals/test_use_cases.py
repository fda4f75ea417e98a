import pytest
from apps.goals.application.use_cases import CreateGoalInput, CreateGoalUseCase
from apps.goals.domain.entities import GoalKind, NumericProgress, RecurringProgress, CalendarProgress


def _create(repo, **overrides):
    data = dict(title='Goal', user_id=1, category='spiritual', goal_type='numeric')
    data.update(overrides)
    return CreateGoalUseCase(repo).execute(CreateGoalInput(**data))


def test_category_is_normalized(goal_repo):
    assert _create(goal_repo, category='pHYSICAL').category == 'Physical'


def test_numeric_defaults(goal_repo):
    goal = _create(goal_repo, goal_type='numeric')
    assert goal.kind == GoalKind.NUMERIC
    assert goal.progress == NumericProgress(target_value=0, current_value=0, unit='times')


def test_recurring_defaults(goal_repo):
    goal = _create(goal_repo, goal_type='recurring')
    assert goal.progress == RecurringProgress(pattern='daily', interval=1, days=None, completion_count=0)


def test_calendar_defaults(goal_repo):
    goal = _create(goal_repo, goal_type='calendar')
    assert goal.progress == CalendarProgress(target_date=None, events_required=0)


def test_given_values_are_kept(goal_repo):
    goal = _create(goal_repo, goal_type='recurring', recurrence_pattern='weekly',
                   recurrence_interval=2, recurrence_days='MO,TH', description='Gym')
    assert (goal.progress.pattern, goal.progress.interval, goal.progress.days) == ('weekly', 2, 'MO,TH')
    assert goal.description == 'Gym'
    assert goal.is_completed is False


@pytest.mark.parametrize("overrides", [
    {'title': ''},
    {'category': 'Financial'},
    {'goal_type': 'binary'},
])
def test_rejects_invalid_input(goal_repo, overrides):
    with pytest.raises(ValueError):
        _create(goal_repo, **overrides)
    assert goal_repo.goals == {}
