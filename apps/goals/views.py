# apps/goals/views.py
import json
import logging
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.db import DatabaseError
from django.http import JsonResponse
from django.shortcuts import redirect
from django.utils import timezone
from django.views.decorators.http import require_GET, require_POST
from apps.calendar_app.adapters.orm_repositories import DjangoLinkedEventRepository
from apps.calendar_app.models import Event
from .adapters.orm_repositories import DjangoGoalRepository
from .application.use_cases import CreateGoalInput, CreateGoalUseCase
from .domain.entities import EventStatus, GoalKind
from .domain.exceptions import GoalNotFound, AlreadyCompletedForPeriod, ProgressValidationError
from .domain.services import GoalProgressService, next_completion_window
from .forms import GoalForm, GoalUpdateForm, parse_flag
from .models import Goal

logger = logging.getLogger(__name__)

NOT_FOUND = {'success': False, 'error': 'Goal not found'}
BAD_BODY = {'success': False, 'error': 'Malformed request body'}


def _progress_service():
    # Manual Dependency Injection
    return GoalProgressService(DjangoGoalRepository(), DjangoLinkedEventRepository())


def _payload(request):
    """Form fields or a JSON body (the dashboard widgets post JSON). None if the JSON is malformed."""
    if request.content_type == 'application/json':
        try:
            data = json.loads(request.body or b'{}')
        except ValueError:
            return None
        return data if isinstance(data, dict) else None
    return request.POST


def _form_error(form):
    for errors in form.errors.values():
        return errors[0]
    return "Invalid form"


@login_required
@require_POST
def goal_create_view(request):
    form = GoalForm(request.POST)
    if not form.is_valid():
        messages.error(request, _form_error(form))
        return redirect('dashboard')

    data = form.cleaned_data
    dto = CreateGoalInput(
        title=data['title'],
        user_id=request.user.id,
        category=data['category'],
        goal_type=data['goal_type'],
        description=data['description'],
        numeric_target=data['numeric_target'],
        numeric_unit=data['numeric_unit'],
        recurrence_pattern=data['recurrence_pattern'],
        recurrence_interval=data['recurrence_interval'],
        recurrence_days=data['recurrence_days'],
        target_date=data['target_date'],
        events_required=data['events_required'],
    )

    try:
        CreateGoalUseCase(DjangoGoalRepository()).execute(dto)
    except ValueError as e:
        messages.error(request, str(e))
        return redirect('dashboard')
    except DatabaseError:
        logger.exception("Create goal error")
        messages.error(request, "Error creating goal")
        return redirect('dashboard')

    messages.success(request, "Goal created successfully!")
    return redirect('dashboard')


@login_required
@require_POST
def goal_numeric_log_view(request, pk):
    payload = _payload(request)
    if payload is None:
        return JsonResponse(BAD_BODY, status=400)

    try:
        result = _progress_service().log_numeric_progress(pk, request.user.id, payload.get('amount'))
    except GoalNotFound:
        return JsonResponse(NOT_FOUND, status=404)
    except ProgressValidationError as e:
        return JsonResponse({'success': False, 'error': str(e)}, status=400)

    return JsonResponse({
        'success': True,
        'current': result.current,
        'target': result.target,
        'completed': result.completed,
    })


@login_required
@require_POST
def goal_recurring_complete_view(request, pk):
    try:
        result = _progress_service().complete_recurring_instance(pk, request.user.id, timezone.localtime())
    except GoalNotFound:
        return JsonResponse(NOT_FOUND, status=404)
    except AlreadyCompletedForPeriod as e:
        return JsonResponse({'success': False, 'error': str(e), 'canRetry': e.retryable}, status=400)

    return JsonResponse({
        'success': True,
        'completionCount': result.completion_count,
        'lastCompleted': result.last_completed_at,
    })


@login_required
@require_GET
def goal_detail_view(request, pk):
    goal = Goal.objects.filter(pk=pk, user=request.user).first()
    if goal is None:
        return JsonResponse({'error': 'Goal not found'}, status=404)

    data = goal.as_dict()

    if goal.goal_type == GoalKind.CALENDAR.value:
        linked = Event.objects.filter(goal_id=goal.id, user=request.user).order_by('event_date', 'start_time')
        data['linked_events'] = [e.as_dict() for e in linked]
        data['completed_events'] = sum(1 for e in linked if e.status == EventStatus.COMPLETED.value)

    elif goal.goal_type == GoalKind.RECURRING.value:
        entity = DjangoGoalRepository().to_entity(goal)
        data['next_completion_at'] = next_completion_window(entity.progress, timezone.get_current_timezone())

    return JsonResponse({'goal': data})


@login_required
@require_POST
def goal_update_view(request, pk):
    goal = Goal.objects.filter(pk=pk, user=request.user).first()
    if goal is None:
        return JsonResponse(NOT_FOUND, status=404)

    payload = _payload(request)
    if payload is None:
        return JsonResponse(BAD_BODY, status=400)

    # Completion toggle from the dashboard checkbox
    if 'is_completed' in payload and not payload.get('title'):
        _progress_service().set_goal_completion(goal.id, request.user.id, parse_flag(payload['is_completed']))
        return JsonResponse({'success': True})

    form = GoalUpdateForm(payload)
    if not form.is_valid():
        messages.error(request, _form_error(form))
        return redirect('dashboard')

    data = form.cleaned_data
    goal.title = data['title']
    goal.category = data['category']
    goal.description = data['description'] or None

    # Kind-specific fields only change when supplied
    if goal.goal_type == GoalKind.NUMERIC.value:
        if data['numeric_target'] is not None:
            goal.numeric_target_value = data['numeric_target']
        if data['numeric_unit']:
            goal.numeric_unit = data['numeric_unit']
        if data['numeric_current'] is not None:
            goal.numeric_current_value = data['numeric_current']
    elif goal.goal_type == GoalKind.RECURRING.value:
        if data['recurrence_pattern']:
            goal.recurrence_pattern = data['recurrence_pattern']
        if data['recurrence_interval'] is not None:
            goal.recurrence_interval = data['recurrence_interval']
        if data['recurrence_days']:
            goal.recurrence_days = data['recurrence_days']
    elif goal.goal_type == GoalKind.CALENDAR.value:
        if data['target_date'] is not None:
            goal.target_date = data['target_date']
        if data['events_required'] is not None:
            goal.linked_events_required = data['events_required']

    if data['is_completed'] is not None:
        goal.is_completed = data['is_completed']

    try:
        goal.save()
    except DatabaseError:
        logger.exception("Update goal error")
        messages.error(request, "Error updating goal")
        return redirect('dashboard')

    messages.success(request, "Goal updated successfully")
    return redirect('dashboard')


@login_required
@require_POST
def goal_delete_view(request, pk):
    try:
        # Linked events keep their goal_id (no DB constraint)
        Goal.objects.filter(pk=pk, user=request.user).delete()
    except DatabaseError:
        logger.exception("Delete goal error")
        messages.error(request, "Error deleting goal")
        return redirect('dashboard')

    messages.success(request, "Goal deleted successfully")
    return redirect('dashboard')


@login_required
@require_POST
def goal_increment_view(request, pk):
    """Older dashboards post here; same as logging an amount of 1."""
    try:
        result = _progress_service().log_numeric_progress(pk, request.user.id, 1)
    except GoalNotFound:
        return JsonResponse(NOT_FOUND, status=404)

    return JsonResponse({
        'success': True,
        'current': result.current,
        'target': result.target,
        'completed': result.completed,
    })
