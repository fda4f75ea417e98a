# apps/calendar_app/views.py
import logging
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.db import DatabaseError, transaction
from django.http import JsonResponse
from django.shortcuts import render, redirect
from django.utils import timezone
from django.views.decorators.http import require_GET, require_POST
from apps.contacts.models import Contact
from apps.goals.adapters.orm_repositories import DjangoGoalRepository
from apps.goals.domain.services import GoalProgressService
from apps.goals.models import Goal
from .adapters.orm_repositories import DjangoLinkedEventRepository
from .domain.services import (
    build_month_grid, resolve_month,
    goals_affected_by_create, goals_affected_by_update, goals_affected_by_status_change,
)
from .forms import EventForm, EventStatusForm, EventMoveForm
from .models import Event, ContactEvent

logger = logging.getLogger(__name__)


def _progress_service():
    # Manual Dependency Injection
    return GoalProgressService(DjangoGoalRepository(), DjangoLinkedEventRepository())


def _form_error(form):
    for errors in form.errors.values():
        return errors[0]
    return "Invalid form"


def _replace_contacts(event, contacts):
    ContactEvent.objects.filter(event=event).delete()
    ContactEvent.objects.bulk_create(
        [ContactEvent(contact=contact, event=event) for contact in contacts]
    )


@login_required
@require_GET
def calendar_view(request):
    """Month grid with the user's events, plus selectors for the event form."""

    # 1. Which month
    today = timezone.localdate()
    year, month = resolve_month(request.GET.get('year'), request.GET.get('month'), today)

    # 2. Events of the month (with contacts) and today's agenda
    month_events = Event.objects.filter(
        user=request.user, event_date__year=year, event_date__month=month
    ).prefetch_related('contacts')
    todays_events = Event.objects.filter(user=request.user, event_date=today)

    grid = build_month_grid(year, month, month_events)

    # 3. Selectors
    contacts = Contact.objects.filter(user=request.user)
    calendar_goals = Goal.objects.filter(user=request.user, goal_type=Goal.GoalType.CALENDAR)

    return render(request, 'calendar/calendar.html', {
        'page_title': 'Calendar - Cal-Endure to the End',
        'current_page': 'calendar',
        'grid': grid,
        'events': month_events,
        'todays_events': todays_events,
        'contacts': contacts,
        'calendar_goals': calendar_goals,
        'today': today,
        'current_date': grid.first_day,
        'prev_date': grid.prev_params,
        'next_date': grid.next_params,
    })


@login_required
@require_POST
def event_create_view(request):
    form = EventForm(request.POST, user=request.user)
    if not form.is_valid():
        messages.error(request, _form_error(form))
        return redirect('calendar')

    try:
        with transaction.atomic():
            event = form.save(commit=False)
            event.user = request.user
            event.save()
            _replace_contacts(event, form.cleaned_data['contacts'])
    except DatabaseError:
        logger.exception("Create event error")
        messages.error(request, "Error creating event")
        return redirect('calendar')

    affected = goals_affected_by_create(event.goal_id, event.status)
    _progress_service().recompute_calendar_goals(affected, request.user.id)

    messages.success(request, "Event created successfully")
    return redirect('calendar')


@login_required
@require_GET
def event_detail_view(request, pk):
    event = Event.objects.filter(pk=pk, user=request.user).first()
    if event is None:
        return JsonResponse({'error': 'Event not found'}, status=404)

    return JsonResponse({'event': event.as_dict(with_contacts=True)})


@login_required
@require_POST
def event_status_view(request, pk):
    """Status toggle from the calendar; a linked calendar goal follows."""
    event = Event.objects.filter(pk=pk, user=request.user).first()
    if event is None:
        return JsonResponse({'success': False, 'error': 'Event not found'}, status=404)

    form = EventStatusForm(request.POST)
    if not form.is_valid():
        return JsonResponse({'success': False, 'error': 'Invalid status'}, status=400)

    status = form.cleaned_data['status']
    Event.objects.filter(pk=event.pk, user=request.user).update(
        status=status, updated_at=timezone.now()
    )

    affected = goals_affected_by_status_change(event.goal_id)
    _progress_service().recompute_calendar_goals(affected, request.user.id)

    return JsonResponse({'success': True, 'status': status})


@login_required
@require_POST
def event_update_view(request, pk):
    event = Event.objects.filter(pk=pk, user=request.user).first()
    if event is None:
        messages.error(request, "Event not found")
        return redirect('calendar')

    previous_goal_id = event.goal_id
    form = EventForm(request.POST, instance=event, user=request.user)
    if not form.is_valid():
        messages.error(request, _form_error(form))
        return redirect('calendar')

    try:
        with transaction.atomic():
            event = form.save()
            _replace_contacts(event, form.cleaned_data['contacts'])
    except DatabaseError:
        logger.exception("Update event error")
        messages.error(request, "Error updating event")
        return redirect('calendar')

    # Moving a completed event between goals changes both of them
    affected = goals_affected_by_update(previous_goal_id, event.goal_id)
    _progress_service().recompute_calendar_goals(affected, request.user.id)

    messages.success(request, "Event updated successfully")
    return redirect('calendar')


@login_required
@require_POST
def event_delete_view(request, pk):
    try:
        # No recompute here: the linked goal keeps its flag until the next
        # trigger or `manage.py recompute_calendar_goals`.
        Event.objects.filter(pk=pk, user=request.user).delete()
    except DatabaseError:
        logger.exception("Delete event error")
        messages.error(request, "Error deleting event")
        return redirect('calendar')

    messages.success(request, "Event deleted successfully")
    return redirect('calendar')


@login_required
@require_POST
def event_move_view(request, pk):
    """Drag and drop onto another day."""
    form = EventMoveForm(request.POST)
    if not form.is_valid():
        return JsonResponse({'success': False, 'error': 'Invalid date'}, status=400)

    updated = Event.objects.filter(pk=pk, user=request.user).update(
        event_date=form.cleaned_data['new_date'], updated_at=timezone.now()
    )
    if not updated:
        return JsonResponse({'success': False, 'error': 'Event not found'}, status=404)
    return JsonResponse({'success': True})
