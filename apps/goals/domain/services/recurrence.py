# apps/goals/domain/services/recurrence.py
from datetime import datetime, timedelta, tzinfo
from typing import Optional, Tuple
import pytz
from dateutil.relativedelta import relativedelta
from apps.goals.domain.entities import RecurringProgress, RecurrencePattern


def _aware(value: datetime) -> datetime:
    # Naive timestamps are treated as UTC
    if value.tzinfo is None:
        return pytz.UTC.localize(value)
    return value


def _same_zone(last: datetime, now: datetime) -> Tuple[datetime, datetime]:
    """Brings both timestamps into now's time zone so calendar fields compare."""
    if last.tzinfo is None and now.tzinfo is None:
        return last, now
    now = _aware(now)
    return _aware(last).astimezone(now.tzinfo), now


def can_complete(progress: RecurringProgress, now: datetime) -> bool:
    """
    Is a new completion allowed at `now`?
    - never completed: yes
    - daily: only if the last completion was on another calendar day
    - weekly: only after 7 full days
    - monthly: only in another (month, year)
    - any other pattern: no restriction
    """
    if progress.last_completed_at is None:
        return True

    last, now = _same_zone(progress.last_completed_at, now)
    pattern = progress.pattern

    if pattern == RecurrencePattern.DAILY.value:
        return last.date() != now.date()
    if pattern == RecurrencePattern.WEEKLY.value:
        # timedelta.days is floored, same as counting whole elapsed days
        return (now - last).days >= 7
    if pattern == RecurrencePattern.MONTHLY.value:
        return (last.year, last.month) != (now.year, now.month)
    return True


def next_completion_window(progress: RecurringProgress, tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """Earliest moment the next completion is accepted (None = right away)."""
    if progress.last_completed_at is None:
        return None

    last = _aware(progress.last_completed_at)
    if tz is not None:
        last = last.astimezone(tz)

    midnight = dict(hour=0, minute=0, second=0, microsecond=0)
    pattern = progress.pattern

    if pattern == RecurrencePattern.DAILY.value:
        return last + relativedelta(days=+1, **midnight)
    if pattern == RecurrencePattern.WEEKLY.value:
        return last + timedelta(days=7)
    if pattern == RecurrencePattern.MONTHLY.value:
        return last + relativedelta(months=+1, day=1, **midnight)
    return None
