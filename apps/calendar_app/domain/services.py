# apps/calendar_app/domain/services.py
import calendar
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional, Set
from apps.goals.domain.entities import EventStatus


def goals_affected_by_create(goal_id: Optional[int], status: Optional[str]) -> Set[int]:
    """A new event only moves its goal when it is born completed."""
    if goal_id is not None and status == EventStatus.COMPLETED.value:
        return {goal_id}
    return set()


def goals_affected_by_update(previous_goal_id: Optional[int], new_goal_id: Optional[int]) -> Set[int]:
    # Both sides: the old goal may lose a completed event, the new one may gain it
    return {g for g in (previous_goal_id, new_goal_id) if g is not None}


def goals_affected_by_status_change(goal_id: Optional[int]) -> Set[int]:
    return {goal_id} if goal_id is not None else set()


@dataclass
class MonthGrid:
    year: int
    month: int
    weeks: List[List[int]]  # calendar.monthcalendar, 0 = day outside the month
    events_by_day: Dict[int, list] = field(default_factory=dict)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def prev_params(self) -> str:
        prev_month = self.month - 1 if self.month > 1 else 12
        prev_year = self.year if self.month > 1 else self.year - 1
        return f"?year={prev_year}&month={prev_month}"

    @property
    def next_params(self) -> str:
        next_month = self.month + 1 if self.month < 12 else 1
        next_year = self.year if self.month < 12 else self.year + 1
        return f"?year={next_year}&month={next_month}"


def build_month_grid(year: int, month: int, events: Iterable) -> MonthGrid:
    """Matrix of weeks plus the month's events mapped onto their day number."""
    events_by_day = {}
    for event in events:
        if event.event_date.year != year or event.event_date.month != month:
            continue
        events_by_day.setdefault(event.event_date.day, []).append(event)

    return MonthGrid(
        year=year,
        month=month,
        weeks=calendar.monthcalendar(year, month),
        events_by_day=events_by_day,
    )


def resolve_month(raw_year, raw_month, today: date):
    """?year=&month= query values, falling back to the current month."""
    try:
        year = int(raw_year) if raw_year else today.year
        month = int(raw_month) if raw_month else today.month
    except (TypeError, ValueError):
        return today.year, today.month

    if not 1 <= month <= 12 or not 1 <= year <= 9999:
        return today.year, today.month
    return year, month
