# apps/goals/domain/entities.py
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union
from enum import Enum


class GoalKind(str, Enum):
    NUMERIC = 'numeric'
    RECURRING = 'recurring'
    CALENDAR = 'calendar'


class GoalCategory(str, Enum):
    SPIRITUAL = 'Spiritual'
    SOCIAL = 'Social'
    INTELLECTUAL = 'Intellectual'
    PHYSICAL = 'Physical'
    ROMANTIC = 'Romantic'

    @classmethod
    def normalize(cls, raw: str) -> 'GoalCategory':
        """'physical' / 'PHYSICAL' -> GoalCategory.PHYSICAL (ValueError if unknown)."""
        value = (raw or '').strip()
        return cls(value[:1].upper() + value[1:].lower())


class RecurrencePattern(str, Enum):
    DAILY = 'daily'
    WEEKLY = 'weekly'
    MONTHLY = 'monthly'


class EventStatus(str, Enum):
    PENDING = 'pending'
    COMPLETED = 'completed'


# Kind-specific state: a goal carries exactly one of these.

@dataclass
class NumericProgress:
    target_value: int = 0
    current_value: int = 0
    unit: str = 'times'

    kind = GoalKind.NUMERIC


@dataclass
class RecurringProgress:
    # Plain text or NULL; anything but daily/weekly/monthly never restricts completion
    pattern: Optional[str] = RecurrencePattern.DAILY.value
    interval: int = 1
    days: Optional[str] = None
    completion_count: int = 0
    last_completed_at: Optional[datetime] = None

    kind = GoalKind.RECURRING


@dataclass
class CalendarProgress:
    target_date: Optional[date] = None
    events_required: int = 0

    kind = GoalKind.CALENDAR


GoalProgress = Union[NumericProgress, RecurringProgress, CalendarProgress]


@dataclass
class GoalEntity:
    id: Optional[int]  # None before the first save
    user_id: int
    title: str
    category: str
    progress: GoalProgress
    description: Optional[str] = None
    is_completed: bool = False

    @property
    def kind(self) -> GoalKind:
        return self.progress.kind


# Results returned to request handlers

@dataclass
class NumericProgressResult:
    current: int
    target: int
    completed: bool


@dataclass
class RecurringCompletionResult:
    completion_count: int
    last_completed_at: datetime


@dataclass
class CalendarProgressResult:
    completed_events: int
    required: int
    completed: bool
