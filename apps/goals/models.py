# apps/goals/models.py
from django.db import models
from django.conf import settings
from apps.goals.domain.entities import GoalKind, GoalCategory, RecurrencePattern


class Goal(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='goals')
    title = models.CharField(max_length=200)

    # TextChoices for forms/admin, mapped onto the domain enums
    class Category(models.TextChoices):
        SPIRITUAL = GoalCategory.SPIRITUAL.value, 'Spiritual'
        SOCIAL = GoalCategory.SOCIAL.value, 'Social'
        INTELLECTUAL = GoalCategory.INTELLECTUAL.value, 'Intellectual'
        PHYSICAL = GoalCategory.PHYSICAL.value, 'Physical'
        ROMANTIC = GoalCategory.ROMANTIC.value, 'Romantic'

    class GoalType(models.TextChoices):
        NUMERIC = GoalKind.NUMERIC.value, 'Numeric'
        RECURRING = GoalKind.RECURRING.value, 'Recurring'
        CALENDAR = GoalKind.CALENDAR.value, 'Calendar'

    class Pattern(models.TextChoices):
        DAILY = RecurrencePattern.DAILY.value, 'Daily'
        WEEKLY = RecurrencePattern.WEEKLY.value, 'Weekly'
        MONTHLY = RecurrencePattern.MONTHLY.value, 'Monthly'

    category = models.CharField(max_length=20, choices=Category.choices)
    goal_type = models.CharField(max_length=20, choices=GoalType.choices)
    description = models.TextField(null=True, blank=True)
    is_completed = models.BooleanField(default=False)

    # Numeric
    numeric_target_value = models.IntegerField(null=True, blank=True)
    numeric_current_value = models.IntegerField(null=True, blank=True)
    numeric_unit = models.CharField(max_length=50, null=True, blank=True)

    # Recurring
    recurrence_pattern = models.CharField(max_length=20, choices=Pattern.choices, null=True, blank=True)
    recurrence_interval = models.PositiveIntegerField(null=True, blank=True)
    recurrence_days = models.CharField(max_length=100, null=True, blank=True, help_text="e.g. MO,WE,FR")
    completion_count = models.PositiveIntegerField(null=True, blank=True)
    last_completed_at = models.DateTimeField(null=True, blank=True)

    # Calendar
    target_date = models.DateField(null=True, blank=True)
    linked_events_required = models.PositiveIntegerField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['category', '-created_at']
        indexes = [
            models.Index(fields=['user', 'goal_type'], name='goals_goal_user_id_3f1e0c_idx'),
        ]

    def __str__(self):
        return self.title

    def as_dict(self):
        """Flat JSON-friendly representation (goal detail endpoint, dashboard)."""
        return {
            'goal_id': self.id,
            'title': self.title,
            'category': self.category,
            'goal_type': self.goal_type,
            'description': self.description,
            'is_completed': self.is_completed,
            'numeric_target_value': self.numeric_target_value,
            'numeric_current_value': self.numeric_current_value,
            'numeric_unit': self.numeric_unit,
            'recurrence_pattern': self.recurrence_pattern,
            'recurrence_interval': self.recurrence_interval,
            'recurrence_days': self.recurrence_days,
            'completion_count': self.completion_count,
            'last_completed_at': self.last_completed_at,
            'target_date': self.target_date,
            'linked_events_required': self.linked_events_required,
            'created_at': self.created_at,
        }
