# apps/calendar_app/models.py
from django.db import models
from django.conf import settings
from apps.goals.domain.entities import EventStatus


class Event(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='events')

    # Link to a calendar goal. No DB constraint: deleting the goal leaves the
    # id in place until the event itself is updated or deleted.
    goal = models.ForeignKey(
        'goals.Goal',
        null=True, blank=True,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='linked_events'
    )

    title = models.CharField(max_length=200)
    event_date = models.DateField()
    start_time = models.TimeField()
    end_time = models.TimeField(null=True, blank=True)
    event_type = models.CharField(max_length=50, blank=True)
    location = models.CharField(max_length=200, blank=True)
    notes = models.TextField(blank=True)
    color = models.CharField(max_length=7, default="#0d3b66")  # HEX

    # pending / completed; free text so new statuses need no migration
    status = models.CharField(max_length=20, default=EventStatus.PENDING.value)

    contacts = models.ManyToManyField(
        'contacts.Contact',
        through='ContactEvent',
        related_name='events',
        blank=True
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['event_date', 'start_time']
        indexes = [
            models.Index(fields=['goal', 'status'], name='calendar_ap_goal_id_5b2c7e_idx'),
            models.Index(fields=['user', 'event_date'], name='calendar_ap_user_id_8d41a9_idx'),
        ]

    def __str__(self):
        return self.title

    def as_dict(self, with_contacts=False):
        data = {
            'event_id': self.id,
            'goal_id': self.goal_id,
            'title': self.title,
            'event_date': self.event_date,
            'start_time': self.start_time,
            'end_time': self.end_time,
            'event_type': self.event_type,
            'location': self.location,
            'notes': self.notes,
            'color': self.color,
            'status': self.status,
        }
        if with_contacts:
            data['contact_ids'] = sorted(link.contact_id for link in self.contact_links.all())
        return data


class ContactEvent(models.Model):
    contact = models.ForeignKey('contacts.Contact', on_delete=models.CASCADE, related_name='event_links')
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name='contact_links')

    class Meta:
        unique_together = ('contact', 'event')

    def __str__(self):
        return f"{self.contact_id} @ {self.event_id}"
