from django.contrib import admin
from .models import Event, ContactEvent


class ContactEventInline(admin.TabularInline):
    model = ContactEvent
    extra = 1


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ('title', 'event_date', 'start_time', 'status', 'goal_id', 'user')
    list_filter = ('status', 'event_date')
    search_fields = ('title', 'location')
    inlines = [ContactEventInline]
