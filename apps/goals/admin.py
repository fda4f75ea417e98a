from django.contrib import admin
from .models import Goal


@admin.register(Goal)
class GoalAdmin(admin.ModelAdmin):
    list_display = ('title', 'category', 'goal_type', 'is_completed', 'user', 'created_at')
    list_filter = ('goal_type', 'category', 'is_completed')
    search_fields = ('title', 'description')
