from django.core.management.base import BaseCommand
from apps.calendar_app.adapters.orm_repositories import DjangoLinkedEventRepository
from apps.goals.adapters.orm_repositories import DjangoGoalRepository
from apps.goals.domain.services import GoalProgressService
from apps.goals.models import Goal


class Command(BaseCommand):
    help = 'Re-derives the completion flag of calendar goals from their completed events'

    def add_arguments(self, parser):
        parser.add_argument('--user', type=int, help='Only this user id')

    def handle(self, *args, **options):
        service = GoalProgressService(DjangoGoalRepository(), DjangoLinkedEventRepository())

        goals = Goal.objects.filter(goal_type=Goal.GoalType.CALENDAR)
        if options.get('user'):
            goals = goals.filter(user_id=options['user'])

        by_owner = {}
        for goal_id, user_id in goals.values_list('id', 'user_id'):
            by_owner.setdefault(user_id, []).append(goal_id)

        total = 0
        for user_id, goal_ids in by_owner.items():
            for result in service.recompute_calendar_goals(goal_ids, user_id):
                total += 1
                self.stdout.write(
                    f"- user {user_id}: {result.completed_events}/{result.required} "
                    f"({'completed' if result.completed else 'open'})"
                )

        self.stdout.write(self.style.SUCCESS(f'Recomputed {total} calendar goals.'))
