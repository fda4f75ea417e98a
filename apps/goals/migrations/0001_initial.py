from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Goal',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=200)),
                ('category', models.CharField(choices=[('Spiritual', 'Spiritual'), ('Social', 'Social'), ('Intellectual', 'Intellectual'), ('Physical', 'Physical'), ('Romantic', 'Romantic')], max_length=20)),
                ('goal_type', models.CharField(choices=[('numeric', 'Numeric'), ('recurring', 'Recurring'), ('calendar', 'Calendar')], max_length=20)),
                ('description', models.TextField(blank=True, null=True)),
                ('is_completed', models.BooleanField(default=False)),
                ('numeric_target_value', models.IntegerField(blank=True, null=True)),
                ('numeric_current_value', models.IntegerField(blank=True, null=True)),
                ('numeric_unit', models.CharField(blank=True, max_length=50, null=True)),
                ('recurrence_pattern', models.CharField(blank=True, choices=[('daily', 'Daily'), ('weekly', 'Weekly'), ('monthly', 'Monthly')], max_length=20, null=True)),
                ('recurrence_interval', models.PositiveIntegerField(blank=True, null=True)),
                ('recurrence_days', models.CharField(blank=True, help_text='e.g. MO,WE,FR', max_length=100, null=True)),
                ('completion_count', models.PositiveIntegerField(blank=True, null=True)),
                ('last_completed_at', models.DateTimeField(blank=True, null=True)),
                ('target_date', models.DateField(blank=True, null=True)),
                ('linked_events_required', models.PositiveIntegerField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='goals', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['category', '-created_at'],
                'indexes': [models.Index(fields=['user', 'goal_type'], name='goals_goal_user_id_3f1e0c_idx')],
            },
        ),
    ]
