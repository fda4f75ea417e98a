from django import forms
from .models import Goal
from .domain.entities import GoalCategory
from .domain.services.progress import MIN_VALUE, MAX_VALUE


def parse_flag(value) -> bool:
    """Checkbox/JSON completion flag: 'true', 'on', '1' or True."""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ('true', 'on', '1')


class GoalForm(forms.Form):
    title = forms.CharField(max_length=200, widget=forms.TextInput(attrs={'class': 'form-control'}))
    category = forms.CharField(max_length=20, widget=forms.Select(
        choices=Goal.Category.choices, attrs={'class': 'form-select'}))
    goal_type = forms.ChoiceField(choices=Goal.GoalType.choices, widget=forms.Select(attrs={'class': 'form-select'}))
    description = forms.CharField(required=False, widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 3}))

    # Numeric
    numeric_target = forms.IntegerField(required=False, min_value=0, max_value=MAX_VALUE)
    numeric_unit = forms.CharField(required=False, max_length=50)

    # Recurring
    recurrence_pattern = forms.ChoiceField(required=False, choices=[('', '---')] + Goal.Pattern.choices)
    recurrence_interval = forms.IntegerField(required=False, min_value=1, max_value=MAX_VALUE)
    recurrence_days = forms.CharField(required=False, max_length=100)

    # Calendar
    target_date = forms.DateField(required=False, widget=forms.DateInput(attrs={'type': 'date'}))
    events_required = forms.IntegerField(required=False, min_value=0, max_value=MAX_VALUE)

    def clean_category(self):
        raw = self.cleaned_data['category']
        try:
            return GoalCategory.normalize(raw).value
        except ValueError:
            raise forms.ValidationError("Unknown category") from None


class GoalUpdateForm(GoalForm):
    """Full edit: the goal type is fixed at creation, current value may be corrected."""

    numeric_current = forms.IntegerField(required=False, min_value=MIN_VALUE, max_value=MAX_VALUE)
    is_completed = forms.CharField(required=False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        del self.fields['goal_type']

    def clean_is_completed(self):
        if 'is_completed' not in self.data:
            return None
        return parse_flag(self.cleaned_data['is_completed'])
