from django import forms
from apps.contacts.models import Contact
from apps.goals.models import Goal
from apps.goals.domain.entities import EventStatus
from .models import Event


class EventForm(forms.ModelForm):
    # Only the owner's calendar goals and contacts are valid choices
    goal = forms.ModelChoiceField(queryset=Goal.objects.none(), required=False)
    contacts = forms.ModelMultipleChoiceField(queryset=Contact.objects.none(), required=False)
    status = forms.CharField(max_length=20, required=False)
    color = forms.CharField(max_length=7, required=False)

    class Meta:
        model = Event
        fields = [
            'title', 'event_date', 'start_time', 'end_time', 'event_type',
            'location', 'notes', 'color', 'status', 'goal',
        ]
        widgets = {
            'title': forms.TextInput(attrs={'class': 'form-control'}),
            'event_date': forms.DateInput(attrs={'type': 'date', 'class': 'form-control'}),
            'start_time': forms.TimeInput(attrs={'type': 'time', 'class': 'form-control'}),
            'end_time': forms.TimeInput(attrs={'type': 'time', 'class': 'form-control'}),
            'event_type': forms.TextInput(attrs={'class': 'form-control'}),
            'location': forms.TextInput(attrs={'class': 'form-control'}),
            'notes': forms.Textarea(attrs={'class': 'form-control', 'rows': 3}),
        }

    def __init__(self, *args, user=None, **kwargs):
        super().__init__(*args, **kwargs)
        if user is not None:
            self.fields['goal'].queryset = Goal.objects.filter(
                user=user, goal_type=Goal.GoalType.CALENDAR
            )
            self.fields['contacts'].queryset = Contact.objects.filter(user=user)

    def clean_status(self):
        return self.cleaned_data.get('status') or EventStatus.PENDING.value

    def clean_color(self):
        return self.cleaned_data.get('color') or Event._meta.get_field('color').default


class EventStatusForm(forms.Form):
    status = forms.CharField(max_length=20)


class EventMoveForm(forms.Form):
    new_date = forms.DateField()
