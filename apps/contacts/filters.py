import django_filters
from django import forms
from django.db.models import Q, Value
from django.db.models.functions import Concat
from .models import Contact


class ContactFilter(django_filters.FilterSet):
    # Declaration order matters: 'filter' may slice the queryset, so it runs last
    search = django_filters.CharFilter(
        method='filter_search',
        label="Search",
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Search contacts...'})
    )
    filter = django_filters.ChoiceFilter(
        choices=[('all', 'All'), ('favorites', 'Favorites'), ('recent', 'Recent')],
        method='filter_view',
        empty_label=None,
        label="Show",
        widget=forms.Select(attrs={'class': 'form-select'})
    )

    class Meta:
        model = Contact
        fields = []

    def filter_search(self, queryset, name, value):
        """Name ("first last"), email or phone, case-insensitive."""
        return queryset.annotate(
            search_name=Concat('first_name', Value(' '), 'last_name')
        ).filter(
            Q(search_name__icontains=value) | Q(email__icontains=value) | Q(phone__icontains=value)
        )

    def filter_view(self, queryset, name, value):
        if value == 'favorites':
            return queryset.filter(is_favorite=True)
        if value == 'recent':
            return queryset[:10]
        return queryset
