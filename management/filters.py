import django_filters

from core.common.models import Meeting, RegistrationType, TypeOfMeeting


class MeetingFilter(django_filters.FilterSet):
    """Filter for meetings"""
    type_of_meeting = django_filters.ChoiceFilter(field_name='type_of_meeting', choices=TypeOfMeeting.choices)
    registration_type = django_filters.ChoiceFilter(field_name='registration_type', choices=RegistrationType.choices)
    published = django_filters.BooleanFilter(method='filter_published')
    start_after = django_filters.DateTimeFilter(field_name='start_time', lookup_expr='gte')
    start_before = django_filters.DateTimeFilter(field_name='start_time', lookup_expr='lte')

    class Meta:
        model = Meeting
        fields = ['type_of_meeting', 'registration_type', 'published', 'start_after', 'start_before']

    def filter_published(self, queryset, name, value):
        return queryset.filter(published_at__isnull=not value)
