import django_filters
from django.db import models
from django.utils import timezone
from datetime import datetime, time
import logging

logger = logging.getLogger(__name__)


class FlexibleDateTimeFilter(django_filters.DateTimeFilter):
    """
    A DateTimeFilter that intelligently handles date-only inputs.

    When a date-only value like "2025-11-11" is provided:
    - For 'gte'/'gt' lookups: Uses start of day (00:00:00)
    - For 'lte'/'lt' lookups: Uses end of day (23:59:59.999999)

    When a full datetime is provided (e.g., "2025-11-11T10:30:00Z"):
    - Uses the exact time as specified
    """

    def filter(self, qs, value):
        # A midnight value was most likely parsed from a date-only string
        if isinstance(value, datetime) and value.time() == time(0, 0, 0):
            if self.lookup_expr in ['lte', 'lt']:
                value = datetime.combine(value.date(), time.max)
                if timezone.is_naive(value):
                    value = timezone.make_aware(value)
                logger.debug(f"FlexibleDateTimeFilter: Adjusted {self.field_name}__{self.lookup_expr} to end of day: {value}")

        return super().filter(qs, value)


class BaseFilterSet(django_filters.FilterSet):
    """
    Base filter set with common filtering patterns.

    Automatically uses FlexibleDateTimeFilter for all DateTimeField filters,
    allowing date-only inputs like "2025-11-11" to work intuitively as full-day ranges.
    """

    updated_after = FlexibleDateTimeFilter(field_name='updated_at', lookup_expr='gte')
    updated_before = FlexibleDateTimeFilter(field_name='updated_at', lookup_expr='lte')

    @classmethod
    def filter_for_field(cls, field, field_name, lookup_expr='exact'):
        """
        Override filter_for_field to use FlexibleDateTimeFilter for DateTimeFields.
        This method is called by django-filters when auto-generating filters.
        """
        if isinstance(field, models.DateTimeField):
            return FlexibleDateTimeFilter(field_name=field_name, lookup_expr=lookup_expr)

        return super().filter_for_field(field, field_name, lookup_expr)

    class Meta:
        abstract = True


class ArchivingFilterSet(BaseFilterSet):
    """
    Filter set for models that support archiving.
    """

    include_archived = django_filters.BooleanFilter(method='filter_archived')

    def filter_archived(self, queryset, name, value):
        # Applied in filter_queryset, before the other filters narrow the rows
        return queryset

    def filter_queryset(self, queryset):
        """Swap in the unfiltered manager queryset when archived rows are requested"""
        if self.form.cleaned_data.get('include_archived'):
            queryset = queryset.model.objects.with_archived()
        return super().filter_queryset(queryset)

    class Meta:
        abstract = True
