import django_filters
from django.db.models import Q

from .constants import PROJECT_STATUS_CHOICES
from .models import Order


class OrderFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(field_name="project_status", choices=PROJECT_STATUS_CHOICES)

    class Meta:
        model = Order
        fields = ["status"]


class FreelancerOrderFilter(OrderFilter):
    q = django_filters.CharFilter(method="search")

    class Meta(OrderFilter.Meta):
        fields = ["status", "q"]

    def search(self, queryset, name, value):
        value = value.strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(client_email__icontains=value)
            | Q(order_number__icontains=value)
            | Q(plan_type__icontains=value)
        )
