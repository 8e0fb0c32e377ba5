import django_filters

from modules.customers.models import Customer


class CustomerFilter(django_filters.FilterSet):
    email = django_filters.CharFilter(field_name="email", lookup_expr="iexact")
    last_name = django_filters.CharFilter(field_name="last_name", lookup_expr="icontains")
    city = django_filters.CharFilter(field_name="city", lookup_expr="icontains")
    state = django_filters.CharFilter(field_name="state", lookup_expr="iexact")

    class Meta:
        model = Customer
        fields = ["email", "last_name", "city", "state"]
