import django_filters

from modules.employees.models import Employee


class EmployeeFilter(django_filters.FilterSet):
    email = django_filters.CharFilter(field_name="email", lookup_expr="iexact")
    last_name = django_filters.CharFilter(field_name="last_name", lookup_expr="icontains")
    department = django_filters.CharFilter(field_name="department", lookup_expr="iexact")
    min_salary = django_filters.NumberFilter(field_name="salary", lookup_expr="gte")
    max_salary = django_filters.NumberFilter(field_name="salary", lookup_expr="lte")

    class Meta:
        model = Employee
        fields = ["email", "last_name", "department", "min_salary", "max_salary"]
