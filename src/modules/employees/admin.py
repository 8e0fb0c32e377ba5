from django.contrib import admin

from modules.employees.models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ("id", "first_name", "last_name", "email", "department", "salary")
    search_fields = ("first_name", "last_name", "email")
    list_filter = ("department",)
    readonly_fields = ("created_at", "updated_at")
