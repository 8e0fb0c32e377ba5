from django.contrib import admin

from modules.customers.models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ("id", "first_name", "last_name", "email", "city", "state", "created_at")
    search_fields = ("first_name", "last_name", "email")
    list_filter = ("state",)
    readonly_fields = ("created_at", "updated_at")
