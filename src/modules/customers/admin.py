from django.contrib import admin

from modules.customers.models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "email", "phone", "created_at")
    search_fields = ("name", "email")
    readonly_fields = ("created_at", "updated_at")
    ordering = ("id",)
