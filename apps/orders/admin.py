from django.contrib import admin
from .models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = (
        "order_number", "freelancer_name", "client_email", "plan_type", "price",
        "payment_status", "project_status", "created_at",
    )
    list_filter = ("payment_status", "project_status", "plan_type")
    search_fields = ("order_number", "client_email", "freelancer_name")
    readonly_fields = ("order_number", "requirements_snapshot", "created_at", "updated_at")
