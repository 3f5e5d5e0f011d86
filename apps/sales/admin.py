from django.contrib import admin
from .models import SaleRecord

@admin.register(SaleRecord)
class SaleRecordAdmin(admin.ModelAdmin):
    list_display = ("sale_date", "dealership", "car", "sale_price", "customer_name", "payment_method", "payment_status")
    list_filter = ("dealership", "payment_method", "payment_status", "sale_date")
    search_fields = ("customer_name", "customer_phone", "customer_email", "car__registration_plate")
