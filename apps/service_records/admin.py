from django.contrib import admin
from .models import ServiceRecord

@admin.register(ServiceRecord)
class ServiceRecordAdmin(admin.ModelAdmin):
    list_display = ("service_date", "dealership", "car", "service_type", "description", "provider", "cost")
    list_filter = ("dealership", "service_type", "service_date")
    search_fields = ("description", "provider", "car__registration_plate", "car__make", "car__model")
