from django.contrib import admin
from .models import CarDocument

@admin.register(CarDocument)
class CarDocumentAdmin(admin.ModelAdmin):
    list_display = ("title", "document_type", "car", "dealership", "expiry_date", "uploaded_at")
    list_filter = ("dealership", "document_type")
    search_fields = ("title", "car__registration_plate")
