from django.contrib import admin
from .models import ActivityNote

@admin.register(ActivityNote)
class ActivityNoteAdmin(admin.ModelAdmin):
    list_display = ("created_at", "dealership", "car", "note", "created_by")
    list_filter = ("dealership",)
    search_fields = ("note", "car__registration_plate")
