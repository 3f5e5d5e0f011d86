from django.contrib import admin
from .models import Car

@admin.register(Car)
class CarAdmin(admin.ModelAdmin):
    list_display = ("registration_plate", "dealership", "year", "make", "model", "status", "purchase_date", "purchase_price")
    list_filter = ("dealership", "status", "make")
    search_fields = ("registration_plate", "vin", "make", "model")
