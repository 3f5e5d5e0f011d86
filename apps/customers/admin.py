from django.contrib import admin
from .models import Customer

@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ("name", "dealership", "phone", "email", "license_number", "created_at")
    list_filter = ("dealership",)
    search_fields = ("name", "phone", "email", "license_number")
