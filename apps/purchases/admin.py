from django.contrib import admin
from .models import PurchaseRecord

@admin.register(PurchaseRecord)
class PurchaseRecordAdmin(admin.ModelAdmin):
    list_display = ("purchase_date", "dealership", "car", "seller_name", "purchase_price", "payment_method")
    list_filter = ("dealership", "payment_method")
    search_fields = ("seller_name", "seller_phone", "car__registration_plate")
