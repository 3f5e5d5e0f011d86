from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from apps.sales.models import PAYMENT_METHOD_CHOICES

class PurchaseRecord(models.Model):
    """
    Purchase agreement with the seller of a car taken into stock.
    """
    dealership = models.ForeignKey("dealerships.Dealership", on_delete=models.CASCADE, related_name="purchase_records")
    car = models.OneToOneField("inventory.Car", on_delete=models.CASCADE, related_name="purchase_record")

    purchase_date = models.DateField()
    purchase_price = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(Decimal("0"))])

    seller_name = models.CharField(max_length=150)
    seller_email = models.EmailField(blank=True)
    seller_phone = models.CharField(max_length=30)
    seller_address = models.CharField(max_length=255, blank=True)
    seller_license_number = models.CharField(max_length=20)
    seller_license_version = models.CharField(max_length=10, blank=True)

    payment_method = models.CharField(max_length=20, choices=PAYMENT_METHOD_CHOICES)
    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-purchase_date", "-created_at"]

    def __str__(self):
        return f"{self.car} bought from {self.seller_name} ({self.purchase_date})"
