from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

PAYMENT_CASH = "cash"
PAYMENT_BANK_TRANSFER = "bank_transfer"
PAYMENT_FINANCE = "finance"
PAYMENT_TRADE_IN = "trade_in"
PAYMENT_OTHER = "other"
PAYMENT_METHOD_CHOICES = [
    (PAYMENT_CASH, "Cash"),
    (PAYMENT_BANK_TRANSFER, "Bank Transfer"),
    (PAYMENT_FINANCE, "Finance"),
    (PAYMENT_TRADE_IN, "Trade-in"),
    (PAYMENT_OTHER, "Other"),
]

class SaleRecord(models.Model):
    STATUS_COMPLETED = "completed"
    STATUS_PENDING = "pending"
    PAYMENT_STATUS_CHOICES = [
        (STATUS_COMPLETED, "Completed"),
        (STATUS_PENDING, "Pending"),
    ]

    dealership = models.ForeignKey("dealerships.Dealership", on_delete=models.CASCADE, related_name="sales")
    # One sale per car; the car's status mirrors whether this row exists.
    car = models.OneToOneField("inventory.Car", on_delete=models.PROTECT, related_name="sale")

    sale_date = models.DateField()
    sale_price = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(Decimal("0"))])

    customer_name = models.CharField(max_length=150)
    customer_email = models.EmailField(blank=True)
    customer_phone = models.CharField(max_length=30)
    customer_license_number = models.CharField(max_length=20)
    customer_license_version = models.CharField(max_length=10, blank=True)

    payment_method = models.CharField(max_length=20, choices=PAYMENT_METHOD_CHOICES)
    payment_status = models.CharField(max_length=20, choices=PAYMENT_STATUS_CHOICES, default=STATUS_COMPLETED)
    payment_notes = models.TextField(blank=True)
    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_sales",
    )

    class Meta:
        ordering = ["-sale_date", "-created_at"]
        indexes = [
            models.Index(fields=["dealership", "sale_date"], name="sale_dealer_date_idx"),
            models.Index(fields=["dealership", "customer_phone"], name="sale_dealer_phone_idx"),
        ]

    def __str__(self):
        return f"{self.car} sold {self.sale_date} ({self.sale_price})"
