from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

class ServiceRecord(models.Model):
    TYPE_REPAIR = "repair"
    TYPE_MAINTENANCE = "maintenance"
    TYPE_WOF = "wof"
    TYPE_REGISTRATION = "registration"
    TYPE_OTHER = "other"
    TYPE_CHOICES = [
        (TYPE_REPAIR, "Repair"),
        (TYPE_MAINTENANCE, "Maintenance"),
        (TYPE_WOF, "WOF"),
        (TYPE_REGISTRATION, "Registration"),
        (TYPE_OTHER, "Other"),
    ]

    dealership = models.ForeignKey(
        "dealerships.Dealership",
        on_delete=models.CASCADE,
        related_name="service_records",
    )
    car = models.ForeignKey(
        "inventory.Car",
        on_delete=models.CASCADE,
        related_name="service_records",
    )

    service_date = models.DateField()
    service_type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    description = models.CharField(max_length=200)
    provider = models.CharField(max_length=120, blank=True)

    cost = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal("0"))])

    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_service_records",
    )

    class Meta:
        ordering = ["-service_date", "-created_at"]
        indexes = [
            models.Index(fields=["dealership", "service_date"], name="svc_dealer_date_idx"),
            models.Index(fields=["dealership", "car"], name="svc_dealer_car_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.car} - {self.description} ({self.service_date})"
