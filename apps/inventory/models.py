from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from apps.dealerships.models import Dealership

class Car(models.Model):
    STATUS_ACTIVE = "active"
    STATUS_SOLD = "sold"
    STATUS_CHOICES = [
        (STATUS_ACTIVE, "Active"),
        (STATUS_SOLD, "Sold"),
    ]

    dealership = models.ForeignKey(Dealership, on_delete=models.CASCADE, related_name="cars")

    registration_plate = models.CharField(max_length=20)
    vin = models.CharField(max_length=50, blank=True)

    year = models.PositiveIntegerField()
    make = models.CharField(max_length=80)
    model = models.CharField(max_length=80)
    color = models.CharField(max_length=40, blank=True)
    odometer = models.PositiveIntegerField(null=True, blank=True)

    registration_expiry = models.DateField()
    wof_expiry = models.DateField()

    purchase_date = models.DateField()
    purchase_price = models.DecimalField(
        max_digits=12, decimal_places=2, validators=[MinValueValidator(Decimal("0"))]
    )

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_ACTIVE)
    notes = models.TextField(blank=True)

    # Stored file names under MEDIA_ROOT; first entry is the cover photo.
    photos = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("-created_at",)
        constraints = [
            models.UniqueConstraint(fields=["dealership", "registration_plate"], name="car_unique_plate_per_dealer"),
        ]
        indexes = [
            models.Index(fields=["dealership", "status"], name="car_dealer_status_idx"),
            models.Index(fields=["dealership", "purchase_date"], name="car_dealer_purchase_idx"),
        ]

    @property
    def is_sold(self) -> bool:
        return self.status == self.STATUS_SOLD

    @property
    def label(self) -> str:
        mm = f"{self.year} {self.make} {self.model}".strip()
        return f"{self.registration_plate} ({mm})"

    def __str__(self):
        return self.label
