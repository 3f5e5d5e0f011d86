from django.db import models

class Customer(models.Model):
    dealership = models.ForeignKey("dealerships.Dealership", on_delete=models.CASCADE, related_name="customers")

    name = models.CharField(max_length=150)
    email = models.EmailField(blank=True)
    phone = models.CharField(max_length=30)
    address = models.CharField(max_length=255, blank=True)
    license_number = models.CharField(max_length=20, blank=True)
    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["dealership", "phone"], name="cust_dealer_phone_idx"),
        ]

    def __str__(self):
        return f"{self.name} ({self.phone})"
