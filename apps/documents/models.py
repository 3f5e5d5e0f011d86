from django.db import models


class CarDocument(models.Model):
    TYPE_LICENSE = "license"
    TYPE_PAYMENT_CONFIRMATION = "payment_confirmation"
    TYPE_OTHER = "other"
    TYPE_CHOICES = [
        (TYPE_LICENSE, "Driver license"),
        (TYPE_PAYMENT_CONFIRMATION, "Payment confirmation"),
        (TYPE_OTHER, "Other"),
    ]

    dealership = models.ForeignKey("dealerships.Dealership", on_delete=models.CASCADE, related_name="car_documents")
    car = models.ForeignKey("inventory.Car", on_delete=models.CASCADE, related_name="documents")

    document_type = models.CharField(max_length=30, choices=TYPE_CHOICES, default=TYPE_OTHER)
    title = models.CharField(max_length=255, blank=True)

    file = models.FileField(upload_to="car_docs/%Y/%m/")
    file_size = models.PositiveIntegerField(default=0)
    mime_type = models.CharField(max_length=100, blank=True)
    expiry_date = models.DateField(null=True, blank=True)

    uploaded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-uploaded_at"]
        indexes = [
            models.Index(fields=["dealership", "car"], name="doc_dealer_car_idx"),
            models.Index(fields=["dealership", "expiry_date"], name="doc_dealer_expiry_idx"),
        ]

    def __str__(self):
        label = self.title or self.get_document_type_display()
        return f"{label} - {self.car}"
