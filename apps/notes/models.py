from django.conf import settings
from django.db import models

class ActivityNote(models.Model):
    dealership = models.ForeignKey("dealerships.Dealership", on_delete=models.CASCADE, related_name="activity_notes")
    car = models.ForeignKey("inventory.Car", on_delete=models.CASCADE, related_name="activity_notes")

    note = models.TextField()

    created_at = models.DateTimeField(auto_now_add=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="activity_notes",
    )

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.car}: {self.note[:40]}"
