import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("dealerships", "0001_initial"),
        ("inventory", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="CarDocument",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("document_type", models.CharField(choices=[("license", "Driver license"), ("payment_confirmation", "Payment confirmation"), ("other", "Other")], default="other", max_length=30)),
                ("title", models.CharField(blank=True, max_length=255)),
                ("file", models.FileField(upload_to="car_docs/%Y/%m/")),
                ("file_size", models.PositiveIntegerField(default=0)),
                ("mime_type", models.CharField(blank=True, max_length=100)),
                ("expiry_date", models.DateField(blank=True, null=True)),
                ("uploaded_at", models.DateTimeField(auto_now_add=True)),
                ("car", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="documents", to="inventory.car")),
                ("dealership", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="car_documents", to="dealerships.dealership")),
            ],
            options={
                "ordering": ["-uploaded_at"],
                "indexes": [
                    models.Index(fields=["dealership", "car"], name="doc_dealer_car_idx"),
                    models.Index(fields=["dealership", "expiry_date"], name="doc_dealer_expiry_idx"),
                ],
            },
        ),
    ]
