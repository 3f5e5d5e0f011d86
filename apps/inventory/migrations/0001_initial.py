import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("dealerships", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Car",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("registration_plate", models.CharField(max_length=20)),
                ("vin", models.CharField(blank=True, max_length=50)),
                ("year", models.PositiveIntegerField()),
                ("make", models.CharField(max_length=80)),
                ("model", models.CharField(max_length=80)),
                ("color", models.CharField(blank=True, max_length=40)),
                ("odometer", models.PositiveIntegerField(blank=True, null=True)),
                ("registration_expiry", models.DateField()),
                ("wof_expiry", models.DateField()),
                ("purchase_date", models.DateField()),
                ("purchase_price", models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal("0"))])),
                ("status", models.CharField(choices=[("active", "Active"), ("sold", "Sold")], default="active", max_length=20)),
                ("notes", models.TextField(blank=True)),
                ("photos", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("dealership", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="cars", to="dealerships.dealership")),
            ],
            options={
                "ordering": ("-created_at",),
                "indexes": [
                    models.Index(fields=["dealership", "status"], name="car_dealer_status_idx"),
                    models.Index(fields=["dealership", "purchase_date"], name="car_dealer_purchase_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("dealership", "registration_plate"), name="car_unique_plate_per_dealer"),
                ],
            },
        ),
    ]
