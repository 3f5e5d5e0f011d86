import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("dealerships", "0001_initial"),
        ("inventory", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="ServiceRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("service_date", models.DateField()),
                ("service_type", models.CharField(choices=[("repair", "Repair"), ("maintenance", "Maintenance"), ("wof", "WOF"), ("registration", "Registration"), ("other", "Other")], max_length=20)),
                ("description", models.CharField(max_length=200)),
                ("provider", models.CharField(blank=True, max_length=120)),
                ("cost", models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal("0"))])),
                ("notes", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("car", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="service_records", to="inventory.car")),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="created_service_records", to=settings.AUTH_USER_MODEL)),
                ("dealership", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="service_records", to="dealerships.dealership")),
            ],
            options={
                "ordering": ["-service_date", "-created_at"],
                "indexes": [
                    models.Index(fields=["dealership", "service_date"], name="svc_dealer_date_idx"),
                    models.Index(fields=["dealership", "car"], name="svc_dealer_car_idx"),
                ],
            },
        ),
    ]
