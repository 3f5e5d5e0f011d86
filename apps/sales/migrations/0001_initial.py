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
            name="SaleRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("sale_date", models.DateField()),
                ("sale_price", models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal("0"))])),
                ("customer_name", models.CharField(max_length=150)),
                ("customer_email", models.EmailField(blank=True, max_length=254)),
                ("customer_phone", models.CharField(max_length=30)),
                ("customer_license_number", models.CharField(max_length=20)),
                ("customer_license_version", models.CharField(blank=True, max_length=10)),
                ("payment_method", models.CharField(choices=[("cash", "Cash"), ("bank_transfer", "Bank Transfer"), ("finance", "Finance"), ("trade_in", "Trade-in"), ("other", "Other")], max_length=20)),
                ("payment_status", models.CharField(choices=[("completed", "Completed"), ("pending", "Pending")], default="completed", max_length=20)),
                ("payment_notes", models.TextField(blank=True)),
                ("notes", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("car", models.OneToOneField(on_delete=django.db.models.deletion.PROTECT, related_name="sale", to="inventory.car")),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="created_sales", to=settings.AUTH_USER_MODEL)),
                ("dealership", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="sales", to="dealerships.dealership")),
            ],
            options={
                "ordering": ["-sale_date", "-created_at"],
                "indexes": [
                    models.Index(fields=["dealership", "sale_date"], name="sale_dealer_date_idx"),
                    models.Index(fields=["dealership", "customer_phone"], name="sale_dealer_phone_idx"),
                ],
            },
        ),
    ]
