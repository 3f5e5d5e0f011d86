import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("dealerships", "0001_initial"),
        ("inventory", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="PurchaseRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("purchase_date", models.DateField()),
                ("purchase_price", models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal("0"))])),
                ("seller_name", models.CharField(max_length=150)),
                ("seller_email", models.EmailField(blank=True, max_length=254)),
                ("seller_phone", models.CharField(max_length=30)),
                ("seller_address", models.CharField(blank=True, max_length=255)),
                ("seller_license_number", models.CharField(max_length=20)),
                ("seller_license_version", models.CharField(blank=True, max_length=10)),
                ("payment_method", models.CharField(choices=[("cash", "Cash"), ("bank_transfer", "Bank Transfer"), ("finance", "Finance"), ("trade_in", "Trade-in"), ("other", "Other")], max_length=20)),
                ("notes", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("car", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="purchase_record", to="inventory.car")),
                ("dealership", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="purchase_records", to="dealerships.dealership")),
            ],
            options={
                "ordering": ["-purchase_date", "-created_at"],
            },
        ),
    ]
