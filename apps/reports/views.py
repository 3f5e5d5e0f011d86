from datetime import date, timedelta
from decimal import Decimal

from django.db.models import Count, Sum
from django.db.models.functions import Coalesce, TruncMonth
from django.utils import timezone
from django.views.decorators.http import require_GET

from apps.core.api import dealership_required, ok, ok_list
from apps.inventory.costing import compute_fleet_statistics, days_in_stock
from apps.inventory.models import Car
from apps.inventory.queries import fleet_rows
from apps.sales.models import SaleRecord
from apps.sales.serializers import sale_with_financials

from .alerts import aging_stock, expiry_alerts
from .exports import csv_response, xlsx_response


def months_before(day: date, months: int) -> date:
    """
    Same day-of-month `months` calendar months earlier. A day the target
    month lacks rolls over into the next month (2024-02-29 -> 2023-03-01).
    """
    total = day.year * 12 + (day.month - 1) - months
    year, month = divmod(total, 12)
    first = date(year, month + 1, 1)
    return first + timedelta(days=day.day - 1)


def _profit_loss_rows(dealership) -> list[dict]:
    sales = (
        SaleRecord.objects
        .filter(dealership=dealership)
        .select_related("car")
        .prefetch_related("car__service_records")
        .order_by("-sale_date", "-created_at")
    )
    rows = []
    for s in sales:
        full = sale_with_financials(s)
        rows.append({
            "car_id": s.car_id,
            "sale_id": s.id,
            "registration_plate": full["registration_plate"],
            "make": full["make"],
            "model": full["model"],
            "year": full["year"],
            "customer_name": s.customer_name,
            "customer_phone": s.customer_phone,
            "payment_method": s.payment_method,
            "payment_status": s.payment_status,
            "sale_date": s.sale_date,
            "purchase_price": full["purchase_price"],
            "service_costs": full["total_service_cost"],
            "total_cost": full["total_cost"],
            "sale_price": s.sale_price,
            "profit": full["profit"],
            "margin": full["margin"],
            "days_to_sell": full["days_to_sell"],
        })
    return rows


def _inventory_rows(dealership) -> list[dict]:
    today = timezone.localdate()
    rows = []
    for c in Car.objects.filter(dealership=dealership).order_by("-created_at"):
        rows.append({
            "car_id": c.id,
            "registration_plate": c.registration_plate,
            "make": c.make,
            "model": c.model,
            "year": c.year,
            "color": c.color,
            "odometer": c.odometer,
            "status": c.status,
            "purchase_date": c.purchase_date,
            "purchase_price": c.purchase_price,
            "registration_expiry": c.registration_expiry,
            "wof_expiry": c.wof_expiry,
            "days_in_stock": days_in_stock(c.purchase_date, today) if not c.is_sold else None,
        })
    return rows


@dealership_required
@require_GET
def stats(request):
    cars, expenses, sales = fleet_rows(request.dealership)
    return ok(compute_fleet_statistics(cars, expenses, sales).as_dict())


@dealership_required
@require_GET
def profit_loss(request):
    return ok_list(_profit_loss_rows(request.dealership))


@dealership_required
@require_GET
def expiry_alerts_view(request):
    return ok_list([a.as_dict() for a in expiry_alerts(request.dealership)])


@dealership_required
@require_GET
def aging_stock_view(request):
    return ok_list([a.as_dict() for a in aging_stock(request.dealership)])


@dealership_required
@require_GET
def monthly_sales(request):
    start_12m = months_before(timezone.localdate(), 12)
    monthly = (
        SaleRecord.objects
        .filter(dealership=request.dealership, sale_date__gte=start_12m)
        .annotate(m=TruncMonth("sale_date"))
        .values("m")
        .annotate(count=Count("id"), revenue=Coalesce(Sum("sale_price"), Decimal("0.00")))
        .order_by("-m")
    )
    rows = [
        {"month": row["m"].strftime("%Y-%m"), "count": row["count"], "revenue": row["revenue"]}
        for row in monthly
    ]
    return ok_list(rows)


# ---------------- EXPORTS ----------------

SALES_COLUMNS = [
    ("sale_date", "Sale Date"),
    ("registration_plate", "Plate"),
    ("make", "Make"),
    ("model", "Model"),
    ("year", "Year"),
    ("customer_name", "Customer"),
    ("customer_phone", "Phone"),
    ("payment_method", "Payment Method"),
    ("payment_status", "Payment Status"),
    ("purchase_price", "Purchase Price"),
    ("service_costs", "Service Costs"),
    ("total_cost", "Total Cost"),
    ("sale_price", "Sale Price"),
    ("profit", "Profit"),
    ("days_to_sell", "Days To Sell"),
]

INVENTORY_COLUMNS = [
    ("registration_plate", "Plate"),
    ("make", "Make"),
    ("model", "Model"),
    ("year", "Year"),
    ("color", "Color"),
    ("odometer", "Odometer"),
    ("status", "Status"),
    ("purchase_date", "Purchase Date"),
    ("purchase_price", "Purchase Price"),
    ("registration_expiry", "Registration Expiry"),
    ("wof_expiry", "WOF Expiry"),
    ("days_in_stock", "Days In Stock"),
]


def _table(rows: list[dict], columns, excel: bool = False) -> list[list]:
    out = []
    for row in rows:
        values = []
        for key, _ in columns:
            v = row.get(key)
            if excel and isinstance(v, Decimal):
                v = float(v)
            values.append(v)
        out.append(values)
    return out


@dealership_required
@require_GET
def export_sales_csv(request):
    rows = _profit_loss_rows(request.dealership)
    return csv_response("sales.csv", [k for k, _ in SALES_COLUMNS], _table(rows, SALES_COLUMNS))


@dealership_required
@require_GET
def export_sales_xlsx(request):
    rows = _profit_loss_rows(request.dealership)
    return xlsx_response(
        "sales.xlsx", "Sales", [h for _, h in SALES_COLUMNS], _table(rows, SALES_COLUMNS, excel=True)
    )


@dealership_required
@require_GET
def export_inventory_csv(request):
    rows = _inventory_rows(request.dealership)
    return csv_response("inventory.csv", [k for k, _ in INVENTORY_COLUMNS], _table(rows, INVENTORY_COLUMNS))


@dealership_required
@require_GET
def export_inventory_xlsx(request):
    rows = _inventory_rows(request.dealership)
    return xlsx_response(
        "inventory.xlsx", "Inventory", [h for _, h in INVENTORY_COLUMNS], _table(rows, INVENTORY_COLUMNS, excel=True)
    )
