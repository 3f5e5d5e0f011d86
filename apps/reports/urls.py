from django.urls import path
from . import views

app_name = "reports"

urlpatterns = [
    path("stats/", views.stats, name="stats"),
    path("profit-loss/", views.profit_loss, name="profit_loss"),
    path("expiry-alerts/", views.expiry_alerts_view, name="expiry_alerts"),
    path("aging-stock/", views.aging_stock_view, name="aging_stock"),
    path("monthly-sales/", views.monthly_sales, name="monthly_sales"),

    # CSV exports
    path("export/sales.csv", views.export_sales_csv, name="export_sales_csv"),
    path("export/inventory.csv", views.export_inventory_csv, name="export_inventory_csv"),

    # Excel exports
    path("export/sales.xlsx", views.export_sales_xlsx, name="export_sales_xlsx"),
    path("export/inventory.xlsx", views.export_inventory_xlsx, name="export_inventory_xlsx"),
]
