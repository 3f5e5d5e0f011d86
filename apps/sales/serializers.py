from apps.inventory.costing import compute_profit_summary, days_to_sell
from apps.inventory.queries import cost_summary_for
from .models import SaleRecord


def serialize_sale(sale: SaleRecord) -> dict:
    return {
        "id": sale.id,
        "car_id": sale.car_id,
        "sale_date": sale.sale_date,
        "sale_price": sale.sale_price,
        "customer_name": sale.customer_name,
        "customer_email": sale.customer_email,
        "customer_phone": sale.customer_phone,
        "customer_license_number": sale.customer_license_number,
        "customer_license_version": sale.customer_license_version,
        "payment_method": sale.payment_method,
        "payment_status": sale.payment_status,
        "payment_notes": sale.payment_notes,
        "notes": sale.notes,
        "created_at": sale.created_at,
        "updated_at": sale.updated_at,
    }


def sale_with_financials(sale: SaleRecord) -> dict:
    """
    Sale row plus the car it sold and the derived cost/profit figures.
    Expects car and car.service_records to be loaded (or loadable).
    """
    car = sale.car
    costs = cost_summary_for(car)
    profit = compute_profit_summary(costs, sale)

    row = serialize_sale(sale)
    row.update({
        "registration_plate": car.registration_plate,
        "make": car.make,
        "model": car.model,
        "year": car.year,
        "purchase_date": car.purchase_date,
        "purchase_price": costs.purchase_price,
        "total_service_cost": costs.total_service_cost,
        "total_cost": costs.total_cost,
        "profit": profit.profit,
        "margin": profit.margin,
        "days_to_sell": days_to_sell(car.purchase_date, sale.sale_date),
    })
    return row
