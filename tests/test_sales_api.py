from decimal import Decimal

from django.utils import timezone

from apps.inventory.models import Car
from apps.sales.models import SaleRecord


def sale_payload(car, **overrides):
    data = {
        "car_id": car.id,
        "sale_date": timezone.localdate().isoformat(),
        "sale_price": "8000.00",
        "customer_name": "Jane Buyer",
        "customer_phone": "021 234 5678",
        "customer_license_number": "ab123456",
        "payment_method": "cash",
    }
    data.update(overrides)
    return data


def test_sell_car_marks_it_sold(api, send, make_car):
    car = make_car()
    resp = send(api, "post", "/api/sales/", sale_payload(car))
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Car marked as sold successfully"
    assert body["data"]["customer_license_number"] == "AB123456"
    assert body["data"]["payment_status"] == "completed"

    car.refresh_from_db()
    assert car.status == Car.STATUS_SOLD


def test_cannot_sell_twice(api, send, make_car):
    car = make_car()
    send(api, "post", "/api/sales/", sale_payload(car))
    resp = send(api, "post", "/api/sales/", sale_payload(car))
    assert resp.status_code == 400
    assert resp.json()["error"] == "Car is already sold"
    assert SaleRecord.objects.filter(car=car).count() == 1


def test_sale_requires_car_id(api, send, make_car):
    car = make_car()
    payload = sale_payload(car)
    del payload["car_id"]
    resp = send(api, "post", "/api/sales/", payload)
    assert resp.status_code == 400
    assert "car_id" in resp.json()["details"]


def test_sale_for_unknown_car(api, send, make_car):
    car = make_car()
    resp = send(api, "post", "/api/sales/", sale_payload(car, car_id=99999))
    assert resp.status_code == 404
    assert resp.json()["error"] == "Car not found"


def test_invalid_license_leaves_car_active(api, send, make_car):
    car = make_car()
    resp = send(api, "post", "/api/sales/", sale_payload(car, customer_license_number="123"))
    assert resp.status_code == 400
    assert "customer_license_number" in resp.json()["details"]
    car.refresh_from_db()
    assert car.status == Car.STATUS_ACTIVE


def test_sale_detail_has_profit(api, send, make_car):
    car = make_car(purchase_price=Decimal("5000.00"))
    sale_id = send(api, "post", "/api/sales/", sale_payload(car)).json()["data"]["id"]

    data = api.get(f"/api/sales/{sale_id}/").json()["data"]
    assert Decimal(data["total_cost"]) == Decimal("6065.00")
    assert Decimal(data["profit"]) == Decimal("1935.00")
    assert data["days_to_sell"] == 10

    data = api.get(f"/api/sales/car/{car.id}/").json()["data"]
    assert data["id"] == sale_id


def test_delete_sale_returns_car_to_stock(api, send, make_car):
    car = make_car()
    sale_id = send(api, "post", "/api/sales/", sale_payload(car)).json()["data"]["id"]

    resp = api.delete(f"/api/sales/{sale_id}/")
    assert resp.status_code == 200
    assert resp.json()["message"] == "Sale cancelled and car returned to active inventory"

    car.refresh_from_db()
    assert car.status == Car.STATUS_ACTIVE
    assert api.get(f"/api/sales/car/{car.id}/").status_code == 404


def test_update_sale_price(api, send, make_car):
    car = make_car()
    sale_id = send(api, "post", "/api/sales/", sale_payload(car)).json()["data"]["id"]
    resp = send(api, "put", f"/api/sales/{sale_id}/", {"sale_price": "9000.00"})
    assert resp.status_code == 200
    sale = SaleRecord.objects.get(pk=sale_id)
    assert sale.sale_price == Decimal("9000.00")
    assert sale.customer_name == "Jane Buyer"


def test_list_sales(api, send, make_car):
    for _ in range(2):
        send(api, "post", "/api/sales/", sale_payload(make_car()))
    body = api.get("/api/sales/").json()
    assert body["count"] == 2


def test_non_numeric_car_id_is_a_validation_error(api, send, make_car):
    car = make_car()
    resp = send(api, "post", "/api/sales/", sale_payload(car, car_id="abc"))
    assert resp.status_code == 400
    assert resp.json()["details"] == {"car_id": ["Car ID must be an integer"]}
    car.refresh_from_db()
    assert car.status == Car.STATUS_ACTIVE
