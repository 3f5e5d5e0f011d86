from datetime import timedelta
from decimal import Decimal

from django.utils import timezone

from apps.inventory.models import Car
from apps.service_records.models import ServiceRecord


def car_payload(**overrides):
    data = {
        "registration_plate": "xyz789",
        "make": "Mazda",
        "model": "Demio",
        "year": 2015,
        "registration_expiry": "2030-01-01",
        "wof_expiry": "2030-01-01",
        "purchase_date": "2024-01-01",
        "purchase_price": "4500.00",
    }
    data.update(overrides)
    return data


def test_create_car_uppercases_plate(api, send, dealership):
    resp = send(api, "post", "/api/cars/", car_payload())
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert body["data"]["registration_plate"] == "XYZ789"
    assert body["data"]["status"] == "active"
    assert Car.objects.filter(dealership=dealership).count() == 1


def test_create_car_rejects_bad_plate(api, send):
    resp = send(api, "post", "/api/cars/", car_payload(registration_plate="NOT-A-PLATE"))
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert "registration_plate" in body["details"]


def test_duplicate_plate_rejected(api, send, make_car):
    make_car(registration_plate="XYZ789")
    resp = send(api, "post", "/api/cars/", car_payload())
    assert resp.status_code == 400
    assert "already exists" in resp.json()["details"]["registration_plate"][0]


def test_year_range(api, send):
    resp = send(api, "post", "/api/cars/", car_payload(year=1899))
    assert resp.status_code == 400
    assert "year" in resp.json()["details"]


def test_list_filters_by_status_and_search(api, make_car):
    make_car(make="Honda")
    make_car(make="Toyota", status=Car.STATUS_SOLD)

    body = api.get("/api/cars/?status=sold").json()
    assert body["count"] == 1
    assert body["data"][0]["make"] == "Toyota"

    body = api.get("/api/cars/?search=hond").json()
    assert body["count"] == 1
    assert body["data"][0]["make"] == "Honda"


def test_detail_includes_costs(api, make_car, dealership):
    car = make_car(purchase_price=Decimal("5000.00"))
    for cost in ("300.00", "200.00"):
        ServiceRecord.objects.create(
            dealership=dealership, car=car, service_date=timezone.localdate(),
            service_type="repair", description="Fix", cost=Decimal(cost),
        )

    data = api.get(f"/api/cars/{car.id}/").json()["data"]
    assert Decimal(data["costs"]["total_service_cost"]) == Decimal("500.00")
    assert Decimal(data["costs"]["total_cost"]) == Decimal("6565.00")
    assert data["profit"] is None
    assert data["days_in_stock"] == 10
    assert len(data["service_records"]) == 2


def test_partial_update_keeps_other_fields(api, send, make_car):
    car = make_car(color="Red")
    resp = send(api, "put", f"/api/cars/{car.id}/", {"odometer": 120000})
    assert resp.status_code == 200
    car.refresh_from_db()
    assert car.odometer == 120000
    assert car.color == "Red"
    assert car.make == "Toyota"


def test_update_cannot_change_status(api, send, make_car):
    car = make_car()
    send(api, "put", f"/api/cars/{car.id}/", {"status": "sold"})
    car.refresh_from_db()
    assert car.status == Car.STATUS_ACTIVE


def test_delete_active_car(api, make_car):
    car = make_car()
    resp = api.delete(f"/api/cars/{car.id}/")
    assert resp.status_code == 200
    assert not Car.objects.filter(pk=car.pk).exists()


def test_sold_car_cannot_be_deleted(api, make_car):
    car = make_car(status=Car.STATUS_SOLD)
    resp = api.delete(f"/api/cars/{car.id}/")
    assert resp.status_code == 400
    assert resp.json()["error"] == "Cannot delete a sold car. Delete the sale record first."
    assert Car.objects.filter(pk=car.pk).exists()


def test_other_dealership_car_is_not_found(api, db):
    from apps.dealerships.models import Dealership

    other = Dealership.objects.create(name="Other Yard")
    car = Car.objects.create(
        dealership=other, registration_plate="OTH1", make="Ford", model="Focus", year=2012,
        registration_expiry=timezone.localdate(), wof_expiry=timezone.localdate(),
        purchase_date=timezone.localdate() - timedelta(days=1), purchase_price=Decimal("100"),
    )
    resp = api.get(f"/api/cars/{car.id}/")
    assert resp.status_code == 404
    assert resp.json()["error"] == "Car not found"
