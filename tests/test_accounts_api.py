from django.test import Client

from apps.dealerships.models import Dealership, DealershipMembership


def test_health(client):
    body = client.get("/api/health/").json()
    assert body["success"] is True
    assert body["message"] == "Server is running"


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/does-not-exist/")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Route not found"}


def test_login_and_me(client, send, user, dealership):
    resp = send(client, "post", "/api/auth/login/", {"username": "admin", "password": "admin123"})
    assert resp.status_code == 200

    data = client.get("/api/auth/me/").json()["data"]
    assert data["username"] == "admin"
    assert data["dealership"]["id"] == dealership.id

    send(client, "post", "/api/auth/logout/")
    assert client.get("/api/auth/me/").status_code == 401


def test_login_failures(client, send, user):
    resp = send(client, "post", "/api/auth/login/", {"username": "admin", "password": "wrong"})
    assert resp.status_code == 401
    assert resp.json()["error"] == "Invalid username or password"

    resp = send(client, "post", "/api/auth/login/", {"username": "admin"})
    assert resp.status_code == 400


def test_api_requires_login(client, db):
    resp = client.get("/api/cars/")
    assert resp.status_code == 401
    assert resp.json()["success"] is False


def test_api_requires_dealership(db, django_user_model):
    loner = django_user_model.objects.create_user(username="loner", password="secret1")
    client = Client()
    client.force_login(loner)
    resp = client.get("/api/cars/")
    assert resp.status_code == 403
    assert resp.json()["error"] == "No active dealership selected."


def test_invalid_json_body(api):
    resp = api.post("/api/cars/", data="{not json", content_type="application/json")
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid JSON body"


def test_create_and_select_dealership(api, send, user, dealership):
    resp = send(api, "post", "/api/dealerships/", {"name": "Second Yard"})
    assert resp.status_code == 201
    new_id = resp.json()["data"]["id"]
    assert DealershipMembership.objects.get(dealership_id=new_id, user=user).role == "admin"

    assert send(api, "post", f"/api/dealerships/{new_id}/select/").status_code == 200
    assert api.get("/api/auth/me/").json()["data"]["dealership"]["id"] == new_id

    body = api.get("/api/dealerships/").json()
    assert body["count"] == 2
    assert body["current_dealership_id"] == new_id


def test_cannot_select_foreign_dealership(api, send, db):
    other = Dealership.objects.create(name="Not Mine")
    resp = send(api, "post", f"/api/dealerships/{other.id}/select/")
    assert resp.status_code in (403, 404)


def test_business_settings(api, send, dealership):
    data = api.get("/api/settings/").json()["data"]
    assert data["business_name"] == "Test Motors"

    resp = send(api, "put", "/api/settings/", {"business_address": "1 Queen St, Auckland"})
    assert resp.status_code == 200
    dealership.refresh_from_db()
    assert dealership.address == "1 Queen St, Auckland"
    assert dealership.name == "Test Motors"

    resp = send(api, "put", "/api/settings/", {"business_phone": ""})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Business name, phone, and email are required"


def test_settings_update_needs_admin(send, dealership, django_user_model):
    staff = django_user_model.objects.create_user(username="staff", password="secret1")
    DealershipMembership.objects.create(dealership=dealership, user=staff, role="user")
    client = Client()
    client.force_login(staff)
    assert client.get("/api/settings/").status_code == 200
    assert send(client, "put", "/api/settings/", {"business_name": "Hijack"}).status_code == 403


def test_change_password(api, send, user):
    resp = send(api, "put", "/api/settings/password/", {"currentPassword": "wrong", "newPassword": "newpass1"})
    assert resp.status_code == 401

    resp = send(api, "put", "/api/settings/password/", {"currentPassword": "admin123", "newPassword": "123"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "New password must be at least 6 characters"

    resp = send(api, "put", "/api/settings/password/", {"currentPassword": "admin123", "newPassword": "newpass1"})
    assert resp.status_code == 200
    user.refresh_from_db()
    assert user.check_password("newpass1")
    # session survives the password change
    assert api.get("/api/auth/me/").status_code == 200


def test_change_password_rejects_non_string(api, send, user):
    resp = send(api, "put", "/api/settings/password/", {"currentPassword": "admin123", "newPassword": 12345678})
    assert resp.status_code == 400
    user.refresh_from_db()
    assert user.check_password("admin123")


def test_stale_selection_falls_back_to_own_dealership(api, send, user, dealership):
    other_id = send(api, "post", "/api/dealerships/", {"name": "Second Yard"}).json()["data"]["id"]
    DealershipMembership.objects.filter(dealership_id=other_id, user=user).delete()

    assert api.get("/api/auth/me/").json()["data"]["dealership"]["id"] == dealership.id
    assert api.session["dealership_id"] == dealership.id


def test_superuser_without_membership_uses_oldest_dealership(db, django_user_model):
    first = Dealership.objects.create(name="First Yard")
    Dealership.objects.create(name="Later Yard")
    root = django_user_model.objects.create_superuser(username="root", password="secret1")
    client = Client()
    client.force_login(root)

    assert client.get("/api/auth/me/").json()["data"]["dealership"]["id"] == first.id
    assert client.get("/api/dealerships/").json()["count"] == 2


def test_dealership_slugs_are_unique(db):
    a = Dealership.objects.create(name="Kiwi Cars")
    b = Dealership.objects.create(name="Kiwi Cars!")
    assert a.slug == "kiwi-cars"
    assert b.slug == "kiwi-cars-2"
