import json
from datetime import timedelta
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.test import Client
from django.utils import timezone

from apps.dealerships.models import Dealership, DealershipMembership
from apps.inventory.models import Car


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = str(tmp_path / "uploads")
    return settings.MEDIA_ROOT


@pytest.fixture
def user(db):
    return get_user_model().objects.create_user(
        username="admin", email="admin@example.co.nz", password="admin123"
    )


@pytest.fixture
def dealership(db, user):
    d = Dealership.objects.create(name="Test Motors", phone="021234567", email="sales@testmotors.co.nz")
    DealershipMembership.objects.create(dealership=d, user=user, role=DealershipMembership.ROLE_ADMIN)
    return d


@pytest.fixture
def api(user, dealership):
    client = Client()
    client.force_login(user)
    return client


@pytest.fixture
def send():
    """JSON request helper: send(client, "put", url, payload)."""
    def _send(client, method, url, payload=None):
        return getattr(client, method)(url, data=json.dumps(payload or {}), content_type="application/json")
    return _send


@pytest.fixture
def make_car(dealership):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        today = timezone.localdate()
        fields = {
            "dealership": dealership,
            "registration_plate": f"ABC{counter['n']}",
            "make": "Toyota",
            "model": "Corolla",
            "year": 2018,
            "registration_expiry": today + timedelta(days=200),
            "wof_expiry": today + timedelta(days=200),
            "purchase_date": today - timedelta(days=10),
            "purchase_price": Decimal("5000.00"),
        }
        fields.update(overrides)
        return Car.objects.create(**fields)

    return _make
