from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, timedelta
from typing import List, Optional

from django.db.models import Q
from django.utils import timezone

from apps.inventory.costing import days_in_stock
from apps.inventory.models import Car

EXPIRY_WINDOW_DAYS = 30
AGING_THRESHOLD_DAYS = 60

STATUS_EXPIRED = "expired"
STATUS_EXPIRING_SOON = "expiring_soon"
STATUS_VALID = "valid"


@dataclass
class ExpiryAlert:
    car_id: int
    registration_plate: str
    make: str
    model: str
    year: int
    registration_expiry: date
    wof_expiry: date
    reg_status: str
    wof_status: str
    reg_days_until_expiry: int
    wof_days_until_expiry: int

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass
class AgingCar:
    car_id: int
    registration_plate: str
    make: str
    model: str
    year: int
    purchase_date: date
    purchase_price: object
    days_in_stock: int

    def as_dict(self) -> dict:
        return asdict(self)


def expiry_status(days_left: int, window: int = EXPIRY_WINDOW_DAYS) -> str:
    if days_left < 0:
        return STATUS_EXPIRED
    if days_left <= window:
        return STATUS_EXPIRING_SOON
    return STATUS_VALID


def expiry_alerts(dealership, today: Optional[date] = None) -> List[ExpiryAlert]:
    """
    Active cars whose registration or WOF has expired or falls due within
    the next 30 days, soonest registration expiry first.
    """
    today = today or timezone.localdate()
    horizon = today + timedelta(days=EXPIRY_WINDOW_DAYS)

    cars = (
        Car.objects
        .filter(dealership=dealership, status=Car.STATUS_ACTIVE)
        .filter(Q(registration_expiry__lte=horizon) | Q(wof_expiry__lte=horizon))
        .order_by("registration_expiry", "wof_expiry")
    )

    alerts: List[ExpiryAlert] = []
    for c in cars:
        reg_days = (c.registration_expiry - today).days
        wof_days = (c.wof_expiry - today).days
        alerts.append(ExpiryAlert(
            car_id=c.id,
            registration_plate=c.registration_plate,
            make=c.make,
            model=c.model,
            year=c.year,
            registration_expiry=c.registration_expiry,
            wof_expiry=c.wof_expiry,
            reg_status=expiry_status(reg_days),
            wof_status=expiry_status(wof_days),
            reg_days_until_expiry=reg_days,
            wof_days_until_expiry=wof_days,
        ))
    return alerts


def aging_stock(dealership, today: Optional[date] = None) -> List[AgingCar]:
    """Active cars held 60 days or more, oldest purchase first."""
    today = today or timezone.localdate()
    cutoff = today - timedelta(days=AGING_THRESHOLD_DAYS)

    cars = (
        Car.objects
        .filter(dealership=dealership, status=Car.STATUS_ACTIVE, purchase_date__lte=cutoff)
        .order_by("purchase_date", "id")
    )
    return [
        AgingCar(
            car_id=c.id,
            registration_plate=c.registration_plate,
            make=c.make,
            model=c.model,
            year=c.year,
            purchase_date=c.purchase_date,
            purchase_price=c.purchase_price,
            days_in_stock=days_in_stock(c.purchase_date, today),
        )
        for c in cars
    ]
