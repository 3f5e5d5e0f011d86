"""
ORM reads that feed the costing functions. Each helper fetches what it
needs in bulk so callers never issue one query per car.
"""
from __future__ import annotations

from collections import defaultdict

from django.core.exceptions import ObjectDoesNotExist

from .costing import CostSummary, compute_cost_summary
from .models import Car


def sale_for(car: Car):
    try:
        return car.sale
    except ObjectDoesNotExist:
        return None


def cost_summary_for(car: Car) -> CostSummary:
    # Uses the prefetch cache when the caller did prefetch_related("service_records").
    return compute_cost_summary(car, car.service_records.all())


def fleet_rows(dealership):
    """
    Returns (cars, service records grouped by car id, sales keyed by car id)
    for one dealership, in three queries.
    """
    from apps.sales.models import SaleRecord
    from apps.service_records.models import ServiceRecord

    cars = list(
        Car.objects
        .filter(dealership=dealership)
        .only("id", "status", "purchase_price", "purchase_date")
    )

    expenses = defaultdict(list)
    for rec in ServiceRecord.objects.filter(dealership=dealership).only("id", "car_id", "cost"):
        expenses[rec.car_id].append(rec)

    sales = {
        s.car_id: s
        for s in SaleRecord.objects.filter(dealership=dealership).only("id", "car_id", "sale_price", "sale_date")
    }
    return cars, expenses, sales
