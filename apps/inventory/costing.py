"""
Cost basis, profit and stock-age figures for cars.

Everything here works on values the caller has already fetched (model
instances or anything with the same attributes). Nothing in this module
queries the database, so one set of rows can be folded into per-car and
fleet-wide numbers without extra round trips.

Money is handled as Decimal and quantized to cents.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Mapping, Optional

from django.utils import timezone

from .models import Car

# Fixed per-car WOF fee (NZD)
WOF_FEE = Decimal("65.00")

# Flat for every car, whatever its purchase price.
MIN_MARGIN = Decimal("1000.00")

CENTS = Decimal("0.01")
MARGIN_PLACES = Decimal("0.0001")
ZERO = Decimal("0.00")


def to_money(value) -> Decimal:
    if value is None:
        return ZERO
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class CostSummary:
    purchase_price: Decimal
    total_service_cost: Decimal
    wof_fee: Decimal
    min_margin: Decimal
    total_cost: Decimal

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ProfitSummary:
    sale_price: Decimal
    total_cost: Decimal
    profit: Decimal
    margin: Optional[Decimal]

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class FleetStatistics:
    total_cars: int
    active_cars: int
    sold_cars: int
    total_revenue: Decimal
    total_purchase_costs: Decimal
    total_service_costs: Decimal
    total_costs: Decimal
    total_profit: Decimal
    average_profit: Decimal

    def as_dict(self) -> dict:
        return asdict(self)


def _sum_costs(expense_records: Iterable) -> Decimal:
    total = ZERO
    for rec in expense_records:
        total += to_money(getattr(rec, "cost", None))
    return total


def compute_cost_summary(vehicle, expense_records: Iterable) -> CostSummary:
    purchase_price = to_money(vehicle.purchase_price)
    total_service_cost = _sum_costs(expense_records)

    total_cost = purchase_price + total_service_cost + WOF_FEE + MIN_MARGIN

    return CostSummary(
        purchase_price=purchase_price,
        total_service_cost=total_service_cost,
        wof_fee=WOF_FEE,
        min_margin=MIN_MARGIN,
        total_cost=total_cost,
    )


def compute_profit_summary(cost_summary: CostSummary, sale_record) -> ProfitSummary:
    """
    Only meaningful for sold cars; callers check the sale exists first.
    margin is profit as a fraction of sale price, None when the sale price is 0.
    """
    sale_price = to_money(sale_record.sale_price)
    profit = sale_price - cost_summary.total_cost

    margin = None
    if sale_price > 0:
        margin = (profit / sale_price).quantize(MARGIN_PLACES, rounding=ROUND_HALF_UP)

    return ProfitSummary(
        sale_price=sale_price,
        total_cost=cost_summary.total_cost,
        profit=profit,
        margin=margin,
    )


def days_in_stock(purchase_date: date, reference_date: Optional[date] = None) -> int:
    """
    Whole days between purchase and reference date (today by default).
    Not clamped: a future purchase date gives a negative count.
    """
    if reference_date is None:
        reference_date = timezone.localdate()
    return (reference_date - purchase_date).days


def days_to_sell(purchase_date: date, sale_date: date) -> int:
    return days_in_stock(purchase_date, reference_date=sale_date)


def compute_fleet_statistics(
    vehicles: Iterable,
    expense_records_by_vehicle: Mapping[int, Iterable],
    sale_records_by_vehicle: Mapping[int, object],
) -> FleetStatistics:
    """
    Folds bulk-fetched cars, service records (grouped by car id) and sales
    (keyed by car id) into dashboard totals.
    """
    vehicles = list(vehicles)

    total_cars = len(vehicles)
    active_cars = 0
    sold_cars = 0
    total_purchase_costs = ZERO
    total_profit = ZERO

    for v in vehicles:
        total_purchase_costs += to_money(v.purchase_price)

        if v.status != Car.STATUS_SOLD:
            if v.status == Car.STATUS_ACTIVE:
                active_cars += 1
            continue

        sold_cars += 1
        sale = sale_records_by_vehicle.get(v.id)
        if sale is None:
            continue
        costs = compute_cost_summary(v, expense_records_by_vehicle.get(v.id, ()))
        total_profit += compute_profit_summary(costs, sale).profit

    total_revenue = ZERO
    for sale in sale_records_by_vehicle.values():
        total_revenue += to_money(sale.sale_price)

    total_service_costs = ZERO
    for records in expense_records_by_vehicle.values():
        total_service_costs += _sum_costs(records)

    average_profit = to_money(total_profit / sold_cars) if sold_cars else ZERO

    return FleetStatistics(
        total_cars=total_cars,
        active_cars=active_cars,
        sold_cars=sold_cars,
        total_revenue=total_revenue,
        total_purchase_costs=total_purchase_costs,
        total_service_costs=total_service_costs,
        total_costs=total_purchase_costs + total_service_costs,
        total_profit=total_profit,
        average_profit=average_profit,
    )
