from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from apps.inventory.costing import (
    MIN_MARGIN,
    WOF_FEE,
    compute_cost_summary,
    compute_fleet_statistics,
    compute_profit_summary,
    days_in_stock,
    days_to_sell,
)


def car(id=1, price="5000", status="active", purchased=date(2024, 1, 1)):
    return SimpleNamespace(id=id, purchase_price=Decimal(price), status=status, purchase_date=purchased)


def expense(cost):
    return SimpleNamespace(cost=Decimal(cost))


def sale(price, sold=date(2024, 1, 31)):
    return SimpleNamespace(sale_price=Decimal(price), sale_date=sold)


def test_fixed_fees():
    assert WOF_FEE == Decimal("65.00")
    assert MIN_MARGIN == Decimal("1000.00")


def test_cost_summary_sums_expenses_and_fees():
    costs = compute_cost_summary(car(), [expense("300"), expense("200")])
    assert costs.total_service_cost == Decimal("500.00")
    assert costs.total_cost == Decimal("6565.00")


def test_cost_summary_without_expenses():
    costs = compute_cost_summary(car(price="1234.50"), [])
    assert costs.total_service_cost == Decimal("0")
    assert costs.total_cost == Decimal("1234.50") + WOF_FEE + MIN_MARGIN


def test_total_cost_never_below_purchase_price():
    for price in ("0", "0.01", "999999.99"):
        costs = compute_cost_summary(car(price=price), [expense("0")])
        assert costs.total_cost >= costs.purchase_price


def test_profit_and_margin():
    costs = compute_cost_summary(car(), [expense("300"), expense("200")])
    profit = compute_profit_summary(costs, sale("8000"))
    assert profit.profit == Decimal("1435.00")
    assert profit.margin == Decimal("0.1794")
    assert profit.profit == profit.sale_price - profit.total_cost


def test_loss_is_negative_profit():
    costs = compute_cost_summary(car(), [])
    profit = compute_profit_summary(costs, sale("5000"))
    assert profit.profit == Decimal("-1065.00")


def test_zero_sale_price_has_no_margin():
    costs = compute_cost_summary(car(), [])
    assert compute_profit_summary(costs, sale("0")).margin is None


def test_profit_is_deterministic():
    costs = compute_cost_summary(car(), [expense("12.34")])
    assert compute_profit_summary(costs, sale("9000")) == compute_profit_summary(costs, sale("9000"))


def test_days_in_stock_and_to_sell():
    assert days_in_stock(date(2024, 1, 1), date(2024, 1, 31)) == 30
    assert days_to_sell(date(2024, 1, 1), date(2024, 1, 31)) == 30
    assert days_in_stock(date(2024, 1, 1), date(2024, 1, 1)) == 0


def test_days_are_not_clamped():
    assert days_in_stock(date(2024, 2, 1), date(2024, 1, 31)) == -1


def test_fleet_statistics():
    cars = [car(1, "5000", "sold"), car(2, "4000", "sold"), car(3, "3000", "active")]
    expenses = {1: [expense("100")], 2: [], 3: [expense("50")]}
    sales = {1: sale("6565"), 2: sale("5465")}

    stats = compute_fleet_statistics(cars, expenses, sales)

    assert stats.total_cars == 3
    assert stats.active_cars == 1
    assert stats.sold_cars == 2
    assert stats.total_revenue == Decimal("12030.00")
    assert stats.total_purchase_costs == Decimal("12000.00")
    assert stats.total_service_costs == Decimal("150.00")
    assert stats.total_costs == Decimal("12150.00")
    # car 1: 6565 - (5000 + 100 + 1065) = 400; car 2: 5465 - (4000 + 1065) = 400
    assert stats.total_profit == Decimal("800.00")
    assert stats.average_profit == Decimal("400.00")


def test_fleet_statistics_without_sales():
    stats = compute_fleet_statistics([car(1)], {}, {})
    assert stats.sold_cars == 0
    assert stats.total_profit == Decimal("0")
    assert stats.average_profit == Decimal("0")


def test_fleet_statistics_empty():
    stats = compute_fleet_statistics([], {}, {})
    assert stats.total_cars == 0
    assert stats.total_costs == Decimal("0")


def test_fleet_profit_and_loss_average():
    cars = [car(1, "5000", "sold"), car(2, "5000", "sold")]
    sales = {1: sale("7065"), 2: sale("5865")}
    stats = compute_fleet_statistics(cars, {}, sales)
    assert stats.total_profit == Decimal("800.00")
    assert stats.average_profit == Decimal("400.00")
