import logging

from django.db import transaction
from django.views.decorators.http import require_GET, require_http_methods

from apps.core.api import dealership_required, get_owned_or_404, ok, ok_list, parse_id, read_json
from apps.core.exceptions import Conflict, NotFoundError, ValidationFailed
from apps.core.forms import bind_form, save_form
from apps.inventory.models import Car

from .forms import SaleRecordForm
from .models import SaleRecord
from .serializers import sale_with_financials, serialize_sale

logger = logging.getLogger(__name__)


def _sales_qs(request):
    return (
        SaleRecord.objects
        .filter(dealership=request.dealership)
        .select_related("car")
        .prefetch_related("car__service_records")
    )


@dealership_required
@require_http_methods(["GET", "POST"])
def sale_collection(request):
    if request.method == "POST":
        return _sale_create(request)

    sales = _sales_qs(request).order_by("-sale_date", "-created_at")
    return ok_list([sale_with_financials(s) for s in sales])


def _sale_create(request):
    data = read_json(request)
    if data.get("car_id") in (None, ""):
        raise ValidationFailed(details={"car_id": ["Car ID is required"]})
    car_id = parse_id(data["car_id"], "car_id", "Car ID")

    form = bind_form(SaleRecordForm, data)
    if not form.is_valid():
        raise ValidationFailed.from_form(form)

    with transaction.atomic():
        car = (
            Car.objects
            .select_for_update()
            .filter(pk=car_id, dealership=request.dealership)
            .first()
        )
        if car is None:
            raise NotFoundError("Car not found")
        if car.is_sold or SaleRecord.objects.filter(car=car).exists():
            raise Conflict("Car is already sold")

        sale = save_form(
            form,
            dealership=request.dealership,
            car=car,
            created_by=request.user,
        )
        car.status = Car.STATUS_SOLD
        car.save(update_fields=["status", "updated_at"])

    logger.info("Sale recorded", extra={"sale_id": sale.id, "car_id": car.id, "dealership_id": request.dealership.id})
    return ok(serialize_sale(sale), status=201, message="Car marked as sold successfully")


@dealership_required
@require_http_methods(["GET", "PUT", "DELETE"])
def sale_detail(request, pk: int):
    sale = get_owned_or_404(SaleRecord, request, pk, label="Sale", queryset=_sales_qs(request))

    if request.method == "PUT":
        form = bind_form(SaleRecordForm, read_json(request), instance=sale)
        sale = save_form(form)
        return ok(serialize_sale(sale), message="Sale updated successfully")

    if request.method == "DELETE":
        with transaction.atomic():
            car = sale.car
            sale.delete()
            car.status = Car.STATUS_ACTIVE
            car.save(update_fields=["status", "updated_at"])

        logger.info("Sale cancelled", extra={"sale_id": pk, "car_id": car.id})
        return ok(message="Sale cancelled and car returned to active inventory")

    return ok(sale_with_financials(sale))


@dealership_required
@require_GET
def sale_for_car(request, car_id: int):
    sale = _sales_qs(request).filter(car_id=car_id).first()
    if sale is None:
        raise NotFoundError("No sale found for this car")
    return ok(sale_with_financials(sale))
