import logging

from django.db import transaction
from django.db.models import Q
from django.views.decorators.http import require_http_methods

from apps.core.api import dealership_required, get_owned_or_404, ok, ok_list, read_json
from apps.core.exceptions import Conflict
from apps.core.forms import bind_form, save_form
from apps.sales.serializers import serialize_sale
from apps.service_records.serializers import serialize_service_record

from . import photos as car_photos
from .costing import compute_cost_summary, compute_profit_summary, days_in_stock, days_to_sell
from .forms import CarForm
from .models import Car
from .queries import sale_for
from .serializers import serialize_car

logger = logging.getLogger(__name__)


def _get_car(request, pk: int) -> Car:
    return get_owned_or_404(Car, request, pk, label="Car")


def _remove_car_files(photo_names: list[str], doc_files: list) -> None:
    car_photos.remove_photo_files(photo_names)
    for storage, name in doc_files:
        storage.delete(name)


def car_with_financials(car: Car) -> dict:
    data = serialize_car(car)

    services = list(car.service_records.all().order_by("-service_date", "-created_at"))
    costs = compute_cost_summary(car, services)
    sale = sale_for(car)

    data["service_records"] = [serialize_service_record(s) for s in services]
    data["sale"] = serialize_sale(sale) if sale else None
    data["costs"] = costs.as_dict()

    if sale is not None:
        data["profit"] = compute_profit_summary(costs, sale).as_dict()
        data["days_to_sell"] = days_to_sell(car.purchase_date, sale.sale_date)
    else:
        data["profit"] = None
        data["days_in_stock"] = days_in_stock(car.purchase_date)
    return data


@dealership_required
@require_http_methods(["GET", "POST"])
def car_collection(request):
    if request.method == "POST":
        form = bind_form(CarForm, read_json(request), dealership=request.dealership)
        car = save_form(form, dealership=request.dealership)
        logger.info("Car created", extra={"car_id": car.id, "dealership_id": request.dealership.id})
        return ok(serialize_car(car), status=201, message="Car added successfully")

    qs = Car.objects.filter(dealership=request.dealership)

    status = (request.GET.get("status") or "").strip()
    search = (request.GET.get("search") or request.GET.get("q") or "").strip()

    if status:
        qs = qs.filter(status=status)

    if search:
        qs = qs.filter(
            Q(registration_plate__icontains=search) |
            Q(make__icontains=search) |
            Q(model__icontains=search)
        )

    return ok_list([serialize_car(c) for c in qs.order_by("-created_at")])


@dealership_required
@require_http_methods(["GET", "PUT", "DELETE"])
def car_detail(request, pk: int):
    car = _get_car(request, pk)

    if request.method == "PUT":
        form = bind_form(CarForm, read_json(request), instance=car, dealership=request.dealership)
        car = save_form(form)
        return ok(serialize_car(car), message="Car updated successfully")

    if request.method == "DELETE":
        with transaction.atomic():
            # Lock the row so a sale cannot land between the check and the delete.
            car = Car.objects.select_for_update().get(pk=car.pk)
            if car.is_sold or sale_for(car) is not None:
                raise Conflict("Cannot delete a sold car. Delete the sale record first.")

            photo_names = list(car.photos or [])
            doc_files = [(d.file.storage, d.file.name) for d in car.documents.all() if d.file]
            car.delete()

            # Files go only after the rows are committed.
            transaction.on_commit(lambda: _remove_car_files(photo_names, doc_files))

        logger.info("Car deleted", extra={"car_id": pk, "dealership_id": request.dealership.id})
        return ok(message="Car deleted successfully")

    return ok(car_with_financials(car))


@dealership_required
@require_http_methods(["POST"])
def car_photos_upload(request, pk: int):
    car = _get_car(request, pk)
    saved = car_photos.add_photos(car, request.FILES.getlist("photos"))
    return ok(serialize_car(car), message=f"{len(saved)} photo(s) uploaded successfully")


@dealership_required
@require_http_methods(["DELETE"])
def car_photo_delete(request, pk: int, filename: str):
    car = _get_car(request, pk)
    car_photos.delete_photo(car, filename)
    return ok(serialize_car(car), message="Photo deleted successfully")


@dealership_required
@require_http_methods(["PUT"])
def car_photos_reorder(request, pk: int):
    car = _get_car(request, pk)
    car_photos.reorder_photos(car, read_json(request).get("photos"))
    return ok(serialize_car(car), message="Photos reordered successfully")


@dealership_required
@require_http_methods(["PUT"])
def car_photos_cover(request, pk: int):
    car = _get_car(request, pk)
    car_photos.set_cover_photo(car, read_json(request).get("index"))
    return ok(serialize_car(car), message="Cover photo updated successfully")
