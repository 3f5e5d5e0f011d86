import logging

from django.db import IntegrityError, transaction
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from apps.core.api import dealership_required, get_owned_or_404, ok, parse_id, read_json
from apps.core.exceptions import Conflict, NotFoundError, ValidationFailed
from apps.core.forms import bind_form, save_form
from apps.inventory.models import Car

from .forms import PurchaseRecordForm
from .models import PurchaseRecord

logger = logging.getLogger(__name__)


def serialize_purchase(p: PurchaseRecord) -> dict:
    return {
        "id": p.id,
        "car_id": p.car_id,
        "purchase_date": p.purchase_date,
        "purchase_price": p.purchase_price,
        "seller_name": p.seller_name,
        "seller_email": p.seller_email,
        "seller_phone": p.seller_phone,
        "seller_address": p.seller_address,
        "seller_license_number": p.seller_license_number,
        "seller_license_version": p.seller_license_version,
        "payment_method": p.payment_method,
        "notes": p.notes,
        "created_at": p.created_at,
    }


@dealership_required
@require_POST
def purchase_create(request):
    data = read_json(request)
    if data.get("car_id") in (None, ""):
        raise ValidationFailed(details={"car_id": ["Car ID is required"]})
    car_id = parse_id(data["car_id"], "car_id", "Car ID")

    car = get_owned_or_404(Car, request, car_id, label="Car")
    if PurchaseRecord.objects.filter(car=car).exists():
        raise Conflict("A purchase agreement already exists for this car")

    form = bind_form(PurchaseRecordForm, data)
    try:
        with transaction.atomic():
            purchase = save_form(form, dealership=request.dealership, car=car)
    except IntegrityError:
        raise Conflict("A purchase agreement already exists for this car")

    logger.info("Purchase agreement created", extra={"purchase_id": purchase.id, "car_id": car.id})
    return ok(serialize_purchase(purchase), status=201, message="Purchase agreement created successfully")


@dealership_required
@require_GET
def purchase_for_car(request, car_id: int):
    purchase = PurchaseRecord.objects.filter(dealership=request.dealership, car_id=car_id).first()
    if purchase is None:
        raise NotFoundError("No purchase record found for this car")
    return ok(serialize_purchase(purchase))


@dealership_required
@require_http_methods(["DELETE"])
def purchase_delete(request, pk: int):
    purchase = get_owned_or_404(PurchaseRecord, request, pk, label="Purchase record")
    purchase.delete()
    return ok(message="Purchase record deleted successfully")
