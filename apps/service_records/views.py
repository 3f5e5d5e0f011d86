import logging

from django.views.decorators.http import require_http_methods

from apps.core.api import dealership_required, get_owned_or_404, ok, ok_list, read_json
from apps.core.forms import bind_form, save_form
from apps.inventory.models import Car

from .forms import ServiceRecordForm
from .models import ServiceRecord
from .serializers import serialize_service_record

logger = logging.getLogger(__name__)


@dealership_required
@require_http_methods(["GET", "POST"])
def car_service_records(request, car_id: int):
    car = get_owned_or_404(Car, request, car_id, label="Car")

    if request.method == "POST":
        form = bind_form(ServiceRecordForm, read_json(request))
        rec = save_form(
            form,
            dealership=request.dealership,
            car=car,
            created_by=request.user,
        )
        logger.info("Service record added", extra={"car_id": car.id, "service_record_id": rec.id})
        return ok(serialize_service_record(rec), status=201, message="Service record added successfully")

    qs = car.service_records.all().order_by("-service_date", "-created_at")
    return ok_list([serialize_service_record(r) for r in qs])


@dealership_required
@require_http_methods(["GET", "PUT", "DELETE"])
def service_record_detail(request, pk: int):
    rec = get_owned_or_404(ServiceRecord, request, pk, label="Service record")

    if request.method == "PUT":
        form = bind_form(ServiceRecordForm, read_json(request), instance=rec)
        rec = save_form(form)
        return ok(serialize_service_record(rec), message="Service record updated successfully")

    if request.method == "DELETE":
        rec.delete()
        return ok(message="Service record deleted successfully")

    return ok(serialize_service_record(rec))
