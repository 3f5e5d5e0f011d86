import logging

from django.db import transaction
from django.views.decorators.http import require_http_methods, require_POST

from apps.core.api import api_login_required, ok, ok_list, read_json
from apps.core.exceptions import Forbidden, ValidationFailed
from .middleware import SESSION_KEY
from .models import Dealership, DealershipMembership

logger = logging.getLogger(__name__)


def serialize_dealership(d: Dealership, role: str | None = None) -> dict:
    row = {
        "id": d.id,
        "name": d.name,
        "slug": d.slug,
        "phone": d.phone,
        "email": d.email,
        "address": d.address,
    }
    if role is not None:
        row["role"] = role
    return row


@api_login_required
@require_http_methods(["GET", "POST"])
def dealership_collection(request):
    if request.method == "POST":
        return _dealership_create(request)

    roles = dict(
        DealershipMembership.objects
        .filter(user=request.user)
        .values_list("dealership_id", "role")
    )
    dealerships = Dealership.objects.accessible_by(request.user).order_by("name")

    current_id = request.session.get(SESSION_KEY)
    rows = [serialize_dealership(d, roles.get(d.id, "")) for d in dealerships]
    return ok_list(rows, current_dealership_id=current_id)


def _dealership_create(request):
    name = (read_json(request).get("name") or "").strip()
    if not name:
        raise ValidationFailed(details={"name": ["Name is required"]})
    if Dealership.objects.filter(name=name).exists():
        raise ValidationFailed(details={"name": ["A dealership with this name already exists"]})

    with transaction.atomic():
        dealership = Dealership.objects.create(name=name)
        DealershipMembership.objects.create(
            dealership=dealership,
            user=request.user,
            role=DealershipMembership.ROLE_ADMIN,
        )

    request.session[SESSION_KEY] = dealership.pk
    logger.info("Dealership created", extra={"dealership_id": dealership.id, "user_id": request.user.id})
    return ok(serialize_dealership(dealership, DealershipMembership.ROLE_ADMIN), status=201,
              message="Dealership created successfully")


@api_login_required
@require_POST
def dealership_select(request, dealership_id: int):
    dealership = Dealership.objects.accessible_by(request.user).filter(pk=dealership_id).first()
    if dealership is None:
        raise Forbidden("Not allowed to access this dealership.")

    request.session[SESSION_KEY] = dealership.pk
    return ok(serialize_dealership(dealership), message="Dealership selected")
