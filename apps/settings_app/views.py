import logging

from django.contrib.auth import update_session_auth_hash
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.views.decorators.http import require_http_methods

from apps.core.api import dealership_required, ensure_dealership_admin, ok, read_json
from apps.core.exceptions import ApiError, ValidationFailed
from apps.core.forms import bind_form, save_form
from apps.dealerships.models import Dealership

from .forms import BusinessSettingsForm

logger = logging.getLogger(__name__)

# Accept the paperwork-style keys as well as the model field names.
FIELD_ALIASES = {
    "business_name": "name",
    "business_phone": "phone",
    "business_email": "email",
    "business_address": "address",
}


def serialize_settings(d: Dealership) -> dict:
    return {
        "dealership_id": d.id,
        "business_name": d.name,
        "business_phone": d.phone,
        "business_email": d.email,
        "business_address": d.address,
        "updated_at": d.updated_at,
    }


def _settings_payload(request) -> dict:
    data = {}
    for key, value in read_json(request).items():
        data[FIELD_ALIASES.get(key, key)] = value.strip() if isinstance(value, str) else value
    return data


@dealership_required
@require_http_methods(["GET", "PUT"])
def business_settings(request):
    dealership = request.dealership

    if request.method == "PUT":
        ensure_dealership_admin(request)

        form = bind_form(BusinessSettingsForm, _settings_payload(request), instance=dealership)
        if not form.is_valid():
            raise ValidationFailed.from_form(form)
        if not all(form.cleaned_data.get(f) for f in ("name", "phone", "email")):
            raise ApiError("Business name, phone, and email are required")

        dealership = save_form(form)
        logger.info("Business settings updated", extra={"dealership_id": dealership.id})
        return ok(serialize_settings(dealership), message="Settings updated successfully")

    return ok(serialize_settings(dealership))


@dealership_required
@require_http_methods(["PUT"])
def change_password(request):
    data = read_json(request)
    current = data.get("currentPassword") or data.get("current_password")
    new = data.get("newPassword") or data.get("new_password")

    if not current or not new:
        raise ApiError("Current password and new password are required")
    if not isinstance(current, str) or not isinstance(new, str):
        raise ApiError("Current password and new password must be strings")
    if len(new) < 6:
        raise ApiError("New password must be at least 6 characters")

    user = request.user
    if not user.check_password(current):
        raise ApiError("Current password is incorrect", status=401)

    try:
        validate_password(new, user)
    except ValidationError as e:
        raise ValidationFailed(details={"new_password": list(e.messages)})

    user.set_password(new)
    user.save(update_fields=["password"])
    update_session_auth_hash(request, user)

    logger.info("Password changed", extra={"user_id": user.id})
    return ok(message="Password changed successfully")
