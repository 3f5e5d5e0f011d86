"""
Shared helpers for the JSON views: response envelope, body parsing,
auth/dealership decorators and dealership-scoped lookups.
"""
from __future__ import annotations

import json
from functools import wraps

from django.http import JsonResponse

from .exceptions import ApiError, AuthRequired, Forbidden, NotFoundError, ValidationFailed


def ok(data=None, status: int = 200, message: str | None = None, **extra) -> JsonResponse:
    payload = {"success": True}
    if data is not None:
        payload["data"] = data
    if message:
        payload["message"] = message
    payload.update(extra)
    return JsonResponse(payload, status=status)


def ok_list(rows: list, **extra) -> JsonResponse:
    return ok(rows, count=len(rows), **extra)


def error_response(message: str, status: int = 400, details=None) -> JsonResponse:
    payload = {"success": False, "error": message}
    if details:
        payload["details"] = details
    return JsonResponse(payload, status=status)


def read_json(request) -> dict:
    """
    Request payload as a dict. Multipart/form posts fall back to request.POST.
    """
    content_type = (request.content_type or "").lower()
    if content_type.startswith("multipart/") or content_type == "application/x-www-form-urlencoded":
        return request.POST.dict()

    if not request.body:
        return {}
    try:
        data = json.loads(request.body)
    except (TypeError, ValueError):
        raise ApiError("Invalid JSON body")
    if not isinstance(data, dict):
        raise ApiError("JSON body must be an object")
    return data


def api_login_required(view_func):
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        user = getattr(request, "user", None)
        if not user or not user.is_authenticated:
            raise AuthRequired()
        return view_func(request, *args, **kwargs)

    return _wrapped


def dealership_required(view_func):
    """
    Enforces: authenticated user with an active dealership on the request
    (set by DealershipMiddleware).
    """
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        user = getattr(request, "user", None)
        if not user or not user.is_authenticated:
            raise AuthRequired()
        if getattr(request, "dealership", None) is None:
            raise Forbidden("No active dealership selected.")
        return view_func(request, *args, **kwargs)

    return _wrapped


def parse_id(value, field: str = "id", label: str = "ID") -> int:
    """
    Coerce a client-supplied primary key. Raises ValidationFailed for
    anything that is not a whole number (booleans included).
    """
    if isinstance(value, bool):
        value = None
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationFailed(details={field: [f"{label} must be an integer"]})


def get_owned_or_404(model, request, pk, label: str | None = None, queryset=None):
    qs = queryset if queryset is not None else model.objects.all()
    obj = qs.filter(pk=parse_id(pk), dealership=request.dealership).first()
    if obj is None:
        raise NotFoundError(f"{label or model._meta.verbose_name.capitalize()} not found")
    return obj


def ensure_dealership_admin(request) -> None:
    """
    Raises Forbidden unless the user is an admin member of the active
    dealership. Superusers always pass.
    """
    from apps.dealerships.models import DealershipMembership

    if request.user.is_superuser:
        return
    if request.dealership.role_of(request.user) != DealershipMembership.ROLE_ADMIN:
        raise Forbidden("Admin access required.")
