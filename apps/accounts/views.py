import logging

from django.contrib.auth import authenticate, login, logout
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET, require_POST

from apps.core.api import api_login_required, ok, read_json
from apps.core.exceptions import ApiError
from apps.dealerships.views import serialize_dealership

logger = logging.getLogger(__name__)


def serialize_user(request) -> dict:
    user = request.user
    dealership = getattr(request, "dealership", None)
    return {
        "id": user.id,
        "username": user.get_username(),
        "email": user.email,
        "name": user.get_full_name(),
        "dealership": serialize_dealership(dealership) if dealership else None,
    }


@require_GET
@ensure_csrf_cookie
def csrf_view(request):
    return ok(message="CSRF cookie set")


@require_POST
def login_view(request):
    data = read_json(request)
    username = (data.get("username") or "").strip()
    password = data.get("password") or ""

    if not username or not password:
        raise ApiError("Username and password are required")

    user = authenticate(request, username=username, password=password)
    if user is None:
        logger.warning("Failed login", extra={"username": username})
        raise ApiError("Invalid username or password", status=401)

    login(request, user)
    return ok({"id": user.id, "username": user.get_username()}, message="Logged in")


@require_POST
def logout_view(request):
    logout(request)
    return ok(message="Logged out")


@api_login_required
@require_GET
def me_view(request):
    return ok(serialize_user(request))
