from django.views.decorators.http import require_GET

from .api import error_response, ok


@require_GET
def health(request):
    return ok(message="Server is running")


def not_found(request, exception=None):
    return error_response("Route not found", status=404)


def server_error(request):
    return error_response("Internal server error", status=500)
