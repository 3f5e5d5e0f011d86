import logging
import time

from django.core.exceptions import PermissionDenied
from django.http import Http404

from .api import error_response
from .exceptions import ApiError

logger = logging.getLogger("apps.request")


class RequestLogMiddleware:
    """
    One log line per request: method, path, status, duration.
    """
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        response = self.get_response(request)
        elapsed_ms = round((time.monotonic() - started) * 1000, 1)

        logger.info(
            "%s %s -> %s (%sms)",
            request.method,
            request.get_full_path(),
            response.status_code,
            elapsed_ms,
        )
        return response


class ApiErrorMiddleware:
    """
    Converts exceptions raised by API views into the JSON error envelope.
    """
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if isinstance(exception, ApiError):
            if exception.status >= 500:
                logger.error("API error on %s: %s", request.path, exception.message)
            return error_response(exception.message, status=exception.status, details=exception.details)

        if isinstance(exception, Http404):
            return error_response(str(exception) or "Not found", status=404)

        if isinstance(exception, PermissionDenied):
            return error_response(str(exception) or "Permission denied", status=403)

        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return error_response("Internal server error", status=500)
