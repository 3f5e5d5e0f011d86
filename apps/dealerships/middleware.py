from .models import Dealership

SESSION_KEY = "dealership_id"


def active_dealership(user, selected_id=None):
    """
    The dealership a request works in: the one chosen with
    /api/dealerships/<id>/select/ while the user may still use it,
    otherwise the user's default.
    """
    if not user.is_authenticated:
        return None
    if selected_id:
        chosen = Dealership.objects.accessible_by(user).filter(pk=selected_id).first()
        if chosen is not None:
            return chosen
    return Dealership.objects.default_for(user)


class DealershipMiddleware:
    """Sets request.dealership and keeps the session selection in step."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        user = getattr(request, "user", None)
        request.dealership = None

        if user is not None and user.is_authenticated:
            selected = request.session.get(SESSION_KEY)
            request.dealership = active_dealership(user, selected)
            if request.dealership is not None and request.dealership.pk != selected:
                request.session[SESSION_KEY] = request.dealership.pk

        return self.get_response(request)
