from django.views.decorators.http import require_http_methods

from apps.core.api import dealership_required, get_owned_or_404, ok, ok_list, read_json
from apps.core.exceptions import ValidationFailed
from apps.inventory.models import Car

from .models import ActivityNote


def serialize_note(n: ActivityNote) -> dict:
    return {
        "id": n.id,
        "car_id": n.car_id,
        "note": n.note,
        "created_at": n.created_at,
        "created_by": n.created_by.get_username() if n.created_by else None,
    }


def _note_text(request) -> str:
    text = (read_json(request).get("note") or "").strip()
    if not text:
        raise ValidationFailed(details={"note": ["Note text is required"]})
    return text


@dealership_required
@require_http_methods(["GET", "POST"])
def car_notes(request, car_id: int):
    car = get_owned_or_404(Car, request, car_id, label="Car")

    if request.method == "POST":
        note = ActivityNote.objects.create(
            dealership=request.dealership,
            car=car,
            note=_note_text(request),
            created_by=request.user,
        )
        return ok(serialize_note(note), status=201, message="Note added successfully")

    qs = car.activity_notes.select_related("created_by").order_by("-created_at")
    return ok_list([serialize_note(n) for n in qs])


@dealership_required
@require_http_methods(["GET", "PUT", "DELETE"])
def note_detail(request, pk: int):
    note = get_owned_or_404(ActivityNote, request, pk, label="Note")

    if request.method == "PUT":
        note.note = _note_text(request)
        note.save(update_fields=["note"])
        return ok(serialize_note(note), message="Note updated successfully")

    if request.method == "DELETE":
        data = serialize_note(note)
        note.delete()
        return ok(data, message="Note deleted successfully")

    return ok(serialize_note(note))
