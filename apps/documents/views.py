import logging

from django.conf import settings
from django.db import transaction
from django.views.decorators.http import require_http_methods

from apps.core.api import dealership_required, get_owned_or_404, ok, ok_list
from apps.core.exceptions import ApiError, ValidationFailed
from apps.inventory.models import Car
from apps.inventory.photos import IMAGE_CONTENT_TYPES, IMAGE_EXTENSIONS, check_upload

from .forms import CarDocumentForm
from .models import CarDocument

logger = logging.getLogger(__name__)

DOCUMENT_EXTENSIONS = IMAGE_EXTENSIONS | {".pdf"}
DOCUMENT_CONTENT_TYPES = IMAGE_CONTENT_TYPES | {"application/pdf"}


def serialize_document(d: CarDocument) -> dict:
    return {
        "id": d.id,
        "car_id": d.car_id,
        "document_type": d.document_type,
        "title": d.title,
        "file_url": d.file.url if d.file else None,
        "file_size": d.file_size,
        "mime_type": d.mime_type,
        "expiry_date": d.expiry_date,
        "uploaded_at": d.uploaded_at,
    }


def _metadata_form(request) -> CarDocumentForm:
    post = request.POST
    form = CarDocumentForm(data={
        "document_type": post.get("document_type") or post.get("documentType") or "",
        "expiry_date": post.get("expiry_date") or post.get("expiryDate") or "",
    })
    if not form.is_valid():
        raise ValidationFailed.from_form(form)
    return form


@dealership_required
@require_http_methods(["GET", "POST"])
def car_documents(request, car_id: int):
    car = get_owned_or_404(Car, request, car_id, label="Car")

    if request.method == "POST":
        return _upload(request, car)

    return ok_list([serialize_document(d) for d in car.documents.order_by("-uploaded_at")])


def _upload(request, car: Car):
    files = request.FILES.getlist("documents")
    if not files:
        raise ApiError("No files uploaded")
    if len(files) > settings.MAX_FILES_PER_UPLOAD:
        raise ApiError(f"At most {settings.MAX_FILES_PER_UPLOAD} files per upload")

    for f in files:
        check_upload(
            f, DOCUMENT_EXTENSIONS, DOCUMENT_CONTENT_TYPES,
            settings.CAR_DOCUMENT_MAX_BYTES, "images and PDF files",
        )

    meta = _metadata_form(request).cleaned_data

    created = []
    with transaction.atomic():
        for f in files:
            created.append(CarDocument.objects.create(
                dealership=request.dealership,
                car=car,
                document_type=meta["document_type"],
                expiry_date=meta.get("expiry_date"),
                title=f.name,
                file=f,
                file_size=f.size,
                mime_type=f.content_type or "",
            ))

    logger.info("Documents uploaded", extra={"car_id": car.id, "count": len(created)})
    return ok_list(
        [serialize_document(d) for d in created],
        status=201,
        message=f"{len(created)} document(s) uploaded successfully",
    )


@dealership_required
@require_http_methods(["DELETE"])
def document_delete(request, pk: int):
    doc = get_owned_or_404(CarDocument, request, pk, label="Document")
    storage, name = doc.file.storage, doc.file.name

    with transaction.atomic():
        doc.delete()
        if name:
            transaction.on_commit(lambda: storage.delete(name))
    return ok(message="Document deleted successfully")
