"""
Car photo storage. Photos live in default_storage under cars/ and the car
keeps an ordered list of their names (first = cover).
"""
from __future__ import annotations

import logging
import os
import uuid

from django.conf import settings
from django.core.files.storage import default_storage

from apps.core.exceptions import ApiError, NotFoundError
from .models import Car

logger = logging.getLogger(__name__)

PHOTO_DIR = "cars"
IMAGE_EXTENSIONS = {".jpeg", ".jpg", ".png", ".gif", ".webp"}
IMAGE_CONTENT_TYPES = {"image/jpeg", "image/png", "image/gif", "image/webp"}


def _photo_path(name: str) -> str:
    return f"{PHOTO_DIR}/{name}"


def photo_url(name: str) -> str:
    return default_storage.url(_photo_path(name))


def check_upload(f, extensions: set[str], content_types: set[str], max_bytes: int, kind: str) -> str:
    """
    Validates one uploaded file; returns its lower-cased extension.
    """
    ext = os.path.splitext(f.name or "")[1].lower()
    if ext not in extensions or (f.content_type or "").lower() not in content_types:
        raise ApiError(f"Only {kind} are allowed ({', '.join(sorted(e.lstrip('.') for e in extensions))})")
    if f.size > max_bytes:
        raise ApiError(f"File '{f.name}' exceeds the {max_bytes // (1024 * 1024)}MB limit")
    return ext


def add_photos(car: Car, files: list) -> list[str]:
    if not files:
        raise ApiError("No files uploaded")
    if len(files) > settings.MAX_FILES_PER_UPLOAD:
        raise ApiError(f"At most {settings.MAX_FILES_PER_UPLOAD} files per upload")

    exts = [
        check_upload(f, IMAGE_EXTENSIONS, IMAGE_CONTENT_TYPES, settings.CAR_PHOTO_MAX_BYTES, "image files")
        for f in files
    ]

    saved = []
    for f, ext in zip(files, exts):
        stored = default_storage.save(_photo_path(f"car-{uuid.uuid4().hex}{ext}"), f)
        saved.append(os.path.basename(stored))

    car.photos = list(car.photos or []) + saved
    car.save(update_fields=["photos", "updated_at"])
    logger.info("Photos uploaded", extra={"car_id": car.id, "count": len(saved)})
    return saved


def delete_photo(car: Car, name: str) -> None:
    photos = list(car.photos or [])
    if name not in photos:
        raise NotFoundError("Photo not found")

    path = _photo_path(name)
    if default_storage.exists(path):
        default_storage.delete(path)

    photos.remove(name)
    car.photos = photos
    car.save(update_fields=["photos", "updated_at"])


def remove_photo_files(names: list[str]) -> None:
    for name in names:
        path = _photo_path(name)
        if default_storage.exists(path):
            default_storage.delete(path)


def reorder_photos(car: Car, order: list) -> None:
    current = list(car.photos or [])
    if (
        not isinstance(order, list)
        or not all(isinstance(p, str) for p in order)
        or sorted(order) != sorted(current)
    ):
        raise ApiError("Photo order must contain exactly the car's existing photos")
    car.photos = order
    car.save(update_fields=["photos", "updated_at"])


def set_cover_photo(car: Car, index) -> None:
    photos = list(car.photos or [])
    if not photos:
        raise ApiError("No photos found")
    try:
        index = int(index)
    except (TypeError, ValueError):
        raise ApiError("Invalid photo index")
    if index < 0 or index >= len(photos):
        raise ApiError("Invalid photo index")

    cover = photos.pop(index)
    photos.insert(0, cover)
    car.photos = photos
    car.save(update_fields=["photos", "updated_at"])
