from .models import Car
from .photos import photo_url


def serialize_car(car: Car) -> dict:
    photos = list(car.photos or [])
    return {
        "id": car.id,
        "registration_plate": car.registration_plate,
        "make": car.make,
        "model": car.model,
        "year": car.year,
        "color": car.color,
        "odometer": car.odometer,
        "vin": car.vin,
        "registration_expiry": car.registration_expiry,
        "wof_expiry": car.wof_expiry,
        "purchase_date": car.purchase_date,
        "purchase_price": car.purchase_price,
        "status": car.status,
        "notes": car.notes,
        "photos": photos,
        "photo_urls": [photo_url(p) for p in photos],
        "created_at": car.created_at,
        "updated_at": car.updated_at,
    }
