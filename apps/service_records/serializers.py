from .models import ServiceRecord


def serialize_service_record(rec: ServiceRecord) -> dict:
    return {
        "id": rec.id,
        "car_id": rec.car_id,
        "service_date": rec.service_date,
        "service_type": rec.service_type,
        "description": rec.description,
        "cost": rec.cost,
        "provider": rec.provider,
        "notes": rec.notes,
        "created_at": rec.created_at,
    }
