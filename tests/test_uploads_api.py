import os

from django.core.files.uploadedfile import SimpleUploadedFile

from apps.documents.models import CarDocument

PNG = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f"
    b"\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)


def png(name="front.png"):
    return SimpleUploadedFile(name, PNG, content_type="image/png")


def test_upload_reorder_cover_and_delete_photos(api, send, make_car, media_root):
    car = make_car()
    resp = api.post(f"/api/cars/{car.id}/photos/", {"photos": [png("a.png"), png("b.png")]})
    assert resp.status_code == 200
    photos = resp.json()["data"]["photos"]
    assert len(photos) == 2
    assert os.path.exists(os.path.join(media_root, "cars", photos[0]))

    resp = send(api, "put", f"/api/cars/{car.id}/photos/cover/", {"index": 1})
    assert resp.json()["data"]["photos"] == [photos[1], photos[0]]

    resp = send(api, "put", f"/api/cars/{car.id}/photos/reorder/", {"photos": photos})
    assert resp.json()["data"]["photos"] == photos

    resp = send(api, "put", f"/api/cars/{car.id}/photos/reorder/", {"photos": ["other.png"]})
    assert resp.status_code == 400

    resp = api.delete(f"/api/cars/{car.id}/photos/{photos[0]}/")
    assert resp.json()["data"]["photos"] == [photos[1]]
    assert not os.path.exists(os.path.join(media_root, "cars", photos[0]))


def test_photo_upload_rejects_non_images(api, make_car):
    car = make_car()
    bad = SimpleUploadedFile("notes.txt", b"hello", content_type="text/plain")
    resp = api.post(f"/api/cars/{car.id}/photos/", {"photos": [bad]})
    assert resp.status_code == 400
    car.refresh_from_db()
    assert car.photos == []


def test_cover_index_out_of_range(api, send, make_car):
    car = make_car()
    api.post(f"/api/cars/{car.id}/photos/", {"photos": [png()]})
    resp = send(api, "put", f"/api/cars/{car.id}/photos/cover/", {"index": 5})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid photo index"


def test_upload_and_delete_documents(api, make_car, django_capture_on_commit_callbacks):
    car = make_car()
    pdf = SimpleUploadedFile("agreement.pdf", b"%PDF-1.4 test", content_type="application/pdf")
    resp = api.post(f"/api/documents/car/{car.id}/", {
        "documents": [pdf, png("licence.png")],
        "documentType": "license",
        "expiryDate": "2030-06-30",
    })
    assert resp.status_code == 201
    body = resp.json()
    assert body["count"] == 2
    assert {d["title"] for d in body["data"]} == {"agreement.pdf", "licence.png"}

    doc = CarDocument.objects.get(title="agreement.pdf")
    assert doc.document_type == CarDocument.TYPE_LICENSE
    assert doc.expiry_date.isoformat() == "2030-06-30"
    path = doc.file.path
    assert os.path.exists(path)

    assert api.get(f"/api/documents/car/{car.id}/").json()["count"] == 2

    with django_capture_on_commit_callbacks(execute=True):
        assert api.delete(f"/api/documents/{doc.id}/").status_code == 200
    assert not os.path.exists(path)


def test_document_defaults_to_other(api, make_car):
    car = make_car()
    api.post(f"/api/documents/car/{car.id}/", {"documents": [png()]})
    assert CarDocument.objects.get().document_type == CarDocument.TYPE_OTHER


def test_document_too_large(api, make_car, settings):
    settings.CAR_DOCUMENT_MAX_BYTES = 10
    car = make_car()
    resp = api.post(f"/api/documents/car/{car.id}/", {"documents": [png()]})
    assert resp.status_code == 400
    assert not CarDocument.objects.exists()


def test_document_upload_requires_files(api, make_car):
    car = make_car()
    resp = api.post(f"/api/documents/car/{car.id}/", {})
    assert resp.status_code == 400
    assert resp.json()["error"] == "No files uploaded"


def test_deleting_car_removes_files(api, make_car, django_capture_on_commit_callbacks):
    car = make_car()
    api.post(f"/api/documents/car/{car.id}/", {"documents": [png()]})
    path = CarDocument.objects.get().file.path
    with django_capture_on_commit_callbacks(execute=True):
        assert api.delete(f"/api/cars/{car.id}/").status_code == 200
    assert not os.path.exists(path)


def test_reorder_rejects_non_string_entries(api, send, make_car):
    car = make_car()
    api.post(f"/api/cars/{car.id}/photos/", {"photos": [png()]})
    resp = send(api, "put", f"/api/cars/{car.id}/photos/reorder/", {"photos": [1, "a.jpg"]})
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_deleting_car_with_photos_removes_them(api, make_car, media_root, django_capture_on_commit_callbacks):
    car = make_car()
    name = api.post(f"/api/cars/{car.id}/photos/", {"photos": [png()]}).json()["data"]["photos"][0]
    path = os.path.join(media_root, "cars", name)

    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        assert api.delete(f"/api/cars/{car.id}/").status_code == 200
    assert len(callbacks) == 1
    assert not os.path.exists(path)


def test_refused_car_delete_keeps_files(api, send, make_car, media_root, django_capture_on_commit_callbacks):
    car = make_car()
    name = api.post(f"/api/cars/{car.id}/photos/", {"photos": [png()]}).json()["data"]["photos"][0]
    send(api, "post", "/api/sales/", {
        "car_id": car.id,
        "sale_date": "2024-03-01",
        "sale_price": "7000.00",
        "customer_name": "Jane Buyer",
        "customer_phone": "021234567",
        "customer_license_number": "AB123456",
        "payment_method": "cash",
    })

    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        resp = api.delete(f"/api/cars/{car.id}/")
    assert resp.status_code == 400
    assert callbacks == []
    assert os.path.exists(os.path.join(media_root, "cars", name))


def test_deleting_document_waits_for_commit(api, make_car, django_capture_on_commit_callbacks):
    car = make_car()
    api.post(f"/api/documents/car/{car.id}/", {"documents": [png()]})
    doc = CarDocument.objects.get()
    path = doc.file.path

    with django_capture_on_commit_callbacks(execute=False) as callbacks:
        assert api.delete(f"/api/documents/{doc.id}/").status_code == 200
    # row is gone but the file stays until the transaction commits
    assert not CarDocument.objects.exists()
    assert os.path.exists(path)

    for callback in callbacks:
        callback()
    assert not os.path.exists(path)
