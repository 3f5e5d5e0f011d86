from django.urls import path
from . import views

app_name = "inventory"

urlpatterns = [
    path("", views.car_collection, name="car_collection"),
    path("<int:pk>/", views.car_detail, name="car_detail"),

    path("<int:pk>/photos/", views.car_photos_upload, name="car_photos_upload"),
    path("<int:pk>/photos/reorder/", views.car_photos_reorder, name="car_photos_reorder"),
    path("<int:pk>/photos/cover/", views.car_photos_cover, name="car_photos_cover"),
    path("<int:pk>/photos/<str:filename>/", views.car_photo_delete, name="car_photo_delete"),
]
