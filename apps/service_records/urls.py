from django.urls import path
from . import views

app_name = "service_records"

urlpatterns = [
    path("car/<int:car_id>/", views.car_service_records, name="car_service_records"),
    path("<int:pk>/", views.service_record_detail, name="service_record_detail"),
]
