from django.urls import path
from . import views

app_name = "sales"

urlpatterns = [
    path("", views.sale_collection, name="sale_collection"),
    path("<int:pk>/", views.sale_detail, name="sale_detail"),
    path("car/<int:car_id>/", views.sale_for_car, name="sale_for_car"),
]
