from django.urls import path
from . import views

app_name = "purchases"

urlpatterns = [
    path("", views.purchase_create, name="purchase_create"),
    path("car/<int:car_id>/", views.purchase_for_car, name="purchase_for_car"),
    path("<int:pk>/", views.purchase_delete, name="purchase_delete"),
]
