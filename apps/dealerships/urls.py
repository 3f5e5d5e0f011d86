from django.urls import path
from . import views

app_name = "dealerships"

urlpatterns = [
    path("", views.dealership_collection, name="collection"),
    path("<int:dealership_id>/select/", views.dealership_select, name="select"),
]
