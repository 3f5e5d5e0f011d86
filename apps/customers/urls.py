from django.urls import path
from . import views

app_name = "customers"

urlpatterns = [
    path("", views.customer_collection, name="customer_collection"),
    path("<int:pk>/", views.customer_detail, name="customer_detail"),
    path("<int:pk>/purchases/", views.customer_purchases, name="customer_purchases"),
]
