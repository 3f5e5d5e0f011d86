from django.urls import path
from . import views

app_name = "settings_app"

urlpatterns = [
    path("", views.business_settings, name="business_settings"),
    path("password/", views.change_password, name="change_password"),
]
