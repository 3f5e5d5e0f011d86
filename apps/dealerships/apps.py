from django.apps import AppConfig


class DealershipsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.dealerships"
