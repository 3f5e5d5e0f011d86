from django.apps import AppConfig


class ServiceRecordsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.service_records"
