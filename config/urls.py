from django.contrib import admin
from django.conf import settings
from django.conf.urls.static import static
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),

    path("api/", include("apps.core.urls")),
    path("api/auth/", include("apps.accounts.urls")),
    path("api/dealerships/", include("apps.dealerships.urls")),

    path("api/cars/", include("apps.inventory.urls")),
    path("api/services/", include("apps.service_records.urls")),
    path("api/purchases/", include("apps.purchases.urls")),
    path("api/sales/", include("apps.sales.urls")),
    path("api/customers/", include("apps.customers.urls")),
    path("api/notes/", include("apps.notes.urls")),
    path("api/documents/", include("apps.documents.urls")),
    path("api/dashboard/", include("apps.reports.urls")),
    path("api/settings/", include("apps.settings_app.urls")),
]

handler404 = "apps.core.views.not_found"
handler500 = "apps.core.views.server_error"


if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
