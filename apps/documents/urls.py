from django.urls import path
from . import views

app_name = "documents"

urlpatterns = [
    path("car/<int:car_id>/", views.car_documents, name="car_documents"),
    path("<int:pk>/", views.document_delete, name="document_delete"),
]
