from django.urls import path
from . import views

app_name = "notes"

urlpatterns = [
    path("car/<int:car_id>/", views.car_notes, name="car_notes"),
    path("<int:pk>/", views.note_detail, name="note_detail"),
]
