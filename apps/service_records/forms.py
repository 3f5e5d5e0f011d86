from django import forms
from .models import ServiceRecord

class ServiceRecordForm(forms.ModelForm):
    class Meta:
        model = ServiceRecord
        fields = [
            "service_date",
            "service_type",
            "description",
            "cost",
            "provider",
            "notes",
        ]
