from django import forms
from .models import Customer

class CustomerForm(forms.ModelForm):
    class Meta:
        model = Customer
        fields = ["name", "email", "phone", "address", "license_number", "notes"]

    def clean_license_number(self):
        return (self.cleaned_data.get("license_number") or "").strip().upper()
