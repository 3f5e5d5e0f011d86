from django import forms
from apps.dealerships.models import Dealership

class BusinessSettingsForm(forms.ModelForm):
    """
    Dealership-scoped business details printed on paperwork.
    Editable: name, phone, email, address.
    Locked: slug and timestamps.
    """
    class Meta:
        model = Dealership
        fields = ["name", "phone", "email", "address"]
