from django import forms
from django.utils import timezone

from apps.core.validators import validate_nz_plate
from .models import Car

class CarForm(forms.ModelForm):
    class Meta:
        model = Car
        fields = [
            "registration_plate", "vin",
            "year", "make", "model", "color", "odometer",
            "registration_expiry", "wof_expiry",
            "purchase_date", "purchase_price",
            "notes",
        ]

    def __init__(self, *args, dealership=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.dealership = dealership
        self.fields["registration_plate"].validators.append(validate_nz_plate)

    def clean_registration_plate(self):
        plate = (self.cleaned_data.get("registration_plate") or "").strip().upper()
        if plate and self.dealership is not None:
            dupes = Car.objects.filter(dealership=self.dealership, registration_plate=plate)
            if self.instance.pk:
                dupes = dupes.exclude(pk=self.instance.pk)
            if dupes.exists():
                raise forms.ValidationError("A car with this registration plate already exists")
        return plate

    def clean_year(self):
        year = self.cleaned_data.get("year")
        max_year = timezone.localdate().year + 1
        if year is not None and (year < 1900 or year > max_year):
            raise forms.ValidationError(f"Year must be between 1900 and {max_year}")
        return year
