from django import forms

from apps.core.validators import validate_nz_license, validate_nz_phone
from .models import SaleRecord

class SaleRecordForm(forms.ModelForm):
    class Meta:
        model = SaleRecord
        fields = [
            "sale_date",
            "sale_price",
            "customer_name",
            "customer_email",
            "customer_phone",
            "customer_license_number",
            "customer_license_version",
            "payment_method",
            "payment_status",
            "payment_notes",
            "notes",
        ]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["payment_status"].required = False

    def clean_customer_license_number(self):
        value = (self.cleaned_data.get("customer_license_number") or "").strip().upper()
        validate_nz_license(value)
        return value

    def clean_customer_phone(self):
        value = (self.cleaned_data.get("customer_phone") or "").strip()
        validate_nz_phone(value)
        return value

    def clean_payment_status(self):
        return self.cleaned_data.get("payment_status") or SaleRecord.STATUS_COMPLETED
