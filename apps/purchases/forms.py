from django import forms
from .models import PurchaseRecord

class PurchaseRecordForm(forms.ModelForm):
    class Meta:
        model = PurchaseRecord
        fields = [
            "purchase_date",
            "purchase_price",
            "seller_name",
            "seller_email",
            "seller_phone",
            "seller_address",
            "seller_license_number",
            "seller_license_version",
            "payment_method",
            "notes",
        ]

    def clean_seller_license_number(self):
        return (self.cleaned_data.get("seller_license_number") or "").strip().upper()
