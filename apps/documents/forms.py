from django import forms
from .models import CarDocument

class CarDocumentForm(forms.ModelForm):
    """Metadata shared by every file in one upload."""

    class Meta:
        model = CarDocument
        fields = ["document_type", "expiry_date"]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["document_type"].required = False

    def clean_document_type(self):
        return self.cleaned_data.get("document_type") or CarDocument.TYPE_OTHER
