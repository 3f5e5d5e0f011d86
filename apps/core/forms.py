from django.forms.models import model_to_dict

from .exceptions import ValidationFailed


def bind_form(form_class, payload: dict, instance=None, files=None, **kwargs):
    """
    Bind a ModelForm to a JSON payload. When editing, fields missing from the
    payload keep their stored value (partial update).
    """
    data = {}
    if instance is not None:
        fields = form_class._meta.fields
        data.update({k: v for k, v in model_to_dict(instance, fields=fields).items() if v is not None})
    data.update({k: v for k, v in payload.items() if v is not None})
    return form_class(data=data, files=files, instance=instance, **kwargs)


def save_form(form, commit: bool = True, **assign):
    """
    Validate and save; raises ValidationFailed with per-field messages.
    Extra keyword arguments are set on the instance before saving.
    """
    if not form.is_valid():
        raise ValidationFailed.from_form(form)
    obj = form.save(commit=False)
    for attr, value in assign.items():
        setattr(obj, attr, value)
    if commit:
        obj.save()
    return obj
