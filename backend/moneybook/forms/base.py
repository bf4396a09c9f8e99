from django import forms
from django.core.exceptions import ValidationError


def clean_payload(form_class, data):
    """
    Validate ``data`` with ``form_class`` and return the bound form, raising
    ``ValidationError`` with per-field messages when it does not validate.
    """
    form = form_class(data=data)
    if not form.is_valid():
        errors = {
            field: [entry["message"] for entry in entries]
            for field, entries in form.errors.get_json_data().items()
        }
        raise ValidationError(errors)
    return form


class PartialUpdateForm(forms.Form):
    """
    Update payloads carry only the fields being changed; every field is optional.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field in self.fields.values():
            field.required = False

    def changes(self):
        return {name: self.cleaned_data[name] for name in self.fields if name in self.data}


class ListFilterForm(forms.Form):
    include_archived = forms.BooleanField(required=False)

    def filters(self):
        filters = {"include_archived": self.cleaned_data["include_archived"]}
        if "type" in self.fields:
            filters["type"] = self.cleaned_data.get("type") or None
        return filters
