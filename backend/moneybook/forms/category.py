from django import forms

from moneybook.constants import CATEGORY_ICONS, HEX_COLOR_PATTERN, CategoryType

from .base import ListFilterForm, PartialUpdateForm

COLOR_ERROR = "Color must be a valid hex color (e.g., #FF5733)."


def _clean_icon(value):
    if value and value not in CATEGORY_ICONS:
        raise forms.ValidationError(f"'{value}' is not an available icon.")
    return value


class CategoryCreateForm(forms.Form):
    name = forms.CharField(max_length=100)
    type = forms.ChoiceField(choices=CategoryType.CHOICES)
    color = forms.RegexField(regex=HEX_COLOR_PATTERN, error_messages={"invalid": COLOR_ERROR})
    icon = forms.CharField(max_length=50)
    parent_id = forms.UUIDField(required=False)

    def clean_icon(self):
        return _clean_icon(self.cleaned_data["icon"])


class CategoryUpdateForm(PartialUpdateForm):
    name = forms.CharField(max_length=100)
    type = forms.ChoiceField(choices=CategoryType.CHOICES)
    color = forms.RegexField(regex=HEX_COLOR_PATTERN, error_messages={"invalid": COLOR_ERROR})
    icon = forms.CharField(max_length=50)
    parent_id = forms.UUIDField()

    def clean_icon(self):
        return _clean_icon(self.cleaned_data["icon"])


class CategoryListForm(ListFilterForm):
    type = forms.ChoiceField(choices=CategoryType.CHOICES, required=False)
