from django import forms

from moneybook.constants import Theme

from .base import PartialUpdateForm


class SettingsUpdateForm(PartialUpdateForm):
    default_currency_id = forms.UUIDField()
    theme = forms.ChoiceField(choices=Theme.CHOICES)
    ai_enabled = forms.NullBooleanField()
