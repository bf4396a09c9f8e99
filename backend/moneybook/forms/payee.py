from django import forms

from moneybook.constants import PayeeType

from .base import ListFilterForm, PartialUpdateForm


class PayeeCreateForm(forms.Form):
    name = forms.CharField(max_length=100)
    type = forms.ChoiceField(choices=PayeeType.CHOICES)
    default_category_id = forms.UUIDField(required=False)


class PayeeUpdateForm(PartialUpdateForm):
    name = forms.CharField(max_length=100)
    type = forms.ChoiceField(choices=PayeeType.CHOICES)
    default_category_id = forms.UUIDField()


class PayeeListForm(ListFilterForm):
    type = forms.ChoiceField(choices=PayeeType.CHOICES, required=False)
