from django import forms

from moneybook.constants import AccountType

from .base import ListFilterForm, PartialUpdateForm

BALANCE_LIMITS = {"min_value": -(2**63), "max_value": 2**63 - 1}
BALANCE_ERRORS = {"invalid": "Balance must be in cents (integer)."}


class AccountCreateForm(forms.Form):
    name = forms.CharField(max_length=100)
    type = forms.ChoiceField(choices=AccountType.CHOICES)
    currency_id = forms.UUIDField()
    initial_balance = forms.IntegerField(required=False, error_messages=BALANCE_ERRORS, **BALANCE_LIMITS)

    def clean_initial_balance(self):
        balance = self.cleaned_data["initial_balance"]
        return 0 if balance is None else balance


class AccountUpdateForm(PartialUpdateForm):
    name = forms.CharField(max_length=100)
    type = forms.ChoiceField(choices=AccountType.CHOICES)
    currency_id = forms.UUIDField()


class AccountBalanceForm(forms.Form):
    balance = forms.IntegerField(error_messages=BALANCE_ERRORS, **BALANCE_LIMITS)


class AccountListForm(ListFilterForm):
    type = forms.ChoiceField(choices=AccountType.CHOICES, required=False)
