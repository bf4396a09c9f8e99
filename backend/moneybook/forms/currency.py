from django import forms

from moneybook.constants import ISO_4217_CURRENCY_CODES

from .base import ListFilterForm, PartialUpdateForm


def _clean_code(value):
    code = (value or "").upper()
    if code and code not in ISO_4217_CURRENCY_CODES:
        raise forms.ValidationError("Invalid ISO 4217 currency code.")
    return code


class CurrencyCreateForm(forms.Form):
    code = forms.CharField(
        min_length=3,
        max_length=3,
        error_messages={
            "min_length": "Currency code must be exactly 3 characters.",
            "max_length": "Currency code must be exactly 3 characters.",
        },
    )
    symbol = forms.CharField(max_length=10)
    name = forms.CharField(max_length=100)
    exchange_rate = forms.DecimalField()

    def clean_code(self):
        return _clean_code(self.cleaned_data["code"])

    def clean_exchange_rate(self):
        rate = self.cleaned_data["exchange_rate"]
        if rate is not None and rate <= 0:
            raise forms.ValidationError("Exchange rate must be positive.")
        return rate


class CurrencyUpdateForm(PartialUpdateForm):
    code = forms.CharField(max_length=3)
    symbol = forms.CharField(max_length=10)
    name = forms.CharField(max_length=100)
    exchange_rate = forms.DecimalField()

    def clean_code(self):
        return _clean_code(self.cleaned_data["code"])

    def clean_exchange_rate(self):
        rate = self.cleaned_data["exchange_rate"]
        if rate is not None and rate <= 0:
            raise forms.ValidationError("Exchange rate must be positive.")
        return rate


class ExchangeRateForm(forms.Form):
    exchange_rate = forms.DecimalField()

    def clean_exchange_rate(self):
        rate = self.cleaned_data["exchange_rate"]
        if rate <= 0:
            raise forms.ValidationError("Exchange rate must be positive.")
        return rate


class CurrencyListForm(ListFilterForm):
    pass
