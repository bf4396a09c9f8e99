from .base import ListFilterForm, PartialUpdateForm, clean_payload
from .account import AccountBalanceForm, AccountCreateForm, AccountListForm, AccountUpdateForm
from .category import CategoryCreateForm, CategoryListForm, CategoryUpdateForm
from .currency import CurrencyCreateForm, CurrencyListForm, CurrencyUpdateForm, ExchangeRateForm
from .payee import PayeeCreateForm, PayeeListForm, PayeeUpdateForm
from .settings import SettingsUpdateForm

__all__ = [
    "ListFilterForm",
    "PartialUpdateForm",
    "clean_payload",
    "AccountBalanceForm",
    "AccountCreateForm",
    "AccountListForm",
    "AccountUpdateForm",
    "CategoryCreateForm",
    "CategoryListForm",
    "CategoryUpdateForm",
    "CurrencyCreateForm",
    "CurrencyListForm",
    "CurrencyUpdateForm",
    "ExchangeRateForm",
    "PayeeCreateForm",
    "PayeeListForm",
    "PayeeUpdateForm",
    "SettingsUpdateForm",
]
