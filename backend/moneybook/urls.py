from django.urls import path

from .views.accounts_views import (
    account_archive,
    account_balance,
    account_create,
    account_default_currency,
    account_deletable,
    account_detail,
    account_list,
    account_unarchive,
    account_update,
)
from .views.category_views import (
    category_archive,
    category_create,
    category_deletable,
    category_detail,
    category_list,
    category_unarchive,
    category_update,
)
from .views.currency_views import (
    currency_archive,
    currency_create,
    currency_default,
    currency_detail,
    currency_exchange_rate,
    currency_list,
    currency_unarchive,
    currency_update,
)
from .views.health_views import health
from .views.payee_views import (
    payee_archive,
    payee_create,
    payee_delete,
    payee_detail,
    payee_list,
    payee_unarchive,
    payee_update,
)
from .views.settings_views import settings_detail, settings_update

app_name = "moneybook"

urlpatterns = [
    path("health/", health, name="health"),
    path("currencies/", currency_list, name="currency_list"),
    path("currencies/default/", currency_default, name="currency_default"),
    path("currencies/create/", currency_create, name="currency_create"),
    path("currencies/<uuid:pk>/", currency_detail, name="currency_detail"),
    path("currencies/<uuid:pk>/update/", currency_update, name="currency_update"),
    path("currencies/<uuid:pk>/exchange-rate/", currency_exchange_rate, name="currency_exchange_rate"),
    path("currencies/<uuid:pk>/archive/", currency_archive, name="currency_archive"),
    path("currencies/<uuid:pk>/unarchive/", currency_unarchive, name="currency_unarchive"),
    path("settings/", settings_detail, name="settings_detail"),
    path("settings/update/", settings_update, name="settings_update"),
    path("categories/", category_list, name="category_list"),
    path("categories/create/", category_create, name="category_create"),
    path("categories/<uuid:pk>/", category_detail, name="category_detail"),
    path("categories/<uuid:pk>/update/", category_update, name="category_update"),
    path("categories/<uuid:pk>/deletable/", category_deletable, name="category_deletable"),
    path("categories/<uuid:pk>/archive/", category_archive, name="category_archive"),
    path("categories/<uuid:pk>/unarchive/", category_unarchive, name="category_unarchive"),
    path("accounts/", account_list, name="account_list"),
    path("accounts/default-currency/", account_default_currency, name="account_default_currency"),
    path("accounts/create/", account_create, name="account_create"),
    path("accounts/<uuid:pk>/", account_detail, name="account_detail"),
    path("accounts/<uuid:pk>/update/", account_update, name="account_update"),
    path("accounts/<uuid:pk>/balance/", account_balance, name="account_balance"),
    path("accounts/<uuid:pk>/deletable/", account_deletable, name="account_deletable"),
    path("accounts/<uuid:pk>/archive/", account_archive, name="account_archive"),
    path("accounts/<uuid:pk>/unarchive/", account_unarchive, name="account_unarchive"),
    path("payees/", payee_list, name="payee_list"),
    path("payees/create/", payee_create, name="payee_create"),
    path("payees/<uuid:pk>/", payee_detail, name="payee_detail"),
    path("payees/<uuid:pk>/update/", payee_update, name="payee_update"),
    path("payees/<uuid:pk>/archive/", payee_archive, name="payee_archive"),
    path("payees/<uuid:pk>/unarchive/", payee_unarchive, name="payee_unarchive"),
    path("payees/<uuid:pk>/delete/", payee_delete, name="payee_delete"),
]
