"""
Outbound records. Each entity serializes to a plain dict; accounts and payees
include the row they reference.
"""

from django.conf import settings

from moneybook.money import format_currency


def _timestamp(value):
    return value.isoformat() if value else None


def _audit(instance):
    return {
        "id": str(instance.pk),
        "archived": instance.archived,
        "created_at": _timestamp(instance.created_at),
        "updated_at": _timestamp(instance.updated_at),
    }


def serialize_currency(currency):
    return {
        **_audit(currency),
        "code": currency.code,
        "symbol": currency.symbol,
        "name": currency.name,
        "exchange_rate": str(currency.exchange_rate),
        "last_updated": _timestamp(currency.last_updated),
    }


def serialize_settings(app_settings):
    return {
        **_audit(app_settings),
        "default_currency_id": str(app_settings.default_currency_id),
        "default_currency": serialize_currency(app_settings.default_currency),
        "theme": app_settings.theme,
        "ai_enabled": app_settings.ai_enabled,
    }


def serialize_category(category):
    return {
        **_audit(category),
        "name": category.name,
        "type": category.type,
        "color": category.color,
        "icon": category.icon,
        "parent_category_id": str(category.parent_id) if category.parent_id else None,
    }


def serialize_account(account, locale=None):
    currency = account.currency
    return {
        **_audit(account),
        "name": account.name,
        "type": account.type,
        "currency_id": str(account.currency_id),
        "balance": account.balance,
        "balance_display": format_currency(
            account.balance,
            currency.code,
            locale or settings.MONEYBOOK_DEFAULT_LOCALE,
        ),
        "currency": {
            "id": str(currency.pk),
            "code": currency.code,
            "symbol": currency.symbol,
            "name": currency.name,
        },
    }


def serialize_payee(payee):
    category = payee.default_category
    return {
        **_audit(payee),
        "name": payee.name,
        "type": payee.type,
        "default_category_id": str(payee.default_category_id) if payee.default_category_id else None,
        "default_category": serialize_category(category) if category else None,
    }
