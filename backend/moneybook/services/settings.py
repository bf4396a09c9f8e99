"""
The application settings singleton.

There is exactly one ``AppSettings`` row. It is created lazily on first read
with the base currency (or the first active currency) as default.
"""

import logging

from django.conf import settings as django_settings
from django.db import transaction

from moneybook.errors import PreconditionError
from moneybook.models import AppSettings, Currency

from . import guards

logger = logging.getLogger(__name__)


def _load_settings():
    return (
        AppSettings.objects.select_related("default_currency")
        .filter(singleton=AppSettings.SINGLETON_KEY)
        .first()
    )


def _initial_currency():
    currency = Currency.objects.filter(code=django_settings.MONEYBOOK_BASE_CURRENCY, archived=False).first()
    if currency is None:
        currency = Currency.objects.filter(archived=False).order_by("code").first()
    if currency is None:
        raise PreconditionError("Cannot initialize settings: no currency available.")
    return currency


def get_settings():
    current = _load_settings()
    if current is not None:
        return current

    currency = _initial_currency()
    # get_or_create re-reads on IntegrityError, so concurrent first requests
    # all end up with the row that won the insert.
    current, created = AppSettings.objects.get_or_create(
        singleton=AppSettings.SINGLETON_KEY,
        defaults={"default_currency": currency},
    )
    if created:
        logger.info("Initialized settings with default currency %s", currency.code)
    return current


def update_settings(changes):
    with transaction.atomic():
        current = AppSettings.objects.select_for_update().get(pk=get_settings().pk)
        fields = []
        if changes.get("default_currency_id") is not None:
            current.default_currency = guards.resolve_reference(
                Currency,
                changes["default_currency_id"],
                not_found="Selected currency not found.",
                archived="Cannot set archived currency as default.",
                lock=True,
            )
            fields.append("default_currency")
        if changes.get("theme") is not None:
            current.theme = changes["theme"]
            fields.append("theme")
        if changes.get("ai_enabled") is not None:
            current.ai_enabled = changes["ai_enabled"]
            fields.append("ai_enabled")

        guards.validate_instance(current)
        current.save(update_fields=fields + ["updated_at"])
    logger.info("Updated settings fields=%s", fields)
    return current
