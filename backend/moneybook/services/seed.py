import logging

from django.db import transaction
from django.utils import timezone

from moneybook.constants import BASE_CURRENCY, DEFAULT_CATEGORIES
from moneybook.models import Category, Currency

from .settings import get_settings

logger = logging.getLogger(__name__)


def seed_defaults():
    """
    Create the base currency, the default categories and the settings row.
    Safe to run repeatedly: existing rows are left untouched.
    """
    with transaction.atomic():
        currency, currency_created = Currency.objects.get_or_create(
            code=BASE_CURRENCY["code"],
            defaults={
                "symbol": BASE_CURRENCY["symbol"],
                "name": BASE_CURRENCY["name"],
                "exchange_rate": BASE_CURRENCY["exchange_rate"],
                "last_updated": timezone.now(),
            },
        )
        if currency_created:
            logger.info("Created %s currency (%s)", currency.code, currency.pk)
        else:
            logger.info("%s currency already exists (%s)", currency.code, currency.pk)

        created = 0
        skipped = 0
        for entry in DEFAULT_CATEGORIES:
            if Category.objects.filter(name__iexact=entry["name"], type=entry["type"]).exists():
                skipped += 1
                continue
            Category.objects.create(**entry)
            created += 1
        logger.info("Created %d categories, skipped %d existing", created, skipped)

        app_settings = get_settings()

    return {
        "currency": currency,
        "currency_created": currency_created,
        "categories_created": created,
        "categories_skipped": skipped,
        "settings": app_settings,
    }
