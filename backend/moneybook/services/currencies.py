import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from moneybook import money
from moneybook.errors import ConflictError, InvalidStateError, NotFoundError, ParseError
from moneybook.models import AppSettings, Currency

from . import guards

logger = logging.getLogger(__name__)


def _rate(value):
    try:
        return money.normalize_rate(value)
    except ParseError as exc:
        raise ValidationError({"exchange_rate": [exc.message]}) from exc


def _code(value):
    return (value or "").strip().upper()


def list_currencies(include_archived=False):
    qs = Currency.objects.all()
    if not include_archived:
        qs = qs.filter(archived=False)
    return list(qs.order_by("code"))


def get_currency(currency_id):
    return guards.get_or_404(Currency, currency_id, "Currency")


def get_default_currency():
    """
    The base currency if it is active, otherwise the first active currency by code.
    """
    currency = Currency.objects.filter(code=settings.MONEYBOOK_BASE_CURRENCY, archived=False).first()
    if currency is None:
        currency = Currency.objects.filter(archived=False).order_by("code").first()
    if currency is None:
        raise NotFoundError(
            f"No currencies available. Please create {settings.MONEYBOOK_BASE_CURRENCY} currency first."
        )
    return currency


def create_currency(code, symbol, name, exchange_rate):
    code = _code(code)
    currency = Currency(
        code=code,
        symbol=(symbol or "").strip(),
        name=(name or "").strip(),
        exchange_rate=_rate(exchange_rate),
        last_updated=timezone.now(),
    )
    guards.validate_instance(currency)
    with transaction.atomic():
        if Currency.objects.filter(code=code).exists():
            raise ConflictError(f"Currency {code} already exists.", field="code")
        guards.save_unique(currency, field="code", message=f"Currency {code} already exists.")
    logger.info("Created currency %s (%s)", currency.code, currency.pk)
    return currency


def update_currency(currency_id, changes):
    """
    Change symbol, name or rate. The code is fixed; a new rate refreshes ``last_updated``.
    """
    with transaction.atomic():
        currency = guards.get_or_404(Currency.objects.select_for_update(), currency_id, "Currency")
        if "code" in changes:
            guards.reject_change(currency, {"code": _code(changes["code"])}, "code", "Currency code")

        fields = []
        for field in ("symbol", "name"):
            if field in changes:
                setattr(currency, field, (changes[field] or "").strip())
                fields.append(field)
        if "exchange_rate" in changes:
            rate = _rate(changes["exchange_rate"])
            if rate != currency.exchange_rate:
                currency.exchange_rate = rate
                currency.last_updated = timezone.now()
                fields.extend(["exchange_rate", "last_updated"])

        guards.validate_instance(currency)
        currency.save(update_fields=fields + ["updated_at"])
    logger.info("Updated currency %s fields=%s", currency.code, fields)
    return currency


def update_exchange_rate(currency_id, exchange_rate):
    rate = _rate(exchange_rate)
    with transaction.atomic():
        currency = guards.get_or_404(Currency.objects.select_for_update(), currency_id, "Currency")
        currency.exchange_rate = rate
        currency.last_updated = timezone.now()
        guards.validate_instance(currency)
        currency.save(update_fields=["exchange_rate", "last_updated", "updated_at"])
    logger.info("Exchange rate for %s set to %s", currency.code, rate)
    return currency


def archive_currency(currency_id):
    """
    Archive a currency nobody depends on: no active account and not the default in settings.
    """
    with transaction.atomic():
        currency = guards.get_or_404(Currency.objects.select_for_update(), currency_id, "Currency")
        if not currency.archived:
            in_use = currency.accounts.filter(archived=False).count()
            if in_use:
                logger.warning("Refused to archive currency %s: %d active accounts", currency.code, in_use)
                raise InvalidStateError(
                    f"Currency {currency.code} is used by {in_use} active account(s) and cannot be archived.",
                    reference_count=in_use,
                )
            if AppSettings.objects.filter(default_currency=currency).exists():
                logger.warning("Refused to archive currency %s: it is the default", currency.code)
                raise InvalidStateError(
                    f"Currency {currency.code} is the default currency in settings and cannot be archived."
                )
        if currency.set_archived(True):
            logger.info("Archived currency %s", currency.code)
    return currency


def unarchive_currency(currency_id):
    with transaction.atomic():
        currency = guards.get_or_404(Currency.objects.select_for_update(), currency_id, "Currency")
        if currency.set_archived(False):
            logger.info("Unarchived currency %s", currency.code)
    return currency
