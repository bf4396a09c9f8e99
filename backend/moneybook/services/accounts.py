import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction

from moneybook.errors import ConflictError, InvalidStateError
from moneybook.models import Account, AppSettings, Currency

from . import guards

logger = logging.getLogger(__name__)

MAX_BALANCE = 2**63 - 1
MIN_BALANCE = -(2**63)


def _balance(value, field="balance"):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError({field: ["Balance must be in cents (integer)."]})
    if not MIN_BALANCE <= value <= MAX_BALANCE:
        raise ValidationError({field: ["Balance is out of range."]})
    return value


def _ensure_unique_name(name, exclude=None):
    qs = Account.objects.filter(name=name)
    if exclude is not None:
        qs = qs.exclude(pk=exclude)
    if qs.exists():
        raise ConflictError(f"An account named '{name}' already exists.", field="name")


def list_accounts(type=None, include_archived=False):
    qs = Account.objects.select_related("currency")
    if type:
        qs = qs.filter(type=type)
    if not include_archived:
        qs = qs.filter(archived=False)
    return list(qs.order_by("name", "id"))


def get_account(account_id):
    return guards.get_or_404(Account.objects.select_related("currency"), account_id, "Account")


def get_default_currency_id():
    """
    Currency suggested for new accounts. Falls back to the base currency when
    settings have not been initialized yet, without creating them.
    """
    current = AppSettings.objects.filter(singleton=AppSettings.SINGLETON_KEY).first()
    if current is not None:
        return current.default_currency_id
    base = Currency.objects.filter(code=settings.MONEYBOOK_BASE_CURRENCY).first()
    return base.pk if base else None


def create_account(name, type, currency_id, initial_balance=0):
    name = (name or "").strip()
    balance = _balance(initial_balance, field="initial_balance")
    with transaction.atomic():
        currency = guards.resolve_reference(
            Currency,
            currency_id,
            not_found="Selected currency not found.",
            archived="Cannot create account with archived currency.",
            lock=True,
        )
        account = Account(name=name, type=type, currency=currency, balance=balance)
        guards.validate_instance(account)
        _ensure_unique_name(name)
        guards.save_unique(account, field="name", message=f"An account named '{name}' already exists.")
    logger.info("Created account %s in %s with balance %d", account.name, currency.code, balance)
    return account


def update_account(account_id, changes):
    """
    Rename or re-type an account. The currency is fixed once the account
    exists; balances move through ``update_account_balance``.
    """
    with transaction.atomic():
        account = guards.get_or_404(Account.objects.select_for_update(), account_id, "Account")
        guards.reject_change(account, changes, "currency_id", "Account currency")

        fields = []
        if "name" in changes:
            account.name = (changes["name"] or "").strip()
            _ensure_unique_name(account.name, exclude=account.pk)
            fields.append("name")
        if "type" in changes:
            account.type = changes["type"]
            fields.append("type")

        guards.validate_instance(account)
        guards.save_unique(
            account,
            field="name",
            message=f"An account named '{account.name}' already exists.",
            update_fields=fields + ["updated_at"],
        )
    logger.info("Updated account %s fields=%s", account.pk, fields)
    return account


def update_account_balance(account_id, balance):
    """
    Reconciliation: overwrite the stored balance with a counted figure.
    """
    balance = _balance(balance)
    with transaction.atomic():
        account = guards.get_or_404(Account.objects.select_for_update(), account_id, "Account")
        previous = account.balance
        account.balance = balance
        account.save(update_fields=["balance", "updated_at"])
    logger.info("Reconciled account %s balance %d -> %d", account.pk, previous, balance)
    return account


def check_account_deletable(account_id):
    return guards.check_deletable(get_account(account_id))


def archive_account(account_id):
    with transaction.atomic():
        account = guards.get_or_404(Account.objects.select_for_update(), account_id, "Account")
        if account.set_archived(True):
            logger.info("Archived account %s", account.name)
    return account


def unarchive_account(account_id):
    with transaction.atomic():
        account = guards.get_or_404(Account.objects.select_for_update(), account_id, "Account")
        if account.archived:
            currency = Currency.objects.select_for_update().get(pk=account.currency_id)
            if currency.archived:
                logger.warning("Refused to unarchive account %s: currency %s is archived", account.name, currency.code)
                raise InvalidStateError("Cannot unarchive account: its currency is archived.")
        if account.set_archived(False):
            logger.info("Unarchived account %s", account.name)
    return account
