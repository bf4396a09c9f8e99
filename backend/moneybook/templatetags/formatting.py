from django import template
from django.conf import settings

from moneybook.money import format_currency

register = template.Library()


@register.filter
def money(value, currency=None):
    """
    Format integer minor units for display, e.g. ``{{ account.balance|money:"EUR" }}``.
    """
    if value is None or value == "":
        value = 0
    try:
        cents = int(value)
    except (TypeError, ValueError):
        return ""
    return format_currency(
        cents,
        currency or settings.MONEYBOOK_BASE_CURRENCY,
        settings.MONEYBOOK_DEFAULT_LOCALE,
    )
