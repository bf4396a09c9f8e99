from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinLengthValidator, MinValueValidator
from django.db import models
from django.utils import timezone

from moneybook.constants import ISO_4217_CURRENCY_CODES

from .base import AuditedModel


def validate_currency_code(value):
    if value not in ISO_4217_CURRENCY_CODES:
        raise ValidationError("Invalid ISO 4217 currency code.")


class Currency(AuditedModel):
    """
    A unit of account. ``exchange_rate`` is relative to the base currency.
    """

    code = models.CharField(
        max_length=3,
        unique=True,
        validators=[MinLengthValidator(3), validate_currency_code],
    )
    symbol = models.CharField(max_length=10)
    name = models.CharField(max_length=100)
    exchange_rate = models.DecimalField(
        max_digits=18,
        decimal_places=6,
        default=1,
        validators=[MinValueValidator(Decimal("0.000001"), "Exchange rate must be positive.")],
    )
    last_updated = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["code"]
        verbose_name_plural = "currencies"

    def __str__(self):
        return f"{self.code} ({self.symbol})"
