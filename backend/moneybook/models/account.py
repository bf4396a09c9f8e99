from django.db import models

from moneybook.constants import AccountType

from .base import AuditedModel
from .currency import Currency


class Account(AuditedModel):
    """
    Where money lives. ``balance`` is stored in minor units of ``currency`` and
    the currency is fixed once the account exists.
    """

    TYPE_CHOICES = AccountType.CHOICES

    name = models.CharField(max_length=100, unique=True)
    type = models.CharField(max_length=10, choices=TYPE_CHOICES)
    currency = models.ForeignKey(Currency, on_delete=models.PROTECT, related_name="accounts")
    balance = models.BigIntegerField(default=0)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name
