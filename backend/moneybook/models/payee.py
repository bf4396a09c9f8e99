from django.db import models

from moneybook.constants import PayeeType

from .base import AuditedModel
from .category import Category


class Payee(AuditedModel):
    TYPE_CHOICES = PayeeType.CHOICES

    name = models.CharField(max_length=100, unique=True)
    type = models.CharField(max_length=6, choices=TYPE_CHOICES)
    default_category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="payees",
    )

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return f"{self.name} ({self.type})"
