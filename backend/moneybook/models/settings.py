from django.db import models

from moneybook.constants import Theme

from .base import AuditedModel
from .currency import Currency


class AppSettings(AuditedModel):
    """
    Singleton configuration row. The unique ``singleton`` marker lets the
    database reject a second row even when two requests race to create one.
    """

    SINGLETON_KEY = "default"
    THEME_CHOICES = Theme.CHOICES

    singleton = models.CharField(max_length=16, unique=True, default=SINGLETON_KEY, editable=False)
    default_currency = models.ForeignKey(Currency, on_delete=models.PROTECT, related_name="+")
    theme = models.CharField(max_length=5, choices=THEME_CHOICES, default=Theme.LIGHT)
    ai_enabled = models.BooleanField(default=True)

    class Meta:
        verbose_name = "settings"
        verbose_name_plural = "settings"

    def __str__(self):
        return f"Settings ({self.theme}, {self.default_currency_id})"
