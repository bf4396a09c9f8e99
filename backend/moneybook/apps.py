from django.apps import AppConfig


class MoneybookConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "moneybook"
    verbose_name = "Moneybook"
