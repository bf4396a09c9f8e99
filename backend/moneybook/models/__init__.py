from .currency import Currency
from .settings import AppSettings
from .category import Category
from .account import Account
from .payee import Payee

__all__ = [
    "Currency",
    "AppSettings",
    "Category",
    "Account",
    "Payee",
]
