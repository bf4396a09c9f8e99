from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse

from moneybook.models import Account

from .helpers import make_account, make_category, make_currency


class MasterDataAdminTests(TestCase):
    def setUp(self):
        self.user = get_user_model().objects.create_superuser(
            username="admin", email="admin@example.com", password="password"
        )
        self.client.force_login(self.user)

    def test_category_type_is_read_only(self):
        home = make_category(name="Home", icon="Home")
        response = self.client.post(
            reverse("admin:moneybook_category_change", args=[home.pk]),
            data={"name": "Home", "type": "Income", "color": "#8b5cf6", "icon": "Home", "parent": ""},
        )
        self.assertEqual(response.status_code, 302)
        home.refresh_from_db()
        self.assertEqual(home.type, "Expense")
        self.assertEqual(home.color, "#8b5cf6")

    def test_currency_code_and_archive_flag_are_read_only(self):
        eur = make_currency()
        make_account(eur)
        response = self.client.post(
            reverse("admin:moneybook_currency_change", args=[eur.pk]),
            data={"code": "USD", "symbol": "€", "name": "Euro", "exchange_rate": "1.000000", "archived": "on"},
        )
        self.assertEqual(response.status_code, 302)
        eur.refresh_from_db()
        self.assertEqual(eur.code, "EUR")
        self.assertFalse(eur.archived)

    def test_rate_change_refreshes_last_updated(self):
        usd = make_currency(code="USD", symbol="$", name="US Dollar", exchange_rate="1.08")
        before = usd.last_updated
        response = self.client.post(
            reverse("admin:moneybook_currency_change", args=[usd.pk]),
            data={"symbol": "$", "name": "US Dollar", "exchange_rate": "1.10"},
        )
        self.assertEqual(response.status_code, 302)
        usd.refresh_from_db()
        self.assertGreater(usd.last_updated, before)

    def test_account_needs_active_currency(self):
        usd = make_currency(code="USD", symbol="$", name="US Dollar", archived=True)
        response = self.client.post(
            reverse("admin:moneybook_account_add"),
            data={"name": "Travel", "type": "Bank", "currency": usd.pk, "balance": "0"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Cannot create account with archived currency.")
        self.assertFalse(Account.objects.exists())

    def test_account_currency_is_read_only(self):
        eur = make_currency()
        usd = make_currency(code="USD", symbol="$", name="US Dollar")
        account = make_account(eur)
        response = self.client.post(
            reverse("admin:moneybook_account_change", args=[account.pk]),
            data={"name": "Checking", "type": "Bank", "currency": usd.pk, "balance": "500"},
        )
        self.assertEqual(response.status_code, 302)
        account.refresh_from_db()
        self.assertEqual(account.currency, eur)
        self.assertEqual(account.balance, 500)

    def test_category_parent_rules(self):
        home = make_category(name="Home", icon="Home")
        rent = make_category(name="Rent", icon="Home", parent=home)
        salary = make_category(name="Salary", type="Income", icon="Wallet")

        response = self.client.post(
            reverse("admin:moneybook_category_change", args=[rent.pk]),
            data={"name": "Rent", "color": "#22c55e", "icon": "Home", "parent": salary.pk},
        )
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Parent category must have the same type (income/expense).")

        response = self.client.post(
            reverse("admin:moneybook_category_change", args=[home.pk]),
            data={"name": "Home", "color": "#22c55e", "icon": "Home", "parent": rent.pk},
        )
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Category cannot be nested under one of its own subcategories.")
        home.refresh_from_db()
        self.assertIsNone(home.parent)
