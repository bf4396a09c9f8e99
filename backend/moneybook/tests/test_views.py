import json
import uuid

from django.test import TestCase
from django.urls import reverse

from moneybook.models import Account, Category, Currency, Payee

from .helpers import make_account, make_category, make_currency


class ApiTestCase(TestCase):
    def post_json(self, name, payload=None, htmx=False, **kwargs):
        extra = {"HTTP_HX_REQUEST": "true"} if htmx else {}
        return self.client.post(
            reverse(name, kwargs=kwargs or None),
            data=json.dumps(payload or {}),
            content_type="application/json",
            **extra,
        )


class CurrencyViewTests(ApiTestCase):
    def test_create_and_list(self):
        response = self.post_json(
            "moneybook:currency_create",
            {"code": "usd", "symbol": "$", "name": "US Dollar", "exchange_rate": "1.08"},
        )
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["code"], "USD")
        self.assertEqual(body["exchange_rate"], "1.080000")

        listing = self.client.get(reverse("moneybook:currency_list"))
        self.assertEqual([row["code"] for row in listing.json()["results"]], ["USD"])

    def test_form_encoded_create(self):
        response = self.client.post(
            reverse("moneybook:currency_create"),
            data={"code": "EUR", "symbol": "€", "name": "Euro", "exchange_rate": "1"},
        )
        self.assertEqual(response.status_code, 201)
        self.assertTrue(Currency.objects.filter(code="EUR").exists())

    def test_validation_errors_are_reported_per_field(self):
        response = self.post_json(
            "moneybook:currency_create",
            {"code": "EU", "symbol": "€", "name": "Euro", "exchange_rate": "-1"},
        )
        self.assertEqual(response.status_code, 400)
        error = response.json()["error"]
        self.assertEqual(error["code"], "VALIDATION_ERROR")
        self.assertEqual(error["fields"]["code"], ["Currency code must be exactly 3 characters."])
        self.assertIn("exchange_rate", error["fields"])

    def test_conflict(self):
        make_currency()
        response = self.post_json(
            "moneybook:currency_create",
            {"code": "EUR", "symbol": "€", "name": "Euro", "exchange_rate": "1"},
        )
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["error"], {
            "code": "CONFLICT",
            "message": "Currency EUR already exists.",
            "field": "code",
        })

    def test_immutable_code(self):
        eur = make_currency()
        response = self.post_json("moneybook:currency_update", {"code": "USD"}, pk=eur.pk)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"]["code"], "IMMUTABLE_FIELD")

    def test_archive_blocked_by_active_account(self):
        eur = make_currency()
        make_account(eur)
        response = self.post_json("moneybook:currency_archive", pk=eur.pk)
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["error"]["reference_count"], 1)

    def test_not_found(self):
        response = self.client.get(reverse("moneybook:currency_detail", kwargs={"pk": uuid.uuid4()}))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["error"]["code"], "NOT_FOUND")

    def test_mutations_require_post(self):
        response = self.client.get(reverse("moneybook:currency_create"))
        self.assertEqual(response.status_code, 405)


class SettingsViewTests(ApiTestCase):
    def test_settings_need_a_currency(self):
        response = self.client.get(reverse("moneybook:settings_detail"))
        self.assertEqual(response.status_code, 412)
        self.assertEqual(response.json()["error"]["code"], "PRECONDITION_FAILED")

    def test_read_and_update(self):
        make_currency()
        response = self.client.get(reverse("moneybook:settings_detail"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["default_currency"]["code"], "EUR")

        response = self.post_json("moneybook:settings_update", {"theme": "dark", "ai_enabled": False}, htmx=True)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["theme"], "dark")
        self.assertFalse(response.json()["ai_enabled"])
        self.assertEqual(json.loads(response.headers["HX-Trigger"]), {"settings:refresh": True})


class CategoryViewTests(ApiTestCase):
    def test_create_with_htmx_trigger(self):
        response = self.post_json(
            "moneybook:category_create",
            {"name": "Coffee", "type": "Expense", "color": "#f97316", "icon": "UtensilsCrossed"},
            htmx=True,
        )
        self.assertEqual(response.status_code, 201)
        self.assertIn("HX-Trigger", response.headers)
        self.assertIsNone(response.json()["parent_category_id"])

    def test_plain_requests_get_no_trigger(self):
        response = self.post_json(
            "moneybook:category_create",
            {"name": "Coffee", "type": "Expense", "color": "#f97316", "icon": "UtensilsCrossed"},
        )
        self.assertNotIn("HX-Trigger", response.headers)

    def test_bad_icon(self):
        response = self.post_json(
            "moneybook:category_create",
            {"name": "Coffee", "type": "Expense", "color": "#f97316", "icon": "Mug"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("icon", response.json()["error"]["fields"])

    def test_type_change_rejected(self):
        category = make_category()
        response = self.post_json("moneybook:category_update", {"type": "Income"}, pk=category.pk)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"]["field"], "type")
        category.refresh_from_db()
        self.assertEqual(category.type, "Expense")

    def test_filter_by_type_and_deletable(self):
        make_category()
        bonus = make_category(name="Bonus", type="Income", icon="Banknote")
        response = self.client.get(reverse("moneybook:category_list"), {"type": "Income"})
        self.assertEqual([row["name"] for row in response.json()["results"]], ["Bonus"])

        response = self.client.get(reverse("moneybook:category_deletable", kwargs={"pk": bonus.pk}))
        self.assertEqual(response.json(), {"deletable": True, "reference_count": 0})

    def test_archive(self):
        category = make_category()
        response = self.post_json("moneybook:category_archive", pk=category.pk)
        self.assertTrue(response.json()["archived"])
        self.assertTrue(Category.objects.get(pk=category.pk).archived)


class AccountViewTests(ApiTestCase):
    def setUp(self):
        self.eur = make_currency()

    def test_create_defaults_balance_to_zero(self):
        response = self.post_json(
            "moneybook:account_create",
            {"name": "Checking", "type": "Bank", "currency_id": str(self.eur.pk)},
        )
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["balance"], 0)
        self.assertEqual(body["currency"]["code"], "EUR")

    def test_balance_display(self):
        account = make_account(self.eur, balance=123456)
        response = self.client.get(reverse("moneybook:account_detail", kwargs={"pk": account.pk}))
        self.assertEqual(response.json()["balance_display"], "1.234,56\u00a0€")

    def test_fractional_balance_rejected(self):
        response = self.post_json(
            "moneybook:account_create",
            {"name": "Checking", "type": "Bank", "currency_id": str(self.eur.pk), "initial_balance": 10.5},
        )
        self.assertEqual(response.status_code, 400)
        self.assertFalse(Account.objects.exists())

    def test_reconcile(self):
        account = make_account(self.eur)
        response = self.post_json("moneybook:account_balance", {"balance": -4200}, pk=account.pk)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["balance"], -4200)

    def test_default_currency(self):
        response = self.client.get(reverse("moneybook:account_default_currency"))
        self.assertEqual(response.json(), {"currency_id": str(self.eur.pk)})


class PayeeViewTests(ApiTestCase):
    def test_delete_unreferenced(self):
        payee = Payee.objects.create(name="Continente", type="vendor")
        response = self.post_json("moneybook:payee_delete", pk=payee.pk, htmx=True)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"deleted": True, "archived": False, "reference_count": 0})
        self.assertEqual(response.headers["X-Payee-Action"], "deleted")
        self.assertFalse(Payee.objects.exists())

    def test_archived_default_category(self):
        category = make_category(archived=True)
        response = self.post_json(
            "moneybook:payee_create",
            {"name": "Continente", "type": "vendor", "default_category_id": str(category.pk)},
        )
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["error"]["code"], "INVALID_STATE")


class HealthViewTests(TestCase):
    def test_reports_database_status(self):
        response = self.client.get(reverse("moneybook:health"))
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertIn(body["status"], ("healthy", "degraded"))
        self.assertTrue(body["database"]["connected"])
        self.assertNotIn("records", body)

    def test_details_and_echo(self):
        make_currency()
        response = self.client.get(reverse("moneybook:health"), {"details": "1", "message": "ping"})
        body = response.json()
        self.assertEqual(body["records"]["currencies"], 1)
        self.assertEqual(body["message"], "ping")
