import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.test import TestCase, override_settings

from moneybook.errors import ConflictError, ImmutableFieldError, InvalidStateError, NotFoundError
from moneybook.models import AppSettings, Currency
from moneybook.services import currencies

from .helpers import make_account, make_currency


class CurrencyServiceTests(TestCase):
    def test_create_normalizes_code_and_rate(self):
        currency = currencies.create_currency("usd", " $ ", "US Dollar", "1.0812345")
        currency.refresh_from_db()
        self.assertEqual(currency.code, "USD")
        self.assertEqual(currency.symbol, "$")
        self.assertEqual(currency.exchange_rate, Decimal("1.081234"))
        self.assertFalse(currency.archived)

    def test_duplicate_code_conflicts(self):
        make_currency()
        with self.assertRaises(ConflictError) as ctx:
            currencies.create_currency("EUR", "€", "Euro again", 1)
        self.assertEqual(ctx.exception.field, "code")
        self.assertEqual(Currency.objects.count(), 1)

    def test_unknown_code_is_invalid(self):
        with self.assertRaises(ValidationError):
            currencies.create_currency("XYZ", "X", "Unknown", 1)

    def test_non_positive_rate_is_invalid(self):
        with self.assertRaises(ValidationError) as ctx:
            currencies.create_currency("USD", "$", "US Dollar", 0)
        self.assertIn("exchange_rate", ctx.exception.message_dict)

    def test_get_unknown_or_malformed_id(self):
        with self.assertRaises(NotFoundError):
            currencies.get_currency(uuid.uuid4())
        with self.assertRaises(NotFoundError):
            currencies.get_currency("not-a-uuid")

    def test_code_cannot_change(self):
        currency = make_currency()
        with self.assertRaises(ImmutableFieldError) as ctx:
            currencies.update_currency(currency.pk, {"code": "USD"})
        self.assertEqual(ctx.exception.field, "code")
        currency.refresh_from_db()
        self.assertEqual(currency.code, "EUR")

    def test_resending_same_code_is_allowed(self):
        currency = make_currency()
        updated = currencies.update_currency(currency.pk, {"code": "eur", "name": "Euro (EU)"})
        self.assertEqual(updated.name, "Euro (EU)")

    def test_new_rate_refreshes_last_updated(self):
        currency = make_currency(code="USD", symbol="$", name="US Dollar", exchange_rate="1.08")
        before = currency.last_updated
        currencies.update_currency(currency.pk, {"exchange_rate": "1.08"})
        currency.refresh_from_db()
        self.assertEqual(currency.last_updated, before)

        currencies.update_currency(currency.pk, {"exchange_rate": "1.10"})
        currency.refresh_from_db()
        self.assertEqual(currency.exchange_rate, Decimal("1.100000"))
        self.assertGreater(currency.last_updated, before)

    def test_update_exchange_rate_always_touches_timestamp(self):
        currency = make_currency(code="USD", symbol="$", name="US Dollar", exchange_rate="1.08")
        before = currency.last_updated
        currencies.update_exchange_rate(currency.pk, "1.08")
        currency.refresh_from_db()
        self.assertGreater(currency.last_updated, before)

    def test_list_hides_archived_by_default(self):
        make_currency()
        make_currency(code="USD", symbol="$", name="US Dollar", archived=True)
        self.assertEqual([c.code for c in currencies.list_currencies()], ["EUR"])
        self.assertEqual([c.code for c in currencies.list_currencies(include_archived=True)], ["EUR", "USD"])


class CurrencyArchiveTests(TestCase):
    def setUp(self):
        self.eur = make_currency()
        self.usd = make_currency(code="USD", symbol="$", name="US Dollar")
        AppSettings.objects.create(default_currency=self.eur)

    def test_archive_unused_currency_is_idempotent(self):
        currencies.archive_currency(self.usd.pk)
        currencies.archive_currency(self.usd.pk)
        self.usd.refresh_from_db()
        self.assertTrue(self.usd.archived)

        currencies.unarchive_currency(self.usd.pk)
        self.usd.refresh_from_db()
        self.assertFalse(self.usd.archived)

    def test_currency_with_active_accounts_cannot_be_archived(self):
        make_account(self.usd, name="Travel card")
        make_account(self.usd, name="Old card", archived=True)
        with self.assertRaises(InvalidStateError) as ctx:
            currencies.archive_currency(self.usd.pk)
        self.assertEqual(ctx.exception.reference_count, 1)
        self.usd.refresh_from_db()
        self.assertFalse(self.usd.archived)

    def test_default_currency_cannot_be_archived(self):
        with self.assertRaises(InvalidStateError):
            currencies.archive_currency(self.eur.pk)


@override_settings(MONEYBOOK_BASE_CURRENCY="EUR")
class DefaultCurrencyTests(TestCase):
    def test_prefers_base_currency(self):
        make_currency(code="CHF", symbol="CHF", name="Swiss Franc")
        eur = make_currency()
        self.assertEqual(currencies.get_default_currency(), eur)

    def test_falls_back_to_first_active_by_code(self):
        make_currency(archived=True)
        make_currency(code="USD", symbol="$", name="US Dollar")
        chf = make_currency(code="CHF", symbol="CHF", name="Swiss Franc")
        self.assertEqual(currencies.get_default_currency(), chf)

    def test_no_currency(self):
        with self.assertRaises(NotFoundError):
            currencies.get_default_currency()
