import threading
import uuid
from unittest import mock

from django.db import IntegrityError, connection, transaction
from django.test import TestCase, TransactionTestCase, skipUnlessDBFeature

from moneybook.errors import InvalidStateError, NotFoundError, PreconditionError
from moneybook.models import AppSettings
from moneybook.services.settings import get_settings, update_settings

from .helpers import make_currency


class SettingsServiceTests(TestCase):
    def test_requires_a_currency(self):
        with self.assertRaises(PreconditionError):
            get_settings()
        self.assertFalse(AppSettings.objects.exists())

    def test_created_once_with_base_currency(self):
        make_currency(code="CHF", symbol="CHF", name="Swiss Franc")
        eur = make_currency()
        first = get_settings()
        second = get_settings()
        self.assertEqual(first.pk, second.pk)
        self.assertEqual(first.default_currency, eur)
        self.assertEqual(first.theme, "light")
        self.assertTrue(first.ai_enabled)
        self.assertEqual(AppSettings.objects.count(), 1)

    def test_falls_back_to_first_active_currency(self):
        make_currency(archived=True)
        usd = make_currency(code="USD", symbol="$", name="US Dollar")
        self.assertEqual(get_settings().default_currency, usd)

    def test_stale_read_reuses_existing_row(self):
        make_currency()
        existing = get_settings()
        # A second caller that looked before the row existed still ends up with it.
        with mock.patch("moneybook.services.settings._load_settings", return_value=None):
            racing = get_settings()
        self.assertEqual(racing.pk, existing.pk)
        self.assertEqual(AppSettings.objects.count(), 1)

    def test_database_rejects_second_row(self):
        eur = make_currency()
        AppSettings.objects.create(default_currency=eur)
        with self.assertRaises(IntegrityError), transaction.atomic():
            AppSettings.objects.create(default_currency=eur)


class SettingsUpdateTests(TestCase):
    def setUp(self):
        self.eur = make_currency()
        self.usd = make_currency(code="USD", symbol="$", name="US Dollar")

    def test_updates_given_fields_only(self):
        updated = update_settings({"theme": "dark", "ai_enabled": None, "default_currency_id": None})
        self.assertEqual(updated.theme, "dark")
        self.assertTrue(updated.ai_enabled)
        self.assertEqual(updated.default_currency, self.eur)

    def test_change_default_currency(self):
        updated = update_settings({"default_currency_id": self.usd.pk, "ai_enabled": False})
        updated.refresh_from_db()
        self.assertEqual(updated.default_currency, self.usd)
        self.assertFalse(updated.ai_enabled)

    def test_archived_currency_rejected(self):
        self.usd.archived = True
        self.usd.save()
        with self.assertRaises(InvalidStateError):
            update_settings({"default_currency_id": self.usd.pk})
        self.assertEqual(get_settings().default_currency, self.eur)

    def test_unknown_currency_rejected(self):
        with self.assertRaises(NotFoundError):
            update_settings({"default_currency_id": uuid.uuid4()})


@skipUnlessDBFeature("test_db_allows_multiple_connections")
class SettingsConcurrencyTests(TransactionTestCase):
    def test_concurrent_first_reads_create_one_row(self):
        make_currency()
        workers = 4
        barrier = threading.Barrier(workers)
        results = []
        errors = []

        def read():
            try:
                barrier.wait()
                results.append(get_settings().pk)
            except Exception as exc:
                errors.append(exc)
            finally:
                connection.close()

        threads = [threading.Thread(target=read) for _ in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(errors, [])
        self.assertEqual(len(set(results)), 1)
        self.assertEqual(AppSettings.objects.count(), 1)
