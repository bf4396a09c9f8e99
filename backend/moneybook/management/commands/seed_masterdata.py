from django.core.management.base import BaseCommand

from moneybook.services.seed import seed_defaults


class Command(BaseCommand):
    help = "Seed the base currency, default categories and settings."

    def handle(self, *args, **options):
        summary = seed_defaults()
        currency = summary["currency"]
        self.stdout.write(
            f"{currency.code} currency {'created' if summary['currency_created'] else 'already exists'} ({currency.pk})"
        )
        self.stdout.write(
            f"Categories: {summary['categories_created']} created, {summary['categories_skipped']} skipped"
        )
        self.stdout.write(f"Settings: {summary['settings'].pk}")
        self.stdout.write(self.style.SUCCESS("Database seeding complete."))
