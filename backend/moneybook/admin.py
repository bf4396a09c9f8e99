from django import forms
from django.conf import settings
from django.contrib import admin, messages
from django.utils import timezone

from .errors import MoneybookError
from .models import Account, AppSettings, Category, Currency, Payee
from .money import format_currency
from .services import accounts, categories, currencies, payees


def _archive_action(service, label):
    def action(modeladmin, request, queryset):
        changed = 0
        for obj in queryset:
            try:
                service(obj.pk)
            except MoneybookError as exc:
                modeladmin.message_user(request, f"{obj}: {exc.message}", level=messages.WARNING)
            else:
                changed += 1
        if changed:
            modeladmin.message_user(request, f"{label} {changed} record(s).")

    action.__name__ = f"{label.lower()}_{service.__module__.rsplit('.', 1)[-1]}"
    action.short_description = f"{label} selected"
    return action


class ActiveReferenceForm(forms.ModelForm):
    """
    Rejects pointing a foreign key at an archived row. Only newly assigned
    references are checked; an existing one may have been archived since.
    """

    active_references = {}

    def clean(self):
        cleaned_data = super().clean()
        for field, message in self.active_references.items():
            target = cleaned_data.get(field)
            if field in self.changed_data and target is not None and target.archived:
                self.add_error(field, message)
        return cleaned_data


class CategoryAdminForm(forms.ModelForm):
    class Meta:
        model = Category
        fields = "__all__"

    def clean(self):
        cleaned_data = super().clean()
        parent = cleaned_data.get("parent")
        if "parent" in self.changed_data and parent is not None:
            adding = self.instance._state.adding
            category_type = self.instance.type if not adding else cleaned_data.get("type")
            try:
                categories.resolve_parent(parent.pk, category_type, None if adding else self.instance)
            except MoneybookError as exc:
                self.add_error("parent", exc.message)
        return cleaned_data


class AccountAdminForm(ActiveReferenceForm):
    active_references = {"currency": "Cannot create account with archived currency."}

    class Meta:
        model = Account
        fields = "__all__"


class PayeeAdminForm(ActiveReferenceForm):
    active_references = {"default_category": "Cannot assign archived category as default."}

    class Meta:
        model = Payee
        fields = "__all__"


class AppSettingsAdminForm(ActiveReferenceForm):
    active_references = {"default_currency": "Cannot set archived currency as default."}

    class Meta:
        model = AppSettings
        fields = "__all__"


class MasterDataAdmin(admin.ModelAdmin):
    """
    Archive state only moves through the archive actions, and fields fixed at
    creation are read-only once the row exists.
    """

    readonly_fields = ("archived",)
    immutable_fields = ()

    def get_readonly_fields(self, request, obj=None):
        fields = tuple(super().get_readonly_fields(request, obj))
        if obj is not None:
            fields += self.immutable_fields
        return fields


@admin.register(Currency)
class CurrencyAdmin(MasterDataAdmin):
    list_display = ("code", "name", "symbol", "exchange_rate", "last_updated", "archived")
    list_filter = ("archived",)
    search_fields = ("code", "name")
    readonly_fields = ("archived", "last_updated")
    immutable_fields = ("code",)
    actions = [
        _archive_action(currencies.archive_currency, "Archived"),
        _archive_action(currencies.unarchive_currency, "Unarchived"),
    ]

    def save_model(self, request, obj, form, change):
        if "exchange_rate" in form.changed_data:
            obj.last_updated = timezone.now()
        super().save_model(request, obj, form, change)


@admin.register(Category)
class CategoryAdmin(MasterDataAdmin):
    form = CategoryAdminForm
    list_display = ("name", "type", "parent", "color", "icon", "archived")
    list_filter = ("type", "archived")
    search_fields = ("name",)
    autocomplete_fields = ("parent",)
    immutable_fields = ("type",)
    actions = [
        _archive_action(categories.archive_category, "Archived"),
        _archive_action(categories.unarchive_category, "Unarchived"),
    ]


@admin.register(Account)
class AccountAdmin(MasterDataAdmin):
    form = AccountAdminForm
    list_display = ("name", "type", "currency", "formatted_balance", "archived")
    list_filter = ("type", "archived", "currency")
    list_select_related = ("currency",)
    search_fields = ("name",)
    immutable_fields = ("currency",)
    actions = [
        _archive_action(accounts.archive_account, "Archived"),
        _archive_action(accounts.unarchive_account, "Unarchived"),
    ]

    @admin.display(description="Balance", ordering="balance")
    def formatted_balance(self, obj):
        return format_currency(obj.balance, obj.currency.code, settings.MONEYBOOK_DEFAULT_LOCALE)


@admin.register(Payee)
class PayeeAdmin(MasterDataAdmin):
    form = PayeeAdminForm
    list_display = ("name", "type", "default_category", "archived")
    list_filter = ("type", "archived")
    list_select_related = ("default_category",)
    search_fields = ("name",)
    autocomplete_fields = ("default_category",)
    actions = [
        _archive_action(payees.archive_payee, "Archived"),
        _archive_action(payees.unarchive_payee, "Unarchived"),
    ]


@admin.register(AppSettings)
class AppSettingsAdmin(MasterDataAdmin):
    form = AppSettingsAdminForm
    list_display = ("default_currency", "theme", "ai_enabled", "updated_at")

    def has_add_permission(self, request):
        return not AppSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False
