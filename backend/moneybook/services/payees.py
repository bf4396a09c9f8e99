import logging
from dataclasses import dataclass

from django.db import transaction

from moneybook.errors import ConflictError
from moneybook.models import Category, Payee

from . import guards

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayeeDeletion:
    """
    Outcome of ``delete_payee``: either the row is gone, or it was archived
    because history still points at it.
    """

    deleted: bool
    archived: bool
    reference_count: int

    def as_dict(self):
        return {
            "deleted": self.deleted,
            "archived": self.archived,
            "reference_count": self.reference_count,
        }


def _ensure_unique_name(name, exclude=None):
    qs = Payee.objects.filter(name=name)
    if exclude is not None:
        qs = qs.exclude(pk=exclude)
    if qs.exists():
        raise ConflictError(f"A payee named '{name}' already exists.", field="name")


def _default_category(category_id):
    return guards.resolve_reference(
        Category,
        category_id,
        not_found="Selected category not found.",
        archived="Cannot assign archived category as default.",
        lock=True,
    )


def list_payees(type=None, include_archived=False):
    qs = Payee.objects.select_related("default_category")
    if type:
        qs = qs.filter(type=type)
    if not include_archived:
        qs = qs.filter(archived=False)
    return list(qs.order_by("name", "id"))


def get_payee(payee_id):
    return guards.get_or_404(Payee.objects.select_related("default_category"), payee_id, "Payee")


def create_payee(name, type, default_category_id=None):
    name = (name or "").strip()
    payee = Payee(name=name, type=type)
    guards.validate_instance(payee)
    with transaction.atomic():
        _ensure_unique_name(name)
        if default_category_id:
            payee.default_category = _default_category(default_category_id)
        guards.save_unique(payee, field="name", message=f"A payee named '{name}' already exists.")
    logger.info("Created %s payee %s (%s)", payee.type, payee.name, payee.pk)
    return payee


def update_payee(payee_id, changes):
    with transaction.atomic():
        payee = guards.get_or_404(Payee.objects.select_for_update(), payee_id, "Payee")
        fields = []
        if "name" in changes:
            payee.name = (changes["name"] or "").strip()
            _ensure_unique_name(payee.name, exclude=payee.pk)
            fields.append("name")
        if "type" in changes:
            payee.type = changes["type"]
            fields.append("type")
        if "default_category_id" in changes:
            category_id = changes["default_category_id"]
            payee.default_category = _default_category(category_id) if category_id else None
            fields.append("default_category")

        guards.validate_instance(payee)
        guards.save_unique(
            payee,
            field="name",
            message=f"A payee named '{payee.name}' already exists.",
            update_fields=fields + ["updated_at"],
        )
    logger.info("Updated payee %s fields=%s", payee.pk, fields)
    return payee


def archive_payee(payee_id):
    with transaction.atomic():
        payee = guards.get_or_404(Payee.objects.select_for_update(), payee_id, "Payee")
        if payee.set_archived(True):
            logger.info("Archived payee %s", payee.name)
    return payee


def unarchive_payee(payee_id):
    with transaction.atomic():
        payee = guards.get_or_404(Payee.objects.select_for_update(), payee_id, "Payee")
        if payee.set_archived(False):
            logger.info("Unarchived payee %s", payee.name)
    return payee


def delete_payee(payee_id):
    """
    Remove a payee outright when no history references it, otherwise archive it.
    """
    with transaction.atomic():
        payee = guards.get_or_404(Payee.objects.select_for_update(), payee_id, "Payee")
        reference_count = guards.count_references(payee)
        if reference_count == 0:
            payee.delete()
            logger.info("Deleted payee %s", payee.name)
            return PayeeDeletion(deleted=True, archived=False, reference_count=0)
        payee.set_archived(True)
    logger.info("Archived payee %s instead of deleting: %d references", payee.name, reference_count)
    return PayeeDeletion(deleted=False, archived=True, reference_count=reference_count)
