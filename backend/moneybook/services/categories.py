import logging

from django.db import transaction
from django.db.models.functions import Lower

from moneybook.errors import ConflictError, InvalidStateError
from moneybook.models import Category

from . import guards

logger = logging.getLogger(__name__)


def _ensure_unique_name(name, category_type, exclude=None):
    qs = Category.objects.filter(name__iexact=name, type=category_type)
    if exclude is not None:
        qs = qs.exclude(pk=exclude)
    if qs.exists():
        raise ConflictError(f"A {category_type} category named '{name}' already exists.", field="name")


def resolve_parent(parent_id, category_type, category=None):
    if category is not None and str(parent_id) == str(category.pk):
        raise InvalidStateError("Category cannot be its own parent.")
    parent = guards.resolve_reference(
        Category,
        parent_id,
        not_found="Parent category not found.",
        archived="Cannot use an archived category as parent.",
        lock=True,
    )
    if parent.type != category_type:
        raise InvalidStateError("Parent category must have the same type (income/expense).")
    if category is not None and any(node.pk == category.pk for node in parent.ancestors()):
        raise InvalidStateError("Category cannot be nested under one of its own subcategories.")
    return parent


def list_categories(type=None, include_archived=False):
    qs = Category.objects.all()
    if type:
        qs = qs.filter(type=type)
    if not include_archived:
        qs = qs.filter(archived=False)
    return list(qs.order_by(Lower("name"), "type", "id"))


def get_category(category_id):
    return guards.get_or_404(Category.objects.select_related("parent"), category_id, "Category")


def create_category(name, type, color, icon, parent_id=None):
    name = (name or "").strip()
    category = Category(name=name, type=type, color=color, icon=icon)
    guards.validate_instance(category)
    with transaction.atomic():
        _ensure_unique_name(name, type)
        if parent_id:
            category.parent = resolve_parent(parent_id, type)
        guards.save_unique(
            category,
            field="name",
            message=f"A {type} category named '{name}' already exists.",
        )
    logger.info("Created %s category %s (%s)", category.type, category.name, category.pk)
    return category


def update_category(category_id, changes):
    """
    Apply a partial update. ``type`` is fixed at creation; ``parent_id`` of
    ``None`` detaches the category from its parent.
    """
    with transaction.atomic():
        category = guards.get_or_404(Category.objects.select_for_update(), category_id, "Category")
        guards.reject_change(category, changes, "type", "Category type")

        fields = []
        if "name" in changes:
            category.name = (changes["name"] or "").strip()
            _ensure_unique_name(category.name, category.type, exclude=category.pk)
            fields.append("name")
        for field in ("color", "icon"):
            if field in changes:
                setattr(category, field, changes[field])
                fields.append(field)
        if "parent_id" in changes:
            parent_id = changes["parent_id"]
            category.parent = resolve_parent(parent_id, category.type, category) if parent_id else None
            fields.append("parent")

        guards.validate_instance(category)
        guards.save_unique(
            category,
            field="name",
            message=f"A {category.type} category named '{category.name}' already exists.",
            update_fields=fields + ["updated_at"],
        )
    logger.info("Updated category %s fields=%s", category.pk, fields)
    return category


def check_category_deletable(category_id):
    return guards.check_deletable(get_category(category_id))


def archive_category(category_id):
    with transaction.atomic():
        category = guards.get_or_404(Category.objects.select_for_update(), category_id, "Category")
        if category.set_archived(True):
            logger.info("Archived category %s", category.name)
    return category


def unarchive_category(category_id):
    with transaction.atomic():
        category = guards.get_or_404(Category.objects.select_for_update(), category_id, "Category")
        if category.set_archived(False):
            logger.info("Unarchived category %s", category.name)
    return category
