"""
Checks shared by every master data service: row lookup, foreign key
resolution, shape validation and unique-constraint translation.
"""

import logging

from django.core.exceptions import ObjectDoesNotExist, ValidationError
from django.db import IntegrityError, transaction

from moneybook.errors import ConflictError, ImmutableFieldError, InvalidStateError, NotFoundError

logger = logging.getLogger(__name__)


def _queryset(source):
    if hasattr(source, "_default_manager"):
        return source._default_manager.all()
    return source


def get_or_404(source, pk, label):
    """
    Fetch one row by primary key from a model or queryset.

    Malformed ids are treated the same as ids that match nothing.
    """
    try:
        return _queryset(source).get(pk=pk)
    except (ObjectDoesNotExist, ValidationError, ValueError, TypeError):
        raise NotFoundError(f"{label} not found.") from None


def resolve_reference(source, pk, *, not_found, archived, lock=False):
    """
    Load the row a foreign key will point at. It must exist and be active.

    With ``lock`` the row stays locked until the surrounding transaction
    commits, so it cannot be archived between this check and the write.
    """
    queryset = _queryset(source)
    if lock:
        queryset = queryset.select_for_update()
    try:
        target = queryset.get(pk=pk)
    except (ObjectDoesNotExist, ValidationError, ValueError, TypeError):
        raise NotFoundError(not_found) from None
    if target.archived:
        raise InvalidStateError(archived)
    return target


def reject_change(instance, changes, field, label, current=None):
    if field not in changes:
        return
    stored = getattr(instance, field) if current is None else current
    if str(changes[field]) != str(stored):
        raise ImmutableFieldError(f"{label} cannot be changed after creation.", field=field)


def validate_instance(instance):
    """
    Field-level validation only; uniqueness is handled by ``save_unique``.
    """
    instance.full_clean(validate_unique=False, validate_constraints=False)


def save_unique(instance, *, field, message, update_fields=None):
    """
    Save, translating a unique-constraint violation into ``ConflictError``.

    The database constraint is the source of truth; callers pre-check only to
    avoid the round trip in the common case.
    """
    try:
        with transaction.atomic():
            instance.save(update_fields=update_fields)
    except IntegrityError as exc:
        logger.warning("Unique constraint rejected %s: %s", type(instance).__name__, exc)
        raise ConflictError(message, field=field) from exc
    return instance


def count_references(instance):
    """
    Number of historical records (transactions) pointing at ``instance``.

    There is no transaction ledger yet, so nothing can reference a master row.
    """
    return 0


def check_deletable(instance):
    reference_count = count_references(instance)
    return {"deletable": reference_count == 0, "reference_count": reference_count}
