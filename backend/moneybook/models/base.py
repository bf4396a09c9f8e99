import uuid

from django.db import models


class AuditedModel(models.Model):
    """
    Shared identity and audit columns. ``archived`` is the soft-delete flag.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    archived = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def set_archived(self, archived):
        """
        Flip the soft-delete flag. Repeating the current state is a no-op that still succeeds.
        """
        if self.archived == archived:
            return False
        self.archived = archived
        self.save(update_fields=["archived", "updated_at"])
        return True
