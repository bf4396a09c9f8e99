from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator
from django.db import models
from django.db.models.functions import Lower

from moneybook.constants import CATEGORY_ICONS, HEX_COLOR_PATTERN, CategoryType

from .base import AuditedModel


def validate_icon(value):
    if value not in CATEGORY_ICONS:
        raise ValidationError(f"'{value}' is not an available icon.")


class Category(AuditedModel):
    """
    Classifies money as expense or income. ``type`` never changes after creation.
    """

    TYPE_CHOICES = CategoryType.CHOICES

    name = models.CharField(max_length=100)
    type = models.CharField(max_length=7, choices=TYPE_CHOICES)
    color = models.CharField(
        max_length=7,
        validators=[RegexValidator(HEX_COLOR_PATTERN, "Color must be a valid hex color (e.g., #FF5733).")],
    )
    icon = models.CharField(max_length=50, validators=[validate_icon])
    parent = models.ForeignKey(
        "self",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="children",
    )

    class Meta:
        ordering = [Lower("name"), "type"]
        verbose_name_plural = "categories"
        constraints = [
            models.UniqueConstraint(
                Lower("name"),
                "type",
                name="category_name_type_ci_unique",
                violation_error_message="A category with this name already exists for this type.",
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.type})"

    def ancestors(self):
        """
        Walk up the parent chain, stopping if the chain loops back.
        """
        seen = {self.pk}
        node = self.parent
        while node is not None and node.pk not in seen:
            seen.add(node.pk)
            yield node
            node = node.parent
