"""
Franchise model.
"""

from django.db import models


class Franchise(models.Model):
    """
    Represents a franchise, the root of the franchise/office/product hierarchy.
    Names are stored normalized (trimmed, upper-cased) and are unique.
    """

    id = models.BigAutoField(primary_key=True)
    name = models.CharField(
        max_length=255,
        unique=True,
        help_text="Normalized franchise name",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "franchise"
        ordering = ["id"]

    def clean(self):
        """Validate franchise fields."""
        from django.core.exceptions import ValidationError

        if not self.name or not self.name.strip():
            raise ValidationError("Name is required")

    def __str__(self):
        return self.name
