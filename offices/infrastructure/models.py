"""
Office model.
"""

from django.db import models


class Office(models.Model):
    """
    Represents an office of a franchise.
    Offices belong to exactly one franchise.
    """

    id = models.BigAutoField(primary_key=True)
    franchise = models.ForeignKey(
        "franchises.Franchise",
        on_delete=models.PROTECT,
        related_name="offices",
    )
    name = models.CharField(
        max_length=255,
        unique=True,
        help_text="Normalized office name",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "office"
        ordering = ["id"]

    def clean(self):
        """Validate office fields."""
        from django.core.exceptions import ValidationError

        if not self.franchise_id:
            raise ValidationError("Franchise is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Name is required")

    def __str__(self):
        return self.name
