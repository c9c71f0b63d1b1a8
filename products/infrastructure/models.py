"""
Product model.
"""

from django.db import models


class Product(models.Model):
    """
    Represents a product held in stock by an office.
    Products belong to exactly one office.
    """

    id = models.BigAutoField(primary_key=True)
    office = models.ForeignKey(
        "offices.Office",
        on_delete=models.PROTECT,
        related_name="products",
    )
    name = models.CharField(
        max_length=255,
        unique=True,
        help_text="Normalized product name",
    )
    stock = models.PositiveIntegerField(help_text="Units in stock")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "product"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["office", "stock"], name="product_office_stock_idx"),
        ]

    def clean(self):
        """Validate product fields."""
        from django.core.exceptions import ValidationError

        if not self.office_id:
            raise ValidationError("Office is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Name is required")

    def __str__(self):
        return f"{self.office.name} - {self.name}"
