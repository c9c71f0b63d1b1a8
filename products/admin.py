"""
Django admin configuration for products app.
"""

from django.contrib import admin

from core.forms import NormalizedNameForm
from products.infrastructure.models import Product


class ProductAdminForm(NormalizedNameForm):
    """Admin form for Product model."""

    entity_label = "Product"

    class Meta:
        model = Product
        fields = "__all__"


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Product model."""

    form = ProductAdminForm
    list_display = ["id", "name", "stock", "office", "updated_at"]
    list_filter = ["office__franchise", "office"]
    search_fields = ["name", "office__name"]
    readonly_fields = ["id", "created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "office", "name", "stock"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("office")
