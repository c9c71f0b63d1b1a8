"""
Django admin configuration for offices app.
"""

from django.contrib import admin

from core.forms import NormalizedNameForm
from offices.infrastructure.models import Office


class OfficeAdminForm(NormalizedNameForm):
    """Admin form for Office model."""

    entity_label = "Office"

    class Meta:
        model = Office
        fields = "__all__"


@admin.register(Office)
class OfficeAdmin(admin.ModelAdmin):
    """Admin interface for Office model."""

    form = OfficeAdminForm
    list_display = ["id", "name", "franchise", "created_at"]
    list_filter = ["franchise"]
    search_fields = ["name", "franchise__name"]
    readonly_fields = ["id", "created_at", "updated_at"]

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).select_related("franchise")
