"""
Django admin configuration for franchises app.
"""

from django.contrib import admin

from core.forms import NormalizedNameForm
from franchises.infrastructure.models import Franchise


class FranchiseAdminForm(NormalizedNameForm):
    """Admin form for Franchise model."""

    entity_label = "Franchise"

    class Meta:
        model = Franchise
        fields = "__all__"


@admin.register(Franchise)
class FranchiseAdmin(admin.ModelAdmin):
    """Admin interface for Franchise model."""

    form = FranchiseAdminForm
    list_display = ["id", "name", "office_count", "created_at"]
    search_fields = ["name"]
    readonly_fields = ["id", "created_at", "updated_at"]

    def office_count(self, obj):
        """Display number of offices for this franchise."""
        return obj.offices.count()

    office_count.short_description = "Offices"

    def get_queryset(self, request):
        """Optimize queryset."""
        return super().get_queryset(request).prefetch_related("offices")
