"""
Admin form helpers shared by the hierarchy apps.
"""

from django import forms

from core.domain.exceptions import ValidationError as DomainValidationError
from core.domain.validators import EntityValidator


class NormalizedNameForm(forms.ModelForm):
    """
    Model form storing ``name`` the way the API does.

    The name is normalized in ``clean_name`` so the model's unique
    check compares the stored form ("acme" collides with "ACME").
    """

    entity_label = "Entity"

    def clean_name(self):
        """Normalize the name, reporting domain rule failures on the field."""
        try:
            return EntityValidator.normalize_name(self.cleaned_data.get("name"), self.entity_label)
        except DomainValidationError as exc:
            raise forms.ValidationError(exc.message) from exc
