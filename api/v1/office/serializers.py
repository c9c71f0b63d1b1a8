"""
Serializers for Office API endpoints.
"""

from rest_framework import serializers


class OfficeRequestSerializer(serializers.Serializer):
    """Serializer for office create/update requests."""

    id = serializers.IntegerField(required=False, allow_null=True)
    name = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )
    franchise_id = serializers.IntegerField(required=False, allow_null=True)


class OfficeResponseSerializer(serializers.Serializer):
    """Serializer for Office."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    franchise_id = serializers.IntegerField()
