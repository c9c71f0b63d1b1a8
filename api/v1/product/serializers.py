"""
Serializers for Product API endpoints.
"""

from rest_framework import serializers


class ProductRequestSerializer(serializers.Serializer):
    """Serializer for product create/update requests."""

    id = serializers.IntegerField(required=False, allow_null=True)
    name = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )
    stock = serializers.IntegerField(required=False, allow_null=True)
    office_id = serializers.IntegerField(required=False, allow_null=True)


class ProductResponseSerializer(serializers.Serializer):
    """Serializer for Product."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    stock = serializers.IntegerField()
    office_id = serializers.IntegerField()
