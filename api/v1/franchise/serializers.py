"""
Serializers for Franchise API endpoints.
"""

from rest_framework import serializers

from api.v1.office.serializers import OfficeResponseSerializer


class FranchiseRequestSerializer(serializers.Serializer):
    """Serializer for franchise create/update requests.

    Name rules (blank, length, normalization) belong to the Franchise
    entity, so the name is passed through untouched.
    """

    id = serializers.IntegerField(required=False, allow_null=True)
    name = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )


class FranchiseResponseSerializer(serializers.Serializer):
    """Serializer for a franchise, with its offices when they were loaded."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    offices = OfficeResponseSerializer(many=True, allow_null=True)
