"""
Category serializers.

Length and blankness rules live in the domain; these serializers only
shape the payload so the domain's messages reach the client unchanged.
"""
from rest_framework import serializers


class CategorySerializer(serializers.Serializer):
    """Serializer for category output."""
    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    is_active = serializers.BooleanField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)


class CategoryListQuerySerializer(serializers.Serializer):
    """Serializer for category list query parameters."""
    is_active = serializers.BooleanField(required=False, allow_null=True, default=None)
    offset = serializers.IntegerField(min_value=0, default=0)
    limit = serializers.IntegerField(min_value=1, default=20)


class CategoryCreateSerializer(serializers.Serializer):
    """Serializer for category creation. A missing name is left to the domain."""
    name = serializers.CharField(
        required=False, default=None, allow_blank=True, allow_null=True, trim_whitespace=False
    )
    description = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )
    is_active = serializers.BooleanField(required=False, default=True)


class CategoryUpdateSerializer(serializers.Serializer):
    """Serializer for category update. Omitting description keeps it."""
    name = serializers.CharField(
        required=False, default=None, allow_blank=True, allow_null=True, trim_whitespace=False
    )
    description = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )
