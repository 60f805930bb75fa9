"""Serializers for the properties domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Property


class PropertySerializer(serializers.ModelSerializer):
    owner_id = serializers.ReadOnlyField(source="owner.id")
    owner_name = serializers.ReadOnlyField(source="owner.name")

    class Meta:
        model = Property
        fields = [
            "id",
            "title",
            "description",
            "city",
            "address",
            "price_per_night",
            "is_active",
            "owner_id",
            "owner_name",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "owner_id", "owner_name", "created_at", "updated_at"]


class PropertyShortSerializer(serializers.ModelSerializer):
    """Compact form embedded in booking responses."""

    owner_id = serializers.ReadOnlyField(source="owner.id")

    class Meta:
        model = Property
        fields = ["id", "title", "city", "price_per_night", "owner_id"]
        read_only_fields = fields
