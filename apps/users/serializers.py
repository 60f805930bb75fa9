"""Serializers for user-related API endpoints."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "email", "name", "role", "created_at", "updated_at"]
        read_only_fields = ["id", "email", "role", "created_at", "updated_at"]


class UserShortSerializer(serializers.ModelSerializer):
    """Public contact card embedded in booking responses."""

    class Meta:
        model = User
        fields = ["id", "name", "email"]
        read_only_fields = fields
