"""Serializers for notifications."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    """Read-only representation of an inbox entry."""

    property_title = serializers.ReadOnlyField(source='property.title')

    class Meta:
        model = Notification
        fields = ['id', 'receiver', 'property', 'property_title', 'message', 'created_at']
        read_only_fields = fields
