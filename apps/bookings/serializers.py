"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.properties.serializers import PropertyShortSerializer
from apps.users.serializers import UserShortSerializer

from .models import Booking


class BookingSerializer(serializers.ModelSerializer):
    """Booking with its property; used by the renter's list."""

    property = PropertyShortSerializer(read_only=True)
    renter_id = serializers.ReadOnlyField(source="renter.id")

    class Meta:
        model = Booking
        fields = [
            "id",
            "property",
            "renter_id",
            "status",
            "decided_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class OwnerBookingSerializer(BookingSerializer):
    """Adds the renter's contact card for the owner's list."""

    renter = UserShortSerializer(read_only=True)

    class Meta(BookingSerializer.Meta):
        fields = BookingSerializer.Meta.fields + ["renter"]
        read_only_fields = fields


class BookingDetailSerializer(serializers.Serializer):
    """Booking with owner and renter plus the flags the client branches on."""

    booking = OwnerBookingSerializer(read_only=True)
    owner = UserShortSerializer(source="booking.owner", read_only=True)
    is_owner = serializers.BooleanField(read_only=True)
    is_renter = serializers.BooleanField(read_only=True)


class OwnerBookingFilterSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Booking.Status.choices, required=False)
