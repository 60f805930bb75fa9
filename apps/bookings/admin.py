"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin  # type: ignore

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "property",
        "renter",
        "status",
        "decided_at",
        "created_at",
    )
    list_filter = ("status", "created_at")
    search_fields = ("property__title", "renter__email", "property__owner__email")
    list_select_related = ("property", "renter")
    readonly_fields = ("created_at", "updated_at", "decided_at")
