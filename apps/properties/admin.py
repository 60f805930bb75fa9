"""Admin registrations for properties domain."""

from __future__ import annotations

from django.contrib import admin  # type: ignore

from .models import Property


@admin.register(Property)
class PropertyAdmin(admin.ModelAdmin):
    list_display = ("title", "city", "price_per_night", "is_active", "owner", "created_at")
    list_filter = ("is_active", "city")
    search_fields = ("title", "city", "owner__email")
    readonly_fields = ("created_at", "updated_at")
