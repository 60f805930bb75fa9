"""Booking domain models for Home Rental."""

from __future__ import annotations

import builtins

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class BookingQuerySet(models.QuerySet):
    def active(self):  # type: ignore
        return self.filter(status__in=Booking.ACTIVE_STATUSES)

    def with_relations(self):  # type: ignore
        return self.select_related("property", "property__owner", "renter")


class Booking(models.Model):
    """A renter's request to rent a property.

    The owner is never stored on the booking; it is always read through
    ``property.owner`` so it cannot drift from the listing.
    """

    class Status(models.TextChoices):
        PENDING = "pending", _("Pending")
        CONFIRMED = "confirmed", _("Confirmed")
        REJECTED = "rejected", _("Rejected")
        CANCELLED = "cancelled", _("Cancelled")

    ACTIVE_STATUSES = (Status.PENDING, Status.CONFIRMED)

    # Allowed status changes, keyed by raw value. Everything outside pending is terminal.
    TRANSITIONS: dict[str, frozenset[str]] = {
        "pending": frozenset({"confirmed", "rejected", "cancelled"}),
        "confirmed": frozenset(),
        "rejected": frozenset(),
        "cancelled": frozenset(),
    }

    property = models.ForeignKey(
        "properties.Property",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    renter = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
    )
    decided_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text=_("When the booking left the pending state."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = BookingQuerySet.as_manager()

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["renter", "property", "status"], name="booking_renter_prop_status_idx"),
            models.Index(fields=["status"], name="booking_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} for {self.property_id} ({self.status})"

    @builtins.property
    def owner(self):  # type: ignore
        return self.property.owner

    @builtins.property
    def owner_id(self):  # type: ignore
        return self.property.owner_id

    @builtins.property
    def is_active(self) -> bool:
        return self.status in self.ACTIVE_STATUSES

    @builtins.property
    def is_terminal(self) -> bool:
        return not self.TRANSITIONS.get(str(self.status))

    def can_transition_to(self, status: str) -> bool:
        return str(status) in self.TRANSITIONS.get(str(self.status), frozenset())

    def is_renter(self, user_id) -> bool:  # type: ignore
        return user_id is not None and str(self.renter_id) == str(user_id)

    def is_owner(self, user_id) -> bool:  # type: ignore
        return user_id is not None and str(self.owner_id) == str(user_id)
