"""Booking lifecycle services.

Every operation receives the acting user's id explicitly. State changes are
written inside ``transaction.atomic()``; notifications and emails are sent
only after the block has committed and can never undo the change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from django.db import transaction  # type: ignore
from django.db.models import QuerySet  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore
from django.utils import timezone  # type: ignore

from apps.notifications import services as notifications
from apps.properties.models import Property
from shared.exceptions import DuplicateBooking, InvalidTransition, NotAuthorized, NotFound

from .models import Booking

logger = logging.getLogger(__name__)


@dataclass
class BookingDetails:
    booking: Booking
    is_owner: bool
    is_renter: bool


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


def _run_side_effects(booking: Booking, effects: list[tuple[str, Callable[[], object]]]) -> None:
    """Run each effect independently; a failure is logged and the rest still run."""
    for label, effect in effects:
        try:
            effect()
        except Exception:
            logger.exception("Side effect '%s' failed for booking %s", label, booking.pk)


def _get_locked_booking(booking_id) -> Booking:  # type: ignore
    booking = _lock_queryset_if_possible(Booking.objects.filter(pk=booking_id)).first()
    if booking is None:
        raise NotFound("Booking not found")
    return booking


def _set_status(booking: Booking, status: str, message: str) -> None:
    if not booking.can_transition_to(status):
        raise InvalidTransition(message)
    booking.status = status
    booking.decided_at = timezone.now()
    booking.save(update_fields=["status", "decided_at", "updated_at"])


# ============================================================================
# COMMANDS
# ============================================================================

def create_booking(renter_id, property_id) -> Booking:  # type: ignore
    """
    Create a pending booking for ``renter_id`` on ``property_id``.

    Raises:
        NotFound: the property does not exist or is not listed.
        DuplicateBooking: the renter already has a pending or confirmed
            booking for this property.
    """
    with transaction.atomic():
        property_obj = _lock_queryset_if_possible(Property.objects.filter(pk=property_id)).first()
        if property_obj is None or not property_obj.is_active:
            raise NotFound("Property not found")

        if Booking.objects.active().filter(renter_id=renter_id, property=property_obj).exists():
            raise DuplicateBooking()

        booking = Booking.objects.create(property=property_obj, renter_id=renter_id)

    booking = Booking.objects.with_relations().get(pk=booking.pk)
    logger.info("Booking %s created by renter %s for property %s", booking.pk, renter_id, property_id)

    _run_side_effects(
        booking,
        [
            (
                "notify owner",
                lambda: notifications.create_notification(
                    booking.owner,
                    f"New booking request for {booking.property.title} from {booking.renter.get_short_name()}.",
                    property=booking.property,
                ),
            ),
            ("email owner", lambda: notifications.send_booking_requested_email(booking)),
        ],
    )
    return booking


def cancel_booking(booking_id, actor_id) -> Booking:  # type: ignore
    """
    Cancel a pending booking. Only the renter who made it may cancel.

    Raises:
        NotFound, NotAuthorized, InvalidTransition
    """
    with transaction.atomic():
        booking = _get_locked_booking(booking_id)
        if not booking.is_renter(actor_id):
            raise NotAuthorized()
        _set_status(booking, Booking.Status.CANCELLED, "Cannot cancel accepted or rejected orders")

    booking = Booking.objects.with_relations().get(pk=booking.pk)
    logger.info("Booking %s cancelled by renter %s", booking.pk, actor_id)

    property_obj = booking.property
    _run_side_effects(
        booking,
        [
            (
                "notify owner",
                lambda: notifications.create_notification(
                    booking.owner,
                    f"Booking for {property_obj.title} has been cancelled by the renter.",
                    property=property_obj,
                ),
            ),
            (
                "notify renter",
                lambda: notifications.create_notification(
                    booking.renter,
                    f"Your booking cancellation for {property_obj.title} has been processed.",
                    property=property_obj,
                ),
            ),
            ("email owner", lambda: notifications.send_booking_cancelled_email(booking)),
        ],
    )
    return booking


def reject_booking(booking_id, actor_id) -> Booking:  # type: ignore
    """
    Reject a pending booking. Only the owner of the booked property may reject.

    Raises:
        NotFound, NotAuthorized, InvalidTransition
    """
    with transaction.atomic():
        booking = _get_locked_booking(booking_id)
        if not booking.is_owner(actor_id):
            raise NotAuthorized()
        _set_status(booking, Booking.Status.REJECTED, "Only pending bookings can be rejected")

    booking = Booking.objects.with_relations().get(pk=booking.pk)
    logger.info("Booking %s rejected by owner %s", booking.pk, actor_id)

    _run_side_effects(
        booking,
        [
            (
                "notify renter",
                lambda: notifications.create_notification(
                    booking.renter,
                    f"Your booking request for {booking.property.title} was rejected.",
                    property=booking.property,
                ),
            ),
            ("email renter", lambda: notifications.send_booking_rejected_email(booking)),
        ],
    )
    return booking


def accept_booking(booking_id, actor_id) -> Booking:  # type: ignore
    """
    Confirm a pending booking. Only the owner of the booked property may accept.

    Raises:
        NotFound, NotAuthorized, InvalidTransition
    """
    with transaction.atomic():
        booking = _get_locked_booking(booking_id)
        if not booking.is_owner(actor_id):
            raise NotAuthorized()
        _set_status(booking, Booking.Status.CONFIRMED, "Only pending bookings can be accepted")

    booking = Booking.objects.with_relations().get(pk=booking.pk)
    logger.info("Booking %s accepted by owner %s", booking.pk, actor_id)

    _run_side_effects(
        booking,
        [
            (
                "notify renter",
                lambda: notifications.create_notification(
                    booking.renter,
                    f"Your booking request for {booking.property.title} was confirmed.",
                    property=booking.property,
                ),
            ),
            ("email renter", lambda: notifications.send_booking_accepted_email(booking)),
        ],
    )
    return booking


# ============================================================================
# QUERIES
# ============================================================================

def list_for_renter(renter_id) -> QuerySet:  # type: ignore
    """Bookings made by the renter, newest first."""
    return (
        Booking.objects.filter(renter_id=renter_id)
        .select_related("property", "property__owner")
        .order_by("-created_at", "-id")
    )


def list_for_owner(owner_id, status: str | None = None) -> QuerySet:  # type: ignore
    """Bookings on any property owned by ``owner_id``, newest first."""
    property_ids = list(Property.objects.filter(owner_id=owner_id).values_list("id", flat=True))
    qs = Booking.objects.filter(property_id__in=property_ids).with_relations()
    if status:
        qs = qs.filter(status=status)
    return qs.order_by("-created_at", "-id")


def get_details(booking_id, actor_id) -> BookingDetails:  # type: ignore
    """
    Booking with property, owner and renter loaded.

    Raises:
        NotFound: no such booking.
        NotAuthorized: the actor is neither the renter nor the property owner.
    """
    booking = Booking.objects.with_relations().filter(pk=booking_id).first()
    if booking is None:
        raise NotFound("Order not found")

    is_owner = booking.is_owner(actor_id)
    is_renter = booking.is_renter(actor_id)
    if not is_owner and not is_renter:
        raise NotAuthorized()
    return BookingDetails(booking=booking, is_owner=is_owner, is_renter=is_renter)
