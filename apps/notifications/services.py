"""Notification services: in-app inbox entries and HTML emails."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.conf import settings  # type: ignore
from django.db import transaction  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.html import escape  # type: ignore

from .mailer import dispatch_email

if TYPE_CHECKING:  # pragma: no cover
    from apps.bookings.models import Booking
    from apps.properties.models import Property
    from apps.users.models import CustomUser

logger = logging.getLogger(__name__)

SIGNATURE = "<p>Home Rental System</p>"


# ============================================================================
# IN-APP NOTIFICATIONS
# ============================================================================

def create_notification(
    receiver: "CustomUser",
    message: str,
    property: "Property | None" = None,
) -> bool:
    """
    Write an inbox entry for ``receiver``.

    Runs in its own savepoint so a failed insert cannot poison an enclosing
    transaction. Failures are logged and reported as ``False``.
    """
    try:
        from .models import Notification

        with transaction.atomic():
            Notification.objects.create(receiver=receiver, property=property, message=message)

        logger.info("In-app notification created for user %s: %s", receiver.pk, message)
        return True

    except Exception as e:
        logger.error(
            "Failed to create in-app notification for user %s: %s",
            getattr(receiver, "pk", None),
            e,
            exc_info=True,
        )
        return False


# ============================================================================
# BOOKING EMAILS
# ============================================================================

def _booking_facts(booking: "Booking") -> str:
    return (
        f"<p><b>Property ID:</b> {booking.property_id}</p>"
        f"<p><b>Booking ID:</b> {booking.pk}</p>"
    )


def send_booking_requested_email(booking: "Booking") -> bool:
    """Tell the owner that a renter asked to book their property."""
    owner = booking.owner
    html = f"""
    <h2>Hello {escape(owner.get_short_name())},</h2>
    <p><b>{escape(booking.renter.get_short_name())}</b> requested to book your property
    <b>{escape(booking.property.title)}</b>.</p>
    {_booking_facts(booking)}
    <p>Open your dashboard to accept or reject the request.</p>
    {SIGNATURE}
    """
    return dispatch_email(owner.email, "New Booking Request", html)


def send_booking_cancelled_email(booking: "Booking") -> bool:
    owner = booking.owner
    if not owner.email:
        logger.error("Owner email missing, cannot send cancellation email for booking %s", booking.pk)
        return False

    html = f"""
    <h2>Hello {escape(owner.get_short_name())},</h2>
    <p>The renter has <b>cancelled</b> a booking for your property <b>{escape(booking.property.title)}</b>.</p>
    {_booking_facts(booking)}
    <p>Please check your dashboard for more details.</p>
    {SIGNATURE}
    """
    return dispatch_email(owner.email, "Booking Cancelled by Renter", html)


def send_booking_rejected_email(booking: "Booking") -> bool:
    renter = booking.renter
    html = f"""
    <h2>Hello {escape(renter.get_short_name())},</h2>
    <p>Your booking for <b>{escape(booking.property.title)}</b> has been <b>rejected</b> by the owner.</p>
    {_booking_facts(booking)}
    <p>You can try booking other available properties.</p>
    {SIGNATURE}
    """
    return dispatch_email(renter.email, "Booking Rejected", html)


def send_booking_accepted_email(booking: "Booking") -> bool:
    renter = booking.renter
    html = f"""
    <h2>Hello {escape(renter.get_short_name())},</h2>
    <p>Good news! Your booking for <b>{escape(booking.property.title)}</b> has been <b>confirmed</b> by the owner.</p>
    {_booking_facts(booking)}
    <p>The owner will contact you with the check-in details.</p>
    {SIGNATURE}
    """
    return dispatch_email(renter.email, "Booking Confirmed", html)


# ============================================================================
# ACCOUNT EMAILS
# ============================================================================

def send_welcome_email(user: "CustomUser") -> bool:
    site_url = getattr(settings, "SITE_URL", "http://localhost:8000").rstrip("/")
    html = f"""
    <div style="font-family: Arial, Helvetica, sans-serif; padding: 40px 0; text-align: center;">
      <h2 style="color: #2c3e50;">Welcome, {escape(user.get_short_name())}!</h2>
      <p style="color: #555; font-size: 16px;">
        We're thrilled to have you join <b>Home Rental</b>, your platform for finding and listing rental properties.
      </p>
      <a href="{site_url}/properties/" style="background-color: #007bff; color: #fff; padding: 12px 25px;
         border-radius: 6px; text-decoration: none;">Explore Properties</a>
      <p style="font-size: 12px; color: #aaa; margin-top: 20px;">
        &copy; {timezone.now().year} Home Rental. All rights reserved.
      </p>
    </div>
    """
    return dispatch_email(user.email, "Welcome to Home Rental!", html)


def send_password_reset_email(user: "CustomUser", reset_link: str) -> bool:
    minutes = getattr(settings, "PASSWORD_RESET_TIMEOUT_MINUTES", 15)
    html = f"""
    <h3>Hello {escape(user.get_short_name())},</h3>
    <p>You requested to reset your password.</p>
    <p>Click below to set a new password (valid for {minutes} minutes):</p>
    <a href="{escape(reset_link)}" style="background:#007bff;color:#fff;padding:10px 15px;text-decoration:none;border-radius:5px;">Reset Password</a>
    """
    return dispatch_email(user.email, "Reset Your Password - Home Rental", html)


def send_password_changed_email(user: "CustomUser") -> bool:
    html = f"""
    <h3>Hello {escape(user.get_short_name())},</h3>
    <p>Your password has been successfully updated.</p>
    <p>If this wasn't you, please contact support immediately.</p>
    """
    return dispatch_email(user.email, "Password Changed Successfully", html)
