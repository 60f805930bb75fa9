"""Password reset flow.

A reset token is a random hex string stored on the user together with its
expiry. Requesting a reset never reveals whether the address is registered;
the caller always gets the same response.
"""

from __future__ import annotations

import logging
import secrets
from typing import Callable

from django.contrib.auth import get_user_model  # type: ignore
from django.db import transaction  # type: ignore
from django.utils import timezone  # type: ignore

from apps.notifications.services import send_password_changed_email, send_password_reset_email
from shared.exceptions import InvalidResetToken

from .models import normalize_email_address

logger = logging.getLogger(__name__)

User = get_user_model()

RESET_TOKEN_BYTES = 32


def issue_reset_token(email: str, build_reset_link: Callable[[str], str]) -> str | None:
    """
    Store a fresh reset token for the user owning ``email`` and mail the link.

    Returns the token, or None when no user matches. Callers must not expose
    the difference to the client.
    """
    user = User.objects.filter(email=normalize_email_address(email), is_active=True).first()
    if user is None:
        logger.info("Password reset requested for an unknown email")
        return None

    token = secrets.token_hex(RESET_TOKEN_BYTES)
    user.set_reset_token(token)
    logger.info("Password reset token issued for user %s", user.pk)

    send_password_reset_email(user, build_reset_link(token))
    return token


def find_user_by_reset_token(token: str):  # type: ignore
    """Return the user whose token is still valid, or raise ``InvalidResetToken``."""
    if not token:
        raise InvalidResetToken()
    user = User.objects.filter(reset_token=token, reset_token_expire__gt=timezone.now()).first()
    if user is None:
        raise InvalidResetToken()
    return user


def redeem_reset_token(token: str, new_password: str):  # type: ignore
    """Replace the password, clear the token and send a confirmation email."""
    with transaction.atomic():
        user = find_user_by_reset_token(token)
        user.set_password(new_password)
        user.clear_reset_token()
        user.save(update_fields=["password", "reset_token", "reset_token_expire", "updated_at"])

    logger.info("Password reset completed for user %s", user.pk)
    send_password_changed_email(user)
    return user
