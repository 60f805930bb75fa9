"""Outbound HTML email.

``send_email`` is the single delivery capability used by the rest of the
project. The transport is whatever ``EMAIL_BACKEND`` resolves to, so the
SMTP and HTTP-API deployments only differ in settings (``MAILER_TRANSPORT``).
Delivery is best-effort: failures are logged and reported as ``False``, never
raised.
"""

from __future__ import annotations

import logging

from django.conf import settings  # type: ignore
from django.core.mail import EmailMultiAlternatives  # type: ignore
from django.utils.html import strip_tags  # type: ignore

logger = logging.getLogger(__name__)


def send_email(to: str, subject: str, html_body: str) -> bool:
    """Deliver ``html_body`` to ``to``. Returns True on success."""
    if not to:
        logger.error("Email '%s' not sent: recipient address is missing", subject)
        return False

    try:
        message = EmailMultiAlternatives(
            subject=subject,
            body=strip_tags(html_body).strip(),
            from_email=settings.DEFAULT_FROM_EMAIL,
            to=[to],
        )
        message.attach_alternative(html_body, "text/html")
        sent = message.send(fail_silently=False)
    except Exception as e:
        logger.error("Failed to send email to %s: %s", to, e, exc_info=True)
        return False

    if not sent:
        logger.error("Email backend reported nothing sent to %s: %s", to, subject)
        return False

    logger.info("Email sent successfully to %s: %s", to, subject)
    return True


def dispatch_email(to: str, subject: str, html_body: str) -> bool:
    """Send inline or hand the message to Celery when ``MAILER_ASYNC`` is on.

    In async mode the return value only says whether the task was queued.
    """
    if not getattr(settings, "MAILER_ASYNC", False):
        return send_email(to, subject, html_body)

    try:
        from .tasks import deliver_email

        deliver_email.delay(to, subject, html_body)
    except Exception as e:
        logger.error("Failed to queue email to %s: %s", to, e, exc_info=True)
        return False
    return True
