"""Celery tasks for the notifications app."""

from __future__ import annotations

from celery import shared_task  # type: ignore

from .mailer import send_email


@shared_task(name="notifications.deliver_email", ignore_result=True)
def deliver_email(to: str, subject: str, html_body: str) -> bool:
    """Send one email. No retries: a failed delivery is only logged."""
    return send_email(to, subject, html_body)
