"""Email backend that delivers through a transactional-email HTTP API.

Enabled with ``MAILER_TRANSPORT=api``. The provider receives a JSON payload::

    {"from": ..., "to": [...], "subject": ..., "html": ..., "text": ...}

authenticated with ``Authorization: Bearer <EMAIL_API_KEY>``.
"""

from __future__ import annotations

import logging

import requests
from django.conf import settings  # type: ignore
from django.core.exceptions import ImproperlyConfigured  # type: ignore
from django.core.mail.backends.base import BaseEmailBackend  # type: ignore

logger = logging.getLogger(__name__)


class HttpApiEmailBackend(BaseEmailBackend):
    def __init__(self, api_url=None, api_key=None, timeout=None, fail_silently=False, **kwargs):  # type: ignore
        super().__init__(fail_silently=fail_silently, **kwargs)
        self.api_url = api_url or getattr(settings, "EMAIL_API_URL", "")
        self.api_key = api_key or getattr(settings, "EMAIL_API_KEY", "")
        self.timeout = timeout or getattr(settings, "EMAIL_TIMEOUT", None) or 10
        if not self.api_url:
            raise ImproperlyConfigured("EMAIL_API_URL must be set to use HttpApiEmailBackend.")
        self.session: requests.Session | None = None

    def open(self) -> bool:
        if self.session is not None:
            return False
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            }
        )
        return True

    def close(self) -> None:
        if self.session is None:
            return
        try:
            self.session.close()
        finally:
            self.session = None

    def send_messages(self, email_messages):  # type: ignore
        if not email_messages:
            return 0
        new_session = self.open()
        sent = 0
        try:
            for message in email_messages:
                if self._send(message):
                    sent += 1
        finally:
            if new_session:
                self.close()
        return sent

    def _payload(self, message) -> dict:  # type: ignore
        html = next(
            (content for content, mimetype in getattr(message, "alternatives", []) if mimetype == "text/html"),
            None,
        )
        payload = {
            "from": message.from_email,
            "to": list(message.to),
            "subject": message.subject,
            "text": message.body,
        }
        if message.cc:
            payload["cc"] = list(message.cc)
        if message.bcc:
            payload["bcc"] = list(message.bcc)
        if html:
            payload["html"] = html
        return payload

    def _send(self, message) -> bool:  # type: ignore
        if not message.recipients():
            return False
        try:
            response = self.session.post(self.api_url, json=self._payload(message), timeout=self.timeout)  # type: ignore[union-attr]
            response.raise_for_status()
        except requests.RequestException:
            if not self.fail_silently:
                raise
            logger.warning("Email API rejected message '%s'", message.subject, exc_info=True)
            return False
        return True
