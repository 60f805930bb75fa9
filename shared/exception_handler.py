"""DRF exception handler that renders domain errors."""

from __future__ import annotations

import logging

from rest_framework import exceptions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from .exceptions import DomainError, Unauthenticated

logger = logging.getLogger(__name__)


def domain_exception_handler(exc, context):  # type: ignore
    """Map ``DomainError`` subclasses to their HTTP status.

    DRF downgrades ``NotAuthenticated`` to 403 when the authentication class
    sends no ``WWW-Authenticate`` header (session auth), so it is rendered
    here as 401 explicitly.
    """
    if isinstance(exc, exceptions.NotAuthenticated):
        exc = Unauthenticated()

    if isinstance(exc, DomainError):
        view = context.get("view")
        logger.info(
            "%s in %s: %s",
            exc.__class__.__name__,
            view.__class__.__name__ if view else "unknown view",
            exc.message,
        )
        return Response({"detail": exc.message, "code": exc.code}, status=exc.status_code)

    response = exception_handler(exc, context)
    if response is None:
        return None
    if response.status_code == status.HTTP_403_FORBIDDEN and isinstance(response.data, dict):
        response.data.setdefault("code", "not_authorized")
    return response
