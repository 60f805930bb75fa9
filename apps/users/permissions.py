"""Authentication gate for the session-based API."""

from __future__ import annotations

from shared.exceptions import Unauthenticated


def require_session(request):  # type: ignore
    """Return the id of the user behind ``request`` or raise ``Unauthenticated``."""
    user = getattr(request, "user", None)
    if user is None or not user.is_authenticated:
        raise Unauthenticated()
    return user.pk
