"""API views for notifications."""

from __future__ import annotations

from rest_framework import mixins, permissions, viewsets  # type: ignore

from .models import Notification
from .serializers import NotificationSerializer


class NotificationViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, viewsets.GenericViewSet):
    """Inbox of the authenticated user. Entries are never edited."""

    serializer_class = NotificationSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):  # type: ignore
        return Notification.objects.filter(receiver=self.request.user).select_related('property')
