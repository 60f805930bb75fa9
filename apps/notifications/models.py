"""Notification model.

An append-only inbox entry for a user. Notifications are written by the
booking lifecycle (new request, cancellation, rejection, acceptance) and
listed by their receiver.
"""

from __future__ import annotations

from django.db import models  # type: ignore


class Notification(models.Model):
    """A system message addressed to a user about a property."""

    receiver = models.ForeignKey(
        'users.CustomUser', on_delete=models.CASCADE, related_name='notifications'
    )
    property = models.ForeignKey(
        'properties.Property',
        on_delete=models.CASCADE,
        related_name='notifications',
        null=True,
        blank=True,
    )
    message = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self) -> str:
        return f"Notification to {self.receiver_id}: {self.message[:40]}"
