"""Tests for the notification inbox."""

from __future__ import annotations

from unittest import mock

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.notifications.models import Notification
from apps.notifications.services import create_notification
from apps.properties.models import Property
from apps.users.models import User


class NotificationInboxTests(APITestCase):
    def setUp(self) -> None:
        self.owner = User.objects.create_user(email="owner@example.com", password="secret12", role="owner")
        self.renter = User.objects.create_user(email="renter@example.com", password="secret12")
        self.property = Property.objects.create(owner=self.owner, title="Garden house")

    def test_inbox_lists_only_own_entries_newest_first(self) -> None:
        Notification.objects.create(receiver=self.owner, property=self.property, message="first")
        Notification.objects.create(receiver=self.owner, property=self.property, message="second")
        Notification.objects.create(receiver=self.renter, message="not yours")
        self.client.force_authenticate(self.owner)

        response = self.client.get(reverse("notification-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([item["message"] for item in response.data], ["second", "first"])
        self.assertEqual(response.data[0]["property_title"], "Garden house")

    def test_foreign_entry_is_not_found(self) -> None:
        foreign = Notification.objects.create(receiver=self.renter, message="private")
        self.client.force_authenticate(self.owner)

        response = self.client.get(reverse("notification-detail", args=[foreign.id]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_inbox_requires_session(self) -> None:
        response = self.client.get(reverse("notification-list"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_inbox_is_read_only(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.post(reverse("notification-list"), {"message": "spoof"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)


class CreateNotificationTests(TestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(email="user@example.com", password="secret12")

    def test_creates_entry(self) -> None:
        self.assertTrue(create_notification(self.user, "Hello"))

        entry = Notification.objects.get()
        self.assertEqual(entry.receiver, self.user)
        self.assertIsNone(entry.property)

    def test_failure_is_reported_not_raised(self) -> None:
        with mock.patch.object(Notification.objects, "create", side_effect=RuntimeError("db down")):
            self.assertFalse(create_notification(self.user, "Hello"))

        self.assertFalse(Notification.objects.exists())
