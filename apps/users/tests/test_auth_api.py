"""API tests for authentication endpoints."""

from __future__ import annotations

from datetime import timedelta

from django.core import mail
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.auth_views import RESET_REQUESTED_MESSAGE
from apps.users.models import User


class SignupLoginTests(APITestCase):
    def test_signup_creates_user_and_sends_welcome(self) -> None:
        payload = {
            "name": "Guest",
            "email": "  Guest@Example.com ",
            "password": "StrongPass123",
            "role": "owner",
        }

        response = self.client.post(reverse("auth:signup"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["email"], "guest@example.com")
        self.assertEqual(response.data["role"], User.RoleChoices.OWNER)
        self.assertNotIn("password", response.data)
        user = User.objects.get(email="guest@example.com")
        self.assertTrue(user.check_password("StrongPass123"))
        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].subject, "Welcome to Home Rental!")

    def test_signup_defaults_to_renter(self) -> None:
        response = self.client.post(
            reverse("auth:signup"),
            {"name": "Renter", "email": "renter@example.com", "password": "secret1"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["role"], User.RoleChoices.RENTER)

    def test_signup_rejects_duplicate_email(self) -> None:
        User.objects.create_user(email="taken@example.com", password="secret1")

        response = self.client.post(
            reverse("auth:signup"),
            {"name": "Copy", "email": "TAKEN@example.com", "password": "secret12"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["email"], ["Email already used"])

    def test_signup_rejects_short_password(self) -> None:
        response = self.client.post(
            reverse("auth:signup"),
            {"name": "Short", "email": "short@example.com", "password": "123"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertIn("password", response.data)

    def test_login_opens_session(self) -> None:
        User.objects.create_user(email="login@example.com", password="CorrectPassword1", name="Login")

        response = self.client.post(
            reverse("auth:login"),
            {"email": "Login@example.com", "password": "CorrectPassword1"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["name"], "Login")
        me = self.client.get(reverse("auth:me"))
        self.assertEqual(me.status_code, status.HTTP_200_OK, me.data)
        self.assertEqual(me.data["email"], "login@example.com")

    def test_login_with_wrong_password(self) -> None:
        User.objects.create_user(email="login@example.com", password="CorrectPassword1")

        response = self.client.post(
            reverse("auth:login"),
            {"email": "login@example.com", "password": "wrong"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["detail"], "Invalid credentials")

    def test_logout_ends_session(self) -> None:
        user = User.objects.create_user(email="bye@example.com", password="secret12")
        self.client.force_login(user)

        response = self.client.post(reverse("auth:logout"))

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        me = self.client.get(reverse("auth:me"))
        self.assertEqual(me.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_me_updates_name_only(self) -> None:
        user = User.objects.create_user(email="me@example.com", password="secret12", name="Old")
        self.client.force_login(user)

        response = self.client.patch(
            reverse("auth:me"),
            {"name": "New", "role": "owner", "email": "other@example.com"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        user.refresh_from_db()
        self.assertEqual(user.name, "New")
        self.assertEqual(user.role, User.RoleChoices.RENTER)
        self.assertEqual(user.email, "me@example.com")


class PasswordResetTests(APITestCase):
    def setUp(self) -> None:
        self.user = User.objects.create_user(
            email="reset@example.com",
            password="OldPassword1",
            name="Reset",
        )

    def _request_reset(self, email: str):
        return self.client.post(reverse("auth:forgot-password"), {"email": email}, format="json")

    def test_request_for_known_email_stores_token_and_mails_link(self) -> None:
        response = self._request_reset("Reset@example.com")

        self.assertEqual(response.status_code, status.HTTP_202_ACCEPTED, response.data)
        self.assertEqual(response.data["detail"], RESET_REQUESTED_MESSAGE)
        self.user.refresh_from_db()
        self.assertEqual(len(self.user.reset_token), 64)
        self.assertTrue(self.user.reset_token_is_valid)
        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].to, ["reset@example.com"])
        self.assertIn(
            reverse("auth:reset-password", args=[self.user.reset_token]),
            mail.outbox[0].alternatives[0][0],
        )

    def test_request_for_unknown_email_looks_the_same(self) -> None:
        response = self._request_reset("nobody@example.com")

        self.assertEqual(response.status_code, status.HTTP_202_ACCEPTED, response.data)
        self.assertEqual(response.data["detail"], RESET_REQUESTED_MESSAGE)
        self.assertEqual(mail.outbox, [])

    def test_token_check(self) -> None:
        self._request_reset(self.user.email)
        self.user.refresh_from_db()
        url = reverse("auth:reset-password", args=[self.user.reset_token])

        response = self.client.get(url)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertTrue(response.data["valid"])

    def test_expired_token_is_rejected(self) -> None:
        self._request_reset(self.user.email)
        self.user.refresh_from_db()
        User.objects.filter(pk=self.user.pk).update(
            reset_token_expire=timezone.now() - timedelta(minutes=1)
        )
        url = reverse("auth:reset-password", args=[self.user.reset_token])

        check = self.client.get(url)
        redeem = self.client.post(url, {"password": "NewPassword1"}, format="json")

        self.assertEqual(check.status_code, status.HTTP_400_BAD_REQUEST, check.data)
        self.assertEqual(check.data["detail"], "Invalid or expired token.")
        self.assertEqual(redeem.status_code, status.HTTP_400_BAD_REQUEST, redeem.data)
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password("OldPassword1"))

    def test_unknown_token_is_rejected(self) -> None:
        response = self.client.get(reverse("auth:reset-password", args=["deadbeef"]))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["code"], "invalid_reset_token")

    def test_redeem_sets_password_and_clears_token(self) -> None:
        self._request_reset(self.user.email)
        self.user.refresh_from_db()
        token = self.user.reset_token
        mail.outbox.clear()

        response = self.client.post(
            reverse("auth:reset-password", args=[token]),
            {"password": "NewPassword1"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password("NewPassword1"))
        self.assertIsNone(self.user.reset_token)
        self.assertIsNone(self.user.reset_token_expire)
        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].subject, "Password Changed Successfully")

        reused = self.client.post(
            reverse("auth:reset-password", args=[token]),
            {"password": "AnotherPassword1"},
            format="json",
        )
        self.assertEqual(reused.status_code, status.HTTP_400_BAD_REQUEST)
