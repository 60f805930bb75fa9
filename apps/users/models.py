"""User domain models for Home Rental.

Users log in with their email address. A user is either a renter (books
properties) or an owner (lists properties and decides on bookings); the role
is informational for the booking flow, which checks relationships to the
resource instead.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from django.conf import settings  # type: ignore
from django.contrib.auth.models import AbstractUser, BaseUserManager  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


def normalize_email_address(email: str) -> str:
    """Lowercase and trim, so lookups and the unique index agree."""
    return (email or "").strip().lower()


class CustomUserManager(BaseUserManager):
    """Manager that uses email as the login field."""

    use_in_migrations = True

    def _create_user(self, email: str, password: str | None, **extra_fields: Any):
        if not email:
            raise ValueError("Email is required to create a user.")
        email = normalize_email_address(email)

        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_user(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        extra_fields.setdefault("role", CustomUser.RoleChoices.RENTER)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", CustomUser.RoleChoices.OWNER)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self._create_user(email, password, **extra_fields)

    def get_by_natural_key(self, username: str):
        return self.get(**{self.model.USERNAME_FIELD: normalize_email_address(username)})


class CustomUser(AbstractUser):
    """Platform user identified by email."""

    class RoleChoices(models.TextChoices):
        RENTER = "renter", _("Renter")
        OWNER = "owner", _("Owner")

    username = None  # type: ignore[assignment]
    first_name = None  # type: ignore[assignment]
    last_name = None  # type: ignore[assignment]

    email = models.EmailField(_("Email"), unique=True)
    name = models.CharField(_("Name"), max_length=150, blank=True)
    role = models.CharField(
        _("Role"),
        max_length=20,
        choices=RoleChoices.choices,
        default=RoleChoices.RENTER,
    )
    reset_token = models.CharField(max_length=64, null=True, blank=True, db_index=True)
    reset_token_expire = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CustomUserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    class Meta:
        verbose_name = _("User")
        verbose_name_plural = _("Users")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.email} ({self.get_role_display()})"

    def save(self, *args, **kwargs):  # type: ignore
        self.email = normalize_email_address(self.email)
        super().save(*args, **kwargs)

    def get_full_name(self) -> str:
        return self.name or self.email

    def get_short_name(self) -> str:
        return self.name or self.email

    # --- Password reset -----------------------------------------------------
    def set_reset_token(self, token: str) -> None:
        minutes = getattr(settings, "PASSWORD_RESET_TIMEOUT_MINUTES", 15)
        self.reset_token = token
        self.reset_token_expire = timezone.now() + timedelta(minutes=minutes)
        self.save(update_fields=["reset_token", "reset_token_expire", "updated_at"])

    def clear_reset_token(self) -> None:
        self.reset_token = None
        self.reset_token_expire = None

    @property
    def reset_token_is_valid(self) -> bool:
        return bool(
            self.reset_token
            and self.reset_token_expire
            and timezone.now() < self.reset_token_expire
        )

    def is_owner(self) -> bool:
        return self.role == self.RoleChoices.OWNER


User = CustomUser
