"""Serializers for authentication flows (signup, login, password reset)."""

from __future__ import annotations

from typing import Any

from django.contrib.auth import authenticate, get_user_model  # type: ignore
from django.db import transaction  # type: ignore
from rest_framework import serializers  # type: ignore

from .models import CustomUser, normalize_email_address

User = get_user_model()

MIN_PASSWORD_LENGTH = 6


class SignupSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(min_length=MIN_PASSWORD_LENGTH, write_only=True)
    role = serializers.ChoiceField(choices=CustomUser.RoleChoices.choices, default=CustomUser.RoleChoices.RENTER)

    def validate_email(self, value: str) -> str:
        email = normalize_email_address(value)
        if User.objects.filter(email=email).exists():
            raise serializers.ValidationError("Email already used")
        return email

    @transaction.atomic
    def create(self, validated_data: dict[str, Any]):  # type: ignore
        password = validated_data.pop("password")
        return User.objects.create_user(password=password, **validated_data)


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        user = authenticate(
            self.context.get("request"),
            username=normalize_email_address(attrs.get("email", "")),
            password=attrs.get("password", ""),
        )
        if user is None:
            raise serializers.ValidationError({"non_field_errors": ["Invalid credentials"]})
        attrs["user"] = user
        return attrs


class PasswordResetRequestSerializer(serializers.Serializer):
    email = serializers.EmailField()


class PasswordResetConfirmSerializer(serializers.Serializer):
    password = serializers.CharField(min_length=MIN_PASSWORD_LENGTH, write_only=True)
