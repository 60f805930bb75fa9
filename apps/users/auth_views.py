"""Views for authentication flows (signup, login, logout, password reset)."""

from __future__ import annotations

import logging

from django.contrib.auth import login, logout  # type: ignore
from django.urls import reverse  # type: ignore
from rest_framework import generics, permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.notifications.services import send_welcome_email

from .auth_serializers import (
    LoginSerializer,
    PasswordResetConfirmSerializer,
    PasswordResetRequestSerializer,
    SignupSerializer,
)
from .serializers import UserSerializer
from .services import find_user_by_reset_token, issue_reset_token, redeem_reset_token

logger = logging.getLogger(__name__)

RESET_REQUESTED_MESSAGE = "If an account exists for that email, a password reset link has been sent."


class SignupView(APIView):
    permission_classes = [permissions.AllowAny]

    def post(self, request):  # type: ignore
        serializer = SignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("User %s signed up as %s", user.pk, user.role)
        send_welcome_email(user)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    permission_classes = [permissions.AllowAny]

    def post(self, request):  # type: ignore
        serializer = LoginSerializer(data=request.data, context={"request": request})
        if not serializer.is_valid():
            return Response({"detail": "Invalid credentials"}, status=status.HTTP_401_UNAUTHORIZED)
        user = serializer.validated_data["user"]
        login(request, user)
        return Response(UserSerializer(user).data, status=status.HTTP_200_OK)


class LogoutView(APIView):
    permission_classes = [permissions.AllowAny]

    def post(self, request):  # type: ignore
        logout(request)
        return Response(status=status.HTTP_204_NO_CONTENT)


class MeView(generics.RetrieveUpdateAPIView):
    """Profile of the current user. Only ``name`` is editable."""

    serializer_class = UserSerializer
    permission_classes = [permissions.IsAuthenticated]
    http_method_names = ["get", "patch", "head", "options"]

    def get_object(self):  # type: ignore
        return self.request.user


class PasswordResetRequestView(APIView):
    permission_classes = [permissions.AllowAny]

    def post(self, request):  # type: ignore
        serializer = PasswordResetRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        def build_reset_link(token: str) -> str:
            return request.build_absolute_uri(reverse("auth:reset-password", args=[token]))

        issue_reset_token(serializer.validated_data["email"], build_reset_link)
        return Response({"detail": RESET_REQUESTED_MESSAGE}, status=status.HTTP_202_ACCEPTED)


class PasswordResetView(APIView):
    """GET checks a token; POST sets the new password."""

    permission_classes = [permissions.AllowAny]

    def get(self, request, token: str):  # type: ignore
        find_user_by_reset_token(token)
        return Response({"token": token, "valid": True}, status=status.HTTP_200_OK)

    def post(self, request, token: str):  # type: ignore
        serializer = PasswordResetConfirmSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        redeem_reset_token(token, serializer.validated_data["password"])
        return Response({"detail": "Password successfully updated! Please log in."}, status=status.HTTP_200_OK)
