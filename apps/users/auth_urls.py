"""URL routing for authentication endpoints (namespace: auth)."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .auth_views import (
    LoginView,
    LogoutView,
    MeView,
    PasswordResetRequestView,
    PasswordResetView,
    SignupView,
)

app_name = "auth"

urlpatterns = [
    path("signup", SignupView.as_view(), name="signup"),
    path("login", LoginView.as_view(), name="login"),
    path("logout", LogoutView.as_view(), name="logout"),
    path("me", MeView.as_view(), name="me"),
    path("forgot-password", PasswordResetRequestView.as_view(), name="forgot-password"),
    path("reset-password/<str:token>", PasswordResetView.as_view(), name="reset-password"),
]
