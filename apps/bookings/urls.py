"""URL routing for the booking domain (namespace: orders)."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import (
    AcceptBookingView,
    BookingDetailView,
    CancelBookingView,
    CreateBookingView,
    OwnerBookingListView,
    RejectBookingView,
    RenterBookingListView,
)

app_name = "orders"

urlpatterns = [
    path("", OwnerBookingListView.as_view(), name="owner-list"),
    path("my", RenterBookingListView.as_view(), name="renter-list"),
    path("details/<int:pk>", BookingDetailView.as_view(), name="details"),
    path("<int:pk>/remove", CancelBookingView.as_view(), name="cancel"),
    path("<int:pk>/reject", RejectBookingView.as_view(), name="reject"),
    path("<int:pk>/accept", AcceptBookingView.as_view(), name="accept"),
    path("bookings/create/<int:property_id>", CreateBookingView.as_view(), name="create"),
]
