"""API views for the booking lifecycle (mounted under /orders/)."""

from __future__ import annotations

from rest_framework import permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.users.permissions import require_session

from . import services
from .serializers import (
    BookingDetailSerializer,
    BookingSerializer,
    OwnerBookingFilterSerializer,
    OwnerBookingSerializer,
)


class BookingAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]


class CreateBookingView(BookingAPIView):
    def post(self, request, property_id: int):  # type: ignore
        booking = services.create_booking(require_session(request), property_id)
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)


class CancelBookingView(BookingAPIView):
    """Renter withdraws a pending booking."""

    def post(self, request, pk: int):  # type: ignore
        booking = services.cancel_booking(pk, require_session(request))
        return Response(BookingSerializer(booking).data, status=status.HTTP_200_OK)


class RejectBookingView(BookingAPIView):
    def post(self, request, pk: int):  # type: ignore
        booking = services.reject_booking(pk, require_session(request))
        return Response(OwnerBookingSerializer(booking).data, status=status.HTTP_200_OK)


class AcceptBookingView(BookingAPIView):
    def post(self, request, pk: int):  # type: ignore
        booking = services.accept_booking(pk, require_session(request))
        return Response(OwnerBookingSerializer(booking).data, status=status.HTTP_200_OK)


class BookingDetailView(BookingAPIView):
    def get(self, request, pk: int):  # type: ignore
        details = services.get_details(pk, require_session(request))
        return Response(BookingDetailSerializer(details).data)


class RenterBookingListView(BookingAPIView):
    def get(self, request):  # type: ignore
        bookings = services.list_for_renter(require_session(request))
        return Response({"bookings": BookingSerializer(bookings, many=True).data})


class OwnerBookingListView(BookingAPIView):
    """Bookings across every property the actor owns. Optional ``?status=``."""

    def get(self, request):  # type: ignore
        filters = OwnerBookingFilterSerializer(data=request.query_params)
        filters.is_valid(raise_exception=True)
        bookings = services.list_for_owner(
            require_session(request),
            status=filters.validated_data.get("status"),
        )
        return Response({"bookings": OwnerBookingSerializer(bookings, many=True).data})
