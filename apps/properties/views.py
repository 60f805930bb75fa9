"""Property API views."""

from __future__ import annotations

import logging

from django.db.models import Q  # type: ignore
from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import permissions, viewsets  # type: ignore
from rest_framework.filters import OrderingFilter  # type: ignore

from .filters import PropertyFilterSet
from .models import Property
from .serializers import PropertySerializer

logger = logging.getLogger(__name__)


class IsPropertyOwnerOrReadOnly(permissions.BasePermission):
    """Anyone can read; owners create; only the listing's owner edits it."""

    message = "Only the property owner can change this listing."

    def has_permission(self, request, view):  # type: ignore
        if request.method in permissions.SAFE_METHODS:
            return True
        user = request.user
        if not user.is_authenticated:
            return False
        if getattr(view, "action", None) == "create":
            return user.is_staff or (hasattr(user, "is_owner") and user.is_owner())
        return True

    def has_object_permission(self, request, view, obj: Property):  # type: ignore
        if request.method in permissions.SAFE_METHODS:
            return True
        return obj.is_owned_by(request.user.id)


class PropertyViewSet(viewsets.ModelViewSet):
    """Listing catalog. Deletion is not exposed: bookings keep referencing listings."""

    serializer_class = PropertySerializer
    permission_classes = [IsPropertyOwnerOrReadOnly]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = PropertyFilterSet
    ordering_fields = ["price_per_night", "created_at"]
    http_method_names = ["get", "post", "put", "patch", "head", "options"]

    def get_queryset(self):  # type: ignore
        qs = Property.objects.select_related("owner")
        user = self.request.user
        if self.action in {"list", "retrieve"} and user.is_authenticated:
            # Owners also see their own inactive listings
            return qs.filter(Q(is_active=True) | Q(owner=user))
        if self.action in {"list", "retrieve"}:
            return qs.filter(is_active=True)
        return qs

    def perform_create(self, serializer):  # type: ignore
        instance = serializer.save(owner=self.request.user)
        logger.info("Property %s created by user %s", instance.pk, self.request.user.pk)
