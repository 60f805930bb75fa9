"""Concurrent create calls against the one-active-booking rule."""

from __future__ import annotations

import threading

from django.db import connections
from django.db.utils import OperationalError
from django.test import TransactionTestCase

from apps.bookings import services
from apps.bookings.models import Booking
from apps.properties.models import Property
from apps.users.models import User
from shared.exceptions import DuplicateBooking

WORKERS = 8


class ConcurrentCreateBookingTests(TransactionTestCase):
    def setUp(self) -> None:
        self.owner = User.objects.create_user(
            email="owner@example.com",
            password="OwnerPass123",
            role=User.RoleChoices.OWNER,
        )
        self.renter = User.objects.create_user(email="renter@example.com", password="RenterPass123")
        self.property = Property.objects.create(owner=self.owner, title="Sea View Flat")

    def _race(self, renter_id, property_id) -> tuple[list[Booking], list[Exception]]:
        barrier = threading.Barrier(WORKERS, timeout=10)
        lock = threading.Lock()
        created: list[Booking] = []
        errors: list[Exception] = []

        def worker() -> None:
            try:
                barrier.wait()
                booking = services.create_booking(renter_id, property_id)
                with lock:
                    created.append(booking)
            except Exception as exc:
                with lock:
                    errors.append(exc)
            finally:
                connections.close_all()

        threads = [threading.Thread(target=worker) for _ in range(WORKERS)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=30)
        self.assertFalse(any(thread.is_alive() for thread in threads))
        return created, errors

    def test_only_one_active_booking_survives(self) -> None:
        created, errors = self._race(self.renter.id, self.property.id)

        active = Booking.objects.active().filter(renter=self.renter, property=self.property)
        self.assertLessEqual(active.count(), 1)
        self.assertLessEqual(len(created), 1)
        self.assertEqual(active.count(), len(created))
        self.assertEqual(len(created) + len(errors), WORKERS)
        for exc in errors:
            self.assertIsInstance(exc, (DuplicateBooking, OperationalError))

    def test_later_create_after_race_is_duplicate(self) -> None:
        created, _ = self._race(self.renter.id, self.property.id)
        if not created:
            services.create_booking(self.renter.id, self.property.id)

        with self.assertRaises(DuplicateBooking):
            services.create_booking(self.renter.id, self.property.id)
        self.assertEqual(Booking.objects.active().filter(renter=self.renter).count(), 1)
