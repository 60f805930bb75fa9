from unittest import mock

import pytest
from django.core import mail

from apps.notifications import mailer


def test_send_email_delivers_html_and_text():
    sent = mailer.send_email("guest@example.com", "Hello", "<p>Hi <b>there</b></p>")

    assert sent is True
    assert len(mail.outbox) == 1
    message = mail.outbox[0]
    assert message.to == ["guest@example.com"]
    assert message.subject == "Hello"
    assert message.body == "Hi there"
    assert message.alternatives[0][1] == "text/html"


def test_send_email_without_recipient_is_not_sent():
    assert mailer.send_email("", "Hello", "<p>Hi</p>") is False
    assert mail.outbox == []


def test_send_email_reports_transport_failure():
    with mock.patch(
        "django.core.mail.backends.locmem.EmailBackend.send_messages",
        side_effect=ConnectionRefusedError("smtp down"),
    ):
        assert mailer.send_email("guest@example.com", "Hello", "<p>Hi</p>") is False


def test_send_email_reports_nothing_sent():
    with mock.patch("django.core.mail.backends.locmem.EmailBackend.send_messages", return_value=0):
        assert mailer.send_email("guest@example.com", "Hello", "<p>Hi</p>") is False


def test_dispatch_sends_inline_by_default(settings):
    settings.MAILER_ASYNC = False

    with mock.patch("apps.notifications.tasks.deliver_email.delay") as delay:
        assert mailer.dispatch_email("guest@example.com", "Inline", "<p>Hi</p>") is True

    delay.assert_not_called()
    assert [m.subject for m in mail.outbox] == ["Inline"]


def test_dispatch_queues_task_when_async(settings):
    settings.MAILER_ASYNC = True

    with mock.patch("apps.notifications.tasks.deliver_email.delay") as delay:
        assert mailer.dispatch_email("guest@example.com", "Queued", "<p>Hi</p>") is True

    delay.assert_called_once_with("guest@example.com", "Queued", "<p>Hi</p>")
    assert mail.outbox == []


def test_dispatch_reports_queue_failure(settings):
    settings.MAILER_ASYNC = True

    with mock.patch("apps.notifications.tasks.deliver_email.delay", side_effect=OSError("broker down")):
        assert mailer.dispatch_email("guest@example.com", "Queued", "<p>Hi</p>") is False


def test_deliver_email_task_runs_eagerly(settings):
    settings.MAILER_ASYNC = True

    assert mailer.dispatch_email("guest@example.com", "Eager", "<p>Hi</p>") is True

    assert [m.subject for m in mail.outbox] == ["Eager"]


@pytest.mark.django_db
def test_booking_email_escapes_user_content():
    from apps.bookings.models import Booking
    from apps.notifications.services import send_booking_requested_email
    from apps.properties.models import Property
    from apps.users.models import User

    owner = User.objects.create_user(email="owner@example.com", password="secret12", role="owner")
    renter = User.objects.create_user(email="renter@example.com", password="secret12", name="<script>")
    prop = Property.objects.create(owner=owner, title="Flat & Garden")
    booking = Booking.objects.create(property=prop, renter=renter)

    assert send_booking_requested_email(booking) is True

    html = mail.outbox[0].alternatives[0][0]
    assert "&lt;script&gt;" in html
    assert "Flat &amp; Garden" in html
    assert mail.outbox[0].to == ["owner@example.com"]
    assert "<p>Home Rental System</p>" in html
    assert "\u2014" not in html
