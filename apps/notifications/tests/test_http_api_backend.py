from unittest import mock

import pytest
import requests
from django.core.exceptions import ImproperlyConfigured
from django.core.mail import EmailMultiAlternatives

from apps.notifications.backends import HttpApiEmailBackend


def _message(**kwargs):
    message = EmailMultiAlternatives(
        subject="Booking Rejected",
        body="plain",
        from_email="no-reply@example.com",
        to=["renter@example.com"],
        **kwargs,
    )
    message.attach_alternative("<p>html</p>", "text/html")
    return message


def _ok_response():
    response = mock.Mock()
    response.raise_for_status.return_value = None
    return response


def test_backend_requires_api_url(settings):
    settings.EMAIL_API_URL = ""

    with pytest.raises(ImproperlyConfigured):
        HttpApiEmailBackend()


def test_backend_posts_json_payload(settings):
    settings.EMAIL_API_URL = "https://mail.example.com/send"
    settings.EMAIL_API_KEY = "secret-key"
    backend = HttpApiEmailBackend()

    with mock.patch.object(requests.Session, "post", return_value=_ok_response()) as post:
        sent = backend.send_messages([_message(cc=["owner@example.com"])])

    assert sent == 1
    url = post.call_args.args[0]
    payload = post.call_args.kwargs["json"]
    assert url == "https://mail.example.com/send"
    assert payload == {
        "from": "no-reply@example.com",
        "to": ["renter@example.com"],
        "subject": "Booking Rejected",
        "text": "plain",
        "cc": ["owner@example.com"],
        "html": "<p>html</p>",
    }
    assert backend.session is None


def test_backend_sets_bearer_header(settings):
    settings.EMAIL_API_URL = "https://mail.example.com/send"
    backend = HttpApiEmailBackend(api_key="k-123")

    assert backend.open() is True
    assert backend.session.headers["Authorization"] == "Bearer k-123"
    assert backend.open() is False
    backend.close()
    assert backend.session is None


def test_backend_raises_on_http_error(settings):
    settings.EMAIL_API_URL = "https://mail.example.com/send"
    response = mock.Mock()
    response.raise_for_status.side_effect = requests.HTTPError("502 Bad Gateway")
    backend = HttpApiEmailBackend()

    with mock.patch.object(requests.Session, "post", return_value=response):
        with pytest.raises(requests.HTTPError):
            backend.send_messages([_message()])


def test_backend_fail_silently_counts_failures(settings):
    settings.EMAIL_API_URL = "https://mail.example.com/send"
    backend = HttpApiEmailBackend(fail_silently=True)

    with mock.patch.object(requests.Session, "post", side_effect=requests.ConnectionError("refused")):
        assert backend.send_messages([_message(), _message()]) == 0


def test_backend_skips_empty_batch(settings):
    settings.EMAIL_API_URL = "https://mail.example.com/send"

    assert HttpApiEmailBackend().send_messages([]) == 0
