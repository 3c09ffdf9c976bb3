import pytest
from kombu.exceptions import OperationalError

from storefront.services import notification_service
from storefront.services.notification_service import (
    WELCOME_MESSAGE,
    NotificationService,
    send_notification_task,
)


class FlakyTask:
    """Fails to publish a number of times before accepting the message."""

    def __init__(self, failures):
        self.failures = failures
        self.calls = []

    def delay(self, *args):
        self.calls.append(args)
        if len(self.calls) <= self.failures:
            raise OperationalError("broker unavailable")
        return args


def test_task_runs_eagerly():
    result = NotificationService("sms").send_welcome("+100200300")

    assert result.get() == {"channel": "sms", "recipient": "+100200300", "status": "sent"}


def test_task_body():
    assert send_notification_task("email", "a@example.com", "hi")["status"] == "sent"


def test_unknown_channel():
    with pytest.raises(ValueError):
        NotificationService("pigeon")


def test_default_channel_from_settings():
    assert NotificationService().channel == "email"


def test_publish_is_retried(monkeypatch):
    task = FlakyTask(failures=2)
    monkeypatch.setattr(notification_service, "send_notification_task", task)

    NotificationService("email").send_welcome("a@example.com")

    assert task.calls == [("email", "a@example.com", WELCOME_MESSAGE)] * 3


def test_publish_gives_up(monkeypatch):
    task = FlakyTask(failures=5)
    monkeypatch.setattr(notification_service, "send_notification_task", task)

    with pytest.raises(OperationalError):
        NotificationService("email").send_welcome("a@example.com")
    assert len(task.calls) == 3


def test_registration_queues_welcome(client, monkeypatch):
    task = FlakyTask(failures=0)
    monkeypatch.setattr(notification_service, "send_notification_task", task)

    client.post("/users", json={"name": "Alice", "email": "alice@example.com", "password": "secret123"})

    assert task.calls == [("email", "alice@example.com", WELCOME_MESSAGE)]


def test_registration_survives_broker_outage(client, monkeypatch, caplog):
    task = FlakyTask(failures=5)
    monkeypatch.setattr(notification_service, "send_notification_task", task)

    response = client.post("/users", json={"name": "Alice", "email": "alice@example.com", "password": "secret123"})

    assert response.status_code == 201
    assert len(task.calls) == 3
    assert client.get(f"/users/{response.json()['id']}").status_code == 200
    assert any(r.levelname == "ERROR" and "not queued" in r.getMessage() for r in caplog.records)
