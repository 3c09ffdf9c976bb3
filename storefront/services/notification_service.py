# storefront/services/notification_service.py
from storefront.celery_worker import celery_app
from storefront.utils.logging import get_logger
from storefront.utils.retry import broker_retry
from storefront.utils.settings import NOTIFICATION_CHANNEL

logger = get_logger(__name__)

CHANNELS = ("email", "sms")
WELCOME_MESSAGE = "Welcome to our store"


class NotificationService:
    """
    Sends notifications to users.
    Uses Celery so the request never waits for the delivery.
    """

    def __init__(self, channel: str | None = None):
        channel = channel or NOTIFICATION_CHANNEL
        if channel not in CHANNELS:
            raise ValueError(f"Unknown notification channel: {channel}")
        self.channel = channel

    @broker_retry()
    def send(self, recipient: str, message: str):
        logger.info(f"Queueing {self.channel} notification for {recipient}")
        return send_notification_task.delay(self.channel, recipient, message)

    def send_welcome(self, recipient: str):
        return self.send(recipient, WELCOME_MESSAGE)


@celery_app.task(name="storefront.services.notification_service.send_notification_task")
def send_notification_task(channel: str, recipient: str, message: str):
    """
    Delivery stub, only logs. A real system would call an email or SMS gateway here.
    """
    if channel == "sms":
        logger.info(f"[SMS] to {recipient}: {message}")
    else:
        logger.info(f"[EMAIL] to {recipient}: {message}")

    return {"channel": channel, "recipient": recipient, "status": "sent"}
