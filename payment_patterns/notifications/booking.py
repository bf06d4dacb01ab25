"""Booking confirmations, sent over whichever channel the guest picked."""

from typing import Union

import structlog

from payment_patterns.notifications.factory import NotifierFactory
from payment_patterns.notifications.notifiers import Channel

logger = structlog.get_logger(__name__)


class BookingConfirmationService:
    """Knows nothing about email, SMS or push; the factory picks the notifier."""

    def __init__(self, notifier_factory: NotifierFactory):
        self.notifier_factory = notifier_factory

    async def send_booking_confirmation(
        self, channel: Union[Channel, str], to: str, message: str
    ) -> None:
        notifier = self.notifier_factory.get(channel)
        await notifier.send(to, message)
        logger.info(
            "notification_sent",
            channel=channel.value if isinstance(channel, Channel) else channel,
            notifier=type(notifier).__name__,
        )
