"""Notifiers adapt each delivery client to the single ``send(to, message)`` call."""

from abc import ABC, abstractmethod
from enum import Enum

from payment_patterns.notifications.clients import (
    EmailClient,
    PushNotificationClient,
    SMSClient,
    WhatsAppClient,
)

DEFAULT_TITLE = "Notification"


class Channel(str, Enum):
    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"
    WHATSAPP = "whatsapp"


class Notifier(ABC):
    """Anything that can deliver a text message to a recipient."""

    @abstractmethod
    async def send(self, to: str, message: str) -> None:
        ...


class EmailNotifier(Notifier):
    def __init__(self, email_client: EmailClient, subject: str = DEFAULT_TITLE):
        self.email_client = email_client
        self.subject = subject

    async def send(self, to: str, message: str) -> None:
        await self.email_client.send_email(to, self.subject, message)


class SmsNotifier(Notifier):
    def __init__(self, sms_client: SMSClient):
        self.sms_client = sms_client

    async def send(self, to: str, message: str) -> None:
        await self.sms_client.send_sms(to, message)


class PushNotifier(Notifier):
    def __init__(self, push_client: PushNotificationClient, title: str = DEFAULT_TITLE):
        self.push_client = push_client
        self.title = title

    async def send(self, to: str, message: str) -> None:
        await self.push_client.send_push(to, self.title, message)


class WhatsAppNotifier(Notifier):
    def __init__(self, whatsapp_client: WhatsAppClient):
        self.whatsapp_client = whatsapp_client

    async def send(self, to: str, message: str) -> None:
        await self.whatsapp_client.send_whatsapp_message(to, message)
