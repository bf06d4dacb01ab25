"""
Delivery clients used by notifiers.

The protocols describe what a real provider SDK wrapper must offer. The
``Logging*Client`` classes stand in for providers: each delivery is logged
and appended to ``sent`` so callers can inspect what went out.
"""

import asyncio
from typing import List, Protocol, Tuple

import structlog

logger = structlog.get_logger(__name__)


class EmailClient(Protocol):
    async def send_email(self, to: str, subject: str, body: str) -> None: ...


class SMSClient(Protocol):
    async def send_sms(self, to: str, message: str) -> None: ...


class PushNotificationClient(Protocol):
    async def send_push(self, to: str, title: str, message: str) -> None: ...


class WhatsAppClient(Protocol):
    async def send_whatsapp_message(self, to: str, message: str) -> None: ...


class LoggingEmailClient:
    def __init__(self) -> None:
        self.sent: List[Tuple[str, str, str]] = []

    async def send_email(self, to: str, subject: str, body: str) -> None:
        await asyncio.sleep(0)
        self.sent.append((to, subject, body))
        logger.info("email_sent", to=to, subject=subject)


class LoggingSMSClient:
    def __init__(self) -> None:
        self.sent: List[Tuple[str, str]] = []

    async def send_sms(self, to: str, message: str) -> None:
        await asyncio.sleep(0)
        self.sent.append((to, message))
        logger.info("sms_sent", to=to)


class LoggingPushNotificationClient:
    def __init__(self) -> None:
        self.sent: List[Tuple[str, str, str]] = []

    async def send_push(self, to: str, title: str, message: str) -> None:
        await asyncio.sleep(0)
        self.sent.append((to, title, message))
        logger.info("push_sent", to=to, title=title)


class LoggingWhatsAppClient:
    def __init__(self) -> None:
        self.sent: List[Tuple[str, str]] = []

    async def send_whatsapp_message(self, to: str, message: str) -> None:
        await asyncio.sleep(0)
        self.sent.append((to, message))
        logger.info("whatsapp_sent", to=to)
