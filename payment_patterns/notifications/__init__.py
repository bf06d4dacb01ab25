"""Factory pattern: channel-based notifier dispatch."""
from .booking import BookingConfirmationService
from .clients import (
    EmailClient,
    LoggingEmailClient,
    LoggingPushNotificationClient,
    LoggingSMSClient,
    LoggingWhatsAppClient,
    PushNotificationClient,
    SMSClient,
    WhatsAppClient,
)
from .factory import NotifierFactory
from .notifiers import (
    Channel,
    EmailNotifier,
    Notifier,
    PushNotifier,
    SmsNotifier,
    WhatsAppNotifier,
)

__all__ = [
    "BookingConfirmationService",
    "Channel",
    "EmailClient",
    "EmailNotifier",
    "LoggingEmailClient",
    "LoggingPushNotificationClient",
    "LoggingSMSClient",
    "LoggingWhatsAppClient",
    "Notifier",
    "NotifierFactory",
    "PushNotificationClient",
    "PushNotifier",
    "SMSClient",
    "SmsNotifier",
    "WhatsAppClient",
    "WhatsAppNotifier",
]
