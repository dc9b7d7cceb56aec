"""
Factory Method demo.

A single NotificationFactory maps a channel name onto one of three
Notification implementations (Email, SMS, Push).
"""

from factory_method.factory import (
    NOTIFICATION_TYPES,
    NotificationFactory,
    UnknownChannelError,
    parse_channel,
)
from factory_method.notifications import (
    ChannelType,
    EmailNotification,
    Notification,
    PushNotification,
    SMSNotification,
)

__all__ = [
    "NOTIFICATION_TYPES",
    "NotificationFactory",
    "UnknownChannelError",
    "parse_channel",
    "ChannelType",
    "EmailNotification",
    "Notification",
    "PushNotification",
    "SMSNotification",
]
