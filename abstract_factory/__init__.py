"""
Abstract Factory demo.

A NotificationFactory produces a family of related products:
- Notifications (Email, SMS) that know how to deliver
- A NotificationTemplate that knows how to format

Two families are provided: urgent (formal) and marketing (casual).
"""

from abstract_factory.factories import (
    FACTORIES,
    MarketingNotificationFactory,
    NotificationFactory,
    UnknownFamilyError,
    UrgentNotificationFactory,
    get_factory,
)
from abstract_factory.notifications import (
    EmailNotification,
    Notification,
    NotificationKind,
    SMSNotification,
)
from abstract_factory.templates import CasualTemplate, FormalTemplate, NotificationTemplate

__all__ = [
    "FACTORIES",
    "MarketingNotificationFactory",
    "NotificationFactory",
    "UnknownFamilyError",
    "UrgentNotificationFactory",
    "get_factory",
    "EmailNotification",
    "Notification",
    "NotificationKind",
    "SMSNotification",
    "CasualTemplate",
    "FormalTemplate",
    "NotificationTemplate",
]
