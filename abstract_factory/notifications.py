"""
Notification products for the Abstract Factory demo.

Unlike the Factory Method demo, these notifications do not format their own
text: they hand the message to a template produced by the same factory, so a
notification and its template always come from one family.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from abstract_factory.templates import NotificationTemplate

logger = logging.getLogger("abstract_factory")


class NotificationKind(str, Enum):
    """Notification kinds a factory may be asked for."""
    EMAIL = "EMAIL"
    SMS = "SMS"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["NotificationKind"]:
        """
        Map a string onto a kind, ignoring case.

        Returns None for None, empty or unrecognized values; an unknown kind is
        just another unsupported combination for the factories.
        """
        if isinstance(value, cls):
            return value
        if not value:
            return None
        try:
            return cls(value.upper())
        except ValueError:
            return None


class Notification(ABC):
    """A notification that is sent using a template from its own family."""

    # Channel name handed to the template
    channel_name: str = ""

    @abstractmethod
    def send(self, message: str, template: NotificationTemplate) -> None:
        """
        Send a notification.

        Args:
            message: The core message to be sent
            template: The template used to format the content
        """


class EmailNotification(Notification):
    """Email notification."""

    channel_name = "Email"

    def send(self, message: str, template: NotificationTemplate) -> None:
        logger.debug(f"Email send with {type(template).__name__}")
        print("Sending Email...")
        print(template.format(self.channel_name, message))


class SMSNotification(Notification):
    """SMS text message notification."""

    channel_name = "SMS"

    def send(self, message: str, template: NotificationTemplate) -> None:
        logger.debug(f"SMS send with {type(template).__name__}")
        print("Sending SMS...")
        print(template.format(self.channel_name, message))
