"""
Notification products for the Factory Method demo.

Each notification formats and "delivers" its own message by printing a
channel-tagged line. In a real system these would integrate with services like:
- Email: SMTP / SendGrid / AWS SES
- SMS: Twilio, Vonage
- Push: Firebase Cloud Messaging, APNS
"""

from abc import ABC, abstractmethod
from enum import Enum


class ChannelType(str, Enum):
    """Supported notification channels."""
    SMS = "SMS"
    EMAIL = "EMAIL"
    PUSH = "PUSH"


class Notification(ABC):
    """Contract shared by every notification type."""

    channel: ChannelType

    @abstractmethod
    def send(self, message: str) -> None:
        """
        Send a notification with the given message.

        Args:
            message: The message content to deliver
        """


class EmailNotification(Notification):
    """Sends email notifications."""

    channel = ChannelType.EMAIL

    def send(self, message: str) -> None:
        print(f"📧 Sending Email: {message}")


class SMSNotification(Notification):
    """Sends SMS text messages."""

    channel = ChannelType.SMS

    def send(self, message: str) -> None:
        print(f"📱 Sending SMS: {message}")


class PushNotification(Notification):
    """Sends push notifications to mobile devices."""

    channel = ChannelType.PUSH

    def send(self, message: str) -> None:
        print(f"🔔 Sending Push Notification: {message}")
