"""
Factory Method for notifications.

`NotificationFactory.create_notification()` is the single place that knows
which concrete class serves which channel. Client code asks for "EMAIL" and
gets something it can call `send()` on.

Design decisions:
- The channel key is first mapped onto the closed ChannelType enum, then
  looked up in a registry; matching is case-insensitive
- A missing key (None or "") is not an error: it yields None
- An unrecognized key is an error: UnknownChannelError carries the key
"""

import logging
from typing import Optional, Union

from factory_method.notifications import (
    ChannelType,
    EmailNotification,
    Notification,
    PushNotification,
    SMSNotification,
)

logger = logging.getLogger("factory_method")


class UnknownChannelError(ValueError):
    """Raised when a notification channel is not recognized."""

    def __init__(self, channel: str):
        self.channel = channel
        super().__init__(f"Unknown channel {channel}")


NOTIFICATION_TYPES: dict[ChannelType, type[Notification]] = {
    ChannelType.SMS: SMSNotification,
    ChannelType.EMAIL: EmailNotification,
    ChannelType.PUSH: PushNotification,
}


def parse_channel(channel: Union[str, ChannelType]) -> ChannelType:
    """
    Map a channel key onto ChannelType, ignoring case.

    Raises:
        UnknownChannelError: If the key does not name a channel
    """
    if isinstance(channel, ChannelType):
        return channel
    try:
        return ChannelType(channel.upper())
    except ValueError:
        raise UnknownChannelError(channel) from None


class NotificationFactory:
    """
    Creates Notification objects from a channel name.

    Example:
        factory = NotificationFactory()
        notification = factory.create_notification("EMAIL")
        if notification is not None:
            notification.send("Your order has been shipped!")
    """

    def create_notification(
        self, channel: Union[str, ChannelType, None]
    ) -> Optional[Notification]:
        """
        Create a notification for the given channel.

        Args:
            channel: "SMS", "EMAIL" or "PUSH" (case-insensitive)

        Returns:
            A Notification, or None if no channel was given

        Raises:
            UnknownChannelError: If the channel is not recognized
        """
        if not channel:
            logger.debug("No channel given, nothing to create")
            return None

        channel_type = parse_channel(channel)
        notification = NOTIFICATION_TYPES[channel_type]()
        logger.debug(f"Created {type(notification).__name__} for channel {channel!r}")
        return notification
