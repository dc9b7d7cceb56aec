"""
Notification service demo for the Factory Method pattern.

The client never names a concrete notification class; switching channels is a
matter of passing a different string to the factory.
"""

import sys

from factory_method.factory import NotificationFactory, UnknownChannelError


def notify(factory: NotificationFactory, channel: str, message: str) -> bool:
    """
    Create a notification for `channel` and send `message` through it.

    Returns:
        True if a notification was created and sent
    """
    notification = factory.create_notification(channel)
    if notification is None:
        return False
    notification.send(message)
    return True


def run_notification_service_demo() -> None:
    """Send over email, SMS and push, then try an unknown channel."""
    factory = NotificationFactory()

    notify(factory, "EMAIL", "Your order has been shipped!")
    notify(factory, "SMS", "Your package will arrive tomorrow.")
    notify(factory, "PUSH", "You have a new message.")

    try:
        notify(factory, "FAX", "This will not be sent.")
    except UnknownChannelError as e:
        print(f"Error: {e}", file=sys.stderr)


if __name__ == "__main__":
    from shared.logging_config import configure_logging

    configure_logging()
    run_notification_service_demo()
