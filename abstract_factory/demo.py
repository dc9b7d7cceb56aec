"""
Alert service demo for the Abstract Factory pattern.

The client only decides which factory to use (urgent vs. marketing); the
factory hands back a notification and a template that belong together.
"""

from abstract_factory.factories import (
    MarketingNotificationFactory,
    NotificationFactory,
    UrgentNotificationFactory,
)


def send_alert(factory: NotificationFactory, kind: str, message: str) -> bool:
    """
    Create a matched notification/template pair and send `message`.

    Returns:
        True if the family supported `kind` and the message was sent
    """
    notification = factory.create_notification(kind)
    template = factory.create_template()

    if notification is None or template is None:
        return False

    notification.send(message, template)
    return True


def run_alert_service_demo() -> None:
    """Run the urgent and marketing scenarios, then an unsupported combination."""
    # Scenario 1: urgent system alert over SMS
    print("--- Running Urgent Notification Scenario ---")
    urgent_factory = UrgentNotificationFactory()
    send_alert(urgent_factory, "SMS", "System is going down for maintenance in 1 hour.")

    print("\n")

    # Scenario 2: casual marketing update over email
    print("--- Running Marketing Notification Scenario ---")
    marketing_factory = MarketingNotificationFactory()
    send_alert(marketing_factory, "EMAIL", "Our summer sale just started! Get 50% off.")

    # Marketing has no SMS product
    if marketing_factory.create_notification("SMS") is None:
        print("\nMarketing SMS is not supported by this factory.")


if __name__ == "__main__":
    from shared.logging_config import configure_logging

    configure_logging()
    run_alert_service_demo()
