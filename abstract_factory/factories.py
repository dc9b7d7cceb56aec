"""
Concrete factories for the Abstract Factory demo.

Each factory produces a family of related products: notifications plus the one
template that goes with them. Clients pick a factory and never touch concrete
product classes.

Design decisions:
- Each family declares the kinds it supports as a mapping, so "is this kind
  supported?" is a dictionary lookup rather than a chain of comparisons
- An unsupported combination returns None instead of raising; the caller is
  expected to check before sending
- Kind matching is case-insensitive
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Union

from abstract_factory.notifications import (
    EmailNotification,
    Notification,
    NotificationKind,
    SMSNotification,
)
from abstract_factory.templates import (
    CasualTemplate,
    FormalTemplate,
    NotificationTemplate,
)

logger = logging.getLogger("abstract_factory")


class UnknownFamilyError(ValueError):
    """Raised when a factory family name is not recognized."""

    def __init__(self, family: Optional[str]):
        self.family = family
        super().__init__(f"Unknown notification family: {family}")


class NotificationFactory(ABC):
    """
    Abstract factory for a family of notification products.

    Subclasses fill in `supported_kinds` and `create_template()`.
    """

    supported_kinds: dict[NotificationKind, type[Notification]]

    def create_notification(
        self, kind: Union[str, NotificationKind, None]
    ) -> Optional[Notification]:
        """
        Create a notification of the given kind.

        Args:
            kind: Notification kind, e.g. "EMAIL" or "sms"

        Returns:
            A Notification, or None if this family does not support the kind
        """
        parsed = NotificationKind.parse(kind)
        notification_class = self.supported_kinds.get(parsed) if parsed else None
        if notification_class is None:
            logger.warning(f"{type(self).__name__} does not support kind {kind!r}")
            return None

        logger.debug(f"{type(self).__name__} created {notification_class.__name__}")
        return notification_class()

    @abstractmethod
    def create_template(self) -> NotificationTemplate:
        """Create the template compatible with this family's notifications."""

    def supports(self, kind: Union[str, NotificationKind, None]) -> bool:
        """Check whether this family can produce a notification of `kind`."""
        parsed = NotificationKind.parse(kind)
        return parsed is not None and parsed in self.supported_kinds


class UrgentNotificationFactory(NotificationFactory):
    """Urgent, formal notifications: Email and SMS with a FormalTemplate."""

    supported_kinds = {
        NotificationKind.EMAIL: EmailNotification,
        NotificationKind.SMS: SMSNotification,
    }

    def create_template(self) -> NotificationTemplate:
        return FormalTemplate()


class MarketingNotificationFactory(NotificationFactory):
    """Marketing updates: Email only, with a CasualTemplate."""

    # SMS is not available for marketing
    supported_kinds = {
        NotificationKind.EMAIL: EmailNotification,
    }

    def create_template(self) -> NotificationTemplate:
        return CasualTemplate()


FACTORIES: dict[str, type[NotificationFactory]] = {
    "urgent": UrgentNotificationFactory,
    "marketing": MarketingNotificationFactory,
}


def get_factory(family: Optional[str]) -> NotificationFactory:
    """
    Get a factory by family name ("urgent" or "marketing", any case).

    Raises:
        UnknownFamilyError: If the family is not recognized
    """
    factory_class = FACTORIES.get((family or "").lower())
    if factory_class is None:
        raise UnknownFamilyError(family)
    return factory_class()
