"""
Notification templates for the Abstract Factory demo.

A template turns a (channel, message) pair into the text that is actually
delivered. Each factory family is bound to exactly one template style:
- Urgent family -> FormalTemplate (bordered block with a signature)
- Marketing family -> CasualTemplate (one friendly inline sentence)
"""

from abc import ABC, abstractmethod

BANNER = "=" * 40
SIGNATURE = "System Administration"


class NotificationTemplate(ABC):
    """Formats a message for a specific channel."""

    @abstractmethod
    def format(self, channel: str, message: str) -> str:
        """
        Format the given message for a channel.

        Args:
            channel: Display name of the channel (e.g. "Email", "SMS")
            message: The message content

        Returns:
            The fully formatted notification text
        """


class FormalTemplate(NotificationTemplate):
    """Formal, professional-looking block used for urgent alerts."""

    def format(self, channel: str, message: str) -> str:
        return "\n".join([
            BANNER,
            f"Formal {channel} Notification",
            BANNER,
            f"Message: {message}",
            "Regards,",
            SIGNATURE,
            BANNER,
        ])


class CasualTemplate(NotificationTemplate):
    """Friendly single-sentence format used for marketing updates."""

    def format(self, channel: str, message: str) -> str:
        # Leading and trailing spaces are part of the format
        return f" Just a quick update for you via {channel}: {message} "
