"""
Observer pattern: a video channel and its subscribers.

The channel (subject) keeps an ordered list of subscribers (observers). When a
video is uploaded, every subscriber is told to update, synchronously and in the
order they subscribed.

Design decisions:
- Subscriptions are idempotent: a subscriber appears at most once
- Constructing a subscriber has no side effects; registering it with a channel
  is a separate, explicit step
- Subscribers pull the latest video from the channel through a back-reference
  rather than receiving it as an argument
- A subscriber that raises is logged and does not stop the others
- Notification iterates over a snapshot, so changes made during a round take
  effect on the next one
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

logger = logging.getLogger("observer")


class Subscriber(ABC):
    """Observer contract for anything that can follow a channel."""

    @abstractmethod
    def update(self) -> None:
        """Called by a channel when it has something new."""


class Channel(ABC):
    """Subject contract: manages subscribers and notifies them."""

    @abstractmethod
    def subscribe(self, subscriber: Subscriber) -> bool:
        """Register a subscriber. Returns True if it was added."""

    @abstractmethod
    def unsubscribe(self, subscriber: Subscriber) -> bool:
        """Unregister a subscriber. Returns True if it was removed."""

    @abstractmethod
    def notify_subscribers(self) -> int:
        """Notify all registered subscribers. Returns how many were notified."""


class VideoChannel(Channel):
    """
    A YouTube-like channel that notifies subscribers on every upload.

    Example:
        channel = VideoChannel("Tech Insights")
        alice = ChannelSubscriber("Alice", channel)
        channel.subscribe(alice)
        channel.upload_video("Observer Pattern in Java")
    """

    def __init__(self, name: str):
        self.name = name
        self.latest_video: Optional[str] = None
        self._subscribers: list[Subscriber] = []

    def subscribe(self, subscriber: Subscriber) -> bool:
        if subscriber in self._subscribers:
            logger.debug(f"{subscriber!r} already subscribed to '{self.name}'")
            return False
        self._subscribers.append(subscriber)
        logger.debug(f"{subscriber!r} subscribed to '{self.name}'")
        return True

    def unsubscribe(self, subscriber: Subscriber) -> bool:
        try:
            self._subscribers.remove(subscriber)
        except ValueError:
            return False
        logger.debug(f"{subscriber!r} unsubscribed from '{self.name}'")
        return True

    def notify_subscribers(self) -> int:
        notified = 0
        for subscriber in list(self._subscribers):
            notified += 1
            try:
                subscriber.update()
            except Exception as e:
                logger.error(f"Subscriber {subscriber!r} failed on '{self.name}': {e}")
        return notified

    def upload_video(self, title: str) -> int:
        """
        Publish a new video and notify every subscriber.

        Args:
            title: Title of the uploaded video

        Returns:
            Number of subscribers notified
        """
        self.latest_video = title
        print(f"\n[Channel] New video uploaded: {title}")
        logger.info(f"'{self.name}' uploaded '{title}', notifying {len(self._subscribers)} subscriber(s)")
        return self.notify_subscribers()

    def get_video_information(self) -> str:
        """Describe the latest video, for subscribers to report."""
        return f'Latest video on "{self.name}": {self.latest_video}'

    @property
    def subscribers(self) -> tuple[Subscriber, ...]:
        """Current subscribers in subscription order."""
        return tuple(self._subscribers)

    def get_subscriber_count(self) -> int:
        """Get the number of subscribers."""
        return len(self._subscribers)


class ChannelSubscriber(Subscriber):
    """A user who follows one VideoChannel."""

    def __init__(self, name: str, channel: VideoChannel):
        self.name = name
        self.channel = channel

    def follow(self) -> bool:
        """Subscribe to this subscriber's channel."""
        return self.channel.subscribe(self)

    def update(self) -> None:
        print(f"[Notification] {self.name} has been notified: {self.channel.get_video_information()}")

    def __repr__(self) -> str:
        return f"ChannelSubscriber({self.name!r})"
