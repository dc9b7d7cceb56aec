"""
Shared pytest fixtures for the design pattern demo tests.

These fixtures provide fresh objects for each test and reset the lazily
created singletons so tests don't see each other's instances.
"""

import pytest

from abstract_factory.factories import MarketingNotificationFactory, UrgentNotificationFactory
from factory_method.factory import NotificationFactory
from observer.channel import ChannelSubscriber, VideoChannel
from singleton.lazy import LazySingleton
from singleton.multithread import MultithreadSingleton
from singleton.serializable import SerializableSingleton


# =============================================================================
# Factory Fixtures
# =============================================================================

@pytest.fixture
def urgent_factory() -> UrgentNotificationFactory:
    """Fresh urgent (formal) family factory."""
    return UrgentNotificationFactory()


@pytest.fixture
def marketing_factory() -> MarketingNotificationFactory:
    """Fresh marketing (casual) family factory."""
    return MarketingNotificationFactory()


@pytest.fixture
def notification_factory() -> NotificationFactory:
    """Fresh Factory Method factory."""
    return NotificationFactory()


# =============================================================================
# Observer Fixtures
# =============================================================================

@pytest.fixture
def channel() -> VideoChannel:
    """Empty channel with no subscribers."""
    return VideoChannel("Tech Insights")


@pytest.fixture
def alice(channel: VideoChannel) -> ChannelSubscriber:
    """Subscriber bound to `channel` but not yet subscribed."""
    return ChannelSubscriber("Alice", channel)


@pytest.fixture
def bob(channel: VideoChannel) -> ChannelSubscriber:
    """Second subscriber bound to `channel`, not yet subscribed."""
    return ChannelSubscriber("Bob", channel)


# =============================================================================
# Singleton Fixtures
# =============================================================================

@pytest.fixture
def fresh_singletons():
    """Drop every lazily created singleton before and after the test."""
    for cls in (LazySingleton, MultithreadSingleton, SerializableSingleton):
        cls.reset_instance()
    yield
    for cls in (LazySingleton, MultithreadSingleton, SerializableSingleton):
        cls.reset_instance()
