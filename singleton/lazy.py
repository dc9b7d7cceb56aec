"""
Lazy singleton (not thread-safe).

The instance is created on first request. Two threads that both find no
instance yet will each build one, so this variant only holds up when first
access happens on a single thread. Use MultithreadSingleton when that cannot
be guaranteed.

It also has no deserialization hook: unpickling a LazySingleton produces a
brand-new object.
"""

import logging
from typing import Optional

from singleton.base import _ACCESS_TOKEN, check_access

logger = logging.getLogger("singleton")


class LazySingleton:
    """Singleton created on first access, without any locking."""

    _instance: Optional["LazySingleton"] = None

    def __init__(self, _token: object = None):
        check_access(type(self), _token)
        logger.debug("LazySingleton constructed")

    @classmethod
    def get_instance(cls) -> "LazySingleton":
        """Return the instance, creating it if it doesn't exist yet."""
        if cls._instance is None:
            cls._instance = cls(_ACCESS_TOKEN)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the instance (useful for testing)."""
        cls._instance = None

    def display_message(self) -> None:
        print("Inside LazySingleton..")
