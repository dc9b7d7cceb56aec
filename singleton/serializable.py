"""
Serialization-safe singleton.

Creation uses the same double-checked locking as MultithreadSingleton. On top
of that, `__reduce__` tells pickle (and `copy`) to rebuild the object by calling
`get_instance()`, so a round-trip through persistence hands back the existing
instance instead of a fresh one.
"""

import logging
import threading
from typing import Optional

from singleton.base import _ACCESS_TOKEN, check_access

logger = logging.getLogger("singleton")


def _resolve_instance() -> "SerializableSingleton":
    # Module-level so pickle can reference it by name
    return SerializableSingleton.get_instance()


class SerializableSingleton:
    """Singleton whose identity survives pickling."""

    _instance: Optional["SerializableSingleton"] = None
    _lock = threading.Lock()

    def __init__(self, _token: object = None):
        check_access(type(self), _token)
        logger.debug("SerializableSingleton constructed")

    @classmethod
    def get_instance(cls) -> "SerializableSingleton":
        """Return the instance, creating it once under the class lock."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(_ACCESS_TOKEN)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the instance (useful for testing)."""
        with cls._lock:
            cls._instance = None

    def __reduce__(self):
        return (_resolve_instance, ())

    def display_message(self) -> None:
        print("Inside SerializableSingleton..")
