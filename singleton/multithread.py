"""
Thread-safe lazy singleton using double-checked locking.

The first check runs without the lock, so once the instance exists every call
is a plain attribute read. Only callers that still see no instance take the
lock, and they check again under it, so exactly one of them constructs.
"""

import logging
import threading
from typing import Optional

from singleton.base import _ACCESS_TOKEN, check_access

logger = logging.getLogger("singleton")


class MultithreadSingleton:
    """Singleton created on first access, safe under concurrent first access."""

    _instance: Optional["MultithreadSingleton"] = None
    _lock = threading.Lock()

    def __init__(self, _token: object = None):
        check_access(type(self), _token)
        logger.debug("MultithreadSingleton constructed")

    @classmethod
    def get_instance(cls) -> "MultithreadSingleton":
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
