"""
Eager singleton.

The instance is built when this module is imported, before anyone asks for
it. Import is serialized by the interpreter's import lock, so every thread sees
the same instance with no locking of our own.

Drawback: the instance exists even if it is never used.
"""

import logging

from singleton.base import _ACCESS_TOKEN, check_access

logger = logging.getLogger("singleton")


class EagerSingleton:
    """Singleton created at import time."""

    _instance: "EagerSingleton"

    def __init__(self, _token: object = None):
        check_access(type(self), _token)
        logger.debug("EagerSingleton constructed")

    @classmethod
    def get_instance(cls) -> "EagerSingleton":
        """Return the already-created instance."""
        return cls._instance


EagerSingleton._instance = EagerSingleton(_ACCESS_TOKEN)
