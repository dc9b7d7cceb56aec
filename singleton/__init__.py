"""
Singleton demos.

Five ways to hand out exactly one instance:
- EagerSingleton: built at import
- LazySingleton: built on first access, not thread-safe
- MultithreadSingleton: built on first access under double-checked locking
- EnumSingleton: an Enum member
- SerializableSingleton: double-checked locking plus a pickle hook
"""

from singleton.base import SingletonAccessError
from singleton.eager import EagerSingleton
from singleton.enum_singleton import EnumSingleton
from singleton.lazy import LazySingleton
from singleton.multithread import MultithreadSingleton
from singleton.serializable import SerializableSingleton

__all__ = [
    "SingletonAccessError",
    "EagerSingleton",
    "EnumSingleton",
    "LazySingleton",
    "MultithreadSingleton",
    "SerializableSingleton",
]
