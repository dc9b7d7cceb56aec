"""
Enum-based singleton.

An Enum member is created once when the class is defined. Looking it up by
value, copying it and unpickling it all return that same member, and the class
cannot be instantiated to make another one. This is the variant to reach for
by default.
"""

from enum import Enum


class EnumSingleton(Enum):
    """The single instance is EnumSingleton.INSTANCE."""

    INSTANCE = "instance"

    @classmethod
    def get_instance(cls) -> "EnumSingleton":
        return cls.INSTANCE

    def do_something(self) -> None:
        print("Inside EnumSingleton...")
