"""
Construction guard shared by the class-based singletons.

Python has no private constructors, so each singleton's __init__ demands a
module-private token that only its own get_instance() passes. Calling the class
directly raises SingletonAccessError.

Caveat: this closes the obvious door, not every door. Anything that skips
__init__ entirely (object.__new__, unpickling without a hook) can still build a
second object; see SerializableSingleton and EnumSingleton for the variants
that hold up against that.
"""

_ACCESS_TOKEN = object()


class SingletonAccessError(TypeError):
    """Raised when a singleton class is instantiated directly."""

    def __init__(self, cls: type):
        self.singleton_class = cls
        super().__init__(
            f"{cls.__name__} cannot be instantiated directly; use {cls.__name__}.get_instance()"
        )


def check_access(cls: type, token: object) -> None:
    """Raise SingletonAccessError unless `token` is the private access token."""
    if token is not _ACCESS_TOKEN:
        raise SingletonAccessError(cls)
