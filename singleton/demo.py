"""
Singleton driver: which variants hold up, and how the naive ones break.

Shows:
1. Serialization: a pickle round-trip of LazySingleton yields a second object,
   while SerializableSingleton resolves back to the existing one
2. Threads: many threads racing for MultithreadSingleton all get one instance
3. Enum: EnumSingleton.INSTANCE is the single instance, no accessor needed

Serialization goes through an in-memory buffer rather than a scratch file.
"""

import io
import logging
import pickle
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable

from singleton.eager import EagerSingleton
from singleton.enum_singleton import EnumSingleton
from singleton.lazy import LazySingleton
from singleton.multithread import MultithreadSingleton
from singleton.serializable import SerializableSingleton

logger = logging.getLogger("singleton")


VARIANTS: dict[str, Callable[[], Any]] = {
    "eager": EagerSingleton.get_instance,
    "lazy": LazySingleton.get_instance,
    "multithread": MultithreadSingleton.get_instance,
    "enum": EnumSingleton.get_instance,
    "serializable": SerializableSingleton.get_instance,
}


def pickle_round_trip(obj: Any) -> Any:
    """Serialize `obj` into a buffer and read it back."""
    buffer = io.BytesIO()
    pickle.dump(obj, buffer)
    buffer.seek(0)
    return pickle.load(buffer)


def gather_instances(get_instance: Callable[[], Any], workers: int = 16) -> list[Any]:
    """
    Call `get_instance` from `workers` threads released at the same moment.

    Returns:
        Every reference the threads received
    """
    barrier = threading.Barrier(workers)

    def worker() -> Any:
        barrier.wait(timeout=5)
        return get_instance()

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(worker) for _ in range(workers)]
        return [future.result() for future in futures]


def check_variant(name: str) -> dict[str, Any]:
    """
    Report whether a variant hands out one instance and survives pickling.

    Raises:
        KeyError: If the variant name is unknown
    """
    get_instance = VARIANTS[name]
    instance = get_instance()
    return {
        "variant": name,
        "same_instance": get_instance() is instance,
        "survives_pickle": pickle_round_trip(instance) is instance,
    }


def using_serialization() -> bool:
    """Show a pickle round-trip breaking LazySingleton."""
    lazy_singleton = LazySingleton.get_instance()
    deserialized = pickle_round_trip(lazy_singleton)

    print(f"Original LazySingleton id: {id(lazy_singleton)}")
    print(f"Deserialized LazySingleton id: {id(deserialized)}")
    return deserialized is lazy_singleton


def using_serialization_safe() -> bool:
    """Show the deserialization hook keeping SerializableSingleton intact."""
    singleton = SerializableSingleton.get_instance()
    deserialized = pickle_round_trip(singleton)

    print(f"Original SerializableSingleton id: {id(singleton)}")
    print(f"Deserialized SerializableSingleton id: {id(deserialized)}")
    deserialized.display_message()
    return deserialized is singleton


def using_threads(workers: int = 16) -> bool:
    """
    Race `workers` threads through first access of a double-checked singleton.

    The race runs on a throwaway subclass with its own instance slot and lock,
    so the process-wide MultithreadSingleton is never replaced.
    """

    class RaceSingleton(MultithreadSingleton):
        _instance = None
        _lock = threading.Lock()

    instances = gather_instances(RaceSingleton.get_instance, workers)
    distinct = len({id(instance) for instance in instances})

    print(f"{workers} threads received {distinct} distinct MultithreadSingleton instance(s)")
    return distinct == 1


def using_enum() -> None:
    """EnumSingleton needs no accessor and no guard."""
    EnumSingleton.INSTANCE.do_something()


def run_singleton_demo() -> None:
    """Run every demonstration in turn."""
    print("--- Serialization (LazySingleton) ---")
    using_serialization()

    print("\n--- Serialization (SerializableSingleton) ---")
    using_serialization_safe()

    print("\n--- Threads (MultithreadSingleton) ---")
    using_threads()

    print("\n--- Enum (EnumSingleton) ---")
    using_enum()


if __name__ == "__main__":
    from shared.logging_config import configure_logging

    configure_logging()
    run_singleton_demo()
