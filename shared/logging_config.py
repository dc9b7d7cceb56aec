"""
Logging setup shared by the demo drivers, the CLI and the API.

Demo output (the part a reader is meant to watch) goes to stdout via print.
Everything emitted through `logging` goes to stderr so the two never mix.
"""

import logging

LOG_FORMAT = "%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: str = "WARNING") -> None:
    """
    Configure root logging for a demo run.

    Args:
        level: Level name ("DEBUG", "INFO", ...). Case-insensitive.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )
