"""
Shared infrastructure for the design pattern demos.

This package contains code used by the CLI and the API, not by the demos
themselves:
- Logging configuration
- Stdout capture for turning demo output into data
"""

from shared.console import CapturedOutput, capture_stdout
from shared.logging_config import configure_logging

__all__ = [
    "CapturedOutput",
    "capture_stdout",
    "configure_logging",
]
