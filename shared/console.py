"""
Console capture helper.

The demos communicate by printing. The API (and a few tests) need that output
as data, so this redirects stdout for the duration of a block.
"""

import io
from contextlib import contextmanager, redirect_stdout
from typing import Iterator


class CapturedOutput:
    """Holds the text printed inside a `capture_stdout()` block."""

    def __init__(self):
        self.text = ""

    @property
    def lines(self) -> list[str]:
        return self.text.splitlines()


@contextmanager
def capture_stdout() -> Iterator[CapturedOutput]:
    """
    Capture everything printed to stdout inside the block.

    Example:
        with capture_stdout() as captured:
            run_channel_demo()
        print(captured.lines)
    """
    captured = CapturedOutput()
    buffer = io.StringIO()
    try:
        with redirect_stdout(buffer):
            yield captured
    finally:
        captured.text = buffer.getvalue()
