"""Error reporting for the game."""

from __future__ import annotations

import sys
from typing import TextIO

ERROR_HEADER = "Error\n"


class Cub3dError(Exception):
    """Raised when the game cannot start or continue."""


def print_error(message: str | BaseException | None = None, stream: TextIO | None = None) -> None:
    """Write the ``Error`` header and an optional message to ``stream`` (stderr by default).

    The message is written as given; no newline is added after it.
    """
    out = sys.stderr if stream is None else stream
    out.write(ERROR_HEADER)
    if message is not None:
        out.write(str(message))
    out.flush()