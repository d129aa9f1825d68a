"""Call-site stringifier used as a leading print argument."""

from __future__ import annotations

import inspect


def format_location(file_name: str, line: int) -> str:
    """
    >>> format_location("main.py", 12)
    '[FILE: main.py LINE: 12] '
    """
    return f"[FILE: {file_name} LINE: {line}] "


def location(*, stacklevel: int = 1) -> str:
    """Return `[FILE: <file> LINE: <line>] ` for the calling frame.

    `stacklevel` follows the `logging` convention: 1 is the direct caller,
    2 the caller's caller, and so on.
    """

    if stacklevel < 1:
        raise ValueError("stacklevel must be >= 1.")
    frame = inspect.currentframe()
    try:
        caller = frame
        for _ in range(stacklevel):
            caller = caller.f_back if caller is not None else None
        if caller is None:
            raise ValueError(f"stacklevel {stacklevel} exceeds the call stack depth.")
        return format_location(caller.f_code.co_filename, caller.f_lineno)
    finally:
        del frame
