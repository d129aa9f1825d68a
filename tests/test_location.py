"""Call-site stringifier."""

from __future__ import annotations

import inspect

import pytest

import llog
from llog.lib.location import format_location


def _line() -> int:
    frame = inspect.currentframe()
    assert frame is not None and frame.f_back is not None
    return frame.f_back.f_lineno


def _wrapped_location() -> str:
    return llog.location(stacklevel=2)


def test_location_reports_caller_file_and_line() -> None:
    result, line = llog.location(), _line()
    assert result == f"[FILE: {__file__} LINE: {line}] "


def test_location_ends_with_single_space() -> None:
    result = llog.location()
    assert result.startswith("[FILE: ")
    assert result.endswith("] ")


def test_location_stacklevel_reports_wrapper_caller() -> None:
    result, line = _wrapped_location(), _line()
    assert result == f"[FILE: {__file__} LINE: {line}] "


def test_location_rejects_bad_stacklevel() -> None:
    with pytest.raises(ValueError):
        llog.location(stacklevel=0)
    with pytest.raises(ValueError, match="exceeds"):
        llog.location(stacklevel=10_000)


def test_format_location() -> None:
    assert format_location("main.py", 12) == "[FILE: main.py LINE: 12] "


def test_location_as_leading_print_argument(enabled, capsys) -> None:
    where, line = llog.location(), _line()
    llog.print(llog.pt.error, where, "oops")
    assert capsys.readouterr().out == f"Error: [FILE: {__file__} LINE: {line}]  oops\n"
