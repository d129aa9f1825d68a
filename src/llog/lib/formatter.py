"""Variadic typed formatter.

A call's arguments are classified once, rendered into one record under a
print template, and written to a sink in a single write. Color is applied
around the write only for terminal sinks.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO, cast

from llog.lib.classify import ArgumentKind, check_element, classify_call
from llog.lib.logging import get_logger
from llog.lib.runtime import get_runtime
from llog.lib.templates import ARRAY_TEMPLATE, DEFAULT_TEMPLATE, PrintTemplate

if TYPE_CHECKING:
    from collections.abc import Iterable

    from llog.lib.runtime import Runtime

logger = get_logger(__name__)


def render_value(value: object) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bytes | bytearray):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def _render_container(container: Iterable[object]) -> str:
    return " ".join(render_value(check_element(element)) for element in container)


def split_arguments(args: tuple[object, ...]) -> tuple[PrintTemplate, tuple[object, ...]]:
    """Separate an optional leading template from the values of one call.

    Without an explicit template, scalar calls use `DEFAULT_TEMPLATE` and
    container calls use `ARRAY_TEMPLATE`.
    """

    if args and isinstance(args[0], PrintTemplate):
        return args[0], args[1:]
    if classify_call(args) is ArgumentKind.CONTAINER:
        return ARRAY_TEMPLATE, args
    return DEFAULT_TEMPLATE, args


def render_record(template: PrintTemplate, values: tuple[object, ...]) -> str:
    """Render one record.

    >>> render_record(DEFAULT_TEMPLATE, ("x", 1, 2.5))
    'x 1 2.5\\n'
    >>> render_record(ARRAY_TEMPLATE, ([10, 20, 30], (1, 2)))
    '10 20 30\\n1 2\\n'
    """

    if classify_call(values) is ArgumentKind.CONTAINER:
        body = template.delimiter.join(
            _render_container(cast("Iterable[object]", container)) for container in values
        )
    else:
        body = template.delimiter.join(render_value(value) for value in values)
    return f"{template.start}{body}{template.end}"


def _write(sink: TextIO, text: str) -> None:
    try:
        sink.write(text)
    except (OSError, ValueError, TypeError):
        logger.debug("record write failed", sink=getattr(sink, "name", repr(sink)), exc_info=True)


def write_record(
    sink: TextIO,
    template: PrintTemplate,
    record: str,
    *,
    runtime: Runtime | None = None,
) -> None:
    """Write a rendered record, colorized when a runtime is given.

    The default color is restored even if the write fails.
    """

    if runtime is None:
        _write(sink, record)
        return
    runtime.set_color(template.color)
    try:
        _write(sink, record)
    finally:
        runtime.set_color()


def print(*args: object) -> None:  # noqa: A001
    """Print one record to standard output.

    `llog.print(pt.error, "oops", 7)` writes `Error: oops 7` in red;
    `llog.print([1, 2], [3])` prints each list on its own line.
    """

    runtime = get_runtime()
    if not runtime.enabled:
        return
    template, values = split_arguments(args)
    record = render_record(template, values)
    write_record(sys.stdout, template, record, runtime=runtime)
