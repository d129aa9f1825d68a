"""File-backed entry points: print records into files, copy files to stdout."""

from __future__ import annotations

import codecs
import os
import sys
from typing import IO, TYPE_CHECKING, Any, TextIO, TypeAlias

from llog.lib.formatter import render_record, split_arguments, write_record
from llog.lib.logging import get_logger
from llog.lib.runtime import get_runtime

if TYPE_CHECKING:
    from llog.lib.templates import PrintTemplate

logger = get_logger(__name__)

PathArg: TypeAlias = str | os.PathLike[str]

_COPY_CHUNK_SIZE = 64 * 1024


def _write_to_path(path: PathArg, template: PrintTemplate, record: str) -> None:
    try:
        with open(path, "w", encoding="utf-8") as stream:
            write_record(stream, template, record)
    except OSError:
        logger.debug("record file unavailable", path=os.fspath(path), exc_info=True)


def print_to_file(target: TextIO | PathArg, *args: object) -> None:
    """Print one record into a file, never colorized.

    `target` is either an open text stream, left open for the caller, or a
    path opened with create-or-truncate semantics for the duration of the
    call. A path that cannot be opened produces no output.
    """

    runtime = get_runtime()
    if not runtime.enabled:
        return
    template, values = split_arguments(args)
    record = render_record(template, values)
    if isinstance(target, str | os.PathLike):
        _write_to_path(target, template, record)
        return
    write_record(target, template, record)


def _write_bytes(out: TextIO, chunk: bytes, decoder: codecs.IncrementalDecoder) -> bool:
    buffer = getattr(out, "buffer", None)
    if buffer is None:
        out.write(decoder.decode(chunk))
        return False
    # Push pending text ahead of the raw bytes.
    out.flush()
    buffer.write(chunk)
    return True


def _copy_to_stdout(stream: IO[Any]) -> None:
    out = sys.stdout
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    used_buffer = False
    try:
        while chunk := stream.read(_COPY_CHUNK_SIZE):
            if isinstance(chunk, str):
                out.write(chunk)
            else:
                used_buffer = _write_bytes(out, chunk, decoder) or used_buffer
        tail = decoder.decode(b"", final=True)
        if tail:
            out.write(tail)
        if used_buffer:
            out.buffer.flush()
    except (OSError, ValueError):
        logger.debug("copy to stdout failed", exc_info=True)


def print_from_file(source: IO[Any] | PathArg) -> None:
    """Copy the remaining content of a stream or file to stdout verbatim.

    A closed stream or a path that cannot be opened is a no-op.
    """

    runtime = get_runtime()
    if not runtime.enabled:
        return
    if isinstance(source, str | os.PathLike):
        try:
            with open(source, "rb") as stream:
                _copy_to_stdout(stream)
        except OSError:
            logger.debug("source file unavailable", path=os.fspath(source), exc_info=True)
        return
    if source.closed:
        return
    _copy_to_stdout(source)
