"""Cyclopts CLI entry point for llog."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from cyclopts import App, Parameter

import llog
from llog.lib.colors import parse_color
from llog.lib.runtime import configure
from llog.lib.templates import preset

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GlobalOptions:
    """Top-level options that apply to all commands."""

    colors: bool | None = None
    config_path: Path | None = None
    verbosity: int = 0
    log_json: bool = False


def _extract_global_options(argv: Sequence[str]) -> tuple[list[str], GlobalOptions]:
    colors: bool | None = None
    config_path: Path | None = None
    verbosity = 0
    log_json = False
    cleaned: list[str] = []

    i = 0
    while i < len(argv):
        arg = argv[i]
        # Global flags end at the command name; later tokens belong to it.
        if arg == "--" or not arg.startswith("-"):
            cleaned.extend(argv[i:])
            break
        if arg == "--color":
            colors = True
            i += 1
            continue
        if arg == "--no-color":
            colors = False
            i += 1
            continue
        if arg in {"--verbose", "-v"}:
            verbosity += 1
            i += 1
            continue
        if arg == "--log-json":
            log_json = True
            i += 1
            continue
        if arg == "--config":
            if i + 1 >= len(argv):
                raise SystemExit("--config requires a value")
            config_path = Path(argv[i + 1])
            i += 2
            continue
        if arg.startswith("--config="):
            config_path = Path(arg.partition("=")[2])
            i += 1
            continue

        cleaned.append(arg)
        i += 1

    return cleaned, GlobalOptions(
        colors=colors,
        config_path=config_path,
        verbosity=verbosity,
        log_json=log_json,
    )


app = App(
    name="llog",
    help="Print framed, optionally colored records to stdout and files.",
    version=llog.__version__,
    help_formatter="plain",
)


def _resolve_template(template: str, color: str | None) -> llog.PrintTemplate:
    resolved = preset(template)
    if color is not None:
        resolved = resolved.with_color(parse_color(color))
    return resolved


@app.command(name="print")
def print_command(
    *values: str,
    template: Annotated[
        str,
        Parameter(name="--template", help="Preset template: default, error, warning, message."),
    ] = "default",
    color: Annotated[
        str | None,
        Parameter(name="--with-color", help="Override the template color, e.g. cyan."),
    ] = None,
) -> None:
    """Print VALUES as one record on stdout."""

    if not values:
        raise ValueError("print requires at least one value.")
    llog.print(_resolve_template(template, color), *values)


@app.command(name="write")
def write_command(
    path: str,
    *values: str,
    template: Annotated[
        str,
        Parameter(name="--template", help="Preset template: default, error, warning, message."),
    ] = "default",
) -> None:
    """Write VALUES as one record to PATH, truncating it."""

    if not values:
        raise ValueError("write requires at least one value.")
    llog.print_to_file(path, preset(template), *values)


@app.command(name="cat")
def cat_command(path: str) -> None:
    """Copy the contents of PATH to stdout."""

    llog.print_from_file(path)


def _error_message(exc: Exception) -> str:
    if isinstance(exc, KeyError) and exc.args:
        return str(exc.args[0])
    message = str(exc).strip()
    if message:
        return message
    return exc.__class__.__name__


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point used by `llog` and `python -m llog`."""

    from llog.lib.logging import configure_logging

    args = list(sys.argv[1:] if argv is None else argv)
    cleaned_args, options = _extract_global_options(args)

    # Configure logging early so diagnostics go to stderr, not stdout.
    configure_logging(json_mode=options.log_json, verbosity=options.verbosity)

    try:
        configure(config_path=options.config_path, enabled=True, colors=options.colors)
        app(cleaned_args)
    except (KeyError, ValueError, TypeError) as exc:
        logger.debug("llog command failed", exc_info=True)
        print(f"error: {_error_message(exc)}", file=sys.stderr)
        raise SystemExit(1) from None
