"""Terminal color drivers.

Named colors map to host-specific side effects: ANSI SGR escapes on POSIX-like
terminals, console text attributes on Windows consoles. Drivers are picked once
per runtime by `select_color_driver()`.
"""

from __future__ import annotations

import sys
from enum import StrEnum
from typing import TYPE_CHECKING, Literal, Protocol, TextIO, cast

from llog.lib.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from llog.lib.config.settings import LlogConfig

logger = get_logger(__name__)

ColorMode = Literal["auto", "ansi", "attribute"]
COLOR_MODES: frozenset[str] = frozenset({"auto", "ansi", "attribute"})


class Color(StrEnum):
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    HIGH_INTENSITY_WHITE = "high_intensity_white"
    DEFAULT = "default"


ANSI_CODES: dict[Color, int] = {
    Color.BLACK: 30,
    Color.RED: 31,
    Color.GREEN: 32,
    Color.YELLOW: 33,
    Color.BLUE: 34,
    Color.MAGENTA: 35,
    Color.CYAN: 36,
    Color.HIGH_INTENSITY_WHITE: 37,
    Color.DEFAULT: 0,
}

CONSOLE_ATTRIBUTES: dict[Color, int] = {
    Color.BLACK: 0x00,
    Color.BLUE: 0x01,
    Color.GREEN: 0x02,
    Color.CYAN: 0x03,
    Color.RED: 0x04,
    Color.MAGENTA: 0x05,
    Color.YELLOW: 0x0E,
    Color.HIGH_INTENSITY_WHITE: 0x0F,
    # Stock grey-on-black console attribute.
    Color.DEFAULT: 0x07,
}


def parse_color(value: str) -> Color:
    """Resolve a color from its name, case-insensitively.

    >>> parse_color("High-Intensity-White")
    <Color.HIGH_INTENSITY_WHITE: 'high_intensity_white'>
    """

    normalized = value.strip().lower().replace("-", "_")
    try:
        return Color(normalized)
    except ValueError as error:
        raise ValueError(
            f"Unknown color {value!r}; expected one of: {', '.join(c.value for c in Color)}."
        ) from error


def ansi_escape(color: Color) -> str:
    return f"\033[{ANSI_CODES[color]}m"


class ColorDriver(Protocol):
    """Applies one named color to the terminal."""

    def apply(self, color: Color) -> None: ...


class NullColorDriver:
    """Driver used when colors are disabled."""

    def apply(self, color: Color) -> None:
        _ = color


class AnsiColorDriver:
    """Write SGR escapes inline to standard output."""

    def __init__(self, stream_factory: Callable[[], TextIO] | None = None) -> None:
        # Resolved per call so redirected stdout is honored.
        self._stream_factory = stream_factory or (lambda: sys.stdout)

    def apply(self, color: Color) -> None:
        try:
            self._stream_factory().write(ansi_escape(color))
        except (OSError, ValueError):
            logger.debug("color escape write failed", color=color.value, exc_info=True)


def _colorama_set_attribute(attribute: int) -> None:
    from colorama import win32

    win32.SetConsoleTextAttribute(win32.STDOUT, attribute)


class ConsoleAttributeColorDriver:
    """Set the Windows console text attribute for standard output."""

    def __init__(self, set_attribute: Callable[[int], object] | None = None) -> None:
        self._set_attribute = set_attribute or _colorama_set_attribute

    def apply(self, color: Color) -> None:
        # Attributes act on the console, not the stream: flush so earlier text
        # keeps the color it was written with.
        try:
            sys.stdout.flush()
        except (OSError, ValueError):
            logger.debug("stdout flush before attribute change failed", exc_info=True)
        try:
            self._set_attribute(CONSOLE_ATTRIBUTES[color])
        except OSError:
            logger.debug("console attribute call failed", color=color.value, exc_info=True)


def resolve_color_mode(mode: str, *, platform: str | None = None) -> Literal["ansi", "attribute"]:
    """Resolve `auto` to the host family's native color mechanism."""

    if mode not in COLOR_MODES:
        raise ValueError(f"Unknown color mode {mode!r}; expected one of: {sorted(COLOR_MODES)}.")
    if mode != "auto":
        return cast("Literal['ansi', 'attribute']", mode)
    host = sys.platform if platform is None else platform
    return "attribute" if host == "win32" else "ansi"


def select_color_driver(config: LlogConfig) -> ColorDriver:
    """Pick the driver for one runtime. Called once per initialization."""

    if not config.colors:
        return NullColorDriver()

    mode = resolve_color_mode(config.color_mode)
    logger.debug("color driver selected", mode=mode)
    if mode == "attribute":
        return ConsoleAttributeColorDriver()
    if sys.platform == "win32":
        from colorama import just_fix_windows_console

        just_fix_windows_console()
    return AnsiColorDriver()
