"""Print templates: the framing shared by every argument of one call."""

from __future__ import annotations

from dataclasses import dataclass, replace

from llog.lib.colors import Color


@dataclass(frozen=True, slots=True)
class PrintTemplate:
    """Prefix, inter-argument delimiter, suffix and color of one record.

    `start` is written once before the first argument, `delimiter` between
    adjacent arguments (between containers in container mode), `end` once after
    the last argument.
    """

    start: str
    delimiter: str
    end: str
    color: Color = Color.HIGH_INTENSITY_WHITE

    def with_color(self, color: Color) -> PrintTemplate:
        return replace(self, color=color)


DEFAULT_TEMPLATE = PrintTemplate(start="", delimiter=" ", end="\n")
ARRAY_TEMPLATE = PrintTemplate(start="", delimiter="\n", end="\n")
ERROR_TEMPLATE = PrintTemplate(start="Error: ", delimiter=" ", end="\n", color=Color.RED)
WARNING_TEMPLATE = PrintTemplate(start="Warning: ", delimiter=" ", end="\n", color=Color.YELLOW)
MESSAGE_TEMPLATE = PrintTemplate(start="Message: ", delimiter=" ", end="\n", color=Color.GREEN)

PRESETS: dict[str, PrintTemplate] = {
    "default": DEFAULT_TEMPLATE,
    "array": ARRAY_TEMPLATE,
    "error": ERROR_TEMPLATE,
    "warning": WARNING_TEMPLATE,
    "message": MESSAGE_TEMPLATE,
}


def preset(name: str) -> PrintTemplate:
    """Return the preset template registered under `name`."""

    normalized = name.strip().lower()
    try:
        return PRESETS[normalized]
    except KeyError:
        raise KeyError(
            f"Unknown template {name!r}; expected one of: {', '.join(sorted(PRESETS))}."
        ) from None
