"""Preset print templates, e.g. `llog.print(llog.pt.error, "disk full")`."""

from llog.lib.templates import ARRAY_TEMPLATE as array
from llog.lib.templates import DEFAULT_TEMPLATE as default
from llog.lib.templates import ERROR_TEMPLATE as error
from llog.lib.templates import MESSAGE_TEMPLATE as message
from llog.lib.templates import WARNING_TEMPLATE as warning

__all__ = ["array", "default", "error", "message", "warning"]
