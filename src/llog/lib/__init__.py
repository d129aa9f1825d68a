"""Core llog library exports."""

from llog.lib.classify import ArgumentKind, MixedArgumentsError, UnprintableArgumentError
from llog.lib.colors import Color
from llog.lib.templates import PrintTemplate

__all__ = [
    "ArgumentKind",
    "Color",
    "MixedArgumentsError",
    "PrintTemplate",
    "UnprintableArgumentError",
]
