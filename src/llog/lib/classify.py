"""Argument classification for the formatter.

Every argument is string-like, a container, or a scalar rendered with
`str()`. String-likes are matched first so `str` and `bytes` are never
decomposed into characters.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum


class ArgumentKind(StrEnum):
    STRING = "string"
    SCALAR = "scalar"
    CONTAINER = "container"


class UnprintableArgumentError(TypeError):
    """Raised for a container element the formatter cannot render inline."""


class MixedArgumentsError(TypeError):
    """Raised when one call mixes containers with scalar arguments."""


STRING_TYPES: tuple[type, ...] = (str, bytes, bytearray)


def classify(value: object) -> ArgumentKind:
    if isinstance(value, STRING_TYPES):
        return ArgumentKind.STRING
    if isinstance(value, Iterable):
        return ArgumentKind.CONTAINER
    return ArgumentKind.SCALAR


def is_printable(kind: ArgumentKind) -> bool:
    return kind is not ArgumentKind.CONTAINER


def classify_call(args: tuple[object, ...]) -> ArgumentKind:
    """Return the shared kind of one call's arguments.

    Strings and scalars are interchangeable inside a call and report as
    SCALAR; containers must not be mixed with either.
    """

    if not args:
        raise TypeError("At least one argument is required.")

    has_container = False
    has_scalar = False
    for arg in args:
        if classify(arg) is ArgumentKind.CONTAINER:
            has_container = True
        else:
            has_scalar = True
    if has_container and has_scalar:
        raise MixedArgumentsError(
            "Cannot mix containers with scalar arguments in one call."
        )
    return ArgumentKind.CONTAINER if has_container else ArgumentKind.SCALAR


def check_element(element: object) -> object:
    """Validate one container element; nested containers are rejected."""

    if not is_printable(classify(element)):
        raise UnprintableArgumentError(
            f"Cannot print nested container of type {type(element).__name__} as an element."
        )
    return element
