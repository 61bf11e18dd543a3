"""Render arbitrary raised values into human readable text."""

from __future__ import annotations

from typing import Any


def _type_name(value: Any) -> str:
    return getattr(type(value), "__name__", None) or "object"


def utf8_safe(text: str) -> str:
    """Escape lone surrogates so ``text`` always encodes as UTF-8.

    Paths decoded with ``surrogateescape`` end up in exception messages as
    ``\\udcXX`` code points; they are kept as a visible ``\\udcXX`` escape.
    """

    return text.encode("utf-8", "backslashreplace").decode("utf-8")


def _render(value: Any) -> str:
    if isinstance(value, BaseException):
        try:
            text = str(value)
        except Exception:
            text = ""
        return text or _type_name(value)

    if isinstance(value, str):
        return value

    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")

    for render in (str, repr):
        try:
            return render(value)
        except Exception:
            continue
    return f"<unrenderable {_type_name(value)}>"


def render_error(value: Any) -> str:
    """Return a message for ``value`` without ever raising.

    Exceptions render as ``str(exc)`` and fall back to their class name when
    the message is empty. Byte strings are decoded as UTF-8 with replacement.
    The result is always encodable as UTF-8.
    """

    return utf8_safe(_render(value))


__all__ = ["render_error", "utf8_safe"]
