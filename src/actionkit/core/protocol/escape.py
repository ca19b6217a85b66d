"""Escaping rules for workflow command messages and properties."""

from __future__ import annotations

# Order matters: "%" goes first so the sequences it introduces are not
# escaped a second time.
_DATA_TABLE: tuple[tuple[str, str], ...] = (
    ("%", "%25"),
    ("\r", "%0D"),
    ("\n", "%0A"),
)

_PROPERTY_TABLE: tuple[tuple[str, str], ...] = _DATA_TABLE + (
    (":", "%3A"),
    (",", "%2C"),
)


def _replace(text: str, table: tuple[tuple[str, str], ...]) -> str:
    for raw, escaped in table:
        text = text.replace(raw, escaped)
    return text


def escape_data(text: str) -> str:
    """Escape a command message (the part after the final ``::``)."""
    return _replace(text, _DATA_TABLE)


def escape_property(text: str) -> str:
    """Escape a command property value such as ``title`` or ``file``."""
    return _replace(text, _PROPERTY_TABLE)


def unescape_data(text: str) -> str:
    """Invert :func:`escape_data`."""
    return _replace(text, tuple((e, r) for r, e in reversed(_DATA_TABLE)))


def unescape_property(text: str) -> str:
    """Invert :func:`escape_property`."""
    return _replace(text, tuple((e, r) for r, e in reversed(_PROPERTY_TABLE)))
