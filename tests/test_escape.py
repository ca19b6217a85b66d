from __future__ import annotations

import pytest

from actionkit.core.protocol.escape import (
    escape_data,
    escape_property,
    unescape_data,
    unescape_property,
)

SAMPLES = [
    "",
    "plain text",
    "100% done",
    "already %25 escaped",
    "crlf\r\nin the middle",
    "%0A looks like an escape",
    "a:b,c%d\re\nf",
]


def test_escape_data_table() -> None:
    assert escape_data("% \r \n : ,") == "%25 %0D %0A : ,"


def test_escape_property_table() -> None:
    assert escape_property("% \r \n : ,") == "%25 %0D %0A %3A %2C"


def test_percent_escaped_first() -> None:
    assert escape_data("\n") == "%0A"
    assert escape_data("%0A") == "%250A"


@pytest.mark.parametrize("text", SAMPLES)
def test_escaped_output_has_no_raw_specials(text: str) -> None:
    data = escape_data(text)
    prop = escape_property(text)

    assert "\r" not in data and "\n" not in data
    for ch in ("\r", "\n", ":", ","):
        assert ch not in prop
    assert data.count("%") == text.count("%") + text.count("\r") + text.count("\n")


@pytest.mark.parametrize("text", SAMPLES)
def test_unescape_inverts_escape(text: str) -> None:
    assert unescape_data(escape_data(text)) == text
    assert unescape_property(escape_property(text)) == text
