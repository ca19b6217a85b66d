from __future__ import annotations

import io
import logging

import pytest

from actionkit.core.protocol.annotations import Annotation, file, lines, span, title
from actionkit.core.protocol.commands import Logger, render_command


@pytest.mark.parametrize(
    ("message", "options", "expected"),
    [
        ("", [], ""),
        ("notice meeee", [], "::notice::notice meeee\n"),
        (
            "percent % percent % cr \r cr \r lf \n lf \n",
            [],
            "::notice::percent %25 percent %25 cr %0D cr %0D lf %0A lf %0A\n",
        ),
        ("notice meeee", [title("My Title")], "::notice title=My Title::notice meeee\n"),
        (
            "this is a notice",
            [title("Percent % crlf \r\n colon : comma ,")],
            "::notice title=Percent %25 crlf %0D%0A colon %3A comma %2C::this is a notice\n",
        ),
        ("notice meeee", [file("cmd/tool/main.go")], "::notice file=cmd/tool/main.go::notice meeee\n"),
        (
            "oh look, another notice",
            [file("src/some%thing/wei\rd/who:has/colonsinfilenames")],
            "::notice file=src/some%25thing/wei%0Dd/who%3Ahas/colonsinfilenames::oh look, another notice\n",
        ),
        ("notice meeee", [lines(1, 32)], "::notice::notice meeee\n"),
        ("notice meeee", [span(1, 32)], "::notice::notice meeee\n"),
        (
            "Unexpected token '<'",
            [title("Syntax Error"), file("src/lib.rs")],
            "::notice title=Syntax Error,file=src/lib.rs::Unexpected token '<'\n",
        ),
        (
            "Unused import 'os'",
            [title("Syntax Error"), file("http/handler.py"), lines(1, 1)],
            "::notice title=Syntax Error,file=http/handler.py,line=1,endLine=1::Unused import 'os'\n",
        ),
        (
            "Your code is bad",
            [title("Look Here!"), file("src/app/handler.py"), lines(184, 184), span(27, 32)],
            "::notice title=Look Here!,file=src/app/handler.py,line=184,endLine=184,col=27,endColumn=32"
            "::Your code is bad\n",
        ),
        (
            "Uh oh",
            [title("A Creative Title"), file("log/logger.py"), lines(0, 12)],
            "::notice title=A Creative Title,file=log/logger.py,line=1,endLine=12::Uh oh\n",
        ),
        (
            "Oh no!",
            [title("A Better Title"), file("cmd/main.py"), lines(1, 0)],
            "::notice title=A Better Title,file=cmd/main.py,line=1,endLine=1::Oh no!\n",
        ),
        (
            "insert message here",
            [title("Star Wars"), file("src/cli.py"), lines(37, 12)],
            "::notice title=Star Wars,file=src/cli.py,line=37,endLine=37::insert message here\n",
        ),
        ("where file?", [title("WTF"), lines(1, 4)], "::notice title=WTF::where file?\n"),
        (
            "naughty span",
            [title("Span"), file("span/span_test.py"), lines(1, 1), span(0, 12)],
            "::notice title=Span,file=span/span_test.py,line=1,endLine=1,col=1,endColumn=12::naughty span\n",
        ),
        (
            "When will the span end",
            [title("Span? What Span?"), file("my/super/code.js"), lines(42, 42), span(12, 0)],
            "::notice title=Span? What Span?,file=my/super/code.js,line=42,endLine=42::When will the span end\n",
        ),
        (
            "wow such message",
            [title("Math"), file("src/request/builder.py"), lines(128, 128), span(17, 15)],
            "::notice title=Math,file=src/request/builder.py,line=128,endLine=128,col=17,endColumn=17"
            "::wow such message\n",
        ),
        ("where file?", [title("WTF"), span(1, 4)], "::notice title=WTF::where file?\n"),
        (
            "are you mad!?",
            [title("Too Many Lines"), file("script.py"), lines(15, 19), span(1, 4)],
            "::notice title=Too Many Lines,file=script.py,line=15,endLine=19::are you mad!?\n",
        ),
    ],
)
def test_render_notice(message: str, options: list, expected: str) -> None:
    assert render_command("notice", message, *options) == expected


def test_option_order_does_not_matter() -> None:
    expected = render_command("notice", "msg", title("T"), file("a.py"), lines(3, 3), span(2, 5))
    shuffled = render_command("notice", "msg", span(2, 5), lines(3, 3), file("a.py"), title("T"))
    assert shuffled == expected == "::notice title=T,file=a.py,line=3,endLine=3,col=2,endColumn=5::msg\n"


def test_file_added_after_lines_keeps_lines() -> None:
    out = render_command("warning", "late file", lines(2, 6), file("src/main.py"))
    assert out == "::warning file=src/main.py,line=2,endLine=6::late file\n"


def test_later_option_overrides_earlier() -> None:
    out = render_command("notice", "m", title("first"), title("second"))
    assert out == "::notice title=second::m\n"


def test_annotation_render_failure_degrades_to_plain_message(caplog) -> None:
    def broken(ann: Annotation) -> None:
        raise TypeError("bad option")

    with caplog.at_level(logging.WARNING, logger="actionkit.core.protocol.commands"):
        out = render_command("error", "still logged", broken)

    assert out == "::error::still logged\n"
    assert "Dropping annotation" in caplog.text


def test_logger_warning_and_error() -> None:
    buf = io.StringIO()
    log = Logger(out=buf)

    log.warning("This is dangerous", title("Be Careful!"), file("src/main.py"), lines(2, 6))
    log.error("This is broken", title("Syntax Error"), file("src/main.py"), lines(2, 6))

    assert buf.getvalue() == (
        "::warning title=Be Careful!,file=src/main.py,line=2,endLine=6::This is dangerous\n"
        "::error title=Syntax Error,file=src/main.py,line=2,endLine=6::This is broken\n"
    )


def test_logger_empty_message_writes_nothing() -> None:
    buf = io.StringIO()
    log = Logger(out=buf)

    log.notice("", title("ignored"))
    log.debug("")
    log.mask("")

    assert buf.getvalue() == ""


@pytest.mark.parametrize(
    ("message", "args", "expected"),
    [
        ("debug log here", (), "::debug::debug log here\n"),
        ("reading file: %s", ("some/file.txt",), "::debug::reading file: some/file.txt\n"),
        (
            "stuff \r\n happening here %d%% complete",
            (42,),
            "::debug::stuff %0D%0A happening here 42%25 complete\n",
        ),
        ("100% verbatim", (), "::debug::100%25 verbatim\n"),
    ],
)
def test_logger_debug(message: str, args: tuple, expected: str) -> None:
    buf = io.StringIO()
    Logger(out=buf).debug(message, *args)
    assert buf.getvalue() == expected


def test_logger_mask_and_groups() -> None:
    buf = io.StringIO()
    log = Logger(out=buf)

    log.mask("hunter2")
    with log.grouped("Install deps"):
        log.notice("inside")

    assert buf.getvalue() == (
        "::add-mask::hunter2\n"
        "::group::Install deps\n"
        "::notice::inside\n"
        "::endgroup::\n"
    )


def test_logger_group_closed_on_exception() -> None:
    buf = io.StringIO()
    log = Logger(out=buf)

    with pytest.raises(RuntimeError):
        with log.grouped("Build"):
            raise RuntimeError("boom")

    assert buf.getvalue().endswith("::endgroup::\n")


def test_logger_defaults_to_stdout(capsys) -> None:
    Logger().notice("hello", title("T"))
    assert capsys.readouterr().out == "::notice title=T::hello\n"


@pytest.mark.parametrize(
    ("environ", "expected"),
    [
        ({}, False),
        ({"RUNNER_DEBUG": "0"}, False),
        ({"RUNNER_DEBUG": "1"}, True),
    ],
)
def test_is_debug(environ: dict[str, str], expected: bool) -> None:
    assert Logger(out=io.StringIO(), environ=environ).is_debug() is expected
