import io
import logging
from datetime import datetime

import pytest

from bikiran_utils.core.console import (
    ColorFormatter,
    ConsoleColor,
    ConsoleLogger,
    RESET,
    configure_logging,
    dump,
    dump_and_raise,
)


FIXED_NOW = datetime(2024, 3, 5, 14, 7, 9)


@pytest.fixture
def console(stream):
    return ConsoleLogger(stream=stream, use_color=False, clock=lambda: FIXED_NOW)


class TestSeverityMethods:
    def test_info_with_timestamp(self, console, stream):
        console.info("cache warmed", include_timestamp=True)
        assert stream.getvalue() == "[2024-03-05 14:07:09] ℹ INFO: cache warmed\n"

    def test_error_without_timestamp(self, console, stream):
        console.error("db unreachable", include_timestamp=False)
        assert stream.getvalue() == "✗ ERROR: db unreachable\n"

    @pytest.mark.parametrize(
        "method, tag",
        [("success", "✓ SUCCESS"), ("warning", "⚠ WARNING"), ("debug", "🐛 DEBUG")],
    )
    def test_tags(self, console, stream, method, tag):
        getattr(console, method)("msg", include_timestamp=False)
        assert stream.getvalue() == f"{tag}: msg\n"


class TestColors:
    def test_colored_line(self, stream):
        ConsoleLogger(stream=stream, use_color=True).green("ok")
        assert stream.getvalue() == f"{ConsoleColor.GREEN.foreground}ok{RESET}\n"

    def test_plain_when_color_disabled(self, console, stream):
        console.red("plain")
        assert stream.getvalue() == "plain\n"

    def test_non_tty_stream_defaults_to_plain(self, stream):
        assert ConsoleLogger(stream=stream).use_color is False

    def test_background_code(self):
        assert ConsoleColor.BLUE.background == "\033[44m"


class TestLayoutHelpers:
    def test_header(self, console, stream):
        console.write_header("Report")
        assert stream.getvalue().splitlines() == ["==========", "  Report  ", "=========="]

    def test_separator(self, console, stream):
        console.write_separator("*", 5)
        assert stream.getvalue() == "*****\n"

    def test_key_value(self, console, stream):
        console.write_key_value("Region", "eu-west")
        assert stream.getvalue() == "Region:  eu-west\n"

    def test_multi_color(self, console, stream):
        console.write_multi_color(("a", ConsoleColor.RED), ("b", ConsoleColor.BLUE))
        assert stream.getvalue() == "ab\n"

    def test_progress_finishes_line(self, console, stream):
        console.write_progress("Importing", 2, 2)
        output = stream.getvalue()
        assert "Importing [2/2] (100.0%)" in output
        assert output.endswith("\n")

    def test_progress_with_zero_total(self, console, stream):
        console.write_progress("Importing", 0, 0)
        assert "(0.0%)" in stream.getvalue()

    def test_banner(self, console, stream):
        console.write_banner("Deploy")
        assert stream.getvalue().startswith(" Deploy")


class TestColorFormatter:
    def test_plain_format(self):
        formatter = ColorFormatter(fmt="%(symbol)s %(levelname)s %(message)s", use_color=False)
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "slow request", None, None)
        assert formatter.format(record) == "⚠ WARNING slow request"

    def test_colored_format(self):
        formatter = ColorFormatter(fmt="%(message)s")
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
        assert formatter.format(record) == f"{ConsoleColor.RED.foreground}boom{RESET}"

    def test_configure_logging(self, stream):
        root = logging.getLogger()
        previous_level = root.level
        configure_logging("debug", stream=stream)
        try:
            logging.getLogger("bikiran_utils.test").debug("hello")
            assert "DEBUG bikiran_utils.test: hello" in stream.getvalue()
        finally:
            root.handlers.clear()
            root.setLevel(previous_level)


class TestDump:
    def test_numbered_blocks(self, stream):
        dump("first", None, stream=stream)
        output = stream.getvalue()
        assert "[0]\nfirst\n" in output
        assert "[1]\n(null)\n" in output

    def test_dump_and_raise(self, stream):
        with pytest.raises(RuntimeError, match='"state"'):
            dump_and_raise("state", stream=stream)
        assert "state" in stream.getvalue()
