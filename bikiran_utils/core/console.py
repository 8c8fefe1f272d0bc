"""Colored console output for operators.

``ConsoleLogger`` writes ANSI-colored lines to a stream; ``ColorFormatter``
applies the same palette to standard ``logging`` records.
"""

import json
import logging
import shutil
import sys
from datetime import datetime
from enum import Enum
from typing import Callable, Optional, TextIO, Tuple

from .config import Config


RESET = "\033[0m"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class ConsoleColor(str, Enum):
    BLACK = "30"
    RED = "31"
    GREEN = "32"
    YELLOW = "33"
    BLUE = "34"
    MAGENTA = "35"
    CYAN = "36"
    GRAY = "37"
    DARK_BLUE = "34;2"
    WHITE = "97"

    @property
    def foreground(self) -> str:
        return f"\033[{self.value}m"

    @property
    def background(self) -> str:
        # Background codes are foreground + 10
        code = self.value.split(";")[0]
        return f"\033[{int(code) + 10}m"


class ConsoleLogger:
    def __init__(
        self,
        stream: Optional[TextIO] = None,
        use_color: Optional[bool] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        if use_color is None:
            use_color = bool(getattr(self.stream, "isatty", lambda: False)())
        self.use_color = use_color
        self.clock = clock

    def _paint(self, text: str, color: ConsoleColor, background: Optional[ConsoleColor] = None) -> str:
        if not self.use_color:
            return text
        prefix = color.foreground + (background.background if background else "")
        return f"{prefix}{text}{RESET}"

    def write(self, message: str, color: ConsoleColor) -> None:
        self.stream.write(self._paint(message, color))
        self.stream.flush()

    def write_line(self, message: str, color: ConsoleColor) -> None:
        self.write(message, color)
        self.stream.write("\n")
        self.stream.flush()

    def green(self, message: str) -> None:
        self.write_line(message, ConsoleColor.GREEN)

    def red(self, message: str) -> None:
        self.write_line(message, ConsoleColor.RED)

    def yellow(self, message: str) -> None:
        self.write_line(message, ConsoleColor.YELLOW)

    def blue(self, message: str) -> None:
        self.write_line(message, ConsoleColor.BLUE)

    def cyan(self, message: str) -> None:
        self.write_line(message, ConsoleColor.CYAN)

    def magenta(self, message: str) -> None:
        self.write_line(message, ConsoleColor.MAGENTA)

    def gray(self, message: str) -> None:
        self.write_line(message, ConsoleColor.GRAY)

    def white(self, message: str) -> None:
        self.write_line(message, ConsoleColor.WHITE)

    def _tagged(self, tag: str, message: str, include_timestamp: Optional[bool]) -> str:
        if include_timestamp is None:
            include_timestamp = Config.console_timestamps()
        if include_timestamp:
            return f"[{self.clock().strftime(TIMESTAMP_FORMAT)}] {tag}: {message}"
        return f"{tag}: {message}"

    def success(self, message: str, include_timestamp: Optional[bool] = None) -> None:
        self.write_line(self._tagged("✓ SUCCESS", message, include_timestamp), ConsoleColor.GREEN)

    def info(self, message: str, include_timestamp: Optional[bool] = None) -> None:
        self.write_line(self._tagged("ℹ INFO", message, include_timestamp), ConsoleColor.CYAN)

    def warning(self, message: str, include_timestamp: Optional[bool] = None) -> None:
        self.write_line(self._tagged("⚠ WARNING", message, include_timestamp), ConsoleColor.YELLOW)

    def error(self, message: str, include_timestamp: Optional[bool] = None) -> None:
        self.write_line(self._tagged("✗ ERROR", message, include_timestamp), ConsoleColor.RED)

    def debug(self, message: str, include_timestamp: Optional[bool] = None) -> None:
        self.write_line(self._tagged("🐛 DEBUG", message, include_timestamp), ConsoleColor.GRAY)

    def write_multi_color(self, *segments: Tuple[str, ConsoleColor]) -> None:
        for text, color in segments:
            self.stream.write(self._paint(text, color))
        self.stream.write("\n")
        self.stream.flush()

    def write_header(self, title: str, color: ConsoleColor = ConsoleColor.CYAN) -> None:
        border = "=" * (len(title) + 4)
        self.write_line(border, color)
        self.write_line(f"  {title}  ", color)
        self.write_line(border, color)

    def write_separator(self, character: str = "-", length: int = 50, color: ConsoleColor = ConsoleColor.GRAY) -> None:
        self.write_line(character * length, color)

    def write_key_value(
        self,
        key: str,
        value: str,
        key_color: ConsoleColor = ConsoleColor.YELLOW,
        value_color: ConsoleColor = ConsoleColor.WHITE,
    ) -> None:
        self.write(f"{key}:  ", key_color)
        self.write_line(value, value_color)

    def write_progress(self, message: str, current: int, total: int, color: ConsoleColor = ConsoleColor.GREEN) -> None:
        percentage = current / total * 100 if total > 0 else 0.0
        output = f"{message} [{current}/{total}] ({percentage:.1f}%)"
        width = shutil.get_terminal_size().columns
        self.write(f"\r{output}".ljust(width - 1), color)
        if current >= total:
            self.stream.write("\n")
            self.stream.flush()

    def write_banner(
        self,
        message: str,
        foreground: ConsoleColor = ConsoleColor.WHITE,
        background: ConsoleColor = ConsoleColor.DARK_BLUE,
    ) -> None:
        width = shutil.get_terminal_size().columns
        self.stream.write(self._paint(f" {message.ljust(width - 2)} ", foreground, background))
        self.stream.write("\n")
        self.stream.flush()

    def clear(self) -> None:
        if self.use_color:
            self.stream.write("\033[2J\033[H")
            self.stream.flush()


LEVEL_STYLES = {
    logging.DEBUG: ("🐛", ConsoleColor.GRAY),
    logging.INFO: ("ℹ", ConsoleColor.CYAN),
    logging.WARNING: ("⚠", ConsoleColor.YELLOW),
    logging.ERROR: ("✗", ConsoleColor.RED),
    logging.CRITICAL: ("✗", ConsoleColor.RED),
}


class ColorFormatter(logging.Formatter):
    """Logging formatter using the console palette for each level."""

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = TIMESTAMP_FORMAT, use_color: bool = True) -> None:
        super().__init__(fmt or "[%(asctime)s] %(symbol)s %(levelname)s %(name)s: %(message)s", datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        symbol, color = LEVEL_STYLES.get(record.levelno, ("", ConsoleColor.WHITE))
        record.symbol = symbol
        text = super().format(record)
        if not self.use_color:
            return text
        return f"{color.foreground}{text}{RESET}"


def configure_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    stream = stream if stream is not None else sys.stderr
    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColorFormatter(use_color=bool(getattr(stream, "isatty", lambda: False)())))
    logging.basicConfig(
        level=(level or Config.LOG_LEVEL).upper(),
        handlers=[handler],
        force=True,
    )


def dump(*values: object, stream: Optional[TextIO] = None) -> None:
    """Print each value in its own numbered block for quick debugging."""
    stream = stream if stream is not None else sys.stdout
    for index, value in enumerate(values):
        stream.write(" \n")
        stream.write(f"{'+' * 78}[{index}]\n")
        stream.write(f"{'(null)' if value is None else value}\n")
        stream.write(" \n")
    stream.flush()


def dump_and_raise(*values: object, stream: Optional[TextIO] = None) -> None:
    dump(*values, stream=stream)
    raise RuntimeError(json.dumps(values, default=str))
