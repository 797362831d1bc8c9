"""Error reporting helpers: formatted error codes, system errors and colored output."""

from __future__ import annotations

import enum
import os
import sys
from typing import TextIO

RESET_COLOR = "\x1b[0m"

# Messages longer than this, together with the error code, are dropped.
_INLINE_BUFFER_SIZE = 500
_SEP = ": "
_ERROR_STR = "error "


class FormatError(RuntimeError):
    """Raised when a format specification cannot be applied."""


class SystemCallError(RuntimeError):
    """An error from the operating system, with its message and code."""

    def __init__(self, error_code: int, message: str) -> None:
        self.error_code = error_code
        super().__init__(format_system_error(error_code, message))


class Color(enum.IntEnum):
    """Terminal foreground colors."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


def format_error_code(error_code: int, message: str) -> str:
    """Describe an error by its code, keeping ``message`` if it fits."""
    code_text = str(error_code)
    code_size = len(_SEP) + len(_ERROR_STR) + len(code_text)
    prefix = ""
    if len(message) <= _INLINE_BUFFER_SIZE - code_size:
        prefix = f"{message}{_SEP}"
    return f"{prefix}{_ERROR_STR}{code_text}"


def format_system_error(error_code: int, message: str) -> str:
    """Describe an OS error as ``message: <system text>``, or by its code."""
    try:
        system_message = os.strerror(error_code)
    except (ValueError, OverflowError):
        return format_error_code(error_code, message)
    return f"{message}{_SEP}{system_message}"


def report_system_error(
    error_code: int, message: str, stream: TextIO | None = None
) -> None:
    """Write a system error description and a newline to ``stream`` (stderr)."""
    out = sys.stderr if stream is None else stream
    out.write(format_system_error(error_code, message))
    out.write("\n")


def report_unknown_type(code: str, type_name: str) -> None:
    """Raise FormatError for a format code that does not apply to a type."""
    value = ord(code) & 0xFF
    if 0x20 <= value < 0x7F:
        raise FormatError(f"unknown format code '{chr(value)}' for {type_name}")
    raise FormatError(f"unknown format code '\\x{value:02x}' for {type_name}")


def print_to(stream: TextIO, text: str) -> None:
    """Write ``text`` to ``stream`` as is."""
    stream.write(text)


def print_colored(color: Color, text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` in a terminal color, then reset the color."""
    out = sys.stdout if stream is None else stream
    out.write(f"\x1b[3{int(color)}m")
    print_to(out, text)
    out.write(RESET_COLOR)