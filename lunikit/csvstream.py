"""Minimal delimited-text streams with escape strings and optional quoting."""

from __future__ import annotations

import io
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TextIO, TypeVar

T = TypeVar("T")

DEFAULT_DELIMITER = ","
DEFAULT_ESCAPE = "##"
DEFAULT_QUOTE = '"'


def replace_all(src: str, to_find: str, to_replace: str) -> str:
    """Replace every non-overlapping occurrence of ``to_find``, left to right."""
    if not to_find:
        return src
    return src.replace(to_find, to_replace)


def trim_right(text: str, trim_chars: str) -> str:
    """Strip ``trim_chars`` from the right; a string made only of them is kept whole."""
    stripped = text.rstrip(trim_chars)
    return stripped if stripped else text


def trim_left(text: str, trim_chars: str) -> str:
    """Strip ``trim_chars`` from the left; a string made only of them is kept whole."""
    stripped = text.lstrip(trim_chars)
    return stripped if stripped else text


def trim(text: str, trim_chars: str) -> str:
    """Strip ``trim_chars`` from both ends."""
    return trim_left(trim_right(text, trim_chars), trim_chars)


def _check_single_char(value: str, what: str) -> str:
    if len(value) != 1:
        raise ValueError(f"{what} must be a single character, got {value!r}")
    return value


class CsvReader:
    """Reads delimited fields from a text stream, one line at a time."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._line = ""
        self._pos = 0
        self._line_done = False
        self.delimiter = DEFAULT_DELIMITER
        self.unescape_str = DEFAULT_ESCAPE
        self.trim_quote = False
        self.quote = DEFAULT_QUOTE
        self.terminate_on_blank_line = True

    @classmethod
    def from_text(cls, text: str) -> CsvReader:
        """Create a reader over an in-memory string."""
        return cls(io.StringIO(text, newline="\n"))

    @classmethod
    def open(cls, path: Any) -> CsvReader:
        """Open a file for reading."""
        return cls(open(path, "r", encoding="utf-8", newline="\n"))

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> CsvReader:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    @property
    def line(self) -> str:
        """The line currently being read."""
        return self._line

    def set_delimiter(self, delimiter: str, unescape_str: str) -> None:
        """Set the delimiter and the string that stands for it inside fields."""
        self.delimiter = _check_single_char(delimiter, "delimiter")
        self.unescape_str = unescape_str

    def enable_trim_quote(self, enable: bool, quote: str) -> None:
        """Strip ``quote`` around fields and ignore delimiters inside quotes."""
        self.trim_quote = enable
        self.quote = _check_single_char(quote, "quote")

    def _getline(self) -> str | None:
        raw = self._stream.readline()
        if raw == "":
            return None
        return raw[:-1] if raw.endswith("\n") else raw

    def skip_line(self) -> None:
        """Discard the next line of input."""
        line = self._getline()
        self._line = line if line is not None else ""
        self._pos = 0
        self._line_done = False

    def read_line(self) -> bool:
        """Advance to the next line; return False at the end of the data."""
        self._line = ""
        self._pos = 0
        self._line_done = False
        while True:
            line = self._getline()
            if line is None:
                return False
            if not line:
                if self.terminate_on_blank_line:
                    return False
                continue
            self._line = line
            return True

    def _unescape(self, field: str) -> str:
        if self.unescape_str:
            field = replace_all(field, self.unescape_str, self.delimiter)
        return trim(field, self.quote) if self.trim_quote else field

    def next_field(self) -> str:
        """Return the next field of the current line, or "" past its end."""
        chars: list[str] = []
        within_quote = False
        line = self._line
        delim = self.delimiter
        self._line_done = False
        while True:
            if self._pos >= len(line):
                self._line = ""
                self._line_done = True
                break
            ch = line[self._pos]
            if self.trim_quote:
                if (
                    not within_quote
                    and ch == self.quote
                    and (self._pos == 0 or line[self._pos - 1] == delim)
                ):
                    within_quote = True
                elif within_quote and ch == self.quote:
                    within_quote = False
            self._pos += 1
            if ch == delim and not within_quote:
                break
            if ch in "\r\n":
                self._line_done = True
                break
            chars.append(ch)
        return self._unescape("".join(chars))

    def read(self, converter: Callable[[str], T] = str) -> T:  # type: ignore[assignment]
        """Read the next field and convert it."""
        return converter(self.next_field())

    def delimiter_count(self) -> int:
        """Number of delimiter characters in the current line."""
        return self._line.count(self.delimiter)

    def rest_of_line(self) -> str:
        """The unread remainder of the current line."""
        return self._line[self._pos:]

    def rows(self) -> Iterator[list[str]]:
        """Yield each remaining line as a list of fields."""
        while self.read_line():
            fields = [self.next_field()]
            while not self._line_done:
                fields.append(self.next_field())
            yield fields


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


class CsvWriter:
    """Writes delimited fields to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.after_newline = True
        self.delimiter = DEFAULT_DELIMITER
        self.escape_str = DEFAULT_ESCAPE
        self.surround_quote = False
        self.quote = DEFAULT_QUOTE

    @classmethod
    def to_string(cls) -> CsvWriter:
        """Create a writer that collects its output in memory."""
        return cls(io.StringIO(newline="\n"))

    @classmethod
    def open(cls, path: Any) -> CsvWriter:
        """Open a file for writing."""
        return cls(open(path, "w", encoding="utf-8", newline="\n"))

    def close(self) -> None:
        self._stream.close()

    def flush(self) -> None:
        self._stream.flush()

    def __enter__(self) -> CsvWriter:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def set_delimiter(self, delimiter: str, escape_str: str) -> None:
        """Set the delimiter and the string written in its place inside fields."""
        self.delimiter = _check_single_char(delimiter, "delimiter")
        self.escape_str = escape_str

    def enable_surround_quote(self, enable: bool, quote: str) -> None:
        """Surround string fields with ``quote``."""
        self.surround_quote = enable
        self.quote = _check_single_char(quote, "quote")

    def _escape(self, text: str) -> str:
        if self.escape_str:
            return replace_all(text, self.delimiter, self.escape_str)
        return text

    def write(self, value: Any) -> CsvWriter:
        """Write one field, preceded by a delimiter unless at a line start."""
        if not self.after_newline:
            self._stream.write(self.delimiter)
        if isinstance(value, str):
            text = self._escape(value)
            if self.surround_quote:
                text = f"{self.quote}{text}{self.quote}"
            self._stream.write(text)
        else:
            self._stream.write(self._escape(_to_text(value)))
        self.after_newline = False
        return self

    def newline(self) -> CsvWriter:
        """End the current line."""
        self._stream.write("\n")
        self.after_newline = True
        return self

    def write_row(self, values: Iterable[Any]) -> CsvWriter:
        """Write each value as a field, then end the line."""
        for value in values:
            self.write(value)
        return self.newline()

    def text(self) -> str:
        """Everything written so far, for an in-memory writer."""
        getvalue = getattr(self._stream, "getvalue", None)
        if getvalue is None:
            raise TypeError("writer does not hold its output in memory")
        return getvalue()