"""Tokens of logic-less templates and HTML escaping."""

from __future__ import annotations

import enum
from collections.abc import Callable


class TokenType(enum.Enum):
    TEXT = "text"
    VARIABLE = "variable"
    SECTION_OPEN = "section_open"
    SECTION_CLOSE = "section_close"
    INVERTED_SECTION_OPEN = "inverted_section_open"
    UNESCAPED_VARIABLE = "unescaped_variable"
    COMMENT = "comment"
    PARTIAL = "partial"
    DELIMITER_CHANGE = "delimiter_change"


_TAG_TYPES = {
    ">": TokenType.PARTIAL,
    "^": TokenType.INVERTED_SECTION_OPEN,
    "/": TokenType.SECTION_CLOSE,
    "&": TokenType.UNESCAPED_VARIABLE,
    "#": TokenType.SECTION_OPEN,
    "!": TokenType.COMMENT,
}


class Token:
    """A piece of a template: plain text, or a tag between delimiters.

    ``left`` and ``right`` are the lengths of the opening and closing
    delimiters around a tag; when either is zero the token is text.
    """

    def __init__(self, raw: str, left: int = 0, right: int = 0) -> None:
        self.raw = raw
        self.name = ""
        self.partial_prefix = ""
        self.delims: tuple[str, str] = ("", "")
        self.eol = False
        self.ws_only = False
        if left and right:
            end = len(raw) - right
            if raw[left] == "=" and raw[end - 1] == "=":
                self.type = TokenType.DELIMITER_CHANGE
            elif raw[left] == "{" and raw[end - 1] == "}":
                self.type = TokenType.UNESCAPED_VARIABLE
                self.name = raw[left + 1:end - 1].strip(" ")
            else:
                body = raw[left:end].lstrip(" ")
                self.type = _TAG_TYPES.get(body[:1], TokenType.VARIABLE)
                if self.type is not TokenType.VARIABLE:
                    body = body[1:].lstrip(" ")
                self.name = body.rstrip(" ")
                self.delims = (raw[:left], raw[end:])
        else:
            self.type = TokenType.TEXT
            self.eol = raw.endswith("\n")
            self.ws_only = all(ch in " \r\n\t" for ch in raw)

    def __repr__(self) -> str:
        return f"Token({self.type.name}, raw={self.raw!r}, name={self.name!r})"


class _EscapeConfig:
    """Holds the escape function used in place of the default one."""

    def __init__(self) -> None:
        self.func: Callable[[str], str] | None = None


_config = _EscapeConfig()

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "'": "&#39;",
        '"': "&quot;",
        "<": "&lt;",
        ">": "&gt;",
        "/": "&#x2F;",
    }
)


def set_escape_function(func: Callable[[str], str] | None) -> None:
    """Install a custom escape function, or None to restore the default."""
    if func is not None and not callable(func):
        raise TypeError("escape function must be callable or None")
    _config.func = func


def html_escape(text: str) -> str:
    """Escape text for HTML, using the custom escape function if one is set."""
    if _config.func is not None:
        return _config.func(text)
    return text.translate(_HTML_ESCAPES)