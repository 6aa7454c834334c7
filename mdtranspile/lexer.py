"""Line-oriented lexer that classifies Markdown lines into tokens."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from .model import Token, TokenType

# Any character except a line terminator.
_DOT = "[^\\n\\r\\u2028\\u2029]"

_HEADER_RE = re.compile(rf"(#{{1,6}})\s+({_DOT}+)")
_LIST_RE = re.compile(rf"\s*[-*+]\s+({_DOT}+)")
_CODE_BLOCK_RE = re.compile(r"```(\w*)", re.ASCII)
_HR_RE = re.compile(r"\s*[-*_]{3,}\s*")

_TRIM_CHARS = " \t\r\n"


def trim(text: str) -> str:
    """Strip spaces, tabs, carriage returns and newlines from both ends."""
    return text.strip(_TRIM_CHARS)


class Lexer:
    """Turns a list of lines into tokens, one token per line."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: list[str] = list(lines)
        self._current = 0

    def set_input(self, lines: Iterable[str]) -> None:
        """Replace the input lines and rewind."""
        self._lines = list(lines)
        self._current = 0

    def next_token(self) -> Token:
        """Return the token for the next line, or END_OF_FILE when exhausted."""
        if self._current >= len(self._lines):
            return Token(TokenType.END_OF_FILE, "", self._current)

        line = self._lines[self._current]
        number = self._current
        self._current += 1

        if not trim(line):
            return Token(TokenType.NEWLINE, "", number)

        kind = self.classify_line(line)
        value = line
        if kind is TokenType.HEADER:
            value = self._extract_header_text(line)
        elif kind is TokenType.LIST_ITEM:
            match = _LIST_RE.fullmatch(line)
            if match:
                value = match.group(1)
        elif kind is TokenType.HR:
            value = ""
        return Token(kind, value, number)

    def has_more_tokens(self) -> bool:
        """Whether any input lines remain."""
        return self._current < len(self._lines)

    def reset(self) -> None:
        """Rewind to the first line."""
        self._current = 0

    def classify_line(self, line: str) -> TokenType:
        """Decide which block kind a line belongs to."""
        trimmed = trim(line)
        if _HR_RE.fullmatch(trimmed):
            return TokenType.HR
        if _HEADER_RE.fullmatch(trimmed):
            return TokenType.HEADER
        if _LIST_RE.fullmatch(trimmed):
            return TokenType.LIST_ITEM
        if _CODE_BLOCK_RE.fullmatch(trimmed):
            return TokenType.CODE_BLOCK
        return TokenType.PARAGRAPH

    def header_level(self, line: str) -> int:
        """Number of leading '#' characters of a header line, or 0."""
        match = _HEADER_RE.fullmatch(line)
        return len(match.group(1)) if match else 0

    def __iter__(self) -> Iterator[Token]:
        while self.has_more_tokens():
            yield self.next_token()

    @staticmethod
    def _extract_header_text(line: str) -> str:
        match = _HEADER_RE.fullmatch(line)
        return trim(match.group(2)) if match else line


def tokenize(lines: Iterable[str]) -> list[Token]:
    """Lex every line, returning one token per line."""
    return list(Lexer(lines))