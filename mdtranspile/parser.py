"""Build an element tree from the lexer's tokens."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .lexer import trim
from .model import Element, Token, TokenType

# Any character except a line terminator.
_DOT = "[^\\n\\r\\u2028\\u2029]"

_BOLD_RE = re.compile(rf"\*\*({_DOT}+?)\*\*")
_ITALIC_RE = re.compile(rf"\*({_DOT}+?)\*|_({_DOT}+?)_")
_CODE_RE = re.compile(r"`([^`]+)`")
_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")

_BLOCK_STARTS = frozenset(
    {TokenType.HEADER, TokenType.LIST_ITEM, TokenType.CODE_BLOCK, TokenType.HR}
)

_END = Token(TokenType.END_OF_FILE, "", 0)


def _substitute_inline(text: str) -> str:
    text = _BOLD_RE.sub(lambda m: f"<strong>{m.group(1)}</strong>", text)
    text = _ITALIC_RE.sub(
        lambda m: f"<em>{m.group(1) or ''}{m.group(2) or ''}</em>", text
    )
    text = _CODE_RE.sub(lambda m: f"<code>{m.group(1)}</code>", text)
    text = _LINK_RE.sub(lambda m: f'<a href="{m.group(2)}">{m.group(1)}</a>', text)
    text = _IMAGE_RE.sub(lambda m: f'<img src="{m.group(2)}" alt="{m.group(1)}">', text)
    return text


def parse_inline(text: str) -> Element | None:
    """Apply inline formatting; return a span if anything changed, else None."""
    processed = _substitute_inline(text)
    if processed != text:
        return Element("span", processed)
    return None


def _with_inline(tag: str, text: str) -> Element:
    element = Element(tag)
    inline = parse_inline(text)
    if inline is not None:
        element.add_child(inline)
    else:
        element.content = text
    return element


class Parser:
    """Turns a token sequence into a tree rooted at a div element."""

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        self._tokens: list[Token] = list(tokens)
        self._current = 0

    def set_tokens(self, tokens: Iterable[Token]) -> None:
        """Replace the tokens and rewind."""
        self._tokens = list(tokens)
        self._current = 0

    def reset(self) -> None:
        """Rewind to the first token."""
        self._current = 0

    def parse(self) -> Element:
        """Parse the remaining tokens into a root div element."""
        root = Element("div")
        while not self._at_end():
            block = self._parse_block()
            if block is not None:
                root.add_child(block)
        return root

    def _peek(self) -> Token:
        if self._current >= len(self._tokens):
            return _END
        return self._tokens[self._current]

    def _consume(self) -> Token:
        token = self._peek()
        if self._current < len(self._tokens):
            self._current += 1
        return token

    def _at_end(self) -> bool:
        return self._peek().type is TokenType.END_OF_FILE

    def _parse_block(self) -> Element | None:
        kind = self._peek().type
        if kind is TokenType.HEADER:
            return self._parse_header()
        if kind is TokenType.LIST_ITEM:
            return self._parse_list()
        if kind is TokenType.CODE_BLOCK:
            return self._parse_code_block()
        if kind is TokenType.HR:
            self._consume()
            return Element("hr")
        if kind is TokenType.NEWLINE:
            self._consume()
            return None
        return self._parse_paragraph()

    def _parse_header(self) -> Element:
        text = self._consume().value
        stripped = text.lstrip("#")
        hash_count = len(text) - len(stripped)
        level = 1
        if hash_count:
            text = trim(stripped)
            level = min(6, hash_count)
        return _with_inline(f"h{level}", text)

    def _parse_list(self) -> Element:
        list_element = Element("ul")
        while self._peek().type is TokenType.LIST_ITEM:
            list_element.add_child(_with_inline("li", self._consume().value))
        return list_element

    def _parse_paragraph(self) -> Element | None:
        parts: list[str] = []
        while not self._at_end():
            token = self._peek()
            if token.type in _BLOCK_STARTS:
                break
            if token.type is TokenType.PARAGRAPH:
                parts.append(token.value)
            self._consume()

        text = " ".join(parts)
        if not text:
            return None
        return _with_inline("p", text)

    def _parse_code_block(self) -> Element:
        self._consume()
        code = ""
        while not self._at_end():
            token = self._consume()
            if token.type is TokenType.CODE_BLOCK:
                break
            if code:
                code += "\n"
            code += token.value
        block = Element("pre")
        block.add_child(Element("code", code))
        return block


def parse_tokens(tokens: Iterable[Token]) -> Element:
    """Parse a token sequence into a root div element."""
    return Parser(tokens).parse()