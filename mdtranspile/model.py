"""Core data types shared by the lexer, parser and generator."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class TokenType(enum.Enum):
    """Kinds of tokens produced by the lexer."""

    HEADER = enum.auto()
    LIST_ITEM = enum.auto()
    PARAGRAPH = enum.auto()
    BOLD = enum.auto()
    ITALIC = enum.auto()
    CODE_INLINE = enum.auto()
    CODE_BLOCK = enum.auto()
    HR = enum.auto()
    LINK = enum.auto()
    IMAGE = enum.auto()
    TEXT = enum.auto()
    NEWLINE = enum.auto()
    END_OF_FILE = enum.auto()


@dataclass(frozen=True)
class Token:
    """A single lexed line: its kind, its text and the line it came from."""

    type: TokenType
    value: str
    line_number: int = 0


@dataclass
class Element:
    """A node in the HTML tree built by the parser."""

    tag: str = ""
    content: str = ""
    attributes: list[str] = field(default_factory=list)
    children: list[Element] = field(default_factory=list)

    def add_child(self, child: Element) -> None:
        """Append a nested element."""
        self.children.append(child)

    def add_attribute(self, attr: str) -> None:
        """Append a raw attribute string such as 'class="x"'."""
        self.attributes.append(attr)