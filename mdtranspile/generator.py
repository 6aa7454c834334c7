"""Render an element tree as HTML text."""

from __future__ import annotations

from collections.abc import Iterable

from .model import Element

_SELF_CLOSING = frozenset({"hr", "img"})

_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    }
)


def escape_html(text: str) -> str:
    """Escape the five HTML-special characters."""
    return text.translate(_ESCAPES)


def format_attributes(attributes: Iterable[str]) -> str:
    """Join raw attribute strings with single spaces."""
    return " ".join(attributes)


class Generator:
    """Produces HTML from an element tree."""

    def generate_html(self, element: Element) -> str:
        """Render an element and its children as HTML."""
        opening = f"<{element.tag}"
        if element.attributes:
            opening += " " + format_attributes(element.attributes)
        opening += ">"

        if element.tag in _SELF_CLOSING:
            return opening

        if element.children:
            body = "".join(self.generate_html(child) for child in element.children)
        else:
            body = escape_html(element.content)
        return f"{opening}{body}</{element.tag}>"