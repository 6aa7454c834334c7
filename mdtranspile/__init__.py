"""Convert Markdown documents to HTML with a line lexer, a block parser and an HTML generator."""

__version__ = "0.1.0"