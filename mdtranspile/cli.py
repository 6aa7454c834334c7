"""Command-line entry point: convert a Markdown file into an HTML page."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .generator import Generator
from .lexer import tokenize
from .parser import parse_tokens

_PROGRAM = "mdtranspile"
_DEFAULT_OUTPUT = "output.html"

_HEAD = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Generated from Markdown</title>
    <style>
        body { font-family: Arial, sans-serif; line-height: 1.6; margin: 40px; }
        h1, h2, h3, h4, h5, h6 { color: #333; }
        code { background-color: #f4f4f4; padding: 2px 4px; border-radius: 3px; }
        pre { background-color: #f4f4f4; padding: 10px; border-radius: 5px; overflow-x: auto; }
        ul, ol { padding-left: 20px; }
        hr { border: none; border-top: 1px solid #ccc; margin: 20px 0; }
    </style>
</head>
<body>
"""

_TAIL = """</body>
</html>
"""


def read_lines(path: str) -> list[str]:
    """Read a file as lines split on newlines, without the newline characters."""
    with open(path, encoding="utf-8", newline="") as handle:
        content = handle.read()
    if not content:
        return []
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return lines


def write_file(path: str, content: str) -> None:
    """Write text to a file, replacing it."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(content)


def wrap_document(body: str) -> str:
    """Embed an HTML fragment in a complete, styled HTML page."""
    return f"{_HEAD}{body}\n{_TAIL}"


def convert(lines: Iterable[str]) -> str:
    """Convert Markdown lines into an HTML fragment."""
    return Generator().generate_html(parse_tokens(tokenize(lines)))


def _usage_text(program: str = _PROGRAM) -> str:
    """Build the usage message for the given program name."""
    return "\n".join(
        [
            f"Usage: {program} <input_file> [output_file]",
            "",
            "Arguments:",
            "  input_file   Path to the input Markdown file",
            "  output_file  Path to the output HTML file "
            f"(optional, defaults to '{_DEFAULT_OUTPUT}')",
            "",
            "Examples:",
            f"  {program} document.md",
            f"  {program} document.md output.html",
        ]
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the converter; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Error: No input file specified", file=sys.stderr)
        print(_usage_text())
        return 1

    input_file = args[0]
    output_file = args[1] if len(args) > 1 else _DEFAULT_OUTPUT

    print("Markdown to HTML Transpiler")
    print("==========================")
    print(f"Input:  {input_file}")
    print(f"Output: {output_file}")
    print()

    print("Reading input file...")
    try:
        lines = read_lines(input_file)
    except OSError:
        print(f"Error: Could not open file '{input_file}'", file=sys.stderr)
        lines = []
    if not lines:
        print("Error: Input file is empty or could not be read", file=sys.stderr)
        return 1

    print("Performing lexical analysis...")
    tokens = tokenize(lines)
    print(f"Generated {len(tokens)} tokens")

    print("Parsing tokens...")
    root = parse_tokens(tokens)

    print("Generating HTML...")
    html = Generator().generate_html(root)

    print("Writing output file...")
    try:
        write_file(output_file, wrap_document(html))
    except OSError:
        print(f"Error: Could not create output file '{output_file}'", file=sys.stderr)
        return 1

    print(f"Success! HTML file generated: {output_file}")
    print("You can open it in your web browser to view the result.")
    return 0


if __name__ == "__main__":
    sys.exit(main())