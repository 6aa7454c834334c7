# mdtranspile

A small Markdown to HTML converter. It reads a Markdown file line by line,
classifies each line as a token, parses the tokens into a tree of elements
and renders that tree inside a complete, styled HTML page.

## Installation

```
pip install .
```

## Command line

```
mdtranspile <input_file> [output_file]
```

`output_file` defaults to `output.html`. Progress messages are printed to
standard output. For example:

```
mdtranspile document.md
mdtranspile document.md page.html
```

The command exits with status 1 when no input file is given, when the input
file is empty or cannot be read, or when the output file cannot be written;
otherwise it exits with status 0.

## What the converter recognises

Each line is classified on its own:

- Headers: `#` to `######` followed by whitespace and text, giving `<h1>` to `<h6>`
- List items starting with `-`, `*` or `+` and whitespace; consecutive items
  form one `<ul>`
- Horizontal rules: three or more of `-`, `*` or `_` on a line, giving `<hr>`
- Fenced code blocks: a line of ```` ``` ```` (optionally followed by a word)
  opens and closes a `<pre><code>` block
- Everything else is paragraph text; consecutive text lines are joined with a
  single space into one `<p>`, and blank lines are skipped

The whole document is wrapped in a `<div>`.

Inside headers, list items and paragraphs, `**bold**`, `*italic*` /
`_italic_`, `` `code` ``, `[text](url)` and `![alt](url)` are rewritten into
`<strong>`, `<em>`, `<code>`, `<a>` and `<img>` markup and the result is put
in a `<span>`. Text content, including that rewritten markup, is HTML-escaped
when the page is generated, so these inline tags appear as escaped text rather
than as live HTML.

## Library use

```python
from mdtranspile.cli import convert, wrap_document

body = convert(["# Title", "", "Some plain text."])
page = wrap_document(body)
```

The stages can also be used separately:

```python
from mdtranspile.lexer import tokenize
from mdtranspile.parser import parse_tokens
from mdtranspile.generator import Generator

tokens = tokenize(["- one", "- two"])
root = parse_tokens(tokens)
html = Generator().generate_html(root)  # '<div><ul><li>one</li><li>two</li></ul></div>'
```

- `mdtranspile.model` holds `TokenType`, `Token` and `Element`.
- `mdtranspile.lexer` holds `Lexer`, `tokenize` and `trim`.
- `mdtranspile.parser` holds `Parser`, `parse_tokens` and `parse_inline`.
- `mdtranspile.generator` holds `Generator`, `escape_html` and
  `format_attributes`.
- `mdtranspile.cli` holds `read_lines`, `write_file`, `wrap_document`,
  `convert` and `main`.

## Limitations

There are no ordered lists, nested lists, block quotes, tables or emphasis
that spans lines. Lines inside a code block are still lexed as ordinary
lines, so header and list markers inside code blocks are removed.

## Running the tests

```
pip install .[test]
pytest
```