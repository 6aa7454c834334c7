from mdtranspile.lexer import tokenize
from mdtranspile.model import Element, Token, TokenType
from mdtranspile.parser import Parser, parse_inline, parse_tokens


def test_empty_tokens_give_empty_root():
    root = parse_tokens([])
    assert root.tag == "div"
    assert root.children == []


def test_lexed_header_becomes_h1_with_text():
    root = parse_tokens(tokenize(["## Title"]))
    assert [c.tag for c in root.children] == ["h1"]
    assert root.children[0].content == "Title"


def test_header_value_with_hashes_sets_level():
    root = parse_tokens([Token(TokenType.HEADER, "### Deep")])
    header = root.children[0]
    assert header.tag == "h3"
    assert header.content == "Deep"


def test_header_level_capped_at_six():
    root = parse_tokens([Token(TokenType.HEADER, "######## many")])
    assert root.children[0].tag == "h6"
    assert root.children[0].content == "many"


def test_list_items_grouped_into_ul():
    root = parse_tokens(tokenize(["- a", "- b", "* c"]))
    assert len(root.children) == 1
    ul = root.children[0]
    assert ul.tag == "ul"
    assert [li.tag for li in ul.children] == ["li", "li", "li"]
    assert [li.content for li in ul.children] == ["a", "b", "c"]


def test_paragraph_lines_joined_with_space():
    root = parse_tokens(tokenize(["one", "two"]))
    assert len(root.children) == 1
    assert root.children[0].tag == "p"
    assert root.children[0].content == "one two"


def test_paragraph_continues_over_blank_lines():
    root = parse_tokens(tokenize(["one", "", "two"]))
    assert [c.tag for c in root.children] == ["p"]
    assert root.children[0].content == "one two"


def test_paragraph_stops_at_block_element():
    root = parse_tokens(tokenize(["intro", "# Head", "---"]))
    assert [c.tag for c in root.children] == ["p", "h1", "hr"]
    assert root.children[0].content == "intro"


def test_code_block_collects_lines():
    root = parse_tokens(tokenize(["```", "x = 1", "", "y", "```", "after"]))
    assert [c.tag for c in root.children] == ["pre", "p"]
    pre = root.children[0]
    assert len(pre.children) == 1
    assert pre.children[0].tag == "code"
    assert pre.children[0].content == "x = 1\n\ny"


def test_unterminated_code_block_takes_rest():
    root = parse_tokens(tokenize(["```", "a", "b"]))
    assert len(root.children) == 1
    assert root.children[0].children[0].content == "a\nb"


def test_end_of_file_token_stops_parsing():
    tokens = [
        Token(TokenType.PARAGRAPH, "a"),
        Token(TokenType.END_OF_FILE, ""),
        Token(TokenType.PARAGRAPH, "b"),
    ]
    root = parse_tokens(tokens)
    assert [c.content for c in root.children] == ["a"]


def test_parse_inline_plain_text_is_none():
    assert parse_inline("plain words") is None


def test_parse_inline_bold():
    span = parse_inline("**b**")
    assert span == Element("span", "<strong>b</strong>")


def test_parse_inline_italic_both_forms():
    assert parse_inline("*i*").content == "<em>i</em>"
    assert parse_inline("_i_").content == "<em>i</em>"


def test_parse_inline_code_and_link():
    assert parse_inline("`c`").content == "<code>c</code>"
    assert parse_inline("[t](u)").content == '<a href="u">t</a>'


def test_parse_inline_image_syntax_consumed_by_link_rule():
    assert parse_inline("![alt](pic.png)").content == '!<a href="pic.png">alt</a>'


def test_formatted_paragraph_holds_span_child():
    root = parse_tokens(tokenize(["some **bold** text"]))
    paragraph = root.children[0]
    assert paragraph.content == ""
    assert [c.tag for c in paragraph.children] == ["span"]
    assert "<strong>bold</strong>" in paragraph.children[0].content


def test_reset_allows_reparse():
    parser = Parser()
    parser.set_tokens(tokenize(["# H", "text"]))
    first = parser.parse()
    assert parser.parse().children == []
    parser.reset()
    assert parser.parse() == first