#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the BBCode tree builder."""

import logging
from io import BytesIO

import pytest

from bbhtml.ast import ContentModelChecker, Document, Element, Text
from bbhtml.exceptions import InvalidOptionsError
from bbhtml.options import BBCodeParserOptions, HtmlRendererOptions
from bbhtml.parsers.bbcode import BBCodeParser, Degraded, Recognized
from bbhtml.parsers.tokens import OpenTag


def _only_child(doc: Document) -> Element:
    assert len(doc.children) == 1
    child = doc.children[0]
    assert isinstance(child, Element)
    return child


@pytest.fixture
def parser(registry) -> BBCodeParser:
    return BBCodeParser(registry)


@pytest.mark.unit
class TestBasicParsing:
    """Tests for well-formed markup."""

    def test_plain_text(self, parser: BBCodeParser) -> None:
        assert parser.parse("Hello world") == Document((Text("Hello world"),))

    def test_empty_input(self, parser: BBCodeParser) -> None:
        assert parser.parse("") == Document(())

    def test_bold(self, parser: BBCodeParser) -> None:
        doc = parser.parse("This is [b]bold[/b] text")
        assert len(doc.children) == 3
        assert doc.children[0] == Text("This is ")
        bold = doc.children[1]
        assert isinstance(bold, Element)
        assert bold.name == "b"
        assert bold.children == (Text("bold"),)
        assert doc.children[2] == Text(" text")

    def test_case_insensitive_tags(self, parser: BBCodeParser) -> None:
        assert _only_child(parser.parse("[B]x[/b]")).name == "b"

    def test_nested(self, parser: BBCodeParser) -> None:
        bold = _only_child(parser.parse("[b][i]x[/i][/b]"))
        italic = bold.children[0]
        assert isinstance(italic, Element)
        assert italic.name == "i"
        assert italic.children == (Text("x"),)

    def test_element_references_registry_schema(self, parser: BBCodeParser, registry) -> None:
        assert _only_child(parser.parse("[b]x[/b]")).tag is registry.lookup("b")

    def test_attributes_validated(self, parser: BBCodeParser) -> None:
        color = _only_child(parser.parse("[color=RED]x[/color]"))
        assert dict(color.attributes) == {"color": "red"}

    def test_numeric_attribute_clamped(self, parser: BBCodeParser) -> None:
        size = _only_child(parser.parse("[size=500]x[/size]"))
        assert size.attributes["size"] == "72"

    def test_escapes_become_text(self, parser: BBCodeParser) -> None:
        assert parser.parse(r"\[b\]x\\") == Document((Text("[b]x\\"),))

    def test_adjacent_text_coalesced(self, parser: BBCodeParser) -> None:
        assert parser.parse("a [ b \\[ c ]") == Document((Text("a [ b [ c ]"),))


@pytest.mark.unit
class TestDegradation:
    """Tests for malformed markup recovery."""

    def test_unknown_tag_is_text(self, parser: BBCodeParser) -> None:
        assert parser.parse("[foo]hi[/foo]") == Document((Text("[foo]hi[/foo]"),))

    def test_unknown_tag_inside_known(self, parser: BBCodeParser) -> None:
        bold = _only_child(parser.parse("[b][foo=1]x[/foo][/b]"))
        assert bold.children == (Text("[foo=1]x[/foo]"),)

    def test_mismatched_close_ignored_and_autoclosed(self, parser: BBCodeParser) -> None:
        bold = _only_child(parser.parse("[b]bold[/i]"))
        assert bold.name == "b"
        assert bold.children == (Text("bold"),)

    def test_unmatched_known_close_ignored(self, parser: BBCodeParser) -> None:
        assert parser.parse("a[/b]c") == Document((Text("ac"),))

    def test_unclosed_tags_closed_at_end(self, parser: BBCodeParser) -> None:
        bold = _only_child(parser.parse("[b]a[i]b"))
        assert bold.children[0] == Text("a")
        italic = bold.children[1]
        assert isinstance(italic, Element)
        assert italic.children == (Text("b"),)

    def test_implicit_close_of_inner_frames(self, parser: BBCodeParser) -> None:
        doc = parser.parse("[b][i]x[/b]y")
        bold = doc.children[0]
        assert isinstance(bold, Element)
        assert bold.children[0].name == "i"
        assert doc.children[1] == Text("y")

    def test_missing_required_attribute_degrades_tag(self, parser: BBCodeParser) -> None:
        assert parser.parse("[color]x[/color]") == Document((Text("[color]x[/color]"),))

    def test_missing_required_attribute_keeps_inner_markup(self, parser: BBCodeParser) -> None:
        doc = parser.parse("[size]a[b]b[/b][/size]")
        assert doc.children[0] == Text("[size]a")
        assert doc.children[1].name == "b"
        assert doc.children[2] == Text("[/size]")

    def test_degraded_close_kept_after_enclosing_element_closes(self, parser: BBCodeParser) -> None:
        doc = parser.parse("[b][size]x[/b][/size]")
        assert doc.children[0].children == (Text("[size]x"),)
        assert doc.children[1] == Text("[/size]")

    def test_each_degraded_open_keeps_one_close(self, parser: BBCodeParser) -> None:
        assert parser.parse("[size]x[/size][/size]") == Document((Text("[size]x[/size]"),))

    def test_rejected_attribute_dropped_element_kept(self, parser: BBCodeParser) -> None:
        color = _only_child(parser.parse("[color=javascript:alert(1)]x[/color]"))
        assert color.name == "color"
        assert dict(color.attributes) == {}

    def test_unknown_attribute_dropped(self, parser: BBCodeParser) -> None:
        quote = _only_child(parser.parse("[quote=Bob onclick=evil]x[/quote]"))
        assert dict(quote.attributes) == {"author": "Bob"}

    def test_degradation_logged_at_debug(self, parser: BBCodeParser, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="bbhtml.parsers.bbcode"):
            parser.parse("[foo]x[/b]")
        messages = " ".join(record.getMessage() for record in caplog.records)
        assert "unknown tag 'foo'" in messages
        assert "Ignoring unmatched closing tag [/b]" in messages
        assert all(record.levelno == logging.DEBUG for record in caplog.records)


@pytest.mark.unit
class TestVoidAndVerbatim:
    """Tests for content models that do not nest normally."""

    def test_void_tag_has_no_children(self, parser: BBCodeParser) -> None:
        doc = parser.parse("a[br]b")
        assert doc.children[1].name == "br"
        assert doc.children[1].children == ()
        assert doc.children[2] == Text("b")

    def test_void_close_ignored(self, parser: BBCodeParser) -> None:
        doc = parser.parse("[hr][/hr]x")
        assert [type(child) for child in doc.children] == [Element, Text]

    def test_verbatim_content_not_parsed(self, parser: BBCodeParser) -> None:
        code = _only_child(parser.parse("[code][b]not bold[/b][/code]"))
        assert code.children == (Text("[b]not bold[/b]"),)

    def test_verbatim_keeps_escapes_raw(self, parser: BBCodeParser) -> None:
        code = _only_child(parser.parse(r"[noparse]\[x\][/noparse]"))
        assert code.children == (Text(r"\[x\]"),)

    def test_verbatim_empty(self, parser: BBCodeParser) -> None:
        assert _only_child(parser.parse("[code][/code]")).children == (Text(""),)

    def test_unclosed_verbatim_runs_to_end(self, parser: BBCodeParser) -> None:
        code = _only_child(parser.parse("[code]a [b]b"))
        assert code.children == (Text("a [b]b"),)

    def test_parsing_resumes_after_verbatim(self, parser: BBCodeParser) -> None:
        doc = parser.parse("[code]x[/code][b]y[/b]")
        assert [child.name for child in doc.children] == ["code", "b"]

    def test_verbatim_with_attribute(self, parser: BBCodeParser) -> None:
        code = _only_child(parser.parse("[code=Python]x[/code]"))
        assert code.attributes["lang"] == "python"


@pytest.mark.unit
class TestContentAttributes:
    """Tests for attributes filled from element content."""

    def test_url_from_content(self, parser: BBCodeParser) -> None:
        link = _only_child(parser.parse("[url] https://example.com [/url]"))
        assert link.attributes["href"] == "https://example.com"

    def test_url_explicit_attribute_wins(self, parser: BBCodeParser) -> None:
        link = _only_child(parser.parse("[url=https://a.example]https://b.example[/url]"))
        assert link.attributes["href"] == "https://a.example"

    def test_url_content_from_nested_markup(self, parser: BBCodeParser) -> None:
        link = _only_child(parser.parse("[url][b]www.example.com[/b][/url]"))
        assert link.attributes["href"] == "http://www.example.com"

    def test_unsafe_content_not_used(self, parser: BBCodeParser) -> None:
        link = _only_child(parser.parse("[url]javascript:alert(1)[/url]"))
        assert "href" not in link.attributes

    def test_image_source_from_verbatim_content(self, parser: BBCodeParser) -> None:
        image = _only_child(parser.parse("[img=100x50]https://example.com/a.png[/img]"))
        assert dict(image.attributes) == {"dimensions": "100x50", "src": "https://example.com/a.png"}

    def test_email_from_content(self, parser: BBCodeParser) -> None:
        email = _only_child(parser.parse("[email]me@example.com[/email]"))
        assert email.attributes["address"] == "mailto:me@example.com"


@pytest.mark.unit
class TestListItems:
    """Tests for implicitly closed list items."""

    def test_items_close_each_other(self, parser: BBCodeParser) -> None:
        list_element = _only_child(parser.parse("[list][*]a[*]b[/list]"))
        items = list_element.children
        assert [item.name for item in items] == ["*", "*"]
        assert items[0].children == (Text("a"),)
        assert items[1].children == (Text("b"),)

    def test_nested_lists_keep_their_items(self, parser: BBCodeParser) -> None:
        outer = _only_child(parser.parse("[list][*]a[list][*]b[*]c[/list][*]d[/list]"))
        assert len(outer.children) == 2
        first, second = outer.children
        inner = first.children[1]
        assert inner.name == "list"
        assert len(inner.children) == 2
        assert second.children == (Text("d"),)

    def test_explicit_item_close(self, parser: BBCodeParser) -> None:
        list_element = _only_child(parser.parse("[list][*]a[/*][*]b[/*][/list]"))
        assert len(list_element.children) == 2

    def test_list_type(self, parser: BBCodeParser) -> None:
        assert _only_child(parser.parse("[list=A][*]x[/list]")).attributes["type"] == "A"
        assert "type" not in _only_child(parser.parse("[list=z][*]x[/list]")).attributes


@pytest.mark.unit
class TestNestingDepth:
    """Tests for the nesting depth limit."""

    def test_excess_depth_becomes_text(self, registry) -> None:
        parser = BBCodeParser(registry, BBCodeParserOptions(max_nesting_depth=2))
        bold = _only_child(parser.parse("[b][i][u]x[/u][/i][/b]"))
        italic = bold.children[0]
        assert italic.name == "i"
        assert italic.children == (Text("[u]x[/u][/i][/b]"),)

    def test_void_and_verbatim_do_not_count(self, registry) -> None:
        parser = BBCodeParser(registry, BBCodeParserOptions(max_nesting_depth=1))
        bold = _only_child(parser.parse("[b]a[br][code]c[/code][/b]"))
        assert [getattr(child, "name", None) for child in bold.children] == [None, "br", "code"]

    def test_escapes_after_limit_read_as_characters(self, registry) -> None:
        parser = BBCodeParser(registry, BBCodeParserOptions(max_nesting_depth=1))
        bold = _only_child(parser.parse(r"[b][i]\[x\][/i]"))
        assert bold.children == (Text("[i][x][/i]"),)

    def test_default_depth_handles_deep_input(self, parser: BBCodeParser) -> None:
        doc = parser.parse("[quote]" * 500 + "x" + "[/quote]" * 500)
        depth = 0
        node = doc.children[0]
        while isinstance(node, Element):
            depth += 1
            node = node.children[0]
        assert depth == 64
        assert isinstance(node, Text)
        assert node.content.startswith("[quote]")


@pytest.mark.unit
class TestParserOptions:
    """Tests for parser configuration."""

    def test_wrong_options_type(self, registry) -> None:
        with pytest.raises(InvalidOptionsError):
            BBCodeParser(registry, HtmlRendererOptions())

    def test_newlines_normalized(self, parser: BBCodeParser) -> None:
        assert parser.parse("a\r\nb\rc") == Document((Text("a\nb\nc"),))

    def test_newline_normalization_disabled(self, registry) -> None:
        parser = BBCodeParser(registry, BBCodeParserOptions(normalize_newlines=False))
        assert parser.parse("a\r\nb") == Document((Text("a\r\nb"),))

    def test_bytes_input_decoded(self, parser: BBCodeParser) -> None:
        doc = parser.parse("[b]café naïve résumé déjà vu[/b]".encode("utf-8"))
        assert _only_child(doc).children == (Text("café naïve résumé déjà vu"),)

    def test_stream_input(self, parser: BBCodeParser) -> None:
        doc = parser.parse(BytesIO(b"[i]x[/i]"))
        assert _only_child(doc).name == "i"


@pytest.mark.unit
class TestResolution:
    """Tests for opening tag resolution outcomes."""

    def test_recognized(self, parser: BBCodeParser) -> None:
        result = parser._resolve_open(OpenTag("url", (("url", "https://example.com"),), 0, 5, "[url]"))
        assert isinstance(result, Recognized)
        assert result.attributes["href"] == "https://example.com"

    def test_degraded_unknown(self, parser: BBCodeParser) -> None:
        result = parser._resolve_open(OpenTag("foo", (), 0, 5, "[foo]"))
        assert isinstance(result, Degraded)
        assert result.text == "[foo]"

    def test_degraded_missing_attribute(self, parser: BBCodeParser) -> None:
        result = parser._resolve_open(OpenTag("font", (), 0, 6, "[font]"))
        assert isinstance(result, Degraded)
        assert "family" in result.reason


@pytest.mark.unit
class TestTreeInvariants:
    """Tests for structural guarantees of parsed trees."""

    def test_parsed_tree_satisfies_content_models(self, parser: BBCodeParser, sample_post: str) -> None:
        checker = ContentModelChecker()
        parser.parse(sample_post).accept(checker)
        assert checker.is_valid, checker.errors

    def test_block_inside_inline_stays_nested(self, parser: BBCodeParser) -> None:
        doc = parser.parse("[b][quote]q[/quote][/b]")
        bold = _only_child(doc)
        assert [child.name for child in bold.children] == ["quote"]
        checker = ContentModelChecker()
        doc.accept(checker)
        assert checker.is_valid

    def test_parsing_is_deterministic(self, parser: BBCodeParser, sample_post: str) -> None:
        assert parser.parse(sample_post) == parser.parse(sample_post)

    def test_nodes_are_immutable(self, parser: BBCodeParser) -> None:
        bold = _only_child(parser.parse("[b]x[/b]"))
        with pytest.raises(AttributeError):
            bold.children = ()
        with pytest.raises(TypeError):
            bold.attributes["x"] = "y"
