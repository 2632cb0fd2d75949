#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the canonical BBCode writer."""

import pytest

from bbhtml.ast import Document, Text, element
from bbhtml.parsers.bbcode import BBCodeParser
from bbhtml.renderers.bbcode import BBCodeRenderer, format_attribute_value


@pytest.fixture
def canonical(registry):
    """Parse markup and write it back."""

    def rewrite(markup: str) -> str:
        return BBCodeRenderer(registry).render_to_string(BBCodeParser(registry).parse(markup))

    return rewrite


@pytest.mark.unit
class TestFormatAttributeValue:
    """Tests for attribute value quoting."""

    @pytest.mark.parametrize("value", ["red", "100x50", "https://example.com/a?b=c", "#fff"])
    def test_bare_values(self, value: str) -> None:
        assert format_attribute_value(value) == value

    def test_whitespace_quoted(self) -> None:
        assert format_attribute_value("John Smith") == '"John Smith"'

    def test_empty_quoted(self) -> None:
        assert format_attribute_value("") == '""'

    def test_quotes_and_backslashes_escaped(self) -> None:
        assert format_attribute_value('a"b\\c') == '"a\\"b\\\\c"'

    def test_brackets_quoted(self) -> None:
        assert format_attribute_value("[x]") == '"[x]"'


@pytest.mark.unit
class TestCanonicalForm:
    """Tests for the written form of parsed documents."""

    def test_tag_names_lowercased(self, canonical) -> None:
        assert canonical("[B]x[/B]") == "[b]x[/b]"

    def test_list_items_closed_explicitly(self, canonical) -> None:
        assert canonical("[list][*]a[*]b[/list]") == "[list][*]a[/*][*]b[/*][/list]"

    def test_quoted_author_kept(self, canonical) -> None:
        assert canonical('[quote="John Smith"]x[/quote]') == '[quote="John Smith"]x[/quote]'

    def test_attribute_values_normalized(self, canonical) -> None:
        assert canonical("[color=RED]x[/color]") == "[color=red]x[/color]"
        assert canonical("[size=500]x[/size]") == "[size=72]x[/size]"

    def test_unknown_and_rejected_attributes_dropped(self, canonical) -> None:
        assert canonical("[quote=Bob onclick=x]y[/quote]") == "[quote=Bob]y[/quote]"

    def test_content_attribute_omitted(self, canonical) -> None:
        assert canonical("[url]http://example.com[/url]") == "[url]http://example.com[/url]"

    def test_explicit_url_kept(self, canonical) -> None:
        assert canonical("[url=https://a.example]b[/url]") == "[url=https://a.example]b[/url]"

    def test_image_attributes(self, canonical) -> None:
        assert canonical("[img=100x50]https://x.com/a.png[/img]") == "[img=100x50]https://x.com/a.png[/img]"
        assert canonical("[img alt=logo]http://x.com/a.png[/img]") == "[img alt=logo]http://x.com/a.png[/img]"

    def test_void_tags_have_no_close(self, canonical) -> None:
        assert canonical("a[br]b[hr][/hr]") == "a[br]b[hr]"

    def test_verbatim_content_written_raw(self, canonical) -> None:
        assert canonical("[code=python][b]x[/b][/code]") == "[code=python][b]x[/b][/code]"

    def test_literal_brackets_escaped(self, canonical) -> None:
        assert canonical("[foo]x[/foo] a\\b") == "\\[foo\\]x\\[/foo\\] a\\\\b"

    def test_table_cells(self, canonical) -> None:
        assert canonical("[table][tr][td=200]a[/td][/tr][/table]") == "[table][tr][td=200]a[/td][/tr][/table]"


@pytest.mark.unit
class TestWriterInput:
    """Tests for writing hand-built trees."""

    def test_quoted_attribute_with_quotes(self, registry) -> None:
        doc = Document((element(registry, "quote", "x", author='say "hi"'),))
        assert BBCodeRenderer(registry).render_to_string(doc) == '[quote="say \\"hi\\""]x[/quote]'

    def test_text_only(self, registry) -> None:
        assert BBCodeRenderer(registry).render_to_string(Document((Text("[x]"),))) == "\\[x\\]"


@pytest.mark.unit
class TestRoundTrip:
    """Tests that written markup parses back to the same tree."""

    @pytest.mark.parametrize(
        "markup",
        [
            "[b]bold[/b] and [i]italic[/i]",
            "[list=1]\n[*]one\n[*]two [b]2[/b]\n[/list]",
            '[quote="A [b] C"]x[/quote]',
            "[url=https://example.com/a b]site[/url]",
            "[foo]unknown[/foo] \\[escaped\\] [b]x[/i]",
            "[color=#abc][size=9]x[/size][/color]",
            "[spoiler=Plot twist]hidden[/spoiler]",
            "[youtube]https://youtu.be/dQw4w9WgXcQ[/youtube]",
        ],
    )
    def test_round_trip(self, registry, markup: str) -> None:
        parser = BBCodeParser(registry)
        writer = BBCodeRenderer(registry)
        doc = parser.parse(markup)
        assert parser.parse(writer.render_to_string(doc)) == doc

    def test_sample_post_round_trip(self, registry, sample_post: str) -> None:
        parser = BBCodeParser(registry)
        doc = parser.parse(sample_post)
        assert parser.parse(BBCodeRenderer(registry).render_to_string(doc)) == doc

    def test_writer_output_is_stable(self, canonical, sample_post: str) -> None:
        once = canonical(sample_post)
        assert canonical(once) == once
