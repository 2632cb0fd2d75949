#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the parser and renderer option dataclasses."""

from dataclasses import FrozenInstanceError, fields

import pytest

from bbhtml.constants import DEFAULT_MAX_NESTING_DEPTH, MAX_NESTING_DEPTH_LIMIT
from bbhtml.options import BBCodeParserOptions, HtmlRendererOptions
from bbhtml.options.base import cli_arguments, snake_to_kebab


@pytest.mark.unit
class TestBBCodeParserOptions:
    """Tests for BBCodeParserOptions."""

    def test_defaults(self) -> None:
        options = BBCodeParserOptions()
        assert options.max_nesting_depth == DEFAULT_MAX_NESTING_DEPTH
        assert options.normalize_newlines is True

    @pytest.mark.parametrize("depth", [1, 16, MAX_NESTING_DEPTH_LIMIT])
    def test_valid_depths(self, depth: int) -> None:
        assert BBCodeParserOptions(max_nesting_depth=depth).max_nesting_depth == depth

    @pytest.mark.parametrize("depth", [0, -1, MAX_NESTING_DEPTH_LIMIT + 1])
    def test_invalid_depths(self, depth: int) -> None:
        with pytest.raises(ValueError, match="max_nesting_depth"):
            BBCodeParserOptions(max_nesting_depth=depth)

    def test_frozen(self) -> None:
        options = BBCodeParserOptions()
        with pytest.raises(FrozenInstanceError):
            options.max_nesting_depth = 3

    def test_create_updated_validates(self) -> None:
        options = BBCodeParserOptions()
        assert options.create_updated(max_nesting_depth=8).max_nesting_depth == 8
        with pytest.raises(ValueError):
            options.create_updated(max_nesting_depth=0)


@pytest.mark.unit
class TestHtmlRendererOptions:
    """Tests for HtmlRendererOptions."""

    def test_defaults(self) -> None:
        options = HtmlRendererOptions()
        assert options.convert_newlines is True
        assert options.strip_block_newlines is True
        assert options.link_rel == "nofollow"
        assert options.standalone is False
        assert options.title == "Document"

    def test_options_are_hashable_and_comparable(self) -> None:
        assert HtmlRendererOptions(standalone=True) == HtmlRendererOptions(standalone=True)
        assert hash(HtmlRendererOptions()) == hash(HtmlRendererOptions())

    @pytest.mark.parametrize("options_class", [BBCodeParserOptions, HtmlRendererOptions])
    def test_every_field_documents_help(self, options_class) -> None:
        for option_field in fields(options_class):
            assert option_field.metadata.get("help"), option_field.name


@pytest.mark.unit
class TestCliArguments:
    """Tests for deriving command-line flags from option fields."""

    def test_parser_flags(self) -> None:
        arguments = dict(cli_arguments(BBCodeParserOptions))
        assert set(arguments) == {"--max-depth", "--no-normalize-newlines"}
        assert arguments["--max-depth"]["type"] is int
        assert arguments["--max-depth"]["dest"] == "max_nesting_depth"
        assert arguments["--no-normalize-newlines"]["action"] == "store_false"

    def test_renderer_flags(self) -> None:
        arguments = dict(cli_arguments(HtmlRendererOptions))
        assert set(arguments) == {
            "--no-convert-newlines",
            "--no-strip-block-newlines",
            "--link-rel",
            "--standalone",
            "--title",
        }
        assert arguments["--standalone"]["action"] == "store_true"
        assert arguments["--title"]["type"] is str
        assert "%(default)s" in arguments["--title"]["help"]

    def test_snake_to_kebab(self) -> None:
        assert snake_to_kebab("strip_block_newlines") == "strip-block-newlines"
        assert snake_to_kebab("title") == "title"
