#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/api.py
"""Top-level functions for parsing and rendering BBCode.

A registry is built once and passed explicitly to every call; nothing here
keeps hidden module state.

Examples
--------
    >>> registry = initialize_schema_registry()
    >>> doc = parse("[color=red]hi[/color]", registry)
    >>> render(doc, registry)
    '<span style="color: red">hi</span>'

"""

from __future__ import annotations

from bbhtml.ast import Document
from bbhtml.options.bbcode import BBCodeParserOptions
from bbhtml.options.html import HtmlRendererOptions
from bbhtml.parsers.bbcode import BBCodeParser
from bbhtml.renderers.bbcode import BBCodeRenderer
from bbhtml.renderers.html import HtmlRenderer
from bbhtml.schema.registry import TagRegistry, build_default_registry, initialize_schema_registry
from bbhtml.utils.color import ValidatedColor
from bbhtml.utils.color import validate_color as _validate_color

__all__ = [
    "initialize_schema_registry",
    "build_default_registry",
    "parse",
    "render",
    "validate_color",
    "bbcode_to_html",
    "to_bbcode",
]


def parse(text: str, registry: TagRegistry, options: BBCodeParserOptions | None = None) -> Document:
    """Parse BBCode markup into a document tree.

    Parameters
    ----------
    text : str
        Complete markup string
    registry : TagRegistry
        Frozen tag registry
    options : BBCodeParserOptions, optional
        Parser options

    Returns
    -------
    Document
        Parsed tree. Malformed markup degrades to text; this never raises.

    """
    return BBCodeParser(registry, options).parse(text)


def render(doc: Document, registry: TagRegistry, options: HtmlRendererOptions | None = None) -> str:
    """Render a document tree to HTML.

    Parameters
    ----------
    doc : Document
        Tree returned by ``parse``
    registry : TagRegistry
        Frozen tag registry supplying templates
    options : HtmlRendererOptions, optional
        Renderer options

    Returns
    -------
    str
        HTML with all text content escaped

    """
    return HtmlRenderer(registry, options).render_to_string(doc)


def validate_color(raw: str) -> ValidatedColor:
    """Validate and normalize a color token. See ``bbhtml.utils.color.validate_color``."""
    return _validate_color(raw)


def bbcode_to_html(
    text: str,
    registry: TagRegistry,
    parser_options: BBCodeParserOptions | None = None,
    renderer_options: HtmlRendererOptions | None = None,
) -> str:
    """Parse and render in one step."""
    return render(parse(text, registry, parser_options), registry, renderer_options)


def to_bbcode(doc: Document, registry: TagRegistry) -> str:
    """Write a document tree back to canonical BBCode."""
    return BBCodeRenderer(registry).render_to_string(doc)
