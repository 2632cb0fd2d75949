#  Copyright (c) 2025 Tom Villani, Ph.D.
"""bbhtml - BBCode to safe HTML.

bbhtml parses BBCode forum markup into a document tree and renders the tree
as HTML. Tags are declared in a schema table (grammar plus render template)
that is frozen into a registry once at start-up and then shared read-only by
every parse and render call.

Key Features
------------
- Declarative tag table; add tags without touching the parser
- Malformed markup degrades to text instead of failing
- Every piece of text is HTML-escaped; colors, URLs and sizes are validated
- Bounded nesting depth with an explicit stack
- Canonical BBCode writer for round-tripping

Examples
--------
    >>> from bbhtml import bbcode_to_html, build_default_registry
    >>> registry = build_default_registry()
    >>> bbcode_to_html("[b]Hello[/b] <world>", registry)
    '<strong>Hello</strong> &lt;world&gt;'

"""

from bbhtml.api import (
    bbcode_to_html,
    build_default_registry,
    initialize_schema_registry,
    parse,
    render,
    to_bbcode,
    validate_color,
)
from bbhtml.ast import Document, Element, Text
from bbhtml.exceptions import BBHtmlError, DuplicateTagError, SchemaError
from bbhtml.options import BBCodeParserOptions, HtmlRendererOptions
from bbhtml.schema import ContentModel, TagRegistry, TagSchema
from bbhtml.utils.color import ValidatedColor

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "bbcode_to_html",
    "build_default_registry",
    "initialize_schema_registry",
    "parse",
    "render",
    "to_bbcode",
    "validate_color",
    "Document",
    "Element",
    "Text",
    "BBHtmlError",
    "SchemaError",
    "DuplicateTagError",
    "BBCodeParserOptions",
    "HtmlRendererOptions",
    "ContentModel",
    "TagRegistry",
    "TagSchema",
    "ValidatedColor",
]
