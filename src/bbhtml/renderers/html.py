#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/renderers/html.py
"""HTML rendering from the document tree.

Every ``Text`` node is HTML-escaped before it reaches the output. Elements are
rendered by their schema's template, which receives the validated attribute
map and the already-rendered children. Verbatim content is escaped but never
re-parsed.

"""

from __future__ import annotations

from typing import Sequence

from bbhtml.ast.nodes import Document, Element, Node, Text
from bbhtml.ast.visitors import NodeVisitor
from bbhtml.options.base import check_options_type
from bbhtml.options.html import HtmlRendererOptions
from bbhtml.renderers.base import BaseRenderer
from bbhtml.schema.registry import TagRegistry
from bbhtml.schema.types import TagSchema
from bbhtml.utils.escape import escape_html


class HtmlRenderer(NodeVisitor, BaseRenderer):
    """Render a BBCode document tree to HTML.

    The renderer keeps no per-call state, so one instance can be shared by
    concurrent calls.

    Parameters
    ----------
    registry : TagRegistry
        Registry supplying render templates. An element whose tag is not in
        the registry is rendered with the schema it was parsed with.
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
    Basic usage:

        >>> from bbhtml.parsers.bbcode import BBCodeParser
        >>> from bbhtml.schema import build_default_registry
        >>> registry = build_default_registry()
        >>> doc = BBCodeParser(registry).parse("[b]x < y[/b]")
        >>> HtmlRenderer(registry).render_to_string(doc)
        '<strong>x &lt; y</strong>'

    """

    def __init__(self, registry: TagRegistry, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with a registry and options."""
        check_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, registry, options)
        self.options: HtmlRendererOptions = options

    def render_to_string(self, doc: Document) -> str:
        """Render a document to an HTML string.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            HTML fragment, or a complete document when ``standalone`` is set

        """
        content = doc.accept(self)
        if self.options.standalone:
            return self._wrap_in_document(content)
        return content

    def _wrap_in_document(self, content: str) -> str:
        parts = [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '<meta charset="UTF-8">',
            f"<title>{escape_html(self.options.title)}</title>",
            "</head>",
            "<body>",
            content,
            "</body>",
            "</html>",
        ]
        return "\n".join(parts) + "\n"

    def _schema_for(self, node: Element) -> TagSchema:
        return self.registry.lookup(node.name) or node.tag

    def _is_block(self, node: Node) -> bool:
        return isinstance(node, Element) and self._schema_for(node).is_block

    def visit_document(self, node: Document) -> str:
        """Render the top-level children."""
        return self._render_children(node.children, inside_block=False, preserve_newlines=False)

    def visit_element(self, node: Element) -> str:
        """Render an element through its schema's template."""
        schema = self._schema_for(node)
        preserve = schema.is_verbatim and schema.is_block
        content = self._render_children(node.children, inside_block=schema.is_block, preserve_newlines=preserve)
        return schema.template(node.attributes, content, self.options)

    def visit_text(self, node: Text) -> str:
        """Escape a text node."""
        return self._render_text(node.content, preserve_newlines=False)

    def _render_text(self, text: str, preserve_newlines: bool) -> str:
        escaped = escape_html(text)
        if self.options.convert_newlines and not preserve_newlines:
            escaped = escaped.replace("\n", "<br>\n")
        return escaped

    def _render_children(self, children: Sequence[Node], inside_block: bool, preserve_newlines: bool) -> str:
        strip = self.options.strip_block_newlines
        last = len(children) - 1
        parts: list[str] = []
        for index, child in enumerate(children):
            if isinstance(child, Element):
                parts.append(self.visit_element(child))
                continue

            text = child.content
            if strip:
                after_block = index > 0 and self._is_block(children[index - 1])
                if (index == 0 and inside_block) or after_block:
                    text = text[1:] if text.startswith("\n") else text
                if index == last and inside_block:
                    text = text[:-1] if text.endswith("\n") else text
            parts.append(self._render_text(text, preserve_newlines))
        return "".join(parts)
