#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/renderers/bbcode.py
"""BBCode writer.

Writes a document tree back to canonical BBCode: lowercase tag names, the
default attribute as ``[tag=value]``, other attributes as ``key=value``, and
literal brackets and backslashes in text escaped. An attribute that the
parser would fill in from the element's content anyway is left out.

Re-parsing the output with the same registry yields an equal tree.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from bbhtml.ast.builder import plain_text
from bbhtml.ast.nodes import Document, Element, Node, Text
from bbhtml.ast.visitors import NodeVisitor
from bbhtml.constants import ESCAPE_CHAR
from bbhtml.renderers.base import BaseRenderer
from bbhtml.schema.registry import TagRegistry
from bbhtml.schema.types import TagSchema
from bbhtml.utils.escape import escape_bbcode

_NEEDS_QUOTES = re.compile(r"[\s\"'\[\]\\]")


def format_attribute_value(value: str) -> str:
    r"""Quote an attribute value when the lexer could not read it bare.

    Examples
    --------
    >>> format_attribute_value("red")
    'red'
    >>> print(format_attribute_value('John "JD" Doe'))
    "John \"JD\" Doe"

    """
    if value and not _NEEDS_QUOTES.search(value):
        return value
    escaped = value.replace(ESCAPE_CHAR, ESCAPE_CHAR * 2).replace('"', ESCAPE_CHAR + '"')
    return f'"{escaped}"'


class BBCodeRenderer(NodeVisitor, BaseRenderer):
    r"""Render a document tree as BBCode.

    Parameters
    ----------
    registry : TagRegistry
        Registry used to look up default and content attributes

    Examples
    --------
        >>> from bbhtml.parsers.bbcode import BBCodeParser
        >>> from bbhtml.schema import build_default_registry
        >>> registry = build_default_registry()
        >>> doc = BBCodeParser(registry).parse("[B]bold[/b] [foo]")
        >>> BBCodeRenderer(registry).render_to_string(doc)
        '[b]bold[/b] \\[foo\\]'

    """

    def __init__(self, registry: TagRegistry):
        """Initialize the writer with a registry."""
        BaseRenderer.__init__(self, registry)

    def render_to_string(self, doc: Document) -> str:
        """Render a document to BBCode text."""
        return doc.accept(self)

    def visit_document(self, node: Document) -> str:
        return self._write(node.children)

    def visit_text(self, node: Text) -> str:
        return escape_bbcode(node.content)

    def visit_element(self, node: Element) -> str:
        return self._write((node,))

    def _write(self, nodes: Iterable[Node]) -> str:
        """Write nodes depth-first with an explicit stack of open elements.

        Each stack entry holds the element being written (None for the
        top level), an iterator over its remaining children and the output
        collected for it so far.
        """
        output: list[str] = []
        stack: list[tuple[Optional[Element], Iterator[Node], list[str]]] = [(None, iter(nodes), output)]
        while stack:
            parent, children, parts = stack[-1]
            child = next(children, None)
            if child is None:
                stack.pop()
                if parent is not None:
                    stack[-1][2].append(self._element_markup(parent, "".join(parts)))
            elif isinstance(child, Text):
                parts.append(self.visit_text(child))
            elif isinstance(child, Element):
                schema = self._schema(child)
                if schema.is_verbatim or schema.is_void:
                    parts.append(self._element_markup(child))
                else:
                    stack.append((child, iter(child.children), []))
        return "".join(output)

    def _schema(self, node: Element) -> TagSchema:
        return self.registry.lookup(node.name) or node.tag

    def _element_markup(self, node: Element, content: str = "") -> str:
        schema = self._schema(node)
        verbatim_content = None
        if schema.is_verbatim:
            verbatim_content = node.children[0].content if node.children and isinstance(node.children[0], Text) else ""
            content = verbatim_content

        implied = self._implied_content_value(schema, node, verbatim_content)
        head = self._open_tag(schema, node, implied)
        if schema.is_void:
            return head
        return f"{head}{content}[/{schema.name}]"

    @staticmethod
    def _implied_content_value(schema: TagSchema, node: Element, verbatim_content: Optional[str]) -> Optional[str]:
        if schema.content_attribute is None:
            return None
        source = verbatim_content if verbatim_content is not None else plain_text(*node.children)
        return schema.validate_content_attribute(source.strip())

    @staticmethod
    def _open_tag(schema: TagSchema, node: Element, implied: Optional[str]) -> str:
        written = {
            name: value
            for name, value in node.attributes.items()
            if schema.attribute(name) is not None and not (name == schema.content_attribute and value == implied)
        }
        parts = [f"[{schema.name}"]
        default = schema.default_attribute
        if default is not None and default in written:
            parts.append(f"={format_attribute_value(written.pop(default))}")
        for spec in schema.attributes:
            if spec.name in written:
                parts.append(f" {spec.name}={format_attribute_value(written[spec.name])}")

        parts.append("]")
        return "".join(parts)

