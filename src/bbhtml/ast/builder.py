#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/ast/builder.py
"""Helpers for constructing and inspecting AST structures.

``element`` builds an ``Element`` by tag name against a registry, validating
attributes the same way the parser does. It is mainly useful for building
documents programmatically before handing them to a renderer.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from bbhtml.ast.nodes import Element, Node, Text, get_node_children

if TYPE_CHECKING:
    from bbhtml.schema.registry import TagRegistry


def element(registry: TagRegistry, name: str, *children: Union[Node, str], **attributes: str) -> Element:
    """Build an element for a registered tag.

    Parameters
    ----------
    registry : TagRegistry
        Registry holding the tag's schema
    name : str
        Tag name (case-insensitive)
    *children : Node or str
        Children; strings become ``Text`` nodes
    **attributes : str
        Raw attribute values, validated with the tag's validators. Values that
        fail validation are dropped.

    Returns
    -------
    Element
        The new element

    Raises
    ------
    KeyError
        If ``name`` is not registered
    ValueError
        If a required attribute is missing, or children are given for a void
        tag, or a verbatim tag does not receive exactly one text child

    Examples
    --------
        >>> registry = build_default_registry()
        >>> link = element(registry, "url", "example", href="https://example.com")

    """
    schema = registry.lookup(name)
    if schema is None:
        raise KeyError(f"Unknown tag: {name}")

    nodes = tuple(Text(child) if isinstance(child, str) else child for child in children)
    if schema.is_void and nodes:
        raise ValueError(f"Void tag [{schema.name}] cannot have children")
    if schema.is_verbatim and (len(nodes) != 1 or not isinstance(nodes[0], Text)):
        raise ValueError(f"Verbatim tag [{schema.name}] needs exactly one text child")

    result = schema.validate_attributes(list(attributes.items()))
    if not result.complete:
        raise ValueError(f"Tag [{schema.name}] is missing required attributes: {', '.join(result.missing)}")

    values = dict(result.values)
    if schema.content_attribute and schema.content_attribute not in values:
        content_value = schema.validate_content_attribute(plain_text(*nodes))
        if content_value is not None:
            values[schema.content_attribute] = content_value
    return Element(schema, values, nodes)


def plain_text(*nodes: Node) -> str:
    """Concatenate the text content of nodes, ignoring markup.

    Examples
    --------
        >>> plain_text(Text("a"), Text("b"))
        'ab'

    """
    parts: list[str] = []
    stack = list(reversed(nodes))
    while stack:
        node = stack.pop()
        if isinstance(node, Text):
            parts.append(node.content)
        else:
            stack.extend(reversed(get_node_children(node)))
    return "".join(parts)
