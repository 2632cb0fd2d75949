#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/ast/__init__.py
"""Document tree produced by the BBCode parser.

- nodes: ``Document``, ``Element``, ``Text``
- visitors: ``NodeVisitor`` and ``ContentModelChecker``
- builder: ``element`` and ``plain_text`` helpers

"""

from bbhtml.ast.builder import element, plain_text
from bbhtml.ast.nodes import Document, Element, Node, Text, get_node_children, nodes_equal
from bbhtml.ast.visitors import ContentModelChecker, NodeVisitor

__all__ = [
    "Node",
    "Document",
    "Element",
    "Text",
    "get_node_children",
    "nodes_equal",
    "NodeVisitor",
    "ContentModelChecker",
    "element",
    "plain_text",
]
