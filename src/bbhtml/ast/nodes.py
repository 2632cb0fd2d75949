#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/ast/nodes.py
"""AST node classes for parsed BBCode documents.

The tree has three node kinds:

- ``Document``: the root, owning an ordered sequence of children
- ``Element``: a recognised tag, holding a reference to its ``TagSchema``,
  its validated attributes and its children
- ``Text``: literal text, unescaped

Nodes are frozen and their children are tuples. A tree is assembled bottom-up
by the parser and is not modified after construction, so it can be rendered
any number of times (or from several threads) without copying.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping

if TYPE_CHECKING:
    from bbhtml.schema.types import TagSchema


class Node(ABC):
    """Base class for all AST nodes; supports the visitor pattern."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


@dataclass(frozen=True, eq=False)
class Document(Node):
    """Root document node.

    Parameters
    ----------
    children : tuple of Node, default = empty tuple
        Top-level nodes in source order

    """

    children: tuple[Node, ...] = ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return nodes_equal(self, other)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document.

        Returns
        -------
        Any
            Result from visitor.visit_document(self)

        """
        return visitor.visit_document(self)


@dataclass(frozen=True, eq=False)
class Element(Node):
    """A recognised tag with its validated attributes and children.

    Parameters
    ----------
    tag : TagSchema
        Schema of the tag this element was built from
    attributes : Mapping of str to str, default = empty mapping
        Validated, normalized attribute values
    children : tuple of Node, default = empty tuple
        Child nodes; empty for void tags and exactly one ``Text`` for
        verbatim tags

    """

    tag: TagSchema
    attributes: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    children: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.attributes, MappingProxyType):
            object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return nodes_equal(self, other)

    @property
    def name(self) -> str:
        """Tag name of this element."""
        return self.tag.name

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this element.

        Returns
        -------
        Any
            Result from visitor.visit_element(self)

        """
        return visitor.visit_element(self)


@dataclass(frozen=True)
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    content : str
        Text content, unescaped

    """

    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text.

        Returns
        -------
        Any
            Result from visitor.visit_text(self)

        """
        return visitor.visit_text(self)


def get_node_children(node: Node) -> tuple[Node, ...]:
    """Return the children of any node (empty for ``Text``)."""
    if isinstance(node, (Document, Element)):
        return node.children
    return ()


def nodes_equal(left: Node, right: Node) -> bool:
    """Compare two trees structurally.

    Walks both trees with an explicit stack, so comparing deeply nested
    documents costs no interpreter frames per level. Elements are equal when
    their schemas, attributes and children are equal.

    Parameters
    ----------
    left, right : Node
        Roots of the trees to compare

    Returns
    -------
    bool
        True if the trees have the same shape and content

    """
    pending: list[tuple[Node, Node]] = [(left, right)]
    while pending:
        a, b = pending.pop()
        if a is b:
            continue
        if type(a) is not type(b):
            return False
        if isinstance(a, Text):
            if a != b:
                return False
            continue
        if isinstance(a, Element) and (a.tag != b.tag or a.attributes != b.attributes):
            return False
        a_children, b_children = get_node_children(a), get_node_children(b)
        if len(a_children) != len(b_children):
            return False
        pending.extend(zip(a_children, b_children))
    return True
