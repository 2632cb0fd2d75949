#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class used by the renderers, plus a
``ContentModelChecker`` that verifies every element's children conform to its
tag's content model.

"""

from __future__ import annotations

from abc import ABC
from typing import Any

from bbhtml.ast.nodes import Document, Element, Node, Text
from bbhtml.schema.types import ContentModel


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement ``visit_document``, ``visit_element`` and
    ``visit_text``; any method left out falls back to ``generic_visit``.

    Examples
    --------
    Simple visitor that counts elements:

        >>> class ElementCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def visit_document(self, node):
        ...         for child in node.children:
        ...             child.accept(self)
        ...     def visit_element(self, node):
        ...         self.count += 1
        ...         for child in node.children:
        ...             child.accept(self)

    """

    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            Document to visit

        Returns
        -------
        Any
            Result of processing

        """
        return self.generic_visit(node)

    def visit_element(self, node: Element) -> Any:
        """Visit an Element node.

        Parameters
        ----------
        node : Element
            Element to visit

        Returns
        -------
        Any
            Result of processing

        """
        return self.generic_visit(node)

    def visit_text(self, node: Text) -> Any:
        """Visit a Text node.

        Parameters
        ----------
        node : Text
            Text to visit

        Returns
        -------
        Any
            Result of processing

        """
        return self.generic_visit(node)

    def generic_visit(self, node: Node) -> Any:
        """Fallback visitor for unhandled node types.

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None


class ContentModelChecker(NodeVisitor):
    """Visitor that collects content-model violations in a tree.

    Only void and verbatim elements constrain their children; see
    ``ContentModel``.

    A parsed tree never has violations; the checker exists for trees built by
    hand and for tests.

    Attributes
    ----------
    errors : list of str
        Human-readable description of each violation found

    Examples
    --------
        >>> checker = ContentModelChecker()
        >>> doc.accept(checker)
        >>> checker.is_valid
        True

    """

    def __init__(self) -> None:
        self.errors: list[str] = []

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def visit_document(self, node: Document) -> None:
        for child in node.children:
            child.accept(self)

    def visit_element(self, node: Element) -> None:
        model = node.tag.content_model
        if model is ContentModel.VOID and node.children:
            self.errors.append(f"Void element [{node.name}] has {len(node.children)} children")
        elif model is ContentModel.VERBATIM:
            if len(node.children) != 1 or not isinstance(node.children[0], Text):
                self.errors.append(f"Verbatim element [{node.name}] must hold exactly one Text child")
        for child in node.children:
            child.accept(self)

    def visit_text(self, node: Text) -> None:
        pass
