#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/renderers/base.py
"""Base class for tree renderers.

A renderer walks a ``Document`` and produces text. Renderers look tag
behaviour up in the registry they were built with, never raise on a tree
produced by the parser, and keep no per-call state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from bbhtml.ast import Document
from bbhtml.options.base import BaseRendererOptions
from bbhtml.schema.registry import TagRegistry
from bbhtml.utils.io_utils import write_content

OutputTarget = Union[str, Path, IO[bytes], IO[str]]


class BaseRenderer(ABC):
    """Abstract base class for renderers.

    Parameters
    ----------
    registry : TagRegistry
        Registry whose schemas supply tag-specific behaviour
    options : BaseRendererOptions or None, default = None
        Renderer options, already checked by the subclass

    """

    def __init__(self, registry: TagRegistry, options: BaseRendererOptions | None = None):
        self.registry = registry
        self.options: BaseRendererOptions | None = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render ``doc`` and return the output text."""
        raise NotImplementedError

    def render(self, doc: Document, output: OutputTarget) -> None:
        """Render ``doc`` into a file path or stream.

        Paths and binary streams receive UTF-8; text streams receive ``str``.

        Examples
        --------
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> HtmlRenderer(registry).render(parse("[b]x[/b]", registry), buffer)
            >>> buffer.getvalue()
            '<strong>x</strong>'

        """
        write_content(self.render_to_string(doc), output)
