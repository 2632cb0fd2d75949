#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/bbhtml/options/html.py
"""Configuration options for HTML rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from bbhtml.constants import (
    DEFAULT_CONVERT_NEWLINES,
    DEFAULT_DOCUMENT_TITLE,
    DEFAULT_LINK_REL,
    DEFAULT_STANDALONE,
    DEFAULT_STRIP_BLOCK_NEWLINES,
)
from bbhtml.options.base import BaseRendererOptions


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering a BBCode document to HTML.

    Parameters
    ----------
    convert_newlines : bool, default True
        Render newlines in text as ``<br>`` followed by a newline.
    strip_block_newlines : bool, default True
        Drop a single newline directly inside the start and end of a block
        element and directly after its closing tag, so that markup written on
        separate lines does not produce stray line breaks.
    link_rel : str or None, default "nofollow"
        Value of the ``rel`` attribute on links. None or an empty string omits the attribute.
    standalone : bool, default False
        Wrap the output in a minimal HTML5 document.
    title : str, default "Document"
        Document title used when ``standalone`` is set.

    """

    convert_newlines: bool = field(
        default=DEFAULT_CONVERT_NEWLINES,
        metadata={"help": "Render newlines in text as <br>", "cli_name": "no-convert-newlines"},
    )
    strip_block_newlines: bool = field(
        default=DEFAULT_STRIP_BLOCK_NEWLINES,
        metadata={"help": "Drop newlines adjacent to block element boundaries"},
    )
    link_rel: Optional[str] = field(
        default=DEFAULT_LINK_REL,
        metadata={"help": "rel attribute for links; empty to omit"},
    )
    standalone: bool = field(
        default=DEFAULT_STANDALONE,
        metadata={"help": "Wrap output in a complete HTML document"},
    )
    title: str = field(
        default=DEFAULT_DOCUMENT_TITLE,
        metadata={"help": "Document title for standalone output"},
    )
