#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the bbhtml parser and renderers.

Each stage has its own frozen Options dataclass; use ``create_updated`` to
derive a modified copy.
"""

from bbhtml.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from bbhtml.options.bbcode import BBCodeParserOptions
from bbhtml.options.html import HtmlRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "BBCodeParserOptions",
    "HtmlRendererOptions",
]
