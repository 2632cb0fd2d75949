#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/renderers/__init__.py
"""Renderers that turn a document tree into HTML or canonical BBCode."""

from bbhtml.renderers.base import BaseRenderer
from bbhtml.renderers.bbcode import BBCodeRenderer
from bbhtml.renderers.html import HtmlRenderer

__all__ = ["BaseRenderer", "HtmlRenderer", "BBCodeRenderer"]
