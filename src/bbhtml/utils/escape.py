#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/utils/escape.py
"""Escaping helpers for HTML output and BBCode source text.

HTML escaping covers the five reserved characters (``& < > " '``) and is
applied to every piece of user text that reaches the output. BBCode escaping
is the inverse of the lexer's escape syntax and is used by the BBCode writer.
"""

from __future__ import annotations

from html import escape as _html_escape

from bbhtml.constants import ESCAPE_CHAR, TAG_CLOSE, TAG_OPEN

ESCAPABLE_CHARS = frozenset({TAG_OPEN, TAG_CLOSE, ESCAPE_CHAR})


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` for use in HTML text or a quoted attribute value.

    Examples
    --------
    >>> escape_html('<a href="x">&</a>')
    '&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;'

    """
    return _html_escape(text, quote=True)


def escape_bbcode(text: str) -> str:
    r"""Escape brackets and backslashes so the lexer reads them back as text.

    Examples
    --------
    >>> print(escape_bbcode("[b]"))
    \[b\]

    """
    return "".join(ESCAPE_CHAR + char if char in ESCAPABLE_CHARS else char for char in text)
