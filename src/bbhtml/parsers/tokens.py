#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/parsers/tokens.py
"""Token types produced by the BBCode lexer.

Every token records the span it covers in the source (``start`` inclusive,
``end`` exclusive). The tree builder uses the span to restore a degraded tag
exactly as written and to resume scanning after verbatim content.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class OpenTag:
    """An opening tag such as ``[url=http://example.com]``.

    Parameters
    ----------
    name : str
        Tag name, lowercased
    attributes : tuple of (str, str or None)
        Attributes in source order; keys are lowercased. The ``=value``
        shorthand is stored under the tag's own name. Bare attributes carry
        None.
    start, end : int
        Source span
    raw : str
        The tag exactly as written

    """

    name: str
    attributes: tuple[tuple[str, Optional[str]], ...]
    start: int
    end: int
    raw: str


@dataclass(frozen=True)
class CloseTag:
    """A closing tag such as ``[/b]``."""

    name: str
    start: int
    end: int
    raw: str


@dataclass(frozen=True)
class TextToken:
    """A run of literal text."""

    content: str
    start: int
    end: int

    @property
    def raw(self) -> str:
        return self.content


@dataclass(frozen=True)
class EscapeToken:
    """An escaped character (``\\[``, ``\\]`` or ``\\\\``); ``char`` is the literal character."""

    char: str
    start: int
    end: int

    @property
    def raw(self) -> str:
        return "\\" + self.char


Token = Union[OpenTag, CloseTag, TextToken, EscapeToken]
