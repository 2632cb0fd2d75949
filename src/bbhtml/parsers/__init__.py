#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/parsers/__init__.py
"""BBCode lexer and tree builder."""

from bbhtml.parsers.base import BaseParser
from bbhtml.parsers.bbcode import BBCodeParser, Degraded, Recognized
from bbhtml.parsers.lexer import BBCodeLexer, tokenize
from bbhtml.parsers.tokens import CloseTag, EscapeToken, OpenTag, TextToken, Token

__all__ = [
    "BaseParser",
    "BBCodeParser",
    "Recognized",
    "Degraded",
    "BBCodeLexer",
    "tokenize",
    "Token",
    "OpenTag",
    "CloseTag",
    "TextToken",
    "EscapeToken",
]
