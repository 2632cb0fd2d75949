#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/parsers/lexer.py
"""BBCode lexer.

Converts raw markup into a flat sequence of tokens. The lexer never fails:
a bracket sequence that does not form a valid tag is returned as text.

Recognised syntax
-----------------
- ``[name]``, ``[name=value]``, ``[name=value key=value bare]``
- ``[/name]``
- ``[*]`` and ``[/*]`` for list items
- ``\\[``, ``\\]`` and ``\\\\`` for literal brackets and backslashes

Tag names match ``[A-Za-z][A-Za-z0-9_]*``. Attribute values may be unquoted
(ending at whitespace or ``]``), or single- or double-quoted, with a backslash
escaping the matching quote character inside the quotes. When the text after
an unquoted ``[name=value`` is not a valid attribute list, the whole rest of
the head up to ``]`` is the shorthand value, so ``[color=rgb(0, 0, 0)]``
reads as one color.

The tree builder drives the lexer one token at a time with ``next_token`` so
that it can switch to ``scan_verbatim`` after a verbatim tag opens.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterator, Optional

from bbhtml.constants import (
    ATTR_EQUAL,
    ESCAPE_CHAR,
    MAX_TAG_LENGTH,
    QUOTE_CHARS,
    TAG_CLOSE,
    TAG_OPEN,
    TAG_SLASH,
)
from bbhtml.parsers.tokens import CloseTag, EscapeToken, OpenTag, TextToken, Token
from bbhtml.utils.escape import ESCAPABLE_CHARS

_NAME = re.compile(r"[A-Za-z][A-Za-z0-9_]*|\*")
_KEY = re.compile(r"[A-Za-z][A-Za-z0-9_-]*")
_WHITESPACE = re.compile(r"\s*")
_UNQUOTED_VALUE = re.compile(r"[^\s\]]*")
_TEXT_RUN = re.compile(r"[^\[\\]+")
_CLOSE_TAG = re.compile(r"\[/([A-Za-z][A-Za-z0-9_]*|\*)\s*\]")


@lru_cache(maxsize=64)
def _closing_pattern(name: str) -> re.Pattern[str]:
    return re.compile(r"\[/%s\s*\]" % re.escape(name), re.IGNORECASE)


class BBCodeLexer:
    """Tokenizer over one complete input string.

    Parameters
    ----------
    text : str
        Markup to tokenize

    Examples
    --------
        >>> lexer = BBCodeLexer("[b]hi[/b]")
        >>> [type(token).__name__ for token in lexer.tokens()]
        ['OpenTag', 'TextToken', 'CloseTag']

    """

    def __init__(self, text: str):
        self.text = text
        self.length = len(text)

    def next_token(self, pos: int) -> Optional[Token]:
        """Return the token starting at ``pos``, or None at end of input.

        Parameters
        ----------
        pos : int
            Offset into the text

        Returns
        -------
        Token or None
            The next token; its ``end`` is the offset to continue from

        """
        if pos >= self.length:
            return None

        char = self.text[pos]
        end = pos
        if char == ESCAPE_CHAR:
            if pos + 1 < self.length and self.text[pos + 1] in ESCAPABLE_CHARS:
                return EscapeToken(self.text[pos + 1], pos, pos + 2)
            end = pos + 1
        elif char == TAG_OPEN:
            token = self._match_tag(pos)
            if token is not None:
                return token
            end = pos + 1

        match = _TEXT_RUN.match(self.text, end)
        if match:
            end = match.end()
        return TextToken(self.text[pos:end], pos, end)

    def tokens(self, pos: int = 0) -> Iterator[Token]:
        """Yield every token from ``pos`` to the end, without verbatim handling."""
        token = self.next_token(pos)
        while token is not None:
            yield token
            token = self.next_token(token.end)

    def scan_verbatim(self, pos: int, name: str) -> tuple[str, int]:
        """Read raw content up to the closing tag of a verbatim element.

        The first ``[/name]`` (case-insensitive) not preceded by an escaping
        backslash ends the content. Nothing inside is tokenized.

        Parameters
        ----------
        pos : int
            Offset just after the opening tag
        name : str
            Tag name to look for

        Returns
        -------
        tuple of (str, int)
            The raw interior and the offset just after the closing tag. When
            there is no closing tag the interior runs to end of input.

        """
        for match in _closing_pattern(name).finditer(self.text, pos):
            if not self._is_escaped(match.start(), pos):
                return self.text[pos : match.start()], match.end()
        return self.text[pos:], self.length

    def _is_escaped(self, index: int, floor: int) -> bool:
        backslashes = 0
        while index - backslashes - 1 >= floor and self.text[index - backslashes - 1] == ESCAPE_CHAR:
            backslashes += 1
        return backslashes % 2 == 1

    def _match_tag(self, pos: int) -> Optional[Token]:
        limit = min(self.length, pos + MAX_TAG_LENGTH)
        if pos + 1 < limit and self.text[pos + 1] == TAG_SLASH:
            match = _CLOSE_TAG.match(self.text, pos, limit)
            if match is None:
                return None
            return CloseTag(match.group(1).lower(), pos, match.end(), match.group(0))
        return self._match_open_tag(pos, limit)

    def _match_open_tag(self, pos: int, limit: int) -> Optional[OpenTag]:
        text = self.text
        name_match = _NAME.match(text, pos + 1, limit)
        if name_match is None:
            return None
        name = name_match.group(0).lower()
        cursor = name_match.end()

        attributes: list[tuple[str, Optional[str]]] = []
        shorthand_start: Optional[int] = None
        if cursor < limit and text[cursor] == ATTR_EQUAL:
            shorthand_start = cursor + 1
            value, cursor = self._read_value(shorthand_start, limit)
            if value is None:
                return None
            attributes.append((name, value))

        parsed = self._read_attributes(cursor, limit)
        if parsed is None:
            if shorthand_start is None or text[shorthand_start] in QUOTE_CHARS:
                return None
            # [color=rgb(1, 2, 3)]: the whole head after "=" is the shorthand value
            close = text.find(TAG_CLOSE, shorthand_start, limit)
            if close < 0:
                return None
            end = close + 1
            return OpenTag(name, ((name, text[shorthand_start:close].rstrip()),), pos, end, text[pos:end])

        named, end = parsed
        attributes.extend(named)
        return OpenTag(name, tuple(attributes), pos, end, text[pos:end])

    def _read_attributes(self, cursor: int, limit: int) -> Optional[tuple[list[tuple[str, Optional[str]]], int]]:
        """Read ``key=value`` and bare ``key`` attributes up to the closing bracket.

        Returns the attributes and the offset just past ``]``, or None when the
        rest of the head is not an attribute list.
        """
        text = self.text
        attributes: list[tuple[str, Optional[str]]] = []
        while True:
            after_space = _WHITESPACE.match(text, cursor, limit).end()
            if after_space >= limit:
                return None
            if text[after_space] == TAG_CLOSE:
                return attributes, after_space + 1
            # attributes must be separated by whitespace
            if after_space == cursor:
                return None

            key_match = _KEY.match(text, after_space, limit)
            if key_match is None:
                return None
            key = key_match.group(0).lower()
            cursor = key_match.end()
            value: Optional[str] = None
            if cursor < limit and text[cursor] == ATTR_EQUAL:
                value, cursor = self._read_value(cursor + 1, limit)
                if value is None:
                    return None
            attributes.append((key, value))

    def _read_value(self, cursor: int, limit: int) -> tuple[Optional[str], int]:
        text = self.text
        if cursor >= limit:
            return None, cursor

        quote = text[cursor]
        if quote not in QUOTE_CHARS:
            match = _UNQUOTED_VALUE.match(text, cursor, limit)
            return match.group(0), match.end()

        chars: list[str] = []
        index = cursor + 1
        while index < limit:
            char = text[index]
            if char == ESCAPE_CHAR and index + 1 < limit and text[index + 1] in (quote, ESCAPE_CHAR):
                chars.append(text[index + 1])
                index += 2
                continue
            if char == quote:
                return "".join(chars), index + 1
            chars.append(char)
            index += 1
        return None, cursor


def tokenize(text: str) -> list[Token]:
    """Tokenize a complete string.

    Verbatim tags are not special here; their interiors are tokenized like
    any other text. The tree builder handles verbatim content itself.

    Parameters
    ----------
    text : str
        Markup to tokenize

    Returns
    -------
    list of Token
        Tokens in source order; their spans cover the input without gaps

    """
    return list(BBCodeLexer(text).tokens())
