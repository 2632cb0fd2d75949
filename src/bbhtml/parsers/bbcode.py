#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/parsers/bbcode.py
"""BBCode to AST parser.

The tree builder consumes tokens from ``BBCodeLexer`` and maintains an
explicit stack of open element frames. It never raises on malformed markup;
every anomaly has a fixed recovery:

- unknown opening tag: kept as literal text
- opening tag missing a required attribute: kept as literal text, and so is
  the next closing tag of that name that has no open element to close
- attribute unknown or rejected by its validator: dropped, element kept
- closing tag with an open match further down the stack: the frames above the
  match are closed first (implicit close, innermost first)
- closing tag for a known tag with no open match: ignored
- closing tag for an unknown tag: kept as literal text
- opening tag that would exceed the nesting limit: the rest of the input from
  that tag on is kept as literal text, token by token, so escapes such as
  ``\\[`` still read as the bare bracket
- end of input: open frames are closed innermost first

Verbatim tags switch the lexer into raw mode until their closing tag; void
tags never open a frame.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Mapping, Optional, Union

from bbhtml.ast import Document, Element, Node, Text, plain_text
from bbhtml.options.base import check_options_type
from bbhtml.options.bbcode import BBCodeParserOptions
from bbhtml.parsers.base import BaseParser
from bbhtml.parsers.lexer import BBCodeLexer
from bbhtml.parsers.tokens import CloseTag, EscapeToken, OpenTag, TextToken
from bbhtml.schema.registry import TagRegistry
from bbhtml.schema.types import TagSchema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Recognized:
    """An opening tag that becomes an element."""

    schema: TagSchema
    attributes: Mapping[str, str]


@dataclass(frozen=True)
class Degraded:
    """An opening tag that is kept as literal text."""

    text: str
    reason: str


Resolution = Union[Recognized, Degraded]


@dataclass
class _Children:
    """Children collected so far for the document root or one open element."""

    children: list[Node] = field(default_factory=list)
    pending_text: list[str] = field(default_factory=list)

    def add_text(self, text: str) -> None:
        if text:
            self.pending_text.append(text)

    def add_node(self, node: Node) -> None:
        self._flush_text()
        self.children.append(node)

    def finish(self) -> tuple[Node, ...]:
        self._flush_text()
        return tuple(self.children)

    def _flush_text(self) -> None:
        if self.pending_text:
            self.children.append(Text("".join(self.pending_text)))
            self.pending_text = []


@dataclass
class _Frame:
    """An element under construction."""

    schema: TagSchema
    attributes: Mapping[str, str]
    content: _Children = field(default_factory=_Children)

    @property
    def name(self) -> str:
        return self.schema.name


@dataclass
class _TreeState:
    """Per-call builder state: the root, the open frames and the degraded opening tags seen so far."""

    root: _Children = field(default_factory=_Children)
    frames: list[_Frame] = field(default_factory=list)
    degraded_opens: dict[str, int] = field(default_factory=dict)

    @property
    def current(self) -> _Children:
        return self.frames[-1].content if self.frames else self.root

    def find(self, name: str) -> Optional[int]:
        """Index of the innermost open frame named ``name``."""
        for index in range(len(self.frames) - 1, -1, -1):
            if self.frames[index].name == name:
                return index
        return None

    def close_to(self, index: int) -> None:
        """Close the frame at ``index`` and every frame above it, innermost first."""
        while len(self.frames) > index:
            frame = self.frames.pop()
            children = frame.content.finish()
            attributes = fill_content_attribute(frame.schema, frame.attributes, plain_text(*children))
            self.current.add_node(Element(frame.schema, attributes, children))


def fill_content_attribute(schema: TagSchema, attributes: Mapping[str, str], content: str) -> Mapping[str, str]:
    """Take the schema's content attribute from ``content`` when the markup did not set it."""
    name = schema.content_attribute
    if name is None or name in attributes:
        return attributes
    value = schema.validate_content_attribute(content.strip())
    if value is None:
        logger.debug("Content of [%s] rejected as its %s attribute", schema.name, name)
        return attributes
    return {**attributes, name: value}


class BBCodeParser(BaseParser):
    """Convert BBCode markup to a document tree.

    Parameters
    ----------
    registry : TagRegistry
        Frozen registry consulted for every grammar decision
    options : BBCodeParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> from bbhtml.schema import build_default_registry
        >>> parser = BBCodeParser(build_default_registry())
        >>> doc = parser.parse("[b]Bold[/b] and [i]italic[/i] text")

    With options:

        >>> options = BBCodeParserOptions(max_nesting_depth=8)
        >>> parser = BBCodeParser(build_default_registry(), options)

    """

    def __init__(self, registry: TagRegistry, options: BBCodeParserOptions | None = None):
        """Initialize the BBCode parser with a registry and options."""
        check_options_type(options, BBCodeParserOptions, "bbcode")
        options = options or BBCodeParserOptions()
        super().__init__(options)
        self.options: BBCodeParserOptions = options
        self.registry = registry

    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse BBCode input into a Document.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            BBCode input. A ``str`` is markup; bytes, paths and binary streams
            are decoded with encoding detection.

        Returns
        -------
        Document
            Root of the parsed tree. Never raises for ``str`` input.

        """
        text = self._load_text_content(input_data)
        if self.options.normalize_newlines:
            text = text.replace("\r\n", "\n").replace("\r", "\n")
        return self._build(text)

    def _build(self, text: str) -> Document:
        lexer = BBCodeLexer(text)
        state = _TreeState()
        max_depth = self.options.max_nesting_depth

        pos = 0
        token = lexer.next_token(pos)
        while token is not None:
            pos = token.end

            if isinstance(token, TextToken):
                state.current.add_text(token.content)
            elif isinstance(token, EscapeToken):
                state.current.add_text(token.char)
            elif isinstance(token, CloseTag):
                self._handle_close(state, token)
            elif isinstance(token, OpenTag):
                resolution = self._resolve_open(token)
                if isinstance(resolution, Degraded):
                    logger.debug("Keeping %s as text: %s", token.raw, resolution.reason)
                    state.current.add_text(resolution.text)
                    state.degraded_opens[token.name] = state.degraded_opens.get(token.name, 0) + 1
                else:
                    schema = resolution.schema
                    if schema.closed_by_sibling:
                        self._close_sibling(state, schema)

                    if schema.is_void:
                        state.current.add_node(Element(schema, resolution.attributes))
                    elif schema.is_verbatim:
                        content, pos = lexer.scan_verbatim(pos, schema.name)
                        attributes = fill_content_attribute(schema, resolution.attributes, content)
                        state.current.add_node(Element(schema, attributes, (Text(content),)))
                    elif len(state.frames) >= max_depth:
                        logger.debug(
                            "Nesting depth limit %d reached at offset %d; keeping remaining input as text",
                            max_depth,
                            token.start,
                        )
                        for rest in lexer.tokens(token.start):
                            state.current.add_text(rest.char if isinstance(rest, EscapeToken) else rest.raw)
                        break
                    else:
                        state.frames.append(_Frame(schema, resolution.attributes))

            token = lexer.next_token(pos)

        state.close_to(0)
        return Document(state.root.finish())

    def _resolve_open(self, token: OpenTag) -> Resolution:
        schema = self.registry.lookup(token.name)
        if schema is None:
            return Degraded(token.raw, f"unknown tag '{token.name}'")

        result = schema.validate_attributes(token.attributes)
        if not result.complete:
            return Degraded(token.raw, f"missing required attribute(s): {', '.join(result.missing)}")
        if result.dropped:
            logger.debug("Dropped attribute(s) %s from [%s]", ", ".join(result.dropped), schema.name)
        return Recognized(schema, result.values)

    def _handle_close(self, state: _TreeState, token: CloseTag) -> None:
        index = state.find(token.name)
        if index is not None:
            if index < len(state.frames) - 1:
                logger.debug("Implicitly closing %d element(s) before %s", len(state.frames) - 1 - index, token.raw)
            state.close_to(index)
        elif state.degraded_opens.get(token.name):
            state.degraded_opens[token.name] -= 1
            state.current.add_text(token.raw)
        elif token.name not in self.registry:
            state.current.add_text(token.raw)
        else:
            logger.debug("Ignoring unmatched closing tag %s at offset %d", token.raw, token.start)

    @staticmethod
    def _close_sibling(state: _TreeState, schema: TagSchema) -> None:
        for index in range(len(state.frames) - 1, -1, -1):
            name = state.frames[index].name
            if name == schema.name:
                state.close_to(index)
                return
            if name in schema.scope_tags:
                return
