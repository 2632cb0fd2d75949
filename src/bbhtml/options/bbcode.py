#  Copyright (c) 2025 Tom Villani, Ph.D.

# bbhtml/options/bbcode.py
"""Configuration options for BBCode parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from bbhtml.constants import DEFAULT_MAX_NESTING_DEPTH, DEFAULT_NORMALIZE_NEWLINES, MAX_NESTING_DEPTH_LIMIT
from bbhtml.options.base import BaseParserOptions


@dataclass(frozen=True)
class BBCodeParserOptions(BaseParserOptions):
    """Configuration options for BBCode-to-AST parsing.

    Parameters
    ----------
    max_nesting_depth : int, default 64
        Maximum number of simultaneously open elements. When an opening tag
        would exceed it, the rest of the input is kept as literal text.
    normalize_newlines : bool, default True
        Convert ``\\r\\n`` and ``\\r`` line endings to ``\\n`` before lexing.

    Examples
    --------
    Basic usage:
        >>> from bbhtml.parsers.bbcode import BBCodeParser
        >>> from bbhtml.schema import build_default_registry
        >>> parser = BBCodeParser(build_default_registry(), BBCodeParserOptions(max_nesting_depth=16))
        >>> doc = parser.parse("[b]Bold text[/b]")

    """

    max_nesting_depth: int = field(
        default=DEFAULT_MAX_NESTING_DEPTH,
        metadata={
            "help": "Maximum element nesting depth before input degrades to text",
            "cli_name": "max-depth",
            "type": int,
        },
    )
    normalize_newlines: bool = field(
        default=DEFAULT_NORMALIZE_NEWLINES,
        metadata={"help": "Normalize CRLF and CR line endings to LF"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If max_nesting_depth is outside 1..MAX_NESTING_DEPTH_LIMIT.

        """
        super().__post_init__()
        if not 1 <= self.max_nesting_depth <= MAX_NESTING_DEPTH_LIMIT:
            raise ValueError(
                f"max_nesting_depth must be between 1 and {MAX_NESTING_DEPTH_LIMIT}, got {self.max_nesting_depth}"
            )
