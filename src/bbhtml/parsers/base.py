#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/parsers/base.py
"""Base class for markup parsers.

A parser turns markup into a ``Document`` tree. Parsers hold only their
registry-independent configuration; per-call state lives in local variables,
so one parser instance can serve concurrent calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from bbhtml.ast import Document
from bbhtml.options.base import BaseParserOptions
from bbhtml.utils.encoding import load_text

MarkupSource = Union[str, Path, IO[bytes], IO[str], bytes]


class BaseParser(ABC):
    """Abstract base class for markup parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Parser options, already checked by the subclass

    """

    def __init__(self, options: BaseParserOptions | None = None):
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _load_text_content(input_data: MarkupSource) -> str:
        """Return markup text; bytes, paths and binary streams are decoded with detection."""
        return load_text(input_data)

    @abstractmethod
    def parse(self, input_data: MarkupSource) -> Document:
        """Parse the input into a document tree.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            Markup text, a path to read, a file-like object, or raw bytes

        Returns
        -------
        Document
            Root of the parsed tree

        """
        raise NotImplementedError
