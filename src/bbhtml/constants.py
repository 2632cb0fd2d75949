#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/constants.py
"""Constants and default values for the bbhtml library.

Centralizes defaults for parser and renderer options, the named-color table
used by the color validator, URL scheme screening lists and the numeric
ranges that attribute validators clamp to.
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Parser defaults
# =============================================================================

DEFAULT_MAX_NESTING_DEPTH = 64
MAX_NESTING_DEPTH_LIMIT = 256
DEFAULT_NORMALIZE_NEWLINES = True

# =============================================================================
# Renderer defaults
# =============================================================================

DEFAULT_CONVERT_NEWLINES = True
DEFAULT_STRIP_BLOCK_NEWLINES = True
DEFAULT_LINK_REL: str | None = "nofollow"
DEFAULT_STANDALONE = False
DEFAULT_DOCUMENT_TITLE = "Document"

# =============================================================================
# Lexer syntax
# =============================================================================

TAG_OPEN = "["
TAG_CLOSE = "]"
TAG_SLASH = "/"
ATTR_EQUAL = "="
ESCAPE_CHAR = "\\"
LIST_ITEM_TAG = "*"
QUOTE_CHARS = ('"', "'")

# Longest opening/closing tag (brackets included) the lexer will accept.
MAX_TAG_LENGTH = 2560

# =============================================================================
# Colors
# =============================================================================

# Named web colors accepted by the color validator (lowercase).
NAMED_COLORS = frozenset(
    {
        "black",
        "sienna",
        "darkolivegreen",
        "darkgreen",
        "darkslateblue",
        "navy",
        "indigo",
        "darkslategray",
        "darkred",
        "darkorange",
        "olive",
        "green",
        "teal",
        "blue",
        "slategray",
        "dimgray",
        "red",
        "sandybrown",
        "yellowgreen",
        "seagreen",
        "mediumturquoise",
        "royalblue",
        "purple",
        "gray",
        "magenta",
        "orange",
        "yellow",
        "lime",
        "cyan",
        "deepskyblue",
        "darkorchid",
        "silver",
        "pink",
        "wheat",
        "lemonchiffon",
        "palegreen",
        "paleturquoise",
        "lightblue",
        "plum",
        "white",
        "maroon",
        "fuchsia",
        "aqua",
    }
)

COLOR_ALLOWED_CHARS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789#(),. ")

ColorKind = Literal["named", "hex", "rgb", "rgba"]

# =============================================================================
# Attribute ranges
# =============================================================================

FONT_SIZE_MIN_PX = 8
FONT_SIZE_MAX_PX = 72
IMAGE_DIMENSION_MIN_PX = 1
IMAGE_DIMENSION_MAX_PX = 4096
TABLE_CELL_WIDTH_MIN_PX = 1
TABLE_CELL_WIDTH_MAX_PX = 2000

MAX_FONT_FAMILY_LENGTH = 64
MAX_CODE_LANGUAGE_LENGTH = 32
MAX_URL_LENGTH = 2048

ORDERED_LIST_TYPES = frozenset({"1", "a", "A", "i", "I"})
TEXT_ALIGNMENTS = ("center", "left", "right", "justify")

# =============================================================================
# Security
# =============================================================================

DANGEROUS_SCHEMES = {
    "javascript:",
    "vbscript:",
    "data:text/html",
    "data:text/javascript",
    "data:application/javascript",
    "data:application/x-javascript",
}

SAFE_LINK_SCHEMES = frozenset({"http", "https", "mailto", "ftp", "ftps"})
SAFE_IMAGE_SCHEMES = frozenset({"http", "https"})

# =============================================================================
# CLI
# =============================================================================

OutputFormat = Literal["html", "bbcode"]
DEFAULT_OUTPUT_FORMAT: OutputFormat = "html"

EXIT_SUCCESS = 0
EXIT_FILE_ERROR = 2
