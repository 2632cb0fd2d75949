#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/schema/validators.py
"""Attribute validators referenced from tag declarations.

Every validator takes the raw attribute text and returns a normalized value,
or None to reject it. A rejected attribute is dropped and the element renders
without it. Numeric validators clamp out-of-range values instead of rejecting
them.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from bbhtml.constants import (
    IMAGE_DIMENSION_MAX_PX,
    IMAGE_DIMENSION_MIN_PX,
    MAX_CODE_LANGUAGE_LENGTH,
    MAX_FONT_FAMILY_LENGTH,
    SAFE_IMAGE_SCHEMES,
    SAFE_LINK_SCHEMES,
)
from bbhtml.schema.types import AttributeValidator
from bbhtml.utils.color import validate_color
from bbhtml.utils.security import sanitize_email, sanitize_url

_INTEGER = re.compile(r"^[+-]?\d+$")
_FONT_FAMILY = re.compile(r"^[A-Za-z0-9 ,-]+$")
_CODE_LANGUAGE = re.compile(r"^[A-Za-z0-9_+#-]{1,%d}$" % MAX_CODE_LANGUAGE_LENGTH)
_DIMENSIONS = re.compile(r"^\s*(\d+)\s*[xX]\s*(\d+)\s*$")
_YOUTUBE_ID = re.compile(r"^[A-Za-z0-9_-]{11}$")
_YOUTUBE_URL = re.compile(
    r"^(?:https?://)?(?:www\.|m\.)?(?:youtube\.com/watch\?(?:.*&)?v=|youtu\.be/)([A-Za-z0-9_-]{11})(?:[&?#].*)?$"
)


def color(raw: str) -> Optional[str]:
    """Accept a color understood by the color validator."""
    return validate_color(raw).value


def bounded_int(minimum: int, maximum: int) -> AttributeValidator:
    """Build a validator that parses an integer and clamps it to ``[minimum, maximum]``.

    Non-numeric input is rejected; numeric input is never rejected.

    Examples
    --------
    >>> bounded_int(8, 72)("200")
    '72'
    >>> bounded_int(8, 72)("big") is None
    True

    """

    def validate(raw: str) -> Optional[str]:
        candidate = raw.strip()
        if candidate.lower().endswith("px"):
            candidate = candidate[:-2].strip()
        if not _INTEGER.match(candidate):
            return None
        return str(min(maximum, max(minimum, int(candidate))))

    return validate


def choice(options: Iterable[str], case_sensitive: bool = False) -> AttributeValidator:
    """Build a validator accepting one of a fixed set of values."""
    allowed = frozenset(options) if case_sensitive else frozenset(option.lower() for option in options)

    def validate(raw: str) -> Optional[str]:
        candidate = raw.strip() if case_sensitive else raw.strip().lower()
        return candidate if candidate in allowed else None

    return validate


def link_url(raw: str) -> Optional[str]:
    """Accept a URL with a link-safe scheme."""
    return sanitize_url(raw, SAFE_LINK_SCHEMES)


def image_url(raw: str) -> Optional[str]:
    """Accept an http(s) or relative image URL."""
    return sanitize_url(raw, SAFE_IMAGE_SCHEMES)


def email_address(raw: str) -> Optional[str]:
    """Accept an email address, normalized to a ``mailto:`` URL."""
    return sanitize_email(raw)


def font_family(raw: str) -> Optional[str]:
    """Accept a font family list made of letters, digits, spaces, commas and hyphens."""
    candidate = " ".join(raw.split())
    if not candidate or len(candidate) > MAX_FONT_FAMILY_LENGTH or not _FONT_FAMILY.match(candidate):
        return None
    return candidate


def code_language(raw: str) -> Optional[str]:
    """Accept a short syntax-highlighting language name."""
    candidate = raw.strip().lower()
    return candidate if _CODE_LANGUAGE.match(candidate) else None


def dimensions(raw: str) -> Optional[str]:
    """Accept ``WIDTHxHEIGHT``, clamping both sides to the image dimension range.

    Examples
    --------
    >>> dimensions("100X9000")
    '100x4096'

    """
    match = _DIMENSIONS.match(raw)
    if not match:
        return None
    clamp = bounded_int(IMAGE_DIMENSION_MIN_PX, IMAGE_DIMENSION_MAX_PX)
    return f"{clamp(match.group(1))}x{clamp(match.group(2))}"


def youtube_video(raw: str) -> Optional[str]:
    """Accept a YouTube video id or watch/short URL, normalized to the 11-character id."""
    candidate = raw.strip()
    if _YOUTUBE_ID.match(candidate):
        return candidate
    match = _YOUTUBE_URL.match(candidate)
    return match.group(1) if match else None


def plain_text(max_length: int = 256) -> AttributeValidator:
    """Build a validator for free text such as quote authors or image alt text.

    Whitespace runs collapse to single spaces and control characters are
    removed; the value is still HTML-escaped at render time.
    """

    def validate(raw: str) -> Optional[str]:
        candidate = " ".join("".join(char for char in raw if char.isprintable() or char.isspace()).split())
        return candidate[:max_length].rstrip() or None

    return validate
