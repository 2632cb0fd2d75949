#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/utils/color.py
"""Color token validation for color-bearing tag attributes.

Three forms are accepted and normalized:

- a named web color from a fixed table (case-insensitive), normalized to lowercase
- ``#rgb`` or ``#rrggbb`` hexadecimal literals, normalized to lowercase
- ``rgb(r, g, b)`` and ``rgba(r, g, b, a)`` with integer channels in ``[0, 255]``
  and alpha in ``[0, 1]``, normalized to ``rgb(r, g, b)`` / ``rgba(r, g, b, a)``

Everything else is rejected. Rejection is an ordinary result, not an error:
the caller decides what to do without the color (typically omit the style).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from bbhtml.constants import COLOR_ALLOWED_CHARS, NAMED_COLORS, ColorKind

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_FUNCTIONAL_COLOR = re.compile(r"^(rgba?)\s*\(([^()]*)\)$", re.IGNORECASE)
_CHANNEL = re.compile(r"^\d{1,3}$")
_ALPHA = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")


@dataclass(frozen=True)
class ValidatedColor:
    """Outcome of color validation.

    Parameters
    ----------
    value : str or None
        Normalized CSS color literal, or None when the input was rejected
    kind : {"named", "hex", "rgb", "rgba"} or None
        Which form was recognised

    """

    value: Optional[str] = None
    kind: Optional[ColorKind] = None

    @property
    def accepted(self) -> bool:
        """Whether the input was a valid color."""
        return self.value is not None

    @classmethod
    def rejected(cls) -> ValidatedColor:
        """Build the rejection marker."""
        return cls()


REJECTED_COLOR = ValidatedColor.rejected()


def _parse_functional(function: str, arguments: str) -> Optional[str]:
    parts = [part.strip() for part in arguments.split(",")]
    expected = 4 if function == "rgba" else 3
    if len(parts) != expected:
        return None

    channels: list[int] = []
    for part in parts[:3]:
        if not _CHANNEL.match(part):
            return None
        channel = int(part)
        if channel > 255:
            return None
        channels.append(channel)

    if function == "rgb":
        return "rgb({}, {}, {})".format(*channels)

    alpha_text = parts[3]
    if not _ALPHA.match(alpha_text):
        return None
    alpha = float(alpha_text)
    if not 0.0 <= alpha <= 1.0:
        return None
    return "rgba({}, {}, {}, {:g})".format(*channels, alpha)


def validate_color(raw: str) -> ValidatedColor:
    """Validate and normalize a color token.

    Parameters
    ----------
    raw : str
        Untrusted color text from a tag attribute

    Returns
    -------
    ValidatedColor
        Normalized color, or the rejection marker

    Examples
    --------
    >>> validate_color("Red").value
    'red'
    >>> validate_color("#FF0000").value
    '#ff0000'
    >>> validate_color("rgb(255,0,0)").value
    'rgb(255, 0, 0)'
    >>> validate_color("javascript:alert(1)").accepted
    False

    """
    candidate = raw.strip()
    if not candidate or any(char not in COLOR_ALLOWED_CHARS for char in candidate):
        return REJECTED_COLOR

    lowered = candidate.lower()
    if lowered in NAMED_COLORS:
        return ValidatedColor(lowered, "named")

    if _HEX_COLOR.match(candidate):
        return ValidatedColor(lowered, "hex")

    match = _FUNCTIONAL_COLOR.match(candidate)
    if match:
        function = match.group(1).lower()
        normalized = _parse_functional(function, match.group(2))
        if normalized is not None:
            return ValidatedColor(normalized, "rgba" if function == "rgba" else "rgb")

    return REJECTED_COLOR
