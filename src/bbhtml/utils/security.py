#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/utils/security.py
"""URL screening for link and image attributes.

URLs coming from markup are untrusted. Before a URL may become an ``href`` or
``src`` attribute it is normalized the way browsers read it (embedded tabs and
newlines removed) and its scheme is checked against an allow-list. Anything
that cannot be proven safe is rejected, and the caller drops the attribute.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import quote, urlparse

from bbhtml.constants import DANGEROUS_SCHEMES, MAX_URL_LENGTH, SAFE_LINK_SCHEMES

logger = logging.getLogger(__name__)

# Browsers silently drop these when parsing URLs, so "java\tscript:" is javascript:
_IGNORED_URL_CHARS = re.compile(r"[\t\n\r]")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BARE_HOST = re.compile(r"^(?:www\.)?[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)+(?::\d+)?(?:[/?#].*)?$")
_EMAIL = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")


def is_relative_url(url: str) -> bool:
    """Check if a URL is a relative URL.

    Examples
    --------
    >>> is_relative_url("/path/to/file")
    True
    >>> is_relative_url("https://example.com")
    False

    """
    return url.startswith(("#", "/", "./", "../", "?")) and not url.startswith("//")


def is_url_scheme_dangerous(url: str) -> bool:
    """Check if a URL uses a scheme that can execute script.

    Examples
    --------
    >>> is_url_scheme_dangerous("javascript:alert('xss')")
    True
    >>> is_url_scheme_dangerous("https://example.com")
    False

    """
    url_lower = _IGNORED_URL_CHARS.sub("", url).strip().lower()
    if any(url_lower.startswith(scheme) for scheme in DANGEROUS_SCHEMES):
        return True
    return urlparse(url_lower).scheme in ("javascript", "vbscript", "about")


def sanitize_url(url: str, allowed_schemes: frozenset[str] = SAFE_LINK_SCHEMES) -> str | None:
    """Normalize a URL and return it only if its scheme is allowed.

    Scheme-less URLs that look like a host name (``www.example.com``) are
    given an ``http://`` prefix; relative paths are kept as they are.

    Parameters
    ----------
    url : str
        Raw URL from markup
    allowed_schemes : frozenset of str
        Lowercase scheme names permitted for this attribute

    Returns
    -------
    str or None
        Normalized URL, or None if the URL is rejected

    Examples
    --------
    >>> sanitize_url("https://example.com/a b")
    'https://example.com/a%20b'
    >>> sanitize_url("www.example.com")
    'http://www.example.com'
    >>> sanitize_url("javascript:alert(1)") is None
    True

    """
    candidate = _IGNORED_URL_CHARS.sub("", url).strip()
    if not candidate or len(candidate) > MAX_URL_LENGTH or _CONTROL_CHARS.search(candidate):
        return None

    if is_url_scheme_dangerous(candidate):
        logger.debug("Rejected URL with dangerous scheme: %r", candidate[:80])
        return None

    # Keep reserved characters; only encode what cannot appear in a URL at all.
    candidate = quote(candidate, safe="!#$%&'()*+,-./:;=?@[]~_")

    if is_relative_url(candidate):
        return candidate

    scheme = urlparse(candidate).scheme.lower()
    if not scheme or ":" not in candidate.split("/", 1)[0]:
        if _BARE_HOST.match(candidate):
            return f"http://{candidate}" if "http" in allowed_schemes else None
        return None

    if scheme not in allowed_schemes:
        logger.debug("Rejected URL with scheme %r", scheme)
        return None
    return candidate


def sanitize_email(address: str) -> str | None:
    """Return a ``mailto:`` URL for a plausible email address, otherwise None.

    Examples
    --------
    >>> sanitize_email("someone@example.com")
    'mailto:someone@example.com'
    >>> sanitize_email("x@y") is None
    True

    """
    candidate = address.strip()
    if candidate.lower().startswith("mailto:"):
        candidate = candidate[len("mailto:") :]
    if not _EMAIL.match(candidate):
        return None
    return f"mailto:{candidate}"
