#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbhtml/utils/encoding.py
"""Character encoding detection for markup read from files or streams.

The parser works on already-decoded strings. Front ends that read bytes
(files, stdin) decode them here: chardet detection first, then a list of
fallback encodings, and finally utf-8 with replacement characters.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Union

import chardet

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ENCODINGS = ("utf-8", "utf-8-sig", "latin-1")


def detect_encoding(
    data: bytes,
    sample_size: int = 8192,
    confidence_threshold: float = 0.7,
) -> str | None:
    """Detect character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of bytes to sample for detection (uses first N bytes)
    confidence_threshold : float, default 0.7
        Minimum confidence level (0.0-1.0) required to trust detection

    Returns
    -------
    str | None
        Detected encoding name, or None if detection fails or confidence is
        below the threshold

    """
    sample = data[:sample_size]
    result = chardet.detect(sample)

    encoding = result.get("encoding") if result else None
    if not encoding:
        logger.debug("chardet: No encoding detected")
        return None

    confidence = result.get("confidence") or 0.0
    logger.debug("chardet detected encoding: %s (confidence: %.2f)", encoding, confidence)
    if confidence < confidence_threshold:
        logger.debug("chardet confidence %.2f below threshold %s", confidence, confidence_threshold)
        return None
    return encoding


def read_text_with_encoding_detection(
    data: bytes,
    fallback_encodings: tuple[str, ...] = DEFAULT_FALLBACK_ENCODINGS,
    use_chardet: bool = True,
) -> str:
    """Read binary data as text with automatic encoding detection.

    Parameters
    ----------
    data : bytes
        Binary data to decode
    fallback_encodings : tuple of str
        Encodings to try in order after (or instead of) chardet detection
    use_chardet : bool, default True
        Whether to attempt chardet-based detection first

    Returns
    -------
    str
        Decoded text content

    Examples
    --------
    >>> read_text_with_encoding_detection(b"[b]Hello[/b]")
    '[b]Hello[/b]'

    """
    if use_chardet and data:
        detected_encoding = detect_encoding(data)
        if detected_encoding:
            try:
                return data.decode(detected_encoding)
            except (UnicodeDecodeError, LookupError) as e:
                logger.debug("Failed to decode with chardet-detected encoding %s: %s", detected_encoding, e)

    for encoding in fallback_encodings:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as e:
            logger.debug("Failed to decode with %s: %s", encoding, e)
        except LookupError as e:
            logger.debug("Unknown encoding %s: %s", encoding, e)

    logger.warning("All encoding attempts failed, using utf-8 with error replacement")
    return data.decode("utf-8", errors="replace")


def load_text(source: Union[str, Path, bytes, IO[bytes], IO[str]]) -> str:
    """Load markup text from a path, raw bytes or a file-like object.

    A ``str`` is treated as markup content, not as a path; pass a ``Path`` to
    read from disk.

    Parameters
    ----------
    source : str, Path, bytes, or file-like
        Markup source

    Returns
    -------
    str
        Decoded markup text

    Raises
    ------
    TypeError
        If a stream returns something other than bytes or str

    """
    if isinstance(source, str):
        return source
    if isinstance(source, bytes):
        return read_text_with_encoding_detection(source)
    if isinstance(source, Path):
        return read_text_with_encoding_detection(source.read_bytes())

    content = source.read()
    if isinstance(content, bytes):
        return read_text_with_encoding_detection(content)
    if isinstance(content, str):
        return content
    raise TypeError(f"Stream read() returned unexpected type {type(content).__name__}. Expected bytes or str.")
