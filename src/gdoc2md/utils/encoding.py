#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/utils/encoding.py
"""Character encoding detection for byte input.

Source bytes are decoded with the first strategy that succeeds:

1. UTF-8, with or without a byte order mark
2. The encoding an HTML document declares for itself (``<meta charset>`` or
   an XML declaration)
3. chardet detection above a confidence threshold
4. cp1252, then latin-1, which accepts any byte sequence
"""

from __future__ import annotations

import logging

import chardet

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ENCODINGS = ("cp1252", "latin-1")
CHARDET_SAMPLE_SIZE = 8192
CHARDET_CONFIDENCE_THRESHOLD = 0.7


def detect_encoding(
    data: bytes,
    sample_size: int = CHARDET_SAMPLE_SIZE,
    confidence_threshold: float = CHARDET_CONFIDENCE_THRESHOLD,
) -> str | None:
    """Detect the character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of leading bytes to sample
    confidence_threshold : float, default 0.7
        Minimum confidence required to trust the detection

    Returns
    -------
    str or None
        Detected encoding name, or None when nothing was detected with
        enough confidence

    """
    result = chardet.detect(data[:sample_size])
    encoding = result.get("encoding") if result else None
    if not encoding:
        logger.debug("chardet: no encoding detected")
        return None

    confidence = result.get("confidence") or 0.0
    logger.debug(f"chardet detected encoding: {encoding} (confidence: {confidence:.2f})")
    if confidence < confidence_threshold:
        logger.debug(f"chardet confidence {confidence:.2f} below threshold {confidence_threshold}")
        return None
    return encoding


def declared_html_encoding(data: bytes) -> str | None:
    """Return the encoding an HTML document declares in its markup, if any."""
    from bs4.dammit import EncodingDetector

    return EncodingDetector.find_declared_encoding(data, is_html=True)


def _try_decode(data: bytes, encoding: str) -> str | None:
    try:
        return data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        logger.debug(f"Failed to decode with {encoding}: {e}")
        return None


def read_text_with_encoding_detection(
    data: bytes,
    declared_encoding: str | None = None,
    fallback_encodings: tuple[str, ...] = DEFAULT_FALLBACK_ENCODINGS,
) -> str:
    """Decode binary data as text with automatic encoding detection.

    Parameters
    ----------
    data : bytes
        Binary data to decode
    declared_encoding : str, optional
        Encoding the document declares for itself; tried after UTF-8
    fallback_encodings : tuple of str, default ("cp1252", "latin-1")
        Encodings tried in order when UTF-8 and chardet both fail

    Returns
    -------
    str
        Decoded text

    Examples
    --------
    >>> read_text_with_encoding_detection("café".encode("utf-8"))
    'café'
    >>> read_text_with_encoding_detection(b"caf\\xe9", declared_encoding="cp1252")
    'café'

    """
    # Valid UTF-8 always wins, whatever the markup declares
    text = _try_decode(data, "utf-8-sig")
    if text is not None:
        return text

    if declared_encoding:
        text = _try_decode(data, declared_encoding)
        if text is not None:
            logger.debug(f"Decoded with declared encoding: {declared_encoding}")
            return text

    detected = detect_encoding(data)
    if detected:
        text = _try_decode(data, detected)
        if text is not None:
            logger.debug(f"Decoded with chardet-detected encoding: {detected}")
            return text

    for encoding in fallback_encodings:
        text = _try_decode(data, encoding)
        if text is not None:
            logger.debug(f"Decoded with fallback encoding: {encoding}")
            return text

    logger.warning("All encoding attempts failed, using utf-8 with error replacement")
    return data.decode("utf-8", errors="replace")
