"""Plain-text book loading with encoding detection."""

from __future__ import annotations

import logging
from pathlib import Path

from charset_normalizer import from_bytes


logger = logging.getLogger(__name__)

_FALLBACK_ENCODINGS = ("utf-8", "cp1252")


class BookLoadError(OSError):
    """Raised when a book file cannot be read or decoded."""


def _detect_encoding(raw: bytes) -> str:
    best = from_bytes(raw).best()
    if best and best.encoding:
        return best.encoding

    for fallback in _FALLBACK_ENCODINGS:
        try:
            raw.decode(fallback)
        except UnicodeDecodeError:
            continue
        logger.warning("Charset detection inconclusive, falling back to %s", fallback)
        return fallback
    raise BookLoadError("Could not detect book text encoding")


def load_book_text(path: str | Path) -> str:
    """Read a book file and return its text with original line breaks intact."""
    book_path = Path(path)
    try:
        raw = book_path.read_bytes()
    except OSError as exc:
        raise BookLoadError(f"Could not read book file '{book_path}': {exc}") from exc

    if not raw:
        return ""

    encoding = _detect_encoding(raw)
    try:
        text = raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise BookLoadError(f"Could not decode book file '{book_path}' as {encoding}: {exc}") from exc

    text = text.removeprefix("\ufeff")
    logger.debug("Loaded book %s (%d chars, encoding=%s)", book_path, len(text), encoding)
    return text
