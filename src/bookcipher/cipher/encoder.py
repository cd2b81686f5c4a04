"""Homophonic encoding of messages into book coordinates."""

from __future__ import annotations

import logging
import math
import random

from bookcipher.cipher.errors import ModeMismatchError
from bookcipher.cipher.models import BookIndex, BookLocation, EncodeResult
from bookcipher.cipher.modes import CipherMode
from bookcipher.cipher.normalize import normalize_key


logger = logging.getLogger(__name__)

DATE_TAG_PLACEHOLDER = "DATA"
SPACE_MARKER = "/"
DEFAULT_LINES_PER_PAGE = 40


def validate_date_tag(tag: str) -> str:
    """Return the stripped tag; it may be empty but cannot carry field separators."""
    value = tag.strip()
    if ":" in value or any(char.isspace() for char in value):
        raise ValueError("date tag cannot contain ':' or whitespace")
    return value


def _plaintext_code(unit: str, mode: CipherMode) -> str:
    # the decoder would read these as a coordinate or as the space marker
    if ":" in unit or (mode.is_character_mode and unit == SPACE_MARKER):
        return f"[{unit}]"
    return unit


def format_coordinate(
    location: BookLocation,
    mode: CipherMode,
    *,
    tag: str = "",
    lines_per_page: int = DEFAULT_LINES_PER_PAGE,
) -> str:
    if mode is CipherMode.LINE_WORD:
        return f"{location.line}:{location.word}"
    if mode is CipherMode.LINE_WORD_CHAR:
        page = math.ceil(location.line / lines_per_page)
        return f"{page}:{location.line}:{location.word}:{location.char}"
    if mode is CipherMode.PARAGRAPH_LINE_WORD:
        return f"{location.paragraph}:{location.line}:{location.word}"
    if mode is CipherMode.DATE_PARAGRAPH_LINE_WORD:
        return f"{tag or DATE_TAG_PLACEHOLDER}:{location.paragraph}:{location.line}:{location.word}"
    raise ValueError(f"Unsupported cipher mode: {mode!r}")


def encode_message(
    message: str,
    index: BookIndex,
    mode: CipherMode,
    *,
    tag: str = "",
    rng: random.Random | None = None,
    lines_per_page: int = DEFAULT_LINES_PER_PAGE,
) -> EncodeResult:
    """Encode ``message`` against ``index``, never failing on unknown tokens.

    Tokens without candidates are reported in ``missing_tokens`` (first-seen order,
    no duplicates) and emitted as ``[token]`` so the receiver still reads them.
    """
    if index.mode is not mode:
        raise ModeMismatchError(index_mode=index.mode, requested_mode=mode)
    if lines_per_page < 1:
        raise ValueError("lines_per_page must be >= 1")

    chooser = rng or random.Random()
    date_tag = ""
    if mode is CipherMode.DATE_PARAGRAPH_LINE_WORD:
        date_tag = validate_date_tag(tag) or DATE_TAG_PLACEHOLDER
    missing: dict[str, None] = {}
    codes: list[str] = []

    if mode.is_character_mode:
        units = list(message.strip())
    else:
        units = message.split()

    for unit in units:
        if mode.is_character_mode and unit.isspace():
            codes.append(SPACE_MARKER)
            continue

        key = normalize_key(unit, index.policy)
        if not key:
            # punctuation travels as plaintext
            codes.append(_plaintext_code(unit, mode))
            continue

        candidates = index.candidates(key)
        if not candidates:
            missing.setdefault(unit, None)
            codes.append(f"[{unit}]")
            continue

        location = chooser.choice(candidates)
        codes.append(format_coordinate(location, mode, tag=date_tag, lines_per_page=lines_per_page))

    result = EncodeResult(text=mode.separator.join(codes), missing_tokens=tuple(missing))
    if result.success:
        logger.debug("Encoded %d unit(s) in mode=%s", len(units), mode.value)
    else:
        logger.warning(
            "Encoded %d unit(s) in mode=%s with %d token(s) missing from the book",
            len(units),
            mode.value,
            len(result.missing_tokens),
        )
    return result
