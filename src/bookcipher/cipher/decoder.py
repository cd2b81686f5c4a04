"""Resolve coordinate strings back to the words they point at in the book."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re

from bookcipher.cipher.encoder import SPACE_MARKER
from bookcipher.cipher.models import DecodeResult
from bookcipher.cipher.modes import CipherMode
from bookcipher.cipher.normalize import NormalizationPolicy, clean_display_word, normalize_key
from bookcipher.cipher.segmentation import BookStructure


logger = logging.getLogger(__name__)

UNRESOLVED = "?"
_FIELD_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Structural fields of a parsed coordinate; leading tag/page fields are dropped."""

    paragraph: int
    line: int
    word: int
    char: int | None = None


def _parse_field(raw: str) -> int | None:
    if not _FIELD_RE.fullmatch(raw):
        return None
    try:
        return int(raw)
    except ValueError:
        # digit strings past the interpreter's int conversion limit
        return None


def parse_coordinate(token: str, mode: CipherMode) -> Coordinate | None:
    """Parse ``token`` for ``mode``; None on wrong field count or non-integer fields."""
    parts = token.split(":")

    if mode is CipherMode.LINE_WORD:
        allowed = (2,)
    elif mode is CipherMode.LINE_WORD_CHAR:
        # P:L:W:C with a decorative page, or the legacy L:W:C form
        allowed = (3, 4)
    elif mode is CipherMode.PARAGRAPH_LINE_WORD:
        allowed = (3,)
    elif mode is CipherMode.DATE_PARAGRAPH_LINE_WORD:
        allowed = (4,)
    else:
        raise ValueError(f"Unsupported cipher mode: {mode!r}")

    if len(parts) not in allowed:
        return None

    # leading date or page fields are discarded
    structural = parts[-3:] if mode.has_leading_tag else parts

    values = [_parse_field(part) for part in structural]
    if any(value is None for value in values):
        return None

    if mode is CipherMode.LINE_WORD:
        line, word = values
        return Coordinate(paragraph=1, line=line, word=word)
    if mode is CipherMode.LINE_WORD_CHAR:
        line, word, char = values
        return Coordinate(paragraph=1, line=line, word=word, char=char)
    paragraph, line, word = values
    return Coordinate(paragraph=paragraph, line=line, word=word)


def resolve_coordinate(
    coordinate: Coordinate,
    structure: BookStructure,
    *,
    policy: NormalizationPolicy = NormalizationPolicy.ACCENT_INSENSITIVE,
) -> str | None:
    """Return the literal text at ``coordinate`` (before upper-casing), or None."""
    raw_word = structure.word_at(coordinate.paragraph, coordinate.line, coordinate.word)
    if raw_word is None:
        return None

    if coordinate.char is None:
        return clean_display_word(raw_word)

    key = normalize_key(raw_word, policy)
    if coordinate.char < 1 or coordinate.char > len(key):
        return None
    return key[coordinate.char - 1]


def decode_message(
    cipher_text: str,
    book_text: str,
    mode: CipherMode,
    *,
    policy: NormalizationPolicy = NormalizationPolicy.ACCENT_INSENSITIVE,
) -> DecodeResult:
    """Decode ``cipher_text`` against a freshly segmented ``book_text``.

    Malformed or out-of-range coordinates become ``?`` in place; the call itself
    always succeeds. ``policy`` only matters in Line-Word-Char mode, where character
    positions count over the normalized word.
    """
    structure = BookStructure.from_text(book_text, mode)
    parts: list[str] = []
    unresolved = 0

    for token in cipher_text.split():
        if len(token) >= 2 and token.startswith("[") and token.endswith("]"):
            parts.append(token[1:-1])
            continue
        if mode.is_character_mode and token == SPACE_MARKER:
            parts.append(" ")
            continue
        if ":" not in token:
            parts.append(token)
            continue

        coordinate = parse_coordinate(token, mode)
        resolved = None
        if coordinate is not None:
            resolved = resolve_coordinate(coordinate, structure, policy=policy)

        if resolved is None:
            unresolved += 1
            parts.append(UNRESOLVED)
            continue
        parts.append(resolved.upper())

    joiner = "" if mode.is_character_mode else " "
    result = DecodeResult(text=joiner.join(parts), unresolved=unresolved)
    logger.debug(
        "Decoded %d token(s) in mode=%s, %d unresolved",
        len(parts),
        mode.value,
        unresolved,
    )
    return result
