"""Build the key -> locations lookup for a book under one addressing mode."""

from __future__ import annotations

import logging

from bookcipher.cipher.models import BookIndex, BookLocation
from bookcipher.cipher.modes import CipherMode
from bookcipher.cipher.normalize import NormalizationPolicy, clean_display_word, normalize_key
from bookcipher.cipher.segmentation import BookStructure


logger = logging.getLogger(__name__)


def build_index(
    book_text: str,
    mode: CipherMode,
    *,
    policy: NormalizationPolicy = NormalizationPolicy.ACCENT_INSENSITIVE,
) -> BookIndex:
    """Index every word (or every key character in Line-Word-Char mode) of the book.

    Repeated keys accumulate locations in book order; they are the homophonic
    candidates the encoder picks from. Tokens that normalize to an empty key are
    skipped but still occupy a word position.
    """
    structure = BookStructure.from_text(book_text, mode)
    entries: dict[str, list[BookLocation]] = {}

    for paragraph_no, lines in enumerate(structure.paragraphs, start=1):
        paragraph = paragraph_no if mode.uses_paragraphs else None

        for line_no, words in enumerate(lines, start=1):
            for word_no, raw_word in enumerate(words, start=1):
                key = normalize_key(raw_word, policy)
                if not key:
                    continue

                if mode.is_character_mode:
                    for char_no, char in enumerate(key, start=1):
                        entries.setdefault(char, []).append(
                            BookLocation(line=line_no, word=word_no, char=char_no, content=char)
                        )
                    continue

                entries.setdefault(key, []).append(
                    BookLocation(
                        paragraph=paragraph,
                        line=line_no,
                        word=word_no,
                        content=clean_display_word(raw_word),
                    )
                )

    index = BookIndex(
        mode=mode,
        policy=policy,
        entries={key: tuple(locations) for key, locations in entries.items()},
    )
    logger.debug(
        "Indexed book for mode=%s policy=%s: %d keys, %d locations",
        mode.value,
        policy.value,
        len(index),
        index.location_count,
    )
    return index
