"""Addressing modes: how the book is segmented and how coordinates are written."""

from __future__ import annotations

from enum import Enum


class CipherMode(Enum):
    LINE_WORD = "line-word"                                # L:W
    LINE_WORD_CHAR = "line-word-char"                      # P:L:W:C, page decorative
    PARAGRAPH_LINE_WORD = "paragraph-line-word"            # Pa:L:W
    DATE_PARAGRAPH_LINE_WORD = "date-paragraph-line-word"  # Date:Pa:L:W

    @property
    def is_character_mode(self) -> bool:
        return self is CipherMode.LINE_WORD_CHAR

    @property
    def uses_paragraphs(self) -> bool:
        return self in (CipherMode.PARAGRAPH_LINE_WORD, CipherMode.DATE_PARAGRAPH_LINE_WORD)

    @property
    def has_leading_tag(self) -> bool:
        """True when coordinates carry a leading field that decoding discards."""
        return self in (CipherMode.LINE_WORD_CHAR, CipherMode.DATE_PARAGRAPH_LINE_WORD)

    @property
    def separator(self) -> str:
        return " " if self.is_character_mode else "  "

    @classmethod
    def parse(cls, raw: str) -> "CipherMode":
        value = raw.strip().lower().replace("_", "-")
        for mode in cls:
            if mode.value == value:
                return mode
        choices = ", ".join(mode.value for mode in cls)
        raise ValueError(f"Unknown cipher mode '{raw}'; expected one of: {choices}")
