"""Book segmentation shared by indexing and decoding.

Decoding re-derives structure from raw book text on every call, so both sides must
go through these helpers to agree on numbering.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from bookcipher.cipher.modes import CipherMode


_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split on any of CRLF, CR or LF; blank lines are kept so numbering stays stable."""
    return _LINE_BREAK_RE.split(text)


def split_words(line: str) -> list[str]:
    return line.split()


def split_paragraphs(text: str) -> list[list[str]]:
    """Group lines into paragraphs separated by runs of whitespace-only lines."""
    paragraphs: list[list[str]] = []
    current: list[str] = []

    for line in split_lines(text):
        if not line.strip():
            if current:
                paragraphs.append(current)
                current = []
            continue
        current.append(line)

    if current:
        paragraphs.append(current)
    return paragraphs


@dataclass(frozen=True, slots=True)
class BookStructure:
    """Words of the book grouped by container: paragraphs -> lines -> words.

    Line-only modes are stored as a single pseudo-paragraph holding every line of
    the book, so lookups share one bounds-checked path.
    """

    mode: CipherMode
    paragraphs: tuple[tuple[tuple[str, ...], ...], ...]

    @classmethod
    def from_text(cls, text: str, mode: CipherMode) -> "BookStructure":
        if mode.uses_paragraphs:
            groups = split_paragraphs(text)
        else:
            groups = [split_lines(text)]

        paragraphs = tuple(
            tuple(tuple(split_words(line)) for line in lines)
            for lines in groups
        )
        return cls(mode=mode, paragraphs=paragraphs)

    def word_at(self, paragraph: int, line: int, word: int) -> str | None:
        """Return the raw word at 1-based coordinates, or None when out of range."""
        if paragraph < 1 or paragraph > len(self.paragraphs):
            return None
        lines = self.paragraphs[paragraph - 1]
        if line < 1 or line > len(lines):
            return None
        words = lines[line - 1]
        if word < 1 or word > len(words):
            return None
        return words[word - 1]
