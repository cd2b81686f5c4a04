"""Summary counts shown alongside a book."""

from __future__ import annotations

from dataclasses import dataclass
import math

from bookcipher.cipher.encoder import DEFAULT_LINES_PER_PAGE
from bookcipher.cipher.segmentation import split_lines, split_paragraphs


@dataclass(frozen=True, slots=True)
class BookStats:
    lines: int
    words: int
    chars: int
    letters: int
    paragraphs: int
    pages: int

    def to_dict(self) -> dict[str, int]:
        return {
            "lines": self.lines,
            "words": self.words,
            "chars": self.chars,
            "letters": self.letters,
            "paragraphs": self.paragraphs,
            "pages": self.pages,
        }


def compute_book_stats(text: str, *, lines_per_page: int = DEFAULT_LINES_PER_PAGE) -> BookStats:
    if lines_per_page < 1:
        raise ValueError("lines_per_page must be >= 1")

    lines = len(split_lines(text))
    return BookStats(
        lines=lines,
        words=len(text.split()),
        chars=len(text),
        letters=sum(1 for char in text if char.isalpha()),
        paragraphs=len(split_paragraphs(text)),
        pages=max(1, math.ceil(lines / lines_per_page)),
    )
