"""Stateful facade holding the current book and its per-mode indexes."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import random

from bookcipher.book.pages import merge_book_text
from bookcipher.book.stats import BookStats, compute_book_stats
from bookcipher.cipher.decoder import decode_message
from bookcipher.cipher.encoder import DEFAULT_LINES_PER_PAGE, encode_message
from bookcipher.cipher.indexer import build_index
from bookcipher.cipher.models import BookIndex, DecodeResult, EncodeResult
from bookcipher.cipher.modes import CipherMode
from bookcipher.cipher.normalize import NormalizationPolicy


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _BookSnapshot:
    text: str
    indexes: dict[CipherMode, BookIndex] = field(default_factory=dict)


class CipherService:
    """Encode and decode against one book, rebuilding indexes whenever the book changes.

    Indexes are built lazily per mode and published into the snapshot of the text
    they were built from, so replacing the book discards them all at once and an
    index can never be paired with a different text or mode.
    """

    def __init__(
        self,
        book_text: str = "",
        *,
        policy: NormalizationPolicy = NormalizationPolicy.ACCENT_INSENSITIVE,
        rng: random.Random | None = None,
        lines_per_page: int = DEFAULT_LINES_PER_PAGE,
    ) -> None:
        if lines_per_page < 1:
            raise ValueError("lines_per_page must be >= 1")

        self._snapshot = _BookSnapshot(text=book_text)
        self._policy = policy
        self._rng = rng or random.Random()
        self._lines_per_page = lines_per_page

    @property
    def book_text(self) -> str:
        return self._snapshot.text

    @property
    def policy(self) -> NormalizationPolicy:
        return self._policy

    def replace_book(self, book_text: str) -> None:
        self._snapshot = _BookSnapshot(text=book_text)
        logger.debug("Book replaced (%d chars); cached indexes discarded", len(book_text))

    def append_page(self, page_text: str, *, current_is_placeholder: bool = False) -> None:
        """Add extracted page text, replacing the book when it is still the placeholder."""
        merged = merge_book_text(
            self._snapshot.text,
            page_text,
            current_is_placeholder=current_is_placeholder,
        )
        self.replace_book(merged)

    def index_for(self, mode: CipherMode) -> BookIndex:
        snapshot = self._snapshot
        index = snapshot.indexes.get(mode)
        if index is None:
            index = build_index(snapshot.text, mode, policy=self._policy)
            snapshot.indexes[mode] = index
        return index

    def encode(self, message: str, mode: CipherMode, *, tag: str = "") -> EncodeResult:
        return encode_message(
            message,
            self.index_for(mode),
            mode,
            tag=tag,
            rng=self._rng,
            lines_per_page=self._lines_per_page,
        )

    def decode(self, cipher_text: str, mode: CipherMode) -> DecodeResult:
        return decode_message(cipher_text, self._snapshot.text, mode, policy=self._policy)

    def stats(self) -> BookStats:
        return compute_book_stats(self._snapshot.text, lines_per_page=self._lines_per_page)
