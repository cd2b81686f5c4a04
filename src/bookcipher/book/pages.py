"""Merging newly extracted page text (e.g. OCR output) into the current book."""

from __future__ import annotations

PAGE_SEPARATOR = "\n\n--- NEW PAGE ---\n\n"


def merge_book_text(current: str, incoming: str, *, current_is_placeholder: bool = False) -> str:
    """Replace a placeholder or blank book with ``incoming``, otherwise append it as a new page.

    The separator is blank-line delimited, so each appended page starts a new
    paragraph for paragraph-aware modes.
    """
    if current_is_placeholder or not current.strip():
        return incoming
    return current + PAGE_SEPARATOR + incoming
