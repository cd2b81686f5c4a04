"""Book text collaborators: file loading, page merging and statistics."""

from .loader import BookLoadError, load_book_text
from .pages import PAGE_SEPARATOR, merge_book_text
from .stats import BookStats, compute_book_stats

__all__ = [
    "BookLoadError",
    "BookStats",
    "PAGE_SEPARATOR",
    "compute_book_stats",
    "load_book_text",
    "merge_book_text",
]
