"""CLI entrypoint for book statistics."""

from __future__ import annotations

import argparse
import json
import logging

from dotenv import load_dotenv

from bookcipher.book.loader import BookLoadError, load_book_text
from bookcipher.book.stats import compute_book_stats
from bookcipher.config import CipherSettings


load_dotenv()

LOGGER = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    parser = argparse.ArgumentParser(description="Show line, word and paragraph counts for a book")
    parser.add_argument("--book-path", required=True, help="Plain-text book to inspect")
    parser.add_argument("--lines-per-page", type=int, help="Lines per estimated page")
    args = parser.parse_args(argv)

    try:
        settings = CipherSettings.from_env()
    except ValueError as exc:
        LOGGER.error("Configuration error: %s", exc)
        return 2

    lines_per_page = args.lines_per_page if args.lines_per_page is not None else settings.lines_per_page
    if lines_per_page < 1:
        LOGGER.error("--lines-per-page must be >= 1")
        return 2

    try:
        book_text = load_book_text(args.book_path)
    except BookLoadError as exc:
        LOGGER.error("%s", exc)
        return 2

    stats = compute_book_stats(book_text, lines_per_page=lines_per_page)
    payload = {"book_path": args.book_path, **stats.to_dict()}
    print(json.dumps(payload, ensure_ascii=True, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
