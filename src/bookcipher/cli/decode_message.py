"""CLI entrypoint for decoding a coordinate string against a book file."""

from __future__ import annotations

import argparse
import json
import logging

from dotenv import load_dotenv

from bookcipher.book.loader import BookLoadError, load_book_text
from bookcipher.cipher.modes import CipherMode
from bookcipher.cipher.normalize import NormalizationPolicy
from bookcipher.config import CipherSettings
from bookcipher.service import CipherService


load_dotenv()

LOGGER = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Decode book coordinates back into plaintext")
    parser.add_argument("--book-path", required=True, help="Plain-text book used as the key")
    parser.add_argument("--cipher", required=True, help="Coordinate string to decode")
    parser.add_argument("--mode", choices=[mode.value for mode in CipherMode], help="Addressing mode")
    parser.add_argument(
        "--normalization",
        choices=[policy.value for policy in NormalizationPolicy],
        help="Key normalization policy (affects line-word-char mode only)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    args = _parse_args(argv)

    try:
        settings = CipherSettings.from_env()
    except ValueError as exc:
        LOGGER.error("Configuration error: %s", exc)
        return 2

    mode = CipherMode(args.mode) if args.mode else settings.mode
    policy = NormalizationPolicy(args.normalization) if args.normalization else settings.policy

    try:
        book_text = load_book_text(args.book_path)
    except BookLoadError as exc:
        LOGGER.error("%s", exc)
        return 2

    result = CipherService(book_text, policy=policy).decode(args.cipher, mode)
    if result.unresolved:
        LOGGER.warning("%d coordinate(s) could not be resolved against the book", result.unresolved)

    payload = {"mode": mode.value, "normalization": policy.value, **result.to_dict()}
    print(json.dumps(payload, ensure_ascii=True, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
