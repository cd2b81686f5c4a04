"""CLI entrypoint for encoding a message against a book file."""

from __future__ import annotations

import argparse
import json
import logging
import random

from dotenv import load_dotenv

from bookcipher.book.loader import BookLoadError, load_book_text
from bookcipher.cipher.modes import CipherMode
from bookcipher.cipher.normalize import NormalizationPolicy
from bookcipher.config import CipherSettings
from bookcipher.service import CipherService


load_dotenv()

LOGGER = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Encode a message as coordinates into a book")
    parser.add_argument("--book-path", required=True, help="Plain-text book used as the key")
    parser.add_argument("--message", required=True, help="Message to encode")
    parser.add_argument("--mode", choices=[mode.value for mode in CipherMode], help="Addressing mode")
    parser.add_argument(
        "--normalization",
        choices=[policy.value for policy in NormalizationPolicy],
        help="Key normalization policy",
    )
    parser.add_argument("--tag", help="Date tag prepended in date-paragraph-line-word mode")
    parser.add_argument("--seed", type=int, help="Seed for homophonic candidate selection")
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
    tag = args.tag if args.tag is not None else settings.date_tag
    seed = args.seed if args.seed is not None else settings.seed

    try:
        book_text = load_book_text(args.book_path)
    except BookLoadError as exc:
        LOGGER.error("%s", exc)
        return 2

    service = CipherService(
        book_text,
        policy=policy,
        rng=random.Random(seed),
        lines_per_page=settings.lines_per_page,
    )
    try:
        result = service.encode(args.message, mode, tag=tag)
    except ValueError as exc:
        LOGGER.error("Invalid encode request: %s", exc)
        return 2

    payload = {"mode": mode.value, "normalization": policy.value, **result.to_dict()}
    print(json.dumps(payload, ensure_ascii=True, indent=2))
    return 0 if result.success else 1


if __name__ == "__main__":
    raise SystemExit(main())
