"""Runtime configuration for the cipher CLIs and service."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping

from bookcipher.cipher.encoder import DEFAULT_LINES_PER_PAGE, validate_date_tag
from bookcipher.cipher.modes import CipherMode
from bookcipher.cipher.normalize import NormalizationPolicy


DEFAULT_MODE = CipherMode.PARAGRAPH_LINE_WORD
DEFAULT_POLICY = NormalizationPolicy.ACCENT_INSENSITIVE


def _parse_int(*, name: str, raw_value: str, minimum: int = 1) -> int:
    try:
        value = int(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


@dataclass(frozen=True, slots=True)
class CipherSettings:
    """Validated defaults for encoding and decoding."""

    mode: CipherMode = DEFAULT_MODE
    policy: NormalizationPolicy = DEFAULT_POLICY
    date_tag: str = ""
    seed: int | None = None
    lines_per_page: int = DEFAULT_LINES_PER_PAGE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CipherSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        mode_raw = source.get("BOOKCIPHER_MODE", DEFAULT_MODE.value).strip()
        policy_raw = source.get("BOOKCIPHER_NORMALIZATION", DEFAULT_POLICY.value).strip()
        date_tag_raw = source.get("BOOKCIPHER_DATE_TAG", "")
        seed_raw = source.get("BOOKCIPHER_SEED", "").strip()
        pages_raw = source.get("BOOKCIPHER_LINES_PER_PAGE", str(DEFAULT_LINES_PER_PAGE)).strip()

        if not mode_raw:
            raise ValueError("BOOKCIPHER_MODE cannot be empty")
        if not policy_raw:
            raise ValueError("BOOKCIPHER_NORMALIZATION cannot be empty")
        if not pages_raw:
            raise ValueError("BOOKCIPHER_LINES_PER_PAGE cannot be empty")

        try:
            mode = CipherMode.parse(mode_raw)
        except ValueError as exc:
            raise ValueError(f"BOOKCIPHER_MODE: {exc}") from exc
        try:
            policy = NormalizationPolicy.parse(policy_raw)
        except ValueError as exc:
            raise ValueError(f"BOOKCIPHER_NORMALIZATION: {exc}") from exc

        try:
            date_tag = validate_date_tag(date_tag_raw)
        except ValueError as exc:
            raise ValueError(f"BOOKCIPHER_DATE_TAG: {exc}") from exc

        seed: int | None = None
        if seed_raw:
            seed = _parse_int(name="BOOKCIPHER_SEED", raw_value=seed_raw, minimum=0)

        lines_per_page = _parse_int(
            name="BOOKCIPHER_LINES_PER_PAGE",
            raw_value=pages_raw,
            minimum=1,
        )

        return cls(
            mode=mode,
            policy=policy,
            date_tag=date_tag,
            seed=seed,
            lines_per_page=lines_per_page,
        )
