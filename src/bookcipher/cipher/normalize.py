"""Lookup-key normalization for book words and message tokens.

Two policies coexist. ``STRICT`` keeps accented letters as distinct characters, so
"vovó" and "vovo" are different keys. ``ACCENT_INSENSITIVE`` decomposes to NFD and
drops combining marks, so "Vovó!" and "vovo" share the key ``vovo``.

Keys are what the index is looked up by; the text shown to users comes from
``clean_display_word`` instead, which only trims boundary punctuation.
"""

from __future__ import annotations

from enum import Enum
import re
import unicodedata


# U+0300..U+036F, the combining diacritical marks block left behind by NFD.
_COMBINING_MARKS_RE = re.compile("[\u0300-\u036f]")
_NON_ALNUM_RE = re.compile(r"[\W_]+")
_BOUNDARY_PUNCT_RE = re.compile(r"^[\W_]+|[\W_]+$")


class NormalizationPolicy(Enum):
    STRICT = "strict"
    ACCENT_INSENSITIVE = "accent-insensitive"

    @classmethod
    def parse(cls, raw: str) -> "NormalizationPolicy":
        value = raw.strip().lower().replace("_", "-")
        for policy in cls:
            if policy.value == value:
                return policy
        choices = ", ".join(policy.value for policy in cls)
        raise ValueError(f"Unknown normalization policy '{raw}'; expected one of: {choices}")


def normalize_key(raw: str, policy: NormalizationPolicy = NormalizationPolicy.ACCENT_INSENSITIVE) -> str:
    """Return the index key for a raw token; may be empty for pure punctuation."""
    if policy is NormalizationPolicy.ACCENT_INSENSITIVE:
        working = unicodedata.normalize("NFD", raw).lower()
        working = _COMBINING_MARKS_RE.sub("", working)
    else:
        working = raw.lower()
    return _NON_ALNUM_RE.sub("", working)


def clean_display_word(raw: str) -> str:
    """Trim leading and trailing non-alphanumerics, keeping inner letters and accents."""
    return _BOUNDARY_PUNCT_RE.sub("", raw)
