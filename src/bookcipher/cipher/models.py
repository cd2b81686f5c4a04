"""Value types produced by the indexer, encoder and decoder."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from bookcipher.cipher.modes import CipherMode
from bookcipher.cipher.normalize import NormalizationPolicy


@dataclass(frozen=True, slots=True)
class BookLocation:
    """One occurrence of a key in the book.

    ``paragraph`` is None for line-only modes and ``char`` is None outside
    Line-Word-Char mode. All positions are 1-based.
    """

    line: int
    word: int
    content: str
    paragraph: int | None = None
    char: int | None = None


@dataclass(frozen=True, slots=True)
class BookIndex:
    """Read-only mapping from normalized key to every location sharing it."""

    mode: CipherMode
    policy: NormalizationPolicy
    entries: Mapping[str, tuple[BookLocation, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def candidates(self, key: str) -> tuple[BookLocation, ...]:
        return self.entries.get(key, ())

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def location_count(self) -> int:
        return sum(len(locations) for locations in self.entries.values())


@dataclass(slots=True)
class EncodeResult:
    text: str
    missing_tokens: tuple[str, ...] = ()

    @property
    def success(self) -> bool:
        return not self.missing_tokens

    def to_dict(self) -> dict[str, object]:
        return {
            "success": self.success,
            "text": self.text,
            "missing_tokens": list(self.missing_tokens),
        }


@dataclass(slots=True)
class DecodeResult:
    """Decoded plaintext; failures show up inline as ``?`` and in ``unresolved``."""

    text: str
    unresolved: int = 0
    success: bool = True

    def to_dict(self) -> dict[str, object]:
        return {
            "success": self.success,
            "text": self.text,
            "unresolved": self.unresolved,
        }
