"""Domain errors for caller-side precondition violations."""

from __future__ import annotations

from dataclasses import dataclass

from bookcipher.cipher.modes import CipherMode


@dataclass(slots=True)
class ModeMismatchError(ValueError):
    """Raised when an index built under one mode is used to encode under another."""

    index_mode: CipherMode
    requested_mode: CipherMode

    def __str__(self) -> str:
        return (
            f"Index was built for mode '{self.index_mode.value}' "
            f"but encoding was requested with mode '{self.requested_mode.value}'"
        )
