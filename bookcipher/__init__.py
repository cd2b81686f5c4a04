"""Source-checkout shim: lets `python -m bookcipher.cli.<tool>` find the src/ package."""

from __future__ import annotations

from pathlib import Path

_SRC_PACKAGE = Path(__file__).resolve().parents[1] / "src" / "bookcipher"

if _SRC_PACKAGE.is_dir():
    __path__.append(str(_SRC_PACKAGE))
