from __future__ import annotations

import pytest

from bookcipher.cipher.modes import CipherMode
from bookcipher.cipher.normalize import NormalizationPolicy
from bookcipher.config import CipherSettings


def test_settings_defaults_from_empty_env() -> None:
    settings = CipherSettings.from_env({})

    assert settings.mode is CipherMode.PARAGRAPH_LINE_WORD
    assert settings.policy is NormalizationPolicy.ACCENT_INSENSITIVE
    assert settings.date_tag == ""
    assert settings.seed is None
    assert settings.lines_per_page == 40


def test_settings_load_all_values() -> None:
    settings = CipherSettings.from_env(
        {
            "BOOKCIPHER_MODE": "line-word-char",
            "BOOKCIPHER_NORMALIZATION": "strict",
            "BOOKCIPHER_DATE_TAG": " 2024-05-01 ",
            "BOOKCIPHER_SEED": "42",
            "BOOKCIPHER_LINES_PER_PAGE": "25",
        }
    )

    assert settings.mode is CipherMode.LINE_WORD_CHAR
    assert settings.policy is NormalizationPolicy.STRICT
    assert settings.date_tag == "2024-05-01"
    assert settings.seed == 42
    assert settings.lines_per_page == 25


def test_settings_reject_unknown_mode_and_policy() -> None:
    with pytest.raises(ValueError, match="BOOKCIPHER_MODE"):
        CipherSettings.from_env({"BOOKCIPHER_MODE": "ottendorf"})

    with pytest.raises(ValueError, match="BOOKCIPHER_NORMALIZATION"):
        CipherSettings.from_env({"BOOKCIPHER_NORMALIZATION": "fuzzy"})


def test_settings_validate_numbers_and_tag() -> None:
    with pytest.raises(ValueError, match="BOOKCIPHER_SEED"):
        CipherSettings.from_env({"BOOKCIPHER_SEED": "abc"})

    with pytest.raises(ValueError, match="BOOKCIPHER_LINES_PER_PAGE"):
        CipherSettings.from_env({"BOOKCIPHER_LINES_PER_PAGE": "0"})

    with pytest.raises(ValueError, match="BOOKCIPHER_DATE_TAG"):
        CipherSettings.from_env({"BOOKCIPHER_DATE_TAG": "12:30"})

    with pytest.raises(ValueError, match="BOOKCIPHER_MODE"):
        CipherSettings.from_env({"BOOKCIPHER_MODE": "  "})


def test_settings_accept_zero_seed_and_reject_negative() -> None:
    assert CipherSettings.from_env({"BOOKCIPHER_SEED": "0"}).seed == 0

    with pytest.raises(ValueError, match="BOOKCIPHER_SEED must be >= 0"):
        CipherSettings.from_env({"BOOKCIPHER_SEED": "-1"})
