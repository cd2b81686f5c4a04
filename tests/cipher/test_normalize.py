from __future__ import annotations

import pytest

from bookcipher.cipher.normalize import NormalizationPolicy, clean_display_word, normalize_key


STRICT = NormalizationPolicy.STRICT
FOLDED = NormalizationPolicy.ACCENT_INSENSITIVE


def test_accent_insensitive_folds_diacritics_case_and_punctuation() -> None:
    assert normalize_key("Vovó!", FOLDED) == "vovo"
    assert normalize_key("Vovó!", FOLDED) == normalize_key("vovo", FOLDED)
    assert normalize_key("Maçã", FOLDED) == "maca"


def test_strict_keeps_accented_letters_distinct() -> None:
    assert normalize_key("Vovó!", STRICT) == "vovó"
    assert normalize_key("Vovó!", STRICT) != normalize_key("vovo", STRICT)
    assert normalize_key("CÃO.", STRICT) == "cão"


def test_default_policy_is_accent_insensitive() -> None:
    assert normalize_key("Coração") == "coracao"


def test_punctuation_only_tokens_normalize_to_empty_key() -> None:
    assert normalize_key("!!!", FOLDED) == ""
    assert normalize_key("—", STRICT) == ""
    assert normalize_key("_", STRICT) == ""


def test_inner_punctuation_and_digits() -> None:
    assert normalize_key("d'água", FOLDED) == "dagua"
    assert normalize_key("R2-D2", STRICT) == "r2d2"


def test_normalization_is_deterministic_and_idempotent() -> None:
    for policy in NormalizationPolicy:
        once = normalize_key("  Ação, JÁ! ", policy)
        assert once == normalize_key("  Ação, JÁ! ", policy)
        assert normalize_key(once, policy) == once


def test_clean_display_word_trims_only_boundaries() -> None:
    assert clean_display_word("«Olá,»") == "Olá"
    assert clean_display_word("muro.") == "muro"
    assert clean_display_word("d'água!") == "d'água"
    assert clean_display_word("...") == ""


def test_policy_parse_accepts_values_and_rejects_unknown() -> None:
    assert NormalizationPolicy.parse("STRICT") is STRICT
    assert NormalizationPolicy.parse("accent_insensitive") is FOLDED

    with pytest.raises(ValueError, match="loose"):
        NormalizationPolicy.parse("loose")
