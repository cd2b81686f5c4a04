from __future__ import annotations

import random

import pytest

from bookcipher.cipher.decoder import decode_message
from bookcipher.cipher.encoder import encode_message
from bookcipher.cipher.indexer import build_index
from bookcipher.cipher.modes import CipherMode
from bookcipher.cipher.normalize import NormalizationPolicy


UNIQUE_BOOK = "Alpha beta gamma\ndelta epsilon\n\nzeta eta theta"
WORD_MODES = [CipherMode.LINE_WORD, CipherMode.PARAGRAPH_LINE_WORD, CipherMode.DATE_PARAGRAPH_LINE_WORD]


@pytest.mark.parametrize("mode", WORD_MODES)
@pytest.mark.parametrize("policy", list(NormalizationPolicy))
def test_word_modes_round_trip_on_unique_book(mode: CipherMode, policy: NormalizationPolicy) -> None:
    message = "beta Zeta, delta theta!"
    index = build_index(UNIQUE_BOOK, mode, policy=policy)

    encoded = encode_message(message, index, mode, tag="2024-05-01", rng=random.Random(0))
    decoded = decode_message(encoded.text, UNIQUE_BOOK, mode, policy=policy)

    assert encoded.success is True
    assert decoded.text == "BETA ZETA DELTA THETA"


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_char_mode_round_trip_with_homophones(seed: int) -> None:
    mode = CipherMode.LINE_WORD_CHAR
    index = build_index(UNIQUE_BOOK, mode)

    encoded = encode_message("bet zeta", index, mode, rng=random.Random(seed))
    decoded = decode_message(encoded.text, UNIQUE_BOOK, mode)

    assert encoded.success is True
    assert decoded.text == "BET ZETA"


def test_round_trip_keeps_unencodable_tokens_readable() -> None:
    mode = CipherMode.PARAGRAPH_LINE_WORD
    index = build_index(UNIQUE_BOOK, mode)

    encoded = encode_message("alpha omega", index, mode)
    decoded = decode_message(encoded.text, UNIQUE_BOOK, mode)

    assert encoded.missing_tokens == ("omega",)
    assert decoded.text == "ALPHA omega"


def test_accent_insensitive_round_trip_recovers_book_spelling() -> None:
    book = "O gato subiu no muro.\n\nO cão correu."
    mode = CipherMode.PARAGRAPH_LINE_WORD
    index = build_index(book, mode)

    encoded = encode_message("cao", index, mode)

    assert encoded.text == "2:1:2"
    assert decode_message(encoded.text, book, mode).text == "CÃO"


def test_char_mode_round_trip_keeps_colons_and_slashes() -> None:
    mode = CipherMode.LINE_WORD_CHAR
    index = build_index(UNIQUE_BOOK, mode)

    encoded = encode_message("a:b / z!", index, mode, rng=random.Random(4))
    decoded = decode_message(encoded.text, UNIQUE_BOOK, mode)

    assert decoded.text == "A:B / Z!"
    assert decoded.unresolved == 0
