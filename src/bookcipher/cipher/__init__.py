"""Book cipher engine: normalization, indexing, encoding and decoding."""

from .decoder import decode_message
from .encoder import encode_message
from .errors import ModeMismatchError
from .indexer import build_index
from .models import BookIndex, BookLocation, DecodeResult, EncodeResult
from .modes import CipherMode
from .normalize import NormalizationPolicy, normalize_key

__all__ = [
    "BookIndex",
    "BookLocation",
    "CipherMode",
    "DecodeResult",
    "EncodeResult",
    "ModeMismatchError",
    "NormalizationPolicy",
    "build_index",
    "decode_message",
    "encode_message",
    "normalize_key",
]
