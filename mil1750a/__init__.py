"""mil1750a - Conversion between native floats and MIL-STD-1750A floating-point words."""

__version__ = "0.1.0"

from mil1750a.convert import (
    encode16,
    encode32,
    encode48,
    decode16,
    decode32,
    decode48,
    encode,
    decode,
)
from mil1750a.config import FieldDefinition, FormatConfig, get_format, load_config
from mil1750a.inspector import WordFields, WordInspector
from mil1750a.words import (
    reorder_bytes,
    word_from_bytes,
    word_to_bytes,
    decode_value,
    encode_value,
    decode_array,
    encode_array,
    words_from_buffer,
    words_to_buffer,
)

__all__ = [
    "encode16",
    "encode32",
    "encode48",
    "decode16",
    "decode32",
    "decode48",
    "encode",
    "decode",
    "FieldDefinition",
    "FormatConfig",
    "get_format",
    "load_config",
    "WordFields",
    "WordInspector",
    "reorder_bytes",
    "word_from_bytes",
    "word_to_bytes",
    "decode_value",
    "encode_value",
    "decode_array",
    "encode_array",
    "words_from_buffer",
    "words_to_buffer",
]
