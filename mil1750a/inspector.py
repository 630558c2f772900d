"""Bit-field breakdown of 1750A words.

Splits a word into the named fields described by its
:class:`~mil1750a.config.FormatConfig` and pairs them with the decoded
value, which is handy when comparing captured telemetry against a
reference.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mil1750a.config import FormatConfig, get_format, load_config
from mil1750a.convert import decode, encode
from mil1750a.words import word_from_bytes


@dataclass
class WordFields:
    """Field breakdown of a single word."""

    dtype: str
    word: int
    bits: int
    fields: dict[str, int] = field(default_factory=dict)
    value: float = 0.0

    @property
    def hex(self) -> str:
        """Return the word as zero-padded upper-case hex."""
        return f"{self.word:0{self.bits // 4}X}"


class WordInspector:
    """Break 1750A words into their bit fields.

    Parameters
    ----------
    configs : list[FormatConfig] or None
        Format definitions to use.  When *None* the built-in defaults are
        loaded.
    """

    def __init__(self, configs: list[FormatConfig] | None = None):
        self.configs: list[FormatConfig] = configs if configs is not None else load_config()

    def format_for(self, dtype: str) -> FormatConfig:
        return get_format(dtype, self.configs)

    def inspect(self, word: int, dtype: str) -> WordFields:
        """Split *word* into fields and decode it.

        Raises
        ------
        ValueError
            If the dtype is unknown or *word* does not fit its width.
        """
        cfg = self.format_for(dtype)
        if not 0 <= word < (1 << cfg.bits):
            raise ValueError(f"Word {word:#x} does not fit in {cfg.bits} bits")
        return WordFields(
            dtype=dtype,
            word=word,
            bits=cfg.bits,
            fields={fdef.name: fdef.extract(word) for fdef in cfg.fields},
            value=decode(word, cfg.bits),
        )

    def inspect_bytes(self, data: bytes, dtype: str, endian: str | None = None) -> WordFields:
        """Inspect a word given as raw bytes.

        When *endian* is None the byte order from the format config is used.
        """
        cfg = self.format_for(dtype)
        if len(data) != cfg.size:
            raise ValueError(f"Expected {cfg.size} bytes for {dtype}, got {len(data)}")
        return self.inspect(word_from_bytes(data, endian or cfg.endian), dtype)

    def inspect_value(self, value: float, dtype: str) -> WordFields:
        """Encode *value* and inspect the resulting word."""
        cfg = self.format_for(dtype)
        return self.inspect(encode(value, cfg.bits), dtype)
