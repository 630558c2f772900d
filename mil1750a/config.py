"""Configuration system for 1750A word layouts.

Loads YAML-based format definitions that describe each word width: its
dtype name, total bit width, mantissa fraction bits, default byte order and
the bit fields that make up a word.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


@dataclass
class FieldDefinition:
    """A single bit field within a word."""

    name: str
    lsb: int
    width: int
    signed: bool = False
    description: str = ""

    @property
    def msb(self) -> int:
        """Return the position of the most significant bit of the field."""
        return self.lsb + self.width - 1

    @property
    def mask(self) -> int:
        """Return the field mask, shifted into place within the word."""
        return ((1 << self.width) - 1) << self.lsb

    def extract(self, word: int) -> int:
        """Extract this field from *word*, sign-extending when ``signed``."""
        raw = (word >> self.lsb) & ((1 << self.width) - 1)
        if self.signed and raw & (1 << (self.width - 1)):
            return raw - (1 << self.width)
        return raw


@dataclass
class FormatConfig:
    """Complete definition of a 1750A word format."""

    name: str
    dtype: str
    bits: int
    fraction_bits: int
    fields: list[FieldDefinition] = field(default_factory=list)
    endian: str = "big"  # "big", "little", or "middle"
    description: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def size(self) -> int:
        """Return the size of one word in bytes."""
        return self.bits // 8

    def get_field(self, name: str) -> FieldDefinition:
        """Return the field called *name*."""
        for fdef in self.fields:
            if fdef.name == name:
                return fdef
        raise KeyError(f"{self.dtype} has no field {name!r}")


def _parse_field(data: dict) -> FieldDefinition:
    """Build a :class:`FieldDefinition` from a dictionary."""
    return FieldDefinition(
        name=data["name"],
        lsb=data["lsb"],
        width=data["width"],
        signed=bool(data.get("signed", False)),
        description=data.get("description", ""),
    )


def _parse_format(data: dict) -> FormatConfig:
    """Build a :class:`FormatConfig` from a dictionary."""
    fields = [_parse_field(f) for f in data.get("fields", [])]
    return FormatConfig(
        name=data["name"],
        dtype=data["dtype"],
        bits=data["bits"],
        fraction_bits=data["fraction_bits"],
        fields=fields,
        endian=data.get("endian", "big"),
        description=data.get("description", ""),
        metadata=data.get("metadata", {}),
    )


def load_config(path: str | Path | None = None) -> list[FormatConfig]:
    """Load format configurations from a YAML file.

    Parameters
    ----------
    path : str or Path, optional
        Path to a YAML configuration file.  When *None* the built-in
        ``formats.yaml`` shipped with the package is used.

    Returns
    -------
    list[FormatConfig]
        Parsed format definitions.
    """
    if path is None:
        path = Path(__file__).parent / "configs" / "formats.yaml"
    else:
        path = Path(path)

    with open(path, "r") as fh:
        data = yaml.safe_load(fh) or {}

    formats = data.get("formats", [])
    return [_parse_format(f) for f in formats]


def get_format(dtype: str, configs: list[FormatConfig] | None = None) -> FormatConfig:
    """Look up the format definition for *dtype*."""
    if configs is None:
        configs = load_config()
    for cfg in configs:
        if cfg.dtype == dtype:
            return cfg
    raise ValueError(f"Unsupported dtype: {dtype!r}")
