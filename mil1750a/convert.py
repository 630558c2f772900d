"""Converters between native floats and MIL-STD-1750A floating-point words.

Implements the 16-bit (short), 32-bit (standard) and 48-bit (extended)
1750A floating-point formats.  Every word is a two's-complement mantissa
followed by a two's-complement power-of-two exponent:

  - 16-bit: mantissa bits 15-6 (10 bits), exponent bits 5-0 (6 bits)
  - 32-bit: mantissa bits 31-8 (24 bits), exponent bits 7-0 (8 bits)
  - 48-bit: mantissa bits 47-24 and 15-0 (40 bits), exponent bits 23-16

Words are plain Python ints in ``range(0, 2**width)``.
"""

from __future__ import annotations

import math
import struct


# ---------------------------------------------------------------------------
# Native precision helpers
# ---------------------------------------------------------------------------

# Smallest magnitude that rounds to infinity when narrowed to binary16
_F16_OVERFLOW = 65520.0


def _narrow(value: float, fmt: str, name: str) -> float:
    """Round *value* to the IEEE precision of struct format *fmt*."""
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Cannot encode non-finite value {value!r}")
    try:
        return struct.unpack(fmt, struct.pack(fmt, value))[0]
    except OverflowError as exc:
        raise ValueError(f"{value!r} is out of range for a {name} float") from exc


def _to_float16(value: float) -> float:
    return _narrow(value, "<e", "16-bit")


def _to_float32(value: float) -> float:
    return _narrow(value, "<f", "32-bit")


def _to_float64(value: float) -> float:
    return _narrow(value, "<d", "64-bit")


def _ceil_log2(value: float) -> int:
    """Return ``ceil(log2(abs(value)))`` exactly for a non-zero float."""
    mantissa, exponent = math.frexp(abs(value))
    # frexp gives mantissa in [0.5, 1); exactly 0.5 means a power of two
    if mantissa == 0.5:
        return exponent - 1
    return exponent


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _sign_extend(value: int, bits: int) -> int:
    """Interpret the low *bits* of *value* as a two's-complement integer."""
    if value & (1 << (bits - 1)):
        return value - (1 << bits)
    return value


def _check_word(word: int, bits: int) -> int:
    if not isinstance(word, int):
        raise TypeError(f"Expected an int word, got {type(word).__name__}")
    if not 0 <= word < (1 << bits):
        raise ValueError(f"Word {word:#x} does not fit in {bits} bits")
    return word


def _is_negative(value: float) -> bool:
    return math.copysign(1.0, value) < 0


# ---------------------------------------------------------------------------
# 16-bit (short) floating point
# ---------------------------------------------------------------------------

def encode16(value: float) -> int:
    """Encode *value* as a 16-bit 1750A word.

    The input is first rounded to IEEE binary16.  There is no separate sign
    bit: the sign lives in the 10-bit two's-complement mantissa.

    Raises ``ValueError`` for non-finite values and values outside the
    binary16 range.
    """
    value = _to_float16(value)
    if value == 0.0:
        return 0

    exponent = _ceil_log2(value)
    mantissa = _round_half_away(math.ldexp(value, 9 - exponent))

    # Boundary check.  A 10-bit mantissa never reaches 2**15, so unlike the
    # wider formats a rounded-up 2**9 is packed as is (1.0 -> 0x8000).
    if mantissa == 32768:
        mantissa //= 2
        exponent += 1

    return ((mantissa & 0x3FF) << 6) | (exponent & 0x3F)


def decode16(word: int) -> float:
    """Decode a 16-bit 1750A word to a float rounded to binary16.

    The mantissa field is read unsigned, so words with bit 15 set decode to
    positive values.  Results beyond the binary16 range become infinity.
    """
    _check_word(word, 16)
    mantissa = (word >> 6) & 0x3FF
    exponent = _sign_extend(word & 0x3F, 6)

    value = math.ldexp(mantissa, exponent - 9)
    if value >= _F16_OVERFLOW:
        return math.inf
    return struct.unpack("<e", struct.pack("<e", value))[0]


# ---------------------------------------------------------------------------
# 32-bit (standard) floating point
# ---------------------------------------------------------------------------

def encode32(value: float) -> int:
    """Encode *value* as a 32-bit 1750A word.

    The input is first rounded to IEEE binary32.  Bit 31 is also asserted
    for negative inputs so that a negative value whose mantissa rounds to
    zero keeps its sign.
    """
    value = _to_float32(value)
    if value == 0.0:
        return 0

    exponent = _ceil_log2(value)
    mantissa = _round_half_away(math.ldexp(value, 23 - exponent))

    # Boundary check: rounding carried into the next power of two
    if mantissa == 8388608:
        mantissa //= 2
        exponent += 1

    word = (mantissa & 0xFFFFFF) << 8
    word |= exponent & 0xFF
    if _is_negative(value):
        word |= 0x80000000
    return word


def decode32(word: int) -> float:
    """Decode a 32-bit 1750A word to a float rounded to binary32."""
    _check_word(word, 32)
    mantissa = _sign_extend((word >> 8) & 0xFFFFFF, 24)
    exponent = _sign_extend(word & 0xFF, 8)

    value = math.ldexp(mantissa, exponent - 23)
    return struct.unpack("<f", struct.pack("<f", value))[0]


# ---------------------------------------------------------------------------
# 48-bit (extended) floating point
# ---------------------------------------------------------------------------

def encode48(value: float) -> int:
    """Encode *value* as a 48-bit 1750A word.

    The 40-bit mantissa is split around the exponent: mantissa bits 39-16
    go to word bits 47-24 and mantissa bits 15-0 to word bits 15-0.
    """
    value = _to_float64(value)
    if value == 0.0:
        return 0

    exponent = _ceil_log2(value)
    mantissa = _round_half_away(math.ldexp(value, 39 - exponent))

    # Boundary check
    if mantissa == 549755813888:
        mantissa //= 2
        exponent += 1

    mantissa_hi = (mantissa >> 16) & 0xFFFFFF
    mantissa_lo = mantissa & 0xFFFF

    word = mantissa_hi << 24
    word |= (exponent & 0xFF) << 16
    word |= mantissa_lo
    if _is_negative(value):
        word |= 0x800000000000
    return word


def decode48(word: int) -> float:
    """Decode a 48-bit 1750A word to a float.

    Both mantissa halves are read unsigned and bit 47 is not treated as a
    sign, so only non-negative words decode faithfully.
    """
    _check_word(word, 48)
    mantissa_hi = (word >> 24) & 0xFFFFFF
    mantissa_lo = word & 0xFFFF
    exponent = _sign_extend((word >> 16) & 0xFF, 8)

    return math.ldexp(mantissa_hi, exponent - 23) + math.ldexp(mantissa_lo, exponent - 39)


# ---------------------------------------------------------------------------
# Dispatch by width
# ---------------------------------------------------------------------------

ENCODERS = {16: encode16, 32: encode32, 48: encode48}
DECODERS = {16: decode16, 32: decode32, 48: decode48}


def encode(value: float, width: int) -> int:
    """Encode *value* as a 1750A word of *width* bits (16, 32 or 48)."""
    encoder = ENCODERS.get(width)
    if encoder is None:
        raise ValueError(f"Unsupported word width: {width!r}")
    return encoder(value)


def decode(word: int, width: int) -> float:
    """Decode a 1750A word of *width* bits (16, 32 or 48)."""
    decoder = DECODERS.get(width)
    if decoder is None:
        raise ValueError(f"Unsupported word width: {width!r}")
    return decoder(word)
