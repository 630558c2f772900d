"""Byte-level codecs for 1750A words.

The 1750A is a 16-bit word-addressed machine: a 32- or 48-bit value occupies
two or three consecutive 16-bit words, most significant word first, and each
word is stored big-endian.  Data captured on other hosts often arrives fully
byte-reversed (``"little"``) or with each 16-bit word byte-swapped but the
word order intact (``"middle"``).
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from mil1750a.convert import DECODERS, ENCODERS


# dtype name -> word width in bits
_DTYPE_BITS = {
    "m1750a_16": 16,
    "m1750a_32": 32,
    "m1750a_48": 48,
}

_ENDIANS = ("big", "little", "middle")

# numpy dtype for a single 16-bit word in each byte order
_NP_WORD = {
    "big": ">u2",
    "little": "<u2",
    "middle": "<u2",
}


def dtype_bits(dtype: str) -> int:
    """Return the word width in bits for a 1750A dtype name."""
    bits = _DTYPE_BITS.get(dtype)
    if bits is None:
        raise ValueError(f"Unsupported dtype: {dtype!r}")
    return bits


def dtype_size(dtype: str) -> int:
    """Return the element size in bytes for a 1750A dtype name."""
    return dtype_bits(dtype) // 8


def _check_endian(endian: str) -> None:
    if endian not in _ENDIANS:
        raise ValueError(f"Unknown endian: {endian!r}")


# ---------------------------------------------------------------------------
# Single values
# ---------------------------------------------------------------------------

def reorder_bytes(data: bytes, endian: str) -> bytes:
    """Re-order the bytes of one element to and from 1750A (big-endian) order.

    Parameters
    ----------
    data : bytes
        Raw bytes of a single 16-, 32- or 48-bit element.
    endian : str
        One of ``"big"``, ``"little"`` or ``"middle"``.

        ``"middle"`` swaps the two bytes within every 16-bit word and keeps
        the word order, so 16-bit values are treated the same as
        ``"little"``.

    Returns
    -------
    bytes
        Bytes in big-endian order.  Applying the same re-ordering to the
        result restores the input.
    """
    _check_endian(endian)
    if len(data) not in (2, 4, 6):
        raise ValueError(f"Expected 2, 4 or 6 bytes, got {len(data)}")
    if endian == "big":
        return bytes(data)
    if endian == "little":
        return bytes(data[::-1])
    swapped = bytearray(len(data))
    swapped[0::2] = data[1::2]
    swapped[1::2] = data[0::2]
    return bytes(swapped)


def word_from_bytes(data: bytes, endian: str = "big") -> int:
    """Assemble a word from 2, 4 or 6 bytes."""
    return int.from_bytes(reorder_bytes(data, endian), "big")


def word_to_bytes(word: int, width: int, endian: str = "big") -> bytes:
    """Serialise a *width*-bit word to bytes in the given order."""
    if width not in (16, 32, 48):
        raise ValueError(f"Unsupported word width: {width!r}")
    if not 0 <= word < (1 << width):
        raise ValueError(f"Word {word:#x} does not fit in {width} bits")
    return reorder_bytes(word.to_bytes(width // 8, "big"), endian)


def decode_value(data: bytes, dtype: str, endian: str = "big") -> float:
    """Decode a single 1750A floating-point value from bytes.

    Parameters
    ----------
    data : bytes
        Raw bytes of the value.
    dtype : str
        ``"m1750a_16"``, ``"m1750a_32"`` or ``"m1750a_48"``.
    endian : str
        ``"big"``, ``"little"`` or ``"middle"``.

    Returns
    -------
    float
        Decoded value.
    """
    bits = dtype_bits(dtype)
    if len(data) != bits // 8:
        raise ValueError(f"Expected {bits // 8} bytes for {dtype}, got {len(data)}")
    return DECODERS[bits](word_from_bytes(data, endian))


def encode_value(value: float, dtype: str, endian: str = "big") -> bytes:
    """Encode a single value as 1750A bytes."""
    bits = dtype_bits(dtype)
    return word_to_bytes(ENCODERS[bits](value), bits, endian)


# ---------------------------------------------------------------------------
# Packed arrays
# ---------------------------------------------------------------------------

def words_from_buffer(data: bytes, dtype: str, endian: str = "big") -> list[int]:
    """Split a packed buffer into 1750A words.

    The buffer is viewed as 16-bit words with numpy and each group of one,
    two or three words is combined most significant word first.
    """
    bits = dtype_bits(dtype)
    _check_endian(endian)
    elem_size = bits // 8
    if len(data) % elem_size != 0:
        raise ValueError(
            f"Data length {len(data)} is not a multiple of element size {elem_size}"
        )

    per_elem = bits // 16
    parts = np.frombuffer(data, dtype=np.dtype(_NP_WORD[endian])).reshape(-1, per_elem)
    if endian == "little":
        parts = parts[:, ::-1]

    words = np.zeros(parts.shape[0], dtype=np.uint64)
    for column in range(per_elem):
        words = (words << np.uint64(16)) | parts[:, column].astype(np.uint64)
    return [int(w) for w in words]


def words_to_buffer(words: Iterable[int], dtype: str, endian: str = "big") -> bytes:
    """Pack 1750A words into a contiguous buffer."""
    bits = dtype_bits(dtype)
    _check_endian(endian)
    values = list(words)
    for word in values:
        if not isinstance(word, int):
            raise TypeError(f"Expected an int word, got {type(word).__name__}")
        if not 0 <= word < (1 << bits):
            raise ValueError(f"Word {word:#x} does not fit in {bits} bits")

    per_elem = bits // 16
    arr = np.asarray(values, dtype=np.uint64).reshape(-1)
    shifts = np.array([16 * (per_elem - 1 - i) for i in range(per_elem)], dtype=np.uint64)
    parts = ((arr[:, None] >> shifts) & np.uint64(0xFFFF)).astype(np.uint16)
    if endian == "little":
        parts = parts[:, ::-1]
    return parts.astype(np.dtype(_NP_WORD[endian])).tobytes()


def decode_array(data: bytes, dtype: str, endian: str = "big") -> list[float]:
    """Decode a contiguous array of 1750A values from bytes.

    Parameters
    ----------
    data : bytes
        Raw bytes; the length must be a multiple of the element size.
    dtype : str
        1750A dtype name.
    endian : str
        Byte order.

    Returns
    -------
    list[float]
        Decoded values.
    """
    decoder = DECODERS[dtype_bits(dtype)]
    return [decoder(w) for w in words_from_buffer(data, dtype, endian)]


def encode_array(values: Iterable[float], dtype: str, endian: str = "big") -> bytes:
    """Encode a sequence of floats as a packed 1750A buffer."""
    encoder = ENCODERS[dtype_bits(dtype)]
    return words_to_buffer([encoder(v) for v in values], dtype, endian)
