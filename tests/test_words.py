"""Tests for mil1750a.words."""

import pytest

from mil1750a.words import (
    dtype_bits,
    dtype_size,
    reorder_bytes,
    word_from_bytes,
    word_to_bytes,
    decode_value,
    encode_value,
    words_from_buffer,
    words_to_buffer,
    decode_array,
    encode_array,
)


class TestReorderBytes:
    def test_big_is_identity(self):
        data = bytes.fromhex("53BE7703")
        assert reorder_bytes(data, "big") == data

    def test_little_reverses(self):
        assert reorder_bytes(bytes.fromhex("0377BE53"), "little") == bytes.fromhex("53BE7703")

    def test_middle_swaps_within_words(self):
        assert reorder_bytes(bytes.fromhex("BE530377"), "middle") == bytes.fromhex("53BE7703")

    def test_middle_48bit(self):
        data = bytes.fromhex("A36907B5AB54")
        assert reorder_bytes(data, "middle") == bytes.fromhex("69A3B50754AB")

    def test_middle_16bit_same_as_little(self):
        data = bytes.fromhex("4463")
        assert reorder_bytes(data, "middle") == reorder_bytes(data, "little")

    def test_self_inverse(self):
        data = bytes.fromhex("69A3B50754AB")
        for endian in ("big", "little", "middle"):
            assert reorder_bytes(reorder_bytes(data, endian), endian) == data

    def test_unsupported_length(self):
        with pytest.raises(ValueError):
            reorder_bytes(b"\x00\x01\x02", "big")

    def test_unknown_endian(self):
        with pytest.raises(ValueError, match="Unknown endian"):
            reorder_bytes(b"\x00\x00", "xyz")


class TestWordBytes:
    def test_word_from_bytes(self):
        assert word_from_bytes(bytes.fromhex("53BE7703")) == 0x53BE7703
        assert word_from_bytes(bytes.fromhex("0377BE53"), "little") == 0x53BE7703

    def test_word_to_bytes(self):
        assert word_to_bytes(0x69A3B50754AB, 48) == bytes.fromhex("69A3B50754AB")
        assert word_to_bytes(0x69A3B50754AB, 48, "middle") == bytes.fromhex("A36907B5AB54")
        assert word_to_bytes(0x6344, 16, "little") == bytes.fromhex("4463")

    def test_word_too_wide(self):
        with pytest.raises(ValueError):
            word_to_bytes(0x10000, 16)

    def test_unsupported_width(self):
        with pytest.raises(ValueError, match="Unsupported word width"):
            word_to_bytes(0, 24)


class TestDtypes:
    def test_sizes(self):
        assert dtype_size("m1750a_16") == 2
        assert dtype_size("m1750a_32") == 4
        assert dtype_size("m1750a_48") == 6

    def test_bits(self):
        assert dtype_bits("m1750a_48") == 48

    def test_unsupported(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            dtype_size("float32")


class TestDecodeValue:
    def test_16bit(self):
        assert decode_value(bytes.fromhex("6344"), "m1750a_16") == 12.40625

    def test_32bit_little(self):
        assert decode_value(bytes.fromhex("01000040"), "m1750a_32", "little") == 1.0

    def test_48bit(self):
        assert decode_value(bytes.fromhex("69A3B50754AB"), "m1750a_48") == 105.63948563742451

    def test_wrong_size(self):
        with pytest.raises(ValueError, match="Expected 4 bytes"):
            decode_value(b"\x00\x00", "m1750a_32")

    def test_unsupported_dtype(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            decode_value(b"\x00\x00", "ibm_float32")


class TestEncodeValue:
    def test_32bit(self):
        assert encode_value(5.234, "m1750a_32") == bytes.fromhex("53BE7703")
        assert encode_value(5.234, "m1750a_32", "little") == bytes.fromhex("0377BE53")

    def test_16bit_middle(self):
        assert encode_value(-12.4, "m1750a_16", "middle") == bytes.fromhex("C49C")

    def test_48bit_zero(self):
        assert encode_value(0.0, "m1750a_48") == b"\x00" * 6


class TestBuffers:
    def test_words_from_buffer_32(self, words32_bytes):
        assert words_from_buffer(words32_bytes, "m1750a_32") == [
            0x53BE7703, 0x40000001, 0x997AE105,
        ]

    def test_words_from_buffer_48(self, words48_bytes):
        assert words_from_buffer(words48_bytes, "m1750a_48") == [
            0x69A3B50754AB, 0x6487ED025111,
        ]

    def test_words_from_buffer_little(self):
        data = bytes.fromhex("0377BE53" "01000040")
        assert words_from_buffer(data, "m1750a_32", "little") == [0x53BE7703, 0x40000001]

    def test_words_from_buffer_middle(self):
        data = bytes.fromhex("A36907B5AB54")
        assert words_from_buffer(data, "m1750a_48", "middle") == [0x69A3B50754AB]

    def test_empty(self):
        assert words_from_buffer(b"", "m1750a_16") == []
        assert words_to_buffer([], "m1750a_16") == b""

    def test_misaligned_raises(self):
        with pytest.raises(ValueError, match="not a multiple"):
            words_from_buffer(b"\x00" * 5, "m1750a_32")

    def test_words_to_buffer(self, words48_bytes):
        assert words_to_buffer([0x69A3B50754AB, 0x6487ED025111], "m1750a_48") == words48_bytes

    def test_words_to_buffer_per_endian(self):
        words = [0x53BE7703, 0x997AE105]
        for endian in ("big", "little", "middle"):
            data = words_to_buffer(words, "m1750a_32", endian)
            assert words_from_buffer(data, "m1750a_32", endian) == words
        assert words_to_buffer(words, "m1750a_32", "middle") == bytes.fromhex("BE530377" "7A9905E1")

    def test_words_to_buffer_rejects_wide_word(self):
        with pytest.raises(ValueError):
            words_to_buffer([1 << 16], "m1750a_16")

    def test_words_to_buffer_rejects_non_int_word(self):
        with pytest.raises(TypeError):
            words_to_buffer([1.5], "m1750a_16")
        with pytest.raises(TypeError):
            words_to_buffer([0x6344, 12.0], "m1750a_16")

    def test_unknown_endian(self):
        with pytest.raises(ValueError, match="Unknown endian"):
            words_from_buffer(b"\x00\x00", "m1750a_16", "pdp")


class TestArrays:
    def test_decode_array(self, words32_bytes):
        values = decode_array(words32_bytes, "m1750a_32")
        assert len(values) == 3
        assert values[0] == pytest.approx(5.234, rel=1e-6)
        assert values[1] == 1.0
        assert values[2] == pytest.approx(-25.63, rel=1e-6)

    def test_encode_array(self, words32_bytes):
        assert encode_array([5.234, 1.0, -25.63], "m1750a_32") == words32_bytes

    def test_encode_array_16(self):
        assert encode_array([12.4, -12.4], "m1750a_16") == bytes.fromhex("6344" "9CC4")

    def test_decode_array_48_middle(self):
        data = encode_array([1.0, 105.639485637361], "m1750a_48", "middle")
        assert decode_array(data, "m1750a_48", "middle") == [1.0, 105.63948563742451]

    def test_unsupported_dtype(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            decode_array(b"\x00", "complex128")
