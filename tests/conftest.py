"""Shared test fixtures for mil1750a."""

import pytest


@pytest.fixture
def words32_bytes():
    """Three 32-bit words in native 1750A (big-endian) order."""
    # 5.234, 1.0, -25.63
    return bytes.fromhex("53BE7703" "40000001" "997AE105")


@pytest.fixture
def words32_file(tmp_path, words32_bytes):
    """Write the 32-bit words to a temp file and return its path."""
    p = tmp_path / "telemetry.bin"
    p.write_bytes(words32_bytes)
    return p


@pytest.fixture
def words48_bytes():
    """Two 48-bit words in native 1750A order."""
    # 105.639485637361, pi
    return bytes.fromhex("69A3B50754AB" "6487ED025111")


@pytest.fixture
def layout_yaml(tmp_path):
    """A custom layout config describing only the 16-bit format."""
    text = """\
formats:
  - name: "Short"
    dtype: m1750a_16
    bits: 16
    fraction_bits: 9
    endian: middle
    fields:
      - name: mant
        lsb: 6
        width: 10
        signed: true
      - name: exp
        lsb: 0
        width: 6
        signed: true
"""
    p = tmp_path / "layout.yaml"
    p.write_text(text)
    return p
