# tests/test_benchmark.py
"""Performance regression tests. Run with: ``pytest -m benchmark``."""

import time

import pytest

from utf8clen import classify

pytestmark = pytest.mark.benchmark


def _walk(data: bytes) -> int:
    offset = 0
    count = 0
    while offset < len(data):
        offset += classify(data, offset).advance
        count += 1
    return count


def test_ascii_classification_speed():
    data = b"Hello world, this is a plain ASCII text." * 100
    start = time.perf_counter()
    for _ in range(20):
        _walk(data)
    elapsed = time.perf_counter() - start
    per_byte_us = elapsed / (20 * len(data)) * 1e6
    assert per_byte_us < 5.0, f"ASCII classification too slow: {per_byte_us:.2f}us/byte"


def test_multibyte_classification_speed():
    data = "Héllo wörld 世界 😂".encode() * 100
    start = time.perf_counter()
    for _ in range(20):
        _walk(data)
    elapsed = time.perf_counter() - start
    per_byte_us = elapsed / (20 * len(data)) * 1e6
    assert per_byte_us < 5.0, f"UTF-8 classification too slow: {per_byte_us:.2f}us/byte"


def test_invalid_classification_speed():
    data = b"\x80\xff\xed\xa0\x80\xc3" * 500
    start = time.perf_counter()
    for _ in range(20):
        _walk(data)
    elapsed = time.perf_counter() - start
    per_byte_us = elapsed / (20 * len(data)) * 1e6
    assert per_byte_us < 5.0, f"Illegal run classification too slow: {per_byte_us:.2f}us/byte"
