from __future__ import annotations

import array

import pytest

from utf8clen._utils import _as_byte_view, _validate_max_bytes, _validate_offset


def test_bytes_and_bytearray_pass_through():
    data = b"abc"
    assert _as_byte_view(data) is data
    buf = bytearray(b"abc")
    assert _as_byte_view(buf) is buf


def test_array_buffer_accepted():
    view = _as_byte_view(array.array("B", [0xC3, 0xA9]))
    assert view[0] == 0xC3
    assert len(view) == 2


def test_wide_buffer_is_cast_to_bytes():
    view = _as_byte_view(array.array("H", [0x4142]))
    assert len(view) == 2


def test_signed_buffer_reads_unsigned_bytes():
    view = _as_byte_view(memoryview(b"\xff").cast("b"))
    assert view[0] == 0xFF


@pytest.mark.parametrize("data", ["abc", 123, [0xC3, 0xA9]])
def test_non_bytes_like_rejected(data: object):
    with pytest.raises(TypeError, match="expected a bytes-like object"):
        _as_byte_view(data)


def test_validate_offset():
    _validate_offset(0)
    _validate_offset(-5)
    with pytest.raises(TypeError):
        _validate_offset(False)


@pytest.mark.parametrize("max_bytes", [0, -1, True, 1.5])
def test_validate_max_bytes_rejects(max_bytes: object):
    with pytest.raises(ValueError, match="max_bytes must be a positive integer"):
        _validate_max_bytes(max_bytes)  # type: ignore[arg-type]
