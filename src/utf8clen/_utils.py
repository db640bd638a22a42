"""Internal shared utilities for utf8clen."""

from __future__ import annotations

#: Longest well-formed UTF-8 sequence, in bytes.
MAX_SEQUENCE_LENGTH: int = 4

#: Default maximum number of bytes the CLI reads from each input.
DEFAULT_MAX_BYTES: int = 200_000


def _as_byte_view(data: object) -> bytes | bytearray | memoryview:
    """Return *data* as something indexable by byte, raising TypeError otherwise."""
    if isinstance(data, (bytes, bytearray)):
        return data
    if isinstance(data, str):
        msg = "expected a bytes-like object, not str"
        raise TypeError(msg)
    try:
        view = memoryview(data)  # type: ignore[arg-type]
    except TypeError:
        msg = f"expected a bytes-like object, not {type(data).__name__}"
        raise TypeError(msg) from None
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def _validate_offset(offset: int) -> None:
    """Raise TypeError if *offset* is not an integer."""
    if isinstance(offset, bool) or not isinstance(offset, int):
        msg = "offset must be an integer"
        raise TypeError(msg)


def _validate_max_bytes(max_bytes: int) -> None:
    """Raise ValueError if *max_bytes* is not a positive integer."""
    if isinstance(max_bytes, bool) or not isinstance(max_bytes, int) or max_bytes < 1:
        msg = "max_bytes must be a positive integer"
        raise ValueError(msg)
