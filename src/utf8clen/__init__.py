"""UTF-8 character length classification (Unicode Table 3-7)."""

from __future__ import annotations

from utf8clen.classifier import classify
from utf8clen.enums import OutcomeKind
from utf8clen.outcome import (
    REPLACEMENT_CHARACTER,
    Invalid,
    Outcome,
    ParameterError,
    Valid,
)

__version__ = "1.0.0"
__all__ = [
    "REPLACEMENT_CHARACTER",
    "Invalid",
    "Outcome",
    "OutcomeKind",
    "ParameterError",
    "Valid",
    "classify",
    "utf8clen",
]


def utf8clen(
    data: bytes | bytearray | memoryview | None, offset: int = 0
) -> tuple[int, int]:
    """Return the ``(length, illegal_length)`` pair for the character at *offset*.

    Exactly one member of the pair is non-zero: ``(n, 0)`` for a well-formed
    character of *n* bytes, ``(0, k)`` for an illegal run of *k* bytes.

    :raises ValueError: If *data* is ``None`` or *offset* is outside it.
    :raises TypeError: If *data* is not bytes-like or *offset* is not an
        integer.
    """
    return classify(data, offset).to_tuple()
