"""Well-formed UTF-8 byte sequences.

The Unicode Standard, Version 15.0, Chapter 3 (Conformance), Table 3-7:

    ==================  =========  =========  =========  =========
    Code points         1st byte   2nd byte   3rd byte   4th byte
    ==================  =========  =========  =========  =========
    U+0000..U+007F      00..7F
    U+0080..U+07FF      C2..DF     80..BF
    U+0800..U+0FFF      E0         A0..BF     80..BF
    U+1000..U+CFFF      E1..EC     80..BF     80..BF
    U+D000..U+D7FF      ED         80..9F     80..BF
    U+E000..U+FFFF      EE..EF     80..BF     80..BF
    U+10000..U+3FFFF    F0         90..BF     80..BF     80..BF
    U+40000..U+FFFFF    F1..F3     80..BF     80..BF     80..BF
    U+100000..U+10FFFF  F4         80..8F     80..BF     80..BF
    ==================  =========  =========  =========  =========

Only the second byte ever has a range narrower than 80..BF.  The narrowed
ranges exclude overlong forms (E0, F0), UTF-16 surrogates (ED) and code
points above U+10FFFF (F4).
"""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True, slots=True)
class LeadClass:
    """One multi-byte row of Table 3-7, keyed by its lead byte range."""

    first: int
    last: int
    length: int
    second_min: int = 0x80
    second_max: int = 0xBF

    def matches(self, byte: int) -> bool:
        """Return True if *byte* is a lead byte of this row."""
        return self.first <= byte <= self.last

    def accepts_second(self, byte: int) -> bool:
        """Return True if *byte* is allowed in the second position."""
        return self.second_min <= byte <= self.second_max


TABLE_3_7: tuple[LeadClass, ...] = (
    LeadClass(0xC2, 0xDF, 2),
    LeadClass(0xE0, 0xE0, 3, second_min=0xA0),
    LeadClass(0xE1, 0xEC, 3),
    LeadClass(0xED, 0xED, 3, second_max=0x9F),
    LeadClass(0xEE, 0xEF, 3),
    LeadClass(0xF0, 0xF0, 4, second_min=0x90),
    LeadClass(0xF1, 0xF3, 4),
    LeadClass(0xF4, 0xF4, 4, second_max=0x8F),
)


def _build_lookup() -> tuple[LeadClass | None, ...]:
    lookup: list[LeadClass | None] = [None] * 256
    for row in TABLE_3_7:
        for byte in range(row.first, row.last + 1):
            lookup[byte] = row
    return tuple(lookup)


# Indexed by lead byte; built once at import and never mutated.
_LEAD_CLASSES: tuple[LeadClass | None, ...] = _build_lookup()

# 00-7F, C2-DF, E0-EF, F0-F4
_IS_LEAD: tuple[bool, ...] = tuple(
    byte <= 0x7F or _LEAD_CLASSES[byte] is not None for byte in range(256)
)


def is_tail(byte: int) -> bool:
    """Return True if *byte* has the continuation bit pattern ``10xxxxxx``."""
    return (byte & 0xC0) == 0x80


def is_lead(byte: int) -> bool:
    """Return True if *byte* can start a character (ASCII or a Table 3-7 lead)."""
    return _IS_LEAD[byte]


def lead_class_for(byte: int) -> LeadClass | None:
    """Return the multi-byte row led by *byte*, or ``None``.

    ASCII bytes return ``None`` as well; they form a sequence on their own.
    """
    return _LEAD_CLASSES[byte]
