"""Classify the UTF-8 character at a byte offset.

The byte at the offset either starts a well-formed sequence from Table 3-7
(see :mod:`utf8clen.table`) or begins an illegal run.  A zero byte and the
end of the buffer are both treated as "no further input".
"""

from __future__ import annotations

import logging

from utf8clen._utils import _as_byte_view, _validate_offset
from utf8clen.outcome import Invalid, Outcome, ParameterError, Valid
from utf8clen.table import LeadClass, is_lead, is_tail, lead_class_for

logger = logging.getLogger(__name__)

_VALID: dict[int, Valid] = {n: Valid(n) for n in range(1, 5)}


def _is_well_formed(
    data: bytes | bytearray | memoryview, start: int, end: int, row: LeadClass
) -> bool:
    """Check the continuation bytes that follow the lead byte at *start*."""
    if start + row.length > end:
        return False
    if not row.accepts_second(data[start + 1]):
        return False
    return all(is_tail(data[pos]) for pos in range(start + 2, start + row.length))


def _illegal_run(
    data: bytes | bytearray | memoryview, start: int, end: int, limit: int
) -> int:
    """Return the length of the illegal run beginning at *start*.

    The run takes in following bytes until it reaches a byte that could
    start a character (zero included), the end of the buffer, or *limit*
    bytes in total.
    """
    run = 1
    pos = start + 1
    while pos < end and run < limit and not is_lead(data[pos]):
        run += 1
        pos += 1
    return run


def classify(data: bytes | bytearray | memoryview | None, offset: int = 0) -> Outcome:
    """Classify the UTF-8 character that starts at *offset* in *data*.

    ``None`` stands for a caller that has no buffer and, like an offset that
    does not address a byte of *data*, yields :class:`ParameterError`
    instead of raising.

    :param data: The bytes to examine.  Anything supporting the buffer
        protocol is accepted.
    :param offset: Index of the byte to classify.
    :returns: :class:`Valid` with the character length, :class:`Invalid`
        with the number of illegal bytes to skip, or
        :class:`ParameterError`.
    :raises TypeError: If *data* is not bytes-like or *offset* is not an
        integer.
    """
    if data is None:
        logger.debug("classify() called without a buffer")
        return ParameterError("no buffer supplied")
    view = _as_byte_view(data)
    _validate_offset(offset)
    end = len(view)
    if not 0 <= offset < end:
        logger.debug("offset %d outside buffer of %d bytes", offset, end)
        return ParameterError(f"offset {offset} is outside a buffer of {end} bytes")

    lead = view[offset]
    if lead <= 0x7F:
        return _VALID[1]

    row = lead_class_for(lead)
    if row is None:
        # 80-C1, F5-FF never start a sequence; the run is bounded only by
        # the next lead byte or the end of input.
        limit = end - offset
    elif _is_well_formed(view, offset, end, row):
        return _VALID[row.length]
    else:
        limit = row.length

    run = _illegal_run(view, offset, end, limit)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "illegal run of %d byte(s) at offset %d (lead byte 0x%02X)",
            run,
            offset,
            lead,
        )
    return Invalid(run)
