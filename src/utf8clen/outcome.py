"""Classification outcomes."""

from __future__ import annotations

import dataclasses
from typing import Union

from utf8clen._utils import MAX_SEQUENCE_LENGTH
from utf8clen.enums import OutcomeKind

#: U+FFFD encoded as UTF-8; callers substitute it for an illegal run.
REPLACEMENT_CHARACTER: bytes = b"\xef\xbf\xbd"


@dataclasses.dataclass(frozen=True, slots=True)
class Valid:
    """A well-formed character occupying *length* bytes."""

    length: int

    def __post_init__(self) -> None:
        if not 1 <= self.length <= MAX_SEQUENCE_LENGTH:
            msg = f"length must be between 1 and {MAX_SEQUENCE_LENGTH}"
            raise ValueError(msg)

    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.VALID

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def advance(self) -> int:
        """Number of bytes a scanning caller moves forward."""
        return self.length

    def to_tuple(self) -> tuple[int, int]:
        """Return ``(length, 0)``."""
        return (self.length, 0)

    def to_dict(self) -> dict[str, str | int | None]:
        """Convert this outcome to a plain dict.

        :returns: A dict with ``'kind'``, ``'length'``, ``'illegal_length'``
            and ``'reason'`` keys.
        """
        return {
            "kind": self.kind.value,
            "length": self.length,
            "illegal_length": 0,
            "reason": None,
        }


@dataclasses.dataclass(frozen=True, slots=True)
class Invalid:
    """The first *length* bytes form an illegal run.

    The caller should skip them, or replace them as a unit with
    :data:`REPLACEMENT_CHARACTER`, and resume at the byte that follows.
    """

    length: int

    def __post_init__(self) -> None:
        if self.length < 1:
            msg = "illegal run length must be at least 1"
            raise ValueError(msg)

    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.INVALID

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def advance(self) -> int:
        """Number of bytes a scanning caller moves forward."""
        return self.length

    def to_tuple(self) -> tuple[int, int]:
        """Return ``(0, length)``."""
        return (0, self.length)

    def to_dict(self) -> dict[str, str | int | None]:
        """Convert this outcome to a plain dict.

        :returns: A dict with ``'kind'``, ``'length'``, ``'illegal_length'``
            and ``'reason'`` keys.
        """
        return {
            "kind": self.kind.value,
            "length": 0,
            "illegal_length": self.length,
            "reason": None,
        }


@dataclasses.dataclass(frozen=True, slots=True)
class ParameterError:
    """The call was made without a usable buffer; nothing was consumed."""

    reason: str

    @property
    def kind(self) -> OutcomeKind:
        return OutcomeKind.PARAMETER_ERROR

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def advance(self) -> int:
        return 0

    def to_tuple(self) -> tuple[int, int]:
        """Raise :class:`ValueError`; there is no length pair for a misuse.

        :raises ValueError: Always, carrying :attr:`reason`.
        """
        raise ValueError(self.reason)

    def to_dict(self) -> dict[str, str | int | None]:
        return {
            "kind": self.kind.value,
            "length": 0,
            "illegal_length": 0,
            "reason": self.reason,
        }


Outcome = Union[Valid, Invalid, ParameterError]
