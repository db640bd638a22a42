"""Enumerations for utf8clen."""

import enum


class OutcomeKind(enum.Enum):
    """The three variants a single classification can produce."""

    VALID = "valid"
    INVALID = "invalid"
    PARAMETER_ERROR = "parameter_error"
