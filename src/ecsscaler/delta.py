"""Parsing of operator delta expressions such as ``20`` or ``25%``."""

import logging

from .exceptions import InvalidDeltaError
from .models import Delta, DeltaKind

logger = logging.getLogger(__name__)

PERCENT_MARKER = "%"
_DIGITS = frozenset("0123456789")
_CHUNK_DIGITS = 4000


def resolve_delta(value: str) -> Delta:
    """
    Resolve a delta expression into an absolute or percentage Delta.

    Args:
        value: Whole number, optionally followed by a single '%'

    Returns:
        Delta with the numeric magnitude and its kind

    Raises:
        InvalidDeltaError: If the value is empty, negative, fractional or
            contains anything other than digits and one trailing '%'
    """
    if value is None:
        raise InvalidDeltaError("")

    number = value
    kind = DeltaKind.ABSOLUTE
    if number.endswith(PERCENT_MARKER):
        number = number[: -len(PERCENT_MARKER)]
        kind = DeltaKind.PERCENTAGE

    # str.isdigit() also accepts non-ASCII digits like '²'
    if not number or not set(number) <= _DIGITS:
        raise InvalidDeltaError(value)

    delta = Delta(magnitude=_parse_digits(number), kind=kind, raw=value)
    logger.debug(f"Resolved delta {value!r} ({delta.kind.value})")
    return delta


def _parse_digits(number: str) -> int:
    """
    Convert a string of ASCII digits of any length to an int.

    int() refuses strings longer than the interpreter's conversion limit
    (4300 digits by default), so long inputs are folded in chunks below it.
    """
    magnitude = 0
    for start in range(0, len(number), _CHUNK_DIGITS):
        chunk = number[start:start + _CHUNK_DIGITS]
        magnitude = magnitude * 10 ** len(chunk) + int(chunk)
    return magnitude
