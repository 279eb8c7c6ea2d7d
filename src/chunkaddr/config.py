"""Global configuration for *chunkaddr*.

This module centralises the constants that define the label space so they can
be read from a single location.  The shared codec instances in
:mod:`chunkaddr.codecs` are built from these values exactly once and there is
no setter.

Capacities
----------
The two default capacities are chosen so that the base57 form can always hold
every integer the base10x10 form can address:

    100¹ + 100² + … + 100⁶⁴  <  57⁷³

so any :class:`~chunkaddr.ids.ChunkID` that passes the base10x10 check also
fits into a fixed 73-symbol base57 string.
"""

from __future__ import annotations

from .errors import InvalidConfigError, NegativeValueError

__all__ = [
    "BASE10X10_RADIX",
    "BASE57_RADIX",
    "BASE57_ALPHABET",
    "MAX_BASE10X10_PAIRS",
    "MAX_BASE57_SYMBOLS",
    "CHUNKS_PER_CLUSTER",
    "check_capacity",
    "check_natural",
]

# -----------------------------------------------------------------------------
# Public constants
# -----------------------------------------------------------------------------

BASE10X10_RADIX: int = 100  # one digit pair
BASE57_RADIX: int = 57

# 26 letters + 10 digits + 21 punctuation marks (incl. U+00B4 ACUTE ACCENT).
# Position 0 is the padding symbol.
BASE57_ALPHABET: str = "abcdefghijklmnopqrstuvwxyz0123456789+,;_-'~`´@!$%&()[]{}="

MAX_BASE10X10_PAIRS: int = 64
MAX_BASE57_SYMBOLS: int = 73

CHUNKS_PER_CLUSTER: int = 100

# -----------------------------------------------------------------------------
# Helper functions
# -----------------------------------------------------------------------------


def check_capacity(parameter: str, value: int) -> int:
    """Validate a codec capacity (pair or symbol budget).

    Parameters
    ----------
    parameter:
        Name reported in the error, e.g. ``"max_pairs"``.
    value:
        Proposed capacity; must be an ``int`` of at least 1.

    Returns
    -------
    int
        *value* unchanged.
    """
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidConfigError(parameter, value)
    return value


def check_natural(value: int) -> int:
    """Return *value* if it is a non-negative ``int``.

    ``bool`` is rejected even though it subclasses ``int``; ``True`` is not a
    chunk address.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected a non-negative int, got {type(value).__name__}")
    if value < 0:
        raise NegativeValueError(value)
    return value
