# SPDX-License-Identifier: MIT
"""chunkaddr – addressing codec for a tiered, unbounded universe.

The universe is split into clusters of 100 chunks.  Every chunk is named by a
single canonical Python ``int`` (:class:`ChunkID`) together with two projections
that always decode back to it:

* a variable-width *base10x10* form – decimal digit pairs whose count is the
  chunk's tier (:class:`Base10x10Codec`), and
* a fixed-width *base57* string (:class:`Base57Codec`).
"""

from __future__ import annotations

import logging

from .base10x10 import Base10x10Codec, format_pairs, parse_pairs
from .base57 import Base57Codec
from .codecs import base10x10_codec, base57_codec
from .errors import (
    CodecError,
    EmptyInputError,
    InputTooLongError,
    InvalidConfigError,
    InvalidDigitError,
    InvalidSymbolError,
    NegativeValueError,
    TooManyPairsError,
    ValueTooLargeError,
)
from .ids import ChunkID, ClusterID

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ChunkID",
    "ClusterID",
    # codecs
    "Base10x10Codec",
    "Base57Codec",
    "base10x10_codec",
    "base57_codec",
    "format_pairs",
    "parse_pairs",
    # errors
    "CodecError",
    "InvalidConfigError",
    "ValueTooLargeError",
    "NegativeValueError",
    "TooManyPairsError",
    "InputTooLongError",
    "InvalidDigitError",
    "InvalidSymbolError",
    "EmptyInputError",
]
