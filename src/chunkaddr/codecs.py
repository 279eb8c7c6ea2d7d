"""Process-wide codec instances.

Both codecs are immutable, so a single instance of each is shared by every
:class:`~chunkaddr.ids.ChunkID` construction.  They are built lazily on first
access; the lock guarantees one construction even when several threads race
on the first call.
"""

from __future__ import annotations

import logging
import threading

from .base10x10 import Base10x10Codec
from .base57 import Base57Codec
from .config import MAX_BASE10X10_PAIRS, MAX_BASE57_SYMBOLS

__all__ = ["base10x10_codec", "base57_codec"]

logger = logging.getLogger(__name__)

_LOCK = threading.Lock()
_BASE10X10: Base10x10Codec | None = None
_BASE57: Base57Codec | None = None


def base10x10_codec() -> Base10x10Codec:
    """Shared :class:`Base10x10Codec` with ``MAX_BASE10X10_PAIRS`` pairs."""
    global _BASE10X10
    if _BASE10X10 is None:
        with _LOCK:
            if _BASE10X10 is None:
                _BASE10X10 = Base10x10Codec(MAX_BASE10X10_PAIRS)
                logger.debug("Built shared base10x10 codec (max_pairs=%d)", MAX_BASE10X10_PAIRS)
    return _BASE10X10


def base57_codec() -> Base57Codec:
    """Shared :class:`Base57Codec` with ``MAX_BASE57_SYMBOLS`` symbols."""
    global _BASE57
    if _BASE57 is None:
        with _LOCK:
            if _BASE57 is None:
                _BASE57 = Base57Codec(MAX_BASE57_SYMBOLS)
                logger.debug("Built shared base57 codec (max_symbols=%d)", MAX_BASE57_SYMBOLS)
    return _BASE57
