"""Hierarchical chunk and cluster identifiers.

A :class:`ChunkID` names one chunk of the universe through a single canonical
``int`` and carries two projections of it:

* ``global_id_base10x10`` – tiered digit pairs; the pair count is the chunk's
  *scale level*.
* ``global_id_base57``    – fixed-width string.

Its parent :class:`ClusterID` is the canonical integer with the lowest digit
pair dropped (``n // 100``), so ``local_id = n % 100`` is the chunk's slot
inside that cluster.

Example
-------
>>> chunk = ChunkID.from_base10(12345)
>>> chunk.local_id, chunk.cluster_id.global_id_base10
(45, 123)
>>> ChunkID.from_base57(chunk.global_id_base57) == chunk
True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .base10x10 import Base10x10
from .codecs import base10x10_codec, base57_codec
from .config import CHUNKS_PER_CLUSTER, check_natural

__all__ = ["ChunkID", "ClusterID"]


@dataclass(frozen=True, slots=True, eq=False)
class ClusterID:
    """Parent cluster of a chunk.  Build it with :meth:`from_chunk_id`."""

    global_id_base10: int
    global_id_base57: str

    def __post_init__(self):
        if base57_codec().decode(self.global_id_base57) != self.global_id_base10:
            raise ValueError(
                f"Inconsistent ClusterID: base57 {self.global_id_base57!r} does not denote {self.global_id_base10}"
            )

    @classmethod
    def _for_chunk_number(cls, chunk_base10: int) -> "ClusterID":
        base10 = chunk_base10 // CHUNKS_PER_CLUSTER
        return cls(base10, base57_codec().encode(base10))

    @classmethod
    def from_chunk_id(cls, chunk_id: "ChunkID") -> "ClusterID":
        return cls._for_chunk_number(chunk_id.global_id_base10)

    def chunk(self, local_id: int) -> "ChunkID":
        """Return the chunk in slot *local_id* (``0..99``) of this cluster."""
        check_natural(local_id)
        if local_id >= CHUNKS_PER_CLUSTER:
            raise ValueError(f"local_id must be < {CHUNKS_PER_CLUSTER}, got {local_id}")
        return ChunkID.from_base10(self.global_id_base10 * CHUNKS_PER_CLUSTER + local_id)

    def __eq__(self, other: object):
        if not isinstance(other, ClusterID):
            return NotImplemented
        return self.global_id_base10 == other.global_id_base10

    def __hash__(self) -> int:
        return hash(self.global_id_base10)


@dataclass(frozen=True, slots=True, eq=False)
class ChunkID:
    """Immutable chunk address holding all three representations.

    Use one of the ``from_*`` constructors; each derives the two missing forms
    through the shared codecs and propagates any
    :class:`~chunkaddr.errors.CodecError` unchanged.
    """

    scale_level: int
    local_id: int
    cluster_id: ClusterID
    global_id_base10: int
    global_id_base10x10: Base10x10
    global_id_base57: str

    def __post_init__(self):
        """Reject field combinations that do not name one single chunk."""
        n = self.global_id_base10
        problems = []
        if self.scale_level != len(self.global_id_base10x10):
            problems.append(f"scale_level {self.scale_level} != {len(self.global_id_base10x10)} pairs")
        if self.local_id != n % CHUNKS_PER_CLUSTER:
            problems.append(f"local_id {self.local_id} != {n} % {CHUNKS_PER_CLUSTER}")
        if base10x10_codec().decode(self.global_id_base10x10) != n:
            problems.append(f"base10x10 {self.global_id_base10x10} does not denote {n}")
        if base57_codec().decode(self.global_id_base57) != n:
            problems.append(f"base57 {self.global_id_base57!r} does not denote {n}")
        if self.cluster_id.global_id_base10 != n // CHUNKS_PER_CLUSTER:
            problems.append(f"cluster {self.cluster_id.global_id_base10} != {n} // {CHUNKS_PER_CLUSTER}")
        if problems:
            raise ValueError("Inconsistent ChunkID: " + "; ".join(problems))

    # ------------------------------------------------------------------
    # Smart constructors
    # ------------------------------------------------------------------

    @classmethod
    def _build(cls, base10: int, base10x10: Base10x10, base57: str) -> "ChunkID":
        return cls(
            scale_level=len(base10x10),
            local_id=base10 % CHUNKS_PER_CLUSTER,
            cluster_id=ClusterID._for_chunk_number(base10),
            global_id_base10=base10,
            global_id_base10x10=base10x10,
            global_id_base57=base57,
        )

    @classmethod
    def from_base10(cls, global_id_base10: int) -> "ChunkID":
        base10x10 = base10x10_codec().encode(global_id_base10)
        return cls._build(global_id_base10, base10x10, base57_codec().encode(global_id_base10))

    @classmethod
    def from_base10x10(cls, global_id_base10x10: Iterable[Sequence[int]]) -> "ChunkID":
        pairs = tuple(global_id_base10x10)
        base10 = base10x10_codec().decode(pairs)
        base10x10 = tuple((first, second) for first, second in pairs)
        return cls._build(base10, base10x10, base57_codec().encode(base10))

    @classmethod
    def from_base57(cls, global_id_base57: str) -> "ChunkID":
        codec = base57_codec()
        base10 = codec.decode(global_id_base57)
        # re-encode so an unpadded input is stored in canonical fixed width
        return cls._build(base10, base10x10_codec().encode(base10), codec.encode(base10))

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __eq__(self, other: object):
        if not isinstance(other, ChunkID):
            return NotImplemented
        return self.global_id_base10x10 == other.global_id_base10x10

    def __hash__(self) -> int:
        return hash(self.global_id_base10)

    def __int__(self) -> int:
        return self.global_id_base10

    def __str__(self) -> str:
        return self.global_id_base57
