"""Tiered base-100 ("base10x10") codec.

An integer is written as a sequence of decimal digit pairs.  The *number of
pairs* doubles as a tier marker: tier ``k`` owns the contiguous range

    100¹ + … + 100ᵏ⁻¹   ≤ n <   100¹ + … + 100ᵏ

which is exactly ``100ᵏ`` integers wide, i.e. every ``k``-pair string is used
once.  This is the base-100 analogue of a bijective numeral system and removes
the usual ambiguity of leading zero pairs: ``(0,0)`` and ``(0,0),(0,0)`` are
different chunks (0 and 100).

Example
-------
>>> codec = Base10x10Codec(3)
>>> codec.encode(101)
((0, 0), (0, 1))
>>> codec.decode(((0, 0), (0, 0), (0, 0)))
10100
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from itertools import accumulate
from typing import Iterable, Sequence, TypeAlias

from .config import BASE10X10_RADIX, check_capacity, check_natural
from .errors import EmptyInputError, InvalidDigitError, TooManyPairsError, ValueTooLargeError

__all__ = [
    "DigitPair",
    "Base10x10",
    "Base10x10Codec",
    "format_pairs",
    "parse_pairs",
]

# -- Type aliases -----------------------------------------------------------------
DigitPair: TypeAlias = tuple[int, int]
Base10x10: TypeAlias = tuple[DigitPair, ...]


# -----------------------------------------------------------------------------
# Helper utilities
# -----------------------------------------------------------------------------

def _pair_value(position: int, pair: Sequence[int]) -> int:
    """Validate a single pair and return its value in ``0..99``."""
    try:
        first, second = pair
    except (TypeError, ValueError):
        raise InvalidDigitError(position, pair) from None
    for digit in (first, second):
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
            raise InvalidDigitError(position, digit)
    return first * 10 + second


def format_pairs(pairs: Iterable[Sequence[int]], sep: str = ".") -> str:
    """Render pairs as text, e.g. ``((0, 1), (2, 3))`` → ``"01.23"``."""
    return sep.join(f"{first}{second}" for first, second in pairs)


def parse_pairs(text: str, sep: str = ".") -> Base10x10:
    """Inverse of :func:`format_pairs`.

    Every group must be exactly two ASCII decimal digits.
    """
    pairs = []
    for position, group in enumerate(text.split(sep)):
        if len(group) != 2 or not all(c in "0123456789" for c in group):
            raise InvalidDigitError(position, group)
        pairs.append((int(group[0]), int(group[1])))
    return tuple(pairs)


# -----------------------------------------------------------------------------
# Main codec
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Base10x10Codec:
    """Encoder/decoder between ``int`` and tiered digit pairs.

    Tables are precomputed once in ``__post_init__``:

    * ``offsets[i - 1]    = 100ⁱ``
    * ``power_sums[i - 1] = 100¹ + … + 100ⁱ``

    for ``i`` in ``1..max_pairs``.
    """

    max_pairs: int
    offsets: tuple[int, ...] = field(init=False, repr=False, compare=False)
    power_sums: tuple[int, ...] = field(init=False, repr=False, compare=False)

    # the dataclass is frozen – we must use __setattr__ in __post_init__
    def __post_init__(self):
        check_capacity("max_pairs", self.max_pairs)
        offsets = tuple(BASE10X10_RADIX ** i for i in range(1, self.max_pairs + 1))
        object.__setattr__(self, "offsets", offsets)
        object.__setattr__(self, "power_sums", tuple(accumulate(offsets)))

    # ------------------------------------------------------------------
    # Properties & utility methods
    # ------------------------------------------------------------------

    @property
    def capacity(self) -> int:
        """Exclusive upper bound of encodable integers."""
        return self.power_sums[-1]

    def tier_of(self, n: int) -> int:
        """Minimal pair count ``k`` with ``n < power_sums[k - 1]``."""
        check_natural(n)
        # number of power sums ≤ n, i.e. tiers fully below n
        tier = bisect_right(self.power_sums, n) + 1
        if tier > self.max_pairs:
            raise ValueTooLargeError(n, self.capacity)
        return tier

    def _tier_floor(self, tier: int) -> int:
        """First integer of *tier* – the headroom consumed by all lower tiers."""
        return self.power_sums[tier - 2] if tier > 1 else 0

    # ------------------------------------------------------------------
    # Encoding / decoding
    # ------------------------------------------------------------------

    def encode(self, n: int) -> Base10x10:
        tier = self.tier_of(n)
        local = n - self._tier_floor(tier)  # 0 ≤ local < 100ᵗⁱᵉʳ

        pairs: list[DigitPair] = []
        for _ in range(tier):
            local, value = divmod(local, BASE10X10_RADIX)
            pairs.append(divmod(value, 10))
        pairs.reverse()
        return tuple(pairs)

    def decode(self, pairs: Iterable[Sequence[int]]) -> int:
        """Decode pairs (most significant first) back into the canonical integer.

        Raises
        ------
        TooManyPairsError
            More pairs than ``max_pairs``.
        InvalidDigitError
            A digit outside ``0..9`` or an element that is not a pair.
        EmptyInputError
            No pairs at all.
        """
        pairs = tuple(pairs)
        if len(pairs) > self.max_pairs:
            raise TooManyPairsError(len(pairs), self.max_pairs)
        if not pairs:
            raise EmptyInputError()

        local = 0
        for position, pair in enumerate(pairs):
            local = local * BASE10X10_RADIX + _pair_value(position, pair)
        return local + self._tier_floor(len(pairs))
