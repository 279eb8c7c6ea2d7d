"""Fixed-width base57 codec.

Every integer below ``57 ** max_symbols`` is written with exactly
``max_symbols`` characters, left padded with the alphabet's zero symbol.  All
encodable integers share the same string length.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from .config import BASE57_ALPHABET, BASE57_RADIX, check_capacity, check_natural
from .errors import InputTooLongError, InvalidConfigError, InvalidSymbolError, ValueTooLargeError

__all__ = ["Base57Codec"]


@dataclass(frozen=True, slots=True)
class Base57Codec:
    max_symbols: int
    alphabet: str = BASE57_ALPHABET
    _positions: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        check_capacity("max_symbols", self.max_symbols)
        if len(self.alphabet) != BASE57_RADIX or len(set(self.alphabet)) != BASE57_RADIX:
            raise InvalidConfigError("alphabet", self.alphabet)
        object.__setattr__(self, "_positions", {c: i for i, c in enumerate(self.alphabet)})

    @property
    def radix(self) -> int:
        return len(self.alphabet)

    @property
    def capacity(self) -> int:
        """Exclusive upper bound of encodable integers."""
        return self.radix ** self.max_symbols

    # ------------------------------------------------------------------
    # Encoding / decoding
    # ------------------------------------------------------------------

    def encode(self, n: int) -> str:
        check_natural(n)
        if n >= self.capacity:
            raise ValueTooLargeError(n, self.capacity)

        symbols = []
        for _ in range(self.max_symbols):
            n, remainder = divmod(n, self.radix)
            symbols.append(self.alphabet[remainder])
        return "".join(reversed(symbols))

    def decode(self, encoded: str) -> int:
        """Decode a base57 string (most significant symbol first).

        Strings shorter than ``max_symbols`` are read as if left padded with
        the zero symbol; the empty string is 0.
        """
        if len(encoded) > self.max_symbols:
            raise InputTooLongError(len(encoded), self.max_symbols)

        n = 0
        for position, symbol in enumerate(encoded):
            try:
                n = n * self.radix + self._positions[symbol]
            except KeyError:
                raise InvalidSymbolError(position, symbol) from None
        return n
