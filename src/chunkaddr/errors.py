"""Exception hierarchy shared by the codecs and identifier types.

Every error derives from :class:`CodecError`, itself a :class:`ValueError`, so
callers that only care about "bad identifier" can catch one class while tests
can assert on the precise variant and its attributes.
"""

from __future__ import annotations

from typing import Any

__all__ = [
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


class CodecError(ValueError):
    """Base class for every failure raised by *chunkaddr*."""


class InvalidConfigError(CodecError):
    def __init__(self, parameter: str, value: Any):
        self.parameter = parameter
        self.value = value
        super().__init__(f"Invalid codec configuration: {parameter}={value!r}")


class ValueTooLargeError(CodecError):
    """Integer does not fit into the codec's configured capacity.

    ``capacity`` is the exclusive upper bound of encodable integers.
    """

    def __init__(self, value: int, capacity: int):
        self.value = value
        self.capacity = capacity
        super().__init__(f"Value {value} exceeds codec capacity (must be < {capacity})")


class NegativeValueError(CodecError):
    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Value must be non-negative, got {value}")


class TooManyPairsError(CodecError):
    def __init__(self, count: int, max_pairs: int):
        self.count = count
        self.max_pairs = max_pairs
        super().__init__(f"Base10x10 input has {count} pairs, at most {max_pairs} allowed")


class InputTooLongError(CodecError):
    def __init__(self, length: int, max_symbols: int):
        self.length = length
        self.max_symbols = max_symbols
        super().__init__(f"Base57 input has {length} symbols, at most {max_symbols} allowed")


class InvalidDigitError(CodecError):
    """Malformed base10x10 pair.

    ``position`` counts pairs from the most significant end; ``digit`` is the
    offending element (or the whole pair when it is not two integers).
    """

    def __init__(self, position: int, digit: Any):
        self.position = position
        self.digit = digit
        super().__init__(f"Invalid digit {digit!r} in base10x10 pair {position}")


class InvalidSymbolError(CodecError):
    def __init__(self, position: int, symbol: str):
        self.position = position
        self.symbol = symbol
        super().__init__(f"Invalid symbol {symbol!r} at position {position} of base57 input")


class EmptyInputError(CodecError):
    def __init__(self):
        super().__init__("Base10x10 input must contain at least one pair")
