from dataclasses import dataclass
from functools import cached_property

from beartype import beartype

from cloudkeygen.constants import Alphabets


@dataclass(frozen=True)
class Alphabet:
    """Represent an ordered set of key symbols used as base-B digits.

    The first symbol is the zero digit and is used for left padding.

    Attributes:
        symbols (str):
            Ordered, duplicate-free digit symbols. Their count is the base.

    Example:
        >>> alphabet = Alphabet.named('base62')
        >>> alphabet.base
        62
        >>> alphabet.encode(61, 8)
        '0000000z'
        >>> alphabet.decode('00000010')
        62
    """

    symbols: str

    def __post_init__(self):
        if not isinstance(self.symbols, str):
            raise TypeError(f'Alphabet symbols must be of type string (given type: {type(self.symbols)}).')
        if len(self.symbols) < 2:
            raise ValueError(f'Alphabet must hold at least 2 symbols (given value: {self.symbols!r}).')
        if len(set(self.symbols)) != len(self.symbols):
            raise ValueError(f'Alphabet symbols must be unique (given value: {self.symbols!r}).')

    @classmethod
    def named(cls, name: str) -> 'Alphabet':
        """Build a well-known alphabet ('base62', 'base56') or a custom one from raw symbols."""
        return cls(Alphabets.NAMED.get(name.lower(), name))

    @property
    def base(self) -> int:
        return len(self.symbols)

    @property
    def zero(self) -> str:
        return self.symbols[0]

    @cached_property
    def _digits(self) -> dict[str, int]:
        return {symbol: value for value, symbol in enumerate(self.symbols)}

    @beartype
    def capacity(self, length: int) -> int:
        """Return the number of distinct keys of the given length."""
        return self.base**length

    @beartype
    def contains(self, key: str) -> bool:
        """Return True if every character of key is an alphabet symbol."""
        return all(c in self._digits for c in key)

    @beartype
    def encode(self, number: int, length: int) -> str:
        """Encode a non-negative integer as a fixed-length base-B string

        Args:
            number (int):
                Value to encode. Must be in [0, B^length).
            length (int):
                Exact length of the result.

        Returns:
            str: most significant digit first, left-padded with the zero symbol.

        Raises:
            ValueError:
                If number is negative or doesn't fit in length digits.
        """
        if length < 1:
            raise ValueError(f'Key length must be a positive integer (given value: {length}).')
        if number < 0:
            raise ValueError(f'Number must be a non-negative integer (given value: {number}).')
        if number >= self.capacity(length):
            raise ValueError(f'Number {number} does not fit in {length} base-{self.base} digits.')

        digits = []
        while number:
            number, remainder = divmod(number, self.base)
            digits.append(self.symbols[remainder])
        return ''.join(reversed(digits)).rjust(length, self.zero)

    @beartype
    def decode(self, key: str) -> int:
        """Decode a base-B string back into the integer it encodes

        Raises:
            ValueError:
                If key is empty or holds symbols outside the alphabet.
        """
        if not key:
            raise ValueError('Key must be a non-empty string.')

        number = 0
        for c in key:
            try:
                number = number * self.base + self._digits[c]
            except KeyError:
                raise ValueError(f'Symbol {c!r} is not part of the alphabet.') from None
        return number
