"""Product of command-line integers.

Parsing is strict: every token must be an optionally signed run of decimal
digits that fits the configured signed width. Any Unicode decimal digit
(`str.isdecimal`) counts, so "٣" is 3. Multiplication wraps around at
that width instead of growing like a Python `int`.
"""

from __future__ import annotations

from functools import reduce
from typing import Iterable, Sequence

from core.domain.errors import NonIntegerArgumentError
from core.domain.models import ProductResult

DEFAULT_BITS = 32


def signed_range(bits: int = DEFAULT_BITS) -> tuple[int, int]:
    """Inclusive bounds of a two's-complement integer of `bits` width."""

    half = 1 << (bits - 1)
    return -half, half - 1


def wrap_signed(value: int, bits: int = DEFAULT_BITS) -> int:
    """Reduce `value` to the signed `bits` range with two's-complement wraparound."""

    modulus = 1 << bits
    half = modulus >> 1
    return ((value + half) % modulus) - half


def parse_integer(token: str, *, bits: int = DEFAULT_BITS) -> int:
    digits = token[1:] if token[:1] in ("+", "-") else token
    if not digits or not digits.isdecimal():
        raise NonIntegerArgumentError(
            token, f"invalid literal for int() with base 10: {token!r}"
        )

    value = int(token, 10)
    low, high = signed_range(bits)
    if not low <= value <= high:
        raise NonIntegerArgumentError(
            token, f"value out of range for a {bits}-bit signed integer: {token!r}"
        )
    return value


def parse_arguments(tokens: Iterable[str], *, bits: int = DEFAULT_BITS) -> list[int]:
    """Parse every token in order; the first failure propagates."""

    return [parse_integer(token, bits=bits) for token in tokens]


def multiply(numbers: Iterable[int], *, bits: int = DEFAULT_BITS) -> int:
    """Multiply starting from 1, wrapping after each step (empty input -> 1)."""

    return reduce(lambda acc, n: wrap_signed(acc * n, bits), numbers, 1)


def compute_product(tokens: Sequence[str], *, bits: int = DEFAULT_BITS) -> ProductResult:
    """Parse all tokens, then multiply them.

    Raises:
        NonIntegerArgumentError: if any token is not an integer. No product is
            computed in that case.
    """

    factors = parse_arguments(tokens, bits=bits)
    return ProductResult(factors=factors, value=multiply(factors, bits=bits), bits=bits)
