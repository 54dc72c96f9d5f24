"""Hamming distance."""

from typing import Iterable

from fuzzt.exceptions import LengthMismatchError

_EXHAUSTED = object()


def generic_hamming(a: Iterable, b: Iterable) -> int:
    """Count the positions where two sequences differ.

    Both inputs are consumed in lockstep, so lengths are never computed up
    front. Works with any iterables whose elements support ``!=``.

    Raises:
        LengthMismatchError: As soon as one sequence runs out before the other.

    Example:
        >>> generic_hamming([1, 2, 4], [1, 2, 3])
        1
    """
    ita, itb = iter(a), iter(b)
    count = 0
    while True:
        x = next(ita, _EXHAUSTED)
        y = next(itb, _EXHAUSTED)
        if x is _EXHAUSTED or y is _EXHAUSTED:
            if x is y:
                return count
            raise LengthMismatchError()
        if x != y:
            count += 1


def hamming(a: str, b: str) -> int:
    """Count the positions where two equal-length strings differ.

    Strings are compared code point by code point.

    Raises:
        LengthMismatchError: If the strings have different lengths.

    Example:
        >>> hamming("hamming", "hammers")
        3
    """
    return generic_hamming(a, b)


__all__ = ["hamming", "generic_hamming"]
