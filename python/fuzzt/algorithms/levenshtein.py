"""Levenshtein distance and its normalized form."""

from typing import Sequence


def generic_levenshtein(a: Sequence, b: Sequence) -> int:
    """Minimum number of insertions, deletions and substitutions turning ``a`` into ``b``.

    Works on any sequences whose elements support ``!=``. Keeps a single
    row of ``min(len(a), len(b)) + 1`` costs.

    Example:
        >>> generic_levenshtein([1, 2, 3], [1, 2, 3, 4, 5, 6])
        3
    """
    # the distance is symmetric, so roll over the shorter sequence
    if len(b) > len(a):
        a, b = b, a

    cache = list(range(1, len(b) + 1))
    result = len(b)

    for i, a_elem in enumerate(a):
        result = i + 1
        distance_b = i

        for j, b_elem in enumerate(b):
            distance_a = distance_b + (a_elem != b_elem)
            distance_b = cache[j]
            result = min(result + 1, distance_a, distance_b + 1)
            cache[j] = result

    return result


def levenshtein(a: str, b: str) -> int:
    """Levenshtein distance between two strings, counted in code points.

    Example:
        >>> levenshtein("kitten", "sitting")
        3
    """
    return generic_levenshtein(a, b)


def normalized_levenshtein(a: str, b: str) -> float:
    """Levenshtein distance mapped onto [0.0, 1.0], where 1.0 means equal.

    Two empty strings are identical and score 1.0.

    Example:
        >>> round(normalized_levenshtein("kitten", "sitting"), 5)
        0.57143
    """
    if not a and not b:
        return 1.0
    return 1.0 - levenshtein(a, b) / max(len(a), len(b))


__all__ = ["levenshtein", "generic_levenshtein", "normalized_levenshtein"]
