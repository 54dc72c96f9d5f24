"""Jaro and Jaro-Winkler similarity."""

from typing import Sequence

from fuzzt._utils import common_prefix_length

# Jaro-Winkler only boosts scores above this threshold
WINKLER_BOOST_THRESHOLD = 0.7
WINKLER_PREFIX_WEIGHT = 0.1
WINKLER_MAX_PREFIX = 4


def generic_jaro(a: Sequence, b: Sequence) -> float:
    """Jaro similarity between two sequences, in [0.0, 1.0].

    Two empty sequences score 1.0; one empty sequence scores 0.0.

    Example:
        >>> generic_jaro([1, 2], [3, 4])
        0.0
    """
    a_len = len(a)
    b_len = len(b)

    if a_len == 0 and b_len == 0:
        return 1.0
    if a_len == 0 or b_len == 0:
        return 0.0

    search_range = max(0, max(a_len, b_len) // 2 - 1)

    a_flags = [False] * a_len
    b_flags = [False] * b_len

    matches = 0

    for i, a_elem in enumerate(a):
        min_bound = max(0, i - search_range)
        max_bound = min(b_len, i + search_range + 1)

        for j in range(min_bound, max_bound):
            if not b_flags[j] and a_elem == b[j]:
                a_flags[i] = True
                b_flags[j] = True
                matches += 1
                break

    if matches == 0:
        return 0.0

    transpositions = 0
    j = 0
    for i, a_flag in enumerate(a_flags):
        if not a_flag:
            continue
        while not b_flags[j]:
            j += 1
        if a[i] != b[j]:
            transpositions += 1
        j += 1
    transpositions //= 2

    return (
        matches / a_len
        + matches / b_len
        + (matches - transpositions) / matches
    ) / 3.0


def generic_jaro_winkler(a: Sequence, b: Sequence) -> float:
    """Jaro similarity with a boost for sequences sharing a prefix.

    Scores above 0.7 gain ``0.1 * prefix * (1 - score)``, where ``prefix``
    is the number of equal leading elements, up to 4.
    """
    sim = generic_jaro(a, b)

    if sim > WINKLER_BOOST_THRESHOLD:
        prefix_length = common_prefix_length(a, b, limit=WINKLER_MAX_PREFIX)
        return sim + WINKLER_PREFIX_WEIGHT * prefix_length * (1.0 - sim)
    return sim


def jaro(a: str, b: str) -> float:
    """Jaro similarity between two strings. Higher means more similar.

    Example:
        >>> round(jaro("Friedrich Nietzsche", "Jean-Paul Sartre"), 3)
        0.392
    """
    return generic_jaro(a, b)


def jaro_winkler(a: str, b: str) -> float:
    """Like :func:`jaro`, but gives a boost to strings that have a common prefix.

    Example:
        >>> round(jaro_winkler("cheeseburger", "cheese fries"), 3)
        0.866
    """
    return generic_jaro_winkler(a, b)


__all__ = ["jaro", "jaro_winkler", "generic_jaro", "generic_jaro_winkler"]
