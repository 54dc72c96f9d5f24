"""Unrestricted Damerau-Levenshtein distance.

Like optimal string alignment, but substrings can be edited any number of
times, so the triangle inequality holds. Two implementations are provided:

- :func:`generic_damerau_levenshtein` works on sequences of any hashable
  elements and fills a full ``(len(a) + 2) x (len(b) + 2)`` matrix.
- :func:`damerau_levenshtein` is specialised for strings and runs in
  ``O(len(a) + len(b))`` memory following Zhao and Sahni, "Linear space
  string correction algorithm using the Damerau-Levenshtein distance".

Both give the same result on strings.
"""

from typing import Dict, Hashable, Sequence

from fuzzt._charmap import HybridGrowingHashmap
from fuzzt._utils import flat_index


def generic_damerau_levenshtein(a_elems: Sequence[Hashable], b_elems: Sequence[Hashable]) -> int:
    """Damerau-Levenshtein distance between two sequences of hashable elements.

    Memory grows with ``len(a) * len(b)``; prefer :func:`damerau_levenshtein`
    for long strings.

    Example:
        >>> generic_damerau_levenshtein([1, 2], [2, 3, 1])
        2
    """
    a_len = len(a_elems)
    b_len = len(b_elems)

    if a_len == 0:
        return b_len
    if b_len == 0:
        return a_len

    width = a_len + 2
    distances = [0] * ((a_len + 2) * (b_len + 2))
    max_distance = a_len + b_len
    distances[0] = max_distance

    for i in range(a_len + 1):
        distances[flat_index(i + 1, 0, width)] = max_distance
        distances[flat_index(i + 1, 1, width)] = i

    for j in range(b_len + 1):
        distances[flat_index(0, j + 1, width)] = max_distance
        distances[flat_index(1, j + 1, width)] = j

    # last row (1-based) in which each element of a was seen
    elems: Dict[Hashable, int] = {}

    for i in range(1, a_len + 1):
        db = 0

        for j in range(1, b_len + 1):
            k = elems.get(b_elems[j - 1], 0)

            insertion_cost = distances[flat_index(i, j + 1, width)] + 1
            deletion_cost = distances[flat_index(i + 1, j, width)] + 1
            transposition_cost = (
                distances[flat_index(k, db, width)] + (i - k - 1) + 1 + (j - db - 1)
            )

            substitution_cost = distances[flat_index(i, j, width)] + 1
            if a_elems[i - 1] == b_elems[j - 1]:
                db = j
                substitution_cost -= 1

            distances[flat_index(i + 1, j + 1, width)] = min(
                substitution_cost, insertion_cost, deletion_cost, transposition_cost
            )

        elems[a_elems[i - 1]] = i

    return distances[flat_index(a_len + 1, b_len + 1, width)]


def damerau_levenshtein(a: str, b: str) -> int:
    """Damerau-Levenshtein distance between two strings in linear memory.

    Example:
        >>> damerau_levenshtein("ab", "bca")
        2
    """
    len2 = len(b)
    max_val = max(len(a), len2) + 1

    last_row_id: HybridGrowingHashmap[int] = HybridGrowingHashmap(default=-1)

    size = len2 + 2
    fr = [max_val] * size
    r1 = [max_val] * size
    r = [max_val] + list(range(size - 1))

    for i, ch1 in enumerate(a, start=1):
        r, r1 = r1, r
        last_col_id = -1
        last_i2l1 = r[1]
        r[1] = i
        t = max_val

        for j, ch2 in enumerate(b, start=1):
            diag = r1[j] + (ch1 != ch2)
            left = r[j] + 1
            up = r1[j + 1] + 1
            temp = min(diag, left, up)

            if ch1 == ch2:
                last_col_id = j  # last occurrence of ch1 in b
                fr[j + 1] = r1[j - 1]  # H[k-1, j-2]
                t = last_i2l1  # H[i-2, l-1]
            else:
                k = last_row_id.get(ch2)
                l = last_col_id

                if j - l == 1:
                    temp = min(temp, fr[j + 1] + (i - k))
                elif i - k == 1:
                    temp = min(temp, t + (j - l))

            last_i2l1 = r[j + 1]
            r[j + 1] = temp

        last_row_id[ch1] = i

    return r[len2 + 1]


def normalized_damerau_levenshtein(a: str, b: str) -> float:
    """Damerau-Levenshtein distance mapped onto [0.0, 1.0], where 1.0 means equal.

    Example:
        >>> round(normalized_damerau_levenshtein("levenshtein", "löwenbräu"), 5)
        0.27273
    """
    if not a and not b:
        return 1.0
    return 1.0 - damerau_levenshtein(a, b) / max(len(a), len(b))


__all__ = ["damerau_levenshtein", "generic_damerau_levenshtein", "normalized_damerau_levenshtein"]
