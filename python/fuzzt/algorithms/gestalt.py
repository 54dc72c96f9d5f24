"""Gestalt quick ratio."""

from collections import Counter


def sequence_matcher(s1: str, s2: str) -> float:
    """Upper bound on the Ratcliff/Obershelp ratio from character counts alone.

    Returns ``2 * M / T``, where ``M`` is the size of the multiset
    intersection of the characters of both strings and ``T`` their total
    length. Two empty strings score 1.0. This is what
    ``difflib.SequenceMatcher.quick_ratio`` computes.

    Example:
        >>> sequence_matcher("test", "tent")
        0.75
    """
    length = len(s1) + len(s2)

    if length == 0:
        return 1.0

    matches = sum((Counter(s1) & Counter(s2)).values())
    return 2.0 * matches / length


__all__ = ["sequence_matcher"]
