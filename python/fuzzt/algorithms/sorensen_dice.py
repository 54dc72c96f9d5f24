"""Sorensen-Dice coefficient over character bigrams.

See https://en.wikipedia.org/wiki/S%C3%B8rensen%E2%80%93Dice_coefficient
"""

from collections import Counter

from fuzzt._utils import bigrams


def sorensen_dice(a: str, b: str) -> float:
    """Sorensen-Dice similarity of the bigrams of two strings, ignoring whitespace.

    Example:
        >>> sorensen_dice("feris", "ferris")
        0.8888888888888888
    """
    a = "".join(ch for ch in a if not ch.isspace())
    b = "".join(ch for ch in b if not ch.isspace())

    if a == b:
        return 1.0

    # a string needs two characters to have a bigram
    if len(a) < 2 or len(b) < 2:
        return 0.0

    a_bigrams = Counter(bigrams(a))

    intersection_size = 0
    for bigram in bigrams(b):
        if a_bigrams[bigram] > 0:
            a_bigrams[bigram] -= 1
            intersection_size += 1

    # a string of length n has n - 1 bigrams
    return 2 * intersection_size / (len(a) + len(b) - 2)


__all__ = ["sorensen_dice"]
