"""Optimal string alignment distance."""


def osa_distance(a: str, b: str) -> int:
    """Levenshtein distance that also allows swapping two adjacent characters.

    Each substring may be edited at most once, so this is not a true
    metric: the triangle inequality does not always hold. Use
    :func:`fuzzt.damerau_levenshtein` when it must.

    Example:
        >>> osa_distance("ab", "bca")
        3
    """
    b_len = len(b)
    prev_two_distances = list(range(b_len + 1))
    prev_distances = list(range(b_len + 1))
    curr_distances = [0] * (b_len + 1)

    prev_a_char = None

    for i, a_char in enumerate(a):
        curr_distances[0] = i + 1
        prev_b_char = None

        for j, b_char in enumerate(b):
            cost = int(a_char != b_char)
            curr_distances[j + 1] = min(
                curr_distances[j] + 1,
                prev_distances[j + 1] + 1,
                prev_distances[j] + cost,
            )
            if (
                i > 0
                and j > 0
                and cost
                and a_char == prev_b_char
                and b_char == prev_a_char
            ):
                curr_distances[j + 1] = min(curr_distances[j + 1], prev_two_distances[j - 1] + 1)

            prev_b_char = b_char

        prev_two_distances, prev_distances, curr_distances = (
            prev_distances,
            curr_distances,
            prev_two_distances,
        )
        prev_a_char = a_char

    # prev_distances holds the last computed row after the rotation above,
    # or the initial 0..b_len row when a is empty
    return prev_distances[b_len]


__all__ = ["osa_distance"]
