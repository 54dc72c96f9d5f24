"""Internal utilities for fuzzt."""

from itertools import islice
from typing import Iterable, Iterator, Optional, Tuple, TypeVar, Union

from fuzzt.enums import Algorithm
from fuzzt.exceptions import AlgorithmError

T = TypeVar("T")

# Valid algorithm names (lowercase)
VALID_ALGORITHMS = frozenset(a.value for a in Algorithm)

# Short names accepted in addition to the enum values
ALGORITHM_ALIASES = {
    "damerau": Algorithm.DAMERAU_LEVENSHTEIN.value,
    "optimal_string_alignment": Algorithm.OSA.value,
    "gestalt": Algorithm.SEQUENCE_MATCHER.value,
    "quick_ratio": Algorithm.SEQUENCE_MATCHER.value,
    "dice": Algorithm.SORENSEN_DICE.value,
}


def normalize_algorithm(algorithm: Union[str, Algorithm]) -> str:
    """Convert Algorithm enum to string, or validate string algorithm name.

    Args:
        algorithm: Either an Algorithm enum value or a string algorithm name.

    Returns:
        Lowercase string algorithm name.

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
        TypeError: If algorithm is not a string or Algorithm enum.

    Example:
        >>> normalize_algorithm(Algorithm.JARO_WINKLER)
        'jaro_winkler'
        >>> normalize_algorithm("Levenshtein")
        'levenshtein'
        >>> normalize_algorithm("damerau")
        'damerau_levenshtein'
    """
    if isinstance(algorithm, Algorithm):
        return algorithm.value

    if isinstance(algorithm, str):
        algo_lower = algorithm.lower()
        if algo_lower in VALID_ALGORITHMS:
            return algo_lower
        if algo_lower in ALGORITHM_ALIASES:
            return ALGORITHM_ALIASES[algo_lower]
        raise AlgorithmError(
            f"Unknown algorithm: '{algorithm}'. "
            f"Valid options: {sorted(VALID_ALGORITHMS | set(ALGORITHM_ALIASES))}"
        )

    raise TypeError(
        f"algorithm must be str or Algorithm enum, got {type(algorithm).__name__}"
    )


def bigrams(s: Iterable[T]) -> Iterator[Tuple[T, T]]:
    """Yield each pair of adjacent elements of ``s``.

    Example:
        >>> list(bigrams("abc"))
        [('a', 'b'), ('b', 'c')]
    """
    it = iter(s)
    prev = next(it, None)
    for elem in it:
        yield prev, elem
        prev = elem


def flat_index(i: int, j: int, width: int) -> int:
    """Index of cell (i, j) in a grid of the given width stored as one flat list."""
    return j * width + i


def common_prefix_length(a: Iterable[T], b: Iterable[T], limit: Optional[int] = None) -> int:
    """Count equal leading elements of ``a`` and ``b``, stopping after ``limit``."""
    count = 0
    for x, y in islice(zip(a, b), limit):
        if x != y:
            break
        count += 1
    return count


__all__ = [
    "normalize_algorithm",
    "VALID_ALGORITHMS",
    "bigrams",
    "flat_index",
    "common_prefix_length",
]
