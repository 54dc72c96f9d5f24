"""String similarity algorithms.

Distance functions return an ``int`` edit count (0 means equal), ratio
functions return a ``float`` in [0.0, 1.0] (1.0 means equal). The
``generic_*`` variants accept sequences of arbitrary elements instead of
strings.
"""

from fuzzt.algorithms.damerau_levenshtein import (
    damerau_levenshtein,
    generic_damerau_levenshtein,
    normalized_damerau_levenshtein,
)
from fuzzt.algorithms.gestalt import sequence_matcher
from fuzzt.algorithms.hamming import generic_hamming, hamming
from fuzzt.algorithms.jaro import generic_jaro, generic_jaro_winkler, jaro, jaro_winkler
from fuzzt.algorithms.levenshtein import (
    generic_levenshtein,
    levenshtein,
    normalized_levenshtein,
)
from fuzzt.algorithms.osa import osa_distance
from fuzzt.algorithms.sorensen_dice import sorensen_dice

__all__ = [
    "hamming",
    "generic_hamming",
    "levenshtein",
    "generic_levenshtein",
    "normalized_levenshtein",
    "osa_distance",
    "damerau_levenshtein",
    "generic_damerau_levenshtein",
    "normalized_damerau_levenshtein",
    "jaro",
    "jaro_winkler",
    "generic_jaro",
    "generic_jaro_winkler",
    "sorensen_dice",
    "sequence_matcher",
]
