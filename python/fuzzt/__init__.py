"""
fuzzt - String similarity metrics and top-N fuzzy matching

Implementations of Hamming, Levenshtein, optimal string alignment,
Damerau-Levenshtein, Jaro, Jaro-Winkler, Sorensen-Dice and the gestalt
quick ratio, plus a ranking helper that picks the best matches for a query
from a list of choices.

Example usage:
    >>> import fuzzt

    # Distances and ratios
    >>> fuzzt.levenshtein("kitten", "sitting")
    3
    >>> round(fuzzt.jaro_winkler("cheeseburger", "cheese fries"), 3)
    0.866

    # Works on any sequences, not only strings
    >>> fuzzt.generic_damerau_levenshtein([1, 2], [2, 3, 1])
    2

    # Best matches (default scorer: normalized Levenshtein)
    >>> fuzzt.get_top_n("brazil", ["trazil", "BRA ZIL", "brazil", "spain", "braziu"])
    ['brazil', 'braziu', 'trazil']
"""

import logging
from importlib.metadata import version as _get_version

# Register the .fuzzt expression namespace
import fuzzt.expr  # noqa: F401
from fuzzt.algorithms import (
    damerau_levenshtein,
    generic_damerau_levenshtein,
    generic_hamming,
    generic_jaro,
    generic_jaro_winkler,
    generic_levenshtein,
    hamming,
    jaro,
    jaro_winkler,
    levenshtein,
    normalized_damerau_levenshtein,
    normalized_levenshtein,
    osa_distance,
    sequence_matcher,
    sorensen_dice,
)
from fuzzt.enums import Algorithm, Processor
from fuzzt.exceptions import (
    AlgorithmError,
    FuzztError,
    LengthMismatchError,
    ValidationError,
)
from fuzzt.matcher import MatchResult, extract, extract_one, get_top_n
from fuzzt.metrics import (
    Scorer,
    Similarity,
    SimilarityKind,
    SimilarityMetric,
    get_scorer,
)
from fuzzt.polars_ext import batch_similarity, match_series
from fuzzt.processors import (
    LowerAlphaNumStringProcessor,
    NullStringProcessor,
    StringProcessor,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = _get_version("fuzzt")

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "FuzztError",
    "ValidationError",
    "LengthMismatchError",
    "AlgorithmError",
    # Enums
    "Algorithm",
    "Processor",
    # Distance functions
    "hamming",
    "generic_hamming",
    "levenshtein",
    "generic_levenshtein",
    "osa_distance",
    "damerau_levenshtein",
    "generic_damerau_levenshtein",
    # Ratio functions
    "normalized_levenshtein",
    "normalized_damerau_levenshtein",
    "jaro",
    "jaro_winkler",
    "generic_jaro",
    "generic_jaro_winkler",
    "sorensen_dice",
    "sequence_matcher",
    # Scoring interface
    "Similarity",
    "SimilarityKind",
    "SimilarityMetric",
    "Scorer",
    "get_scorer",
    # Preprocessors
    "StringProcessor",
    "NullStringProcessor",
    "LowerAlphaNumStringProcessor",
    # Ranking
    "MatchResult",
    "get_top_n",
    "extract",
    "extract_one",
    # Polars integration
    "batch_similarity",
    "match_series",
]


# Convenience aliases
edit_distance = levenshtein
similarity = normalized_levenshtein
