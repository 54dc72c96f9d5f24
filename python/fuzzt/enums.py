"""Enums for fuzzt API."""

from enum import Enum


class Algorithm(str, Enum):
    """Available similarity algorithms.

    This enum provides type-safe scorer selection for ranking operations.
    String values are accepted wherever a member is, so
    ``scorer="jaro_winkler"`` and ``scorer=Algorithm.JARO_WINKLER`` are
    equivalent.

    Distance algorithms produce an edit count (smaller = more similar),
    ratio algorithms produce a score in [0.0, 1.0] (larger = more similar).

    Example:
        >>> from fuzzt import Algorithm, get_top_n
        >>> get_top_n(
        ...     "brazil",
        ...     ["trazil", "BRA ZIL", "brazil", "spain", "braziu"],
        ...     scorer=Algorithm.JARO_WINKLER,
        ...     n=2,
        ... )
        ['brazil', 'braziu']
    """

    HAMMING = "hamming"
    """Hamming distance (equal-length strings only)"""

    LEVENSHTEIN = "levenshtein"
    """Classic edit distance (insertions, deletions, substitutions)"""

    NORMALIZED_LEVENSHTEIN = "normalized_levenshtein"
    """Levenshtein distance mapped onto [0, 1] as 1 - distance / max_len"""

    OSA = "osa"
    """Optimal string alignment: Levenshtein plus adjacent transpositions, each substring edited once"""

    DAMERAU_LEVENSHTEIN = "damerau_levenshtein"
    """Unrestricted Damerau-Levenshtein distance (e.g., 'ca' -> 'abc' is 2 edits)"""

    NORMALIZED_DAMERAU_LEVENSHTEIN = "normalized_damerau_levenshtein"
    """Damerau-Levenshtein distance mapped onto [0, 1]"""

    JARO = "jaro"
    """Jaro similarity, good for short strings"""

    JARO_WINKLER = "jaro_winkler"
    """Jaro similarity with a boost for a common prefix of up to 4 characters"""

    SORENSEN_DICE = "sorensen_dice"
    """Sorensen-Dice coefficient over character bigrams, whitespace ignored"""

    SEQUENCE_MATCHER = "sequence_matcher"
    """Gestalt quick ratio: character multiset overlap"""


class Processor(str, Enum):
    """Built-in string preprocessors for ranking operations.

    Example:
        >>> from fuzzt import Processor, get_top_n
        >>> get_top_n("brazil", ["BRA ZIL", "spain"], processor=Processor.LOWER_ALPHANUM)
        ['BRA ZIL']
    """

    NONE = "none"
    """Leave strings untouched"""

    LOWER_ALPHANUM = "lower_alphanum"
    """Keep alphanumerics and whitespace, trim, lowercase"""


__all__ = ["Algorithm", "Processor"]
