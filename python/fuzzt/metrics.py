"""Uniform scoring interface over the similarity algorithms.

Every algorithm produces one of two result shapes:

- a **distance** (``int``, 0 means equal, smaller is more similar), or
- a **ratio** (``float`` in [0.0, 1.0], 1.0 means equal, larger is more similar).

:class:`Similarity` carries the value together with its shape, and any
object with a ``compute(a, b) -> Similarity`` method satisfies
:class:`SimilarityMetric`, so ranking code can accept every algorithm
without knowing which shape it yields.

Example:
    >>> from fuzzt.metrics import LEVENSHTEIN, JARO_WINKLER
    >>> LEVENSHTEIN.compute("kitten", "sitting")
    Similarity(kind=<SimilarityKind.DISTANCE: 'distance'>, value=3)
    >>> float(JARO_WINKLER.compute("hello", "hello"))
    1.0
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Protocol, Union, runtime_checkable

from fuzzt import algorithms
from fuzzt._utils import normalize_algorithm
from fuzzt.enums import Algorithm


class SimilarityKind(str, Enum):
    """Shape of a :class:`Similarity` value."""

    DISTANCE = "distance"
    """Edit count, smaller is more similar"""

    RATIO = "ratio"
    """Normalized score in [0.0, 1.0], larger is more similar"""


@dataclass(frozen=True)
class Similarity:
    """A score tagged with its shape.

    Use :meth:`distance` or :meth:`ratio` to build one; ``float(sim)``
    gives the number used for ranking and cutoffs.
    """

    kind: SimilarityKind
    value: Union[int, float]

    @classmethod
    def distance(cls, value: int) -> "Similarity":
        return cls(SimilarityKind.DISTANCE, value)

    @classmethod
    def ratio(cls, value: float) -> "Similarity":
        return cls(SimilarityKind.RATIO, value)

    @property
    def is_distance(self) -> bool:
        return self.kind is SimilarityKind.DISTANCE

    @property
    def is_ratio(self) -> bool:
        return self.kind is SimilarityKind.RATIO

    def __float__(self) -> float:
        return float(self.value)


@runtime_checkable
class SimilarityMetric(Protocol):
    """Anything that can score a pair of strings."""

    def compute(self, a: str, b: str) -> Similarity:
        ...


@dataclass(frozen=True)
class Scorer:
    """A :class:`SimilarityMetric` backed by a plain two-argument function."""

    name: str
    func: Callable[[str, str], Union[int, float]]
    kind: SimilarityKind

    def compute(self, a: str, b: str) -> Similarity:
        return Similarity(self.kind, self.func(a, b))

    def __call__(self, a: str, b: str) -> Union[int, float]:
        return self.func(a, b)


HAMMING = Scorer(Algorithm.HAMMING.value, algorithms.hamming, SimilarityKind.DISTANCE)
LEVENSHTEIN = Scorer(Algorithm.LEVENSHTEIN.value, algorithms.levenshtein, SimilarityKind.DISTANCE)
NORMALIZED_LEVENSHTEIN = Scorer(
    Algorithm.NORMALIZED_LEVENSHTEIN.value, algorithms.normalized_levenshtein, SimilarityKind.RATIO
)
OSA = Scorer(Algorithm.OSA.value, algorithms.osa_distance, SimilarityKind.DISTANCE)
DAMERAU_LEVENSHTEIN = Scorer(
    Algorithm.DAMERAU_LEVENSHTEIN.value, algorithms.damerau_levenshtein, SimilarityKind.DISTANCE
)
NORMALIZED_DAMERAU_LEVENSHTEIN = Scorer(
    Algorithm.NORMALIZED_DAMERAU_LEVENSHTEIN.value,
    algorithms.normalized_damerau_levenshtein,
    SimilarityKind.RATIO,
)
JARO = Scorer(Algorithm.JARO.value, algorithms.jaro, SimilarityKind.RATIO)
JARO_WINKLER = Scorer(Algorithm.JARO_WINKLER.value, algorithms.jaro_winkler, SimilarityKind.RATIO)
SORENSEN_DICE = Scorer(Algorithm.SORENSEN_DICE.value, algorithms.sorensen_dice, SimilarityKind.RATIO)
SEQUENCE_MATCHER = Scorer(
    Algorithm.SEQUENCE_MATCHER.value, algorithms.sequence_matcher, SimilarityKind.RATIO
)

SCORERS: Dict[str, Scorer] = {
    scorer.name: scorer
    for scorer in (
        HAMMING,
        LEVENSHTEIN,
        NORMALIZED_LEVENSHTEIN,
        OSA,
        DAMERAU_LEVENSHTEIN,
        NORMALIZED_DAMERAU_LEVENSHTEIN,
        JARO,
        JARO_WINKLER,
        SORENSEN_DICE,
        SEQUENCE_MATCHER,
    )
}

DEFAULT_SCORER = NORMALIZED_LEVENSHTEIN


def get_scorer(algorithm: Union[str, Algorithm]) -> Scorer:
    """Look up the built-in scorer for an algorithm name or enum member.

    Raises:
        AlgorithmError: If the algorithm name is not recognized.

    Example:
        >>> get_scorer("jaro_winkler") is JARO_WINKLER
        True
    """
    return SCORERS[normalize_algorithm(algorithm)]


def resolve_scorer(
    scorer: Optional[Union[str, Algorithm, SimilarityMetric]] = None,
) -> SimilarityMetric:
    """Turn the ``scorer`` argument of the ranking functions into a metric.

    ``None`` selects normalized Levenshtein; strings and :class:`Algorithm`
    members select a built-in scorer; anything with a ``compute`` method is
    used as is.
    """
    if scorer is None:
        return DEFAULT_SCORER
    if isinstance(scorer, (str, Algorithm)):
        return get_scorer(scorer)
    if isinstance(scorer, SimilarityMetric):
        return scorer
    raise TypeError(
        f"scorer must be an algorithm name, Algorithm enum or an object with a "
        f"compute(a, b) method, got {type(scorer).__name__}"
    )


__all__ = [
    "SimilarityKind",
    "Similarity",
    "SimilarityMetric",
    "Scorer",
    "SCORERS",
    "DEFAULT_SCORER",
    "get_scorer",
    "resolve_scorer",
    "HAMMING",
    "LEVENSHTEIN",
    "NORMALIZED_LEVENSHTEIN",
    "OSA",
    "DAMERAU_LEVENSHTEIN",
    "NORMALIZED_DAMERAU_LEVENSHTEIN",
    "JARO",
    "JARO_WINKLER",
    "SORENSEN_DICE",
    "SEQUENCE_MATCHER",
]
