"""Top-N ranking of candidate strings against a query.

Every choice is scored against the query by brute force; there is no index.
Choices scoring at least ``cutoff`` are ranked by score, highest first, and
ties are broken by the original (unprocessed) choice in ascending
lexicographic order so results are reproducible.

Example:
    >>> from fuzzt import get_top_n
    >>> get_top_n("brazil", ["trazil", "BRA ZIL", "brazil", "spain", "braziu"])
    ['brazil', 'braziu', 'trazil']
    >>> get_top_n("brazil", ["trazil", "BRA ZIL", "brazil", "spain", "braziu"], cutoff=0.9)
    ['brazil']
"""

import heapq
import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, NamedTuple, Optional, Sequence, Union

from fuzzt.enums import Algorithm, Processor
from fuzzt.metrics import Similarity, SimilarityMetric, resolve_scorer
from fuzzt.processors import StringProcessor, resolve_processor

logger = logging.getLogger(__name__)

DEFAULT_CUTOFF = 0.7
DEFAULT_LIMIT = 3

# Ratios are scaled to integers before ranking so that scores differing
# only by floating point noise tie and fall back to the string order.
_RATIO_SCALE = 0xFFFFFFFF

ScorerArg = Optional[Union[str, Algorithm, SimilarityMetric]]
ProcessorArg = Optional[Union[str, Processor, StringProcessor, Callable[[str], str]]]


@dataclass(frozen=True)
class MatchResult:
    """A ranked choice.

    Attributes:
        text: The choice as passed in, before preprocessing
        score: Score of the choice against the query
        id: Position of the choice in the input sequence
    """

    text: str
    score: float
    id: int


class _Candidate(NamedTuple):
    rank: int
    text: str
    id: int
    score: float


def _rank_value(similarity: Similarity) -> int:
    if similarity.is_distance:
        return int(similarity.value)
    return int(similarity.value * _RATIO_SCALE)


def _candidates(
    query: str,
    choices: Sequence[str],
    cutoff: float,
    processor: StringProcessor,
    scorer: SimilarityMetric,
) -> Iterator[_Candidate]:
    processed_query = processor.process(query)
    for idx, choice in enumerate(choices):
        similarity = scorer.compute(processed_query, processor.process(choice))
        score = float(similarity)
        if score >= cutoff:
            yield _Candidate(_rank_value(similarity), choice, idx, score)


def extract(
    query: str,
    choices: Sequence[str],
    cutoff: float = DEFAULT_CUTOFF,
    n: int = DEFAULT_LIMIT,
    processor: ProcessorArg = None,
    scorer: ScorerArg = None,
) -> List[MatchResult]:
    """Return the ``n`` best choices for ``query`` together with their scores.

    Args:
        query: String to match against.
        choices: Candidate strings.
        cutoff: Minimum score a choice needs to be returned (default: 0.7).
        n: Maximum number of results (default: 3).
        processor: Transform applied to the query and each choice before
            scoring. A :class:`~fuzzt.enums.Processor`, its name, an object
            with a ``process`` method or a plain callable. Defaults to
            leaving strings untouched.
        scorer: Algorithm name, :class:`~fuzzt.enums.Algorithm` or any
            :class:`~fuzzt.metrics.SimilarityMetric`. Defaults to
            normalized Levenshtein.

    Returns:
        At most ``n`` MatchResult objects, highest score first, ties in
        ascending order of the original choice.

    Note:
        Distance scorers (``"levenshtein"``, ``"osa"``, ...) are ranked on
        the raw edit count, so the cutoff becomes a minimum distance and
        larger distances rank first. Use a normalized scorer for "best
        match" semantics.

    Raises:
        LengthMismatchError: With the ``"hamming"`` scorer, when a processed
            choice differs in length from the processed query.
    """
    if n <= 0:
        return []

    resolved_processor = resolve_processor(processor)
    resolved_scorer = resolve_scorer(scorer)

    best = heapq.nsmallest(
        n,
        _candidates(query, choices, cutoff, resolved_processor, resolved_scorer),
        key=lambda c: (-c.rank, c.text),
    )
    logger.debug(
        "Ranked %d choices for %r with %r: kept %d (cutoff=%s, n=%d)",
        len(choices),
        query,
        resolved_scorer,
        len(best),
        cutoff,
        n,
    )
    return [MatchResult(text=c.text, score=c.score, id=c.id) for c in best]


def extract_one(
    query: str,
    choices: Sequence[str],
    cutoff: float = DEFAULT_CUTOFF,
    processor: ProcessorArg = None,
    scorer: ScorerArg = None,
) -> Optional[MatchResult]:
    """Return the single best choice for ``query``, or None if nothing passes the cutoff."""
    matches = extract(query, choices, cutoff=cutoff, n=1, processor=processor, scorer=scorer)
    return matches[0] if matches else None


def get_top_n(
    query: str,
    choices: Sequence[str],
    cutoff: float = DEFAULT_CUTOFF,
    n: int = DEFAULT_LIMIT,
    processor: ProcessorArg = None,
    scorer: ScorerArg = None,
) -> List[str]:
    """Return the ``n`` best choices for ``query``, best first.

    Takes the same arguments as :func:`extract` and returns only the
    matched strings.

    Example:
        >>> from fuzzt import LowerAlphaNumStringProcessor
        >>> get_top_n(
        ...     "brazil",
        ...     ["trazil", "BRA ZIL", "brazil", "spain", "braziu"],
        ...     n=2,
        ...     processor=LowerAlphaNumStringProcessor(),
        ... )
        ['brazil', 'BRA ZIL']
    """
    return [
        m.text
        for m in extract(query, choices, cutoff=cutoff, n=n, processor=processor, scorer=scorer)
    ]


__all__ = [
    "MatchResult",
    "extract",
    "extract_one",
    "get_top_n",
    "DEFAULT_CUTOFF",
    "DEFAULT_LIMIT",
]
