"""Polars helpers for scoring and ranking string columns.

These functions apply the same scorers and ranking rules as
:func:`fuzzt.get_top_n` to Polars Series, returning Series or DataFrames
that can be joined back onto the original data.

Functions in This Module
------------------------
- ``batch_similarity()``: Row-wise score of two aligned Series
- ``match_series()``: Top-N choices for every query in a Series

Example Usage
-------------
>>> import polars as pl
>>> import fuzzt
>>>
>>> df = pl.DataFrame({"a": ["kitten", "hello"], "b": ["sitting", "hallo"]})
>>> df.with_columns(score=fuzzt.batch_similarity(df["a"], df["b"]))
>>>
>>> queries = pl.Series(["brazil", "spian"])
>>> fuzzt.match_series(queries, ["brazil", "braziu", "spain"], cutoff=0.5)

See Also
--------
- ``fuzzt.expr``: Polars expression namespace for column operations
- ``fuzzt.matcher``: Ranking on plain Python lists
"""

import logging
from typing import List, Sequence, Union

import polars as pl

from fuzzt.enums import Algorithm
from fuzzt.exceptions import ValidationError
from fuzzt.matcher import DEFAULT_CUTOFF, DEFAULT_LIMIT, ProcessorArg, ScorerArg, extract
from fuzzt.metrics import get_scorer

logger = logging.getLogger(__name__)

MATCH_SCHEMA = {
    "query_idx": pl.Int64,
    "query": pl.Utf8,
    "rank": pl.Int64,
    "match": pl.Utf8,
    "match_idx": pl.Int64,
    "score": pl.Float64,
}


def batch_similarity(
    left: "pl.Series",
    right: "pl.Series",
    algorithm: Union[str, Algorithm] = "normalized_levenshtein",
) -> "pl.Series":
    """
    Score each row of ``left`` against the same row of ``right``.

    Args:
        left: First string Series
        right: Second string Series (must be same length as left)
        algorithm: Algorithm name or Algorithm enum (default:
            normalized Levenshtein). Distance algorithms yield edit counts.

    Returns:
        Float64 Series named "similarity"; null where either input is null

    Raises:
        ValidationError: If the Series lengths differ.
        AlgorithmError: If the algorithm name is not recognized.

    Example:
        >>> df = pl.DataFrame({"a": ["hello", "world"], "b": ["hallo", "word"]})
        >>> df = df.with_columns(score=batch_similarity(df["a"], df["b"], "jaro_winkler"))

    See Also:
        match_series: Rank many choices against each query
    """
    scorer = get_scorer(algorithm)

    if len(left) != len(right):
        raise ValidationError(
            f"Series must have equal length, got {len(left)} and {len(right)}"
        )

    scores = []
    for a, b in zip(left.to_list(), right.to_list()):
        if a is None or b is None:
            scores.append(None)
        else:
            scores.append(float(scorer.compute(str(a), str(b))))

    return pl.Series("similarity", scores, dtype=pl.Float64)


def match_series(
    queries: "pl.Series",
    choices: Union["pl.Series", Sequence[str]],
    cutoff: float = DEFAULT_CUTOFF,
    n: int = DEFAULT_LIMIT,
    processor: ProcessorArg = None,
    scorer: ScorerArg = None,
) -> "pl.DataFrame":
    """
    Find the top ``n`` choices for every query in a Series.

    Ranking follows :func:`fuzzt.get_top_n`: best score first, ties broken
    by ascending choice. Null queries and null choices are skipped; the
    reported ``match_idx`` still refers to the position in ``choices``.

    Args:
        queries: Series of query strings
        choices: Series or list of candidate strings
        cutoff: Minimum score to keep a match (default: 0.7)
        n: Maximum matches per query (default: 3)
        processor: Preprocessor applied before scoring (see get_top_n)
        scorer: Scorer to use (default: normalized Levenshtein)

    Returns:
        DataFrame with columns: query_idx, query, rank, match, match_idx, score.
        ``rank`` starts at 1 for the best match of each query.

    Example:
        >>> result = match_series(pl.Series(["brazil"]), ["trazil", "brazil", "braziu"])
        >>> result["match"].to_list()
        ['brazil', 'braziu', 'trazil']
    """
    choice_list = choices.to_list() if isinstance(choices, pl.Series) else list(choices)
    present = [(idx, str(c)) for idx, c in enumerate(choice_list) if c is not None]
    choice_strs: List[str] = [c for _, c in present]

    rows = []
    for query_idx, query in enumerate(queries.to_list()):
        if query is None:
            continue
        matches = extract(
            str(query), choice_strs, cutoff=cutoff, n=n, processor=processor, scorer=scorer
        )
        for rank, match in enumerate(matches, start=1):
            rows.append(
                {
                    "query_idx": query_idx,
                    "query": str(query),
                    "rank": rank,
                    "match": match.text,
                    "match_idx": present[match.id][0],
                    "score": match.score,
                }
            )

    logger.debug(
        "Matched %d queries against %d choices: %d rows", len(queries), len(choice_strs), len(rows)
    )

    if not rows:
        return pl.DataFrame(schema=MATCH_SCHEMA)
    return pl.DataFrame(rows, schema=MATCH_SCHEMA)


__all__ = ["batch_similarity", "match_series"]
