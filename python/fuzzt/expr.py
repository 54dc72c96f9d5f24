"""Polars expression namespace for fuzzy string scoring.

This module registers a `.fuzzt` namespace on Polars expressions,
enabling scoring directly in expression contexts. It is registered when
``fuzzt`` is imported.

Note:
    Scores are computed row by row with ``map_elements``. For large
    frames, ``fuzzt.batch_similarity()`` avoids the per-row expression
    overhead.

Example:
    >>> import polars as pl
    >>> import fuzzt  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["John", "Jon", "Jane"]})
    >>> df.with_columns(
    ...     is_similar=pl.col("name").fuzzt.is_similar("John", min_similarity=0.7)
    ... )
"""

from typing import Union

import polars as pl

from fuzzt.enums import Algorithm
from fuzzt.metrics import get_scorer


@pl.api.register_expr_namespace("fuzzt")
class FuzztExprNamespace:
    """
    Fuzzy string scoring namespace for Polars expressions.

    Access via `.fuzzt` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def similarity(
        self,
        other: Union[str, pl.Expr],
        algorithm: Union[str, Algorithm] = "normalized_levenshtein",
    ) -> pl.Expr:
        """
        Score this column against a string literal or another column.

        Args:
            other: String literal or column expression to compare against
            algorithm: Algorithm name or Algorithm enum (default:
                normalized Levenshtein)

        Returns:
            Float64 expression; null where either side is null

        Example:
            >>> df.with_columns(score=pl.col("name").fuzzt.similarity("John"))
            >>> df.with_columns(
            ...     score=pl.col("a").fuzzt.similarity(pl.col("b"), algorithm="jaro")
            ... )
        """
        scorer = get_scorer(algorithm)

        if isinstance(other, str):
            return self._expr.map_elements(
                lambda s: float(scorer.compute(str(s), other)),
                return_dtype=pl.Float64,
            )

        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            lambda row: (
                None
                if row["_left"] is None or row["_right"] is None
                else float(scorer.compute(str(row["_left"]), str(row["_right"])))
            ),
            return_dtype=pl.Float64,
        )

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        min_similarity: float = 0.7,
        algorithm: Union[str, Algorithm] = "normalized_levenshtein",
    ) -> pl.Expr:
        """
        Check whether the score against ``other`` reaches ``min_similarity``.

        Args:
            other: String literal or column expression to compare against
            min_similarity: Minimum score (default: 0.7)
            algorithm: Algorithm name or Algorithm enum

        Returns:
            Boolean expression
        """
        return self.similarity(other, algorithm=algorithm) >= min_similarity


__all__ = ["FuzztExprNamespace"]
