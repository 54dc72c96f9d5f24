"""Tests for Polars integration."""

import logging

import polars as pl
import pytest

import fuzzt
from fuzzt.polars_ext import MATCH_SCHEMA, batch_similarity, match_series

CHOICES = ["trazil", "BRA ZIL", "brazil", "spain", "braziu"]


class TestBatchSimilarity:
    """Tests for batch_similarity function."""

    def test_basic(self):
        """Row-wise scores with the default scorer."""
        left = pl.Series(["kitten", "hello", "same"])
        right = pl.Series(["sitting", "hallo", "same"])
        result = batch_similarity(left, right)

        assert isinstance(result, pl.Series)
        assert result.name == "similarity"
        assert result.dtype == pl.Float64
        assert result.to_list() == pytest.approx([1 - 3 / 7, 0.8, 1.0])

    def test_algorithm(self):
        left = pl.Series(["kitten", "ab"])
        right = pl.Series(["sitting", "ba"])
        assert batch_similarity(left, right, "levenshtein").to_list() == [3.0, 2.0]
        assert batch_similarity(left, right, fuzzt.Algorithm.DAMERAU_LEVENSHTEIN).to_list() == [3.0, 1.0]

    def test_nulls(self):
        """Null in either input gives null."""
        left = pl.Series(["a", None, "c"])
        right = pl.Series(["a", "b", None])
        result = batch_similarity(left, right)

        assert result.to_list() == [1.0, None, None]

    def test_length_mismatch(self):
        with pytest.raises(fuzzt.ValidationError, match="equal length"):
            batch_similarity(pl.Series(["a", "b"]), pl.Series(["a"]))

    def test_unknown_algorithm(self):
        with pytest.raises(fuzzt.AlgorithmError):
            batch_similarity(pl.Series(["a"]), pl.Series(["a"]), "soundex")

    def test_empty(self):
        result = batch_similarity(pl.Series([], dtype=pl.Utf8), pl.Series([], dtype=pl.Utf8))
        assert len(result) == 0
        assert result.dtype == pl.Float64

    def test_with_columns(self):
        df = pl.DataFrame({"a": ["kitten", "hello"], "b": ["sitting", "hallo"]})
        df = df.with_columns(score=batch_similarity(df["a"], df["b"], "jaro_winkler"))
        assert df.columns == ["a", "b", "score"]


class TestMatchSeries:
    """Tests for match_series function."""

    def test_basic_match(self):
        """Ranks follow get_top_n."""
        result = match_series(pl.Series(["brazil"]), CHOICES)

        assert isinstance(result, pl.DataFrame)
        assert result.columns == list(MATCH_SCHEMA)
        assert result["match"].to_list() == fuzzt.get_top_n("brazil", CHOICES)
        assert result["rank"].to_list() == [1, 2, 3]
        assert result["match_idx"].to_list() == [2, 4, 0]

    def test_multiple_queries(self):
        queries = pl.Series(["brazil", "spian"])
        result = match_series(queries, CHOICES, cutoff=0.5, n=1)

        assert result["query_idx"].to_list() == [0, 1]
        assert result["query"].to_list() == ["brazil", "spian"]
        assert result["match"].to_list() == ["brazil", "spain"]

    def test_choices_as_series(self):
        result = match_series(pl.Series(["brazil"]), pl.Series(CHOICES), n=1)
        assert result["match"].to_list() == ["brazil"]

    def test_null_queries_skipped(self):
        result = match_series(pl.Series(["brazil", None]), CHOICES, n=1)
        assert result["query_idx"].to_list() == [0]

    def test_null_choices_keep_positions(self):
        choices = pl.Series([None, "braziu", None, "brazil"])
        result = match_series(pl.Series(["brazil"]), choices, n=2)

        assert result["match"].to_list() == ["brazil", "braziu"]
        assert result["match_idx"].to_list() == [3, 1]

    def test_empty_series(self):
        """Empty series should return empty DataFrame with the schema."""
        result = match_series(pl.Series([], dtype=pl.Utf8), CHOICES)

        assert len(result) == 0
        assert dict(result.schema) == MATCH_SCHEMA

    def test_no_matches(self):
        """No matches above threshold."""
        result = match_series(pl.Series(["xyz"]), CHOICES, cutoff=0.9)

        assert len(result) == 0
        assert result.columns == list(MATCH_SCHEMA)

    def test_processor_and_scorer(self):
        result = match_series(
            pl.Series(["brazil"]),
            CHOICES,
            n=2,
            processor="lower_alphanum",
            scorer="normalized_levenshtein",
        )
        assert result["match"].to_list() == ["brazil", "BRA ZIL"]

    def test_logs_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="fuzzt.polars_ext"):
            match_series(pl.Series(["brazil"]), CHOICES)
        assert any("Matched 1 queries" in rec.getMessage() for rec in caplog.records)


class TestExprNamespace:
    """Tests for the .fuzzt expression namespace."""

    def test_similarity_literal(self):
        df = pl.DataFrame({"name": ["John", "Jon", "Jane"]})
        result = df.select(score=pl.col("name").fuzzt.similarity("John"))

        assert result["score"].to_list() == pytest.approx([1.0, 0.75, 0.25])

    def test_similarity_column(self):
        df = pl.DataFrame({"a": ["kitten", "ab"], "b": ["sitting", "ba"]})
        result = df.select(d=pl.col("a").fuzzt.similarity(pl.col("b"), algorithm="damerau_levenshtein"))

        assert result["d"].to_list() == [3.0, 1.0]

    def test_similarity_column_nulls(self):
        df = pl.DataFrame({"a": ["x", None], "b": [None, "y"]})
        result = df.select(s=pl.col("a").fuzzt.similarity(pl.col("b")))

        assert result["s"].to_list() == [None, None]

    def test_is_similar(self):
        df = pl.DataFrame({"name": ["John", "Jon", "Jane"]})
        result = df.filter(pl.col("name").fuzzt.is_similar("John", min_similarity=0.7))

        assert result["name"].to_list() == ["John", "Jon"]

    def test_is_similar_jaro_winkler(self):
        df = pl.DataFrame({"name": ["martha", "marhta", "xyz"]})
        result = df.filter(
            pl.col("name").fuzzt.is_similar("martha", min_similarity=0.9, algorithm=fuzzt.Algorithm.JARO_WINKLER)
        )

        assert result["name"].to_list() == ["martha", "marhta"]
