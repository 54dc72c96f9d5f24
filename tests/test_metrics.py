"""Tests for the uniform scoring interface in fuzzt.metrics."""

import pytest

import fuzzt
from fuzzt import Algorithm, Scorer, Similarity, SimilarityKind, SimilarityMetric, get_scorer
from fuzzt.metrics import (
    DAMERAU_LEVENSHTEIN,
    DEFAULT_SCORER,
    HAMMING,
    JARO_WINKLER,
    LEVENSHTEIN,
    NORMALIZED_LEVENSHTEIN,
    SCORERS,
    resolve_scorer,
)


class TestSimilarity:
    """Tests for the Similarity value type."""

    def test_distance(self):
        sim = Similarity.distance(3)
        assert sim.kind is SimilarityKind.DISTANCE
        assert sim.value == 3
        assert sim.is_distance
        assert not sim.is_ratio

    def test_ratio(self):
        sim = Similarity.ratio(0.5)
        assert sim.kind is SimilarityKind.RATIO
        assert sim.is_ratio
        assert not sim.is_distance

    def test_float_conversion(self):
        assert float(Similarity.distance(3)) == 3.0
        assert float(Similarity.ratio(0.25)) == 0.25

    def test_equality(self):
        assert Similarity.distance(1) == Similarity(SimilarityKind.DISTANCE, 1)
        assert Similarity.distance(1) != Similarity.ratio(1)

    def test_frozen(self):
        sim = Similarity.ratio(0.5)
        with pytest.raises(AttributeError):
            sim.value = 0.6


class TestScorers:
    """Tests for the built-in Scorer objects."""

    def test_every_algorithm_has_a_scorer(self):
        assert set(SCORERS) == {a.value for a in Algorithm}

    @pytest.mark.parametrize(
        "algorithm, kind",
        [
            (Algorithm.HAMMING, SimilarityKind.DISTANCE),
            (Algorithm.LEVENSHTEIN, SimilarityKind.DISTANCE),
            (Algorithm.OSA, SimilarityKind.DISTANCE),
            (Algorithm.DAMERAU_LEVENSHTEIN, SimilarityKind.DISTANCE),
            (Algorithm.NORMALIZED_LEVENSHTEIN, SimilarityKind.RATIO),
            (Algorithm.NORMALIZED_DAMERAU_LEVENSHTEIN, SimilarityKind.RATIO),
            (Algorithm.JARO, SimilarityKind.RATIO),
            (Algorithm.JARO_WINKLER, SimilarityKind.RATIO),
            (Algorithm.SORENSEN_DICE, SimilarityKind.RATIO),
            (Algorithm.SEQUENCE_MATCHER, SimilarityKind.RATIO),
        ],
    )
    def test_kinds(self, algorithm, kind):
        assert get_scorer(algorithm).kind is kind

    def test_compute_wraps_function(self):
        assert LEVENSHTEIN.compute("kitten", "sitting") == Similarity.distance(3)
        assert JARO_WINKLER.compute("hello", "hello") == Similarity.ratio(1.0)

    def test_callable(self):
        assert DAMERAU_LEVENSHTEIN("ca", "abc") == 2

    def test_hamming_scorer_propagates_length_error(self):
        with pytest.raises(fuzzt.LengthMismatchError):
            HAMMING.compute("abc", "ab")

    def test_scorers_satisfy_protocol(self):
        for scorer in SCORERS.values():
            assert isinstance(scorer, SimilarityMetric)

    def test_custom_scorer(self):
        exact = Scorer("exact", lambda a, b: 1.0 if a == b else 0.0, SimilarityKind.RATIO)
        assert exact.compute("a", "a") == Similarity.ratio(1.0)
        assert exact.compute("a", "b") == Similarity.ratio(0.0)


class TestGetScorer:
    """Tests for get_scorer()."""

    def test_by_name(self):
        assert get_scorer("jaro_winkler") is JARO_WINKLER

    def test_by_enum(self):
        assert get_scorer(Algorithm.LEVENSHTEIN) is LEVENSHTEIN

    def test_case_insensitive(self):
        assert get_scorer("Levenshtein") is LEVENSHTEIN

    def test_alias(self):
        assert get_scorer("damerau") is DAMERAU_LEVENSHTEIN

    def test_unknown(self):
        with pytest.raises(fuzzt.AlgorithmError, match="Unknown algorithm"):
            get_scorer("soundex")


class TestResolveScorer:
    """Tests for resolve_scorer()."""

    def test_default(self):
        assert resolve_scorer(None) is DEFAULT_SCORER
        assert DEFAULT_SCORER is NORMALIZED_LEVENSHTEIN

    def test_name(self):
        assert resolve_scorer("jaro_winkler") is JARO_WINKLER

    def test_metric_passthrough(self):
        class Constant:
            def compute(self, a, b):
                return Similarity.ratio(0.5)

        metric = Constant()
        assert resolve_scorer(metric) is metric

    def test_invalid_type(self):
        with pytest.raises(TypeError, match="scorer must be"):
            resolve_scorer(42)
