"""Tests for the code point keyed hashmaps behind Damerau-Levenshtein."""

import pytest

from fuzzt._charmap import GrowingHashmap, HybridGrowingHashmap


class TestGrowingHashmap:
    """Tests for GrowingHashmap."""

    def test_unallocated_until_first_write(self):
        m = GrowingHashmap(default=-1)
        assert m.capacity == 0
        assert len(m) == 0
        assert m.get(1234) == -1
        assert 1234 not in m

    def test_insert_and_get(self):
        m = GrowingHashmap(default=-1)
        m[300] = 5
        m[1000] = 7
        assert m[300] == 5
        assert m.get(1000) == 7
        assert m.get(301) == -1
        assert len(m) == 2

    def test_update_does_not_grow(self):
        m = GrowingHashmap(default=0)
        m[500] = 1
        m[500] = 2
        assert m[500] == 2
        assert len(m) == 1

    def test_stores_default_value(self):
        # Occupancy is tracked by key, not by value
        m = GrowingHashmap(default=-1)
        m[777] = -1
        assert 777 in m
        assert len(m) == 1

    def test_colliding_keys(self):
        m = GrowingHashmap(default=None)
        # All share the low three bits
        keys = [256, 264, 272, 280, 288]
        for n, key in enumerate(keys):
            m[key] = n
        for n, key in enumerate(keys):
            assert m[key] == n

    def test_growth_schedule(self):
        m = GrowingHashmap(default=0)
        for n in range(5):
            m[1000 + n] = n
        assert m.capacity == 8
        m[2000] = 99
        assert m.capacity == 16
        for n in range(6, 11):
            m[3000 + n] = n
        assert len(m) == 11
        assert m.capacity == 16
        m[4000] = 1
        assert m.capacity == 32

    def test_entries_survive_growth(self):
        m = GrowingHashmap(default=-1)
        keys = [0x4E00 + 97 * n for n in range(200)]
        for n, key in enumerate(keys):
            m[key] = n
        assert len(m) == 200
        for n, key in enumerate(keys):
            assert m[key] == n
        assert m.get(0x10FFFF) == -1

    def test_contains_non_int(self):
        m = GrowingHashmap(default=0)
        m[300] = 1
        assert "x" not in m


class TestHybridGrowingHashmap:
    """Tests for HybridGrowingHashmap."""

    def test_default(self):
        m = HybridGrowingHashmap(default=-1)
        assert m.get("a") == -1
        assert m.get("香") == -1

    def test_extended_ascii_and_beyond(self):
        m = HybridGrowingHashmap(default=-1)
        m["a"] = 3
        m["ÿ"] = 4
        m["香"] = 7
        assert m["a"] == 3
        assert m["ÿ"] == 4
        assert m["香"] == 7
        assert m.get("b") == -1

    def test_int_and_str_keys_are_interchangeable(self):
        m = HybridGrowingHashmap(default=0)
        m[ord("x")] = 1
        m["ঙ"] = 2
        assert m["x"] == 1
        assert m[ord("ঙ")] == 2

    def test_boundary(self):
        m = HybridGrowingHashmap(default=0)
        m[255] = 1
        m[256] = 2
        assert m[255] == 1
        assert m[256] == 2

    @pytest.mark.parametrize("char", ["\x00", "é", "ঙ", "香", "\U0001F600"])
    def test_roundtrip_single(self, char):
        m = HybridGrowingHashmap(default=None)
        m[char] = char
        assert m[char] == char
