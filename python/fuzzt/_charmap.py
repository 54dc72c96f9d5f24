"""Code point keyed hashmaps used by the linear-space Damerau-Levenshtein.

``HybridGrowingHashmap`` stores values for code points 0-255 in a flat list
and everything else in ``GrowingHashmap``, an open-addressing table that uses
the code point itself as hash and resolves collisions with the perturbation
probe sequence known from CPython's ``dict``.

Both maps are append-only: entries can be inserted and updated but never
removed. Occupancy is tracked by the key slot, so any value (including the
default) can be stored without being mistaken for an empty slot.

Warning:
    These classes are NOT thread-safe. Each Damerau-Levenshtein call creates
    its own map.
"""

from typing import Generic, List, Optional, TypeVar, Union

V = TypeVar("V")

_INITIAL_SIZE = 8
_EXTENDED_ASCII = 256
_PERTURB_SHIFT = 5


class GrowingHashmap(Generic[V]):
    """Open-addressing hashmap keyed by non-negative ints.

    Memory is only allocated on the first write, so maps that are only ever
    read cost nothing. The table doubles once it is two thirds full.
    """

    __slots__ = ("default", "_used", "_fill", "_mask", "_keys", "_values")

    def __init__(self, default: V):
        self.default = default
        self._used = 0
        self._fill = 0
        self._mask = -1
        self._keys: Optional[List[Optional[int]]] = None
        self._values: List[V] = []

    def get(self, key: int) -> V:
        """Return the value stored for ``key``, or the default if absent."""
        if self._keys is None:
            return self.default
        i = self._lookup(key)
        if self._keys[i] is None:
            return self.default
        return self._values[i]

    def __getitem__(self, key: int) -> V:
        return self.get(key)

    def __setitem__(self, key: int, value: V) -> None:
        if self._keys is None:
            self._allocate()

        i = self._lookup(key)
        if self._keys[i] is None:
            self._fill += 1
            # resize when 2/3 full
            if self._fill * 3 >= (self._mask + 1) * 2:
                self._grow((self._used + 1) * 2)
                i = self._lookup(key)
            self._used += 1
            self._keys[i] = key

        self._values[i] = value

    def __contains__(self, key: object) -> bool:
        if self._keys is None or not isinstance(key, int):
            return False
        return self._keys[self._lookup(key)] is not None

    def __len__(self) -> int:
        return self._used

    @property
    def capacity(self) -> int:
        """Number of slots currently allocated (0 before the first write)."""
        return self._mask + 1

    def _allocate(self) -> None:
        self._mask = _INITIAL_SIZE - 1
        self._keys = [None] * _INITIAL_SIZE
        self._values = [self.default] * _INITIAL_SIZE

    def _lookup(self, key: int) -> int:
        """Return the slot holding ``key`` or the empty slot where it belongs."""
        keys = self._keys
        mask = self._mask
        i = key & mask

        if keys[i] is None or keys[i] == key:
            return i

        perturb = key
        while True:
            i = (i * 5 + perturb + 1) & mask
            if keys[i] is None or keys[i] == key:
                return i
            perturb >>= _PERTURB_SHIFT

    def _grow(self, min_used: int) -> None:
        new_size = self._mask + 1
        while new_size <= min_used:
            new_size <<= 1

        old_keys = self._keys
        old_values = self._values

        self._fill = self._used
        self._mask = new_size - 1
        self._keys = [None] * new_size
        self._values = [self.default] * new_size

        for key, value in zip(old_keys, old_values):
            if key is None:
                continue
            j = self._lookup(key)
            self._keys[j] = key
            self._values[j] = value

    def __repr__(self) -> str:
        return f"GrowingHashmap(size={self._used}, capacity={self.capacity})"


class HybridGrowingHashmap(Generic[V]):
    """Code point keyed map with a flat fast path for extended ASCII.

    Keys may be one-character strings or int code points.

    Example:
        >>> last_row = HybridGrowingHashmap(default=-1)
        >>> last_row["a"] = 3
        >>> last_row["香"] = 7
        >>> last_row.get("a"), last_row.get("香"), last_row.get("z")
        (3, 7, -1)
    """

    __slots__ = ("default", "_map", "_extended_ascii")

    def __init__(self, default: V):
        self.default = default
        self._map: GrowingHashmap[V] = GrowingHashmap(default)
        self._extended_ascii: List[V] = [default] * _EXTENDED_ASCII

    def get(self, key: Union[str, int]) -> V:
        """Return the value stored for ``key``, or the default if absent."""
        code = key if isinstance(key, int) else ord(key)
        if code < _EXTENDED_ASCII:
            return self._extended_ascii[code]
        return self._map.get(code)

    def __getitem__(self, key: Union[str, int]) -> V:
        return self.get(key)

    def __setitem__(self, key: Union[str, int], value: V) -> None:
        code = key if isinstance(key, int) else ord(key)
        if code < _EXTENDED_ASCII:
            self._extended_ascii[code] = value
        else:
            self._map[code] = value

    def __repr__(self) -> str:
        return f"HybridGrowingHashmap(default={self.default!r}, extended={self._map!r})"


__all__ = ["GrowingHashmap", "HybridGrowingHashmap"]
