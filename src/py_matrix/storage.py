"""
Storage backend for dense Vector data.

Pure Python implementation storing one fallback value (the most frequent
element) plus a dict of index -> value for every position that differs.
"""

from __future__ import annotations
import math
from collections import Counter
from typing import Any, Dict, Iterable, Iterator


def _tally_key(value: Any) -> tuple:
    # 1 and 1.0 hash alike, as do 0.0 and -0.0; keep them apart so values
    # round-trip exactly
    if isinstance(value, float):
        return (float, math.copysign(1.0, value), value)
    return (type(value), 1.0, value)


def _same(a: Any, b: Any) -> bool:
    return a is b or _tally_key(a) == _tally_key(b)


class FallbackStorage:
    """
    Single-most-frequent-value compression.

    Every position resolves to ``overrides.get(i, fallback)``. Only the
    minority values are stored explicitly, so skewed samples (many repeats of
    one value) take little room.

    Ties for the most frequent value go to the one encountered first.
    """

    __slots__ = ('_length', '_fallback', '_overrides')

    def __init__(self, length: int, fallback: Any, overrides: Dict[int, Any]):
        """
        Parameters
        ----------
        length : int
            Logical number of elements
        fallback : Any
            Value returned for every index missing from overrides
        overrides : dict
            index -> value for positions that differ from fallback
        """
        self._length = length
        self._fallback = fallback
        self._overrides = overrides

    @classmethod
    def from_iterable(cls, values: Iterable[Any]) -> FallbackStorage:
        """Create from a non-empty Python iterable."""
        data = tuple(values)
        if not data:
            raise ValueError("FallbackStorage needs at least one value")

        # Counter keeps first-seen order; most_common() is stable on ties
        tally = Counter(_tally_key(v) for v in data)
        (*_, fallback), _ = tally.most_common(1)[0]

        overrides = {i: v for i, v in enumerate(data) if not _same(v, fallback)}
        return cls(len(data), fallback, overrides)

    @property
    def fallback(self) -> Any:
        return self._fallback

    @property
    def override_count(self) -> int:
        """Number of explicitly stored positions."""
        return len(self._overrides)

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, i: int) -> Any:
        return self._overrides.get(i, self._fallback)

    def __iter__(self) -> Iterator[Any]:
        overrides = self._overrides
        fallback = self._fallback
        for i in range(self._length):
            yield overrides.get(i, fallback)

    def to_tuple(self) -> tuple:
        return tuple(self)
